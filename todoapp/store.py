import logging

from sqlalchemy.exc import SQLAlchemyError

from todoapp.errors import NotFound, StoreError, ValidationError
from todoapp.models import Task

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('title', 'description', 'completed')


def _clean_title(title):
    if not isinstance(title, str):
        raise ValidationError('Title is required')
    title = title.strip()
    if not title:
        raise ValidationError('Title is required')
    return title


def _clean_description(description):
    if description is None:
        return ''
    if not isinstance(description, str):
        raise ValidationError('Description must be a string')
    return description.strip()


class TaskStore:
    """
    Task persistence on top of a Flask-SQLAlchemy handle.

    Every call goes to the database; nothing is cached between calls.
    SQLAlchemy failures are rolled back and surface as StoreError.
    Must be used inside an application context.
    """

    def __init__(self, db):
        self._db = db

    @property
    def session(self):
        return self._db.session

    def _fail(self, action, exc):
        self.session.rollback()
        logger.error('Task store failed to %s', action, exc_info=exc)
        return StoreError(f'Could not {action}')

    def count(self):
        try:
            return self.session.scalar(self._db.select(self._db.func.count()).select_from(Task))
        except SQLAlchemyError as exc:
            raise self._fail('count tasks', exc) from exc

    def list(self):
        query = self._db.select(Task).order_by(Task.created_at.desc())
        try:
            return list(self.session.scalars(query))
        except SQLAlchemyError as exc:
            raise self._fail('list tasks', exc) from exc

    def get(self, task_id):
        try:
            task = self.session.get(Task, task_id)
        except SQLAlchemyError as exc:
            raise self._fail('load task', exc) from exc
        if task is None:
            raise NotFound()
        return task

    def create(self, title, description=None):
        task = Task(title=_clean_title(title), description=_clean_description(description))
        try:
            self.session.add(task)
            self.session.commit()
        except SQLAlchemyError as exc:
            raise self._fail('create task', exc) from exc
        logger.info('Created task %s', task.id)
        return task

    def update(self, task_id, fields):
        task = self.get(task_id)
        changes = {}
        if 'title' in fields:
            changes['title'] = _clean_title(fields['title'])
        if 'description' in fields:
            changes['description'] = _clean_description(fields['description'])
        if 'completed' in fields:
            if not isinstance(fields['completed'], bool):
                raise ValidationError('Completed must be true or false')
            changes['completed'] = fields['completed']

        for name, value in changes.items():
            setattr(task, name, value)
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            raise self._fail('update task', exc) from exc
        logger.info('Updated task %s (%s)', task_id, ', '.join(sorted(changes)) or 'no changes')
        return task

    def delete(self, task_id):
        task = self.get(task_id)
        try:
            self.session.delete(task)
            self.session.commit()
        except SQLAlchemyError as exc:
            raise self._fail('delete task', exc) from exc
        logger.info('Deleted task %s', task_id)
