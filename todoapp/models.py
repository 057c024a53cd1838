import uuid
from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def _new_id():
    return uuid.uuid4().hex


def _utcnow():
    return datetime.now(timezone.utc)


class Task(db.Model):
    __tablename__ = 'tasks'
    id = db.Column(db.String(32), primary_key=True, default=_new_id)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow)
    title = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=False, default='')
    completed = db.Column(db.Boolean, nullable=False, default=False)

    def to_dict(self):
        created_at = self.created_at
        # SQLite hands back naive datetimes; everything is stored as UTC.
        if created_at is not None and created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description or '',
            'completed': bool(self.completed),
            'createdAt': created_at.isoformat() if created_at else None,
        }

    def __repr__(self):
        return f'<Task {self.id} {self.title!r}>'


db.Index('ix_tasks_created_at_desc', Task.created_at.desc())
db.Index('ix_tasks_completed', Task.completed)
