import logging
import sys

import click
from flask import Flask
from sqlalchemy.exc import SQLAlchemyError

from todoapp.api.routes import api
from todoapp.config import Settings
from todoapp.errors import StartupError
from todoapp.logging_setup import setup_logging
from todoapp.main.routes import main as main_bp
from todoapp.models import db
from todoapp.store import TaskStore

logger = logging.getLogger(__name__)

SAMPLE_TASK = {
    'title': 'Sample task',
    'description': 'Created by seed-db to check that everything works',
}


def create_app(settings=None, store=None):
    settings = settings or Settings.from_env()
    app = Flask(__name__, template_folder='todoapp/templates', static_folder='todoapp/static')

    app.config['SQLALCHEMY_DATABASE_URI'] = settings.database_url
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['API_URL'] = settings.api_url
    app.config['CORS_ORIGINS'] = settings.cors_origins

    app.register_blueprint(api)
    app.register_blueprint(main_bp)

    db.init_app(app)

    with app.app_context():
        try:
            db.create_all()
            db.session.execute(db.text('SELECT 1'))
        except SQLAlchemyError as exc:
            raise StartupError(f'Could not connect to the task store: {exc}') from exc
        finally:
            db.session.remove()
        logger.info('Task store ready at %s', db.engine.url.render_as_string(hide_password=True))

    app.extensions['task_store'] = store or TaskStore(db)

    @app.cli.command('seed-db')
    def seed_db():
        """Add a sample task when the store is empty."""
        task_store = app.extensions['task_store']
        total = task_store.count()
        if total:
            click.echo(f'Store already has {total} task(s), nothing to do.')
            return
        task = task_store.create(**SAMPLE_TASK)
        click.echo(f'Created sample task {task.id}.')

    return app


def main():
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    try:
        app = create_app(settings)
    except StartupError:
        logger.critical('Task store unreachable, shutting down.', exc_info=True)
        sys.exit(1)
    logger.info('Serving on %s:%s', settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == '__main__':
    main()
