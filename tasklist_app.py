import logging
from pathlib import Path

from flask import Flask
from jinja2 import TemplateNotFound

from tasklist.api.routes import tasks
from tasklist.config import Config
from tasklist.errors import register_error_handlers
from tasklist.logging_setup import setup_logging
from tasklist.main.routes import main as main_blueprint
from tasklist.models import db
from tasklist.repository import RepositoryError, TaskRepository

logger = logging.getLogger(__name__)

REQUIRED_TEMPLATES = (
    'home.html',
    'partials/todo_list.html',
    'partials/add_task_form.html',
    'partials/update_task_form.html',
)


def load_templates(app):
    """Compile every *.html template up front so a bad one stops startup."""
    names = app.jinja_env.list_templates(extensions=['html'])
    for required in REQUIRED_TEMPLATES:
        if required not in names:
            raise TemplateNotFound(required)
    for name in names:
        app.jinja_env.get_template(name)
    logger.debug('loaded %d templates', len(names))


def create_app(test_config=None, repository=None):
    app = Flask(__name__, template_folder='tasklist/templates')

    app.config.from_object(Config)
    if test_config is not None:
        app.config.from_mapping(test_config)
    if not app.config.get('SQLALCHEMY_DATABASE_URI'):
        db_path = Path(app.root_path) / 'tasks.db'
        app.config['SQLALCHEMY_DATABASE_URI'] = f'sqlite:///{db_path}'

    app.register_blueprint(main_blueprint)
    app.register_blueprint(tasks)
    register_error_handlers(app)

    db.init_app(app)

    with app.app_context():
        try:
            TaskRepository(db.session).ping()
        except RepositoryError:
            logger.critical('database is unreachable, refusing to start')
            raise
        logger.info('Database connection established')
        db.create_all()

    load_templates(app)

    if repository is None:
        repository = TaskRepository(db.session)
    app.extensions['task_repository'] = repository
    return app


def main():
    setup_logging(Config.LOG_LEVEL)
    app = create_app()
    logger.info('Server is running on %s:%s', app.config['HOST'], app.config['PORT'])
    app.run(host=app.config['HOST'], port=app.config['PORT'])


if __name__ == '__main__':
    main()
