import logging

from jinja2 import TemplateError
from werkzeug.exceptions import InternalServerError

from tasklist.repository import RepositoryError, TaskNotFoundError

logger = logging.getLogger(__name__)

PLAIN_TEXT = {'Content-Type': 'text/plain; charset=utf-8'}


def handle_not_found(error):
    return f'{error}\n', 404, PLAIN_TEXT


def handle_repository_error(error):
    return f'{error}\n', 500, PLAIN_TEXT


def handle_template_error(error):
    logger.error('template rendering failed', exc_info=error)
    return f'Error executing template: {error}\n', 500, PLAIN_TEXT


def handle_internal_error(error):
    # Flask has already logged the unhandled exception behind this one
    cause = error.original_exception or error.description
    return f'Internal Server Error: {cause}\n', 500, PLAIN_TEXT


def register_error_handlers(app):
    # Flask picks the most specific class, so not-found wins over the base error.
    app.register_error_handler(TaskNotFoundError, handle_not_found)
    app.register_error_handler(RepositoryError, handle_repository_error)
    app.register_error_handler(TemplateError, handle_template_error)
    app.register_error_handler(InternalServerError, handle_internal_error)
