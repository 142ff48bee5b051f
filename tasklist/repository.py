import logging

import sqlalchemy as sa
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from tasklist.models import Task

logger = logging.getLogger(__name__)

TRUTHY_DONE_VALUES = frozenset({'on', 'yes'})

# ids live in a signed 64-bit column
MIN_TASK_ID = -2**63
MAX_TASK_ID = 2**63 - 1


class RepositoryError(Exception):
    """A statement failed in the store. ``context`` says what was being done."""

    def __init__(self, context, cause=None):
        self.context = context
        self.cause = cause
        message = context if cause is None else f'{context}: {cause}'
        super().__init__(message)


class TaskNotFoundError(RepositoryError):
    def __init__(self, task_id, action='fetch'):
        self.task_id = task_id
        self.action = action
        super().__init__(f'No task found to {action} with id: {task_id}')


def parse_done(value) -> bool:
    """Checkbox-style coercion of the ``done`` form field.

    Only "on" and "yes" (any case) count as true. Everything else, missing
    values included, is false; nothing here ever fails.
    """
    return (value or '').lower() in TRUTHY_DONE_VALUES


def _require_storable_id(task_id, action):
    # larger ids overflow the driver; no such row can exist
    if not MIN_TASK_ID <= task_id <= MAX_TASK_ID:
        logger.info('task id %s is out of range', task_id)
        raise TaskNotFoundError(task_id, action)


class TaskRepository:
    """All task reads and writes. Every mutation is committed on its own."""

    def __init__(self, session):
        self._session = session

    def ping(self) -> None:
        try:
            self._session.execute(sa.text('SELECT 1'))
        except SQLAlchemyError as exc:
            raise self._failed('Error connecting to database', exc) from exc
        finally:
            self._session.rollback()

    def list_tasks(self) -> list[Task]:
        try:
            return list(self._session.execute(sa.select(Task)).scalars())
        except SQLAlchemyError as exc:
            raise self._failed('Error fetching tasks', exc) from exc

    def get_task(self, task_id: int) -> Task:
        _require_storable_id(task_id, 'fetch')
        try:
            task = self._session.execute(
                sa.select(Task).where(Task.id == task_id)
            ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise self._failed('Error fetching task', exc) from exc
        if task is None:
            logger.info('task %s not found', task_id)
            raise TaskNotFoundError(task_id, 'fetch')
        return task

    def insert_task(self, description: str) -> None:
        try:
            self._session.execute(sa.insert(Task).values(description=description))
            self._session.commit()
        except SQLAlchemyError as exc:
            raise self._failed('Error inserting task into database', exc) from exc

    def update_task(self, task_id: int, description: str, done: bool) -> int:
        stmt = (
            sa.update(Task)
            .where(Task.id == task_id)
            .values(description=description, done=done)
            .execution_options(synchronize_session=False)
        )
        return self._execute_keyed(stmt, task_id, 'update', 'Error updating task')

    def delete_task(self, task_id: int) -> int:
        stmt = (
            sa.delete(Task)
            .where(Task.id == task_id)
            .execution_options(synchronize_session=False)
        )
        return self._execute_keyed(stmt, task_id, 'delete', 'Error deleting task')

    def _execute_keyed(self, stmt, task_id, action, context):
        _require_storable_id(task_id, action)
        try:
            result = self._session.execute(stmt)
            self._session.commit()
        except SQLAlchemyError as exc:
            raise self._failed(context, exc) from exc
        if result.rowcount == 0:
            logger.info('no task to %s with id %s', action, task_id)
            raise TaskNotFoundError(task_id, action)
        return result.rowcount

    def _failed(self, context, exc):
        self._session.rollback()
        logger.error('%s', context, exc_info=exc)
        return RepositoryError(context, exc)


def get_repository() -> TaskRepository:
    return current_app.extensions['task_repository']
