from flask import Blueprint, render_template, request

from tasklist.repository import get_repository, parse_done

tasks = Blueprint('tasks', __name__)


def render_task_list():
    # Every response to a mutation is the whole list, ready to swap in place.
    return render_template('partials/todo_list.html', tasks=get_repository().list_tasks())


@tasks.route('/tasks', methods=['GET'])
def list_tasks():
    return render_task_list()


@tasks.route('/tasks', methods=['POST'])
def add_task():
    get_repository().insert_task(request.form.get('task', ''))
    return render_task_list()


@tasks.route('/tasks/<int:task_id>', methods=['PUT', 'POST'])
def update_task(task_id):
    get_repository().update_task(
        task_id,
        request.form.get('task', ''),
        parse_done(request.form.get('done')),
    )
    return render_task_list()


@tasks.route('/tasks/<int:task_id>', methods=['DELETE'])
def delete_task(task_id):
    get_repository().delete_task(task_id)
    return render_task_list()
