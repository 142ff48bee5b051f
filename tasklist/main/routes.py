from flask import Blueprint, render_template

from tasklist.repository import get_repository

main = Blueprint('main', __name__)

@main.route('/', methods=['GET'])
def index():
    return render_template('home.html')


@main.route('/getnewtaskform', methods=['GET'])
def new_task_form():
    return render_template('partials/add_task_form.html')


@main.route('/gettaskupdateform/<int:task_id>', methods=['GET'])
def update_task_form(task_id):
    task = get_repository().get_task(task_id)
    return render_template('partials/update_task_form.html', task=task)
