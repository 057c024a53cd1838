from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from todoapp.errors import TaskError, ValidationError
from todoapp.store import UPDATABLE_FIELDS

api = Blueprint('api', __name__, url_prefix='/api')


def get_store():
    return current_app.extensions['task_store']


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


@api.errorhandler(TaskError)
def handle_task_error(error):
    return jsonify({'message': error.message}), error.status_code


@api.app_errorhandler(HTTPException)
def handle_http_error(error):
    # Routing errors under /api (unknown path, wrong method) stay JSON.
    if not request.path.startswith(api.url_prefix):
        return error
    return jsonify({'message': error.description}), error.code


@api.after_request
def add_cors_headers(response):
    response.headers['Access-Control-Allow-Origin'] = current_app.config['CORS_ORIGINS']
    response.headers['Access-Control-Allow-Methods'] = 'GET, POST, PUT, DELETE, OPTIONS'
    response.headers['Access-Control-Allow-Headers'] = 'Content-Type'
    return response


@api.route('/tasks', methods=['GET'])
def list_tasks():
    return jsonify([task.to_dict() for task in get_store().list()])


@api.route('/tasks/<task_id>', methods=['GET'])
def get_task(task_id):
    return jsonify(get_store().get(task_id).to_dict())


@api.route('/tasks', methods=['POST'])
def add_task():
    data = _json_body()
    task = get_store().create(data.get('title'), data.get('description'))
    return jsonify(task.to_dict()), 201


@api.route('/tasks/<task_id>', methods=['PUT'])
def update_task(task_id):
    data = _json_body()
    # only the fields the client actually sent are touched
    fields = {name: data[name] for name in UPDATABLE_FIELDS if name in data}
    task = get_store().update(task_id, fields)
    return jsonify(task.to_dict())


@api.route('/tasks/<task_id>', methods=['DELETE'])
def delete_task(task_id):
    get_store().delete(task_id)
    return jsonify({'message': 'Task deleted successfully'})
