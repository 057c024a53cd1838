from flask import Blueprint, current_app, jsonify, render_template

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return render_template('main/index.html', api_url=current_app.config['API_URL'])


@main.route('/health')
def health():
    return jsonify({'status': 'OK', 'message': 'Server is running'})
