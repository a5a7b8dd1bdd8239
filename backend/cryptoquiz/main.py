import os

from flask import Blueprint, current_app, jsonify, send_from_directory

main = Blueprint('main', __name__)


@main.route('/')
def index():
    public_dir = current_app.config['PUBLIC_DIR']
    if os.path.isfile(os.path.join(public_dir, 'index.html')):
        return send_from_directory(public_dir, 'index.html')
    return jsonify({'message': 'Welcome to the crypto quiz server!'})


@main.route('/test')
def health():
    return current_app.config['HEALTH_TEXT'], 200, {'Content-Type': 'text/plain; charset=utf-8'}


@main.route('/<path:filename>')
def public_file(filename):
    """Serves frontend assets from the public directory."""
    return send_from_directory(current_app.config['PUBLIC_DIR'], filename)
