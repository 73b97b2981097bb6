from flask import Flask, request, session, jsonify
from functools import wraps
from datetime import datetime, timezone
import os

from dotenv import load_dotenv
from loguru import logger
from werkzeug.exceptions import HTTPException

import museums
import scanner
import users
from logging_setup import configure_logging

# Load environment variables from .env file before reading any configuration
load_dotenv()
configure_logging(os.environ.get('LOG_LEVEL', 'INFO'))


app = Flask(__name__)
app.config.update(
    # IMPORTANT: Set SECRET_KEY in production
    SECRET_KEY=os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production'),
    USERS_FILE=os.environ.get('USERS_FILE') or os.path.join(app.instance_path, 'users.json'),
    GEMINI_API_KEY=os.environ.get('GEMINI_API_KEY'),
    GEMINI_MODEL=os.environ.get('GEMINI_MODEL') or scanner.DEFAULT_MODEL,
)


def get_store():
    return users.UserStore(app.config['USERS_FILE'])


def error(message, status):
    return jsonify({'error': message}), status


# --- Request Helpers ---
def request_data():
    if request.method == 'GET':
        return request.args
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def text_field(data, key, strip=True):
    """String value of a request field; '' when absent or not a string."""
    value = data.get(key)
    if not isinstance(value, str):
        return ''
    return value.strip() if strip else value


def parse_visit_date(value):
    """ISO-8601 date or timestamp string, or None."""
    if not isinstance(value, str) or not value.strip():
        return None
    value = value.strip()
    try:
        # fromisoformat only accepts a trailing 'Z' from Python 3.11
        datetime.fromisoformat(value[:-1] + '+00:00' if value.endswith('Z') else value)
    except ValueError:
        return None
    return value


def parse_museum_id(value):
    """Positive integer museum id, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value.isdecimal():
            return None
        value = int(value)
    if not isinstance(value, int) or value <= 0:
        return None
    return value


def parse_rating(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value if isinstance(value, int) else None


def user_id_required(missing_status=401):
    """
    Resolves the caller's user id from the request (userId) or the session
    and passes it as the first argument of the view.
    """
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            user_id = request_data().get('userId') or session.get('user_id')
            if not user_id:
                return error('User ID required', missing_status)
            return f(str(user_id), *args, **kwargs)
        return wrapper
    return decorator


# --- Error Handlers ---
@app.errorhandler(users.StorageUnavailable)
def storage_unavailable(e):
    return error('User storage unavailable', 503)


@app.errorhandler(Exception)
def internal_error(e):
    if isinstance(e, HTTPException):
        return error(e.description, e.code)
    logger.exception(f"Unhandled error on {request.method} {request.path}")
    return error('Internal server error', 500)


# --- Routes (Authentication) ---
@app.route('/api/auth/signup', methods=['POST'])
def signup():
    data = request_data()
    name = text_field(data, 'name')
    email = text_field(data, 'email')
    password = text_field(data, 'password', strip=False)

    if not name or not email or not password:
        return error('Missing required fields', 400)

    user = users.create_user(get_store(), name, email, password)
    if not user:
        return error('Email already exists', 409)

    session['user_id'] = user['id']
    return jsonify(user)


@app.route('/api/auth/login', methods=['POST'])
def login():
    data = request_data()
    email = text_field(data, 'email')
    password = text_field(data, 'password', strip=False)

    if not email or not password:
        return error('Please provide email and password', 400)

    user = users.authenticate_user(get_store(), email, password)
    if not user:
        return error('Invalid email or password', 401)

    session['user_id'] = user['id']
    return jsonify(user)


@app.route('/api/auth/logout', methods=['POST'])
def logout():
    session.pop('user_id', None)
    return jsonify({'success': True})


# --- Routes (User Data) ---
@app.route('/api/user/profile', methods=['GET'])
@user_id_required(missing_status=400)
def profile(user_id):
    user = users.get_user_by_id(get_store(), user_id)
    if not user:
        return error('User not found', 404)
    return jsonify(user)


@app.route('/api/user/wishlist', methods=['GET', 'POST'])
@user_id_required()
def wishlist(user_id):
    store = get_store()
    if request.method == 'GET':
        return jsonify(users.get_wishlist(store, user_id))

    data = request_data()
    museum_id = parse_museum_id(data.get('museumId'))
    action = data.get('action')
    if not museum_id or not action:
        return error('Missing museumId or action', 400)
    if action not in ('add', 'remove'):
        return error("Action must be 'add' or 'remove'", 400)

    if not users.update_wishlist(store, user_id, museum_id, action):
        return error('User not found', 404)
    return jsonify({'success': True})


@app.route('/api/user/visited', methods=['GET', 'POST'])
@user_id_required()
def visited(user_id):
    store = get_store()
    if request.method == 'GET':
        return jsonify(users.get_visited(store, user_id))

    data = request_data()
    museum_id = parse_museum_id(data.get('museumId'))
    if not museum_id:
        return error('Missing museumId', 400)

    visit_date = datetime.now(timezone.utc).isoformat()
    if data.get('date') is not None:
        visit_date = parse_visit_date(data.get('date'))
        if not visit_date:
            return error('Date must be an ISO-8601 date or timestamp', 400)

    if not users.add_visited(store, user_id, museum_id, visit_date):
        return error('User not found', 404)
    return jsonify({'success': True})


@app.route('/api/user/reviews', methods=['GET', 'POST'])
@user_id_required()
def reviews(user_id):
    store = get_store()
    if request.method == 'GET':
        return jsonify(users.get_reviews(store, user_id))

    data = request_data()
    museum_id = parse_museum_id(data.get('museumId'))
    rating = parse_rating(data.get('rating'))
    if not museum_id or rating is None:
        return error('Missing museumId or rating', 400)
    if not 1 <= rating <= 5:
        return error('Rating must be between 1 and 5', 400)

    notes = text_field(data, 'notes', strip=False)
    if not users.add_review(store, user_id, museum_id, rating, notes):
        return error('User not found', 404)
    return jsonify({'success': True})


@app.route('/api/user/museum-status', methods=['GET'])
@user_id_required()
def museum_status(user_id):
    museum_id = parse_museum_id(request.args.get('museumId'))
    if not museum_id:
        return error('Museum ID required', 400)
    return jsonify(users.get_museum_status(get_store(), user_id, museum_id))


# --- Routes (Museum Directory) ---
@app.route('/api/museums', methods=['GET'])
def museum_list():
    return jsonify(museums.list_museums(
        search=request.args.get('search', ''),
        state=request.args.get('state', ''),
    ))


@app.route('/api/museums/states', methods=['GET'])
def museum_states():
    return jsonify(museums.list_states())


@app.route('/api/museums/<int:museum_id>', methods=['GET'])
def museum_detail(museum_id):
    museum = museums.get_museum(museum_id)
    if not museum:
        return error('Museum not found', 404)
    return jsonify(museum)


# --- Routes (Artifact Scanner) ---
@app.route('/api/scanner/identify', methods=['POST'])
def identify():
    image_data = request_data().get('imageData')
    if not image_data:
        return error('Image data is required', 400)

    api_key = app.config.get('GEMINI_API_KEY')
    if not api_key:
        return error('Gemini API key not configured', 500)

    try:
        info = scanner.identify_artifact(image_data, api_key=api_key, model=app.config['GEMINI_MODEL'])
    except scanner.InvalidImage as e:
        return error(str(e), 400)
    except scanner.ScannerUnavailable as e:
        return error(str(e), 502)
    except scanner.ScannerError as e:
        return error(str(e), 500)
    return jsonify(info)


if __name__ == '__main__':
    app.run(debug=True, port=5000)
