import json
import os
import tempfile
import uuid
from datetime import datetime, timezone

from loguru import logger
from werkzeug.security import generate_password_hash, check_password_hash


WISHLIST_POINTS = 10
VISIT_POINTS = 50
REVIEW_POINTS = 25


class StorageUnavailable(Exception):
    """Raised when the user file exists but cannot be read or written."""


# --- RECORD STORE ---
class UserStore:
    """
    Flat JSON file holding every user record as one array.
    The whole collection is read on load() and rewritten on save().
    """

    def __init__(self, path):
        self.path = path

    def load(self):
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                records = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error reading users file {self.path}: {e}")
            raise StorageUnavailable(f"Could not read {self.path}") from e
        if not isinstance(records, list):
            logger.error(f"Users file {self.path} does not hold a list of records")
            raise StorageUnavailable(f"Malformed users file {self.path}")
        return records

    def save(self, records):
        directory = os.path.dirname(self.path) or '.'
        try:
            os.makedirs(directory, exist_ok=True)
            # Write next to the target and rename so readers never see a partial file
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix='.users-', suffix='.json')
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    json.dump(records, f, ensure_ascii=False, indent=2)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
        except OSError as e:
            logger.error(f"Error saving users file {self.path}: {e}")
            raise StorageUnavailable(f"Could not write {self.path}") from e


# --- CREDENTIALS ---
def hash_password(password):
    return generate_password_hash(password)


def verify_password(password, password_hash):
    return check_password_hash(password_hash, password)


# --- Utility Functions ---
def _now_iso():
    return datetime.now(timezone.utc).isoformat()


def _public(user):
    """Copy of a record without the password hash."""
    view = {k: v for k, v in user.items() if k != 'password'}
    view['wishlist'] = list(user.get('wishlist', []))
    view['visited'] = [dict(v) for v in user.get('visited', [])]
    view['reviews'] = [dict(r) for r in user.get('reviews', [])]
    return view


def _find(users, user_id):
    for user in users:
        if user['id'] == user_id:
            return user
    return None


# --- USER DATA SERVICE ---
def create_user(store, name, email, password):
    users = store.load()
    if any(u['email'] == email for u in users):
        logger.info("Signup rejected, email already registered")
        return None

    user = {
        'id': uuid.uuid4().hex,
        'name': name,
        'email': email,
        'password': hash_password(password),
        'points': 0,
        'wishlist': [],
        'visited': [],
        'reviews': [],
    }
    users.append(user)
    store.save(users)
    logger.info(f"Created user {user['id']}")
    return _public(user)


def authenticate_user(store, email, password):
    """
    Returns the public record for valid credentials, otherwise None.
    Unknown email and wrong password both give None.
    """
    users = store.load()
    user = next((u for u in users if u['email'] == email), None)
    if user is None or not verify_password(password, user['password']):
        logger.info("Login failed")
        return None
    return _public(user)


def get_user_by_id(store, user_id):
    user = _find(store.load(), user_id)
    return _public(user) if user else None


def update_wishlist(store, user_id, museum_id, action):
    users = store.load()
    user = _find(users, user_id)
    if user is None:
        return False

    if action == 'add':
        if museum_id not in user['wishlist']:
            user['wishlist'].append(museum_id)
            user['points'] += WISHLIST_POINTS
    else:
        user['wishlist'] = [m for m in user['wishlist'] if m != museum_id]

    store.save(users)
    return True


def add_visited(store, user_id, museum_id, date):
    users = store.load()
    user = _find(users, user_id)
    if user is None:
        return False

    # First visit wins; later dates for the same museum are ignored
    if not any(v['museumId'] == museum_id for v in user['visited']):
        user['visited'].append({'museumId': museum_id, 'date': date})
        user['points'] += VISIT_POINTS

    store.save(users)
    return True


def add_review(store, user_id, museum_id, rating, notes):
    """Rating must already be validated (1-5) by the caller."""
    users = store.load()
    user = _find(users, user_id)
    if user is None:
        return False

    review = {'museumId': museum_id, 'date': _now_iso(), 'rating': rating, 'notes': notes}
    for i, existing in enumerate(user['reviews']):
        if existing['museumId'] == museum_id:
            user['reviews'][i] = review
            break
    else:
        user['reviews'].append(review)
        user['points'] += REVIEW_POINTS

    store.save(users)
    return True


def get_wishlist(store, user_id):
    user = get_user_by_id(store, user_id)
    return user['wishlist'] if user else []


def get_visited(store, user_id):
    user = get_user_by_id(store, user_id)
    return user['visited'] if user else []


def get_reviews(store, user_id):
    user = get_user_by_id(store, user_id)
    return user['reviews'] if user else []


def get_museum_status(store, user_id, museum_id):
    user = get_user_by_id(store, user_id)
    if not user:
        return {'inWishlist': False, 'isVisited': False}
    return {
        'inWishlist': museum_id in user['wishlist'],
        'isVisited': any(v['museumId'] == museum_id for v in user['visited']),
    }
