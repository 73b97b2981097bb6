"""
Tests for the user record store and the user data service.
"""

import json
import os

import pytest

import users
from users import StorageUnavailable, UserStore


@pytest.fixture
def asha(store):
    return users.create_user(store, "Asha", "asha@example.com", "secret1")


def points(store, user_id):
    return users.get_user_by_id(store, user_id)["points"]


# --- Record store ---

def test_load_missing_file_is_empty(store):
    assert store.load() == []


def test_save_creates_directory_and_round_trips(store, users_file):
    store.save([{"id": "1", "email": "a@b.c"}])

    assert os.path.exists(users_file)
    assert store.load() == [{"id": "1", "email": "a@b.c"}]
    # no temporary files are left behind
    assert os.listdir(os.path.dirname(users_file)) == ["users.json"]


def test_load_corrupt_file_raises(tmp_path):
    path = tmp_path / "users.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(StorageUnavailable):
        UserStore(str(path)).load()


def test_load_non_list_document_raises(tmp_path):
    path = tmp_path / "users.json"
    path.write_text('{"id": "1"}', encoding="utf-8")

    with pytest.raises(StorageUnavailable):
        UserStore(str(path)).load()


def test_save_into_unwritable_location_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(StorageUnavailable):
        UserStore(str(blocker / "users.json")).save([])


# --- Credentials ---

def test_password_hash_is_salted_and_verifies():
    first = users.hash_password("secret1")
    second = users.hash_password("secret1")

    assert first != "secret1"
    assert first != second
    assert users.verify_password("secret1", first)
    assert not users.verify_password("secret2", first)


# --- Signup and login ---

def test_create_user_starts_empty(asha):
    assert asha["name"] == "Asha"
    assert asha["email"] == "asha@example.com"
    assert asha["points"] == 0
    assert asha["wishlist"] == []
    assert asha["visited"] == []
    assert asha["reviews"] == []
    assert "password" not in asha


def test_create_user_stores_hash_not_plaintext(store, asha):
    with open(store.path, encoding="utf-8") as f:
        stored = json.load(f)[0]
    assert stored["password"] != "secret1"
    assert users.verify_password("secret1", stored["password"])


def test_create_user_duplicate_email(store, asha):
    assert users.create_user(store, "Other", "asha@example.com", "pw") is None
    assert len(store.load()) == 1


def test_email_match_is_case_sensitive(store, asha):
    assert users.create_user(store, "Other", "Asha@example.com", "pw") is not None


def test_user_ids_are_unique(store):
    ids = {users.create_user(store, "U", f"u{i}@example.com", "pw")["id"] for i in range(5)}
    assert len(ids) == 5


def test_authenticate_user(store, asha):
    user = users.authenticate_user(store, "asha@example.com", "secret1")
    assert user["id"] == asha["id"]
    assert "password" not in user


def test_authenticate_failures_are_indistinguishable(store, asha):
    wrong_password = users.authenticate_user(store, "asha@example.com", "nope")
    unknown_email = users.authenticate_user(store, "who@example.com", "secret1")
    assert wrong_password is None
    assert unknown_email is None


def test_get_user_by_id(store, asha):
    assert users.get_user_by_id(store, asha["id"]) == asha
    assert users.get_user_by_id(store, "missing") is None


# --- Wishlist ---

def test_wishlist_add_is_idempotent(store, asha):
    assert users.update_wishlist(store, asha["id"], 3, "add")
    assert users.update_wishlist(store, asha["id"], 3, "add")

    assert users.get_wishlist(store, asha["id"]) == [3]
    assert points(store, asha["id"]) == 10


def test_wishlist_remove_keeps_points(store, asha):
    users.update_wishlist(store, asha["id"], 3, "add")
    users.update_wishlist(store, asha["id"], 5, "add")
    assert users.update_wishlist(store, asha["id"], 3, "remove")

    assert users.get_wishlist(store, asha["id"]) == [5]
    assert points(store, asha["id"]) == 20


def test_wishlist_remove_absent_is_noop(store, asha):
    assert users.update_wishlist(store, asha["id"], 9, "remove")
    assert users.get_wishlist(store, asha["id"]) == []


def test_wishlist_unknown_user(store):
    assert users.update_wishlist(store, "missing", 3, "add") is False


# --- Visited ---

def test_first_visit_wins(store, asha):
    assert users.add_visited(store, asha["id"], 3, "2024-01-01")
    assert users.add_visited(store, asha["id"], 3, "2024-02-02")

    assert users.get_visited(store, asha["id"]) == [{"museumId": 3, "date": "2024-01-01"}]
    assert points(store, asha["id"]) == 50


def test_visited_keeps_insertion_order(store, asha):
    users.add_visited(store, asha["id"], 7, "2024-03-01")
    users.add_visited(store, asha["id"], 2, "2024-01-01")

    assert [v["museumId"] for v in users.get_visited(store, asha["id"])] == [7, 2]


def test_visited_unknown_user(store):
    assert users.add_visited(store, "missing", 3, "2024-01-01") is False


# --- Reviews ---

def test_review_resubmission_replaces(store, asha):
    assert users.add_review(store, asha["id"], 3, 3, "ok")
    assert users.add_review(store, asha["id"], 3, 5, "great")

    reviews = users.get_reviews(store, asha["id"])
    assert len(reviews) == 1
    assert reviews[0]["museumId"] == 3
    assert reviews[0]["rating"] == 5
    assert reviews[0]["notes"] == "great"
    assert "T" in reviews[0]["date"]
    assert points(store, asha["id"]) == 25


def test_reviews_for_different_museums_append(store, asha):
    users.add_review(store, asha["id"], 3, 4, "a")
    users.add_review(store, asha["id"], 4, 2, "b")

    assert [r["museumId"] for r in users.get_reviews(store, asha["id"])] == [3, 4]
    assert points(store, asha["id"]) == 50


def test_review_unknown_user(store):
    assert users.add_review(store, "missing", 3, 4, "x") is False


# --- Projections ---

def test_projections_for_unknown_user_are_empty(store):
    assert users.get_wishlist(store, "missing") == []
    assert users.get_visited(store, "missing") == []
    assert users.get_reviews(store, "missing") == []


def test_museum_status(store, asha):
    users.update_wishlist(store, asha["id"], 3, "add")

    assert users.get_museum_status(store, asha["id"], 3) == {"inWishlist": True, "isVisited": False}

    users.add_visited(store, asha["id"], 3, "2024-01-01")
    assert users.get_museum_status(store, asha["id"], 3) == {"inWishlist": True, "isVisited": True}
    assert users.get_museum_status(store, asha["id"], 4) == {"inWishlist": False, "isVisited": False}


def test_museum_status_unknown_user(store):
    assert users.get_museum_status(store, "missing", 3) == {"inWishlist": False, "isVisited": False}


def test_returned_views_do_not_alias_storage(store, asha):
    view = users.get_user_by_id(store, asha["id"])
    view["wishlist"].append(99)

    assert users.get_wishlist(store, asha["id"]) == []


# --- Scenario ---

def test_points_scenario(store):
    user = users.create_user(store, "Asha", "asha@example.com", "secret1")
    assert user["points"] == 0

    users.update_wishlist(store, user["id"], 3, "add")
    assert points(store, user["id"]) == 10

    users.add_visited(store, user["id"], 3, "2024-01-01")
    assert points(store, user["id"]) == 60

    users.add_review(store, user["id"], 3, 4, "Nice")
    assert points(store, user["id"]) == 85


def test_points_never_decrease(store, asha):
    seen = [points(store, asha["id"])]
    steps = [
        lambda: users.update_wishlist(store, asha["id"], 1, "add"),
        lambda: users.update_wishlist(store, asha["id"], 1, "remove"),
        lambda: users.add_visited(store, asha["id"], 1, "2024-01-01"),
        lambda: users.add_review(store, asha["id"], 1, 2, "meh"),
        lambda: users.add_review(store, asha["id"], 1, 1, "worse"),
        lambda: users.update_wishlist(store, asha["id"], 1, "add"),
    ]
    for step in steps:
        step()
        seen.append(points(store, asha["id"]))

    assert seen == sorted(seen)


# --- Known race ---

def test_concurrent_writers_lose_updates(store, asha):
    """
    Read-modify-write is not serialized: a writer holding an older snapshot
    overwrites changes saved after it loaded. This documents the race.
    """
    stale_snapshot = store.load()

    users.update_wishlist(store, asha["id"], 3, "add")
    assert users.get_wishlist(store, asha["id"]) == [3]

    stale_snapshot[0]["name"] = "Asha K"
    store.save(stale_snapshot)

    assert users.get_wishlist(store, asha["id"]) == []
    assert users.get_user_by_id(store, asha["id"])["name"] == "Asha K"
