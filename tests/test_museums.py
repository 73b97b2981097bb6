"""
Tests for the museum directory.
"""

import museums


def test_ids_and_keys_are_unique():
    assert len({m["id"] for m in museums.MUSEUMS}) == len(museums.MUSEUMS)
    assert len({m["key"] for m in museums.MUSEUMS}) == len(museums.MUSEUMS)


def test_list_museums_sorted_by_name():
    names = [m["name"] for m in museums.list_museums()]
    assert names == sorted(names)
    assert len(names) == len(museums.MUSEUMS)


def test_search_matches_name_location_and_description():
    assert [m["id"] for m in museums.list_museums(search="salar")] == [4]
    assert {m["id"] for m in museums.list_museums(search="KOLKATA")} == {2}
    assert 8 in {m["id"] for m in museums.list_museums(search="railway")}


def test_filter_by_state():
    delhi = museums.list_museums(state="Delhi")
    assert delhi
    assert all(m["state"] == "Delhi" for m in delhi)

    assert [m["id"] for m in museums.list_museums(search="rail", state="Delhi")] == [8]
    assert museums.list_museums(state="Atlantis") == []


def test_get_museum():
    assert museums.get_museum(3)["name"] == "Chhatrapati Shivaji Maharaj Vastu Sangrahalaya"
    assert museums.get_museum(999) is None


def test_results_are_copies():
    museums.get_museum(1)["name"] = "changed"
    assert museums.get_museum(1)["name"] == "National Museum"


def test_list_states():
    states = museums.list_states()
    assert states == sorted(set(states))
    assert "Kerala" in states


def test_museum_endpoints(client):
    listing = client.get("/api/museums", query_string={"search": "albert"})
    assert [m["id"] for m in listing.get_json()] == [6]

    assert client.get("/api/museums/6").get_json()["location"] == "Jaipur"
    assert client.get("/api/museums/999").status_code == 404
    assert "Rajasthan" in client.get("/api/museums/states").get_json()
