"""Resource-skill links: composite-key CRUD with idempotent creation.

Invariants:
    - Creating an existing (resource_id, skill_id) pair is a 200 "already exists",
      never a duplicate row
    - Links always reference existing resources and skills (store enforced)
"""

import pytest


@pytest.fixture
def pair(make_resource, make_skill):
    return make_resource()["id"], make_skill()["id"]


def test_create_link_twice_is_idempotent(client, pair):
    resource_id, skill_id = pair
    body = {"resource_id": resource_id, "skill_id": skill_id}

    first = client.post("/resources-skills", json=body)
    second = client.post("/resources-skills", json=body)

    assert first.status_code == 201
    assert first.json() == body
    assert second.status_code == 200
    assert second.json() == {"message": "Link already exists"}
    assert client.get("/resources-skills").json() == [body]


def test_create_link_coerces_numeric_strings(client, pair):
    resource_id, skill_id = pair
    res = client.post("/resources-skills", json={"resource_id": str(resource_id), "skill_id": str(skill_id)})
    assert res.status_code == 201
    assert res.json() == {"resource_id": resource_id, "skill_id": skill_id}


def test_create_link_rejects_non_numeric_ids(client):
    for body in ({"resource_id": "abc", "skill_id": 1}, {"resource_id": 1, "skill_id": "x"}, {"resource_id": 1}):
        res = client.post("/resources-skills", json=body)
        assert res.status_code == 400
        assert res.json() == {"error": "resource_id and skill_id must be numbers"}


def test_create_link_to_missing_rows_is_internal_error(client):
    res = client.post("/resources-skills", json={"resource_id": 1, "skill_id": 5})
    assert res.status_code == 500
    assert res.json() == {"error": "Internal error"}
    assert client.get("/resources-skills").json() == []


def test_list_links_ordered_by_pair(client, make_resource, make_skill):
    r1, r2 = make_resource()["id"], make_resource(title="Other")["id"]
    s1, s2 = make_skill("A")["id"], make_skill("B")["id"]
    for resource_id, skill_id in ((r2, s1), (r1, s2), (r1, s1)):
        client.post("/resources-skills", json={"resource_id": resource_id, "skill_id": skill_id})

    rows = client.get("/resources-skills").json()

    assert [(row["resource_id"], row["skill_id"]) for row in rows] == [(r1, s1), (r1, s2), (r2, s1)]


def test_get_link(client, pair):
    resource_id, skill_id = pair
    client.post("/resources-skills", json={"resource_id": resource_id, "skill_id": skill_id})

    res = client.get(f"/resources-skills/{resource_id}/{skill_id}")

    assert res.status_code == 200
    assert res.json() == {"resource_id": resource_id, "skill_id": skill_id}


def test_get_missing_link_returns_404(client, pair):
    resource_id, skill_id = pair
    res = client.get(f"/resources-skills/{resource_id}/{skill_id}")
    assert res.status_code == 404
    assert res.json() == {"error": "Link not found"}


def test_malformed_composite_ids(client):
    for path in ("/resources-skills/abc/1", "/resources-skills/1/abc"):
        assert client.get(path).json() == {"error": "Invalid ids"}
        assert client.delete(path).status_code == 400


def test_delete_link(client, pair):
    resource_id, skill_id = pair
    client.post("/resources-skills", json={"resource_id": resource_id, "skill_id": skill_id})

    res = client.delete(f"/resources-skills/{resource_id}/{skill_id}")

    assert res.status_code == 200
    assert res.json() == {"message": "Link deleted", "link": {"resource_id": resource_id, "skill_id": skill_id}}
    assert client.get("/resources-skills").json() == []


def test_delete_missing_link_returns_404(client, pair):
    resource_id, skill_id = pair
    res = client.delete(f"/resources-skills/{resource_id}/{skill_id}")
    assert res.status_code == 404
    assert res.json() == {"error": "Link not found"}
