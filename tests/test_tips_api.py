"""HTTP tests for the tip endpoints."""
from unittest.mock import MagicMock

from bson import ObjectId
from pymongo.errors import OperationFailure

from config import COLLECTION_TIPS, TIPS_DB_NAME
from storage import tips


def _new_tip(client, **overrides):
    body = {
        "title": "Compost 101",
        "description": "Layer greens and browns.",
        "author_email": "a@b.com",
    }
    body.update(overrides)
    resp = client.post("/tips", json=body)
    assert resp.status_code == 201
    return resp.get_json()["insertedId"]


def _stored(mongo, tip_id):
    return mongo[TIPS_DB_NAME][COLLECTION_TIPS].find_one({"_id": ObjectId(tip_id)})


# ── Create / list ─────────────────────────────────────────────────

def test_compost_scenario(client):
    tip_id = _new_tip(client)

    resp = client.get("/tips?author_email=a@b.com")
    assert resp.status_code == 200
    listed = resp.get_json()
    assert len(listed) == 1
    assert listed[0]["_id"] == tip_id
    assert listed[0]["title"] == "Compost 101"
    assert listed[0]["likes"] == 0
    assert listed[0]["images"] == []


def test_client_supplied_likes_is_ignored(client, mongo):
    tip_id = _new_tip(client, likes=500)
    assert _stored(mongo, tip_id)["likes"] == 0


def test_images_are_kept_when_given(client, mongo):
    tip_id = _new_tip(client, images=["https://img/1.png"])
    assert _stored(mongo, tip_id)["images"] == ["https://img/1.png"]


def test_create_tip_requires_author_email(client, mongo):
    resp = client.post("/tips", json={"title": "t", "description": "d"})
    assert resp.status_code == 400
    assert "message" in resp.get_json()
    assert mongo[TIPS_DB_NAME][COLLECTION_TIPS].count_documents({}) == 0


def test_create_tip_requires_title_and_description(client):
    resp = client.post("/tips", json={"title": "", "author_email": "a@b.com"})
    assert resp.status_code == 400


def test_filter_by_author_email_is_exact(client):
    _new_tip(client, author_email="x@y.com")
    _new_tip(client, author_email="x@y.com.au")
    _new_tip(client, author_email="other@y.com")

    resp = client.get("/tips?author_email=x@y.com")
    listed = resp.get_json()
    assert len(listed) == 1
    assert listed[0]["author_email"] == "x@y.com"

    resp = client.get("/tips")
    assert len(resp.get_json()) == 3


def test_empty_author_email_means_no_filter(client):
    _new_tip(client)
    _new_tip(client, author_email="c@d.com")
    resp = client.get("/tips?author_email=")
    assert len(resp.get_json()) == 2


def test_author_email_filter_does_not_trim_whitespace(client):
    _new_tip(client)

    resp = client.get("/tips?author_email=%20a@b.com")
    assert resp.status_code == 200
    assert resp.get_json() == []


# ── Update ────────────────────────────────────────────────────────

def test_update_title_round_trip(client):
    tip_id = _new_tip(client)

    resp = client.put(f"/tips/{tip_id}", json={"title": "Compost 202", "description": "Turn weekly."})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["message"] == "Tip updated successfully"
    assert body["matchedCount"] == 1

    listed = client.get("/tips").get_json()
    assert len(listed) == 1
    assert listed[0]["_id"] == tip_id
    assert listed[0]["title"] == "Compost 202"


def test_update_does_not_touch_likes_or_author(client, mongo):
    tip_id = _new_tip(client)
    client.put(f"/tips/{tip_id}", json={"title": "New", "likes": 9, "author_email": "z@z.com"})

    stored = _stored(mongo, tip_id)
    assert stored["likes"] == 0
    assert stored["author_email"] == "a@b.com"
    assert stored["images"] == []


def test_update_malformed_id_is_rejected_before_store_access(client, client_factory):
    resp = client.put("/tips/not-a-valid-id", json={"title": "x"})
    assert resp.status_code == 400
    assert resp.get_json() == {"message": "Invalid tip id"}
    assert client_factory.calls == 0


def test_update_unknown_id_returns_404(client):
    resp = client.put(f"/tips/{ObjectId()}", json={"title": "x"})
    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Tip not found"}


def test_update_store_failure_returns_500(client, monkeypatch):
    broken = MagicMock()
    broken.update_one.side_effect = OperationFailure("boom")
    monkeypatch.setattr(tips, "tips_collection", lambda: broken)

    resp = client.put(f"/tips/{ObjectId()}", json={"title": "x"})
    assert resp.status_code == 500
    assert resp.get_json() == {"message": "Failed to update tip"}


# ── Delete ────────────────────────────────────────────────────────

def test_delete_twice_returns_ok_then_404(client):
    tip_id = _new_tip(client)

    first = client.delete(f"/tips/{tip_id}")
    assert first.status_code == 200
    assert first.get_json()["deletedCount"] == 1

    second = client.delete(f"/tips/{tip_id}")
    assert second.status_code == 404
    assert second.get_json() == {"message": "Tip not found"}


def test_delete_malformed_id_is_rejected_before_store_access(client, client_factory):
    resp = client.delete("/tips/not-a-valid-id")
    assert resp.status_code == 400
    assert client_factory.calls == 0


def test_delete_unknown_id_returns_404(client):
    resp = client.delete(f"/tips/{ObjectId()}")
    assert resp.status_code == 404


def test_delete_store_failure_returns_500(client, monkeypatch):
    broken = MagicMock()
    broken.delete_one.side_effect = OperationFailure("boom")
    monkeypatch.setattr(tips, "tips_collection", lambda: broken)

    resp = client.delete(f"/tips/{ObjectId()}")
    assert resp.status_code == 500
    assert resp.get_json() == {"message": "Failed to delete tip"}
