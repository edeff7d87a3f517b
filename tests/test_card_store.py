import pytest
from sqlalchemy.exc import OperationalError

from app import repositories
from app.errors import PersistenceError


def _card(**kw):
    base = {f: "" for f in ("name", "position", "email", "phone", "companyName", "companyAddress", "category")}
    base.update(kw)
    return base


def test_insert_assigns_id_and_created_at(db_session):
    saved = repositories.insert_many(db_session, [_card(name="Jane", phone="555-1111")])
    assert len(saved) == 1
    assert saved[0]["id"] is not None
    assert saved[0]["createdAt"]
    assert saved[0]["name"] == "Jane"
    assert saved[0]["category"] == ""


def test_insert_fills_missing_fields_with_empty_text(db_session):
    saved = repositories.insert_many(db_session, [{"name": "Jane", "phone": 5551111}])
    assert saved[0]["email"] == ""
    assert saved[0]["phone"] == "5551111"


def test_find_all_newest_first(db_session):
    repositories.insert_many(db_session, [_card(name="first"), _card(name="second")])
    cards = repositories.find_all(db_session)
    assert [c["name"] for c in cards] == ["second", "first"]

    repositories.insert_many(db_session, [_card(name="third")])
    assert repositories.find_all(db_session)[0]["name"] == "third"


def test_update_partial_fields(db_session):
    saved = repositories.insert_many(db_session, [_card(name="Jane", email="old@example.com")])[0]
    updated = repositories.update_by_id(
        db_session, saved["id"], {"email": "new@example.com", "createdAt": "1999-01-01", "bogus": "x"}
    )
    assert updated["email"] == "new@example.com"
    assert updated["name"] == "Jane"
    assert updated["createdAt"] == saved["createdAt"]
    assert "bogus" not in updated


def test_update_null_becomes_empty_string(db_session):
    saved = repositories.insert_many(db_session, [_card(name="Jane", category="client")])[0]
    updated = repositories.update_by_id(db_session, saved["id"], {"category": None})
    assert updated["category"] == ""


def test_update_missing_id_returns_none(db_session):
    assert repositories.update_by_id(db_session, 9999, {"name": "x"}) is None
    assert repositories.update_by_id(db_session, "not-an-id", {"name": "x"}) is None


def test_delete_is_idempotent(db_session):
    saved = repositories.insert_many(db_session, [_card(name="Jane")])[0]
    assert repositories.delete_by_id(db_session, saved["id"]) is True
    assert repositories.delete_by_id(db_session, saved["id"]) is False
    assert repositories.delete_by_id(db_session, "abc") is False
    assert repositories.find_all(db_session) == []


def test_database_failure_raises_persistence_error(db_session, monkeypatch):
    def boom(*a, **kw):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(db_session, "execute", boom)
    with pytest.raises(PersistenceError) as ei:
        repositories.find_all(db_session)
    assert "database is locked" in ei.value.details


def test_ids_beyond_integer_range_are_absent(db_session):
    huge = 10**23
    assert repositories.update_by_id(db_session, huge, {"name": "x"}) is None
    assert repositories.update_by_id(db_session, str(huge), {"name": "x"}) is None
    assert repositories.delete_by_id(db_session, huge) is False
    assert repositories.delete_by_id(db_session, -1) is False


def test_insert_failure_rolls_back(db_session, monkeypatch):
    real_rollback = db_session.rollback
    rollbacks = []

    def boom():
        raise OperationalError("INSERT", {}, Exception("disk I/O error"))

    def tracking_rollback():
        rollbacks.append(True)
        real_rollback()

    monkeypatch.setattr(db_session, "commit", boom)
    monkeypatch.setattr(db_session, "rollback", tracking_rollback)
    with pytest.raises(PersistenceError) as ei:
        repositories.insert_many(db_session, [_card(name="Jane")])
    assert ei.value.message == "Save failed"
    assert "disk I/O error" in ei.value.details
    assert rollbacks

    monkeypatch.undo()
    assert repositories.find_all(db_session) == []
