import pytest

from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine
from backend.app.services.credentials import IdentifierTakenError, SqlCredentialStore


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def test_create_and_find_credential():
    store = SqlCredentialStore(SessionLocal)
    created = store.create("alice", "hashed")
    found = store.find_by_identifier("alice")
    assert found == created
    assert found.is_active is True
    assert found.hashed_secret == "hashed"


def test_find_unknown_identifier_returns_none():
    store = SqlCredentialStore(SessionLocal)
    assert store.find_by_identifier("nobody") is None


def test_create_duplicate_raises():
    store = SqlCredentialStore(SessionLocal)
    store.create("alice", "hashed")
    with pytest.raises(IdentifierTakenError):
        store.create("alice", "other")


def test_record_login_for_missing_user_is_noop():
    store = SqlCredentialStore(SessionLocal)
    store.record_login(999)


def test_find_by_id():
    store = SqlCredentialStore(SessionLocal)
    created = store.create("bob", "hashed")
    assert store.find_by_id(created.user_id) == created
    assert store.find_by_id(created.user_id + 1) is None
