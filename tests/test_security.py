import pytest

from backend.app.core.security import (
    dummy_verify,
    get_password_hash,
    token_lifetime_seconds,
    verify_password,
)


def test_password_hashing_not_plain():
    plain = "password123"
    hashed = get_password_hash(plain)
    assert hashed and hashed != plain


def test_verify_password():
    hashed = get_password_hash("secret")
    assert verify_password("secret", hashed)
    assert not verify_password("wrong", hashed)


def test_dummy_verify_returns_nothing():
    assert dummy_verify() is None


def test_token_lifetime_seconds():
    assert token_lifetime_seconds(2) == 120


def test_hashing_rejects_secret_over_72_bytes():
    with pytest.raises(ValueError):
        get_password_hash("a" * 73)
