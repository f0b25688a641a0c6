"""
Tests for password hashing and tokens.
"""
from datetime import timedelta
from craftfolio.core.security import (
    create_access_token, decode_access_token, get_password_hash, verify_password
)


def test_password_hash_round_trip():
    hashed = get_password_hash("s3cret")
    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)


def test_long_passwords_are_supported():
    password = "x" * 200
    assert verify_password(password, get_password_hash(password))
    assert not verify_password("x" * 199, get_password_hash(password))


def test_verify_against_non_hash():
    assert not verify_password("secret", "secret")
    assert not verify_password("secret", "")


def test_token_claims():
    payload = decode_access_token(create_access_token({"sub": "ada", "user_id": "abc"}))
    assert payload["sub"] == "ada"
    assert payload["user_id"] == "abc"


def test_expired_token():
    token = create_access_token({"sub": "ada"}, expires_delta=timedelta(seconds=-10))
    assert decode_access_token(token) is None
