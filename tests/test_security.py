from datetime import timedelta

from jose import jwt

from app.utils.security import (
    create_session_token,
    decode_session_token,
    SECRET_KEY,
    ALGORITHM,
)


def test_decode_returns_subject():
    token = create_session_token("user_123")
    assert decode_session_token(token) == "user_123"


def test_decode_missing_token():
    assert decode_session_token(None) is None
    assert decode_session_token("") is None


def test_decode_garbage_token():
    assert decode_session_token("not-a-jwt") is None


def test_decode_expired_token():
    token = create_session_token("user_123", expires_delta=timedelta(seconds=-10))
    assert decode_session_token(token) is None


def test_decode_wrong_key():
    token = jwt.encode({"sub": "user_123"}, "some-other-key", algorithm=ALGORITHM)
    assert decode_session_token(token) is None


def test_decode_token_without_subject():
    token = jwt.encode({"role": "admin"}, SECRET_KEY, algorithm=ALGORITHM)
    assert decode_session_token(token) is None
