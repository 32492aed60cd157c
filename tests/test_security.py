from datetime import timedelta
from uuid import uuid4

from skilltrade.core.security import (
    create_access_token,
    create_refresh_token,
    decode_token,
    hash_password,
    token_subject,
    verify_password,
    verify_token_type,
)


def test_password_hash_round_trip():
    hashed = hash_password("Secret123")
    assert hashed != "Secret123"
    assert hashed.startswith("$2")
    assert verify_password("Secret123", hashed)
    assert not verify_password("secret123", hashed)


def test_tokens_carry_subject_and_type():
    user_id = uuid4()
    access = decode_token(create_access_token({"sub": str(user_id)}))
    refresh = decode_token(create_refresh_token({"sub": str(user_id)}))

    assert verify_token_type(access, "access")
    assert not verify_token_type(access, "refresh")
    assert verify_token_type(refresh, "refresh")
    assert token_subject(access) == user_id


def test_decode_rejects_tampered_and_expired_tokens():
    token = create_access_token({"sub": str(uuid4())})
    assert decode_token(token[:-2] + "xx") is None
    assert decode_token("not-a-token") is None

    expired = create_access_token({"sub": str(uuid4())}, expires_delta=timedelta(seconds=-1))
    assert decode_token(expired) is None


def test_token_subject_rejects_malformed_ids():
    assert token_subject({"sub": "42"}) is None
    assert token_subject({}) is None
