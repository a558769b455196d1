"""
Security helper tests - hashing and token validation rules.
"""

import uuid
from datetime import datetime, timedelta, timezone

from jose import jwt

from indiatrails.config import Settings
from indiatrails.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

SETTINGS = Settings(jwt_key="unit-test-key", jwt_issuer="issuer-a", jwt_audience="audience-a")


def test_hash_is_salted_and_verifiable():
    first = hash_password("himalaya9")
    second = hash_password("himalaya9")
    assert first != second
    assert first != "himalaya9"
    assert verify_password("himalaya9", first)
    assert not verify_password("himalaya8", first)


def test_token_round_trip_validates_issuer_and_audience():
    user_id = uuid.uuid4()
    token = create_access_token(user_id, "asha", "asha@example.com", settings=SETTINGS)
    payload = decode_access_token(token, settings=SETTINGS)
    assert payload["nameid"] == str(user_id)
    assert payload["unique_name"] == "asha"
    assert payload["sub"] == "asha@example.com"


def test_token_has_unique_id_per_issue():
    user_id = uuid.uuid4()
    a = create_access_token(user_id, "asha", "asha@example.com", settings=SETTINGS)
    b = create_access_token(user_id, "asha", "asha@example.com", settings=SETTINGS)
    assert jwt.get_unverified_claims(a)["jti"] != jwt.get_unverified_claims(b)["jti"]


def test_wrong_audience_is_rejected():
    token = create_access_token(uuid.uuid4(), "asha", "asha@example.com", settings=SETTINGS)
    other = SETTINGS.model_copy(update={"jwt_audience": "audience-b"})
    assert decode_access_token(token, settings=other) is None


def test_wrong_issuer_is_rejected():
    token = create_access_token(uuid.uuid4(), "asha", "asha@example.com", settings=SETTINGS)
    other = SETTINGS.model_copy(update={"jwt_issuer": "issuer-b"})
    assert decode_access_token(token, settings=other) is None


def test_wrong_key_is_rejected():
    token = create_access_token(uuid.uuid4(), "asha", "asha@example.com", settings=SETTINGS)
    other = SETTINGS.model_copy(update={"jwt_key": "another-key"})
    assert decode_access_token(token, settings=other) is None


def test_expired_token_is_rejected():
    issued = datetime.now(timezone.utc) - timedelta(days=8)
    token = create_access_token(uuid.uuid4(), "asha", "asha@example.com", settings=SETTINGS, now=issued)
    assert decode_access_token(token, settings=SETTINGS) is None


def test_expiry_is_exactly_seven_days():
    issued = datetime(2025, 10, 11, 14, 18, 44, tzinfo=timezone.utc)
    token = create_access_token(uuid.uuid4(), "asha", "asha@example.com", settings=SETTINGS, now=issued)
    claims = jwt.get_unverified_claims(token)
    assert claims["exp"] == int((issued + timedelta(days=7)).timestamp())
