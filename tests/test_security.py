from datetime import timedelta

import pytest

from expiry_tracker.errors import UnauthenticatedError, ValidationError
from expiry_tracker.utils import security


def test_password_hash_is_salted_and_verifiable():
    h1 = security.hash_password("secret123", rounds=4)
    h2 = security.hash_password("secret123", rounds=4)
    assert h1 != "secret123"
    assert h1 != h2  # fresh salt each time
    assert security.verify_password("secret123", h1)
    assert security.verify_password("secret123", h2)
    assert not security.verify_password("wrong", h1)


def test_default_cost_is_ten():
    assert security.hash_password("secret123").startswith("$2b$10$")


def test_overlong_password_rejected():
    with pytest.raises(ValidationError):
        security.hash_password("x" * 73, rounds=4)


def test_token_carries_identity():
    token = security.create_access_token({"id": 7, "email": "a@x.com"}, "s3cret")
    assert security.decode_access_token(token, "s3cret") == {"id": 7, "email": "a@x.com"}


def test_expired_and_tampered_tokens_are_rejected_alike():
    expired = security.create_access_token(
        {"id": 7, "email": "a@x.com"}, "s3cret", expires_delta=timedelta(seconds=-5)
    )
    with pytest.raises(UnauthenticatedError) as e1:
        security.decode_access_token(expired, "s3cret")

    valid = security.create_access_token({"id": 7, "email": "a@x.com"}, "s3cret")
    with pytest.raises(UnauthenticatedError) as e2:
        security.decode_access_token(valid, "other-secret")

    with pytest.raises(UnauthenticatedError):
        security.decode_access_token("not.a.token", "s3cret")

    assert e1.value.message == e2.value.message


def test_reset_token_hash_is_deterministic():
    raw = security.generate_reset_token()
    assert len(raw) == 64
    assert security.hash_reset_token(raw) == security.hash_reset_token(raw)
    assert security.hash_reset_token(raw) != raw
    assert security.generate_reset_token() != raw
