from datetime import timedelta

from jose import jwt

from prolink.core.config import settings
from prolink.core.security import create_access_token, current_identity, verify_access_token


def test_token_resolves_to_identity():
    token = create_access_token("user-1", email="ana@example.com")

    identity = current_identity(token)

    assert identity.id == "user-1"
    assert identity.email == "ana@example.com"


def test_email_claim_is_optional():
    identity = current_identity(create_access_token("user-2"))

    assert identity.id == "user-2"
    assert identity.email is None


def test_expired_or_tampered_tokens_are_rejected():
    expired = create_access_token("user-1", expires_delta=timedelta(minutes=-1))
    assert verify_access_token(expired) is None
    assert current_identity(expired) is None

    forged = jwt.encode({"sub": "user-1"}, "not-the-secret", algorithm=settings.ALGORITHM)
    assert current_identity(forged) is None
    assert current_identity("garbage") is None
    assert current_identity(None) is None


def test_token_without_subject_is_rejected():
    token = jwt.encode({"email": "ana@example.com"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    assert verify_access_token(token) is None
