# Implements the session provider side of security:
# JWT token generation for an external identity
# Token verification and decoding into the current identity
# Sign-in itself is handled by the external identity provider

from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Union
import logging

from jose import jwt, JWTError
from pydantic import BaseModel, EmailStr, ValidationError

from prolink.core.config import settings

logger = logging.getLogger(__name__)


class Identity(BaseModel):
    """The authenticated viewer as seen by the core"""
    id: str
    email: Optional[EmailStr] = None


def create_access_token(subject: Union[str, Any], email: Optional[str] = None, expires_delta: Optional[timedelta] = None) -> str:
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {"exp": expire, "sub": str(subject)}
    if email:
        to_encode["email"] = email
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt

def verify_access_token(token: str) -> Optional[dict]:
    """Decode a token, returning its claims or None when it is invalid or expired"""
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM]
        )
    except JWTError as e:
        logger.warning(f"JWT verification error: {e}")
        return None

    if payload.get("sub") is None:
        logger.warning("Token payload missing 'sub' field")
        return None

    return payload

def current_identity(token: Optional[str]) -> Optional[Identity]:
    """Resolve the identity behind a bearer token, or None when signed out"""
    if not token:
        return None

    payload = verify_access_token(token)
    if payload is None:
        return None

    try:
        return Identity(id=payload["sub"], email=payload.get("email"))
    except ValidationError as e:
        logger.warning(f"Token claims rejected: {e}")
        return None
