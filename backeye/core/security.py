# backeye/core/security.py
"""Bearer token issuing and verification."""
from datetime import datetime, timedelta, timezone
from typing import Optional
import logging
import secrets
import string

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings
from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)

PASSWORD_ALPHABET = string.ascii_letters + string.digits

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(person_id: Optional[int] = None, person_type: Optional[str] = None) -> str:
    """Issue a signed JWT for a person"""
    now = datetime.now(timezone.utc)
    payload = {
        "iat": now,
        "exp": now + timedelta(minutes=settings.access_token_expire_minutes),
    }
    if person_id is not None:
        payload["sub"] = str(person_id)
    if person_type is not None:
        payload["type"] = person_type
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError:
        logger.error("Rejected expired bearer token")
        raise AuthenticationError("Token expired")
    except jwt.InvalidTokenError as e:
        logger.error(f"Rejected invalid bearer token: {e}")
        raise AuthenticationError("Invalid token")


async def require_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> dict:
    """FastAPI dependency guarding authorized endpoints"""
    if credentials is None or credentials.scheme.lower() != "bearer":
        logger.error("Request without bearer token")
        raise AuthenticationError()
    return decode_access_token(credentials.credentials)


def generate_password(length: Optional[int] = None) -> str:
    length = length or settings.generated_password_length
    return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))
