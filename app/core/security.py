# /boilerforge-backend/app/core/security.py

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from .config import AUTH_SECRET_KEY, AUTH_ALGORITHM

ACCESS_TOKEN_EXPIRE_MINUTES = 60 * 24


def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> str:
    """Issues a signed token for the given user id. Used by tooling and tests."""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {"sub": str(subject), "exp": expire}
    return jwt.encode(payload, AUTH_SECRET_KEY, algorithm=AUTH_ALGORITHM)


def decode_access_token(token: str) -> str:
    """
    Verifies the token and returns its subject (the user id).
    Raises ValueError for expired, tampered or subject-less tokens.
    """
    try:
        payload = jwt.decode(token, AUTH_SECRET_KEY, algorithms=[AUTH_ALGORITHM])
    except jwt.PyJWTError as e:
        raise ValueError(f"Invalid authentication token: {e}")
    subject = payload.get("sub")
    if not subject:
        raise ValueError("Authentication token has no subject.")
    return subject
