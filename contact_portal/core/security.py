"""Security utilities for hashing and verifying passwords, and handling JWT tokens."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from contact_portal.constants.constants import ACCESS_TOKEN_EXPIRE, BCRYPT_MAX_BYTES, BCRYPT_ROUNDS
from .config import settings

logger = logging.getLogger(__name__)


def _password_bytes(password: str) -> bytes:
    """Encode a password, truncated to the 72 bytes bcrypt reads."""
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > BCRYPT_MAX_BYTES:
        password_bytes = password_bytes[:BCRYPT_MAX_BYTES]
    return password_bytes


def hash_password(password: Optional[str]) -> str:
    """Hash a password with bcrypt at the fixed work factor.

    Raises:
        ValueError: If no password is given.
    """
    if password is None:
        raise ValueError("Illegal arguments: password is required")
    hashed = bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    return hashed.decode("utf-8")


def verify_password(password: Optional[str], hashed_password: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    if password is None:
        return False
    return bcrypt.checkpw(_password_bytes(password), hashed_password.encode("utf-8"))


def create_jwt_token(data: dict, expires_delta: timedelta = ACCESS_TOKEN_EXPIRE) -> str:
    """
    Creates a JWT (JSON Web Token) with the provided data and expiration time.

    Args:
        data (dict): The payload data to be encoded in the JWT.
        expires_delta (timedelta, optional): The time until the token expires.
            Defaults to 1 hour.

    Returns:
        str: The encoded JWT string.

    Example:
        >>> token = create_jwt_token({"id": "3f0c..."})
        >>> print(token)
        'eyJ0eXAiOiJKV1QiLCJhbGciOiJIUzI1...'

    Note:
        The token includes standard JWT claims:
        - exp (expiration time)
        - iat (issued at time)
    """
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    to_encode.update({
        "exp": now + expires_delta,
        "iat": now
    })
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_jwt_token(token: str) -> dict:
    """Decodes and validates a JWT token.

    No endpoint of this service verifies tokens; this is the counterpart of
    `create_jwt_token` for clients sharing the secret.

    Args:
        token (str): The JWT token string to decode.

    Returns:
        dict: The decoded token payload containing the claims.

    Raises:
        jwt.InvalidTokenError: If the token is invalid, expired, or improperly formatted.
    """
    try:
        return jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM]
        )
    except jwt.InvalidTokenError as e:
        logger.warning(f"JWT decode error: {e}")
        raise
