"""
Bearer token verification for the camera API.

Access tokens are issued by the account service that shares the
JWT_SECRET_KEY; this service only verifies them. issue_access_token exists
for local tooling and tests.
"""

# Standard library imports
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

# External package imports
import jwt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import get_settings

REQUIRED_CLAIMS = ["exp", "sub"]


def issue_access_token(subject: str, expires_in_minutes: Optional[int] = None, **claims: Any) -> str:
    """
    Sign an access token for a user ID
    
    Args:
        subject: User ID stored in the "sub" claim
        expires_in_minutes: Lifetime, ACCESS_TOKEN_EXPIRE_MINUTES by default
        **claims: Extra claims
    """
    settings = get_settings()
    lifetime = settings.access_token_expire_minutes if expires_in_minutes is None else expires_in_minutes
    now = datetime.now(timezone.utc)
    
    return jwt.encode(
        {**claims, "sub": subject, "iat": now, "exp": now + timedelta(minutes=lifetime)},
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Verify signature and expiry of an access token
    
    Returns:
        Decoded claims, always including "sub" and "exp"
        
    Raises:
        ValueError: If the token is invalid, expired or lacks a required claim
    """
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except InvalidTokenError as e:
        raise ValueError(f"Invalid token: {e}")
