"""JWT token utilities.

Access tokens are issued by Supabase Auth and signed with the project's JWT
secret; ``create_token`` mints compatible tokens for local development.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from ngestream.config import AuthSettings


class TokenPayload(BaseModel):
    """Supabase access token claims used by this service."""

    sub: str
    email: str | None = None
    role: str = "authenticated"
    exp: datetime

    @property
    def user_id(self) -> str:
        return self.sub


class JWTError(Exception):
    """The token could not be verified or lacks the claims we need."""


def create_token(user_id: str, email: str | None, settings: AuthSettings) -> str:
    """Create an access token shaped like a Supabase session token.

    Args:
        user_id: User ID (``sub`` claim)
        email: User email
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "sub": user_id,
        "email": email,
        "role": "authenticated",
        "aud": settings.jwt_audience,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode an access token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except ValidationError:
        raise JWTError("Token is missing required claims")
