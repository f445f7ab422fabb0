"""JWT verification.

Tokens are issued elsewhere (an admin tool or identity service sharing the
signing secret). This module only verifies them and extracts the claims
the API needs.
"""

from datetime import UTC, datetime

from jose import JWTError, jwt

from railcat.config import settings
from railcat.core.auth.schemas import TokenData
from railcat.core.constants import (
    LEGACY_SUBJECT_CLAIM,
    MILLISECOND_TIMESTAMP_THRESHOLD,
)


def _expiry(exp: int | float) -> datetime:
    if exp > MILLISECOND_TIMESTAMP_THRESHOLD:
        exp = exp / 1000
    return datetime.fromtimestamp(exp, tz=UTC)


def decode_token(token: str) -> TokenData | None:
    """Decode and validate a JWT token.

    The subject is read from ``sub``, falling back to the legacy ``id``
    claim. An ``exp`` in milliseconds is accepted and checked here, since
    it always looks unexpired to the JWT library. The permissions claim is
    passed through untouched.

    Args:
        token: The JWT token to decode

    Returns:
        TokenData if valid, None if invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None

    subject = payload.get("sub") or payload.get(LEGACY_SUBJECT_CLAIM)
    exp = payload.get("exp")

    if not subject or exp is None:
        return None

    try:
        expires_at = _expiry(exp)
    except (TypeError, ValueError, OverflowError):
        return None

    if expires_at <= datetime.now(UTC):
        return None

    return TokenData(
        subject=str(subject),
        username=payload.get("username"),
        exp=expires_at,
        permissions=payload.get(settings.permissions_claim),
    )
