"""Authentication schemas for token handling."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class TokenData(BaseModel):
    """Data extracted from a verified JWT.

    Attributes:
        subject: Identifier of the account the token was issued to
        username: Display name carried by the token, if any
        exp: Token expiration time
        permissions: Raw permissions claim; validated by the permission codec
    """

    subject: str
    username: str | None = None
    exp: datetime
    permissions: Any = None
