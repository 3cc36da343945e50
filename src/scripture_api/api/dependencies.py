"""Common dependencies for FastAPI routes."""

from typing import Optional
from fastapi import Header

from ..auth import AuthContext, authenticate


def get_auth_context(authorization: Optional[str] = Header(None)) -> Optional[AuthContext]:
    """Verify the bearer token, if any; anonymous callers resolve to None."""
    return authenticate(authorization)
