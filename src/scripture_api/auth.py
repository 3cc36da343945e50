"""Caller identity: bearer-token verification and the authentication gate."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import firebase
from .errors import CallableError, ErrorCode


logger = logging.getLogger("scripture_api.auth")


@dataclass(frozen=True)
class AuthContext:
    """Verified identity of the caller."""
    uid: str
    claims: Dict[str, Any] = field(default_factory=dict)


def authenticate(authorization: Optional[str]) -> Optional[AuthContext]:
    """
    Resolve an ``Authorization`` header to an identity.

    A missing or malformed header, or a token that fails verification, all
    resolve to None; the caller is then treated as anonymous.
    """
    header = (authorization or "").strip()
    if not header.lower().startswith("bearer "):
        return None

    id_token = header.split(" ", 1)[1].strip()
    if not id_token:
        return None

    try:
        claims = firebase.verify_id_token(id_token)
    except Exception as e:
        logger.warning("Invalid auth token: %s", e)
        return None

    uid = str(claims.get("uid") or claims.get("sub") or "")
    if not uid:
        logger.warning("Auth token did not include uid")
        return None
    return AuthContext(uid=uid, claims=claims)


def check_auth(auth: Optional[AuthContext]) -> AuthContext:
    """Raise UNAUTHENTICATED when the request carries no identity."""
    if auth is None:
        raise CallableError(ErrorCode.UNAUTHENTICATED, "User not authenticated")
    return auth
