"""Lazy Firebase Admin initialization shared by auth and the cache store."""

import json
import logging
import threading
from typing import Any, Dict, Optional

import firebase_admin
from firebase_admin import auth as firebase_auth
from firebase_admin import credentials as firebase_credentials
from firebase_admin import firestore as firebase_firestore

from .config import get_settings


logger = logging.getLogger("scripture_api.firebase")

_FIREBASE_APP: Optional[firebase_admin.App] = None
_FIREBASE_LOCK = threading.Lock()


def get_firebase_app() -> firebase_admin.App:
    """
    Initialize the default Firebase app on first use.

    Uses the service account JSON from settings when present, otherwise
    Application Default Credentials.
    """
    global _FIREBASE_APP
    if _FIREBASE_APP is not None:
        return _FIREBASE_APP

    with _FIREBASE_LOCK:
        if _FIREBASE_APP is None:
            try:
                _FIREBASE_APP = firebase_admin.get_app()
            except ValueError:
                service_account = get_settings().firebase_service_account_json
                if service_account:
                    cred = firebase_credentials.Certificate(json.loads(service_account))
                    _FIREBASE_APP = firebase_admin.initialize_app(cred)
                else:
                    _FIREBASE_APP = firebase_admin.initialize_app()
                logger.info("Firebase app initialized (project=%s)", _FIREBASE_APP.project_id)
        return _FIREBASE_APP


def verify_id_token(id_token: str) -> Dict[str, Any]:
    """Verify a Firebase ID token and return its claims."""
    claims = firebase_auth.verify_id_token(id_token, app=get_firebase_app())
    if not isinstance(claims, dict):
        raise ValueError("Invalid auth claims")
    return claims


def get_firestore_client() -> Any:
    """Get the Firestore client bound to the default app."""
    return firebase_firestore.client(app=get_firebase_app())
