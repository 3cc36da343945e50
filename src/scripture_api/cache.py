"""Firestore-backed scripture cache and its maintenance sweep."""

import logging
from typing import Any, Dict, List, Optional

from . import firebase
from .auth import AuthContext, check_auth
from .config import get_settings
from .errors import CallableError, ErrorCode


logger = logging.getLogger("scripture_api.cache")

EXPIRY_FIELD = "expiresAt"


class BibleCacheStore:
    """The Firestore collection holding cached scripture responses."""

    def __init__(self, collection_name: Optional[str] = None, db: Any = None):
        self.collection_name = collection_name or get_settings().cache_collection
        self._db = db

    @property
    def db(self) -> Any:
        if self._db is None:
            self._db = firebase.get_firestore_client()
        return self._db

    def list_documents(self) -> List[Any]:
        """Fetch every document snapshot in the collection."""
        return list(self.db.collection(self.collection_name).stream())

    def delete_documents(self, documents: List[Any]) -> None:
        """Delete the given snapshots in a single batched write."""
        batch = self.db.batch()
        for doc in documents:
            batch.delete(doc.reference)
        batch.commit()


def clean_old_cache(auth: Optional[AuthContext], store: BibleCacheStore) -> Dict[str, Any]:
    """
    Delete cache entries that were written without an expiry.

    Args:
        auth: Caller identity, None when anonymous
        store: Cache collection to sweep

    Returns:
        Envelope with the number of deleted and kept documents

    Raises:
        CallableError: UNAUTHENTICATED, or INTERNAL on storage failure
    """
    check_auth(auth)

    stale = []
    kept = 0
    try:
        for doc in store.list_documents():
            data = doc.to_dict() or {}
            if not data.get(EXPIRY_FIELD):
                stale.append(doc)
            else:
                kept += 1

        if stale:
            store.delete_documents(stale)
    except CallableError:
        raise
    except Exception as e:
        logger.error("Error cleaning cache: %s", e)
        raise CallableError(ErrorCode.INTERNAL, str(e)) from None

    deleted = len(stale)
    logger.info("Cache cleanup on %s: %d deleted, %d kept", store.collection_name, deleted, kept)
    return {
        "success": True,
        "deleted": deleted,
        "kept": kept,
        "message": f"Cleanup complete: {deleted} old cache entries deleted, {kept} kept",
    }


# Global store instance
cache_store = BibleCacheStore()


def get_cache_store() -> BibleCacheStore:
    """Get the global cache store instance."""
    return cache_store
