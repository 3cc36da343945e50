"""Tests for the cache maintenance sweep."""

import pytest
from unittest.mock import MagicMock

from src.scripture_api.cache import BibleCacheStore, clean_old_cache
from src.scripture_api.errors import CallableError, ErrorCode


def _doc(data):
    doc = MagicMock()
    doc.to_dict.return_value = data
    return doc


@pytest.fixture
def db():
    return MagicMock()


@pytest.fixture
def store(db):
    return BibleCacheStore(collection_name="bible_cache", db=db)


class TestCleanOldCache:
    """Entries without an expiry are deleted in one batch."""

    def test_partition_and_single_commit(self, store, db, user):
        stale = [_doc({"text": "Genesis 1"}), _doc(None), _doc({"expiresAt": None})]
        fresh = [_doc({"expiresAt": "2030-01-01"})]
        db.collection.return_value.stream.return_value = stale + fresh

        result = clean_old_cache(user, store)

        assert result == {
            "success": True,
            "deleted": 3,
            "kept": 1,
            "message": "Cleanup complete: 3 old cache entries deleted, 1 kept",
        }
        db.collection.assert_called_once_with("bible_cache")
        batch = db.batch.return_value
        assert [c.args[0] for c in batch.delete.call_args_list] == [d.reference for d in stale]
        batch.commit.assert_called_once()

    def test_nothing_stale_skips_the_batch(self, store, db, user):
        db.collection.return_value.stream.return_value = [_doc({"expiresAt": "2030-01-01"})]

        result = clean_old_cache(user, store)

        assert result["deleted"] == 0
        assert result["kept"] == 1
        db.batch.assert_not_called()

    def test_empty_collection(self, store, db, user):
        db.collection.return_value.stream.return_value = []

        result = clean_old_cache(user, store)

        assert result["message"] == "Cleanup complete: 0 old cache entries deleted, 0 kept"

    def test_anonymous_caller(self, store, db):
        with pytest.raises(CallableError) as exc_info:
            clean_old_cache(None, store)

        assert exc_info.value.code is ErrorCode.UNAUTHENTICATED
        db.collection.assert_not_called()

    def test_storage_failure_is_internal(self, store, db, user):
        db.collection.return_value.stream.side_effect = RuntimeError("Firestore unavailable")

        with pytest.raises(CallableError) as exc_info:
            clean_old_cache(user, store)

        assert exc_info.value.code is ErrorCode.INTERNAL
        assert exc_info.value.message == "Firestore unavailable"
