"""Cache maintenance endpoint."""

from typing import Optional
from fastapi import APIRouter, Depends

from ..api.dependencies import get_auth_context
from ..auth import AuthContext
from ..cache import BibleCacheStore, clean_old_cache, get_cache_store
from ..schemas.common import CALLABLE_ERROR_RESPONSES, CallableRequest, CallableResponse

router = APIRouter(prefix="", tags=["Maintenance"], responses=CALLABLE_ERROR_RESPONSES)


@router.post("/cleanOldCache", response_model=CallableResponse, summary="Clean Old Cache")
def clean_old_cache_endpoint(
    body: CallableRequest,
    auth: Optional[AuthContext] = Depends(get_auth_context),
    store: BibleCacheStore = Depends(get_cache_store),
):
    """
    Delete cached scripture entries that have no `expiresAt` field.

    Entries carrying an expiry are left in place and counted as kept.
    """
    return CallableResponse(result=clean_old_cache(auth, store))
