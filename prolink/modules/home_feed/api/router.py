from typing import Any, List

from fastapi import APIRouter, Depends, Query

from prolink.core.config import settings
from prolink.core.security import Identity
from prolink.deps import get_current_identity, get_store
from prolink.modules.home_feed.schemas.feed import FeedItem
from prolink.modules.home_feed.services.feed import fetch_feed
from prolink.modules.markets.services.market import get_user_market_ids
from prolink.store.base import ObjectStore

router = APIRouter()

@router.get("/", response_model=List[FeedItem])
@router.get("", response_model=List[FeedItem])
async def read_home_feed(
    *,
    store: ObjectStore = Depends(get_store),
    market_ids: List[int] = Query([]),
    limit: int = Query(settings.FEED_PAGE_SIZE, ge=1, le=100),
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Most recent posts in the selected markets; defaults to the viewer's own markets"""
    if not market_ids:
        market_ids = await get_user_market_ids(store, identity.id)
    return await fetch_feed(store, market_ids, identity.id, limit)
