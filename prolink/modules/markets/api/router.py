from typing import Any, List

from fastapi import APIRouter, Depends

from prolink.core.security import Identity
from prolink.deps import get_current_identity, get_store
from prolink.modules.markets.schemas.market import Market, Profession
from prolink.modules.markets.services.market import get_user_market_ids, get_user_professions, list_markets
from prolink.store.base import ObjectStore

router = APIRouter()

@router.get("", response_model=List[Market])
@router.get("/", response_model=List[Market])
async def read_markets(
    store: ObjectStore = Depends(get_store),
    identity: Identity = Depends(get_current_identity),
) -> Any:
    return await list_markets(store)

@router.get("/mine", response_model=List[int])
async def read_my_market_ids(
    store: ObjectStore = Depends(get_store),
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Ids of the markets the viewer follows; the default feed selection"""
    return await get_user_market_ids(store, identity.id)

@router.get("/mine/professions", response_model=List[Profession])
async def read_my_professions(
    store: ObjectStore = Depends(get_store),
    identity: Identity = Depends(get_current_identity),
) -> Any:
    return await get_user_professions(store, identity.id)
