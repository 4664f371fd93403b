from typing import List
import logging

from prolink.modules.markets.schemas.market import Market, Profession
from prolink.store.base import ObjectStore
from prolink.store.filters import Eq, In, Order
from prolink.store.guard import guarded_read

logger = logging.getLogger(__name__)

async def list_markets(store: ObjectStore) -> List[Market]:
    """All markets, alphabetically"""
    rows = await guarded_read(store.select("markets", order=Order("name")), "load markets")
    return [Market.model_validate(row) for row in rows]

async def get_user_market_ids(store: ObjectStore, user_id: str) -> List[int]:
    """Markets the user picked during onboarding; the default feed selection"""
    rows = await guarded_read(store.select("user_markets", [Eq("user_id", user_id)]), "load user markets")
    return [row["market_id"] for row in rows]

async def get_user_professions(store: ObjectStore, user_id: str) -> List[Profession]:
    links = await guarded_read(
        store.select("user_professions", [Eq("user_id", user_id)]), "load user professions"
    )
    if not links:
        return []
    rows = await guarded_read(
        store.select("professions", [In("id", [link["profession_id"] for link in links])], order=Order("name")),
        "load professions",
    )
    return [Profession.model_validate(row) for row in rows]
