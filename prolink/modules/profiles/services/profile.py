from typing import List, Optional
import logging

from prolink.modules.profiles.schemas.profile import Profile, ProfileUpdate
from prolink.store.base import ObjectStore
from prolink.store.filters import Eq, In
from prolink.store.guard import guarded_read, guarded_write

logger = logging.getLogger(__name__)

async def get_profile_by_user_id(store: ObjectStore, user_id: str) -> Optional[Profile]:
    """Get a profile by identity id; None means the user has not set one up yet"""
    rows = await guarded_read(store.select("profiles", [Eq("user_id", user_id)], limit=1), "load profile")
    if not rows:
        logger.debug(f"No profile yet for user {user_id}")
        return None
    return Profile.model_validate(rows[0])

async def get_profiles_by_user_ids(store: ObjectStore, user_ids: List[str]) -> List[Profile]:
    if not user_ids:
        return []
    rows = await guarded_read(store.select("profiles", [In("user_id", user_ids)]), "load profiles")
    return [Profile.model_validate(row) for row in rows]

async def upsert_profile(store: ObjectStore, user_id: str, profile_in: ProfileUpdate) -> Profile:
    """Create the user's profile or update the fields that were sent"""
    existing = await get_profile_by_user_id(store, user_id)
    if existing is None:
        rows = await guarded_write(
            store.insert("profiles", [{"user_id": user_id, **profile_in.model_dump()}]),
            "create profile",
        )
        logger.info(f"Created profile for user {user_id}")
        return Profile.model_validate(rows[0])

    update_data = profile_in.model_dump(exclude_unset=True)
    if update_data:
        await guarded_write(store.update("profiles", update_data, [Eq("id", existing.id)]), "update profile")
        logger.info(f"Updated profile for user {user_id}")
    return existing.model_copy(update=update_data)
