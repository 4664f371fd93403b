from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from prolink.core.security import Identity
from prolink.deps import get_current_identity, get_store
from prolink.modules.profiles.schemas.profile import Profile, ProfileUpdate
from prolink.modules.profiles.services.profile import get_profile_by_user_id, upsert_profile
from prolink.store.base import ObjectStore

router = APIRouter()

@router.get("/me", response_model=Profile)
async def read_my_profile(
    store: ObjectStore = Depends(get_store),
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """
    Get the viewer's profile. A 404 tells the client to start profile setup.
    """
    profile = await get_profile_by_user_id(store, identity.id)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not set up yet"
        )
    return profile

@router.put("/me", response_model=Profile)
async def update_my_profile(
    *,
    store: ObjectStore = Depends(get_store),
    profile_in: ProfileUpdate,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    return await upsert_profile(store, identity.id, profile_in)

@router.get("/{user_id}", response_model=Profile)
async def read_profile(
    user_id: str,
    store: ObjectStore = Depends(get_store),
    identity: Identity = Depends(get_current_identity),
) -> Any:
    profile = await get_profile_by_user_id(store, user_id)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found"
        )
    return profile
