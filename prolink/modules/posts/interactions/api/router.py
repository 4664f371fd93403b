from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Path, status

from prolink.core.security import Identity
from prolink.deps import get_current_identity, get_store
from prolink.modules.posts.interactions.schemas.interaction import ToggleLike, ToggleResult, ToggleSave
from prolink.modules.posts.interactions.services.interaction import toggle_like, toggle_save
from prolink.modules.posts.schemas.post import Post
from prolink.modules.posts.services.post import get_post
from prolink.store.base import ObjectStore

router = APIRouter()

async def _validate_post(store: ObjectStore, post_id: str) -> Post:
    """Validate post exists or raise HTTPException"""
    post = await get_post(store, post_id)
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )
    return post

@router.post("/like", response_model=ToggleResult)
async def toggle_post_like(
    *,
    store: ObjectStore = Depends(get_store),
    post_id: str = Path(..., description="The ID of the post to like or unlike"),
    toggle_in: ToggleLike,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Flip the viewer's like on a post based on the state they last saw"""
    post = await _validate_post(store, post_id)
    await toggle_like(store, post.id, identity.id, post.user_id, toggle_in.is_liked)
    return ToggleResult()

@router.post("/save", response_model=ToggleResult)
async def toggle_post_save(
    *,
    store: ObjectStore = Depends(get_store),
    post_id: str = Path(..., description="The ID of the post to save or unsave"),
    toggle_in: ToggleSave,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Flip the viewer's bookmark on a post based on the state they last saw"""
    post = await _validate_post(store, post_id)
    await toggle_save(store, post.id, identity.id, toggle_in.is_saved)
    return ToggleResult()
