from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from prolink.core.security import Identity
from prolink.deps import get_current_identity, get_store
from prolink.modules.posts.schemas.post import Post as PostSchema, PostCreate
from prolink.modules.posts.services.post import create_post, get_post
from prolink.store.base import ObjectStore

router = APIRouter()

@router.post("/", response_model=PostSchema, status_code=status.HTTP_201_CREATED)
@router.post("", response_model=PostSchema, status_code=status.HTTP_201_CREATED)
async def create_new_post(
    *,
    store: ObjectStore = Depends(get_store),
    post_in: PostCreate,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """
    Create new post in one market.
    """
    return await create_post(store, post_in, identity.id)

@router.get("/{post_id}", response_model=PostSchema)
async def read_post_by_id(
    *,
    store: ObjectStore = Depends(get_store),
    post_id: str,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """
    Get post by ID.
    """
    post = await get_post(store, post_id=post_id)
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    return post
