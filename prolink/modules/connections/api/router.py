from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
import logging

from prolink.core.security import Identity
from prolink.deps import get_current_identity, get_store
from prolink.modules.connections.schemas.connection import (
    Connection as ConnectionSchema,
    ConnectionCreate,
    ConnectionOverview,
    ConnectionStatus,
    ConnectionUpdate,
)
from prolink.modules.connections.services.connection import (
    cancel_request,
    get_connection,
    get_connection_overview,
    respond_to_request,
    send_connection_request,
)
from prolink.store.base import ObjectStore

router = APIRouter()
logger = logging.getLogger(__name__)

async def _validate_connection(store: ObjectStore, connection_id: str, viewer_id: str, check_sender: bool = False) -> ConnectionSchema:
    """Validate connection exists and the viewer is the appropriate party"""
    connection = await get_connection(store, connection_id)
    if not connection:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Connection request not found"
        )

    field_to_check = "follower_id" if check_sender else "following_id"
    if getattr(connection, field_to_check) != viewer_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions"
        )

    if connection.status != ConnectionStatus.PENDING:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Connection request is already {connection.status.value}"
        )
    return connection

@router.get("", response_model=ConnectionOverview)
@router.get("/", response_model=ConnectionOverview)
async def read_connections(
    store: ObjectStore = Depends(get_store),
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Pending, sent and accepted connections of the viewer"""
    return await get_connection_overview(store, identity.id)

@router.post("", response_model=ConnectionSchema, status_code=status.HTTP_201_CREATED)
async def create_connection_request(
    *,
    store: ObjectStore = Depends(get_store),
    connection_in: ConnectionCreate,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Send a connection request"""
    if connection_in.following_id == identity.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot connect with yourself"
        )
    return await send_connection_request(store, identity.id, connection_in.following_id)

@router.put("/{connection_id}", response_model=ConnectionSchema)
async def update_connection_request(
    *,
    store: ObjectStore = Depends(get_store),
    connection_id: str,
    connection_in: ConnectionUpdate,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Accept or reject a received connection request"""
    if connection_in.status == ConnectionStatus.PENDING:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Status must be accepted or rejected"
        )
    connection = await _validate_connection(store, connection_id, identity.id)
    return await respond_to_request(store, connection, connection_in.status)

@router.delete("/{connection_id}", response_model=ConnectionSchema)
async def delete_connection_request(
    *,
    store: ObjectStore = Depends(get_store),
    connection_id: str,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Cancel a connection request the viewer sent"""
    connection = await _validate_connection(store, connection_id, identity.id, check_sender=True)
    await cancel_request(store, connection)
    logger.info(f"User {identity.id} cancelled connection request {connection_id}")
    return connection
