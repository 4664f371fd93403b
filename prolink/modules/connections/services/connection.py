from typing import List, Optional
import logging

from prolink.modules.connections.schemas.connection import (
    Connection,
    ConnectionOverview,
    ConnectionStatus,
)
from prolink.modules.notifications.services.notification_events import (
    create_connection_accepted_notification,
    create_connection_request_notification,
)
from prolink.modules.profiles.services.profile import get_profiles_by_user_ids
from prolink.store.base import ObjectStore
from prolink.store.filters import AnyOf, Eq
from prolink.store.guard import guarded_read, guarded_write

logger = logging.getLogger(__name__)

async def get_connection(store: ObjectStore, connection_id: str) -> Optional[Connection]:
    """Get connection by ID"""
    rows = await guarded_read(store.select("connections", [Eq("id", connection_id)], limit=1), "load connection")
    if not rows:
        return None
    return Connection.model_validate(rows[0])

async def _with_profiles(store: ObjectStore, connections: List[Connection]) -> List[Connection]:
    user_ids = list({c.follower_id for c in connections} | {c.following_id for c in connections})
    profiles = {p.user_id: p for p in await get_profiles_by_user_ids(store, user_ids)}
    return [
        c.model_copy(update={
            "follower_profile": profiles.get(c.follower_id),
            "following_profile": profiles.get(c.following_id),
        })
        for c in connections
    ]

async def _select(store: ObjectStore, filters, what: str) -> List[Connection]:
    rows = await guarded_read(store.select("connections", filters), what)
    return [Connection.model_validate(row) for row in rows]

async def get_connection_overview(store: ObjectStore, user_id: str) -> ConnectionOverview:
    """Pending requests received, requests sent, and accepted connections in either direction"""
    pending = await _select(
        store,
        [Eq("following_id", user_id), Eq("status", ConnectionStatus.PENDING.value)],
        "load received connection requests",
    )
    sent = await _select(
        store,
        [Eq("follower_id", user_id), Eq("status", ConnectionStatus.PENDING.value)],
        "load sent connection requests",
    )
    accepted = await _select(
        store,
        [AnyOf(("follower_id", user_id), ("following_id", user_id)), Eq("status", ConnectionStatus.ACCEPTED.value)],
        "load connections",
    )
    enriched = await _with_profiles(store, pending + sent + accepted)
    return ConnectionOverview(
        pending=enriched[:len(pending)],
        sent=enriched[len(pending):len(pending) + len(sent)],
        accepted=enriched[len(pending) + len(sent):],
    )

async def send_connection_request(store: ObjectStore, follower_id: str, following_id: str) -> Connection:
    """Create a pending request and notify the receiver"""
    if follower_id == following_id:
        raise ValueError("Cannot connect with yourself")

    rows = await guarded_write(
        store.insert("connections", [{
            "follower_id": follower_id,
            "following_id": following_id,
            "status": ConnectionStatus.PENDING.value,
        }]),
        "send connection request",
    )
    connection = Connection.model_validate(rows[0])
    await create_connection_request_notification(store, follower_id, following_id, connection.id)
    return connection

async def respond_to_request(store: ObjectStore, connection: Connection, status: ConnectionStatus) -> Connection:
    """Accept or reject a received request; accepting notifies the requester"""
    if status == ConnectionStatus.PENDING:
        raise ValueError("A request can only be accepted or rejected")

    await guarded_write(
        store.update("connections", {"status": status.value}, [Eq("id", connection.id)]),
        f"mark connection {status.value}",
    )
    logger.info(f"Connection {connection.id} {status.value} by user {connection.following_id}")

    if status == ConnectionStatus.ACCEPTED:
        await create_connection_accepted_notification(
            store, connection.following_id, connection.follower_id, connection.id
        )
    return connection.model_copy(update={"status": status})

async def cancel_request(store: ObjectStore, connection: Connection) -> int:
    """Withdraw a sent request"""
    return await guarded_write(
        store.delete("connections", [Eq("id", connection.id)]), "cancel connection request"
    )
