"""
Stage-boundary wrappers for store calls.

Each call gets an explicit timeout; a timeout or StoreError becomes a
QueryFailure for reads and a MutationFailure for writes.
"""
from typing import Awaitable, Optional, TypeVar
import asyncio
import logging

from prolink.core.config import settings
from prolink.core.errors import MutationFailure, QueryFailure, StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _guarded(call: Awaitable[T], what: str, failure, timeout: Optional[float]) -> T:
    timeout = settings.STORE_TIMEOUT_SECONDS if timeout is None else timeout
    try:
        return await asyncio.wait_for(call, timeout=timeout)
    except asyncio.TimeoutError as e:
        logger.error(f"Store call timed out after {timeout}s: {what}")
        raise failure(f"Timed out while trying to {what}") from e
    except StoreError as e:
        logger.error(f"Store call failed: {what}: {e}")
        raise failure(f"Could not {what}") from e


async def guarded_read(call: Awaitable[T], what: str, timeout: Optional[float] = None) -> T:
    return await _guarded(call, what, QueryFailure, timeout)


async def guarded_write(call: Awaitable[T], what: str, timeout: Optional[float] = None) -> T:
    return await _guarded(call, what, MutationFailure, timeout)
