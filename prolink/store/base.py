"""
Interface between the feed services and whatever persists the rows.

Services never touch SQLAlchemy sessions directly; they receive an
ObjectStore and speak in table names, plain dict rows and the
predicates from prolink.store.filters. Implementations raise
prolink.core.errors.StoreError for any failed call.
"""
from typing import Any, Dict, List, Optional, Protocol, Sequence, Union

from prolink.store.filters import AnyOf, Eq, In, Neq, Order

Row = Dict[str, Any]
Filter = Union[Eq, Neq, In, AnyOf]


class ObjectStore(Protocol):
    async def select(
        self,
        table: str,
        filters: Sequence[Filter] = (),
        order: Optional[Order] = None,
        limit: Optional[int] = None,
    ) -> List[Row]:
        """Rows of `table` matching every filter"""
        ...

    async def insert(self, table: str, rows: List[Row]) -> List[Row]:
        """Insert rows and return them as stored (generated ids and defaults filled in)"""
        ...

    async def update(self, table: str, patch: Row, filters: Sequence[Filter]) -> int:
        """Apply `patch` to matching rows, returning how many changed"""
        ...

    async def delete(self, table: str, filters: Sequence[Filter]) -> int:
        """Delete matching rows, returning how many were removed (zero is fine)"""
        ...

    async def count(self, table: str, filters: Sequence[Filter] = ()) -> int:
        ...
