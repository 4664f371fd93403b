from typing import Any, Callable, List, Optional, Sequence
import logging
import uuid

from sqlalchemy import String, Table, delete, func, insert, or_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from prolink.core.errors import StoreError
from prolink.db.base import Base
from prolink.store.base import Filter, Row
from prolink.store.filters import AnyOf, Eq, In, Neq, Order

logger = logging.getLogger(__name__)


class SqlAlchemyStore:
    """ObjectStore backed by the SQLAlchemy tables declared in prolink.db.base.

    Every call opens its own short-lived session and runs in Starlette's
    thread pool, so several calls may be awaited concurrently.
    """

    def __init__(self, session_factory: Callable[[], Session], metadata=Base.metadata):
        self.session_factory = session_factory
        self.metadata = metadata

    async def select(
        self,
        table: str,
        filters: Sequence[Filter] = (),
        order: Optional[Order] = None,
        limit: Optional[int] = None,
    ) -> List[Row]:
        def work(db: Session) -> List[Row]:
            tbl = self._table(table)
            stmt = select(tbl).where(*self._clauses(tbl, filters))
            if order is not None:
                column = self._column(tbl, order.column)
                stmt = stmt.order_by(column.desc() if order.descending else column.asc())
            if limit is not None:
                stmt = stmt.limit(limit)
            return [dict(row._mapping) for row in db.execute(stmt)]

        return await self._run(f"select {table}", work)

    async def insert(self, table: str, rows: List[Row]) -> List[Row]:
        if not rows:
            return []

        def work(db: Session) -> List[Row]:
            tbl = self._table(table)
            stored = []
            for row in rows:
                values = self._with_generated_id(tbl, row)
                result = db.execute(insert(tbl).values(**values).returning(*tbl.c))
                stored.append(dict(result.one()._mapping))
            return stored

        return await self._run(f"insert {table}", work)

    async def update(self, table: str, patch: Row, filters: Sequence[Filter]) -> int:
        def work(db: Session) -> int:
            tbl = self._table(table)
            result = db.execute(update(tbl).where(*self._clauses(tbl, filters)).values(**patch))
            return result.rowcount

        return await self._run(f"update {table}", work)

    async def delete(self, table: str, filters: Sequence[Filter]) -> int:
        def work(db: Session) -> int:
            tbl = self._table(table)
            result = db.execute(delete(tbl).where(*self._clauses(tbl, filters)))
            return result.rowcount

        return await self._run(f"delete {table}", work)

    async def count(self, table: str, filters: Sequence[Filter] = ()) -> int:
        def work(db: Session) -> int:
            tbl = self._table(table)
            stmt = select(func.count()).select_from(tbl).where(*self._clauses(tbl, filters))
            return db.execute(stmt).scalar() or 0

        return await self._run(f"count {table}", work)

    async def _run(self, label: str, work: Callable[[Session], Any]) -> Any:
        return await run_in_threadpool(self._run_sync, label, work)

    def _run_sync(self, label: str, work: Callable[[Session], Any]) -> Any:
        with self.session_factory() as db:
            try:
                result = work(db)
                db.commit()
                return result
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Store call '{label}' failed: {e}")
                raise StoreError(f"{label} failed") from e

    def _table(self, name: str) -> Table:
        tbl = self.metadata.tables.get(name)
        if tbl is None:
            raise StoreError(f"Unknown table: {name}")
        return tbl

    def _column(self, tbl: Table, name: str):
        if name not in tbl.c:
            raise StoreError(f"Unknown column: {tbl.name}.{name}")
        return tbl.c[name]

    def _clauses(self, tbl: Table, filters: Sequence[Filter]) -> list:
        return [self._clause(tbl, flt) for flt in filters]

    def _clause(self, tbl: Table, flt: Filter):
        if isinstance(flt, Eq):
            column = self._column(tbl, flt.column)
            return column.is_(None) if flt.value is None else column == flt.value
        if isinstance(flt, Neq):
            column = self._column(tbl, flt.column)
            return column.is_not(None) if flt.value is None else column != flt.value
        if isinstance(flt, In):
            return self._column(tbl, flt.column).in_(flt.values)
        if isinstance(flt, AnyOf):
            return or_(*(self._clause(tbl, Eq(column, value)) for column, value in flt.terms))
        raise StoreError(f"Unsupported filter: {flt!r}")

    @staticmethod
    def _with_generated_id(tbl: Table, row: Row) -> Row:
        """String primary keys are uuid4s generated here, integer keys by the database"""
        values = dict(row)
        if "id" in tbl.c and values.get("id") is None:
            if isinstance(tbl.c.id.type, String):
                values["id"] = str(uuid.uuid4())
            else:
                values.pop("id", None)
        return values
