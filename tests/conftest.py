import os
import tempfile
import uuid
from datetime import datetime, timedelta

# Point the app at a throwaway SQLite file before anything imports prolink.db.session
os.environ.setdefault(
    "DATABASE_URL", f"sqlite:///{os.path.join(tempfile.mkdtemp(), 'prolink_test.db')}"
)

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from prolink.core.errors import StoreError
from prolink.db.init_db import create_all_tables
from prolink.store.filters import matches
from prolink.store.sqlalchemy_store import SqlAlchemyStore

UNIQUE_PAIRS = {
    "post_likes": ("post_id", "user_id"),
    "saved_posts": ("post_id", "user_id"),
    "connections": ("follower_id", "following_id"),
}

T0 = datetime(2025, 3, 1, 12, 0, 0)


class MemoryStore:
    """In-memory ObjectStore that records every call"""

    def __init__(self):
        self.tables = {}
        self.calls = []
        self.fail_on = set()

    def seed(self, table, *rows):
        for row in rows:
            self.tables.setdefault(table, []).append(self._fill_defaults(row))

    def rows(self, table):
        return list(self.tables.get(table, []))

    def calls_for(self, op, table=None):
        return [c for c in self.calls if c[0] == op and (table is None or c[1] == table)]

    def _check(self, op, table):
        self.calls.append((op, table))
        if (op, table) in self.fail_on or (op, "*") in self.fail_on:
            raise StoreError(f"{op} {table} failed")

    def _fill_defaults(self, row):
        row = dict(row)
        row.setdefault("id", str(uuid.uuid4()))
        row.setdefault("created_at", datetime.utcnow())
        return row

    def _matching(self, table, filters):
        return [row for row in self.tables.get(table, []) if all(matches(row, f) for f in filters)]

    async def select(self, table, filters=(), order=None, limit=None):
        self._check("select", table)
        rows = [dict(row) for row in self._matching(table, filters)]
        if order is not None:
            rows.sort(key=lambda r: r[order.column], reverse=order.descending)
        if limit is not None:
            rows = rows[:limit]
        return rows

    async def insert(self, table, rows):
        self._check("insert", table)
        stored = []
        for row in rows:
            row = self._fill_defaults(row)
            pair = UNIQUE_PAIRS.get(table)
            if pair and any(all(r[c] == row[c] for c in pair) for r in self.tables.get(table, [])):
                raise StoreError(f"duplicate {table} row")
            self.tables.setdefault(table, []).append(row)
            stored.append(dict(row))
        return stored

    async def update(self, table, patch, filters):
        self._check("update", table)
        matched = self._matching(table, filters)
        for row in matched:
            row.update(patch)
        return len(matched)

    async def delete(self, table, filters):
        self._check("delete", table)
        matched = self._matching(table, filters)
        self.tables[table] = [row for row in self.tables.get(table, []) if row not in matched]
        return len(matched)

    async def count(self, table, filters=()):
        self._check("count", table)
        return len(self._matching(table, filters))


def make_post(post_id, author_id, market_id, minutes, content="hola"):
    return {
        "id": post_id,
        "user_id": author_id,
        "market_id": market_id,
        "content": content,
        "image_url": None,
        "created_at": T0 + timedelta(minutes=minutes),
    }


def make_profile(user_id, full_name):
    return {"id": f"profile-{user_id}", "user_id": user_id, "username": user_id, "full_name": full_name}


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def feed_store(store):
    """Two posts in market 5 (post 1 newer), one in market 7, with profiles for the authors"""
    store.seed(
        "posts",
        make_post("p1", "author", 5, minutes=10),
        make_post("p2", "author", 5, minutes=5),
        make_post("p3", "other", 7, minutes=20),
    )
    store.seed("profiles", make_profile("author", "Ana Autora"), make_profile("viewer", "Victor Viewer"))
    return store


@pytest.fixture
def sql_store(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'store.db'}", connect_args={"check_same_thread": False}
    )
    assert create_all_tables(bind=engine)
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield SqlAlchemyStore(session_factory)
    engine.dispose()
