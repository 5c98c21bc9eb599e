"""
Shared fixtures: an in-memory stand-in for the Supabase query builder, a
recording LLM client and a TestClient wired to both through dependency
overrides.
"""

import re
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

backend_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(backend_root))

from poststudio.api.v1.generation import get_custom_tone_lookup
from poststudio.db.repositories import CustomToneRepository
from poststudio.db.supabase import get_supabase_client
from poststudio.llm.openrouter import get_llm_client
from poststudio.main import app
from poststudio.storage.drafts import DraftStore, get_draft_store


# ---------------------------------------------------------------------------
# Fake Supabase
# ---------------------------------------------------------------------------

class FakeResult:
    def __init__(self, data: list[dict[str, Any]], count: Optional[int] = None):
        self.data = data
        self.count = count


def _like_to_regex(pattern: str, ignore_case: bool = False) -> re.Pattern:
    parts = []
    escaped = False
    for char in pattern:
        if escaped:
            parts.append(re.escape(char))
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == "%":
            parts.append(".*")
        elif char == "_":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    flags = re.DOTALL | (re.IGNORECASE if ignore_case else 0)
    return re.compile("".join(parts), flags)


class FakeQuery:
    """Subset of the postgrest query builder used by the repositories."""

    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table_name = table
        self.operation = "select"
        self.columns = "*"
        self.count_mode = None
        self.payload: Any = None
        self.on_conflict: Optional[str] = None
        self.filters: list = []
        self.order_by: list[tuple[str, bool]] = []
        self.limit_count: Optional[int] = None
        self.range_bounds: Optional[tuple[int, int]] = None

    # Operations
    def select(self, columns: str = "*", count: Optional[str] = None):
        self.operation = "select"
        self.columns = columns
        self.count_mode = count
        return self

    def insert(self, data):
        self.operation = "insert"
        self.payload = data
        return self

    def update(self, data):
        self.operation = "update"
        self.payload = data
        return self

    def upsert(self, data, on_conflict: Optional[str] = None):
        self.operation = "upsert"
        self.payload = data
        self.on_conflict = on_conflict
        return self

    def delete(self):
        self.operation = "delete"
        return self

    # Filters and modifiers
    def eq(self, column: str, value):
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def like(self, column: str, pattern: str):
        regex = _like_to_regex(pattern)
        self.filters.append(lambda row: bool(regex.fullmatch(str(row.get(column) or ""))))
        return self

    def ilike(self, column: str, pattern: str):
        regex = _like_to_regex(pattern, ignore_case=True)
        self.filters.append(lambda row: bool(regex.fullmatch(str(row.get(column) or ""))))
        return self

    def or_(self, expression: str):
        clauses = []
        for clause in expression.split(","):
            column, operator, pattern = clause.split(".", 2)
            assert operator == "ilike"
            clauses.append((column, _like_to_regex(pattern, ignore_case=True)))
        self.filters.append(
            lambda row: any(regex.fullmatch(str(row.get(column) or "")) for column, regex in clauses)
        )
        return self

    def order(self, column: str, desc: bool = False):
        self.order_by.append((column, desc))
        return self

    def limit(self, count: int):
        self.limit_count = count
        return self

    def range(self, start: int, end: int):
        self.range_bounds = (start, end)
        return self

    # Execution
    def _matches(self, row: dict[str, Any]) -> bool:
        return all(check(row) for check in self.filters)

    def _project(self, row: dict[str, Any]) -> dict[str, Any]:
        if self.columns.strip() == "*":
            return dict(row)
        names = [name.strip() for name in self.columns.split(",")]
        return {name: row.get(name) for name in names}

    def execute(self) -> FakeResult:
        if self.db.fail_with is not None:
            raise self.db.fail_with

        rows = self.db.tables.setdefault(self.table_name, [])

        if self.operation == "insert":
            items = self.payload if isinstance(self.payload, list) else [self.payload]
            return FakeResult([dict(self.db.add_row(self.table_name, item)) for item in items])

        if self.operation == "upsert":
            items = self.payload if isinstance(self.payload, list) else [self.payload]
            result = []
            for item in items:
                existing = None
                if self.on_conflict:
                    existing = next(
                        (row for row in rows if row.get(self.on_conflict) == item.get(self.on_conflict)),
                        None,
                    )
                if existing is not None:
                    existing.update(item)
                    result.append(dict(existing))
                else:
                    result.append(dict(self.db.add_row(self.table_name, item)))
            return FakeResult(result)

        matched = [row for row in rows if self._matches(row)]

        if self.operation == "update":
            for row in matched:
                row.update(self.payload)
            return FakeResult([dict(row) for row in matched])

        if self.operation == "delete":
            self.db.tables[self.table_name] = [row for row in rows if not self._matches(row)]
            return FakeResult([dict(row) for row in matched])

        for column, desc in reversed(self.order_by):
            present = [row for row in matched if row.get(column) is not None]
            missing = [row for row in matched if row.get(column) is None]
            matched = sorted(present, key=lambda row: row[column], reverse=desc) + missing

        total = len(matched)
        if self.range_bounds is not None:
            start, end = self.range_bounds
            matched = matched[start:end + 1]
        if self.limit_count is not None:
            matched = matched[:self.limit_count]

        count = total if self.count_mode == "exact" else None
        return FakeResult([self._project(row) for row in matched], count)


class FakeSupabase:
    """In-memory tables keyed by name. Rows get an integer id and timestamps."""

    def __init__(self):
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self.fail_with: Optional[Exception] = None
        self._next_id = 1

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def add_row(self, table: str, fields: dict[str, Any]) -> dict[str, Any]:
        now = datetime.now(timezone.utc).isoformat()
        row = {"id": self._next_id, "created_at": now, "updated_at": now, **fields}
        self._next_id += 1
        self.tables.setdefault(table, []).append(row)
        return row


# ---------------------------------------------------------------------------
# Fake LLM
# ---------------------------------------------------------------------------

class FakeLLM:
    """Returns a canned reply (or raises it, for exceptions) and records every call."""

    def __init__(self, reply: Any = ""):
        self.reply = reply
        self.calls: list[dict[str, Any]] = []

    async def complete(self, messages, max_tokens=None) -> str:
        self.calls.append({"messages": messages, "max_tokens": max_tokens})
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply

    @property
    def last_prompt(self) -> str:
        return self.calls[-1]["messages"][-1].content


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_supabase():
    return FakeSupabase()


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def draft_store():
    return DraftStore()


@pytest.fixture
def client(fake_supabase, fake_llm, draft_store):
    app.dependency_overrides[get_supabase_client] = lambda: fake_supabase
    app.dependency_overrides[get_llm_client] = lambda: fake_llm
    app.dependency_overrides[get_draft_store] = lambda: draft_store
    app.dependency_overrides[get_custom_tone_lookup] = lambda: CustomToneRepository(fake_supabase)
    yield TestClient(app)
    app.dependency_overrides.clear()
