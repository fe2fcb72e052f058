"""In-memory stand-in for the subset of the Supabase query builder the services use."""

import copy
import re
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

EMBED_PATTERN = re.compile(r"^(\w+):(\w+)\(\*\)$")

# embedded alias -> (local foreign key column, remote column)
EMBEDS = {
    "buyer": ("buyer_id", "id"),
}


class FakeResult:
    def __init__(self, data: List[Dict[str, Any]], count: Optional[int] = None):
        self.data = data
        self.count = count


class FakeQuery:
    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table_name = table
        self.action = "select"
        self.columns = ["*"]
        self.embeds = []
        self.count_mode = None
        self.filters = []
        self.order_by = None
        self.limit_value = None
        self.offset_value = 0
        self.payload = None

    # builders

    def select(self, *columns, count=None):
        tokens = [c.strip() for c in ",".join(columns).split(",") if c.strip()]
        self.columns = []
        for token in tokens:
            match = EMBED_PATTERN.match(token)
            if match:
                self.embeds.append((match.group(1), match.group(2)))
            else:
                self.columns.append(token)
        self.count_mode = count
        return self

    def insert(self, payload):
        self.action = "insert"
        self.payload = payload
        return self

    def update(self, payload):
        self.action = "update"
        self.payload = payload
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, column, value):
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def or_(self, expression):
        clauses = []
        for part in expression.split(","):
            column, operator, pattern = part.split(".", 2)
            assert operator == "ilike"
            needle = pattern.strip("%").lower()
            clauses.append((column, needle))
        self.filters.append(
            lambda row: any(needle in str(row.get(column) or "").lower() for column, needle in clauses)
        )
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def limit(self, size):
        self.limit_value = size
        return self

    def offset(self, size):
        self.offset_value = size
        return self

    # execution

    def execute(self) -> FakeResult:
        failure = self.db.failures.get(self.table_name)
        if failure is not None:
            raise failure
        rows = self.db.tables.setdefault(self.table_name, [])

        if self.action == "insert":
            payloads = self.payload if isinstance(self.payload, list) else [self.payload]
            inserted = []
            for payload in payloads:
                now = datetime.now(timezone.utc).isoformat()
                row = {"id": str(uuid.uuid4()), "created_at": now, "updated_at": now}
                row.update(copy.deepcopy(payload))
                rows.append(row)
                inserted.append(copy.deepcopy(row))
            return FakeResult(inserted)

        matched = [row for row in rows if all(f(row) for f in self.filters)]

        if self.action == "update":
            for row in matched:
                row.update(copy.deepcopy(self.payload))
            return FakeResult(copy.deepcopy(matched))

        if self.action == "delete":
            self.db.tables[self.table_name] = [row for row in rows if row not in matched]
            return FakeResult(copy.deepcopy(matched))

        if self.order_by:
            column, desc = self.order_by
            matched = sorted(matched, key=lambda row: str(row.get(column) or ""), reverse=desc)
        total = len(matched)
        matched = matched[self.offset_value:]
        if self.limit_value is not None:
            matched = matched[:self.limit_value]

        data = [self._project(row) for row in matched]
        return FakeResult(data, count=total if self.count_mode else None)

    def _project(self, row: Dict[str, Any]) -> Dict[str, Any]:
        if "*" in self.columns:
            projected = copy.deepcopy(row)
        else:
            projected = {column: copy.deepcopy(row.get(column)) for column in self.columns}
        for alias, remote_table in self.embeds:
            local_key, remote_key = EMBEDS[alias]
            target = next(
                (r for r in self.db.tables.get(remote_table, []) if r.get(remote_key) == row.get(local_key)),
                None,
            )
            projected[alias] = copy.deepcopy(target)
        return projected


class FakeSupabase:
    def __init__(self, tables: Optional[Dict[str, List[Dict[str, Any]]]] = None):
        self.tables = copy.deepcopy(tables or {})
        self.failures: Dict[str, Exception] = {}

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def fail(self, table: str, exc: Exception) -> None:
        """Make every query against `table` raise `exc`."""
        self.failures[table] = exc
