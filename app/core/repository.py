"""
Generic table-scoped repository over the Supabase query builder.

Every entity module wraps one or more of these instead of repeating the
list/get/create/update/delete pattern per table.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, Type, TypeVar

from httpx import HTTPError
from postgrest.exceptions import APIError
from pydantic import BaseModel
from supabase import Client

from app.core.exceptions import ConflictError, NotFoundError, PersistenceError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

# PostgREST/Postgres codes with a meaning for callers
NO_ROWS = "PGRST116"
INVALID_TEXT_REPRESENTATION = "22P02"
UNIQUE_VIOLATION = "23505"


def run_query(query, table: str, action: str):
    """Execute a built query, translating store failures into PersistenceError/ConflictError."""
    try:
        return query.execute()
    except APIError as e:
        logger.error("Supabase %s on %s failed: %s", action, table, e.message)
        if e.code == UNIQUE_VIOLATION:
            raise ConflictError(f"Duplicate value in {table}", code=e.code)
        raise PersistenceError(f"Failed to {action} {table}: {e.message}", code=e.code)
    except HTTPError as e:
        logger.error("Supabase %s on %s unreachable: %s", action, table, e)
        raise PersistenceError(f"Failed to {action} {table}: store unreachable")


class SupabaseRepository(Generic[T]):
    def __init__(
        self,
        supabase: Client,
        table: str,
        schema: Type[T],
        key: str = "id",
        columns: str = "*",
        order_by: Sequence[Tuple[str, bool]] = (("created_at", True),),
    ):
        self.supabase = supabase
        self.table = table
        self.schema = schema
        self.key = key
        self.columns = columns
        self.order_by = order_by

    def _query(self):
        return self.supabase.table(self.table)

    def _to_schema(self, row: Dict[str, Any]) -> T:
        return self.schema(**row)

    def list(self, limit: Optional[int] = None, **filters: Any) -> List[T]:
        """Rows ordered by the configured columns, optionally filtered by equality."""
        query = self._query().select(self.columns)
        for column, value in filters.items():
            if value is not None:
                query = query.eq(column, value)
        for column, desc in self.order_by:
            query = query.order(column, desc=desc)
        if limit:
            query = query.limit(limit)
        result = run_query(query, self.table, "list")
        return [self._to_schema(row) for row in result.data or []]

    def find(self, key_value: Any) -> Optional[Dict[str, Any]]:
        """Raw row for key_value, or None."""
        query = self._query().select(self.columns).eq(self.key, key_value).limit(1)
        try:
            result = run_query(query, self.table, "get")
        except PersistenceError as e:
            # A malformed key (e.g. a slug where a uuid is expected) cannot match any row
            if e.code in (NO_ROWS, INVALID_TEXT_REPRESENTATION):
                return None
            raise
        return result.data[0] if result.data else None

    def get(self, key_value: Any) -> T:
        row = self.find(key_value)
        if row is None:
            raise NotFoundError(f"{self.schema.__name__.replace('Response', '')} not found")
        return self._to_schema(row)

    def create(self, fields: Dict[str, Any]) -> T:
        result = run_query(self._query().insert(fields), self.table, "create")
        if not result.data:
            raise PersistenceError(f"Failed to create {self.table}: no row returned")
        return self._to_schema(result.data[0])

    def update(self, key_value: Any, fields: Dict[str, Any]) -> T:
        query = self._query().update(fields).eq(self.key, key_value)
        result = run_query(query, self.table, "update")
        if not result.data:
            raise NotFoundError(f"{self.schema.__name__.replace('Response', '')} not found")
        return self._to_schema(result.data[0])

    def delete(self, key_value: Any) -> int:
        """Hard delete; returns the number of rows removed (0 for an unknown key)."""
        query = self._query().delete().eq(self.key, key_value)
        result = run_query(query, self.table, "delete")
        return len(result.data or [])

    def count(self, **filters: Any) -> int:
        query = self._query().select(self.key, count="exact")
        for column, value in filters.items():
            query = query.eq(column, value)
        result = run_query(query, self.table, "count")
        return result.count or 0


class SingletonRepository(Generic[T]):
    """Single-row settings table: save() updates the existing row or inserts the first one."""

    def __init__(self, supabase: Client, table: str, schema: Type[T]):
        self.supabase = supabase
        self.table = table
        self.schema = schema

    def find(self) -> Optional[Dict[str, Any]]:
        query = self.supabase.table(self.table).select("*").order("id").limit(1)
        result = run_query(query, self.table, "get")
        return result.data[0] if result.data else None

    def get(self) -> Optional[T]:
        row = self.find()
        return self.schema(**row) if row else None

    def save(self, fields: Dict[str, Any]) -> T:
        existing = self.find()
        if existing:
            query = self.supabase.table(self.table).update(fields).eq("id", existing["id"])
            result = run_query(query, self.table, "update")
        else:
            result = run_query(self.supabase.table(self.table).insert(fields), self.table, "create")
        if not result.data:
            raise PersistenceError(f"Failed to save {self.table}: no row returned")
        return self.schema(**result.data[0])
