"""
SELECT statements.

    q = SelectQuery.select(["user"]).from_("users")
    q.add_filter("name", Varchar("greg"))
    q.limit(1)
    q.as_string()  # "SELECT user FROM users WHERE name = 'greg' LIMIT 1"

Argument errors (empty column list, empty table, bad limit) are raised by the
offending call. A missing table is only reported when the query is rendered.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..config import Settings, get_settings
from ..errors import EmptyColumnList, QueryIncomplete
from ..values import Value
from . import clauses

logger = logging.getLogger(__name__)


class SelectQuery:
    """A SELECT over one table with equality filters, ordering and an optional LIMIT."""

    def __init__(self, columns: Sequence[str], settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        if isinstance(columns, str):
            columns = [columns]
        columns = list(columns)
        if not columns:
            raise EmptyColumnList()
        for col in columns:
            if isinstance(col, str) and not col.strip():
                raise EmptyColumnList()
            clauses.validate_identifier(col, self._settings)
        self._columns: List[str] = columns
        self._table = ""
        self._filters: Dict[str, Value] = {}
        self._order_by: List[Tuple[str, bool]] = []
        self._limit: Optional[int] = None

    @classmethod
    def select(cls, columns: Sequence[str], settings: Optional[Settings] = None) -> "SelectQuery":
        """Start a query selecting `columns` (in the given order)."""
        return cls(columns, settings=settings)

    def from_(self, table: str) -> "SelectQuery":
        """Set the table to select from."""
        self._table = clauses.validate_table(table, self._settings)
        return self

    @property
    def columns(self) -> List[str]:
        return list(self._columns)

    @property
    def table(self) -> str:
        return self._table

    @property
    def filters(self) -> Mapping[str, Value]:
        return MappingProxyType(self._filters)

    def is_complete(self) -> bool:
        return bool(self._table)

    def add_filter(self, column: str, value: Any) -> "SelectQuery":
        """
        Add `column = value` to the WHERE clause.

        Adding a filter on a column that already has one replaces the old value;
        the column keeps its original position in the clause.
        """
        clauses.put_value(self._filters, column, value, self._settings)
        return self

    def remove_filter(self, column: str) -> "SelectQuery":
        self._filters.pop(column, None)
        return self

    def order_by(self, column: str, descending: bool = False) -> "SelectQuery":
        clauses.validate_identifier(column, self._settings)
        self._order_by.append((column, bool(descending)))
        return self

    def limit(self, n: int) -> "SelectQuery":
        """Cap the number of returned rows. Calling it again replaces the cap."""
        self._limit = clauses.validate_limit(n, self._settings)
        return self

    def has_limit(self) -> bool:
        return self._limit is not None

    def get_limit(self) -> Optional[int]:
        return self._limit

    def clear_limit(self) -> "SelectQuery":
        self._limit = None
        return self

    def as_string(self) -> str:
        if not self._table:
            raise QueryIncomplete("table")
        sql = clauses.join_parts([
            "SELECT " + ", ".join(self._columns),
            "FROM " + self._table,
            clauses.where_clause(self._filters),
            clauses.order_by_clause(self._order_by),
            clauses.limit_clause(self._limit),
        ])
        logger.debug("Rendered select: %s", sql)
        return sql

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return (
            f"SelectQuery(columns={self._columns!r}, table={self._table!r}, "
            f"filters={dict(self._filters)!r}, order_by={self._order_by!r}, "
            f"limit={self._limit!r})"
        )
