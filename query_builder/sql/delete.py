from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from ..config import Settings, get_settings
from ..values import Value
from . import clauses

logger = logging.getLogger(__name__)


class DeleteQuery:
    """DELETE FROM <table> [WHERE ...] [LIMIT n]. No filter means every row."""

    def __init__(self, table: str, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._table = clauses.validate_table(table, self._settings)
        self._filters: Dict[str, Value] = {}
        self._limit: Optional[int] = None

    @classmethod
    def from_(cls, table: str, settings: Optional[Settings] = None) -> "DeleteQuery":
        return cls(table, settings=settings)

    @property
    def table(self) -> str:
        return self._table

    @property
    def filters(self) -> Mapping[str, Value]:
        return MappingProxyType(self._filters)

    def add_filter(self, column: str, value: Any) -> "DeleteQuery":
        clauses.put_value(self._filters, column, value, self._settings)
        return self

    def remove_filter(self, column: str) -> "DeleteQuery":
        self._filters.pop(column, None)
        return self

    def limit(self, n: int) -> "DeleteQuery":
        self._limit = clauses.validate_limit(n, self._settings)
        return self

    def has_limit(self) -> bool:
        return self._limit is not None

    def get_limit(self) -> Optional[int]:
        return self._limit

    def clear_limit(self) -> "DeleteQuery":
        self._limit = None
        return self

    def as_string(self) -> str:
        sql = clauses.join_parts([
            "DELETE FROM " + self._table,
            clauses.where_clause(self._filters),
            clauses.limit_clause(self._limit),
        ])
        logger.debug("Rendered delete: %s", sql)
        return sql

    def __str__(self) -> str:
        return self.as_string()
