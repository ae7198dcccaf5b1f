from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from ..config import Settings, get_settings
from ..errors import QueryIncomplete
from ..values import Value
from . import clauses

logger = logging.getLogger(__name__)


class InsertQuery:
    """INSERT of a single row: INSERT INTO users(name) VALUES('greg')."""

    def __init__(self, table: str, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._table = clauses.validate_table(table, self._settings)
        self._values: Dict[str, Value] = {}

    @classmethod
    def into(cls, table: str, settings: Optional[Settings] = None) -> "InsertQuery":
        return cls(table, settings=settings)

    @property
    def table(self) -> str:
        return self._table

    @property
    def values(self) -> Mapping[str, Value]:
        return MappingProxyType(self._values)

    def value(self, column: str, value: Any) -> "InsertQuery":
        """Set the value inserted into `column` (last write wins)."""
        clauses.put_value(self._values, column, value, self._settings)
        return self

    def as_string(self) -> str:
        if not self._values:
            raise QueryIncomplete("values")
        columns = ", ".join(self._values)
        literals = ", ".join(v.render() for v in self._values.values())
        sql = f"INSERT INTO {self._table}({columns}) VALUES({literals})"
        logger.debug("Rendered insert: %s", sql)
        return sql

    def __str__(self) -> str:
        return self.as_string()
