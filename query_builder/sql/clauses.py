"""Rendering helpers shared by every statement type."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..config import Settings
from ..errors import EmptyTableName, InvalidLimit, QueryBuilderError
from ..values import Null, Value, coerce_value
from .safety import check_identifier

logger = logging.getLogger(__name__)


def validate_identifier(name: str, settings: Settings) -> str:
    if not isinstance(name, str):
        raise TypeError(f"Identifiers must be str, got {type(name).__name__}")
    if not name.strip():
        raise QueryBuilderError("Column name must not be empty.")
    if settings.strict_identifiers:
        check_identifier(name)
    return name


def validate_table(table: str, settings: Settings) -> str:
    if not isinstance(table, str):
        raise TypeError(f"Table name must be str, got {type(table).__name__}")
    if not table.strip():
        raise EmptyTableName()
    return validate_identifier(table, settings)


def validate_limit(limit: Any, settings: Settings) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise InvalidLimit(limit)
    if settings.max_limit is not None and limit > settings.max_limit:
        logger.warning("LIMIT %d clamped to configured maximum %d", limit, settings.max_limit)
        return settings.max_limit
    return limit


def put_value(target: Dict[str, Value], column: str, value: Any, settings: Settings) -> None:
    """Insert or overwrite column -> value; an existing column keeps its position."""
    validate_identifier(column, settings)
    target[column] = coerce_value(value)


def render_condition(column: str, value: Value) -> str:
    if isinstance(value, Null):
        return f"{column} IS NULL"
    return f"{column} = {value.render()}"


def where_clause(filters: Dict[str, Value]) -> Optional[str]:
    if not filters:
        return None
    return "WHERE " + " AND ".join(render_condition(c, v) for c, v in filters.items())


def assignments(values: Dict[str, Value]) -> str:
    return ", ".join(f"{c} = {v.render()}" for c, v in values.items())


def order_by_clause(keys: Iterable[Tuple[str, bool]]) -> Optional[str]:
    parts: List[str] = [f"{col} DESC" if desc else col for col, desc in keys]
    if not parts:
        return None
    return "ORDER BY " + ", ".join(parts)


def limit_clause(limit: Optional[int]) -> Optional[str]:
    if limit is None:
        return None
    return f"LIMIT {limit}"


def join_parts(parts: Iterable[Optional[str]]) -> str:
    return " ".join(p for p in parts if p)
