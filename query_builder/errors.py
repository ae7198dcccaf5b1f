"""Exceptions raised while building or rendering queries."""
from __future__ import annotations


class QueryBuilderError(ValueError):
    """Base class for every error raised by query_builder."""


class EmptyColumnList(QueryBuilderError):
    def __init__(self) -> None:
        super().__init__("SELECT needs at least one column.")


class EmptyTableName(QueryBuilderError):
    def __init__(self) -> None:
        super().__init__("Table name must not be empty.")


class QueryIncomplete(QueryBuilderError):
    """Raised at render time when a required part of the statement is missing."""

    def __init__(self, missing: str) -> None:
        self.missing = missing
        super().__init__(f"Query is incomplete: {missing} not set.")


class InvalidLimit(QueryBuilderError):
    def __init__(self, limit: object) -> None:
        self.limit = limit
        super().__init__(f"LIMIT must be a non-negative integer, got {limit!r}.")


class ValueOutOfRange(QueryBuilderError):
    def __init__(self, type_name: str, number: int, low: int, high: int) -> None:
        self.type_name = type_name
        self.number = number
        super().__init__(f"{type_name} must be in [{low}, {high}], got {number}.")


class UnsafeIdentifier(QueryBuilderError):
    def __init__(self, identifier: str, reason: str) -> None:
        self.identifier = identifier
        super().__init__(f"Unsafe identifier {identifier!r}: {reason}.")
