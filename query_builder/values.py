"""
Literal SQL values.

Every value renders to a valid SQL literal:
- Varchar is single-quoted, embedded single quotes are doubled
- Booleans are written in caps (TRUE / FALSE) so they stand out in queries
- Integers are range-checked against their declared column width
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Tuple

from .errors import ValueOutOfRange


class Value:
    """Base class for literal values."""

    def render(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()


def quote_text(text: str) -> str:
    return "'" + text.replace("'", "''") + "'"


@dataclass(frozen=True)
class Varchar(Value):
    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"Varchar expects str, got {type(self.text).__name__}")

    def render(self) -> str:
        return quote_text(self.text)


@dataclass(frozen=True)
class Boolean(Value):
    flag: bool

    def __post_init__(self) -> None:
        if not isinstance(self.flag, bool):
            raise TypeError(f"Boolean expects bool, got {type(self.flag).__name__}")

    def render(self) -> str:
        return "TRUE" if self.flag else "FALSE"


@dataclass(frozen=True)
class Null(Value):
    def render(self) -> str:
        return "NULL"


@dataclass(frozen=True)
class _IntegerValue(Value):
    number: int

    bits: ClassVar[int] = 64
    signed: ClassVar[bool] = True

    @classmethod
    def bounds(cls) -> Tuple[int, int]:
        if cls.signed:
            return -(1 << (cls.bits - 1)), (1 << (cls.bits - 1)) - 1
        return 0, (1 << cls.bits) - 1

    def __post_init__(self) -> None:
        # bool is an int subclass; Boolean covers it
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise TypeError(
                f"{type(self).__name__} expects int, got {type(self.number).__name__}"
            )
        low, high = self.bounds()
        if not low <= self.number <= high:
            raise ValueOutOfRange(type(self).__name__, self.number, low, high)

    def render(self) -> str:
        return str(self.number)


class Tinyint(_IntegerValue):
    bits = 8


class UnsignedTinyint(_IntegerValue):
    bits = 8
    signed = False


class Smallint(_IntegerValue):
    bits = 16


class UnsignedSmallint(_IntegerValue):
    bits = 16
    signed = False


class Int(_IntegerValue):
    bits = 32


class UnsignedInt(_IntegerValue):
    bits = 32
    signed = False


class Bigint(_IntegerValue):
    bits = 64


class UnsignedBigint(_IntegerValue):
    bits = 64
    signed = False


Integer = Bigint
Bool = Boolean


def coerce_value(obj: Any) -> Value:
    """Map a plain Python object to its Value (None, bool, int, str)."""
    if isinstance(obj, Value):
        return obj
    if obj is None:
        return Null()
    if isinstance(obj, bool):
        return Boolean(obj)
    if isinstance(obj, int):
        return Bigint(obj)
    if isinstance(obj, str):
        return Varchar(obj)
    raise TypeError(f"Cannot use {type(obj).__name__} as a SQL value")
