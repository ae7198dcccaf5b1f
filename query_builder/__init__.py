# query_builder - fluent SQL statement builder
"""
query_builder - build SQL query strings with chained calls.
"""

__version__ = "0.1.0"

import logging

from .config import Settings, configure_logging, get_settings, load_settings, reset_settings
from .errors import (
    EmptyColumnList,
    EmptyTableName,
    InvalidLimit,
    QueryBuilderError,
    QueryIncomplete,
    UnsafeIdentifier,
    ValueOutOfRange,
)
from .values import (
    Bigint,
    Bool,
    Boolean,
    Int,
    Integer,
    Null,
    Smallint,
    Tinyint,
    UnsignedBigint,
    UnsignedInt,
    UnsignedSmallint,
    UnsignedTinyint,
    Value,
    Varchar,
    coerce_value,
)
from .sql import DeleteQuery, InsertQuery, SelectQuery, UpdateQuery

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "SelectQuery",
    "InsertQuery",
    "UpdateQuery",
    "DeleteQuery",
    "Value",
    "Varchar",
    "Boolean",
    "Bool",
    "Null",
    "Tinyint",
    "UnsignedTinyint",
    "Smallint",
    "UnsignedSmallint",
    "Int",
    "UnsignedInt",
    "Bigint",
    "UnsignedBigint",
    "Integer",
    "coerce_value",
    "QueryBuilderError",
    "EmptyColumnList",
    "EmptyTableName",
    "QueryIncomplete",
    "InvalidLimit",
    "ValueOutOfRange",
    "UnsafeIdentifier",
    "Settings",
    "load_settings",
    "get_settings",
    "reset_settings",
    "configure_logging",
]
