"""SQL statement builders."""
from .select import SelectQuery
from .insert import InsertQuery
from .update import UpdateQuery
from .delete import DeleteQuery
from .safety import check_identifier, detect_sql_injection, safe_select_only

__all__ = [
    "SelectQuery",
    "InsertQuery",
    "UpdateQuery",
    "DeleteQuery",
    "check_identifier",
    "detect_sql_injection",
    "safe_select_only",
]
