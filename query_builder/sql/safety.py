from __future__ import annotations

import re

from ..errors import UnsafeIdentifier

SQL_INJECTION_PATTERNS = [
    r";\s*drop\s+", r";\s*delete\s+", r";\s*insert\s+", r";\s*update\s+",
    r";\s*alter\s+", r";\s*create\s+", r";\s*truncate\s+", r"--",
    r"/\*", r"'\s*or\s+['\"1]", r"'\s*and\s+", r"union\s+select",
    r"exec\s*\(", r"execute\s*\(", r"\bxp_cmdshell\b",
]

# Characters that can end an identifier or start a new statement.
FORBIDDEN_IDENTIFIER_CHARS = {
    ";": "statement separator",
    "'": "single quote",
    '"': "double quote",
    "`": "backtick",
    "\x00": "NUL character",
}

# Statement keywords a read-only SELECT must not contain outside literals.
DANGEROUS_KEYWORDS = [
    "insert", "update", "delete", "drop", "alter", "create",
    "truncate", "grant", "revoke", "exec", "execute",
]

def detect_sql_injection(text: str) -> bool:
    """Heuristic detection of common SQL injection patterns."""
    t = (text or "").lower()
    for pattern in SQL_INJECTION_PATTERNS:
        if re.search(pattern, t, re.IGNORECASE):
            return True
    return False

def check_identifier(name: str) -> str:
    """Reject column/table names that could break out of their position."""
    for ch, reason in FORBIDDEN_IDENTIFIER_CHARS.items():
        if ch in name:
            raise UnsafeIdentifier(name, f"contains {reason}")
    if detect_sql_injection(name):
        raise UnsafeIdentifier(name, "matches an injection pattern")
    low = name.lower()
    for kw in DANGEROUS_KEYWORDS:
        if re.search(rf"\b{kw}\b", low):
            raise UnsafeIdentifier(name, f"contains the keyword {kw.upper()}")
    return name

def safe_select_only(sql: str) -> str:
    """Ensure SQL is a single read-only SELECT statement."""
    low = (sql or "").lower().strip()
    if not low.startswith("select"):
        raise ValueError("Only SELECT queries are allowed.")
    # string literals may legitimately contain these words
    stripped = re.sub(r"'(?:[^']|'')*'", "''", low)
    if ";" in stripped.rstrip(";"):
        raise ValueError("Multiple statements are not allowed.")
    for kw in DANGEROUS_KEYWORDS:
        if re.search(rf"\b{kw}\b", stripped):
            raise ValueError("Unsafe SQL detected.")
    return sql
