"""
Environment-driven settings.

Values come from the process environment, falling back to a .env file
(searched from the working directory) for anything not set there:

- QUERY_BUILDER_STRICT_IDENTIFIERS  reject unsafe column/table names (default 1)
- QUERY_BUILDER_MAX_LIMIT           clamp LIMIT values above this cap (default unset)
- QUERY_BUILDER_LOG_LEVEL           level for the package logger (default unset)
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import dotenv_values, find_dotenv

_FALSE_WORDS = {"0", "false", "no", "off"}

_settings: Optional["Settings"] = None


@dataclass(frozen=True)
class Settings:
    strict_identifiers: bool = True
    max_limit: Optional[int] = None
    log_level: Optional[str] = None


def _flag(env: Mapping[str, Optional[str]], name: str, default: bool) -> bool:
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    return raw.lower() not in _FALSE_WORDS


def _max_limit(env: Mapping[str, Optional[str]]) -> Optional[int]:
    raw = (env.get("QUERY_BUILDER_MAX_LIMIT") or "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"QUERY_BUILDER_MAX_LIMIT must be an integer, got {raw!r}.")
    if value < 0:
        raise ValueError("QUERY_BUILDER_MAX_LIMIT must not be negative.")
    return value


def load_settings(env_file: Union[str, Path, None] = None, dotenv: bool = True) -> Settings:
    """Build Settings from os.environ, with .env values as fallback."""
    env = {}
    if dotenv:
        path = env_file or find_dotenv(usecwd=True)
        if path:
            env.update(dotenv_values(path))
    env.update(os.environ)
    level = (env.get("QUERY_BUILDER_LOG_LEVEL") or "").strip().upper() or None
    return Settings(
        strict_identifiers=_flag(env, "QUERY_BUILDER_STRICT_IDENTIFIERS", True),
        max_limit=_max_limit(env),
        log_level=level,
    )


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply the configured log level to the package logger."""
    settings = settings or get_settings()
    if settings.log_level:
        logging.getLogger("query_builder").setLevel(settings.log_level)
