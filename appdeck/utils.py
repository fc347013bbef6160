"""Generic helper utilities used across the project."""
from __future__ import annotations

import os
import re
from typing import Optional

_SLUG_CAMEL_RE = re.compile(r"([a-z0-9])([A-Z])")
_SLUG_INVALID_RE = re.compile(r"[^a-z0-9]+")


def resolve_path(value: str, base_dir: str) -> str:
    """Resolve a path relative to base_dir when value is not absolute."""
    if not os.path.isabs(value):
        return os.path.join(base_dir, value)
    return value


def env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def parse_int_env(
    name: str,
    default: int,
    *,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> int:
    """Parse an integer environment variable with optional bounds."""
    try:
        value = int(os.getenv(name, str(default)))
    except ValueError:
        value = default
    if min_value is not None:
        value = max(min_value, value)
    if max_value is not None:
        value = min(max_value, value)
    return value


def parse_float_env(
    name: str,
    default: float,
    *,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> float:
    """Parse a float environment variable with optional bounds."""
    try:
        value = float(os.getenv(name, str(default)))
    except ValueError:
        value = default
    if min_value is not None:
        value = max(min_value, value)
    if max_value is not None:
        value = min(max_value, value)
    return value


def slugify(name: str) -> str:
    """Turn a display name into an identifier ("My Todo" -> "my_todo")."""
    text = _SLUG_CAMEL_RE.sub(r"\1_\2", str(name or "").strip())
    return _SLUG_INVALID_RE.sub("_", text.lower()).strip("_")
