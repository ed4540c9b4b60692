"""Environment-driven defaults."""

from __future__ import annotations
import os

from .errors import InvalidArgument

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

DEFAULT_LOG_LEVEL = "WARNING"


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise InvalidArgument(f"{var} must be a boolean flag, got {raw!r}")


def strict_zip() -> bool:
    """Whether zip_combine rejects unequal lengths when not told otherwise."""
    return flag_from_env("FOLDKIT_STRICT_ZIP", True)


def log_level() -> str:
    raw = os.environ.get("FOLDKIT_LOG_LEVEL")
    if raw is None or not raw.strip():
        return DEFAULT_LOG_LEVEL
    return raw.strip().upper()
