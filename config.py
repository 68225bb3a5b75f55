"""Environment configuration for the OKLCH converter server."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name, None)
    if value is None:
        return default
    stripped = value.strip()
    if stripped == "":
        return default
    return stripped


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(float(value))
    except ValueError as exc:
        raise ValueError(f"Environment value for {name!r} must be an integer") from exc


@dataclass
class Settings:
    host: str
    port: int
    log_level: str
    mount_mcp: bool

    @staticmethod
    def load() -> "Settings":
        return Settings(
            host=_get_env("OKLCH_SERVER_HOST", "0.0.0.0"),
            port=_get_int("OKLCH_SERVER_PORT", 8973),
            log_level=(_get_env("OKLCH_LOG_LEVEL", "INFO") or "INFO").upper(),
            mount_mcp=_get_bool("OKLCH_MOUNT_MCP", True),
        )
