"""Runtime configuration for Sparkler.

Settings are read from ``SPARKLER_*`` environment variables every time
:func:`load_settings` is called so tests can adjust them with
``monkeypatch.setenv`` without reloading modules.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_TEXT = "pigeon"
DEFAULT_CACHE_MAX_BYTES = 512 * 1024 * 1024


@dataclass(frozen=True)
class Settings:
    default_text: str = DEFAULT_TEXT
    cache_dir: str = ".cache"
    cache_max_bytes: int = DEFAULT_CACHE_MAX_BYTES
    font_path: Optional[str] = None
    sparkles_path: Optional[str] = None
    log_level: str = "INFO"
    log_dir: str = "logs"
    server_name: str = "0.0.0.0"
    port: int = 3000


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_path(name: str) -> Optional[str]:
    raw = (os.getenv(name) or "").strip()
    return os.path.expanduser(raw) if raw else None


def load_settings() -> Settings:
    """Return the current settings built from the environment."""

    return Settings(
        default_text=os.getenv("SPARKLER_DEFAULT_TEXT", DEFAULT_TEXT).strip() or DEFAULT_TEXT,
        cache_dir=os.path.expanduser(os.getenv("SPARKLER_CACHE_DIR", ".cache")),
        cache_max_bytes=_env_int("SPARKLER_CACHE_MAX_BYTES", DEFAULT_CACHE_MAX_BYTES),
        font_path=_env_path("SPARKLER_FONT_PATH"),
        sparkles_path=_env_path("SPARKLER_SPARKLES_PATH"),
        log_level=os.getenv("SPARKLER_LOG_LEVEL", "INFO").upper(),
        log_dir=os.path.expanduser(os.getenv("SPARKLER_LOG_DIR", "logs")),
        server_name=os.getenv("SPARKLER_SERVER_NAME", "0.0.0.0"),
        port=_env_int("SPARKLER_PORT", 3000),
    )


__all__ = ["DEFAULT_TEXT", "Settings", "load_settings"]
