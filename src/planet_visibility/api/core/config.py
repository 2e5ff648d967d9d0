"""
Runtime Configuration

Settings are read from environment variables. A ``.env`` file in the
working directory is loaded first when present.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv


logger = logging.getLogger(__name__)


__all__ = [
    "Settings",
    "get_settings",
]


_TRUE_VALUES = ("true", "1", "yes")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={value!r}, using {default}")
        return default


@dataclass(frozen=True, slots=True)
class Settings:
    """Application settings."""

    skyfield_dir: Path  # Where SPICE kernels are cached
    ephemeris_file: str = "de440s.bsp"
    log_level: str = "INFO"
    cache_max_age: int = 60  # Seconds a shared cache may serve a report
    cache_stale_while_revalidate: int = 120
    rate_limit_enabled: bool = False
    rate_limit_per_minute: int = 60
    request_logging_enabled: bool = True

    @property
    def cache_control(self) -> str:
        """Cache-Control header value for visibility responses."""
        return f"public, s-maxage={self.cache_max_age}, stale-while-revalidate={self.cache_stale_while_revalidate}"

    @classmethod
    def from_env(cls) -> Settings:
        """
        Build settings from environment variables.

        Checks SKYFIELD_DIR first for the kernel directory, then defaults
        to ~/.skyfield.

        Returns:
            Settings populated from the environment
        """
        env_dir = os.environ.get("SKYFIELD_DIR")
        skyfield_dir = Path(env_dir).expanduser().resolve() if env_dir else Path.home() / ".skyfield"

        return cls(
            skyfield_dir=skyfield_dir,
            ephemeris_file=os.getenv("PLANET_VISIBILITY_EPHEMERIS", "de440s.bsp"),
            log_level=os.getenv("PLANET_VISIBILITY_LOG_LEVEL", "INFO").upper(),
            cache_max_age=_env_int("PLANET_VISIBILITY_CACHE_MAX_AGE", 60),
            cache_stale_while_revalidate=_env_int("PLANET_VISIBILITY_CACHE_STALE", 120),
            rate_limit_enabled=_env_bool("RATE_LIMIT_ENABLED", False),
            rate_limit_per_minute=_env_int("RATE_LIMIT_PER_MINUTE", 60),
            request_logging_enabled=_env_bool("LOGGING_ENABLED", True),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process, reading ``.env`` if present."""
    load_dotenv()
    return Settings.from_env()
