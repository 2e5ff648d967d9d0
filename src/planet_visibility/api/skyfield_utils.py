"""
Skyfield Utilities

Centralized configuration for the Skyfield ephemeris file location.
Provides a shared Loader per cache directory.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from skyfield.api import Loader

from .core.config import get_settings


logger = logging.getLogger(__name__)


__all__ = [
    "get_skyfield_directory",
    "get_skyfield_loader",
]


def get_skyfield_directory() -> Path:
    """
    Get the Skyfield cache directory.

    Uses the SKYFIELD_DIR setting, which defaults to ~/.skyfield

    Returns:
        Path to Skyfield cache directory
    """
    return get_settings().skyfield_dir


@lru_cache(maxsize=4)
def get_skyfield_loader(directory: Path | None = None) -> Loader:
    """
    Get a shared Skyfield Loader for a cache directory.

    The loader is created once per directory and reused, so all kernels
    are stored in the same location.

    Args:
        directory: Cache directory (default: configured Skyfield directory)

    Returns:
        Configured Loader instance
    """
    skyfield_dir = directory or get_skyfield_directory()
    skyfield_dir.mkdir(parents=True, exist_ok=True)
    logger.debug(f"Using Skyfield directory {skyfield_dir}")
    return Loader(str(skyfield_dir.resolve()), verbose=False)
