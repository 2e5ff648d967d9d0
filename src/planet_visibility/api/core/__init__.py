"""Core subpackage for shared constants, configuration, utilities, and exceptions."""

from planet_visibility.api.core.config import Settings, get_settings
from planet_visibility.api.core.utils import (
    azimuth_to_compass,
    ensure_utc,
    format_instant,
)


__all__ = [
    "Settings",
    "azimuth_to_compass",
    "ensure_utc",
    "format_instant",
    "get_settings",
]
