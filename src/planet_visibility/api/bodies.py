"""
Planet Descriptors

Static display metadata for the seven planets, in canonical report order.
"""

from __future__ import annotations

from dataclasses import dataclass


__all__ = [
    "PLANETS",
    "BodyDescriptor",
    "get_planet",
]


@dataclass(frozen=True, slots=True)
class BodyDescriptor:
    """Display metadata for a planet."""

    key: str  # Ephemeris body key
    name: str
    symbol: str
    color: str  # CSS hex color for the widget
    tip: str  # Observing tip


PLANETS: tuple[BodyDescriptor, ...] = (
    BodyDescriptor(
        key="mercury",
        name="Mercury",
        symbol="☿",
        color="#9e9e9e",
        tip="Best viewed at dusk (eastern elongation) or dawn (western elongation). "
        "Never visible more than 2 hours from the Sun.",
    ),
    BodyDescriptor(
        key="venus",
        name="Venus",
        symbol="♀",
        color="#fdd835",
        tip="The brightest planet. Visible as the 'evening star' or 'morning star'. "
        "Shows phases like the Moon when viewed through a telescope.",
    ),
    BodyDescriptor(
        key="mars",
        name="Mars",
        symbol="♂",
        color="#ef5350",
        tip="Look for its distinctive red-orange tint. "
        "Brightest at opposition every ~26 months when Earth passes between it and the Sun.",
    ),
    BodyDescriptor(
        key="jupiter",
        name="Jupiter",
        symbol="♃",
        color="#ff9800",
        tip="Brightest planet after Venus. "
        "The 4 Galilean moons (Io, Europa, Ganymede, Callisto) are visible through binoculars.",
    ),
    BodyDescriptor(
        key="saturn",
        name="Saturn",
        symbol="♄",
        color="#ffc107",
        tip="Rings are visible through even a small telescope. "
        "Look for moon Titan nearby. Rings are tilted ~27° from our perspective.",
    ),
    BodyDescriptor(
        key="uranus",
        name="Uranus",
        symbol="⛢",
        color="#80deea",
        tip="Barely visible to the naked eye under very dark skies. "
        "Appears as a pale blue-green disc through a telescope. Rotates on its side.",
    ),
    BodyDescriptor(
        key="neptune",
        name="Neptune",
        symbol="♆",
        color="#7c4dff",
        tip="Requires binoculars or a telescope to observe. "
        "Appears as a tiny blue disc. Takes 165 years to orbit the Sun.",
    ),
)


def get_planet(name: str) -> BodyDescriptor | None:
    """Look up a planet by name or key (case-insensitive)."""
    key = name.strip().lower()
    return next((planet for planet in PLANETS if planet.key == key), None)
