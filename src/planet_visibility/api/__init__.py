"""
Planet Visibility API - Business Logic Layer

This package contains the visibility computation, separated from the HTTP
and CLI presentation layers.

Modules, leaf-first:
- ephemeris: Skyfield kernel access
- coordinates: Equatorial and horizontal positions
- events: Rise, set and transit search
- nighttime: Dark-sky window sampling
- magnitude: Apparent magnitude lookup
- visibility: Per-planet report assembly
"""

# Activate deal contracts for runtime validation
import deal


deal.activate()

__all__ = [
    # Package is organized into modules - import directly from them:
    # from planet_visibility.api.visibility import ...
    # from planet_visibility.api.nighttime import ...
    # etc.
]
