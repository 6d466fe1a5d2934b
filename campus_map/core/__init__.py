"""
Core modules for the UFPA campus map

This package contains the logic behind the map screen:
- places: Embedded place store, seeding and name search
- tracking: Location permission, one-shot fetch and position watch
- map_view: Regions and marker descriptors handed to the map renderer
"""

from .places import PlaceStore

from .tracking import (
    LocationProvider,
    LocationSubscription,
    LocationTracker
)

from .map_view import (
    campus_marker,
    fallback_region,
    parse_coordinate,
    place_markers,
    region_for_position,
    user_marker
)

from .campus_places import CAMPUS_PLACES

__all__ = [
    # Places
    "PlaceStore",
    "CAMPUS_PLACES",

    # Tracking
    "LocationProvider",
    "LocationSubscription",
    "LocationTracker",

    # Map view
    "campus_marker",
    "fallback_region",
    "parse_coordinate",
    "place_markers",
    "region_for_position",
    "user_marker"
]
