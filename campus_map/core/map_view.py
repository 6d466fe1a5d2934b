from typing import Any, Iterable, List, Optional, Tuple

from campus_map.config import Settings
from campus_map.models.location import LocationAccuracy, MapMarker, MarkerColor, Position, Region
from campus_map.models.place import Place

def parse_coordinate(latitude: Any, longitude: Any) -> Optional[Tuple[float, float]]:
    """
    Convert stored coordinates into a (lat, lng) pair for rendering.
    Returns None for missing, non-numeric or out-of-range values.
    """
    try:
        lat = float(latitude)
        lng = float(longitude)
    except (TypeError, ValueError):
        return None

    # NaN fails both comparisons
    if not (-90 <= lat <= 90):
        return None
    if not (-180 <= lng <= 180):
        return None

    return lat, lng

def fallback_region(settings: Settings) -> Region:
    return Region(
        latitude=settings.CAMPUS_CENTER_LAT,
        longitude=settings.CAMPUS_CENTER_LNG,
        latitude_delta=settings.CAMPUS_REGION_DELTA,
        longitude_delta=settings.CAMPUS_REGION_DELTA
    )

def region_for_position(position: Position, settings: Settings) -> Region:
    return Region(
        latitude=position.latitude,
        longitude=position.longitude,
        latitude_delta=settings.USER_REGION_DELTA,
        longitude_delta=settings.USER_REGION_DELTA
    )

def campus_marker(settings: Settings) -> MapMarker:
    return MapMarker(
        coordinate=(settings.CAMPUS_CENTER_LAT, settings.CAMPUS_CENTER_LNG),
        title=settings.CAMPUS_NAME,
        subtitle=settings.CAMPUS_DESCRIPTION,
        color=MarkerColor.GREEN,
        key="campus"
    )

def user_marker(position: Position) -> MapMarker:
    level = position.accuracy_level
    return MapMarker(
        coordinate=(position.latitude, position.longitude),
        title="You are here",
        subtitle=None if level == LocationAccuracy.UNKNOWN else f"Accuracy: {level.value}",
        color=MarkerColor.BLUE,
        key="user"
    )

def place_markers(places: Iterable[Place]) -> List[MapMarker]:
    """Red pins for search results; places without usable coordinates are skipped"""
    markers = []
    for place in places:
        coordinate = parse_coordinate(place.latitude, place.longitude)
        if coordinate is None:
            continue
        markers.append(MapMarker(
            coordinate=coordinate,
            title=place.name,
            subtitle=place.category,
            color=MarkerColor.RED,
            key=f"place-{place.id}"
        ))
    return markers
