import logging
from typing import List, Optional

from campus_map.config import Settings
from campus_map.core.map_view import (
    campus_marker,
    fallback_region,
    place_markers,
    region_for_position,
    user_marker
)
from campus_map.core.places import PlaceStore
from campus_map.core.tracking import LocationSubscription, LocationTracker
from campus_map.exceptions import CampusMapError, ErrorCode
from campus_map.models.location import MapMarker, Position, Region
from campus_map.models.place import Place

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Getting location and loading map..."
PERMISSION_DENIED_MESSAGE = "Location permission denied"
LOCATION_ERROR_MESSAGE = "Error getting location. Showing default location."
STORE_ERROR_MESSAGE = "Could not load campus places."

class MapScreenController:
    """
    State behind the campus map screen.

    Owns the current position, the map region and the listed places; the
    store and the tracker are injected and outlive nothing but the screen.
    """

    def __init__(self, store: PlaceStore, tracker: LocationTracker, settings: Settings):
        self.store = store
        self.tracker = tracker
        self.settings = settings

        self.query = ""
        self.places: List[Place] = []
        self.position: Optional[Position] = None
        self.region: Optional[Region] = None
        self.status_message = LOADING_MESSAGE
        self.error_code: Optional[ErrorCode] = None
        self.subscription: Optional[LocationSubscription] = None
        self.mounted = False

    @property
    def loading(self) -> bool:
        return self.region is None

    @property
    def markers(self) -> List[MapMarker]:
        markers = [campus_marker(self.settings)]
        markers.extend(place_markers(self.places))
        if self.position is not None:
            markers.append(user_marker(self.position))
        return markers

    async def mount(self):
        self.mounted = True
        # Handle exists before any await so unmount() can always release it
        self.subscription = self.tracker.subscribe(self.on_position, self.on_error)

        try:
            await self.store.open()
            await self.store.ensure_seeded()
        except CampusMapError as e:
            logger.error(f"Place store not ready: {e.message}")
            self._report(e, STORE_ERROR_MESSAGE)

        if self.store.ready:
            # Initial unfiltered listing
            await self.submit_search("")

        await self.tracker.activate(self.subscription)

    async def submit_search(self, query: Optional[str] = None) -> List[Place]:
        """Run the search for the typed query (explicit button press)"""
        if query is not None:
            self.query = query
        if not self.store.ready:
            logger.warning("Search requested before the place store was ready")
            return self.places

        try:
            self.places = await self.store.search(self.query)
        except CampusMapError as e:
            self._report(e, STORE_ERROR_MESSAGE)
        return self.places

    def on_position(self, position: Position):
        # Each fix replaces the previous one and the map follows the user
        logger.debug(f"Position update: {position.to_dict()}")
        self.position = position
        self.region = region_for_position(position, self.settings)

    def on_error(self, error: CampusMapError):
        if error.error_code == ErrorCode.PERMISSION_DENIED:
            message = PERMISSION_DENIED_MESSAGE
        else:
            message = LOCATION_ERROR_MESSAGE
        self._report(error, message)
        if self.position is None:
            self.region = fallback_region(self.settings)

    def unmount(self):
        self.tracker.stop(self.subscription)
        self.mounted = False

    def _report(self, error: CampusMapError, message: str):
        logger.warning(f"{error.error_code.value}: {error.message}")
        self.error_code = error.error_code
        self.status_message = message
