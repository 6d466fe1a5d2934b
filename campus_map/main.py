import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from campus_map.config import Settings, settings as default_settings
from campus_map.core.places import PlaceStore
from campus_map.core.tracking import LocationProvider, LocationTracker
from campus_map.screens.map_screen import MapScreenController

logger = logging.getLogger(__name__)

def configure_logging(settings: Settings):
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

def build_map_screen(provider: LocationProvider, settings: Settings) -> MapScreenController:
    store = PlaceStore.from_settings(settings)
    tracker = LocationTracker.from_settings(provider, settings)
    return MapScreenController(store, tracker, settings)

# Lifespan of one map screen: mount on entry, unmount on exit
@asynccontextmanager
async def map_screen_session(
    provider: LocationProvider,
    settings: Optional[Settings] = None
) -> AsyncIterator[MapScreenController]:
    settings = settings or default_settings
    configure_logging(settings)

    screen = build_map_screen(provider, settings)
    logger.info("Map screen mounting")
    try:
        await screen.mount()
        yield screen
    finally:
        screen.unmount()
        await screen.store.close()
        logger.info("Map screen unmounted")
