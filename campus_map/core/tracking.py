import logging
from typing import Callable, Optional, Protocol

from campus_map.config import Settings
from campus_map.exceptions import CampusMapError, LocationUnavailable, PermissionDenied
from campus_map.models.location import LocationAccuracy, PermissionStatus, Position, WatchOptions

logger = logging.getLogger(__name__)

PositionHandler = Callable[[Position], None]
ErrorHandler = Callable[[CampusMapError], None]

class PositionWatch(Protocol):
    """Handle returned by a provider's watch call"""

    def remove(self) -> None: ...

class LocationProvider(Protocol):
    """The narrow slice of a platform location service the tracker relies on"""

    async def request_foreground_permission(self) -> PermissionStatus: ...

    async def get_current_position(self) -> Position: ...

    def watch_position(
        self,
        options: WatchOptions,
        on_position: Callable[[Position], None],
        on_error: Callable[[Exception], None]
    ) -> PositionWatch: ...

class LocationSubscription:
    """
    Cancellable link between the provider's position stream and a single
    handler. Once cancelled, late deliveries are dropped.
    """

    def __init__(self, on_update: PositionHandler, on_error: ErrorHandler):
        self._on_update = on_update
        self._on_error = on_error
        self._watch: Optional[PositionWatch] = None
        self._stream_failed = False
        self.active = True
        self.last_position: Optional[Position] = None

    def _attach(self, watch: PositionWatch):
        self._watch = watch

    def _deliver(self, position: Position):
        if not self.active:
            return
        self.last_position = position
        self._on_update(position)

    def _fail(self, error: Exception):
        if not self.active:
            return
        # One notification per cause; the stream itself stays open
        if self._stream_failed:
            logger.debug(f"Repeated position stream error: {error}")
            return
        self._stream_failed = True
        logger.error(f"Position stream error: {error}")
        self._on_error(LocationUnavailable(
            "Error receiving location updates",
            {"error": str(error)}
        ))

    def cancel(self):
        """Release the provider watch. Safe to call any number of times."""
        if not self.active:
            return
        self.active = False
        watch, self._watch = self._watch, None
        if watch is None:
            return
        try:
            watch.remove()
            logger.info("Position watch released")
        except Exception as e:
            logger.warning(f"Error releasing position watch: {e}")

class LocationTracker:
    """Permission, one-shot fetch, then a continuous position watch"""

    def __init__(self, provider: LocationProvider, options: Optional[WatchOptions] = None):
        self.provider = provider
        self.options = options or WatchOptions()

    @classmethod
    def from_settings(cls, provider: LocationProvider, settings: Settings) -> "LocationTracker":
        return cls(provider, WatchOptions(
            accuracy=LocationAccuracy(settings.WATCH_ACCURACY),
            time_interval_ms=settings.WATCH_TIME_INTERVAL_MS,
            distance_interval_m=settings.WATCH_DISTANCE_INTERVAL_M
        ))

    def subscribe(self, on_update: PositionHandler, on_error: ErrorHandler) -> LocationSubscription:
        """Handle for a tracking session that ``activate`` has not started yet"""
        return LocationSubscription(on_update, on_error)

    async def start(self, on_update: PositionHandler, on_error: ErrorHandler) -> LocationSubscription:
        return await self.activate(self.subscribe(on_update, on_error))

    async def activate(self, subscription: LocationSubscription) -> LocationSubscription:
        """
        Start tracking on a subscription.

        Failures go to the error handler exactly once and are never raised;
        the subscription is then already inactive. No retries. Cancelling
        the subscription while this is waiting on the provider means no
        watch is ever opened.
        """
        if not subscription.active:
            return subscription

        try:
            status = await self.provider.request_foreground_permission()
        except Exception as e:
            logger.error(f"Permission request failed: {e}")
            return self._abort(subscription, LocationUnavailable(
                "Could not request location permission", {"error": str(e)}
            ))
        if not subscription.active:
            logger.debug("Tracking cancelled during permission request")
            return subscription

        if status != PermissionStatus.GRANTED:
            logger.warning(f"Location permission not granted: {status}")
            return self._abort(subscription, PermissionDenied(
                details={"status": getattr(status, "value", status)}
            ))

        try:
            position = await self.provider.get_current_position()
        except Exception as e:
            logger.error(f"Error getting location: {e}")
            return self._abort(subscription, LocationUnavailable(
                "Error getting location", {"error": str(e)}
            ))

        subscription._deliver(position)
        if not subscription.active:
            logger.debug("Tracking cancelled before the position watch opened")
            return subscription

        try:
            watch = self.provider.watch_position(self.options, subscription._deliver, subscription._fail)
        except Exception as e:
            logger.error(f"Could not open position watch: {e}")
            return self._abort(subscription, LocationUnavailable(
                "Error subscribing to location updates", {"error": str(e)}
            ))

        subscription._attach(watch)
        logger.info(
            f"Position watch opened (accuracy={self.options.accuracy.value}, "
            f"interval={self.options.time_interval_ms}ms, distance={self.options.distance_interval_m}m)"
        )
        return subscription

    def stop(self, subscription: Optional[LocationSubscription]):
        if subscription is not None:
            subscription.cancel()

    def _abort(self, subscription: LocationSubscription, error: CampusMapError) -> LocationSubscription:
        # Nobody is listening any more once the subscription was cancelled
        if subscription.active:
            subscription.active = False
            subscription._on_error(error)
        return subscription
