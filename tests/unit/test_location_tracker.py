"""
Unit tests for the location tracker and its subscription handle
"""
import asyncio

import pytest

from campus_map.core.tracking import LocationTracker
from campus_map.exceptions import ErrorCode
from campus_map.models.location import LocationAccuracy, PermissionStatus, Position, WatchOptions


class Recorder:
    def __init__(self):
        self.updates = []
        self.errors = []

    def on_update(self, position):
        self.updates.append(position)

    def on_error(self, error):
        self.errors.append(error)


@pytest.mark.asyncio
async def test_permission_denied_reports_once_without_position(provider):
    provider.permission = PermissionStatus.DENIED
    recorder = Recorder()

    subscription = await LocationTracker(provider).start(recorder.on_update, recorder.on_error)

    assert recorder.updates == []
    assert len(recorder.errors) == 1
    assert recorder.errors[0].error_code == ErrorCode.PERMISSION_DENIED
    assert subscription.active is False
    assert provider.fetch_calls == 0
    assert provider.watch_options == []


@pytest.mark.asyncio
async def test_fetch_failure_reports_location_unavailable(provider):
    provider.fetch_error = RuntimeError("GPS off")
    recorder = Recorder()

    subscription = await LocationTracker(provider).start(recorder.on_update, recorder.on_error)

    assert recorder.updates == []
    assert [e.error_code for e in recorder.errors] == [ErrorCode.LOCATION_UNAVAILABLE]
    assert "GPS off" in recorder.errors[0].details["error"]
    assert subscription.active is False
    assert provider.watch_options == []


@pytest.mark.asyncio
async def test_start_delivers_fix_then_opens_watch(provider, settings):
    recorder = Recorder()
    tracker = LocationTracker.from_settings(provider, settings)

    subscription = await tracker.start(recorder.on_update, recorder.on_error)

    assert recorder.updates == [provider.current]
    assert recorder.errors == []
    assert subscription.active is True
    assert provider.watch_options == [
        WatchOptions(accuracy=LocationAccuracy.HIGH, time_interval_ms=1000, distance_interval_m=1)
    ]


@pytest.mark.asyncio
async def test_stream_updates_replace_last_position(provider):
    recorder = Recorder()
    subscription = await LocationTracker(provider).start(recorder.on_update, recorder.on_error)

    update = Position(latitude=-1.0, longitude=-48.0)
    provider.emit(update)

    assert recorder.updates[-1] == update
    assert subscription.last_position == update


@pytest.mark.asyncio
async def test_stop_twice_is_safe_and_silences_stream(provider):
    recorder = Recorder()
    tracker = LocationTracker(provider)
    subscription = await tracker.start(recorder.on_update, recorder.on_error)
    on_position, _ = provider.watchers[0]

    tracker.stop(subscription)
    tracker.stop(subscription)

    assert subscription.active is False
    assert provider.watch.remove_calls == 1

    # A fix already in flight when the watch was released
    on_position(Position(latitude=-1.0, longitude=-48.0))
    provider.emit(Position(latitude=-1.1, longitude=-48.1))
    assert recorder.updates == [provider.current]


@pytest.mark.asyncio
async def test_stop_on_failed_start_is_noop(provider):
    provider.permission = PermissionStatus.DENIED
    recorder = Recorder()
    tracker = LocationTracker(provider)

    subscription = await tracker.start(recorder.on_update, recorder.on_error)
    tracker.stop(subscription)
    tracker.stop(None)

    assert len(recorder.errors) == 1


@pytest.mark.asyncio
async def test_stream_error_reported_once(provider):
    recorder = Recorder()
    subscription = await LocationTracker(provider).start(recorder.on_update, recorder.on_error)

    provider.emit_error(RuntimeError("provider lost"))
    provider.emit_error(RuntimeError("provider lost"))

    assert [e.error_code for e in recorder.errors] == [ErrorCode.LOCATION_UNAVAILABLE]
    assert subscription.active is True

    # Updates keep flowing after a transient stream error
    provider.emit(Position(latitude=-1.2, longitude=-48.2))
    assert recorder.updates[-1].latitude == -1.2


def test_accuracy_levels():
    assert Position(0, 0, accuracy=5).accuracy_level == LocationAccuracy.HIGH
    assert Position(0, 0, accuracy=20).accuracy_level == LocationAccuracy.MEDIUM
    assert Position(0, 0, accuracy=80).accuracy_level == LocationAccuracy.LOW
    assert Position(0, 0).accuracy_level == LocationAccuracy.UNKNOWN
    assert Position(0, 0).to_dict()["accuracy_level"] == "unknown"


@pytest.mark.asyncio
async def test_denied_details_carry_raw_status(provider):
    provider.permission = PermissionStatus.DENIED
    recorder = Recorder()

    await LocationTracker(provider).start(recorder.on_update, recorder.on_error)

    assert recorder.errors[0].details == {"status": "denied"}


@pytest.mark.asyncio
async def test_cancel_during_permission_request_opens_no_watch(provider):
    reached = asyncio.Event()
    gate = asyncio.Event()
    answer = provider.request_foreground_permission

    async def slow_permission():
        reached.set()
        await gate.wait()
        return await answer()

    provider.request_foreground_permission = slow_permission
    recorder = Recorder()
    tracker = LocationTracker(provider)
    subscription = tracker.subscribe(recorder.on_update, recorder.on_error)

    task = asyncio.create_task(tracker.activate(subscription))
    await reached.wait()
    tracker.stop(subscription)
    gate.set()
    await task

    assert provider.fetch_calls == 0
    assert provider.watch_options == []
    assert recorder.updates == []
    assert recorder.errors == []


@pytest.mark.asyncio
async def test_cancel_during_fetch_drops_fix_and_opens_no_watch(provider):
    reached = asyncio.Event()
    gate = asyncio.Event()
    fetch = provider.get_current_position

    async def slow_fetch():
        reached.set()
        await gate.wait()
        return await fetch()

    provider.get_current_position = slow_fetch
    recorder = Recorder()
    tracker = LocationTracker(provider)
    subscription = tracker.subscribe(recorder.on_update, recorder.on_error)

    task = asyncio.create_task(tracker.activate(subscription))
    await reached.wait()
    tracker.stop(subscription)
    gate.set()
    await task

    assert subscription.active is False
    assert provider.watch_options == []
    assert recorder.updates == []


@pytest.mark.asyncio
async def test_activate_on_cancelled_subscription_is_noop(provider):
    recorder = Recorder()
    tracker = LocationTracker(provider)
    subscription = tracker.subscribe(recorder.on_update, recorder.on_error)
    subscription.cancel()

    await tracker.activate(subscription)

    assert provider.permission_requests == 0
    assert recorder.errors == []
