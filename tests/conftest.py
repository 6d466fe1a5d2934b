"""
Shared fixtures: a file-backed SQLite store per test and a scripted
location provider standing in for the platform service.
"""
from typing import Callable, List, Optional

import pytest
import pytest_asyncio

from campus_map.config import Settings
from campus_map.core.places import PlaceStore
from campus_map.models.location import PermissionStatus, Position, WatchOptions


class FakeWatch:
    def __init__(self, provider: "FakeLocationProvider"):
        self.provider = provider
        self.remove_calls = 0

    def remove(self) -> None:
        self.remove_calls += 1
        self.provider.watchers = []


class FakeLocationProvider:
    """Location provider whose answers and stream events are driven by the test"""

    def __init__(
        self,
        permission: PermissionStatus = PermissionStatus.GRANTED,
        current: Optional[Position] = None,
        fetch_error: Optional[Exception] = None,
    ):
        self.permission = permission
        self.current = current or Position(latitude=-1.4740, longitude=-48.4560, accuracy=5.0)
        self.fetch_error = fetch_error
        self.permission_requests = 0
        self.fetch_calls = 0
        self.watch_options: List[WatchOptions] = []
        self.watchers: List[tuple] = []
        self.watch: Optional[FakeWatch] = None

    async def request_foreground_permission(self) -> PermissionStatus:
        self.permission_requests += 1
        return self.permission

    async def get_current_position(self) -> Position:
        self.fetch_calls += 1
        if self.fetch_error is not None:
            raise self.fetch_error
        return self.current

    def watch_position(
        self,
        options: WatchOptions,
        on_position: Callable[[Position], None],
        on_error: Callable[[Exception], None],
    ) -> FakeWatch:
        self.watch_options.append(options)
        self.watchers = [(on_position, on_error)]
        self.watch = FakeWatch(self)
        return self.watch

    def emit(self, position: Position):
        """Simulate a platform fix, delivered even to a released watch's old callback"""
        for on_position, _ in list(self.watchers):
            on_position(position)

    def emit_error(self, error: Exception):
        for _, on_error in list(self.watchers):
            on_error(error)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'ufmaps.db'}",
        LOG_LEVEL="DEBUG",
    )


@pytest_asyncio.fixture
async def store(settings):
    place_store = PlaceStore.from_settings(settings)
    await place_store.open()
    yield place_store
    await place_store.close()


@pytest.fixture
def provider() -> FakeLocationProvider:
    return FakeLocationProvider()


@pytest.fixture
def sample_places() -> List[dict]:
    return [
        {"id": 1, "name": "Biblioteca Central", "latitude": -1.47531, "longitude": -48.45617, "category": "library"},
        {"id": 2, "name": "Restaurante Universitário", "latitude": "-1.47468", "longitude": "-48.45793", "category": "food"},
        {"id": 3, "name": "Reitoria", "latitude": "abc", "longitude": "-48.45603"},
        {"id": 4, "name": "Instituto de Tecnologia", "latitude": None, "longitude": None},
        {"id": 5, "name": "biblioteca setorial", "latitude": "-1.4770", "longitude": "-48.4543"},
    ]
