import logging
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError
from sqlalchemy import String
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import select, func

from campus_map.config import Settings
from campus_map.database import create_engine_from_settings, create_session_maker, create_db_and_tables
from campus_map.exceptions import CampusMapError, ErrorCode, StoreSeedFailure, StoreUnavailable
from campus_map.models.place import Place, PlaceCreate, StoreInfo
from campus_map.core.campus_places import CAMPUS_PLACES

logger = logging.getLogger(__name__)

class PlaceStore:
    """
    Embedded record store holding the campus places.

    Built explicitly from an engine and handed to whoever needs it; the
    seeding routine is the only writer of Place records.
    """

    def __init__(self, engine: AsyncEngine, settings: Settings):
        self.engine = engine
        self.settings = settings
        self.session_maker = create_session_maker(engine)
        self.ready = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "PlaceStore":
        return cls(create_engine_from_settings(settings), settings)

    async def open(self):
        """Create tables if needed and record the schema revision"""
        try:
            await create_db_and_tables(self.engine)

            target = self.settings.SCHEMA_VERSION
            async with self.session_maker() as session:
                async with session.begin():
                    info = await session.get(StoreInfo, 1)
                    if info is None:
                        session.add(StoreInfo(id=1, schema_version=target))
                    elif info.schema_version > target:
                        raise CampusMapError(
                            f"Store schema version {info.schema_version} is newer than {target}",
                            ErrorCode.SCHEMA_MISMATCH,
                            {"stored": info.schema_version, "expected": target}
                        )
                    elif info.schema_version < target:
                        logger.info(f"Bumping store schema version {info.schema_version} -> {target}")
                        info.schema_version = target
        except SQLAlchemyError as e:
            logger.error(f"Could not open place store: {e}")
            raise StoreUnavailable("Could not open place store", {"error": str(e)}) from e

    async def schema_version(self) -> Optional[int]:
        async with self.session_maker() as session:
            info = await session.get(StoreInfo, 1)
            return info.schema_version if info else None

    async def ensure_seeded(self, seed: Optional[Iterable[dict[str, Any]]] = None) -> int:
        """
        Populate the store with the seed list, only if it is empty.

        The count check and the inserts share one transaction, so a failure
        leaves the store exactly as it was.

        Returns:
            Number of places inserted (0 when the store was already populated)
        """
        try:
            records = [PlaceCreate.model_validate(item) for item in (CAMPUS_PLACES if seed is None else seed)]
        except ValidationError as e:
            logger.error(f"Invalid seed record: {e}")
            raise StoreSeedFailure("Invalid seed record", {"error": str(e)}) from e

        try:
            async with self.session_maker() as session:
                async with session.begin():
                    existing = await session.scalar(select(func.count()).select_from(Place))
                    if existing:
                        logger.info(f"Place store already populated ({existing} places)")
                        inserted = 0
                    else:
                        logger.info(f"Place store empty, seeding {len(records)} places")
                        session.add_all([Place.model_validate(record) for record in records])
                        inserted = len(records)
        except SQLAlchemyError as e:
            logger.error(f"Seeding failed, transaction rolled back: {e}")
            raise StoreSeedFailure(details={"error": str(e)}) from e

        self.ready = True
        return inserted

    async def search(self, query: str) -> List[Place]:
        """
        Places whose name contains ``query``, ignoring case.
        A blank query returns every place. Only the name is matched.
        """
        statement = select(Place).order_by(Place.id)
        if query.strip():
            statement = statement.where(
                func.casefold(Place.name, type_=String).contains(query.casefold(), autoescape=True)
            )

        try:
            async with self.session_maker() as session:
                result = await session.execute(statement)
                places = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Search {query!r} failed: {e}")
            raise StoreUnavailable("Could not read place store", {"error": str(e)}) from e

        logger.debug(f"Search {query!r}: {len(places)} places")
        return places

    async def count(self) -> int:
        async with self.session_maker() as session:
            return await session.scalar(select(func.count()).select_from(Place)) or 0

    async def close(self):
        self.ready = False
        await self.engine.dispose()
