"""
Adapter: Station repository.

Implements StationRepository port.
Persists stations in the ``stations`` table.
"""

import logging
from typing import Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.engine import Engine

from app.domain.subway.entities import Station
from app.domain.subway.ports import StationRepository
from app.infrastructure.subway.database import stations_table

logger = logging.getLogger(__name__)


class StationRepositoryAdapter(StationRepository):
    """SQL implementation of the station repository."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def add(self, name: str) -> Station:
        with self._engine.begin() as conn:
            result = conn.execute(insert(stations_table).values(name=name))
            station_id = result.inserted_primary_key[0]

        logger.debug("Inserted station id=%d.", station_id)
        return Station(id=station_id, name=name)

    def get_by_id(self, station_id: int) -> Optional[Station]:
        query = select(stations_table.c.id, stations_table.c.name).where(
            stations_table.c.id == station_id
        )
        with self._engine.connect() as conn:
            row = conn.execute(query).first()

        if row is None:
            return None
        return Station(id=row.id, name=row.name)

    def list_all(self) -> list[Station]:
        query = select(stations_table.c.id, stations_table.c.name).order_by(
            stations_table.c.id
        )
        with self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()

        return [Station(id=row.id, name=row.name) for row in rows]

    def delete(self, station_id: int) -> None:
        with self._engine.begin() as conn:
            conn.execute(delete(stations_table).where(stations_table.c.id == station_id))
