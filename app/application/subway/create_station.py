"""
Use case: Register a station.

Input: CreateStationCommand (name)
Output: StationResult
Side effects: Inserts a station row.
"""

import logging

from app.application.subway.dtos import (
    CreateStationCommand,
    StationResult,
    to_station_result,
)
from app.domain.subway.ports import StationRepository

logger = logging.getLogger(__name__)


class CreateStationUseCase:
    """Registers a new station in the catalog."""

    def __init__(self, station_repo: StationRepository) -> None:
        self._station_repo = station_repo

    def execute(self, command: CreateStationCommand) -> StationResult:
        station = self._station_repo.add(command.name)
        logger.info("Created station id=%s name=%s", station.id, station.name)
        return to_station_result(station)
