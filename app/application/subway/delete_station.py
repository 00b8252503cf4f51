"""
Use case: Delete a station.

Input: DeleteStationCommand (station_id)
Output: None
Side effects: Deletes the station row.
Failure cases: StationNotFoundError, StationInUseError.
"""

import logging

from app.application.subway.dtos import DeleteStationCommand
from app.application.subway.line_locks import LineLocks
from app.application.subway.lookups import require_station
from app.domain.subway.errors import StationInUseError
from app.domain.subway.ports import LineRepository, StationRepository

logger = logging.getLogger(__name__)


class DeleteStationUseCase:
    """Deletes a station that no line references anymore.

    Every line's station path is checked while the whole catalog is
    held, so no section can be appended to the station in between.
    """

    def __init__(
        self,
        station_repo: StationRepository,
        line_repo: LineRepository,
        locks: LineLocks,
    ) -> None:
        self._station_repo = station_repo
        self._line_repo = line_repo
        self._locks = locks

    def execute(self, command: DeleteStationCommand) -> None:
        """Run the station deletion use case.

        Raises:
            StationNotFoundError: If the station does not exist.
            StationInUseError: If a line still visits the station.
        """
        with self._locks.hold_all():
            station = require_station(self._station_repo, command.station_id)

            for line in self._line_repo.list_all():
                if line.contains_station(station):
                    raise StationInUseError(station.id, line.name)

            self._station_repo.delete(station.id)

        logger.info("Deleted station id=%s", station.id)
