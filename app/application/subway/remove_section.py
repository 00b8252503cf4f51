"""
Use case: Remove the down terminus of a line.

Input: RemoveSectionCommand (line_id, station_id)
Output: None
Side effects: Deletes the last section row of the line.
Failure cases: LineNotFoundError, StationNotFoundError,
    NotTerminalStationError, SingleSectionRemovalError.
"""

import logging

from app.application.subway.dtos import RemoveSectionCommand
from app.application.subway.line_locks import LineLocks
from app.application.subway.lookups import require_line, require_station
from app.domain.subway.ports import LineRepository, StationRepository

logger = logging.getLogger(__name__)


class RemoveSectionUseCase:
    """Orchestrates shortening a line by its last section."""

    def __init__(
        self,
        line_repo: LineRepository,
        station_repo: StationRepository,
        locks: LineLocks,
    ) -> None:
        self._line_repo = line_repo
        self._station_repo = station_repo
        self._locks = locks

    def execute(self, command: RemoveSectionCommand) -> None:
        """Run the remove-section use case.

        Raises:
            LineNotFoundError: If the line does not exist.
            StationNotFoundError: If the station does not exist.
            SectionRuleError: If the station is not removable.
        """
        with self._locks.hold(command.line_id):
            station = require_station(self._station_repo, command.station_id)
            line = require_line(self._line_repo, command.line_id)
            removed = line.remove_station(station)
            self._line_repo.save(line)

        logger.info(
            "Removed section line=%s up=%s down=%s",
            command.line_id,
            removed.up_station.id,
            removed.down_station.id,
        )
