"""
Use case: Append a section at the down end of a line.

Input: AddSectionCommand (line_id, up/down station IDs, distance)
Output: LineResult
Side effects: Inserts one section row.
Failure cases: LineNotFoundError, StationNotFoundError, InvalidSectionError,
    NonContiguousSectionError, DuplicateStationError.
"""

import logging

from app.application.subway.dtos import AddSectionCommand, LineResult, to_line_result
from app.application.subway.line_locks import LineLocks
from app.application.subway.lookups import require_line, require_station
from app.domain.subway.ports import LineRepository, StationRepository

logger = logging.getLogger(__name__)


class AddSectionUseCase:
    """Orchestrates extending a line by one section.

    Both stations and the line are loaded, and the line is extended and
    saved, while holding its lock. Two requests can never both append to
    the same terminus, and a station cannot be deleted in between.
    """

    def __init__(
        self,
        line_repo: LineRepository,
        station_repo: StationRepository,
        locks: LineLocks,
    ) -> None:
        self._line_repo = line_repo
        self._station_repo = station_repo
        self._locks = locks

    def execute(self, command: AddSectionCommand) -> LineResult:
        """Run the add-section use case.

        Args:
            command: Target line and the new section.

        Returns:
            The line with its updated station path.

        Raises:
            LineNotFoundError: If the line does not exist.
            StationNotFoundError: If either station does not exist.
            SectionRuleError: If the section breaks a section-list rule.
        """
        logger.info(
            "Adding section line=%s up=%s down=%s distance=%s",
            command.line_id,
            command.up_station_id,
            command.down_station_id,
            command.distance,
        )

        with self._locks.hold(command.line_id):
            up_station = require_station(self._station_repo, command.up_station_id)
            down_station = require_station(self._station_repo, command.down_station_id)
            line = require_line(self._line_repo, command.line_id)
            line.add_section(up_station, down_station, command.distance)
            stored = self._line_repo.save(line)

        return to_line_result(stored)
