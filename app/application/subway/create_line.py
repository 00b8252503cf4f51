"""
Use case: Create a line with its first section.

Input: CreateLineCommand (name, color, up/down station IDs, distance)
Output: LineResult
Side effects: Inserts the line and its first section.
Failure cases: DuplicateLineNameError, StationNotFoundError, InvalidSectionError.
"""

import logging

from app.application.subway.dtos import CreateLineCommand, LineResult, to_line_result
from app.application.subway.line_locks import LineLocks
from app.application.subway.lookups import require_station
from app.domain.subway.entities import Line
from app.domain.subway.errors import DuplicateLineNameError
from app.domain.subway.ports import LineRepository, StationRepository

logger = logging.getLogger(__name__)


class CreateLineUseCase:
    """Orchestrates line creation.

    Checks name uniqueness and resolves both termini before building
    the line, so a rejected request never writes anything. The whole
    catalog is held meanwhile: neither terminus can be deleted before
    the line is stored.
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

    def execute(self, command: CreateLineCommand) -> LineResult:
        """Run the line creation use case.

        Args:
            command: Line metadata and its first section.

        Returns:
            The created line with its two stations.

        Raises:
            DuplicateLineNameError: If the name is already taken.
            StationNotFoundError: If a terminus does not exist.
            InvalidSectionError: If the first section is malformed.
        """
        logger.info("Creating line name=%s", command.name)

        with self._locks.hold_all():
            if self._line_repo.exists_by_name(command.name):
                raise DuplicateLineNameError(command.name)

            up_station = require_station(self._station_repo, command.up_station_id)
            down_station = require_station(self._station_repo, command.down_station_id)

            line = Line.create(
                name=command.name,
                color=command.color,
                up_station=up_station,
                down_station=down_station,
                distance=command.distance,
            )
            stored = self._line_repo.add(line)

        return to_line_result(stored)
