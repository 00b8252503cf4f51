"""
Use case: Rename or recolor a line.

Input: UpdateLineCommand (line_id, name, color)
Output: LineResult
Side effects: Updates the line row.
Failure cases: LineNotFoundError, DuplicateLineNameError.
"""

import logging

from app.application.subway.dtos import LineResult, UpdateLineCommand, to_line_result
from app.application.subway.line_locks import LineLocks
from app.application.subway.lookups import require_line
from app.domain.subway.errors import DuplicateLineNameError
from app.domain.subway.ports import LineRepository

logger = logging.getLogger(__name__)


class UpdateLineUseCase:
    """Updates line metadata. Sections are left untouched."""

    def __init__(self, line_repo: LineRepository, locks: LineLocks) -> None:
        self._line_repo = line_repo
        self._locks = locks

    def execute(self, command: UpdateLineCommand) -> LineResult:
        """Run the line update use case.

        Raises:
            LineNotFoundError: If the line does not exist.
            DuplicateLineNameError: If another line already has the new name.
        """
        with self._locks.hold(command.line_id):
            line = require_line(self._line_repo, command.line_id)

            if command.name != line.name and self._line_repo.exists_by_name(command.name):
                raise DuplicateLineNameError(command.name)

            line.update_info(command.name, command.color)
            stored = self._line_repo.save(line)

        logger.info("Updated line id=%s name=%s", stored.id, stored.name)
        return to_line_result(stored)
