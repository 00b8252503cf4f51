"""
Use case: Delete a line and all of its sections.

Input: DeleteLineCommand (line_id)
Output: None
Side effects: Deletes the line and section rows.
"""

import logging

from app.application.subway.dtos import DeleteLineCommand
from app.application.subway.line_locks import LineLocks
from app.domain.subway.ports import LineRepository

logger = logging.getLogger(__name__)


class DeleteLineUseCase:
    """Deletes a line. Deleting an unknown line is a no-op."""

    def __init__(self, line_repo: LineRepository, locks: LineLocks) -> None:
        self._line_repo = line_repo
        self._locks = locks

    def execute(self, command: DeleteLineCommand) -> None:
        with self._locks.hold(command.line_id):
            self._line_repo.delete(command.line_id)
        self._locks.discard(command.line_id)
        logger.info("Deleted line id=%s", command.line_id)
