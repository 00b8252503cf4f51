"""
Use case: List all lines with their ordered stations.

Input: None
Output: list[LineResult]
Side effects: None.
"""

from app.application.subway.dtos import LineResult, to_line_result
from app.domain.subway.ports import LineRepository


class ListLinesUseCase:
    """Returns every line ordered by ID."""

    def __init__(self, line_repo: LineRepository) -> None:
        self._line_repo = line_repo

    def execute(self) -> list[LineResult]:
        return [to_line_result(line) for line in self._line_repo.list_all()]
