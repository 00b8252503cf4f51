"""
Use case: Retrieve a line with its ordered stations.

Input: GetLineQuery (line_id)
Output: LineResult
Side effects: None.
Failure cases: LineNotFoundError.
"""

from app.application.subway.dtos import GetLineQuery, LineResult, to_line_result
from app.application.subway.lookups import require_line
from app.domain.subway.ports import LineRepository


class GetLineUseCase:
    """Loads one line and derives its station path."""

    def __init__(self, line_repo: LineRepository) -> None:
        self._line_repo = line_repo

    def execute(self, query: GetLineQuery) -> LineResult:
        return to_line_result(require_line(self._line_repo, query.line_id))
