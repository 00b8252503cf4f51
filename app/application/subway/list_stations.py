"""
Use case: List all stations.

Input: None
Output: list[StationResult]
Side effects: None.
"""

from app.application.subway.dtos import StationResult, to_station_result
from app.domain.subway.ports import StationRepository


class ListStationsUseCase:
    """Returns every registered station ordered by ID."""

    def __init__(self, station_repo: StationRepository) -> None:
        self._station_repo = station_repo

    def execute(self) -> list[StationResult]:
        return [to_station_result(s) for s in self._station_repo.list_all()]
