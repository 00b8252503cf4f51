"""
Shared lookups for subway use cases.

Turn a missing entity into the matching domain error so each use
case does not repeat the None check.
"""

from app.domain.subway.entities import Line, Station
from app.domain.subway.errors import LineNotFoundError, StationNotFoundError
from app.domain.subway.ports import LineRepository, StationRepository


def require_station(station_repo: StationRepository, station_id: int) -> Station:
    """Return the station or raise StationNotFoundError."""
    station = station_repo.get_by_id(station_id)
    if station is None:
        raise StationNotFoundError(station_id)
    return station


def require_line(line_repo: LineRepository, line_id: int) -> Line:
    """Return the line or raise LineNotFoundError."""
    line = line_repo.get_by_id(line_id)
    if line is None:
        raise LineNotFoundError(line_id)
    return line
