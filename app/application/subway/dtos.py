"""
Data Transfer Objects for the subway application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior; the mapping helpers at
the bottom of the module build result DTOs from domain entities.
"""

from dataclasses import dataclass
from datetime import datetime

from app.domain.subway.entities import Line, Station


@dataclass(frozen=True)
class CreateStationCommand:
    """Input DTO for registering a station.

    Attributes:
        name: Display name of the station.
    """

    name: str


@dataclass(frozen=True)
class DeleteStationCommand:
    """Input DTO for deleting a station.

    Attributes:
        station_id: ID of the station to delete.
    """

    station_id: int


@dataclass(frozen=True)
class StationResult:
    """Output DTO for a station summary.

    Attributes:
        id: Station identifier.
        name: Display name.
    """

    id: int
    name: str


@dataclass(frozen=True)
class CreateLineCommand:
    """Input DTO for creating a line with its first section.

    Attributes:
        name: Unique line name.
        color: Display color (e.g. "bg-green-600").
        up_station_id: Up terminus of the first section.
        down_station_id: Down terminus of the first section.
        distance: Length of the first section.
    """

    name: str
    color: str
    up_station_id: int
    down_station_id: int
    distance: int


@dataclass(frozen=True)
class GetLineQuery:
    """Input DTO for retrieving a line.

    Attributes:
        line_id: ID of the line.
    """

    line_id: int


@dataclass(frozen=True)
class UpdateLineCommand:
    """Input DTO for renaming or recoloring a line.

    Attributes:
        line_id: ID of the line to update.
        name: New name.
        color: New color.
    """

    line_id: int
    name: str
    color: str


@dataclass(frozen=True)
class DeleteLineCommand:
    """Input DTO for deleting a line and its sections.

    Attributes:
        line_id: ID of the line to delete.
    """

    line_id: int


@dataclass(frozen=True)
class AddSectionCommand:
    """Input DTO for appending a section to a line.

    Attributes:
        line_id: ID of the line.
        up_station_id: Must be the line's current down terminus.
        down_station_id: Must not already be on the line.
        distance: Positive section length.
    """

    line_id: int
    up_station_id: int
    down_station_id: int
    distance: int


@dataclass(frozen=True)
class RemoveSectionCommand:
    """Input DTO for removing the down terminus of a line.

    Attributes:
        line_id: ID of the line.
        station_id: Must be the line's current down terminus.
    """

    line_id: int
    station_id: int


@dataclass(frozen=True)
class LineResult:
    """Output DTO for a line and its ordered stations.

    Attributes:
        id: Line identifier.
        name: Line name.
        color: Display color.
        created_at: Creation timestamp.
        modified_at: Last modification timestamp.
        stations: Stations in travel order, up terminus first.
        distance: Total length of all sections.
    """

    id: int
    name: str
    color: str
    created_at: datetime
    modified_at: datetime
    stations: list[StationResult]
    distance: int


def to_station_result(station: Station) -> StationResult:
    return StationResult(id=station.id, name=station.name)


def to_line_result(line: Line) -> LineResult:
    return LineResult(
        id=line.id,
        name=line.name,
        color=line.color,
        created_at=line.created_at,
        modified_at=line.modified_at,
        stations=[to_station_result(s) for s in line.stations()],
        distance=line.sections.total_distance,
    )
