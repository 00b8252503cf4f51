"""
Domain entities for the subway bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.

A line owns exactly one ``Sections`` list: the ordered chain of
sections that defines its physical route. All topology rules live in
``Sections``; ``Line`` only delegates to it.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterator, Optional

from app.domain.subway.errors import (
    BrokenChainError,
    DuplicateStationError,
    InvalidSectionError,
    NonContiguousSectionError,
    NotTerminalStationError,
    SectionsAlreadyInitializedError,
    SectionsNotInitializedError,
    SingleSectionRemovalError,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Station:
    """A subway station. Stations compare by identifier only."""

    id: Optional[int]
    name: str = field(compare=False)


@dataclass(frozen=True)
class Section:
    """One directed, distance-weighted edge between two stations of a line.

    Never mutated after creation. The persisted ``id`` does not take part
    in equality so a loaded section equals the value it was built from.
    """

    up_station: Station
    down_station: Station
    distance: int
    line_id: Optional[int] = None
    id: Optional[int] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.up_station == self.down_station:
            raise InvalidSectionError("up and down stations must differ")
        if self.distance <= 0:
            raise InvalidSectionError(
                f"distance must be positive, got {self.distance}"
            )


class Sections:
    """Ordered chain of sections belonging to exactly one line.

    Invariants after every mutation:
        - empty, or ``sections[i].down_station == sections[i + 1].up_station``
        - no station appears twice across all endpoints
        - at least one section once initialized

    Not safe for concurrent mutation; callers serialize per line.
    """

    def __init__(self, sections: Optional[list[Section]] = None) -> None:
        self._sections: list[Section] = list(sections or [])

    @classmethod
    def from_unordered(cls, sections: list[Section]) -> "Sections":
        """Rebuild chain order from sections loaded in arbitrary order.

        The head is the only section whose up station is no other
        section's down station; the chain is followed from there.

        Raises:
            BrokenChainError: If the sections branch, loop or split.
        """
        if not sections:
            return cls()

        down_stations = {s.down_station for s in sections}
        heads = [s for s in sections if s.up_station not in down_stations]
        if len(heads) != 1:
            raise BrokenChainError(f"expected one head section, found {len(heads)}")

        by_up: dict[Station, Section] = {}
        for section in sections:
            if section.up_station in by_up:
                raise BrokenChainError(
                    f"station {section.up_station.id} starts two sections"
                )
            by_up[section.up_station] = section

        ordered = [heads[0]]
        while ordered[-1].down_station in by_up and len(ordered) < len(sections):
            ordered.append(by_up[ordered[-1].down_station])

        if len(ordered) != len(sections):
            raise BrokenChainError(
                f"{len(sections) - len(ordered)} section(s) not reachable from the head"
            )

        chain = cls(ordered)
        path = chain.station_path()
        if len(set(path)) != len(path):
            raise BrokenChainError("a station is visited twice")
        return chain

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[Section]:
        return iter(self._sections)

    @property
    def is_empty(self) -> bool:
        return not self._sections

    @property
    def last_section(self) -> Section:
        self._require_initialized()
        return self._sections[-1]

    @property
    def terminus(self) -> Station:
        """The down station of the last section."""
        return self.last_section.down_station

    @property
    def total_distance(self) -> int:
        return sum(s.distance for s in self._sections)

    def initialize(self, section: Section) -> None:
        """Set the first section of an empty list."""
        if self._sections:
            raise SectionsAlreadyInitializedError()
        self._sections.append(section)

    def append(
        self,
        up_station: Station,
        down_station: Station,
        distance: int,
        line_id: Optional[int] = None,
    ) -> Section:
        """Append a section at the down end of the line.

        Args:
            up_station: Must be the current terminus.
            down_station: Must not already be on the line.
            distance: Positive length of the new section.
            line_id: Owning line identifier, if persisted.

        Returns:
            The newly created section.

        Raises:
            InvalidSectionError: Equal endpoints or non-positive distance.
            NonContiguousSectionError: ``up_station`` is not the terminus.
            DuplicateStationError: ``down_station`` is already on the line.
        """
        self._require_initialized()
        section = Section(
            up_station=up_station,
            down_station=down_station,
            distance=distance,
            line_id=line_id,
        )

        terminus = self.terminus
        if up_station != terminus:
            raise NonContiguousSectionError(up_station.id, terminus.id)

        if any(
            down_station in (s.up_station, s.down_station) for s in self._sections
        ):
            raise DuplicateStationError(down_station.id)

        self._sections.append(section)
        return section

    def remove_terminal(self, station: Station) -> Section:
        """Drop the last section when ``station`` is the terminus.

        Returns:
            The removed section.

        Raises:
            NotTerminalStationError: ``station`` is not the terminus.
            SingleSectionRemovalError: Only one section is left.
        """
        if station != self.terminus:
            raise NotTerminalStationError(station.id)
        if len(self._sections) == 1:
            raise SingleSectionRemovalError()
        return self._sections.pop()

    def station_path(self) -> list[Station]:
        """Return the ordered stations the line visits."""
        if not self._sections:
            return []
        path = [self._sections[0].up_station]
        path.extend(s.down_station for s in self._sections)
        return path

    def contains_station(self, station: Station) -> bool:
        return station in self.station_path()

    def _require_initialized(self) -> None:
        if not self._sections:
            raise SectionsNotInitializedError()


@dataclass
class Line:
    """Aggregate root: line metadata plus its section list."""

    name: str
    color: str
    sections: Sections = field(default_factory=Sections)
    id: Optional[int] = None
    created_at: datetime = field(default_factory=_utcnow)
    modified_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create(
        cls,
        name: str,
        color: str,
        up_station: Station,
        down_station: Station,
        distance: int,
    ) -> "Line":
        """Build a new line with its first section."""
        line = cls(name=name, color=color)
        line.sections.initialize(
            Section(up_station=up_station, down_station=down_station, distance=distance)
        )
        return line

    def update_info(self, name: str, color: str) -> None:
        self.name = name
        self.color = color
        self._touch()

    def add_section(
        self, up_station: Station, down_station: Station, distance: int
    ) -> Section:
        section = self.sections.append(up_station, down_station, distance, line_id=self.id)
        self._touch()
        return section

    def remove_station(self, station: Station) -> Section:
        removed = self.sections.remove_terminal(station)
        self._touch()
        return removed

    def stations(self) -> list[Station]:
        return self.sections.station_path()

    def contains_station(self, station: Station) -> bool:
        return self.sections.contains_station(station)

    def _touch(self) -> None:
        self.modified_at = _utcnow()
