"""
Port interfaces (ABCs) for the subway bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.subway.entities import Line, Station


class StationRepository(ABC):
    """Port for persisting and retrieving stations."""

    @abstractmethod
    def add(self, name: str) -> Station:
        """Persist a new station and return it with its assigned ID."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, station_id: int) -> Optional[Station]:
        """Return a station by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Station]:
        """Return all stations ordered by ID."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, station_id: int) -> None:
        """Delete a station. Deleting a missing station is a no-op."""
        raise NotImplementedError


class LineRepository(ABC):
    """Port for persisting and retrieving lines with their sections.

    Implementations load the full section chain of a line and save
    only the delta (appended or removed sections) in one transaction.
    """

    @abstractmethod
    def add(self, line: Line) -> Line:
        """Persist a new line and its sections.

        Returns:
            The stored line, with line and section IDs assigned.

        Raises:
            DuplicateLineNameError: If another line already has the name.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, line_id: int) -> Optional[Line]:
        """Return a line with its ordered sections, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Line]:
        """Return all lines ordered by ID."""
        raise NotImplementedError

    @abstractmethod
    def exists_by_name(self, name: str) -> bool:
        """Return True if a line with this name exists."""
        raise NotImplementedError

    @abstractmethod
    def save(self, line: Line) -> Line:
        """Persist metadata changes and the section delta of a line.

        Returns:
            The stored line as reloaded after the write.

        Raises:
            DuplicateLineNameError: If another line already has the name.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, line_id: int) -> None:
        """Delete a line and its sections. Missing lines are a no-op."""
        raise NotImplementedError
