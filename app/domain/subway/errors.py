"""
Domain-specific errors for the subway bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from enum import Enum


class SectionErrorKind(Enum):
    """Kinds of section-list rule violations.

    The value is the stable error code exposed to API clients.
    """

    INVALID_SECTION = "invalid_section"
    NON_CONTIGUOUS_APPEND = "non_contiguous_append"
    DUPLICATE_TERMINUS = "duplicate_terminus"
    NOT_TERMINAL_STATION = "not_terminal_station"
    SINGLE_SECTION_UNREMOVABLE = "single_section_unremovable"
    UNINITIALIZED = "uninitialized"
    ALREADY_INITIALIZED = "already_initialized"
    BROKEN_CHAIN = "broken_chain"


class SubwayDomainError(Exception):
    """Base error for all subway domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class SectionRuleError(SubwayDomainError):
    """Base error for section-list rule violations.

    Carries the violation kind and the human-readable message as data
    so callers can branch on ``kind`` and surface ``message`` verbatim.
    """

    kind: SectionErrorKind

    def __init__(self, kind: SectionErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class InvalidSectionError(SectionRuleError):
    """Raised when a section has equal endpoints or a non-positive distance."""

    def __init__(self, reason: str) -> None:
        super().__init__(SectionErrorKind.INVALID_SECTION, f"Invalid section: {reason}")
        self.reason = reason


class NonContiguousSectionError(SectionRuleError):
    """Raised when a new section does not start at the line's terminus."""

    def __init__(self, up_station_id: int | None, terminus_id: int | None) -> None:
        super().__init__(
            SectionErrorKind.NON_CONTIGUOUS_APPEND,
            "The up station of a new section must be the down terminus of the line.",
        )
        self.up_station_id = up_station_id
        self.terminus_id = terminus_id


class DuplicateStationError(SectionRuleError):
    """Raised when a new section's down station is already on the line."""

    def __init__(self, station_id: int | None) -> None:
        super().__init__(
            SectionErrorKind.DUPLICATE_TERMINUS,
            "The down station of a new section must not already be on the line.",
        )
        self.station_id = station_id


class NotTerminalStationError(SectionRuleError):
    """Raised when removing a station that is not the line's down terminus."""

    def __init__(self, station_id: int | None) -> None:
        super().__init__(
            SectionErrorKind.NOT_TERMINAL_STATION,
            "Only the down terminus of the line can be removed.",
        )
        self.station_id = station_id


class SingleSectionRemovalError(SectionRuleError):
    """Raised when removing a station would leave the line without sections."""

    def __init__(self) -> None:
        super().__init__(
            SectionErrorKind.SINGLE_SECTION_UNREMOVABLE,
            "A line with only its up and down termini cannot lose a station.",
        )


class SectionIntegrityError(SubwayDomainError):
    """Base error for section-list states no client request can cause.

    Raised when stored sections are corrupt or a section list is used
    out of order. Carries a ``kind`` like ``SectionRuleError`` but is
    a server-side failure, not a rejected request.
    """

    kind: SectionErrorKind

    def __init__(self, kind: SectionErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class SectionsNotInitializedError(SectionIntegrityError):
    """Raised when operating on a line that has no sections yet."""

    def __init__(self) -> None:
        super().__init__(
            SectionErrorKind.UNINITIALIZED,
            "The line has no sections yet.",
        )


class SectionsAlreadyInitializedError(SectionIntegrityError):
    """Raised when initializing a section list that already has sections."""

    def __init__(self) -> None:
        super().__init__(
            SectionErrorKind.ALREADY_INITIALIZED,
            "The line already has sections.",
        )


class BrokenChainError(SectionIntegrityError):
    """Raised when stored sections do not form a single unbroken chain."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            SectionErrorKind.BROKEN_CHAIN,
            f"Sections do not form a single chain: {reason}",
        )
        self.reason = reason


class StationNotFoundError(SubwayDomainError):
    """Raised when a station cannot be found."""

    def __init__(self, station_id: int) -> None:
        super().__init__(f"Station not found: {station_id}")
        self.station_id = station_id


class LineNotFoundError(SubwayDomainError):
    """Raised when a line cannot be found."""

    def __init__(self, line_id: int) -> None:
        super().__init__(f"Line not found: {line_id}")
        self.line_id = line_id


class DuplicateLineNameError(SubwayDomainError):
    """Raised when a line name is already taken."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Line name already exists: {name}")
        self.name = name


class StationInUseError(SubwayDomainError):
    """Raised when deleting a station that is still part of a line."""

    def __init__(self, station_id: int, line_name: str) -> None:
        super().__init__(
            f"Station {station_id} is still used by line {line_name}"
        )
        self.station_id = station_id
        self.line_name = line_name
