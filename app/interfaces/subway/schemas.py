"""
Pydantic schemas for subway API request/response validation.

These schemas enforce input validation and define the API contract.
Section rules (contiguity, revisits, positive distance) are left to
the domain so their messages reach clients unchanged.
No business logic belongs here.
"""

from datetime import datetime

from pydantic import BaseModel, Field

NAME_MIN_LEN = 1
NAME_MAX_LEN = 255
COLOR_MAX_LEN = 64


class StationRequest(BaseModel):
    """Request schema for station registration."""

    name: str = Field(
        ..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN, description="Station name"
    )


class StationResponse(BaseModel):
    """A station summary."""

    id: int
    name: str


class LineCreateRequest(BaseModel):
    """Request schema for line creation.

    Attributes:
        name: Unique line name.
        color: Display color.
        up_station_id: Up terminus of the first section.
        down_station_id: Down terminus of the first section.
        distance: Length of the first section.
    """

    name: str = Field(..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN)
    color: str = Field(..., min_length=1, max_length=COLOR_MAX_LEN)
    up_station_id: int = Field(..., ge=1)
    down_station_id: int = Field(..., ge=1)
    distance: int = Field(..., description="Section length; must be positive")


class LineUpdateRequest(BaseModel):
    """Request schema for renaming or recoloring a line."""

    name: str = Field(..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN)
    color: str = Field(..., min_length=1, max_length=COLOR_MAX_LEN)


class LineResponse(BaseModel):
    """Response schema for a line with its stations in travel order."""

    id: int
    name: str
    color: str
    created_at: datetime
    modified_at: datetime
    stations: list[StationResponse]
    distance: int


class SectionRequest(BaseModel):
    """Request schema for appending a section to a line.

    Attributes:
        up_station_id: Must be the line's current down terminus.
        down_station_id: Must not already be on the line.
        distance: Section length; must be positive.
    """

    up_station_id: int = Field(..., ge=1)
    down_station_id: int = Field(..., ge=1)
    distance: int


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    database: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
