"""
FastAPI routers for the subway bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response

from app.application.subway.add_section import AddSectionUseCase
from app.application.subway.create_line import CreateLineUseCase
from app.application.subway.create_station import CreateStationUseCase
from app.application.subway.delete_line import DeleteLineUseCase
from app.application.subway.delete_station import DeleteStationUseCase
from app.application.subway.dtos import (
    AddSectionCommand,
    CreateLineCommand,
    CreateStationCommand,
    DeleteLineCommand,
    DeleteStationCommand,
    GetLineQuery,
    LineResult,
    RemoveSectionCommand,
    StationResult,
    UpdateLineCommand,
)
from app.application.subway.get_line import GetLineUseCase
from app.application.subway.list_lines import ListLinesUseCase
from app.application.subway.list_stations import ListStationsUseCase
from app.application.subway.remove_section import RemoveSectionUseCase
from app.application.subway.update_line import UpdateLineUseCase
from app.interfaces.subway.dependencies import (
    get_add_section_use_case,
    get_create_line_use_case,
    get_create_station_use_case,
    get_delete_line_use_case,
    get_delete_station_use_case,
    get_get_line_use_case,
    get_list_lines_use_case,
    get_list_stations_use_case,
    get_remove_section_use_case,
    get_update_line_use_case,
)
from app.interfaces.subway.schemas import (
    ErrorResponse,
    LineCreateRequest,
    LineResponse,
    LineUpdateRequest,
    SectionRequest,
    StationRequest,
    StationResponse,
)

stations_router = APIRouter(prefix="/stations", tags=["stations"])
lines_router = APIRouter(prefix="/lines", tags=["lines"])


def _station_response(result: StationResult) -> StationResponse:
    return StationResponse(id=result.id, name=result.name)


def _line_response(result: LineResult) -> LineResponse:
    return LineResponse(
        id=result.id,
        name=result.name,
        color=result.color,
        created_at=result.created_at,
        modified_at=result.modified_at,
        stations=[_station_response(s) for s in result.stations],
        distance=result.distance,
    )


# ------------------------------------------------------------------
# Stations
# ------------------------------------------------------------------


@stations_router.post(
    "",
    response_model=StationResponse,
    status_code=201,
    summary="Register a station",
)
def create_station(
    request: StationRequest,
    use_case: CreateStationUseCase = Depends(get_create_station_use_case),
) -> StationResponse:
    """Register a new station."""
    return _station_response(use_case.execute(CreateStationCommand(name=request.name)))


@stations_router.get(
    "",
    response_model=list[StationResponse],
    summary="List stations",
)
def list_stations(
    use_case: ListStationsUseCase = Depends(get_list_stations_use_case),
) -> list[StationResponse]:
    """List all registered stations."""
    return [_station_response(s) for s in use_case.execute()]


@stations_router.delete(
    "/{station_id}",
    status_code=204,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Delete a station",
    description="Delete a station that no line visits anymore.",
)
def delete_station(
    station_id: int,
    use_case: DeleteStationUseCase = Depends(get_delete_station_use_case),
) -> Response:
    """Delete a station."""
    use_case.execute(DeleteStationCommand(station_id=station_id))
    return Response(status_code=204)


# ------------------------------------------------------------------
# Lines
# ------------------------------------------------------------------


@lines_router.post(
    "",
    response_model=LineResponse,
    status_code=201,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Create a line",
    description="Create a line together with its first section.",
)
def create_line(
    request: LineCreateRequest,
    use_case: CreateLineUseCase = Depends(get_create_line_use_case),
) -> LineResponse:
    """Create a line with its first section."""
    command = CreateLineCommand(
        name=request.name,
        color=request.color,
        up_station_id=request.up_station_id,
        down_station_id=request.down_station_id,
        distance=request.distance,
    )
    return _line_response(use_case.execute(command))


@lines_router.get(
    "",
    response_model=list[LineResponse],
    summary="List lines",
)
def list_lines(
    use_case: ListLinesUseCase = Depends(get_list_lines_use_case),
) -> list[LineResponse]:
    """List all lines with their stations in travel order."""
    return [_line_response(line) for line in use_case.execute()]


@lines_router.get(
    "/{line_id}",
    response_model=LineResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a line",
)
def get_line(
    line_id: int,
    use_case: GetLineUseCase = Depends(get_get_line_use_case),
) -> LineResponse:
    """Get one line with its stations in travel order."""
    return _line_response(use_case.execute(GetLineQuery(line_id=line_id)))


@lines_router.put(
    "/{line_id}",
    response_model=LineResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Update a line",
    description="Rename or recolor a line. Sections are not affected.",
)
def update_line(
    line_id: int,
    request: LineUpdateRequest,
    use_case: UpdateLineUseCase = Depends(get_update_line_use_case),
) -> LineResponse:
    """Rename or recolor a line."""
    command = UpdateLineCommand(line_id=line_id, name=request.name, color=request.color)
    return _line_response(use_case.execute(command))


@lines_router.delete(
    "/{line_id}",
    status_code=204,
    summary="Delete a line",
)
def delete_line(
    line_id: int,
    use_case: DeleteLineUseCase = Depends(get_delete_line_use_case),
) -> Response:
    """Delete a line and all of its sections."""
    use_case.execute(DeleteLineCommand(line_id=line_id))
    return Response(status_code=204)


@lines_router.post(
    "/{line_id}/sections",
    response_model=LineResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Append a section",
    description=(
        "Append a section at the down end of the line. The up station must be "
        "the current down terminus and the down station must be new to the line."
    ),
)
def add_section(
    line_id: int,
    request: SectionRequest,
    use_case: AddSectionUseCase = Depends(get_add_section_use_case),
) -> LineResponse:
    """Append a section to a line."""
    command = AddSectionCommand(
        line_id=line_id,
        up_station_id=request.up_station_id,
        down_station_id=request.down_station_id,
        distance=request.distance,
    )
    return _line_response(use_case.execute(command))


@lines_router.delete(
    "/{line_id}/sections",
    status_code=204,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Remove the down terminus",
    description="Remove the last section of a line by naming its down terminus.",
)
def remove_section(
    line_id: int,
    station_id: Annotated[int, Query(ge=1, description="Down terminus to remove")],
    use_case: RemoveSectionUseCase = Depends(get_remove_section_use_case),
) -> Response:
    """Remove the down terminus of a line."""
    use_case.execute(RemoveSectionCommand(line_id=line_id, station_id=station_id))
    return Response(status_code=204)
