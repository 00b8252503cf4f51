"""
Dependency injection for the subway bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the subway context; tests swap
the engine through ``app.dependency_overrides[get_engine]``.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.engine import Engine

from app.application.subway.add_section import AddSectionUseCase
from app.application.subway.create_line import CreateLineUseCase
from app.application.subway.create_station import CreateStationUseCase
from app.application.subway.delete_line import DeleteLineUseCase
from app.application.subway.delete_station import DeleteStationUseCase
from app.application.subway.get_line import GetLineUseCase
from app.application.subway.line_locks import LineLocks
from app.application.subway.list_lines import ListLinesUseCase
from app.application.subway.list_stations import ListStationsUseCase
from app.application.subway.remove_section import RemoveSectionUseCase
from app.application.subway.update_line import UpdateLineUseCase
from app.core.config import settings
from app.domain.subway.ports import LineRepository, StationRepository
from app.infrastructure.subway.database import build_engine
from app.infrastructure.subway.line_repository import LineRepositoryAdapter
from app.infrastructure.subway.station_repository import StationRepositoryAdapter

_line_locks = LineLocks()


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Build the SQLAlchemy engine once from application settings."""
    return build_engine(settings.database_url, echo=settings.database_echo)


def get_line_locks() -> LineLocks:
    """Return the process-wide per-line lock registry."""
    return _line_locks


def get_station_repository(engine: Engine = Depends(get_engine)) -> StationRepository:
    return StationRepositoryAdapter(engine=engine)


def get_line_repository(engine: Engine = Depends(get_engine)) -> LineRepository:
    return LineRepositoryAdapter(engine=engine)


def get_create_station_use_case(
    station_repo: StationRepository = Depends(get_station_repository),
) -> CreateStationUseCase:
    """Build CreateStationUseCase with its infrastructure dependencies."""
    return CreateStationUseCase(station_repo=station_repo)


def get_list_stations_use_case(
    station_repo: StationRepository = Depends(get_station_repository),
) -> ListStationsUseCase:
    """Build ListStationsUseCase with its infrastructure dependencies."""
    return ListStationsUseCase(station_repo=station_repo)


def get_delete_station_use_case(
    station_repo: StationRepository = Depends(get_station_repository),
    line_repo: LineRepository = Depends(get_line_repository),
    locks: LineLocks = Depends(get_line_locks),
) -> DeleteStationUseCase:
    """Build DeleteStationUseCase with its infrastructure dependencies."""
    return DeleteStationUseCase(
        station_repo=station_repo, line_repo=line_repo, locks=locks
    )


def get_create_line_use_case(
    line_repo: LineRepository = Depends(get_line_repository),
    station_repo: StationRepository = Depends(get_station_repository),
    locks: LineLocks = Depends(get_line_locks),
) -> CreateLineUseCase:
    """Build CreateLineUseCase with its infrastructure dependencies."""
    return CreateLineUseCase(line_repo=line_repo, station_repo=station_repo, locks=locks)


def get_get_line_use_case(
    line_repo: LineRepository = Depends(get_line_repository),
) -> GetLineUseCase:
    """Build GetLineUseCase with its infrastructure dependencies."""
    return GetLineUseCase(line_repo=line_repo)


def get_list_lines_use_case(
    line_repo: LineRepository = Depends(get_line_repository),
) -> ListLinesUseCase:
    """Build ListLinesUseCase with its infrastructure dependencies."""
    return ListLinesUseCase(line_repo=line_repo)


def get_update_line_use_case(
    line_repo: LineRepository = Depends(get_line_repository),
    locks: LineLocks = Depends(get_line_locks),
) -> UpdateLineUseCase:
    """Build UpdateLineUseCase with its infrastructure dependencies."""
    return UpdateLineUseCase(line_repo=line_repo, locks=locks)


def get_delete_line_use_case(
    line_repo: LineRepository = Depends(get_line_repository),
    locks: LineLocks = Depends(get_line_locks),
) -> DeleteLineUseCase:
    """Build DeleteLineUseCase with its infrastructure dependencies."""
    return DeleteLineUseCase(line_repo=line_repo, locks=locks)


def get_add_section_use_case(
    line_repo: LineRepository = Depends(get_line_repository),
    station_repo: StationRepository = Depends(get_station_repository),
    locks: LineLocks = Depends(get_line_locks),
) -> AddSectionUseCase:
    """Build AddSectionUseCase with its infrastructure dependencies."""
    return AddSectionUseCase(line_repo=line_repo, station_repo=station_repo, locks=locks)


def get_remove_section_use_case(
    line_repo: LineRepository = Depends(get_line_repository),
    station_repo: StationRepository = Depends(get_station_repository),
    locks: LineLocks = Depends(get_line_locks),
) -> RemoveSectionUseCase:
    """Build RemoveSectionUseCase with its infrastructure dependencies."""
    return RemoveSectionUseCase(
        line_repo=line_repo, station_repo=station_repo, locks=locks
    )
