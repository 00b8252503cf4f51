"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.subway.errors import (
    DuplicateLineNameError,
    LineNotFoundError,
    SectionIntegrityError,
    SectionRuleError,
    StationInUseError,
    StationNotFoundError,
    SubwayDomainError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(SectionRuleError)
    async def handle_section_rule(
        _request: Request, exc: SectionRuleError
    ) -> JSONResponse:
        """Handle section-list rule violations. The message is kept verbatim."""
        logger.warning("Section rule violated (%s): %s", exc.kind.value, exc.message)
        return _error_response(HTTP_400, exc.kind.value, exc.message)

    @app.exception_handler(SectionIntegrityError)
    async def handle_section_integrity(
        _request: Request, exc: SectionIntegrityError
    ) -> JSONResponse:
        """Handle corrupt or misused section lists. Details stay in the log."""
        logger.error("Section integrity failure (%s): %s", exc.kind.value, exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(StationNotFoundError)
    async def handle_station_not_found(
        _request: Request, exc: StationNotFoundError
    ) -> JSONResponse:
        """Handle missing station errors."""
        logger.warning("Station not found: %s", exc.station_id)
        return _error_response(HTTP_404, "Station not found", exc.message)

    @app.exception_handler(LineNotFoundError)
    async def handle_line_not_found(
        _request: Request, exc: LineNotFoundError
    ) -> JSONResponse:
        """Handle missing line errors."""
        logger.warning("Line not found: %s", exc.line_id)
        return _error_response(HTTP_404, "Line not found", exc.message)

    @app.exception_handler(DuplicateLineNameError)
    async def handle_duplicate_line_name(
        _request: Request, exc: DuplicateLineNameError
    ) -> JSONResponse:
        """Handle line name conflicts."""
        logger.warning("Duplicate line name: %s", exc.name)
        return _error_response(HTTP_409, "Duplicate line name", exc.message)

    @app.exception_handler(StationInUseError)
    async def handle_station_in_use(
        _request: Request, exc: StationInUseError
    ) -> JSONResponse:
        """Handle deletion of a station still on a line."""
        logger.warning("Station %s in use by line %s", exc.station_id, exc.line_name)
        return _error_response(HTTP_409, "Station in use", exc.message)

    @app.exception_handler(SubwayDomainError)
    async def handle_subway_domain(
        _request: Request, exc: SubwayDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled subway domain errors."""
        logger.error("Unhandled subway domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
