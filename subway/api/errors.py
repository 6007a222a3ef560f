"""Translation of domain errors into HTTP responses."""

import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse

from subway.models.errors import ErrorKind, SubwayError

logger = structlog.get_logger(__name__)

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.ILLEGAL_SECTION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DUPLICATED_SECTION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DUPLICATED_LINE_NAME: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DUPLICATED_STATION_NAME: status.HTTP_400_BAD_REQUEST,
    ErrorKind.STATION_IN_USE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.SECTION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.LINE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.STATION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(kind: ErrorKind) -> int:
    """HTTP status code for an error kind (500 for unmapped kinds)."""
    return STATUS_BY_KIND.get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def subway_error_handler(request: Request, exc: SubwayError) -> JSONResponse:
    """Respond with ``{"detail", "kind"}`` and the status mapped from the error kind."""
    status_code = status_for(exc.kind)

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("request_failed", path=request.url.path, kind=exc.kind, error=exc.message, exc_info=exc)
    else:
        logger.info("request_rejected", path=request.url.path, kind=exc.kind, status_code=status_code)

    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "kind": exc.kind.value},
    )
