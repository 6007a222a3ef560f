"""Lines API endpoints for managing lines and their sections."""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from subway.core.config import settings
from subway.core.store import Store, get_store
from subway.schemas.lines import AddSectionRequest, CreateLineRequest, LineResponse, UpdateLineRequest
from subway.services.line_service import LineService, build_line_response

router = APIRouter(prefix="/lines", tags=["lines"])


# ==================== Line Endpoints ====================


@router.post("", response_model=LineResponse, status_code=status.HTTP_201_CREATED)
async def create_line(
    request: CreateLineRequest,
    response: Response,
    store: Store = Depends(get_store),
) -> LineResponse:
    """
    Create a line, optionally with its first section.

    Args:
        request: Line creation request
        response: Response (for the Location header)
        store: Shared repositories

    Returns:
        Created line with its stations ordered from up to down terminal

    Raises:
        DuplicatedLineNameError: 400 if the name is already in use
        IllegalSectionError: 400 if the first section is invalid
        StationNotFoundError: 404 if a referenced station does not exist
    """
    line = LineService(store).create_line(request)
    response.headers["Location"] = f"{settings.API_V1_PREFIX}{router.prefix}/{line.id}"
    return build_line_response(line)


@router.get("", response_model=list[LineResponse])
async def list_lines(store: Store = Depends(get_store)) -> list[LineResponse]:
    """List all lines in creation order."""
    return [build_line_response(line) for line in LineService(store).list_lines()]


@router.get("/{line_id}", response_model=LineResponse)
async def get_line(line_id: UUID, store: Store = Depends(get_store)) -> LineResponse:
    """
    Get a line by ID.

    Raises:
        LineNotFoundError: 404 if the line does not exist
    """
    return build_line_response(LineService(store).get_line(line_id))


@router.put("/{line_id}", status_code=status.HTTP_200_OK)
async def update_line(
    line_id: UUID,
    request: UpdateLineRequest,
    store: Store = Depends(get_store),
) -> None:
    """
    Replace a line's name and color.

    Raises:
        LineNotFoundError: 404 if the line does not exist
        DuplicatedLineNameError: 400 if another line uses the name
    """
    LineService(store).update_line(line_id, request)


@router.delete("/{line_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_line(line_id: UUID, store: Store = Depends(get_store)) -> None:
    """
    Delete a line.

    Raises:
        LineNotFoundError: 404 if the line does not exist
    """
    LineService(store).delete_line(line_id)


# ==================== Section Endpoints ====================


@router.post("/{line_id}/sections", response_model=LineResponse, status_code=status.HTTP_201_CREATED)
async def add_section(
    line_id: UUID,
    request: AddSectionRequest,
    store: Store = Depends(get_store),
) -> LineResponse:
    """
    Add a section to a line.

    The section extends the line past a terminal or splits an existing
    section that shares its up or down station.

    Raises:
        LineNotFoundError: 404 if the line does not exist
        StationNotFoundError: 404 if a referenced station does not exist
        IllegalSectionError: 400 if the section cannot be attached
        DuplicatedSectionError: 400 if the same section already exists
    """
    line = LineService(store).add_section(line_id, request)
    return build_line_response(line)
