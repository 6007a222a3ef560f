"""Stations API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from subway.core.config import settings
from subway.core.store import Store, get_store
from subway.schemas.stations import CreateStationRequest, StationResponse
from subway.services.station_service import StationService

router = APIRouter(prefix="/stations", tags=["stations"])


@router.post("", response_model=StationResponse, status_code=status.HTTP_201_CREATED)
async def create_station(
    request: CreateStationRequest,
    response: Response,
    store: Store = Depends(get_store),
) -> StationResponse:
    """
    Create a station.

    Raises:
        DuplicatedStationNameError: 400 if the name is already in use
    """
    station = StationService(store).create_station(request)
    response.headers["Location"] = f"{settings.API_V1_PREFIX}{router.prefix}/{station.id}"
    return StationResponse.model_validate(station)


@router.get("", response_model=list[StationResponse])
async def list_stations(store: Store = Depends(get_store)) -> list[StationResponse]:
    """List all stations in creation order."""
    return [StationResponse.model_validate(station) for station in StationService(store).list_stations()]


@router.get("/{station_id}", response_model=StationResponse)
async def get_station(station_id: UUID, store: Store = Depends(get_store)) -> StationResponse:
    """
    Get a station by ID.

    Raises:
        StationNotFoundError: 404 if the station does not exist
    """
    return StationResponse.model_validate(StationService(store).get_station(station_id))


@router.delete("/{station_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_station(station_id: UUID, store: Store = Depends(get_store)) -> None:
    """
    Delete a station.

    Raises:
        StationNotFoundError: 404 if the station does not exist
        StationInUseError: 400 if a line still uses the station
    """
    StationService(store).delete_station(station_id)
