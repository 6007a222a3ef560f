"""Station management service."""

import uuid

import structlog

from subway.core.store import Store
from subway.models.errors import DuplicatedStationNameError, StationInUseError
from subway.models.station import Station
from subway.schemas.stations import CreateStationRequest

logger = structlog.get_logger(__name__)


class StationService:
    """Service for creating, listing and deleting stations."""

    def __init__(self, store: Store) -> None:
        """
        Initialize the station service.

        Args:
            store: Shared repositories
        """
        self.store = store

    def create_station(self, request: CreateStationRequest) -> Station:
        """
        Create a station.

        Raises:
            DuplicatedStationNameError: If a station with the same name exists
        """
        if self.store.stations.find_by_name(request.name) is not None:
            logger.warning("station_name_duplicated", name=request.name)
            raise DuplicatedStationNameError(request.name)

        station = self.store.stations.add(Station(name=request.name))
        logger.info("station_created", station_id=str(station.id), name=station.name)
        return station

    def list_stations(self) -> list[Station]:
        return self.store.stations.list()

    def get_station(self, station_id: uuid.UUID) -> Station:
        return self.store.stations.get(station_id)

    def delete_station(self, station_id: uuid.UUID) -> None:
        """
        Delete a station that no line uses.

        Raises:
            StationNotFoundError: If the station does not exist
            StationInUseError: If any line still has a section touching it
        """
        station = self.store.stations.get(station_id)
        if using := [line.name for line in self.store.lines.list() if station in line.sections]:
            logger.warning("station_delete_rejected", station_id=str(station_id), lines=using)
            raise StationInUseError(station_id, using)

        self.store.stations.delete(station_id)
        logger.info("station_deleted", station_id=str(station_id))
