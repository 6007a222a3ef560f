"""Line management service."""

import uuid

import structlog

from subway.core.store import Store
from subway.models.errors import DuplicatedLineNameError, SubwayError
from subway.models.line import Line
from subway.schemas.lines import (
    AddSectionRequest,
    CreateLineRequest,
    LineResponse,
    SectionResponse,
    UpdateLineRequest,
)
from subway.schemas.stations import StationResponse

logger = structlog.get_logger(__name__)


def build_line_response(line: Line) -> LineResponse:
    """
    Translate a line into its response payload.

    Stations are ordered from the up terminal to the down terminal; an empty
    line has no stations, no terminals and a distance of 0.
    """
    up_terminal: StationResponse | None = None
    down_terminal: StationResponse | None = None
    if len(line.sections):
        up_terminal = StationResponse.model_validate(line.sections.get_up_terminal_section().up_station)
        down_terminal = StationResponse.model_validate(line.sections.get_down_terminal_section().down_station)

    return LineResponse(
        id=line.id,
        name=line.name,
        color=line.color,
        stations=[StationResponse.model_validate(station) for station in line.stations()],
        sections=[
            SectionResponse(
                up_station=StationResponse.model_validate(section.up_station),
                down_station=StationResponse.model_validate(section.down_station),
                distance=section.distance,
            )
            for section in line.sections
        ],
        up_terminal=up_terminal,
        down_terminal=down_terminal,
        distance=line.sections.total_distance(),
    )


class LineService:
    """Service for managing lines and their sections."""

    def __init__(self, store: Store) -> None:
        """
        Initialize the line service.

        Args:
            store: Shared repositories
        """
        self.store = store

    def _ensure_unique_name(self, name: str, *, exclude: uuid.UUID | None = None) -> None:
        existing = self.store.lines.find_by_name(name)
        if existing is not None and existing.id != exclude:
            logger.warning("line_name_duplicated", name=name)
            raise DuplicatedLineNameError(name)

    def create_line(self, request: CreateLineRequest) -> Line:
        """
        Create a line, with its first section if one is requested.

        The line is only stored once its first section has been accepted.

        Args:
            request: Line creation request

        Returns:
            Created line

        Raises:
            DuplicatedLineNameError: If another line has the same name
            StationNotFoundError: If a referenced station does not exist
            IllegalSectionError: If the first section is invalid
        """
        self._ensure_unique_name(request.name)

        if request.has_initial_section:
            up_station = self.store.stations.get(request.up_station_id)
            down_station = self.store.stations.get(request.down_station_id)
            try:
                line = Line.of(request.name, request.color, up_station, down_station, request.distance)
            except SubwayError as e:
                logger.warning("line_create_rejected", name=request.name, kind=e.kind, error=e.message)
                raise
        else:
            line = Line.of(request.name, request.color)

        self.store.lines.add(line)
        logger.info("line_created", line_id=str(line.id), name=line.name, sections=len(line.sections))
        return line

    def list_lines(self) -> list[Line]:
        return self.store.lines.list()

    def get_line(self, line_id: uuid.UUID) -> Line:
        """
        Get a line by ID.

        Raises:
            LineNotFoundError: If the line does not exist
        """
        return self.store.lines.get(line_id)

    def update_line(self, line_id: uuid.UUID, request: UpdateLineRequest) -> Line:
        """
        Replace a line's name and color.

        Raises:
            LineNotFoundError: If the line does not exist
            DuplicatedLineNameError: If another line already uses the new name
        """
        line = self.store.lines.get(line_id)
        self._ensure_unique_name(request.name, exclude=line.id)
        line.edit(request.name, request.color)
        logger.info("line_updated", line_id=str(line.id), name=line.name, color=line.color)
        return line

    def delete_line(self, line_id: uuid.UUID) -> None:
        """
        Delete a line and its sections.

        Raises:
            LineNotFoundError: If the line does not exist
        """
        self.store.lines.delete(line_id)
        logger.info("line_deleted", line_id=str(line_id))

    def add_section(self, line_id: uuid.UUID, request: AddSectionRequest) -> Line:
        """
        Extend or split a line with a new section.

        Args:
            line_id: Line UUID
            request: Section to add

        Returns:
            The updated line

        Raises:
            LineNotFoundError: If the line does not exist
            StationNotFoundError: If a referenced station does not exist
            IllegalSectionError: If the section cannot be attached
            DuplicatedSectionError: If the same section already exists
        """
        line = self.store.lines.get(line_id)
        up_station = self.store.stations.get(request.up_station_id)
        down_station = self.store.stations.get(request.down_station_id)

        try:
            line.add_section(up_station, down_station, request.distance)
        except SubwayError as e:
            logger.warning(
                "section_rejected",
                line_id=str(line.id),
                up_station=up_station.name,
                down_station=down_station.name,
                distance=request.distance,
                kind=e.kind,
                error=e.message,
            )
            raise

        logger.info(
            "section_added",
            line_id=str(line.id),
            up_station=up_station.name,
            down_station=down_station.name,
            distance=request.distance,
            total_distance=line.sections.total_distance(),
        )
        return line
