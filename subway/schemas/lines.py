"""Pydantic schemas for line and section management."""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from subway.core.config import settings
from subway.schemas.stations import StationResponse

# ==================== Helper Functions ====================


def _validate_name(name: str) -> str:
    """
    Validate a line name - reusable helper.

    Raises:
        ValueError: If the name is blank once surrounding whitespace is removed
    """
    stripped = name.strip()
    if not stripped:
        msg = "Line name must not be blank"
        raise ValueError(msg)
    return stripped


# ==================== Request Schemas ====================


class CreateLineRequest(BaseModel):
    """
    Request to create a new line.

    The first section is optional: either all of ``up_station_id``,
    ``down_station_id`` and ``distance`` are provided, or none of them.
    """

    name: str = Field(
        ..., min_length=1, max_length=settings.MAX_LINE_NAME_LENGTH, description="Line name (unique across lines)"
    )
    color: str = Field(..., min_length=1, max_length=64, description="Display color (e.g., 'bg-red-600')")
    up_station_id: UUID | None = Field(None, description="Up terminal station of the first section")
    down_station_id: UUID | None = Field(None, description="Down terminal station of the first section")
    distance: int | None = Field(None, gt=0, description="Distance of the first section")

    @field_validator("name")
    @classmethod
    def validate_name(cls, name: str) -> str:
        """Validate name using shared helper."""
        return _validate_name(name)

    @model_validator(mode="after")
    def validate_initial_section(self) -> "CreateLineRequest":
        """Require all or none of the first-section fields."""
        fields = (self.up_station_id, self.down_station_id, self.distance)
        if any(value is not None for value in fields) and not all(value is not None for value in fields):
            msg = "up_station_id, down_station_id and distance must be provided together"
            raise ValueError(msg)
        return self

    @property
    def has_initial_section(self) -> bool:
        return self.up_station_id is not None


class UpdateLineRequest(BaseModel):
    """Request to replace a line's name and color."""

    name: str = Field(..., min_length=1, max_length=settings.MAX_LINE_NAME_LENGTH)
    color: str = Field(..., min_length=1, max_length=64)

    @field_validator("name")
    @classmethod
    def validate_name(cls, name: str) -> str:
        """Validate name using shared helper."""
        return _validate_name(name)


class AddSectionRequest(BaseModel):
    """Request to add a section to an existing line."""

    up_station_id: UUID
    down_station_id: UUID
    distance: int = Field(..., gt=0)


# ==================== Response Schemas ====================


class SectionResponse(BaseModel):
    """Section of a line."""

    up_station: StationResponse
    down_station: StationResponse
    distance: int


class LineResponse(BaseModel):
    """Line with its stations ordered from up terminal to down terminal."""

    id: UUID
    name: str
    color: str
    stations: list[StationResponse]
    sections: list[SectionResponse]
    up_terminal: StationResponse | None = Field(None, description="First station (None for an empty line)")
    down_terminal: StationResponse | None = Field(None, description="Last station (None for an empty line)")
    distance: int = Field(..., description="Total distance from up terminal to down terminal")
