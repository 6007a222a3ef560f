"""Pydantic schemas for station management."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from subway.core.config import settings


class CreateStationRequest(BaseModel):
    """Request to create a new station."""

    name: str = Field(
        ..., min_length=1, max_length=settings.MAX_LINE_NAME_LENGTH, description="Station name (unique)"
    )

    @field_validator("name", mode="after")
    @classmethod
    def strip_name(cls, v: str) -> str:
        """Reject blank names after trimming whitespace."""
        stripped = v.strip()
        if not stripped:
            msg = "Station name must not be blank"
            raise ValueError(msg)
        return stripped


class StationResponse(BaseModel):
    """Station response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
