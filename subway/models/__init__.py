"""Domain models for the subway application."""

from subway.models.errors import (
    DuplicatedLineNameError,
    DuplicatedSectionError,
    DuplicatedStationNameError,
    ErrorKind,
    IllegalSectionError,
    LineNotFoundError,
    SectionChainError,
    SectionNotFoundError,
    StationInUseError,
    StationNotFoundError,
    SubwayError,
)
from subway.models.line import Line
from subway.models.section import Section
from subway.models.sections import Sections
from subway.models.station import Station

__all__ = [
    # Entities
    "Line",
    "Section",
    "Sections",
    "Station",
    # Errors
    "ErrorKind",
    "SubwayError",
    "IllegalSectionError",
    "DuplicatedSectionError",
    "SectionNotFoundError",
    "SectionChainError",
    "LineNotFoundError",
    "StationNotFoundError",
    "DuplicatedLineNameError",
    "DuplicatedStationNameError",
    "StationInUseError",
]
