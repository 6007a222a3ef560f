"""
Domain exceptions for subway lines, sections and stations.

Every error carries a ``kind`` so callers (the HTTP layer in particular) can
branch on the kind of failure instead of on the exception class.
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Kinds of rejection raised by the domain and service layers."""

    ILLEGAL_SECTION = "illegal_section"
    DUPLICATED_SECTION = "duplicated_section"
    SECTION_NOT_FOUND = "section_not_found"
    LINE_NOT_FOUND = "line_not_found"
    STATION_NOT_FOUND = "station_not_found"
    DUPLICATED_LINE_NAME = "duplicated_line_name"
    DUPLICATED_STATION_NAME = "duplicated_station_name"
    STATION_IN_USE = "station_in_use"
    INTERNAL = "internal"


class SubwayError(Exception):
    """Base exception for all subway domain errors."""

    kind: ErrorKind = ErrorKind.INTERNAL
    MESSAGE = "Unexpected subway error."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.MESSAGE)

    @property
    def message(self) -> str:
        """Human readable message (first exception argument)."""
        return str(self.args[0])


class IllegalSectionError(SubwayError):
    """
    Raised when a section cannot exist or cannot be attached to a line.

    Covers self-looping sections, non-positive distances, sections that share
    no station with the existing chain, and splits whose distance is not
    strictly smaller than the section being split.
    """

    kind = ErrorKind.ILLEGAL_SECTION
    MESSAGE = "Illegal section."


class DuplicatedSectionError(SubwayError):
    """Raised when a section with the same up/down stations already exists."""

    kind = ErrorKind.DUPLICATED_SECTION
    MESSAGE = "Section already exists on this line."


class SectionNotFoundError(SubwayError):
    """Raised when a terminal or traversal query runs against an empty chain."""

    kind = ErrorKind.SECTION_NOT_FOUND
    MESSAGE = "Section not found."


class SectionChainError(SubwayError):
    """Raised when the section chain reaches a state it should never be in."""

    kind = ErrorKind.INTERNAL
    MESSAGE = "Section chain is inconsistent."


class LineNotFoundError(SubwayError):
    """Raised when a line identity does not exist."""

    kind = ErrorKind.LINE_NOT_FOUND

    def __init__(self, line_id: object) -> None:
        self.line_id = line_id
        super().__init__(f"Line '{line_id}' not found.")


class StationNotFoundError(SubwayError):
    """Raised when a station identity does not exist."""

    kind = ErrorKind.STATION_NOT_FOUND

    def __init__(self, station_id: object) -> None:
        self.station_id = station_id
        super().__init__(f"Station '{station_id}' not found.")


class DuplicatedLineNameError(SubwayError):
    """Raised when creating or renaming a line to a name already in use."""

    kind = ErrorKind.DUPLICATED_LINE_NAME

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Line name '{name}' is already in use.")


class DuplicatedStationNameError(SubwayError):
    """Raised when creating a station with a name already in use."""

    kind = ErrorKind.DUPLICATED_STATION_NAME

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Station name '{name}' is already in use.")


class StationInUseError(SubwayError):
    """Raised when deleting a station that is still part of a line."""

    kind = ErrorKind.STATION_IN_USE

    def __init__(self, station_id: object, line_names: list[str]) -> None:
        self.station_id = station_id
        self.line_names = line_names
        super().__init__(f"Station '{station_id}' is used by lines: {', '.join(line_names)}")
