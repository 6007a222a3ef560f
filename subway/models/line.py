"""Line model: aggregate root holding a line's attributes and its section chain."""

import uuid

from subway.models.section import Section
from subway.models.sections import Sections
from subway.models.station import Station


class Line:
    """Subway line (e.g., "Shinbundang", color "bg-red-600")."""

    def __init__(self, name: str, color: str, *, line_id: uuid.UUID | None = None) -> None:
        self.id = line_id or uuid.uuid4()
        self.name = ""
        self.color = ""
        self.sections = Sections()
        self.edit(name, color)

    @classmethod
    def of(
        cls,
        name: str,
        color: str,
        up_station: Station | None = None,
        down_station: Station | None = None,
        distance: int | None = None,
    ) -> "Line":
        """
        Create a line, optionally with its first section.

        Either all of ``up_station``, ``down_station`` and ``distance`` are
        given, or none of them.
        """
        line = cls(name, color)
        initial = (up_station, down_station, distance)
        if any(value is not None for value in initial):
            if up_station is None or down_station is None or distance is None:
                msg = "Initial section requires up_station, down_station and distance"
                raise ValueError(msg)
            line.add_section(up_station, down_station, distance)
        return line

    def edit(self, name: str, color: str) -> None:
        """Replace name and color."""
        if not name or not name.strip():
            msg = "Line name must not be empty"
            raise ValueError(msg)
        self.name = name
        self.color = color

    def add_section(self, up_station: Station, down_station: Station, distance: int) -> Section:
        """Build a section owned by this line and attach it to the chain."""
        section = Section(self.id, up_station, down_station, distance)
        self.sections.add(section)
        return section

    def stations(self) -> list[Station]:
        """Stations in up -> down order."""
        return self.sections.stations()

    def __repr__(self) -> str:
        return f"<Line(id={self.id}, name={self.name}, color={self.color})>"
