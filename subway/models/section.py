"""Section model: a directed, distance-weighted edge between two stations of one line."""

import uuid

from subway.models.errors import IllegalSectionError
from subway.models.station import Station


def _validate_distance(distance: int) -> int:
    # bool is an int subclass but never a valid distance
    if isinstance(distance, bool) or not isinstance(distance, int) or distance <= 0:
        msg = f"Section distance must be a positive integer. Got {distance!r}"
        raise IllegalSectionError(msg)
    return distance


class Section:
    """
    One section of a line, running from ``up_station`` to ``down_station``.

    Endpoints are fixed at construction except through the split helpers used
    by :class:`subway.models.sections.Sections`, which also shrink the distance
    so that the total distance of a line is conserved.
    """

    __slots__ = ("_distance", "_down_station", "_line_id", "_up_station")

    def __init__(
        self,
        line_id: uuid.UUID,
        up_station: Station,
        down_station: Station,
        distance: int,
    ) -> None:
        if up_station == down_station:
            msg = f"Section cannot start and end at the same station ({up_station.name})"
            raise IllegalSectionError(msg)
        self._line_id = line_id
        self._up_station = up_station
        self._down_station = down_station
        self._distance = _validate_distance(distance)

    @classmethod
    def of(cls, line_id: uuid.UUID, up_station: Station, down_station: Station, distance: int) -> "Section":
        """Alternate constructor mirroring :meth:`Station.of`."""
        return cls(line_id, up_station, down_station, distance)

    @property
    def line_id(self) -> uuid.UUID:
        return self._line_id

    @property
    def up_station(self) -> Station:
        return self._up_station

    @property
    def down_station(self) -> Station:
        return self._down_station

    @property
    def distance(self) -> int:
        return self._distance

    def same_pair(self, other: "Section") -> bool:
        """True when both sections connect the same up and down stations."""
        return self._up_station == other.up_station and self._down_station == other.down_station

    def shrink(self, amount: int) -> None:
        """
        Reduce the distance by ``amount``.

        Raises:
            IllegalSectionError: If the remaining distance would not be positive
        """
        if amount >= self._distance:
            msg = f"Split distance {amount} must be shorter than the section distance {self._distance}"
            raise IllegalSectionError(msg)
        self._distance -= amount

    def shrink_from_up(self, new_up_station: Station, amount: int) -> None:
        """Move the up endpoint to ``new_up_station`` and shrink by ``amount``."""
        self.shrink(amount)
        self._up_station = new_up_station

    def shrink_from_down(self, new_down_station: Station, amount: int) -> None:
        """Move the down endpoint to ``new_down_station`` and shrink by ``amount``."""
        self.shrink(amount)
        self._down_station = new_down_station

    def __repr__(self) -> str:
        return (
            f"<Section(line_id={self._line_id}, up={self._up_station.name}, "
            f"down={self._down_station.name}, distance={self._distance})>"
        )
