"""In-memory station registry and line store.

The store is created lazily, once per process, and handed to services
through the ``get_store`` FastAPI dependency (tests override it with a fresh
``Store``). It holds domain objects directly; there is no persistence.
"""

import threading
import uuid
from collections.abc import Generator

from subway.models.errors import LineNotFoundError, StationNotFoundError
from subway.models.line import Line
from subway.models.station import Station


class StationRepository:
    """Stations keyed by identity, in creation order."""

    def __init__(self) -> None:
        self._stations: dict[uuid.UUID, Station] = {}

    def add(self, station: Station) -> Station:
        self._stations[station.id] = station
        return station

    def get(self, station_id: uuid.UUID) -> Station:
        """
        Get a station by ID.

        Raises:
            StationNotFoundError: If the station does not exist
        """
        if (station := self._stations.get(station_id)) is None:
            raise StationNotFoundError(station_id)
        return station

    def find_by_name(self, name: str) -> Station | None:
        return next((station for station in self._stations.values() if station.name == name), None)

    def list(self) -> list[Station]:
        return list(self._stations.values())

    def delete(self, station_id: uuid.UUID) -> None:
        if self._stations.pop(station_id, None) is None:
            raise StationNotFoundError(station_id)


class LineRepository:
    """Lines keyed by identity, in creation order."""

    def __init__(self) -> None:
        self._lines: dict[uuid.UUID, Line] = {}

    def add(self, line: Line) -> Line:
        self._lines[line.id] = line
        return line

    def get(self, line_id: uuid.UUID) -> Line:
        """
        Get a line by ID.

        Raises:
            LineNotFoundError: If the line does not exist
        """
        if (line := self._lines.get(line_id)) is None:
            raise LineNotFoundError(line_id)
        return line

    def find_by_name(self, name: str) -> Line | None:
        return next((line for line in self._lines.values() if line.name == name), None)

    def list(self) -> list[Line]:
        return list(self._lines.values())

    def delete(self, line_id: uuid.UUID) -> None:
        if self._lines.pop(line_id, None) is None:
            raise LineNotFoundError(line_id)


class Store:
    """Container for the repositories shared by all requests."""

    def __init__(self) -> None:
        self.stations = StationRepository()
        self.lines = LineRepository()


# Module-level global for lazy initialization
_store: Store | None = None
_store_lock = threading.Lock()


def get_store_instance() -> Store:
    """
    Get or create the process-wide store (lazy initialization).

    Thread-safe implementation using double-checked locking ensures only one
    store is created even with concurrent access.
    """
    global _store  # noqa: PLW0603
    if _store is None:
        with _store_lock:
            if _store is None:  # Double-checked locking
                _store = Store()
    return _store


def reset_store() -> None:
    """Drop the process-wide store; the next access creates an empty one."""
    global _store  # noqa: PLW0603
    with _store_lock:
        _store = None


def get_store() -> Generator[Store, None, None]:
    """FastAPI dependency yielding the shared store."""
    yield get_store_instance()
