"""
Section chain of a single line.

``Sections`` owns every section of one line and keeps them as a single
simple path: each station is the up station of at most one section and the
down station of at most one section, there is no cycle, and (when not empty)
exactly one up terminal and one down terminal exist.

Sections are indexed by station identity twice (up station -> section and
down station -> section), and the two terminal stations are tracked as
sections are added. Endpoint checks, terminal lookups and every hop of a
traversal are dictionary lookups.
"""

import uuid
from collections.abc import Iterator

from subway.models.errors import (
    DuplicatedSectionError,
    IllegalSectionError,
    SectionChainError,
    SectionNotFoundError,
)
from subway.models.section import Section
from subway.models.station import Station


class Sections:
    """Invariant-checked collection of the sections of one line."""

    def __init__(self) -> None:
        self._by_up: dict[uuid.UUID, Section] = {}
        self._by_down: dict[uuid.UUID, Section] = {}
        self._up_terminal: uuid.UUID | None = None
        self._down_terminal: uuid.UUID | None = None

    # ==================== Insertion ====================

    def add(self, candidate: Section) -> None:
        """
        Attach ``candidate`` to the chain.

        The candidate either starts the chain, extends it past one of the
        terminals, or splits an existing section that shares its up or down
        station. A split shortens the existing section by the candidate's
        distance so the total distance of the line is unchanged.

        Validation runs before any mutation: on failure the chain is left
        exactly as it was. Self-loops never get here: :class:`Section` refuses
        to be built with the same up and down station.

        Args:
            candidate: Section to attach

        Raises:
            IllegalSectionError: Disconnected section, a section that would
                close a cycle or branch, or a split that is not strictly
                shorter than the section it divides
            DuplicatedSectionError: A section with the same up and down
                stations already exists
        """
        up, down = candidate.up_station, candidate.down_station

        if not self._by_up:
            self._insert(candidate)
            self._up_terminal = up.id
            self._down_terminal = down.id
            return

        up_known = up in self
        down_known = down in self

        if not up_known and not down_known:
            msg = f"Neither {up.name} nor {down.name} is on this line"
            raise IllegalSectionError(msg)

        existing = self._by_up.get(up.id)
        if existing is not None and existing.same_pair(candidate):
            raise DuplicatedSectionError

        if up_known and down_known:
            msg = f"{up.name} and {down.name} are both already on this line"
            raise IllegalSectionError(msg)

        # Up terminal extension: candidate ends where the chain starts
        if down.id == self._up_terminal:
            self._insert(candidate)
            self._up_terminal = up.id
            return

        # Down terminal extension: candidate starts where the chain ends
        if up.id == self._down_terminal:
            self._insert(candidate)
            self._down_terminal = down.id
            return

        # Split from the up side: existing U->X becomes D->X
        if (existing := self._by_up.get(up.id)) is not None:
            existing.shrink_from_up(down, candidate.distance)
            del self._by_up[up.id]
            self._by_up[down.id] = existing
            self._insert(candidate)
            return

        # Split from the down side: existing X->D becomes X->U
        if (existing := self._by_down.get(down.id)) is not None:
            existing.shrink_from_down(up, candidate.distance)
            del self._by_down[down.id]
            self._by_down[up.id] = existing
            self._insert(candidate)
            return

        msg = f"No attachment point for section {up.name} -> {down.name}"
        raise SectionChainError(msg)

    def _insert(self, section: Section) -> None:
        self._by_up[section.up_station.id] = section
        self._by_down[section.down_station.id] = section

    # ==================== Queries ====================

    def get_up_terminal_section(self) -> Section:
        """
        Return the section whose up station is no section's down station.

        Raises:
            SectionNotFoundError: If there are no sections
        """
        if self._up_terminal is None:
            raise SectionNotFoundError
        return self._by_up[self._up_terminal]

    def get_down_terminal_section(self) -> Section:
        """
        Return the section whose down station is no section's up station.

        Raises:
            SectionNotFoundError: If there are no sections
        """
        if self._down_terminal is None:
            raise SectionNotFoundError
        return self._by_down[self._down_terminal]

    def get_all_stations_sorted_from(self, section: Section) -> list[Station]:
        """
        List stations from ``section``'s up station down to the down terminal.

        The list is rebuilt on every call. ``section`` must belong to this
        collection.

        Args:
            section: Section to start walking from

        Returns:
            Stations in up -> down order
        """
        stations = [section.up_station]
        current: Section | None = section
        while current is not None:
            stations.append(current.down_station)
            if len(stations) > len(self._by_up) + 1:
                raise SectionChainError
            current = self._by_up.get(current.down_station.id)
        return stations

    def stations(self) -> list[Station]:
        """All stations of the line in up -> down order (empty when there are no sections)."""
        if not self._by_up:
            return []
        return self.get_all_stations_sorted_from(self.get_up_terminal_section())

    def total_distance(self) -> int:
        return sum(section.distance for section in self._by_up.values())

    def __iter__(self) -> Iterator[Section]:
        """Iterate sections in up -> down order."""
        ordered: list[Section] = []
        if self._by_up:
            current: Section | None = self.get_up_terminal_section()
            while current is not None:
                ordered.append(current)
                current = self._by_up.get(current.down_station.id)
        return iter(ordered)

    def __len__(self) -> int:
        return len(self._by_up)

    def __contains__(self, station: object) -> bool:
        if not isinstance(station, Station):
            return False
        return station.id in self._by_up or station.id in self._by_down

    def __repr__(self) -> str:
        return f"<Sections({' -> '.join(station.name for station in self.stations())})>"
