"""Station model."""

import uuid
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Station:
    """
    Immutable named point on the network.

    Equality and hashing use the identity only, so two Station objects with
    the same id are the same station regardless of where they were loaded.
    """

    name: str = field(compare=False)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            msg = "Station name must not be empty"
            raise ValueError(msg)

    @classmethod
    def of(cls, name: str) -> "Station":
        """Create a station with a fresh identity."""
        return cls(name=name)
