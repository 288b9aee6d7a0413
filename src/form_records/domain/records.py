"""Domain models for submitted form records."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Record:
    """A single submitted name, identified once it has been stored."""

    id: int | None
    name: str

    @classmethod
    def empty(cls) -> "Record":
        """Return a blank, unsaved record used to seed the input form."""
        return cls(id=None, name="")
