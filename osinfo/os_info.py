"""Description of an operating system."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field, fields

from .version import UnknownVersion, Version


def _optional_key(value: object) -> tuple:
    return (0,) if value is None else (1, value)


@functools.total_ordering
@dataclass
class OSInfo:
    """Identification, name, version, variant, edition and codename of an OS."""

    id: str | None = "Unknown"
    name: str | None = ""
    version: Version = field(default_factory=UnknownVersion)
    variant: str | None = None
    edition: str | None = None
    codename: str | None = None

    @classmethod
    def unknown(cls) -> OSInfo:
        """Return the description of an operating system that could not be identified."""
        return cls()

    @classmethod
    def with_id(cls, id: str) -> OSInfo:
        """Return an unknown system description carrying the given id."""
        return cls(id=id)

    @classmethod
    def with_name(cls, name: str) -> OSInfo:
        """Return an unknown system description carrying the given name."""
        return cls(name=name)

    def _sort_key(self) -> tuple:
        return tuple(
            (self.version._sort_key(),) if f.name == "version" else _optional_key(getattr(self, f.name))
            for f in fields(self)
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OSInfo):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        text = self.id or ""
        if self.name is not None:
            text += f" ({self.name})"
        if self.variant is not None:
            text += f" ({self.variant})"
        return text