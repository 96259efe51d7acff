"""Operating system version values."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass

_U32_MAX = 0xFFFFFFFF
_NUMBER = re.compile(r"\+?[0-9]+")


@functools.total_ordering
class Version:
    """Base of all version kinds; versions order by kind first, then by value."""

    _rank = 0

    def _sort_key(self) -> tuple:
        return (self._rank,)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._sort_key() < other._sort_key()


@dataclass(frozen=True)
class UnknownVersion(Version):
    """A version that could not be determined."""

    _rank = 0

    def __str__(self) -> str:
        return "Unknown"


@dataclass(frozen=True)
class SemanticVersion(Version):
    """A numeric version: major.minor.build.release."""

    major: int
    minor: int
    build: int
    release: int

    _rank = 1

    def _sort_key(self) -> tuple:
        return (self._rank, self.major, self.minor, self.build, self.release)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.build}.{self.release}"


@dataclass(frozen=True)
class RollingVersion(Version):
    """A rolling release, optionally carrying a release date."""

    date: str | None = None

    _rank = 2

    def _sort_key(self) -> tuple:
        if self.date is None:
            return (self._rank, 0)
        return (self._rank, 1, self.date)

    def __str__(self) -> str:
        if self.date is None:
            return "Rolling Release"
        return f"Rolling Release ({self.date})"


@dataclass(frozen=True)
class CustomVersion(Version):
    """A version in a format of its own."""

    value: str

    _rank = 3

    def _sort_key(self) -> tuple:
        return (self._rank, self.value)

    def __str__(self) -> str:
        return self.value


def _parse_u32(text: str) -> int | None:
    if not _NUMBER.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def parse_version(s: str) -> tuple[int, int, int, int] | None:
    """Parse up to four dot-separated numbers; missing parts default to 0.

    A single trailing dot is allowed. Returns ``None`` when the text is not such a version.
    """
    parts = s.strip().split(".")
    if parts[-1] == "":
        parts.pop()
    if not parts or len(parts) > 4:
        return None
    parts.extend(["0"] * (4 - len(parts)))
    numbers = [_parse_u32(part) for part in parts]
    if any(n is None for n in numbers):
        return None
    major, minor, build, release = numbers
    return (major, minor, build, release)


def version_from_string(s: str) -> Version:
    """Build a version: unknown if empty, semantic if numeric, custom otherwise."""
    if not s:
        return UnknownVersion()
    parsed = parse_version(s)
    if parsed is not None:
        return SemanticVersion(*parsed)
    return CustomVersion(s)