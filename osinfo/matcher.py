"""Simple string matchers used to pull values out of release files."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

_QUOTES_AND_SPACE = re.compile(r'^[\s"]+|[\s"]+$')


class Matcher(ABC):
    """A rule that extracts a value from a piece of text."""

    @abstractmethod
    def find(self, string: str) -> str | None:
        """Return the matched value in ``string``, or ``None`` if there is none."""


@dataclass(frozen=True)
class AllTrimmed(Matcher):
    """Treats the whole string, with surrounding whitespace removed, as the match."""

    def find(self, string: str) -> str | None:
        return string.strip()


def _find_prefixed_word(string: str, prefix: str) -> str | None:
    start = string.find(prefix)
    if start < 0:
        return None
    rest = string[start + len(prefix):].lstrip()
    words = rest.split(None, 1)
    return words[0] if words else ""


def _is_valid_version(word: str) -> bool:
    return not word.startswith(".") and not word.endswith(".")


@dataclass(frozen=True)
class PrefixedWord(Matcher):
    """Returns the word that follows ``prefix`` and any whitespace after it."""

    prefix: str

    def find(self, string: str) -> str | None:
        return _find_prefixed_word(string, self.prefix)


@dataclass(frozen=True)
class PrefixedVersion(Matcher):
    """Like :class:`PrefixedWord`, but only if the word neither starts nor ends with a dot."""

    prefix: str

    def find(self, string: str) -> str | None:
        word = _find_prefixed_word(string, self.prefix)
        if word is None or not _is_valid_version(word):
            return None
        return word


@dataclass(frozen=True)
class KeyValue(Matcher):
    """Finds the value of ``key=value`` on the first line that starts with the key.

    Surrounding double quotes and whitespace are removed from the value.
    """

    key: str

    def find(self, string: str) -> str | None:
        marker = f"{self.key}="
        for line in string.split("\n"):
            if line.startswith(marker):
                return _QUOTES_AND_SPACE.sub("", line[len(marker):])
        return None


@dataclass(frozen=True)
class Between(Matcher):
    """Returns the text between the first ``start`` and the next ``end`` character.

    When ``end`` never follows, the rest of the string from ``start`` on is returned.
    """

    start: str
    end: str

    def find(self, string: str) -> str | None:
        start_idx = string.find(self.start)
        if start_idx < 0:
            return None
        inner_start = start_idx + len(self.start)
        end_idx = string.find(self.end, inner_start)
        if end_idx < 0:
            return string[start_idx:]
        return string[inner_start:end_idx]