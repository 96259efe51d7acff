"""Operating system detection on Linux from the os-release file."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from .matcher import Between, KeyValue
from .os_info import OSInfo
from .version import UnknownVersion, Version, version_from_string

logger = logging.getLogger(__name__)

_DEFAULT_VARIANT = "client"


@dataclass(frozen=True)
class ReleaseInfo:
    """How to read a distribution's details from one release file.

    ``path`` is relative to the root directory; each other field extracts one value
    from the file's contents, or returns ``None`` when it cannot be found.
    """

    path: str
    id: Callable[[str], str | None]
    name: Callable[[str], str | None]
    version: Callable[[str], Version | None]
    variant: Callable[[str], str | None]
    codename: Callable[[str], str | None]


def _os_release_version(text: str) -> Version | None:
    value = KeyValue("VERSION_ID").find(text)
    return None if value is None else version_from_string(value)


def _os_release_variant(text: str) -> str | None:
    value = KeyValue("VARIANT_ID").find(text)
    return _DEFAULT_VARIANT if value is None else value


def _os_release_codename(text: str) -> str | None:
    codename = KeyValue("VERSION_CODENAME").find(text)
    if codename is not None:
        return codename
    version = KeyValue("VERSION").find(text)
    if version is None:
        return None
    return Between("(", ")").find(version)


OS_RELEASE = ReleaseInfo(
    path="etc/os-release",
    id=KeyValue("ID").find,
    name=KeyValue("NAME").find,
    version=_os_release_version,
    variant=_os_release_variant,
    codename=_os_release_codename,
)

DISTRIBUTIONS: tuple[ReleaseInfo, ...] = (OS_RELEASE,)


def _build(release_info: ReleaseInfo, content: str) -> OSInfo | None:
    os_id = release_info.id(content)
    if os_id is None:
        return None
    version = release_info.version(content)
    return OSInfo(
        id=os_id,
        name=release_info.name(content),
        version=version if version is not None else UnknownVersion(),
        variant=release_info.variant(content),
        edition=None,
        codename=release_info.codename(content),
    )


def parse_os_release(content: str) -> OSInfo | None:
    """Describe the system from os-release contents, or ``None`` if no ID is given."""
    return _build(OS_RELEASE, content)


def retrieve(distributions: Iterable[ReleaseInfo], root: str | Path) -> OSInfo | None:
    """Return the first description that a release file under ``root`` yields."""
    for release_info in distributions:
        path = Path(root) / release_info.path
        if not path.exists():
            logger.debug("Path '%s' doesn't exist", release_info.path)
            continue
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Unable to read %s file: %r", path, exc)
            continue
        info = _build(release_info, content)
        if info is not None:
            return info
    return None


def get_os_data() -> OSInfo | None:
    """Read the running system's release files, or ``None`` if none identify it."""
    return retrieve(DISTRIBUTIONS, "/")


def get_info() -> OSInfo:
    """Describe the running Linux system, falling back to an unknown description."""
    logger.debug("Linux get_info is called")
    info = get_os_data()
    logger.debug("Returning %r", info)
    return info if info is not None else OSInfo.unknown()