"""Operating system detection on Windows from the registry."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from .os_info import OSInfo
from .version import SemanticVersion

try:
    import winreg
except ImportError:
    winreg = None

logger = logging.getLogger(__name__)

CURRENT_VERSION_KEY = "SOFTWARE\\Microsoft\\Windows NT\\CurrentVersion"
_U32_MAX = 0xFFFFFFFF
_NUMBER = re.compile(r"\+?[0-9]+")


def _as_u32(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= _U32_MAX:
        return value
    return 0


def _parse_u32(value: Any) -> int:
    if not isinstance(value, str) or not _NUMBER.fullmatch(value):
        return 0
    number = int(value)
    return number if number <= _U32_MAX else 0


def _as_string(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def version_from_values(values: Mapping[str, Any]) -> SemanticVersion:
    """Build the version from registry values; anything missing or malformed counts as 0."""
    return SemanticVersion(
        _as_u32(values.get("CurrentMajorVersionNumber")),
        _as_u32(values.get("CurrentMinorVersionNumber")),
        _parse_u32(values.get("CurrentBuildNumber")),
        _as_u32(values.get("UBR")),
    )


def os_info_from_values(values: Mapping[str, Any]) -> OSInfo:
    """Describe Windows from the values of the CurrentVersion registry key."""
    return OSInfo(
        id="windows",
        name=_as_string(values.get("ProductName")),
        version=version_from_values(values),
        variant=_as_string(values.get("InstallationType")),
        edition=_as_string(values.get("EditionID")),
        codename=_as_string(values.get("DisplayVersion")),
    )


def read_current_version() -> dict[str, Any]:
    """Read all values of the CurrentVersion registry key.

    Raises :class:`OSError` when the registry cannot be read.
    """
    if winreg is None:
        raise OSError("the Windows registry is not available")
    with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, CURRENT_VERSION_KEY) as key:
        count = winreg.QueryInfoKey(key)[1]
        values = {}
        for index in range(count):
            name, data, _kind = winreg.EnumValue(key, index)
            values[name] = data
        return values


def get_os_data() -> OSInfo:
    """Describe the running Windows system; only the id is known if the registry fails."""
    try:
        values = read_current_version()
    except OSError as exc:
        logger.error("Failed to get registry key: %s", exc)
        return OSInfo(id="windows")
    return os_info_from_values(values)


def get_info() -> OSInfo:
    """Describe the running Windows system."""
    logger.debug("windows get_info is called")
    info = get_os_data()
    logger.debug("Returning %r", info)
    return info