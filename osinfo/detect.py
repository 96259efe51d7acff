"""Detection of the running operating system."""

from __future__ import annotations

import argparse
import sys

from . import linux, windows
from .os_info import OSInfo


def get() -> OSInfo:
    """Return the id, name, version, variant, edition and codename of the running OS.

    On Windows the codename is the display version (for example 22H2); on Linux it is
    the distribution's codename. The variant tells a server from a client system.
    """
    if sys.platform.startswith("linux"):
        return linux.get_info()
    if sys.platform == "win32":
        return windows.get_info()
    return OSInfo.unknown()


def main(argv: list[str] | None = None) -> int:
    """Print what is known about the running operating system."""
    parser = argparse.ArgumentParser(
        prog="osinfo",
        description="Detect the operating system type and version.",
    )
    parser.parse_args(argv)
    info = get()
    print(f"OS information: {info}")
    print(f"ID: {info.id or ''}")
    print(f"Name: {info.name or ''}")
    print(f"Version: {info.version}")
    print(f"Variant: {info.variant or ''}")
    print(f"Edition: {info.edition or ''}")
    print(f"Codename: {info.codename or ''}")
    return 0


if __name__ == "__main__":
    sys.exit(main())