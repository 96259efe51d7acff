"""Detect the operating system type and version on Linux and Windows."""

__version__ = "1.0.0"