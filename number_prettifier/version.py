"""Centralized package metadata and version helpers."""

from __future__ import annotations


PACKAGE_VERSION = "1.0.0"


def display_version(value: str) -> str:
    """Return a version string prefixed with ``v`` if missing."""

    value = value.strip()
    return value if value.lower().startswith("v") else f"v{value}"


__version__ = PACKAGE_VERSION

__all__ = ["PACKAGE_VERSION", "__version__", "display_version"]
