"""Formatting helpers for compact numeric display."""

from __future__ import annotations

from typing import Any, Optional

from .prettifier import prettify


def format_compact_number(value: Optional[Any], *, default: str = "--") -> str:
    """Return the prettified number (e.g., 4.3M), or ``default`` if there is none."""

    if value is None:
        return default
    try:
        formatted = prettify(value)
    except TypeError:
        return default
    return default if formatted is None else formatted


__all__ = ["format_compact_number"]
