"""Number Prettifier package."""

from __future__ import annotations

from .formatting import format_compact_number
from .prettifier import (
    MAX_NUMBER,
    MAX_NUMBER_PRETTIFIED,
    MIN_NUMBER,
    MIN_NUMBER_PRETTIFIED,
    Magnitude,
    classify_magnitude,
    prettify,
)
from .version import PACKAGE_VERSION, __version__

__all__ = [
    "MAX_NUMBER",
    "MAX_NUMBER_PRETTIFIED",
    "MIN_NUMBER",
    "MIN_NUMBER_PRETTIFIED",
    "Magnitude",
    "PACKAGE_VERSION",
    "__version__",
    "classify_magnitude",
    "format_compact_number",
    "prettify",
]
