"""Preference loading for the prettify command-line shell."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .logging_utils import get_logger


_log = get_logger("preferences")

DEFAULT_PLACEHOLDER = "--"
DEFAULT_LOG_LEVEL = "WARNING"
MAX_PLACEHOLDER_LENGTH = 32

ENV_PLACEHOLDER = "PRETTIFY_PLACEHOLDER"
ENV_SHOW_TIMING = "PRETTIFY_SHOW_TIMING"
ENV_LOG_LEVEL = "PRETTIFY_LOG_LEVEL"
ENV_QUIET = "PRETTIFY_QUIET"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class PreferencesError(ValueError):
    """Raised when a preferences file cannot be read or decoded."""


@dataclass
class CliPreferences:
    """Settings that shape how the shell prints results."""

    placeholder: str = DEFAULT_PLACEHOLDER
    show_timing: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    quiet: bool = False


def normalize_placeholder(value: Any, default: str = DEFAULT_PLACEHOLDER) -> str:
    if not isinstance(value, str):
        return default
    cleaned = value.strip()
    if not cleaned:
        return default
    return cleaned[:MAX_PLACEHOLDER_LENGTH]


def normalize_log_level(value: Any, default: str = DEFAULT_LOG_LEVEL) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        name = logging.getLevelName(value)
        return name if name in _LOG_LEVELS else default
    if not isinstance(value, str):
        return default
    cleaned = value.strip().upper()
    if cleaned == "WARN":
        cleaned = "WARNING"
    return cleaned if cleaned in _LOG_LEVELS else default


def coerce_bool(value: Any, default: bool = False) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    if isinstance(value, str):
        cleaned = value.strip().lower()
        if cleaned in _TRUE_VALUES:
            return True
        if cleaned in _FALSE_VALUES:
            return False
    return default


def _read_preferences_file(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except OSError as exc:
        raise PreferencesError(f"unable to read preferences file {str(path)!r}: {exc}") from exc
    except ValueError as exc:
        raise PreferencesError(f"invalid JSON in preferences file {str(path)!r}: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise PreferencesError(f"preferences file {str(path)!r} must contain a JSON object")
    return payload


def apply_overrides(prefs: CliPreferences, values: Mapping[str, Any]) -> None:
    """Apply ``values`` (keyed by field name) to ``prefs``, normalising each one."""

    if "placeholder" in values:
        prefs.placeholder = normalize_placeholder(values["placeholder"], prefs.placeholder)
    if "show_timing" in values:
        prefs.show_timing = coerce_bool(values["show_timing"], prefs.show_timing)
    if "log_level" in values:
        prefs.log_level = normalize_log_level(values["log_level"], prefs.log_level)
    if "quiet" in values:
        prefs.quiet = coerce_bool(values["quiet"], prefs.quiet)


def _environment_values(environ: Mapping[str, str]) -> Dict[str, str]:
    mapping = {
        ENV_PLACEHOLDER: "placeholder",
        ENV_SHOW_TIMING: "show_timing",
        ENV_LOG_LEVEL: "log_level",
        ENV_QUIET: "quiet",
    }
    return {key: environ[name] for name, key in mapping.items() if name in environ}


def load_preferences(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> CliPreferences:
    """Build preferences from defaults, an optional JSON file and the environment."""

    prefs = CliPreferences()

    if path is not None:
        file_values = _read_preferences_file(Path(path))
        known = {item.name for item in fields(CliPreferences)}
        unknown = sorted(key for key in file_values if key not in known)
        if unknown:
            _log.warning("Ignoring unknown preference keys in %s: %s", path, ", ".join(unknown))
        apply_overrides(prefs, file_values)

    apply_overrides(prefs, _environment_values(os.environ if environ is None else environ))
    _log.debug("Loaded preferences: %s", prefs)
    return prefs


__all__ = [
    "CliPreferences",
    "PreferencesError",
    "apply_overrides",
    "coerce_bool",
    "load_preferences",
    "normalize_log_level",
    "normalize_placeholder",
]
