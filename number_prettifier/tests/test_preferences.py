import json
from pathlib import Path

import pytest

from number_prettifier.preferences import (
    CliPreferences,
    PreferencesError,
    apply_overrides,
    coerce_bool,
    load_preferences,
    normalize_log_level,
    normalize_placeholder,
)


def test_normalize_placeholder() -> None:
    assert normalize_placeholder("  n/a ") == "n/a"
    assert normalize_placeholder("") == "--"
    assert normalize_placeholder(42) == "--"
    assert normalize_placeholder("x" * 100) == "x" * 32


def test_normalize_log_level() -> None:
    assert normalize_log_level("debug") == "DEBUG"
    assert normalize_log_level("warn") == "WARNING"
    assert normalize_log_level(20) == "INFO"
    assert normalize_log_level("verbose") == "WARNING"
    assert normalize_log_level(None, default="ERROR") == "ERROR"


def test_coerce_bool() -> None:
    assert coerce_bool("yes") is True
    assert coerce_bool(" Off ") is False
    assert coerce_bool(1) is True
    assert coerce_bool("maybe", default=True) is True
    assert coerce_bool(None) is False


def test_load_preferences_defaults() -> None:
    prefs = load_preferences(environ={})

    assert prefs == CliPreferences()
    assert prefs.placeholder == "--"
    assert prefs.show_timing is False
    assert prefs.log_level == "WARNING"


def test_load_preferences_file_then_environment(tmp_path: Path) -> None:
    path = tmp_path / "prefs.json"
    path.write_text(
        json.dumps({"placeholder": "n/a", "show_timing": True, "log_level": "info", "colour": "red"}),
        encoding="utf-8",
    )

    prefs = load_preferences(path, environ={"PRETTIFY_PLACEHOLDER": "?", "PRETTIFY_QUIET": "1"})

    assert prefs.placeholder == "?"
    assert prefs.show_timing is True
    assert prefs.log_level == "INFO"
    assert prefs.quiet is True


def test_load_preferences_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PRETTIFY_SHOW_TIMING", "true")
    monkeypatch.delenv("PRETTIFY_PLACEHOLDER", raising=False)

    prefs = load_preferences()

    assert prefs.show_timing is True


def test_load_preferences_rejects_bad_files(tmp_path: Path) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    listing = tmp_path / "list.json"
    listing.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(PreferencesError):
        load_preferences(broken, environ={})
    with pytest.raises(PreferencesError):
        load_preferences(listing, environ={})
    with pytest.raises(PreferencesError):
        load_preferences(tmp_path / "missing.json", environ={})


def test_apply_overrides_keeps_current_value_on_garbage() -> None:
    prefs = CliPreferences(placeholder="n/a", show_timing=True)

    apply_overrides(prefs, {"placeholder": "   ", "show_timing": "sometimes"})

    assert prefs.placeholder == "n/a"
    assert prefs.show_timing is True
