from __future__ import annotations

import json
import sys
from types import SimpleNamespace

import pytest

from society_attendance.container import Settings
from society_attendance.core.enums import CancellationMode
from society_attendance.core.exceptions import ValidationError
from society_attendance.main import build_parser, load_settings, main
from tests.helpers import utc


def settings_module(**overrides):
    values = dict(
        FIREBASE_CREDENTIALS_FILE="sa.json",
        REPORT_START="2024-02-01",
        REPORT_END="2024-02-22",
        SOCIETY_ID="IDC",
        REPORT_TIMEZONE="UTC",
        CANCELLATION_MODE="cancelled_only",
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def test_settings_from_module_builds_date_range():
    settings = Settings.from_module(settings_module())

    date_range = settings.date_range()

    assert settings.cancellation_mode == CancellationMode.CANCELLED_ONLY
    assert date_range.start == utc(2024, 2, 1)
    assert date_range.end == utc(2024, 2, 22)
    assert settings.date_range(end="2024-02-08").end == utc(2024, 2, 8)


@pytest.mark.parametrize(
    "overrides",
    [{"CANCELLATION_MODE": "maybe"}, {"SOCIETY_ID": "  "}, {"REPORT_START": "01/02/2024"}, {"REPORT_TIMEZONE": "Mars/Base"}],
)
def test_invalid_settings_raise_validation_error(overrides):
    with pytest.raises(ValidationError):
        settings = Settings.from_module(settings_module(**overrides))
        settings.date_range()


@pytest.fixture
def cached_output(tmp_path, monkeypatch):
    # settings modules read the environment at import time
    monkeypatch.delitem(sys.modules, "config.testing", raising=False)
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("OUTPUT_DIR", str(tmp_path))
    events = [
        {"id": "E1", "time": {"_seconds": 1706986800, "_nanoseconds": 0}, "event_type": "BP",
         "registrations": {"P1": {"cancelled": False}, "P2": {"cancelled": True}}},
        {"id": "E2", "time": {"_seconds": 1707591600, "_nanoseconds": 0},
         "registrations": {"P1": {"cancelled": False}}},
    ]
    debaters = [
        {"id": "P1", "full_name_heb": "P1", "club": "IDC"},
        {"id": "P2", "full_name_heb": "P2", "club": "IDC"},
        {"id": "P3", "full_name_heb": "P3", "club": "OTHER"},
    ]
    (tmp_path / "events.json").write_text(json.dumps(events), encoding="utf-8")
    (tmp_path / "debaters.json").write_text(json.dumps(debaters), encoding="utf-8")
    return tmp_path


def test_attendance_command_writes_reports_from_cache(cached_output):
    assert main(["attendance", "--no-excel"]) == 0

    assert (cached_output / "dates.tsv").read_text(encoding="utf-8") == (
        "01/02/2024 - 08/02/2024\tP1\n08/02/2024 - 15/02/2024\tP1\n"
    )
    assert (cached_output / "namesToPercent.tsv").read_text(encoding="utf-8") == "P1\t100.00%\n"


def test_attendance_command_is_idempotent(cached_output):
    main(["attendance", "--no-excel"])
    first = (cached_output / "namesToPercent.tsv").read_bytes()
    main(["attendance", "--no-excel"])

    assert (cached_output / "namesToPercent.tsv").read_bytes() == first


def test_rounds_command_honours_society_override(cached_output):
    assert main(["rounds", "--no-excel", "--society", "OTHER"]) == 0

    assert json.loads((cached_output / "rounds.json").read_text(encoding="utf-8")) == {}


def test_malformed_cached_event_fails_the_command(cached_output):
    (cached_output / "events.json").write_text(json.dumps([{"id": "bad"}]), encoding="utf-8")

    assert main(["attendance", "--no-excel"]) == 1


@pytest.mark.parametrize(
    "argv, refresh",
    [
        (["attendance", "--refresh"], True),
        (["--refresh", "rounds"], True),
        (["feedback", "--refresh"], True),
        (["attendance"], False),
        (["fetch"], False),
    ],
)
def test_refresh_flag_accepted_before_or_after_command(argv, refresh):
    assert build_parser().parse_args(argv).refresh is refresh


def test_unreachable_store_fails_the_command(cached_output):
    # the testing settings point at a credentials file that does not exist
    before = (cached_output / "events.json").read_bytes()

    assert main(["fetch"]) == 1
    assert main(["attendance", "--no-excel", "--refresh"]) == 1
    assert (cached_output / "events.json").read_bytes() == before


@pytest.fixture
def bad_environment(monkeypatch):
    monkeypatch.delitem(sys.modules, "config.config", raising=False)
    monkeypatch.delitem(sys.modules, "config.development", raising=False)
    monkeypatch.setenv("APP_ENV", "development")
    monkeypatch.setenv("STRICT_RECORDS", "true")


def test_malformed_environment_value_is_a_validation_error(bad_environment):
    with pytest.raises(ValidationError, match="config.development"):
        load_settings()


def test_malformed_environment_value_exits_with_usage_code(bad_environment):
    assert main(["attendance", "--no-excel"]) == 2
