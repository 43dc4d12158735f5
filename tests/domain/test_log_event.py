from __future__ import annotations

import pytest

from lib_log_influx.domain import LocationInfo, LogEvent


def test_throwable_is_frozen_into_tuple() -> None:
    lines = ["Traceback (most recent call last):", "ValueError: boom"]
    event = LogEvent(0, "app", "ERROR", "boom", "MainThread", 0, throwable=lines)
    lines.append("mutated")

    assert event.throwable == ("Traceback (most recent call last):", "ValueError: boom")
    assert event.throwable_text == "Traceback (most recent call last):, ValueError: boom"


def test_negative_timestamp_is_rejected() -> None:
    with pytest.raises(ValueError):
        LogEvent(-1, "app", "INFO", "msg", "MainThread", 0)


def test_replace_returns_modified_copy() -> None:
    event = LogEvent(5, "app", "INFO", "msg", "MainThread", 0, location=LocationInfo("mod", "mod.py", "3", "run"))
    changed = event.replace(message="other")

    assert changed.message == "other"
    assert changed.location == event.location
    assert event.message == "msg"
