from __future__ import annotations

from typing import Callable

from lib_log_influx.domain import LocationInfo, LogEvent, ProcessIdentity, build_point
from lib_log_influx.domain.point import FIELD_NAMES, TAG_NAMES

IDENTITY = ProcessIdentity(host_ip="10.0.0.5", host_name="web01")


def test_point_carries_exact_tag_and_field_sets(make_event: Callable[..., LogEvent]) -> None:
    event = make_event(
        location=LocationInfo("orders", "orders.py", "88", "accept"),
        ndc="order-17 payment",
        throwable=["line one", "line two"],
    )

    point = build_point(event, measurement="log_entries", application_name="shop", identity=IDENTITY)

    assert set(point.tags) == set(TAG_NAMES)
    assert set(point.fields) == set(FIELD_NAMES)
    assert point.measurement == "log_entries"
    assert point.time_ms == 1_700_000_000_123
    assert point.tags == {
        "host_ip": "10.0.0.5",
        "host_name": "web01",
        "app_name": "shop",
        "logger_name": "shop.orders",
        "level": "INFO",
    }
    assert point.fields == {
        "class_name": "orders",
        "file_name": "orders.py",
        "line_number": "88",
        "method_name": "accept",
        "message": "order accepted",
        "ndc": "order-17 payment",
        "app_start_time": 1_699_999_990_000,
        "thread_name": "MainThread",
        "throwable_str_rep": "line one, line two",
    }


def test_missing_optional_parts_become_empty_strings(make_event: Callable[..., LogEvent]) -> None:
    point = build_point(make_event(), measurement="m", application_name="a", identity=IDENTITY)

    for name in ("class_name", "file_name", "line_number", "method_name", "ndc", "throwable_str_rep"):
        assert point.fields[name] == ""


def test_to_dict_matches_client_body(make_event: Callable[..., LogEvent]) -> None:
    point = build_point(make_event(), measurement="m", application_name="a", identity=IDENTITY)

    body = point.to_dict()

    assert body["measurement"] == "m"
    assert body["time"] == 1_700_000_000_123
    assert body["tags"] == point.tags
    assert body["fields"] == point.fields
    body["tags"]["level"] = "changed"
    assert point.tags["level"] == "INFO"
