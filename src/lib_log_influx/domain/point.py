"""Data point schema written for every forwarded log event.

Purpose
-------
Fix the tag and field names of the ``log_entries`` measurement in one place
so dashboards can rely on them.

Contents
--------
* Tag and field name constants.
* :class:`DataPoint` - measurement, timestamp, tags and fields.
* :func:`build_point` - map a :class:`LogEvent` onto the schema.

System Role
-----------
Pure transformation used by the delivery use case; the InfluxDB adapter
serialises the result with :meth:`DataPoint.to_dict`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .events import LogEvent
from .identity import ProcessIdentity

HOST_IP = "host_ip"
HOST_NAME = "host_name"
APP_NAME = "app_name"
LOGGER_NAME = "logger_name"
LEVEL = "level"

CLASS_NAME = "class_name"
FILE_NAME = "file_name"
LINE_NUMBER = "line_number"
METHOD_NAME = "method_name"
MESSAGE = "message"
NDC = "ndc"
APP_START_TIME = "app_start_time"
THREAD_NAME = "thread_name"
THROWABLE_STR = "throwable_str_rep"

TAG_NAMES: tuple[str, ...] = (HOST_IP, HOST_NAME, APP_NAME, LOGGER_NAME, LEVEL)
FIELD_NAMES: tuple[str, ...] = (
    CLASS_NAME,
    FILE_NAME,
    LINE_NUMBER,
    METHOD_NAME,
    MESSAGE,
    NDC,
    APP_START_TIME,
    THREAD_NAME,
    THROWABLE_STR,
)

TIME_PRECISION = "ms"


@dataclass(slots=True, frozen=True)
class DataPoint:
    """One timestamped record of a measurement."""

    measurement: str
    time_ms: int
    tags: dict[str, str] = field(default_factory=dict)
    fields: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", dict(self.tags))
        object.__setattr__(self, "fields", dict(self.fields))

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body entry understood by ``write_points``."""

        return {
            "measurement": self.measurement,
            "time": self.time_ms,
            "tags": dict(self.tags),
            "fields": dict(self.fields),
        }


def build_point(
    event: LogEvent,
    *,
    measurement: str,
    application_name: str,
    identity: ProcessIdentity,
) -> DataPoint:
    """Map ``event`` onto the fixed tag/field schema.

    Location fields fall back to empty strings so every point carries the
    full field set.

    Examples
    --------
    >>> from lib_log_influx.domain.events import LocationInfo
    >>> event = LogEvent(1700000000000, "app.db", "WARNING", "slow", "MainThread", 1699999990000,
    ...                  location=LocationInfo("repo", "repo.py", "42", "fetch"))
    >>> point = build_point(event, measurement="log_entries", application_name="shop",
    ...                     identity=ProcessIdentity("10.0.0.5", "web01"))
    >>> point.tags["app_name"], point.tags["level"], point.fields["line_number"]
    ('shop', 'WARNING', '42')
    >>> point.fields["throwable_str_rep"]
    ''
    """

    location = event.location
    tags = {
        HOST_IP: identity.host_ip,
        HOST_NAME: identity.host_name,
        APP_NAME: application_name,
        LOGGER_NAME: event.logger_name,
        LEVEL: str(event.level),
    }
    fields_: dict[str, Any] = {
        CLASS_NAME: location.class_name if location is not None else "",
        FILE_NAME: location.file_name if location is not None else "",
        LINE_NUMBER: location.line_number if location is not None else "",
        METHOD_NAME: location.method_name if location is not None else "",
        MESSAGE: event.message,
        NDC: event.ndc if event.ndc is not None else "",
        APP_START_TIME: int(event.start_time_ms),
        THREAD_NAME: event.thread_name,
        THROWABLE_STR: event.throwable_text,
    }
    return DataPoint(measurement=measurement, time_ms=event.timestamp_ms, tags=tags, fields=fields_)


__all__ = [
    "APP_NAME",
    "APP_START_TIME",
    "CLASS_NAME",
    "DataPoint",
    "FIELD_NAMES",
    "FILE_NAME",
    "HOST_IP",
    "HOST_NAME",
    "LEVEL",
    "LINE_NUMBER",
    "LOGGER_NAME",
    "MESSAGE",
    "METHOD_NAME",
    "NDC",
    "TAG_NAMES",
    "THREAD_NAME",
    "THROWABLE_STR",
    "TIME_PRECISION",
    "build_point",
]
