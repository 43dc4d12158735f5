"""Domain entities and value objects used by the forwarding pipeline."""

from __future__ import annotations

from .consistency import ConsistencyLevel
from .errors import ConfigurationError
from .events import LocationInfo, LogEvent
from .identity import UNKNOWN, ProcessIdentity
from .ndc import NDC, NestedDiagnosticContext
from .point import DataPoint, build_point
from .settings import PROPERTY_NAMES, ForwarderConfig

__all__ = [
    "ConfigurationError",
    "ConsistencyLevel",
    "DataPoint",
    "ForwarderConfig",
    "LocationInfo",
    "LogEvent",
    "NDC",
    "NestedDiagnosticContext",
    "PROPERTY_NAMES",
    "ProcessIdentity",
    "UNKNOWN",
    "build_point",
]
