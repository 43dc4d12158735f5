"""Use cases: activation, per-event delivery and shutdown."""

from __future__ import annotations

from ._types import ActivationResult, ConnectionHandle, DeliveryResult
from .activate import create_activate
from .deliver import NOT_READY_VERSIONS, create_deliver, create_probe
from .shutdown import create_shutdown

__all__ = [
    "ActivationResult",
    "ConnectionHandle",
    "DeliveryResult",
    "NOT_READY_VERSIONS",
    "create_activate",
    "create_deliver",
    "create_probe",
    "create_shutdown",
]
