"""Process-wide identity attached to every point."""

from __future__ import annotations

from dataclasses import dataclass

UNKNOWN = "unknown"


@dataclass(slots=True, frozen=True)
class ProcessIdentity:
    """Host address and name resolved once per process."""

    host_ip: str = UNKNOWN
    host_name: str = UNKNOWN


__all__ = ["ProcessIdentity", "UNKNOWN"]
