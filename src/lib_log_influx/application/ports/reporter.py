"""Port for surfacing recoverable failures without raising."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ErrorReporterPort(Protocol):
    """Sink for activation and delivery errors."""

    def report(self, message: str) -> None:
        """Record ``message``; must never raise."""


__all__ = ["ErrorReporterPort"]
