"""Connection state container guarded by a re-entrant lock."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from threading import RLock

from lib_log_influx.application.use_cases import ConnectionHandle
from lib_log_influx.domain.settings import ForwarderConfig


class ForwarderState(Enum):
    """Lifecycle of a forwarder: ``UNINITIALIZED -> ACTIVATING -> READY | FAILED``."""

    UNINITIALIZED = "uninitialized"
    ACTIVATING = "activating"
    READY = "ready"
    FAILED = "failed"


@dataclass(slots=True)
class ConnectionState:
    """Mutable aggregate owned by one :class:`Forwarder`.

    Transitions happen under :attr:`lock`; deliveries read :attr:`handle`
    without it.
    """

    config: ForwarderConfig
    state: ForwarderState = ForwarderState.UNINITIALIZED
    handle: ConnectionHandle | None = None
    last_probe_version: str | None = None
    lock: RLock = field(default_factory=RLock, repr=False, compare=False)

    def install(self, handle: ConnectionHandle) -> None:
        """Publish ``handle`` and mark the state ``READY``."""

        with self.lock:
            self.handle = handle
            self.state = ForwarderState.READY

    def clear(self) -> ConnectionHandle | None:
        """Drop the handle, reset to ``UNINITIALIZED`` and return the old handle."""

        with self.lock:
            handle, self.handle = self.handle, None
            self.state = ForwarderState.UNINITIALIZED
            self.last_probe_version = None
            return handle


__all__ = ["ConnectionState", "ForwarderState"]
