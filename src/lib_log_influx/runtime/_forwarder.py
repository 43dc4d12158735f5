"""Forwarder façade driving the activation, delivery and shutdown use cases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from lib_log_influx.application.use_cases import ActivationResult, DeliveryResult
from lib_log_influx.application.use_cases._types import ActivateCallable, DeliverCallable, ProbeCallable
from lib_log_influx.domain.events import LogEvent
from lib_log_influx.domain.settings import ForwarderConfig

from ._state import ConnectionState, ForwarderState


@dataclass(frozen=True)
class ForwarderSnapshot:
    """Immutable view over a forwarder; never carries the password."""

    state: ForwarderState
    url: str
    database_name: str
    measurement_name: str
    application_name: str
    retention_policy: str
    write_consistency_level: str
    last_probe_version: str | None


class Forwarder:
    """One configured connection to InfluxDB and its delivery pipeline.

    Built by :func:`lib_log_influx.runtime.build_forwarder`. Configuration
    may change until activation succeeds; afterwards it is frozen until
    :meth:`shutdown`.
    """

    def __init__(
        self,
        *,
        state: ConnectionState,
        activate: ActivateCallable,
        probe: ProbeCallable,
        deliver: DeliverCallable,
        shutdown: Callable[[], None],
    ) -> None:
        self._state = state
        self._activate = activate
        self._probe = probe
        self._deliver = deliver
        self._shutdown = shutdown

    @property
    def config(self) -> ForwarderConfig:
        return self._state.config

    @property
    def state(self) -> ForwarderState:
        return self._state.state

    @property
    def is_ready(self) -> bool:
        return self._state.state is ForwarderState.READY

    def configure(self, **properties: Any) -> ForwarderConfig:
        """Apply ``properties`` and return the new configuration.

        Raises
        ------
        RuntimeError
            While the forwarder is activating or ready.
        ConfigurationError
            For unknown names or invalid values.
        """

        with self._state.lock:
            if self._state.state in (ForwarderState.ACTIVATING, ForwarderState.READY):
                raise RuntimeError("InfluxDB forwarder configuration is frozen while active; call shutdown() first")
            self._state.config = self._state.config.with_properties(properties)
            return self._state.config

    def activate(self) -> ActivationResult:
        """Connect once; repeated calls while ``READY`` are no-ops."""

        with self._state.lock:
            if self._state.state is ForwarderState.READY:
                return {"ok": True, "handle": self._state.handle, "reason": "already_active"}
            self._state.state = ForwarderState.ACTIVATING
            result = self._activate(self._state.config)
            handle = result["handle"]
            if result["ok"] and handle is not None:
                self._state.install(handle)
            else:
                self._state.state = ForwarderState.FAILED
            return result

    def probe(self) -> DeliveryResult:
        """Ping the backend without writing anything."""

        result = self._probe(self._state.handle)
        self._remember_version(result)
        return result

    def deliver(self, event: LogEvent) -> DeliveryResult:
        """Write ``event`` as one point; never raises for backend failures."""

        result = self._deliver(self._state.handle, event, self._state.config)
        self._remember_version(result)
        return result

    def shutdown(self) -> None:
        """Discard the connection; safe to call repeatedly."""

        with self._state.lock:
            self._shutdown()

    def snapshot(self) -> ForwarderSnapshot:
        config = self._state.config
        return ForwarderSnapshot(
            state=self._state.state,
            url=config.connect_url,
            database_name=config.database_name,
            measurement_name=config.measurement_name,
            application_name=config.application_name,
            retention_policy=config.retention_policy,
            write_consistency_level=config.write_consistency_level.name,
            last_probe_version=self._state.last_probe_version,
        )

    def _remember_version(self, result: DeliveryResult) -> None:
        version = result.get("version")
        if version is not None:
            self._state.last_probe_version = version


__all__ = ["Forwarder", "ForwarderSnapshot"]
