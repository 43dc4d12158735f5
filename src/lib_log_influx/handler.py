"""Standard-library logging handler forwarding records to InfluxDB.

Purpose
-------
Plug the forwarding pipeline into :mod:`logging`: every record handled by
:class:`InfluxDBHandler` becomes one point in the configured measurement.

Contents
--------
* :class:`InfluxDBHandler` - the handler, configurable through keyword
  arguments, attribute setters (``logging.config.dictConfig`` ``"."`` key)
  or ``LOG_INFLUX_*`` environment variables.

System Role
-----------
Outermost layer for host applications. Activation happens when the handler
is constructed, or on the first emitted record with
``defer_activation=True``; :meth:`close` shuts the connection down.

Examples
--------
Attach a handler to the root logger::

    import logging
    from lib_log_influx import InfluxDBHandler

    handler = InfluxDBHandler(host="influx.internal", application_name="shop")
    logging.getLogger().addHandler(handler)
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Mapping

from .adapters.stdlib import event_from_record
from .application.ports import ClientFactoryPort, ErrorReporterPort, TrustStoreLoaderPort
from .application.use_cases import ActivationResult
from .config import config_from_env
from .domain.identity import ProcessIdentity
from .domain.settings import ForwarderConfig
from .runtime import Forwarder, ForwarderState, build_forwarder

_COLLABORATORS = ("reporter", "client_factory", "trust_loader", "identity", "defer_activation")


class _ForwarderProperty:
    """Expose one configuration property as a handler attribute."""

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    def __get__(self, instance: "InfluxDBHandler | None", owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance.forwarder.config.get_property(self._name)

    def __set__(self, instance: "InfluxDBHandler", value: Any) -> None:
        instance.set_property(self._name, value)


class InfluxDBHandler(logging.Handler):
    """Write every handled record to InfluxDB as one data point.

    Parameters
    ----------
    level:
        Handler level, as for any :class:`logging.Handler`.
    config:
        Base configuration; ``properties`` are applied on top of it.
    reporter, client_factory, trust_loader, identity:
        Collaborators forwarded to :func:`build_forwarder`.
    defer_activation:
        Postpone activation to the first emitted record so attribute setters
        can still change the configuration.
    **properties:
        Forwarder properties in snake_case or camelCase. ``use_tls`` takes a
        bool or a string; ``"yes"``, ``"true"``, ``"1"`` and ``"on"`` (any
        case, optionally quoted) enable TLS, every other string means HTTP.
    """

    host = _ForwarderProperty()
    port = _ForwarderProperty()
    username = _ForwarderProperty()
    password = _ForwarderProperty()
    use_tls = _ForwarderProperty()
    trust_store_path = _ForwarderProperty()
    database_name = _ForwarderProperty()
    measurement_name = _ForwarderProperty()
    application_name = _ForwarderProperty()
    retention_policy = _ForwarderProperty()
    write_consistency_level = _ForwarderProperty()
    timeout = _ForwarderProperty()

    def __init__(
        self,
        level: int | str = logging.NOTSET,
        *,
        config: ForwarderConfig | None = None,
        reporter: ErrorReporterPort | None = None,
        client_factory: ClientFactoryPort | None = None,
        trust_loader: TrustStoreLoaderPort | None = None,
        identity: ProcessIdentity | None = None,
        defer_activation: bool = False,
        **properties: Any,
    ) -> None:
        super().__init__(level)
        base = config if config is not None else ForwarderConfig()
        self._forwarder = build_forwarder(
            base.with_properties(properties),
            reporter=reporter,
            client_factory=client_factory,
            trust_loader=trust_loader,
            identity=identity,
        )
        self._emitting = threading.local()
        self._activate_on_emit = defer_activation
        if not defer_activation:
            self.activate()

    @classmethod
    def from_env(
        cls,
        level: int | str = logging.NOTSET,
        *,
        environ: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> "InfluxDBHandler":
        """Build a handler whose properties are overridden by ``LOG_INFLUX_*``."""

        collaborators = {key: kwargs.pop(key) for key in _COLLABORATORS if key in kwargs}
        return cls(level, config=config_from_env(environ=environ, **kwargs), **collaborators)

    @property
    def forwarder(self) -> Forwarder:
        return self._forwarder

    def set_property(self, name: str, value: Any) -> None:
        """Set one property by snake_case or camelCase name.

        Raises :class:`RuntimeError` once the forwarder is active.
        """

        self._forwarder.configure(**{name: value})

    def get_property(self, name: str) -> Any:
        return self._forwarder.config.get_property(name)

    def activate(self) -> ActivationResult:
        """Connect to InfluxDB; failures are reported, never raised."""

        self._activate_on_emit = False
        return self._forwarder.activate()

    def requires_formatted_output(self) -> bool:
        """Points carry the raw message; handler formatters are not applied."""

        return False

    def emit(self, record: logging.LogRecord) -> None:
        # Records logged by the InfluxDB client while this thread is writing
        # are dropped.
        if getattr(self._emitting, "active", False):
            return
        self._emitting.active = True
        try:
            if self._activate_on_emit:
                self.activate()
            if self._forwarder.state is ForwarderState.READY:
                self._forwarder.deliver(event_from_record(record))
        except Exception:
            self.handleError(record)
        finally:
            self._emitting.active = False

    def close(self) -> None:
        self._activate_on_emit = False
        try:
            self._forwarder.shutdown()
        finally:
            super().close()

    def __repr__(self) -> str:
        level = logging.getLevelName(self.level)
        snapshot = self._forwarder.snapshot()
        return f"<{type(self).__name__} {snapshot.url}/{snapshot.database_name} ({level}, {snapshot.state.value})>"


__all__ = ["InfluxDBHandler"]
