"""Activation use case establishing the backend connection.

Purpose
-------
Connect to InfluxDB once, optionally over TLS with a pinned trust store, and
make sure the target database exists before any event is delivered.

Contents
--------
* :func:`create_activate` - factory returning the activation callable.

System Role
-----------
Connection-manager half of the pipeline. Every failure is reported through
the :class:`ErrorReporterPort` and translated into an unsuccessful
:class:`ActivationResult`; nothing raises to the caller.
"""

from __future__ import annotations

import logging

from lib_log_influx.application.ports import (
    ClientFactoryPort,
    ErrorReporterPort,
    TrustStore,
    TrustStoreLoaderPort,
)
from lib_log_influx.domain.settings import ForwarderConfig

from ._types import ActivateCallable, ActivationResult, ConnectionHandle

logger = logging.getLogger(__name__)


def create_activate(
    *,
    client_factory: ClientFactoryPort,
    trust_loader: TrustStoreLoaderPort,
    reporter: ErrorReporterPort,
) -> ActivateCallable:
    """Build the activation callable for the given collaborators.

    Parameters
    ----------
    client_factory:
        Builds a connected :class:`TimeSeriesClientPort` for a configuration.
    trust_loader:
        Loads the pinned trust store when TLS is enabled.
    reporter:
        Receives every recoverable failure.

    Returns
    -------
    Callable[[ForwarderConfig], ActivationResult]
        Function performing one activation attempt without retries.

    Examples
    --------
    >>> class Client:
    ...     def __init__(self):
    ...         self.created = []
    ...     def ping(self): return "1.8.10"
    ...     def list_databases(self): return ["_internal"]
    ...     def create_database(self, name): self.created.append(name)
    ...     def write_point(self, point, **kwargs): pass
    >>> class Reporter:
    ...     def report(self, message): print(message)
    >>> client = Client()
    >>> activate = create_activate(
    ...     client_factory=lambda config, trust_store: client,
    ...     trust_loader=lambda path: None,
    ...     reporter=Reporter(),
    ... )
    >>> result = activate(ForwarderConfig(database_name="Logging"))
    >>> result["ok"], result["created_database"], client.created
    (True, True, ['Logging'])
    """

    def _load_trust_store(config: ForwarderConfig) -> TrustStore | None:
        try:
            return trust_loader(config.trust_store_path)
        except Exception as exc:
            reporter.report(f"Error creating TLS context for {config.connect_url}: {exc}")
            return None

    def activate(config: ForwarderConfig) -> ActivationResult:
        url = config.connect_url
        trust_store = _load_trust_store(config) if config.use_tls else None
        try:
            client = client_factory(config, trust_store)
            created = False
            if config.database_name not in client.list_databases():
                client.create_database(config.database_name)
                created = True
                logger.info("Created InfluxDB database %s at %s", config.database_name, url)
        except Exception as exc:
            reporter.report(f"Error setting up InfluxDB logging database at {url}: {exc}")
            return {"ok": False, "handle": None, "reason": "activation_failed"}
        logger.debug("Activated InfluxDB forwarding to %s/%s", url, config.database_name)
        return {"ok": True, "handle": ConnectionHandle(client=client, url=url), "created_database": created}

    return activate


__all__ = ["create_activate"]
