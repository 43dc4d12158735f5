"""Composition helpers wiring adapters into the forwarder use cases."""

from __future__ import annotations

from lib_log_influx.adapters.identity import resolve_process_identity
from lib_log_influx.adapters.influxdb import create_influxdb_client
from lib_log_influx.adapters.reporter import RichErrorReporter
from lib_log_influx.adapters.tls import load_trust_store
from lib_log_influx.application.ports import ClientFactoryPort, ErrorReporterPort, TrustStoreLoaderPort
from lib_log_influx.application.use_cases import create_activate, create_deliver, create_probe, create_shutdown
from lib_log_influx.domain.identity import ProcessIdentity
from lib_log_influx.domain.settings import ForwarderConfig

from ._forwarder import Forwarder
from ._state import ConnectionState


def build_forwarder(
    config: ForwarderConfig | None = None,
    *,
    reporter: ErrorReporterPort | None = None,
    client_factory: ClientFactoryPort | None = None,
    trust_loader: TrustStoreLoaderPort | None = None,
    identity: ProcessIdentity | None = None,
) -> Forwarder:
    """Assemble a :class:`Forwarder`, defaulting every collaborator.

    Defaults: :class:`RichErrorReporter`, :func:`create_influxdb_client`,
    :func:`load_trust_store` and the cached process identity.

    Examples
    --------
    >>> forwarder = build_forwarder(identity=ProcessIdentity())
    >>> forwarder.state.name, forwarder.config.connect_url
    ('UNINITIALIZED', 'http://localhost:8086')
    """

    reporter = reporter if reporter is not None else RichErrorReporter()
    state = ConnectionState(config=config if config is not None else ForwarderConfig())
    return Forwarder(
        state=state,
        activate=create_activate(
            client_factory=client_factory if client_factory is not None else create_influxdb_client,
            trust_loader=trust_loader if trust_loader is not None else load_trust_store,
            reporter=reporter,
        ),
        probe=create_probe(reporter=reporter),
        deliver=create_deliver(
            identity=identity if identity is not None else resolve_process_identity(),
            reporter=reporter,
        ),
        shutdown=create_shutdown(holder=state, reporter=reporter),
    )


__all__ = ["build_forwarder"]
