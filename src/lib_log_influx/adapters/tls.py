"""Pinned trust-store support for HTTPS connections to InfluxDB.

Purpose
-------
Load a PEM CA bundle into an :class:`ssl.SSLContext` that trusts nothing
else, and mount that context on the ``requests`` session used by the
InfluxDB client.

Contents
--------
* :func:`load_trust_store` - implementation of :class:`TrustStoreLoaderPort`.
* :class:`PinnedTrustAdapter` - transport adapter carrying the context.
* :func:`build_pinned_session` - session with the adapter mounted for one URL.

System Role
-----------
Used by :func:`lib_log_influx.adapters.influxdb.create_influxdb_client` when
``use_tls`` is enabled and the trust store loaded successfully.
"""

from __future__ import annotations

import os
import ssl
from typing import Any

import requests
from requests.adapters import HTTPAdapter

from lib_log_influx.application.ports.trust import TrustStore


def load_trust_store(path: str | os.PathLike[str]) -> TrustStore:
    """Return a :class:`TrustStore` whose context trusts only ``path``.

    Raises
    ------
    OSError
        When the file cannot be read.
    ssl.SSLError
        When the file is not a PEM bundle.
    ValueError
        When the bundle holds no certificates.
    """

    location = os.fspath(path)
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    context.load_verify_locations(cafile=location)
    if not context.get_ca_certs():
        raise ValueError(f"trust store {location!r} contains no certificates")
    return TrustStore(path=location, context=context)


class PinnedTrustAdapter(HTTPAdapter):
    """HTTP adapter that opens every TLS connection with a fixed context."""

    def __init__(self, context: ssl.SSLContext, **kwargs: Any) -> None:
        self._ssl_context = context
        super().__init__(**kwargs)

    @property
    def ssl_context(self) -> ssl.SSLContext:
        return self._ssl_context

    def init_poolmanager(self, connections: int, maxsize: int, block: bool = False, **pool_kwargs: Any) -> None:
        pool_kwargs["ssl_context"] = self._ssl_context
        super().init_poolmanager(connections, maxsize, block=block, **pool_kwargs)

    def proxy_manager_for(self, proxy: str, **proxy_kwargs: Any) -> Any:
        proxy_kwargs["ssl_context"] = self._ssl_context
        return super().proxy_manager_for(proxy, **proxy_kwargs)


def build_pinned_session(url: str, trust_store: TrustStore) -> requests.Session:
    """Return a session that uses ``trust_store`` for requests below ``url``.

    The adapter is mounted on the full ``https://host:port`` prefix so it
    outranks the generic ``https://`` adapter the InfluxDB client mounts.

    Examples
    --------
    >>> context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    >>> session = build_pinned_session("https://influx:8086", TrustStore("ca.pem", context))
    >>> session.get_adapter("https://influx:8086/ping").ssl_context is context
    True
    """

    session = requests.Session()
    session.mount(url, PinnedTrustAdapter(trust_store.context))
    return session


__all__ = ["PinnedTrustAdapter", "build_pinned_session", "load_trust_store"]
