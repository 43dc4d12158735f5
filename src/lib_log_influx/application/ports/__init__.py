"""Protocols separating the use cases from concrete adapters."""

from __future__ import annotations

from .backend import ClientFactoryPort, TimeSeriesClientPort, TrustStoreLoaderPort
from .reporter import ErrorReporterPort
from .trust import TrustStore

__all__ = [
    "ClientFactoryPort",
    "ErrorReporterPort",
    "TimeSeriesClientPort",
    "TrustStore",
    "TrustStoreLoaderPort",
]
