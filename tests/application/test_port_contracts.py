from __future__ import annotations

from lib_log_influx.adapters import InfluxDBClientAdapter, RichErrorReporter, load_trust_store
from lib_log_influx.adapters.influxdb import create_influxdb_client
from lib_log_influx.application.ports import (
    ClientFactoryPort,
    ErrorReporterPort,
    TimeSeriesClientPort,
    TrustStoreLoaderPort,
)


def test_fakes_satisfy_ports(fake_client: object, reporter: object) -> None:
    assert isinstance(fake_client, TimeSeriesClientPort)
    assert isinstance(reporter, ErrorReporterPort)


def test_adapters_satisfy_ports() -> None:
    assert issubclass(InfluxDBClientAdapter, TimeSeriesClientPort)
    assert isinstance(RichErrorReporter(), ErrorReporterPort)
    assert isinstance(create_influxdb_client, ClientFactoryPort)
    assert isinstance(load_trust_store, TrustStoreLoaderPort)
