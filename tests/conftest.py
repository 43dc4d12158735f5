"""Shared fakes standing in for InfluxDB, the reporter and the trust store."""

from __future__ import annotations

import ssl
from typing import Any, Callable

import pytest

from lib_log_influx.application.ports import TrustStore
from lib_log_influx.domain import ConsistencyLevel, DataPoint, ForwarderConfig, LogEvent, ProcessIdentity
from lib_log_influx.runtime import Forwarder, build_forwarder


class RecordingReporter:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def report(self, message: str) -> None:
        self.messages.append(message)


class FakeClient:
    """In-memory :class:`TimeSeriesClientPort` with scriptable failures."""

    def __init__(
        self,
        *,
        version: str = "1.8.10",
        databases: list[str] | None = None,
        ping_error: Exception | None = None,
        write_error: Exception | None = None,
        list_error: Exception | None = None,
    ) -> None:
        self.version = version
        self.databases = list(databases) if databases is not None else ["_internal"]
        self.ping_error = ping_error
        self.write_error = write_error
        self.list_error = list_error
        self.created: list[str] = []
        self.writes: list[dict[str, Any]] = []
        self.pings = 0
        self.closed = False

    def ping(self) -> str:
        self.pings += 1
        if self.ping_error is not None:
            raise self.ping_error
        return self.version

    def list_databases(self) -> list[str]:
        if self.list_error is not None:
            raise self.list_error
        return list(self.databases)

    def create_database(self, name: str) -> None:
        self.created.append(name)
        self.databases.append(name)

    def close(self) -> None:
        self.closed = True

    def write_point(
        self,
        point: DataPoint,
        *,
        database: str,
        retention_policy: str,
        consistency: ConsistencyLevel,
    ) -> None:
        if self.write_error is not None:
            raise self.write_error
        self.writes.append(
            {"point": point, "database": database, "retention_policy": retention_policy, "consistency": consistency}
        )


class RecordingClientFactory:
    def __init__(self, client: FakeClient | None = None, error: Exception | None = None) -> None:
        self.client = client if client is not None else FakeClient()
        self.error = error
        self.calls: list[tuple[ForwarderConfig, TrustStore | None]] = []

    def __call__(self, config: ForwarderConfig, trust_store: TrustStore | None) -> FakeClient:
        self.calls.append((config, trust_store))
        if self.error is not None:
            raise self.error
        return self.client


class RecordingTrustLoader:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.paths: list[str] = []

    def __call__(self, path: str) -> TrustStore:
        self.paths.append(path)
        if self.error is not None:
            raise self.error
        return TrustStore(path=path, context=ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT))


IDENTITY = ProcessIdentity(host_ip="10.0.0.5", host_name="web01")


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def client_factory(fake_client: FakeClient) -> RecordingClientFactory:
    return RecordingClientFactory(fake_client)


@pytest.fixture
def trust_loader() -> RecordingTrustLoader:
    return RecordingTrustLoader()


@pytest.fixture
def identity() -> ProcessIdentity:
    return IDENTITY


@pytest.fixture
def make_event() -> Callable[..., LogEvent]:
    def factory(**overrides: Any) -> LogEvent:
        payload: dict[str, Any] = {
            "timestamp_ms": 1_700_000_000_123,
            "logger_name": "shop.orders",
            "level": "INFO",
            "message": "order accepted",
            "thread_name": "MainThread",
            "start_time_ms": 1_699_999_990_000,
        }
        payload.update(overrides)
        return LogEvent(**payload)

    return factory


@pytest.fixture
def make_forwarder(
    reporter: RecordingReporter,
    client_factory: RecordingClientFactory,
    trust_loader: RecordingTrustLoader,
    identity: ProcessIdentity,
) -> Callable[..., Forwarder]:
    def factory(config: ForwarderConfig | None = None, **properties: Any) -> Forwarder:
        base = config if config is not None else ForwarderConfig()
        return build_forwarder(
            base.with_properties(properties),
            reporter=reporter,
            client_factory=client_factory,
            trust_loader=trust_loader,
            identity=identity,
        )

    return factory
