from __future__ import annotations

import ssl

from lib_log_influx.application.use_cases import create_activate
from lib_log_influx.domain import ForwarderConfig


def _activate(client_factory, trust_loader, reporter):  # noqa: ANN001, ANN202
    return create_activate(client_factory=client_factory, trust_loader=trust_loader, reporter=reporter)


def test_missing_database_is_created_once(client_factory, trust_loader, reporter, fake_client) -> None:  # noqa: ANN001
    activate = _activate(client_factory, trust_loader, reporter)
    config = ForwarderConfig(database_name="Logging")

    first = activate(config)
    second = activate(config)

    assert first["ok"] and first["created_database"] is True
    assert second["ok"] and second["created_database"] is False
    assert fake_client.created == ["Logging"]
    assert first["handle"] is not None and first["handle"].url == "http://localhost:8086"
    assert reporter.messages == []


def test_existing_database_is_not_recreated(client_factory, trust_loader, reporter, fake_client) -> None:  # noqa: ANN001
    fake_client.databases.append("Logging")

    result = _activate(client_factory, trust_loader, reporter)(ForwarderConfig())

    assert result["ok"]
    assert fake_client.created == []


def test_plain_http_skips_trust_store(client_factory, trust_loader, reporter) -> None:  # noqa: ANN001
    _activate(client_factory, trust_loader, reporter)(ForwarderConfig(use_tls=False))

    assert trust_loader.paths == []
    assert client_factory.calls[0][1] is None


def test_tls_passes_loaded_trust_store(client_factory, trust_loader, reporter) -> None:  # noqa: ANN001
    config = ForwarderConfig(use_tls=True, trust_store_path="/etc/influx/ca.pem")

    result = _activate(client_factory, trust_loader, reporter)(config)

    assert result["ok"]
    assert trust_loader.paths == ["/etc/influx/ca.pem"]
    trust_store = client_factory.calls[0][1]
    assert trust_store is not None and trust_store.path == "/etc/influx/ca.pem"


def test_trust_store_failure_is_reported_and_activation_continues(client_factory, trust_loader, reporter) -> None:  # noqa: ANN001
    trust_loader.error = FileNotFoundError(2, "No such file or directory")
    config = ForwarderConfig(use_tls=True, host="influx", port=8443)

    result = _activate(client_factory, trust_loader, reporter)(config)

    assert result["ok"]
    assert client_factory.calls[0][1] is None
    assert len(reporter.messages) == 1
    assert reporter.messages[0].startswith("Error creating TLS context for https://influx:8443: ")


def test_malformed_trust_store_is_reported(client_factory, trust_loader, reporter) -> None:  # noqa: ANN001
    trust_loader.error = ssl.SSLError("PEM lib")

    _activate(client_factory, trust_loader, reporter)(ForwarderConfig(use_tls=True))

    assert "Error creating TLS context" in reporter.messages[0]


def test_connection_failure_leaves_no_handle(client_factory, trust_loader, reporter) -> None:  # noqa: ANN001
    client_factory.error = ConnectionError("connection refused")

    result = _activate(client_factory, trust_loader, reporter)(ForwarderConfig(host="influx"))

    assert result == {"ok": False, "handle": None, "reason": "activation_failed"}
    assert reporter.messages == [
        "Error setting up InfluxDB logging database at http://influx:8086: connection refused",
    ]


def test_listing_failure_is_reported(client_factory, trust_loader, reporter, fake_client) -> None:  # noqa: ANN001
    fake_client.list_error = RuntimeError("401 unauthorized")

    result = _activate(client_factory, trust_loader, reporter)(ForwarderConfig())

    assert result["ok"] is False
    assert "401 unauthorized" in reporter.messages[0]
