from __future__ import annotations

import threading

import pytest

from lib_log_influx.domain import ConfigurationError, ForwarderConfig
from lib_log_influx.runtime import ForwarderState, build_forwarder, process_identity


def test_new_forwarder_is_uninitialized(make_forwarder) -> None:  # noqa: ANN001
    forwarder = make_forwarder()

    assert forwarder.state is ForwarderState.UNINITIALIZED
    assert forwarder.is_ready is False


def test_successful_activation_reaches_ready(make_forwarder, fake_client) -> None:  # noqa: ANN001
    forwarder = make_forwarder()

    result = forwarder.activate()

    assert result["ok"] is True
    assert forwarder.state is ForwarderState.READY
    assert fake_client.created == ["Logging"]


def test_activation_while_ready_does_not_reconnect(make_forwarder, client_factory) -> None:  # noqa: ANN001
    forwarder = make_forwarder()
    forwarder.activate()

    again = forwarder.activate()

    assert again["ok"] is True
    assert again.get("reason") == "already_active"
    assert len(client_factory.calls) == 1


def test_failed_activation_makes_delivery_a_no_op(make_forwarder, client_factory, fake_client, reporter, make_event) -> None:  # noqa: ANN001
    client_factory.error = ConnectionError("refused")
    forwarder = make_forwarder()

    forwarder.activate()
    result = forwarder.deliver(make_event())

    assert forwarder.state is ForwarderState.FAILED
    assert result == {"ok": False, "reason": "not_activated"}
    assert fake_client.pings == 0
    assert len(reporter.messages) == 1


def test_failed_activation_can_be_retried_explicitly(make_forwarder, client_factory) -> None:  # noqa: ANN001
    client_factory.error = ConnectionError("refused")
    forwarder = make_forwarder()
    forwarder.activate()

    client_factory.error = None
    assert forwarder.activate()["ok"] is True
    assert forwarder.is_ready


def test_configuration_is_frozen_while_ready(make_forwarder) -> None:  # noqa: ANN001
    forwarder = make_forwarder()
    forwarder.configure(host="influx")
    forwarder.activate()

    with pytest.raises(RuntimeError):
        forwarder.configure(host="other")
    assert forwarder.config.host == "influx"


def test_invalid_configuration_raises_immediately(make_forwarder) -> None:  # noqa: ANN001
    with pytest.raises(ConfigurationError):
        make_forwarder().configure(writeConsistencyLevel="EVERYONE")


def test_shutdown_is_idempotent_and_discards_handle(make_forwarder, fake_client, make_event) -> None:  # noqa: ANN001
    forwarder = make_forwarder()
    forwarder.activate()

    forwarder.shutdown()
    forwarder.shutdown()

    assert forwarder.state is ForwarderState.UNINITIALIZED
    assert fake_client.closed is True
    assert forwarder.deliver(make_event()) == {"ok": False, "reason": "not_activated"}
    forwarder.configure(host="reconfigured")


def test_snapshot_hides_password_and_tracks_probe(make_forwarder, make_event) -> None:  # noqa: ANN001
    forwarder = make_forwarder(password="hunter2", writeConsistencyLevel="ALL")
    forwarder.activate()
    forwarder.deliver(make_event())

    snapshot = forwarder.snapshot()

    assert snapshot.state is ForwarderState.READY
    assert snapshot.url == "http://localhost:8086"
    assert snapshot.write_consistency_level == "ALL"
    assert snapshot.last_probe_version == "1.8.10"
    assert "hunter2" not in repr(snapshot)


def test_probe_without_activation(make_forwarder) -> None:  # noqa: ANN001
    assert make_forwarder().probe() == {"ok": False, "reason": "not_activated"}


def test_concurrent_deliveries_write_every_event(make_forwarder, fake_client, make_event) -> None:  # noqa: ANN001
    forwarder = make_forwarder()
    forwarder.activate()

    def worker(index: int) -> None:
        for offset in range(25):
            forwarder.deliver(make_event(message=f"{index}-{offset}"))

    threads = [threading.Thread(target=worker, args=(index,)) for index in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(fake_client.writes) == 100


def test_build_forwarder_defaults(identity) -> None:  # noqa: ANN001
    forwarder = build_forwarder(ForwarderConfig(host="influx"), identity=identity)

    assert forwarder.config.host == "influx"
    assert forwarder.state is ForwarderState.UNINITIALIZED


def test_process_identity_is_stable() -> None:
    assert process_identity() is process_identity()
