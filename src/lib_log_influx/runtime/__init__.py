"""Runtime façade that wires the forwarding pipeline.

Purpose
-------
Expose a stable entry point (:func:`build_forwarder` and :class:`Forwarder`)
that the logging handler and the CLI use instead of importing the inner
layers directly.

Contents
--------
* :func:`build_forwarder` - composition root for one forwarder.
* :class:`Forwarder` - activation, delivery, shutdown and snapshots.
* :class:`ForwarderState` / :class:`ForwarderSnapshot` - lifecycle views.
* :func:`process_identity` - identity attached to every point.

System Role
-----------
Outer shell around the use cases: policy lives in
:mod:`lib_log_influx.application`; this package only assembles it.
"""

from __future__ import annotations

from lib_log_influx.adapters.identity import resolve_process_identity
from lib_log_influx.domain.identity import ProcessIdentity

from ._composition import build_forwarder
from ._forwarder import Forwarder, ForwarderSnapshot
from ._state import ConnectionState, ForwarderState


def process_identity() -> ProcessIdentity:
    """Return the host identity resolved once for this process."""

    return resolve_process_identity()


__all__ = [
    "ConnectionState",
    "Forwarder",
    "ForwarderSnapshot",
    "ForwarderState",
    "build_forwarder",
    "process_identity",
]
