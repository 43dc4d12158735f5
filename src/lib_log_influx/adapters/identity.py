"""Host identity lookup attached as tags to every point."""

from __future__ import annotations

import socket
from functools import lru_cache
from typing import Callable

from lib_log_influx.domain.identity import UNKNOWN, ProcessIdentity


def lookup_process_identity(
    *,
    gethostname: Callable[[], str] = socket.gethostname,
    gethostbyname: Callable[[str], str] = socket.gethostbyname,
) -> ProcessIdentity:
    """Resolve the host name and address, using ``"unknown"`` for failures.

    Examples
    --------
    >>> lookup_process_identity(gethostname=lambda: "web01", gethostbyname=lambda name: "10.0.0.5")
    ProcessIdentity(host_ip='10.0.0.5', host_name='web01')
    >>> def broken(name):
    ...     raise OSError("no resolver")
    >>> lookup_process_identity(gethostname=lambda: "web01", gethostbyname=broken).host_ip
    'unknown'
    """

    try:
        host_name = gethostname() or UNKNOWN
    except OSError:
        host_name = UNKNOWN
    if host_name == UNKNOWN:
        return ProcessIdentity(host_ip=UNKNOWN, host_name=UNKNOWN)
    try:
        host_ip = gethostbyname(host_name) or UNKNOWN
    except OSError:
        host_ip = UNKNOWN
    return ProcessIdentity(host_ip=host_ip, host_name=host_name)


@lru_cache(maxsize=1)
def resolve_process_identity() -> ProcessIdentity:
    """Return the identity of this process, resolved on first use."""

    return lookup_process_identity()


__all__ = ["lookup_process_identity", "resolve_process_identity"]
