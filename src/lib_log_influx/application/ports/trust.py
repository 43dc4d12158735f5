"""Value passed from the trust-store loader to the client factory."""

from __future__ import annotations

import ssl
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class TrustStore:
    """Loaded trust anchors.

    Attributes
    ----------
    path:
        Store file the anchors were read from.
    context:
        Client-side TLS context that trusts only those anchors.
    """

    path: str
    context: ssl.SSLContext


__all__ = ["TrustStore"]
