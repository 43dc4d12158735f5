"""Exceptions raised across the public configuration boundary."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a forwarder property is set to an unsupported value."""


__all__ = ["ConfigurationError"]
