"""Forwarder configuration value object.

Purpose
-------
Hold the connection, schema and durability settings of a forwarder in one
immutable object, validating every property as it is set so configuration
mistakes surface before activation.

Contents
--------
* :data:`PROPERTY_NAMES` - canonical property names in documentation order.
* :class:`ForwarderConfig` - frozen dataclass with property-style updates.

System Role
-----------
Built by the handler, the environment loader (:mod:`lib_log_influx.config`)
and the CLI; read by the activation and delivery use cases.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

from .consistency import ConsistencyLevel
from .errors import ConfigurationError
from .text import snake_case, unquote

_TRUTHY = {"1", "true", "yes", "on"}

PROPERTY_NAMES: tuple[str, ...] = (
    "host",
    "port",
    "username",
    "password",
    "use_tls",
    "trust_store_path",
    "database_name",
    "measurement_name",
    "application_name",
    "retention_policy",
    "write_consistency_level",
    "timeout",
)
#: Canonical property names accepted by :meth:`ForwarderConfig.with_property`.


def _coerce_port(value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"port must be an integer, got {value!r}")
    try:
        port = int(unquote(value).strip()) if isinstance(value, str) else int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"port must be an integer, got {value!r}") from exc
    if not 0 < port < 65536:
        raise ConfigurationError(f"port must be between 1 and 65535, got {port}")
    return port


def _coerce_tls(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return unquote(value).strip().lower() in _TRUTHY
    raise ConfigurationError(f"use_tls must be a boolean or a string, got {value!r}")


def _coerce_timeout(value: Any) -> float | None:
    if value is None:
        return None
    if isinstance(value, str):
        value = unquote(value).strip()
        if not value or value.lower() == "none":
            return None
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"timeout must be a number of seconds, got {value!r}") from exc
    if timeout <= 0:
        raise ConfigurationError(f"timeout must be positive, got {timeout}")
    return timeout


def _coerce_string(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{name} must be a string, got {type(value).__name__}")
    return unquote(value)


def _canonical_name(name: str) -> str:
    canonical = snake_case(name)
    if canonical not in PROPERTY_NAMES:
        raise ConfigurationError(f"Unknown property {name!r}. Available properties: {', '.join(PROPERTY_NAMES)}")
    return canonical


def _coerce(name: str, value: Any) -> Any:
    if name == "port":
        return _coerce_port(value)
    if name == "use_tls":
        return _coerce_tls(value)
    if name == "write_consistency_level":
        return ConsistencyLevel.coerce(value)
    if name == "timeout":
        return _coerce_timeout(value)
    return _coerce_string(name, value)


@dataclass(slots=True, frozen=True)
class ForwarderConfig:
    """Immutable settings of one log forwarder.

    Attributes
    ----------
    host, port:
        InfluxDB HTTP endpoint.
    username, password:
        Credentials sent with every request.
    use_tls:
        Selects ``https`` and the pinned trust store.
    trust_store_path:
        PEM bundle holding the only trust anchors accepted for TLS.
    database_name, measurement_name:
        Target database and measurement of the produced points.
    application_name:
        Value of the ``app_name`` tag.
    retention_policy, write_consistency_level:
        Durability settings passed with every write.
    timeout:
        Transport timeout in seconds; ``None`` keeps the client default.
    """

    host: str = "localhost"
    port: int = 8086
    username: str = "root"
    password: str = ""
    use_tls: bool = False
    trust_store_path: str = "truststore.pem"
    database_name: str = "Logging"
    measurement_name: str = "log_entries"
    application_name: str = "default"
    retention_policy: str = "autogen"
    write_consistency_level: ConsistencyLevel = ConsistencyLevel.ONE
    timeout: float | None = None

    def __post_init__(self) -> None:
        for item in fields(self):
            object.__setattr__(self, item.name, _coerce(item.name, getattr(self, item.name)))

    @property
    def scheme(self) -> str:
        return "https" if self.use_tls else "http"

    @property
    def connect_url(self) -> str:
        """Return ``scheme://host:port`` for messages and session mounting.

        Examples
        --------
        >>> ForwarderConfig(host="influx", port=8086).connect_url
        'http://influx:8086'
        >>> ForwarderConfig(use_tls=True).connect_url
        'https://localhost:8086'
        """

        return f"{self.scheme}://{self.host}:{self.port}"

    @classmethod
    def from_properties(cls, **properties: Any) -> "ForwarderConfig":
        """Build a configuration from snake_case or camelCase property names.

        Examples
        --------
        >>> config = ForwarderConfig.from_properties(useTLS="yes", writeConsistencyLevel='"QUORUM"')
        >>> config.use_tls, config.write_consistency_level.name
        (True, 'QUORUM')
        """

        return cls().with_properties(properties)

    def with_property(self, name: str, value: Any) -> "ForwarderConfig":
        """Return a copy with the property ``name`` set to ``value``."""

        return self.with_properties({name: value})

    def with_properties(self, properties: Mapping[str, Any]) -> "ForwarderConfig":
        """Return a copy with every entry of ``properties`` applied."""

        changes: dict[str, Any] = {}
        for name, value in properties.items():
            canonical = _canonical_name(name)
            changes[canonical] = _coerce(canonical, value)
        if not changes:
            return self
        # Stored values are already coerced; only the new ones pass through _coerce.
        updated = object.__new__(type(self))
        for item in fields(self):
            object.__setattr__(updated, item.name, changes.get(item.name, getattr(self, item.name)))
        return updated

    def get_property(self, name: str) -> Any:
        """Return a property in the form it was configured.

        The consistency level is returned as its name so a configured value
        round-trips unchanged.
        """

        value = getattr(self, _canonical_name(name))
        if isinstance(value, ConsistencyLevel):
            return value.name
        return value

    def to_dict(self, *, mask_password: bool = True) -> dict[str, Any]:
        """Serialise the configuration, hiding the password by default."""

        data = asdict(self)
        data["write_consistency_level"] = self.write_consistency_level.name
        if mask_password and data["password"]:
            data["password"] = "***"
        return data


__all__ = ["ForwarderConfig", "PROPERTY_NAMES"]
