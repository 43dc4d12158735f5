"""Environment and ``.env`` configuration helpers.

Purpose
-------
Resolve forwarder properties from ``LOG_INFLUX_*`` environment variables,
optionally seeded from the nearest ``.env`` file.

Contents
--------
* :data:`DOTENV_ENV_VAR` / :data:`ENV_PREFIX` - variable names.
* :func:`should_use_dotenv` / :func:`enable_dotenv` - ``.env`` toggle and loader.
* :func:`properties_from_env` / :func:`config_from_env` - property resolution.

System Role
-----------
Used by the CLI and by :meth:`InfluxDBHandler.from_env`. Environment values
take precedence over call arguments.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

from dotenv import find_dotenv, load_dotenv

from .domain.settings import PROPERTY_NAMES, ForwarderConfig

DOTENV_ENV_VAR = "LOG_INFLUX_USE_DOTENV"
ENV_PREFIX = "LOG_INFLUX_"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

_DOTENV_LOADED = False
_DOTENV_PATH: Path | None = None


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Decide whether ``.env`` should be loaded.

    An explicit CLI flag wins; otherwise the environment toggle decides.

    Examples
    --------
    >>> should_use_dotenv(explicit=None, env_value="yes")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(explicit=None, env_value=None)
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    value = env_value.strip().lower()
    if value in _FALSY:
        return False
    return value in _TRUTHY


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    The file is searched from ``search_from`` (default: the working
    directory) upwards and loaded at most once per process.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """

    global _DOTENV_LOADED, _DOTENV_PATH
    if _DOTENV_LOADED:
        return _DOTENV_PATH

    if search_from is not None:
        candidate = _find_upwards(search_from.resolve())
    else:
        found = find_dotenv(usecwd=True)
        candidate = Path(found).resolve() if found else None

    _DOTENV_LOADED = True
    if candidate is None:
        return None
    load_dotenv(dotenv_path=candidate, override=False)
    _DOTENV_PATH = candidate
    return candidate


def _find_upwards(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        env_file = directory / ".env"
        if env_file.is_file():
            return env_file
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED, _DOTENV_PATH
    _DOTENV_LOADED = False
    _DOTENV_PATH = None


def env_var_name(property_name: str) -> str:
    """Return the environment variable for ``property_name``.

    Examples
    --------
    >>> env_var_name("write_consistency_level")
    'LOG_INFLUX_WRITE_CONSISTENCY_LEVEL'
    """

    return f"{ENV_PREFIX}{property_name.upper()}"


def properties_from_env(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Collect the ``LOG_INFLUX_*`` properties present in ``environ``.

    Empty values are ignored.

    Examples
    --------
    >>> properties_from_env({"LOG_INFLUX_HOST": "influx", "LOG_INFLUX_PORT": "", "PATH": "/bin"})
    {'host': 'influx'}
    """

    source = os.environ if environ is None else environ
    resolved: dict[str, str] = {}
    for name in PROPERTY_NAMES:
        value = source.get(env_var_name(name))
        if value:
            resolved[name] = value
    return resolved


def config_from_env(
    *,
    environ: Mapping[str, str] | None = None,
    base: ForwarderConfig | None = None,
    **properties: Any,
) -> ForwarderConfig:
    """Build a configuration from ``properties`` overridden by the environment.

    Raises
    ------
    ConfigurationError
        When any value, including one read from the environment, is invalid.

    Examples
    --------
    >>> config = config_from_env(environ={"LOG_INFLUX_HOST": "influx"}, host="ignored", port=9999)
    >>> config.host, config.port
    ('influx', 9999)
    """

    merged: dict[str, Any] = dict(properties)
    merged.update(properties_from_env(environ))
    return (base if base is not None else ForwarderConfig()).with_properties(merged)


__all__ = [
    "DOTENV_ENV_VAR",
    "ENV_PREFIX",
    "config_from_env",
    "enable_dotenv",
    "env_var_name",
    "properties_from_env",
    "should_use_dotenv",
]
