"""Command-line interface for inspecting and exercising a forwarder.

Purpose
-------
Let operators check the resolved configuration, probe an InfluxDB server and
send a test record without writing Python.

Contents
--------
* :func:`cli` - click group with global ``.env``, traceback and property options.
* Sub-commands ``info``, ``config``, ``ping`` and ``send``.
* :func:`main` - entry point run through :mod:`lib_cli_exit_tools`.

System Role
-----------
Presentation layer on top of :mod:`lib_log_influx.runtime`; every command
builds its forwarder through :func:`build_forwarder`.
"""

from __future__ import annotations

import logging
import os
from typing import Sequence

import click
import lib_cli_exit_tools
from click.core import ParameterSource
from rich.console import Console
from rich.table import Table

from . import __init__conf__
from . import config as log_config
from .adapters.reporter import RichErrorReporter
from .adapters.stdlib import event_from_record
from .domain.errors import ConfigurationError
from .domain.settings import ForwarderConfig
from .runtime import build_forwarder

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def summary_info() -> str:
    """Return the metadata banner printed by ``info``.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


def _parse_overrides(pairs: Sequence[str]) -> dict[str, str]:
    """Split ``NAME=VALUE`` options.

    Examples
    --------
    >>> _parse_overrides(["host=influx", "useTLS=yes"])
    {'host': 'influx', 'useTLS': 'yes'}
    """

    overrides: dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"expected NAME=VALUE, got {pair!r}", param_hint="--property")
        overrides[name.strip()] = value
    return overrides


def _resolve_config(ctx: click.Context) -> ForwarderConfig:
    overrides = ctx.obj.get("overrides", {}) if ctx.obj else {}
    try:
        return log_config.config_from_env().with_properties(overrides)
    except ConfigurationError as exc:
        raise click.UsageError(str(exc), ctx=ctx) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load LOG_INFLUX_* variables from the nearest .env (overrides {log_config.DOTENV_ENV_VAR}).",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--property",
    "-p",
    "properties",
    multiple=True,
    metavar="NAME=VALUE",
    help="Override a forwarder property; takes precedence over the environment.",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool, traceback: bool, properties: tuple[str, ...]) -> None:
    """Root command storing global options in the click context."""

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit = use_dotenv
    if log_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    ctx.ensure_object(dict)
    ctx.obj["overrides"] = _parse_overrides(properties)

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""

    click.echo(summary_info(), nl=False)


@cli.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--show-password", is_flag=True, default=False, help="Print the password instead of ***.")
@click.pass_context
def cli_config(ctx: click.Context, show_password: bool) -> None:
    """Show the resolved forwarder configuration."""

    config = _resolve_config(ctx)
    table = Table(title=f"{__init__conf__.name} configuration")
    table.add_column("property")
    table.add_column("value")
    table.add_column("environment variable")
    for name, value in config.to_dict(mask_password=not show_password).items():
        table.add_row(name, "" if value is None else str(value), log_config.env_var_name(name))
    Console(soft_wrap=True).print(table)


@cli.command("ping", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_ping(ctx: click.Context) -> None:
    """Connect, make sure the database exists and print the server version."""

    forwarder = build_forwarder(_resolve_config(ctx), reporter=RichErrorReporter())
    try:
        if not forwarder.activate()["ok"]:
            ctx.exit(1)
        result = forwarder.probe()
    finally:
        forwarder.shutdown()
    if not result["ok"]:
        click.echo(f"{forwarder.config.connect_url}: backend not ready ({result.get('reason', 'unknown')})", err=True)
        ctx.exit(1)
    click.echo(f"{forwarder.config.connect_url}: InfluxDB {result['version']}")


@cli.command("send", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("message")
@click.option("--level", type=click.Choice(_LEVELS, case_sensitive=False), default="INFO", show_default=True)
@click.option("--logger", "logger_name", default=__init__conf__.name, show_default=True, help="Logger name tag.")
@click.pass_context
def cli_send(ctx: click.Context, message: str, level: str, logger_name: str) -> None:
    """Forward MESSAGE as one log point."""

    forwarder = build_forwarder(_resolve_config(ctx), reporter=RichErrorReporter())
    try:
        if not forwarder.activate()["ok"]:
            ctx.exit(1)
        record = logging.LogRecord(
            logger_name,
            logging.getLevelName(level.upper()),
            __file__,
            0,
            message,
            None,
            None,
            func="cli_send",
        )
        result = forwarder.deliver(event_from_record(record))
    finally:
        forwarder.shutdown()
    if not result["ok"]:
        click.echo(f"point not written: {result.get('reason', 'unknown')}", err=True)
        ctx.exit(1)
    click.echo(f"point written to {forwarder.config.database_name}.{forwarder.config.measurement_name}")


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with error handling and return the exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    unless ``restore_traceback`` is ``False``.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main", "summary_info"]
