"""Rich-powered error reporter implementing :class:`ErrorReporterPort`.

Purpose
-------
Surface activation and delivery failures on stderr without routing them
back through :mod:`logging`, where a root-level InfluxDB handler would
receive its own errors.
"""

from __future__ import annotations

from rich.console import Console

from lib_log_influx.application.ports.reporter import ErrorReporterPort

DEFAULT_PREFIX = "lib_log_influx"


class RichErrorReporter(ErrorReporterPort):
    """Print ``"<prefix>: <message>"`` in red to a stderr console."""

    def __init__(self, *, console: Console | None = None, prefix: str = DEFAULT_PREFIX, style: str = "red") -> None:
        self._console = console if console is not None else Console(stderr=True)
        self._prefix = prefix
        self._style = style

    def report(self, message: str) -> None:
        """Print ``message``.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True)
        >>> RichErrorReporter(console=console).report("Error writing point [x]")
        >>> console.export_text().strip()
        'lib_log_influx: Error writing point [x]'
        """
        self._console.print(f"{self._prefix}: {message}", style=self._style, markup=False, highlight=False)


__all__ = ["DEFAULT_PREFIX", "RichErrorReporter"]
