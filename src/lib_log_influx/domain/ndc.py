"""Nested diagnostic context built atop :mod:`contextvars`.

Purpose
-------
Let applications push short context strings (request ids, job names) that
are attached to every point emitted while they are on the stack, without
passing ``extra=`` to each logging call.

Contents
--------
* :class:`NestedDiagnosticContext` - stack manager with push/pop helpers and a
  scoped :meth:`~NestedDiagnosticContext.nested` context manager.
* :data:`NDC` - process-wide default instance read by the logging bridge.

System Role
-----------
Consulted by :func:`lib_log_influx.adapters.stdlib.event_from_record` when a
record carries no explicit ``ndc`` attribute. Context variables keep the
stack isolated per thread and per asyncio task.
"""

from __future__ import annotations

import contextvars
from contextlib import contextmanager
from typing import Iterator


def _validate_message(message: str) -> str:
    if not isinstance(message, str) or not message.strip():
        raise ValueError("NDC message must be a non-empty string")
    return message


class NestedDiagnosticContext:
    """Manage the diagnostic context stack of the current execution flow.

    Examples
    --------
    >>> ndc = NestedDiagnosticContext()
    >>> with ndc.nested("order-17"):
    ...     with ndc.nested("payment"):
    ...         ndc.get()
    'order-17 payment'
    >>> ndc.get() is None
    True
    """

    _stack_var: contextvars.ContextVar[tuple[str, ...]]

    def __init__(self, name: str = "lib_log_influx_ndc_stack") -> None:
        self._stack_var = contextvars.ContextVar(name, default=())

    def push(self, message: str) -> None:
        """Push ``message`` on top of the stack."""

        self._stack_var.set(self._stack_var.get() + (_validate_message(message),))

    def pop(self) -> str | None:
        """Remove and return the top message, or ``None`` when empty."""

        stack = self._stack_var.get()
        if not stack:
            return None
        self._stack_var.set(stack[:-1])
        return stack[-1]

    def peek(self) -> str | None:
        """Return the top message without removing it."""

        stack = self._stack_var.get()
        return stack[-1] if stack else None

    def depth(self) -> int:
        return len(self._stack_var.get())

    def get(self) -> str | None:
        """Return the whole stack joined with spaces, or ``None`` when empty."""

        stack = self._stack_var.get()
        return " ".join(stack) if stack else None

    def clear(self) -> None:
        """Remove every message bound to the current flow."""

        self._stack_var.set(())

    @contextmanager
    def nested(self, message: str) -> Iterator[str]:
        """Push ``message`` for the lifetime of the ``with`` block."""

        stack = self._stack_var.get()
        token = self._stack_var.set(stack + (_validate_message(message),))
        try:
            yield message
        finally:
            self._stack_var.reset(token)


NDC = NestedDiagnosticContext()


__all__ = ["NDC", "NestedDiagnosticContext"]
