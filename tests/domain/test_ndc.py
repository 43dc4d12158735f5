from __future__ import annotations

import contextvars
import threading

import pytest

from lib_log_influx.domain import NestedDiagnosticContext


def test_push_pop_peek_depth() -> None:
    ndc = NestedDiagnosticContext("test_push_pop")

    ndc.push("request-1")
    ndc.push("db")

    assert ndc.depth() == 2
    assert ndc.peek() == "db"
    assert ndc.get() == "request-1 db"
    assert ndc.pop() == "db"
    assert ndc.pop() == "request-1"
    assert ndc.pop() is None
    assert ndc.get() is None


def test_clear_empties_stack() -> None:
    ndc = NestedDiagnosticContext("test_clear")
    ndc.push("one")
    ndc.clear()

    assert ndc.depth() == 0


def test_blank_messages_are_rejected() -> None:
    ndc = NestedDiagnosticContext("test_blank")
    with pytest.raises(ValueError):
        ndc.push("  ")


def test_nested_restores_previous_stack_after_error() -> None:
    ndc = NestedDiagnosticContext("test_nested_error")
    with pytest.raises(RuntimeError):
        with ndc.nested("outer"):
            raise RuntimeError("fail")

    assert ndc.get() is None


def test_threads_do_not_share_stacks() -> None:
    ndc = NestedDiagnosticContext("test_threads")
    ndc.push("main")
    seen: list[str | None] = []

    worker = threading.Thread(target=lambda: seen.append(ndc.get()))
    worker.start()
    worker.join()

    assert seen == [None]
    assert ndc.get() == "main"
    ndc.clear()


def test_copied_context_keeps_its_own_stack() -> None:
    ndc = NestedDiagnosticContext("test_copied")
    ctx = contextvars.copy_context()
    ctx.run(ndc.push, "inside")

    assert ctx.run(ndc.get) == "inside"
    assert ndc.get() is None
