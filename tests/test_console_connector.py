# tests/test_console_connector.py

from __future__ import annotations

import builtins

from todo_maker.connectors.console_connector import run_console_loop


def _feed(monkeypatch, *lines: str) -> None:
    pending = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def test_loop_reports_errors_and_keeps_reading(monkeypatch, capsys, seeded_state) -> None:
    _feed(monkeypatch, "/rm 99", "/list")

    run_console_loop(seeded_state)

    out = capsys.readouterr().out
    assert "[ERROR] task not found: #99" in out
    after_error = out[out.index("[ERROR]"):]
    # the /list reply plus the view redrawn after it
    assert after_error.count("Finish project") >= 2
    assert seeded_state.store.count_tasks() == 3


def test_loop_hints_on_plain_text_and_stops_on_exit(monkeypatch, capsys, seeded_state) -> None:
    _feed(monkeypatch, "hello", "/exit", "/add never reached")

    run_console_loop(seeded_state)

    out = capsys.readouterr().out
    assert "Commands start with '/'" in out
    assert seeded_state.store.count_tasks() == 3
