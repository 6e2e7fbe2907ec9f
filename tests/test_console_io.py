from __future__ import annotations

import io

from rich.console import Console

from adapters.line_io.console_io import ConsoleLineIO
from ports.line_io import LineIO


def _console(buf: io.StringIO) -> Console:
    return Console(file=buf, highlight=False, force_terminal=False, width=120)


def test_console_line_io_implements_line_io_port():
    assert isinstance(ConsoleLineIO(), LineIO)


def test_read_line_prompts_and_returns_input(monkeypatch):
    buf = io.StringIO()
    monkeypatch.setattr("builtins.input", lambda *args: "5")

    line = ConsoleLineIO(prompt="> ", console=_console(buf)).read_line()

    assert line == "5"
    assert buf.getvalue().rstrip() == ">"


def test_read_line_maps_eof_and_interrupt_to_none(monkeypatch):
    def _raise(exc):
        def _input(*args):
            raise exc
        return _input

    for exc in (EOFError, KeyboardInterrupt):
        monkeypatch.setattr("builtins.input", _raise(exc))
        assert ConsoleLineIO(console=_console(io.StringIO())).read_line() is None


def test_write_line_prints_brackets_verbatim():
    buf = io.StringIO()

    ConsoleLineIO(console=_console(buf)).write_line("Stack: [4, 0]")

    assert buf.getvalue() == "Stack: [4, 0]\n"


def test_prompt_is_printed_without_emoji_substitution(monkeypatch):
    buf = io.StringIO()
    monkeypatch.setattr("builtins.input", lambda *args: "s")

    ConsoleLineIO(prompt=":x: ", console=_console(buf)).read_line()

    assert buf.getvalue().rstrip() == ":x:"
