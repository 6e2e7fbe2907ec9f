from __future__ import annotations

import io

from rpncalc import main


def test_run_evaluates_tokens_from_arguments(capsys):
    code = main(["run", "5", "3", "+", "s"])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == [
        "Number: 5",
        "Number: 3",
        "Result: 8",
        "Stack: [8]",
        "Final stack: [8]",
    ]


def test_run_reads_stdin_when_no_tokens_given(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n0\n/\ns\n"))

    code = main(["run"])

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out == [
        "Number: 4",
        "Number: 0",
        "Error: Division by zero",
        "Stack: [4, 0]",
        "Final stack: [4, 0]",
    ]


def test_run_accepts_negative_number_tokens(capsys):
    main(["run", "-7", "3", "%"])

    assert "Result: -1" in capsys.readouterr().out.splitlines()


def test_repl_is_default_and_exits_cleanly_on_eof(monkeypatch, capsys):
    monkeypatch.setenv("RPN_CALC_SHOW_HELP_ON_START", "false")
    lines = iter(["2", "3", "*"])

    def _input(*args):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", _input)

    code = main([])

    out = capsys.readouterr().out
    assert code == 0
    assert "Result: 6" in out
    assert "Final stack: [6]" in out


def test_invalid_log_level_exits_with_error_instead_of_traceback(monkeypatch, capsys):
    monkeypatch.setenv("RPN_CALC_LOG_LEVEL", "LOUD")

    code = main(["run", "1"])

    captured = capsys.readouterr()
    assert code == 1
    assert "invalid configuration" in captured.err
    assert captured.out == ""
