#!/usr/bin/env python3
"""
rpncalc.py — CLI kalkulatora RPN.

Działa całkowicie lokalnie — czyta jeden token na linię i trzyma stos operandów.

Konfiguracja: zmienne środowiskowe z prefiksem RPN_CALC_
lub plik .env (np. RPN_CALC_LOG_LEVEL=DEBUG, RPN_CALC_PROMPT="rpn> ").

Podkomendy:
    repl   — sesja interaktywna (domyślna, gdy nie podano podkomendy)
    run    — policz tokeny z linii poleceń lub stdin, bez promptu

Użycie:
    python rpncalc.py
    python rpncalc.py run 5 3 + s
    printf '4\\n0\\n/\\ns\\n' | python rpncalc.py run

Tokeny:
    <liczba>         push na stos
    + - * / %        działanie na dwóch wartościach ze szczytu
    p  c  s  ?  q    pop, clear, show, help, quit
"""
from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError
from rich.console import Console

from adapters.evaluator.stack_evaluator import StackEvaluator
from adapters.line_io.console_io import ConsoleLineIO
from adapters.line_io.scripted_io import ScriptedLineIO
from adapters.renderer.text_renderer import TextRenderer
from config import Settings
from session import run_session

logger = logging.getLogger("rpn_calc")


# -- pomocnicze ------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


# -- podkomendy ---------------------------------------------------------

def _repl(args: argparse.Namespace, settings: Settings) -> None:
    io = ConsoleLineIO(prompt=settings.prompt, console=_console())
    final = run_session(
        StackEvaluator(),
        io,
        TextRenderer(),
        show_help=settings.show_help_on_start,
    )
    logger.info("Session finished with %d value(s) on the stack.", len(final))


def _run(args: argparse.Namespace, settings: Settings) -> None:
    lines = args.tokens if args.tokens else sys.stdin.read().splitlines()
    io = ScriptedLineIO(lines)
    run_session(StackEvaluator(), io, TextRenderer(), show_help=False)
    for text in io.output:
        _console().print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


# -- main ------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rpncalc",
        description="rpncalc — Reverse Polish Notation calculator",
    )
    sub = parser.add_subparsers(dest="command")

    # repl
    sub.add_parser("repl", help="Interactive session (default)")

    # run
    p = sub.add_parser("run", help="Evaluate tokens without a prompt")
    p.add_argument("tokens", nargs="*", metavar="TOKEN",
                   help="Tokens to evaluate (default: one per line from stdin)")

    args = parser.parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"Error: invalid configuration (RPN_CALC_*):\n{exc}", file=sys.stderr)
        return 1
    logging.basicConfig(level=settings.log_level.upper())

    cmds = {
        "repl": _repl,
        "run":  _run,
    }
    cmds[args.command or "repl"](args, settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
