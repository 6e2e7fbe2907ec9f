"""
session.py — the read/eval/print loop.

    LineIO.read_line() ─► Evaluator.handle() ─► Renderer.render() ─► LineIO.write_line()

The loop ends on QuitRequested. End of input is handled exactly like "q",
so both paths report the final stack the same way.
"""
from __future__ import annotations

import logging

from contracts import Number, QuitRequested
from ports.evaluator import Evaluator
from ports.line_io import LineIO
from ports.renderer import Renderer

logger = logging.getLogger("rpn_calc.session")

QUIT_TOKEN = "q"
HELP_TOKEN = "?"


def run_session(
    evaluator: Evaluator,
    io: LineIO,
    renderer: Renderer,
    show_help: bool = True,
) -> list[Number]:
    """Run until quit or end of input; return the final stack."""
    if show_help:
        _emit(io, renderer.render(evaluator.handle(HELP_TOKEN)))

    while True:
        line = io.read_line()
        if line is None:
            logger.info("End of input, quitting.")
            line = QUIT_TOKEN
        elif not line.strip():
            continue

        result = evaluator.handle(line)
        _emit(io, renderer.render(result))

        if isinstance(result, QuitRequested):
            return result.final_stack


def _emit(io: LineIO, lines: list[str]) -> None:
    for text in lines:
        io.write_line(text)
