"""
Adapter: ConsoleLineIO
Implements the LineIO port on top of a rich Console.

Markup and highlighting are disabled: "[4, 0]" is calculator output, not a
style tag. EOF (Ctrl-D) and Ctrl-C both end the input stream.
"""
from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console

logger = logging.getLogger("rpn_calc.console_io")


class ConsoleLineIO:
    """Interactive terminal: prompt, read a line, print plain lines."""

    def __init__(self, prompt: str = "> ", console: Console | None = None) -> None:
        self._prompt = prompt
        self._console = console or Console(highlight=False)

    # -- LineIO protocol ---------------------------------------------------

    def read_line(self) -> Optional[str]:
        try:
            return self._console.input(self._prompt, markup=False, emoji=False)
        except EOFError:
            logger.debug("EOF on input")
        except KeyboardInterrupt:
            logger.debug("interrupted")
        # Keep the final report off the prompt line
        self._console.line()
        return None

    def write_line(self, text: str) -> None:
        self._console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)
