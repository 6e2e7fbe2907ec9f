"""
Adapter: ScriptedLineIO
Implements the LineIO port over a fixed sequence of lines; records output.
Used for non-interactive runs (`rpncalc run`) and in tests.
"""
from __future__ import annotations

from typing import Iterable, Optional


class ScriptedLineIO:
    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self.output: list[str] = []

    # -- LineIO protocol ---------------------------------------------------

    def read_line(self) -> Optional[str]:
        line = next(self._lines, None)
        if line is None:
            return None
        return line.rstrip("\r\n")

    def write_line(self, text: str) -> None:
        self.output.append(text)
