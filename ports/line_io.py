"""
Port: LineIO
Responsibility: the line-oriented terminal the session talks to.
"""
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class LineIO(Protocol):
    def read_line(self) -> Optional[str]:
        """
        Returns the next input line without its trailing newline.
        Returns None once input is exhausted (EOF, interrupted terminal).
        """
        ...

    def write_line(self, text: str) -> None:
        """Writes one line of output."""
        ...
