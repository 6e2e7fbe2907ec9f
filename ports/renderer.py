"""
Port: Renderer
Responsibility: presentation of EvalResult values as output lines.
"""
from typing import Protocol, runtime_checkable

from contracts import EvalResult


@runtime_checkable
class Renderer(Protocol):
    def render(self, result: EvalResult) -> list[str]:
        """
        Returns the lines to print for a result, in order.
        Rendering is pure: the same result always yields the same lines.
        """
        ...
