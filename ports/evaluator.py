"""
Port: Evaluator
Responsibility: owns the operand stack and turns one input token into one EvalResult.
"""
from typing import Protocol, runtime_checkable

from contracts import EvalResult, Number


@runtime_checkable
class Evaluator(Protocol):
    @property
    def stack(self) -> list[Number]:
        """Copy of the operand stack, bottom to top."""
        ...

    def handle(self, token: str) -> EvalResult:
        """
        Classifies a single token (number, operator, command) and applies it.
        Number literals are pushed; binary operators consume the two topmost
        values and push the result; commands pop, clear, show, help or quit.

        Never raises for any string input. Error conditions are returned as
        EvalError and leave the stack exactly as it was before the call.
        """
        ...
