"""
Adapter: TextRenderer
Implements the Renderer port — the plain-text line format of the calculator.

    Number: 5
    Result: 8
    Stack: [4, 0]
    Popped: 3
    Clearing stack: [1, 2]
    Error: Division by zero
    Final stack: [8]
"""
from __future__ import annotations

from adapters.number_format import format_number, format_stack
from contracts import (
    Acknowledged,
    EvalError,
    EvalResult,
    HelpShown,
    NumberPushed,
    OperationResult,
    QuitRequested,
    StackShown,
)


class TextRenderer:
    """Renders each EvalResult variant as one or more lines of text."""

    # -- Renderer protocol -------------------------------------------------

    def render(self, result: EvalResult) -> list[str]:
        if isinstance(result, NumberPushed):
            return [f"Number: {format_number(result.value)}"]

        if isinstance(result, OperationResult):
            return [f"Result: {format_number(result.value)}"]

        if isinstance(result, StackShown):
            return [f"Stack: {format_stack(result.contents)}"]

        if isinstance(result, Acknowledged):
            if result.command == "pop":
                return [f"Popped: {format_number(result.value)}"]
            return [f"Clearing stack: {format_stack(result.contents)}"]

        if isinstance(result, EvalError):
            return [f"Error: {result.message}"]

        if isinstance(result, HelpShown):
            return result.text.splitlines()

        if isinstance(result, QuitRequested):
            return [f"Final stack: {format_stack(result.final_stack)}"]

        raise TypeError(f"Unknown result type: {type(result)}")
