"""
Adapter: StackEvaluator
Implementuje port Evaluator — maszyna stosowa RPN sterowana pojedynczymi tokenami.

Klasyfikacja tokenu, po kolei:
  1. literał liczbowy          → push
  2. operator binarny + - * / % → pop b (szczyt), pop a, push a <op> b
  3. komenda q p c s ?         → quit / pop / clear / show / help
  4. cokolwiek innego          → EvalError(INVALID_INPUT)

Każda ścieżka błędu zostawia stos dokładnie w stanie sprzed wywołania.
Na stos trafiają tylko wartości, które da się wyświetlić (limit cyfr int↔str).
"""
from __future__ import annotations

import logging
import math
from typing import Callable

from adapters.number_format import format_number, parse_number
from contracts import (
    Acknowledged,
    ErrorKind,
    EvalError,
    EvalResult,
    HelpShown,
    Number,
    NumberPushed,
    OperationResult,
    QuitRequested,
    StackShown,
)

logger = logging.getLogger("rpn_calc.stack_evaluator")

HELP_TEXT = (
    "Valid operators: +, -, *, /, %\n"
    "Valid commands: (q)uit, (p)op, (s)how, (c)lear, ?"
)


def _truncating_mod(a: Number, b: Number) -> Number:
    """Reszta z dzielenia obcinanego: znak dzielnej (-7 % 3 == -1)."""
    if isinstance(a, int) and isinstance(b, int):
        r = abs(a) % abs(b)
        return -r if a < 0 else r
    if math.isinf(a):
        # IEEE fmod(±inf, y) to NaN; math.fmod rzuca wyjątek
        return math.nan
    return math.fmod(a, b)


# Symbol operatora → (a, b) -> wynik
_OP_FUNCS: dict[str, Callable[[Number, Number], Number]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: a / b,
    "%": _truncating_mod,
}

# Operatory odrzucające zerowy prawy operand, z komunikatem dla użytkownika
_ZERO_DIVISORS = {
    "/": "Division by zero",
    "%": "Modulo by zero",
}


class StackEvaluator:
    """Ewaluator RPN z jednym stosem operandów."""

    def __init__(self, initial: list[Number] | None = None) -> None:
        self._stack: list[Number] = list(initial or [])
        self._commands: dict[str, Callable[[], EvalResult]] = {
            "q": self._quit,
            "p": self._pop,
            "c": self._clear,
            "s": self._show,
            "?": self._help,
        }

    # -- Evaluator protocol ------------------------------------------------

    @property
    def stack(self) -> list[Number]:
        return list(self._stack)

    def handle(self, token: str) -> EvalResult:
        text = token.strip()

        try:
            value = parse_number(text)
        except ValueError as exc:
            logger.debug("literal of %d chars rejected: %s", len(text), exc)
            return _overflow(exc)
        if value is not None:
            self._stack.append(value)
            logger.debug("push (depth %d)", len(self._stack))
            return NumberPushed(value=value)

        if text in _OP_FUNCS:
            return self._apply(text)

        command = self._commands.get(text)
        if command is not None:
            return command()

        logger.debug("invalid token of %d chars", len(text))
        return EvalError(
            error=ErrorKind.INVALID_INPUT,
            message=f"Invalid input: {text!r}",
        )

    # -- Operatory ---------------------------------------------------------

    def _apply(self, op: str) -> EvalResult:
        if len(self._stack) < 2:
            logger.debug("%s needs 2 operands, stack has %d", op, len(self._stack))
            return _not_enough_operands(op)

        b = self._stack.pop()
        a = self._stack.pop()

        if op in _ZERO_DIVISORS and b == 0:
            self._stack.extend((a, b))
            logger.debug("%s by zero rejected, stack restored", op)
            return EvalError(error=ErrorKind.DIVISION_BY_ZERO, message=_ZERO_DIVISORS[op])

        try:
            result = _OP_FUNCS[op](a, b)
            # Wynik musi dać się wyświetlić, inaczej renderer rzuci ValueError
            format_number(result)
        except (OverflowError, ValueError) as exc:
            self._stack.extend((a, b))
            logger.debug("%s rejected, stack restored: %s", op, exc)
            return _overflow(exc)

        self._stack.append(result)
        logger.debug("%s applied (depth %d)", op, len(self._stack))
        return OperationResult(operator=op, value=result)

    # -- Komendy -----------------------------------------------------------

    def _pop(self) -> EvalResult:
        if not self._stack:
            return _not_enough_operands("p")
        value = self._stack.pop()
        return Acknowledged(command="pop", value=value)

    def _clear(self) -> EvalResult:
        cleared = self._stack
        self._stack = []
        return Acknowledged(command="clear", contents=cleared)

    def _show(self) -> EvalResult:
        return StackShown(contents=self.stack)

    def _help(self) -> EvalResult:
        return HelpShown(text=HELP_TEXT)

    def _quit(self) -> EvalResult:
        logger.debug("quit requested (depth %d)", len(self._stack))
        return QuitRequested(final_stack=self.stack)


def _not_enough_operands(token: str) -> EvalError:
    return EvalError(
        error=ErrorKind.INSUFFICIENT_OPERANDS,
        message=f"Not enough operands for {token!r}",
    )


def _overflow(exc: Exception) -> EvalError:
    return EvalError(
        error=ErrorKind.NUMERIC_OVERFLOW,
        message=f"Numeric overflow: {exc}",
    )
