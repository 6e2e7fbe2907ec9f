"""
contracts.py — Jedyne źródło prawdy dla typów danych rpncalc.
Wszystkie moduły importują typy wyników WYŁĄCZNIE stąd.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

CONTRACTS_VERSION = "1.0.0"

# literały całkowite zostają int, dziesiętne i wyniki "/" to float
Number = Union[int, float]


# ─────────────────────────── Errors ──────────────────────────────────────

class ErrorKind(str, Enum):
    INSUFFICIENT_OPERANDS = "insufficient_operands"
    DIVISION_BY_ZERO = "division_by_zero"     # zarówno "/", jak i "%"
    INVALID_INPUT = "invalid_input"
    NUMERIC_OVERFLOW = "numeric_overflow"     # int za duży dla float lub limitu cyfr int↔str


# ─────────────────────────── Evaluator ───────────────────────────────────

class NumberPushed(BaseModel):
    kind: Literal["number_pushed"] = "number_pushed"
    value: Number


class OperationResult(BaseModel):
    kind: Literal["operation_result"] = "operation_result"
    operator: Literal["+", "-", "*", "/", "%"]
    value: Number


class StackShown(BaseModel):
    kind: Literal["stack_shown"] = "stack_shown"
    contents: list[Number] = Field(default_factory=list)  # od dołu do szczytu


class Acknowledged(BaseModel):
    kind: Literal["acknowledged"] = "acknowledged"
    command: Literal["pop", "clear"]
    value: Optional[Number] = None                        # pop: zdjęta wartość
    contents: list[Number] = Field(default_factory=list)  # clear: usunięta zawartość


class EvalError(BaseModel):
    kind: Literal["error"] = "error"
    error: ErrorKind
    message: str


class HelpShown(BaseModel):
    kind: Literal["help"] = "help"
    text: str


class QuitRequested(BaseModel):
    kind: Literal["quit"] = "quit"
    final_stack: list[Number] = Field(default_factory=list)


EvalResult = Annotated[
    Union[
        NumberPushed, OperationResult, StackShown, Acknowledged,
        EvalError, HelpShown, QuitRequested,
    ],
    Field(discriminator="kind"),
]
