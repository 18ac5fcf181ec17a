"""Runtime value types for the Lox evaluator."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from lox.lox_token import Literal


class _Nil:
    """Singleton for `nil`."""

    _instance: "_Nil | None" = None

    def __new__(cls) -> "_Nil":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nil"

    def __str__(self) -> str:
        return "nil"


Nil = _Nil()


@dataclass(frozen=True)
class VBool:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class VNumber:
    value: float

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class VString:
    value: str

    def __str__(self) -> str:
        return self.value


Value = Union[_Nil, VBool, VNumber, VString]


def format_number(v: float) -> str:
    """Render a float the way Lox prints numbers: `14`, `2.5`, never `1e+21`."""
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "inf" if v > 0 else "-inf"
    text = repr(v)
    if v.is_integer():
        # repr keeps the shortest digits; "-0.0" stays "-0"
        return format(Decimal(text), "f").partition(".")[0]
    if "e" in text or "E" in text:
        # shortest round-trip digits, expanded out of exponent form
        return format(Decimal(text), "f")
    return text


def from_literal(literal: Literal) -> Value:
    """Lift a scanner/parser literal payload into the runtime union."""
    if literal is None:
        return Nil
    if isinstance(literal, bool):
        return VBool(literal)
    if isinstance(literal, float):
        return VNumber(literal)
    if isinstance(literal, str):
        return VString(literal)
    raise TypeError(f"Unsupported literal payload: {literal!r}")


def is_truthy(value: Value) -> bool:
    """`nil` and `false` are falsey; every number and string (even 0 and "") is truthy."""
    if value is Nil:
        return False
    if isinstance(value, VBool):
        return value.value
    return True


def is_equal(a: Value, b: Value) -> bool:
    """Structural equality. Values of different types are never equal."""
    if a is Nil or b is Nil:
        return a is b
    if type(a) is not type(b):
        return False
    # compare payloads directly so NaN != NaN
    return a.value == b.value  # type: ignore[union-attr]


def stringify(value: Value) -> str:
    return str(value)


__all__ = [
    "Nil",
    "VBool",
    "VNumber",
    "VString",
    "Value",
    "format_number",
    "from_literal",
    "is_equal",
    "is_truthy",
    "stringify",
]
