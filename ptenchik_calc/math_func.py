"""Arithmetic operations and their interactive dialogues."""

from __future__ import annotations

import math
import operator
import re
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Tuple

from .input_utils import Console

SHORT_WAIT = 1
LONG_WAIT = 2

PROMPT = "\033[1m\033[32mВаш ответ\033[0m: "

_FLOAT = r"[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)"
_OPERANDS = re.compile(rf"\s*({_FLOAT})[, ]+\s*({_FLOAT})", re.IGNORECASE)


class OperandError(ValueError):
    """Raised when a line does not hold two comma-separated numbers."""


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


@dataclass(frozen=True)
class _Wording:
    name: str
    operands: str
    verb: str
    process: str
    again: str
    func: Callable[[float, float], float]


_WORDING = {
    "+": _Wording("сложение", "два слагаемых", "сложить", "сложения", "сложить", operator.add),
    "-": _Wording(
        "вычитание", "уменьшаемое и вычитаемое", "вычесть", "вычитания", "вычесть", operator.sub
    ),
    "*": _Wording(
        "умножение", "два множителя", "умножить", "умножения", "перемножить", operator.mul
    ),
    "/": _Wording(
        "деление", "делимое и делитель", "поделить", "деления", "поделить", operator.truediv
    ),
}


class Operation(Enum):
    """One of the four arithmetic operations, valued by its symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def _wording(self) -> _Wording:
        return _WORDING[self.value]

    def apply(self, first: float, second: float) -> float:
        """Compute the operation in single precision."""
        return _to_float32(self._wording.func(_to_float32(first), _to_float32(second)))


def parse_operands(text: str) -> Tuple[float, float]:
    """Parse two numbers separated by commas and/or spaces; trailing text is ignored."""
    match = _OPERANDS.match(text)
    if match is None:
        raise OperandError(f"expected two numbers separated by a comma: {text!r}")
    return _to_float32(float(match.group(1))), _to_float32(float(match.group(2)))


def format_number(value: float) -> str:
    """Format a number with two decimal places."""
    return f"{value:.2f}"


def _read_operands(console: Console, operation: Operation) -> Tuple[float, float]:
    error = (
        f"[ERROR] Пожалуйста, введите через запятую {operation._wording.operands} "
        "(например: 2.25, 2).\n"
    )
    while True:
        line = console.read_line()
        try:
            first, second = parse_operands(line)
        except OperandError:
            console.clear()
            console.write(error + PROMPT)
            continue
        if operation is Operation.DIVIDE and second == 0:
            console.clear()
            console.write(error)
            console.write("\n[ERROR] Делить на ноль - нельзя!\n" + PROMPT)
            continue
        return first, second


def run_operation(console: Console, operation: Operation) -> None:
    """Run the dialogue for one operation until the user returns to the main menu."""
    wording = operation._wording
    while True:
        console.clear()
        console.write(
            f"Вы выбрали {wording.name}. Через запятую введите {wording.operands}.\n" + PROMPT
        )
        first, second = _read_operands(console, operation)
        shown = f"{format_number(first)} {operation.symbol} {format_number(second)}"
        confirm = f"\nВы желаете {wording.verb} {shown}, верно? (y/n).\n" + PROMPT
        console.write(confirm)

        while True:
            answer = console.read_char().lower()
            if answer == "y":
                console.write(f"\nПроисходит процесс {wording.process}, подождите, пожалуйста...\n\n")
                console.pause(SHORT_WAIT)
                result = operation.apply(first, second)
                console.write(f"\033[1m[ANSWER] {shown} = {format_number(result)}.\033[0m\n\n")
                console.pause(SHORT_WAIT)
                console.write("Введите букву 'q' для выхода в главное меню...\n" + PROMPT)
                while console.read_char().lower() != "q":
                    console.write(
                        "\nЕсли хотите выйти, то введите букву 'q' для выхода в главное меню...\n"
                        + PROMPT
                    )
                return
            if answer == "n":
                console.write(f"\nЖелаете заново {wording.again} числа? (y/n)\n" + PROMPT)
                if console.read_char().lower() == "y":
                    break
                console.write(
                    "\nВы отменили решение. Через 2 секунды вы вернетесь в главное меню...\n"
                )
                console.pause(LONG_WAIT)
                return
            console.write(confirm)


def fold(console: Console) -> None:
    """Run the addition dialogue."""
    run_operation(console, Operation.ADD)


def subtract(console: Console) -> None:
    """Run the subtraction dialogue."""
    run_operation(console, Operation.SUBTRACT)


def multiply(console: Console) -> None:
    """Run the multiplication dialogue."""
    run_operation(console, Operation.MULTIPLY)


def divide(console: Console) -> None:
    """Run the division dialogue."""
    run_operation(console, Operation.DIVIDE)