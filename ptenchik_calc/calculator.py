"""Main menu of the interactive calculator."""

from __future__ import annotations

import argparse
from typing import Callable, Dict, Optional, Sequence

from .input_utils import Console, EndOfInput
from .math_func import PROMPT, divide, fold, multiply, subtract

_BANNER = (
    "Здравствуйте! Вы открыли калькулятор. Посвящается моему "
    "\033[31mумершему\033[0m птенчику.\n\nВыберите действие ниже:\n\n"
)
_MENU = "[+] Сложение.\n[-] Вычитание.\n[*] Умножение.\n[/] Деление.\n[q] Выйти.\n\n"
_UNKNOWN = "[ERROR] Неизвестный оператор.\n\n"

_ACTIONS: Dict[str, Callable[[Console], None]] = {
    "+": fold,
    "-": subtract,
    "*": multiply,
    "/": divide,
}


def _read_action(console: Console) -> str:
    while True:
        line = console.read_line().lstrip()
        if line:
            return line[0]


def run(console: Console) -> None:
    """Show the main menu repeatedly until the user chooses to quit."""
    unknown_operator = False
    while True:
        console.clear()
        console.write(_BANNER)
        console.write(_MENU)
        if unknown_operator:
            console.write(_UNKNOWN)
        console.write(PROMPT)

        action = _read_action(console)
        if action in ("q", "Q"):
            return
        handler = _ACTIONS.get(action)
        if handler is None:
            unknown_operator = True
        else:
            handler(console)
            unknown_operator = False


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive calculator."""
    parser = argparse.ArgumentParser(
        prog="ptenchik-calc", description="Interactive four-operation calculator."
    )
    parser.parse_args(argv)
    console = Console()
    try:
        run(console)
    except (EndOfInput, KeyboardInterrupt):
        console.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())