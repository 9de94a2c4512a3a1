import io
import sys
from unittest import mock

import pytest

from ptenchik_calc.calculator import main, run
from ptenchik_calc.input_utils import Console, EndOfInput


def make_console(text):
    out = io.StringIO()
    clears = []
    sleeps = []
    console = Console(
        stdin=io.StringIO(text),
        stdout=out,
        clear=lambda: clears.append(True),
        sleep=sleeps.append,
    )
    return console, out, clears, sleeps


@pytest.mark.parametrize("key", ["q", "Q", "  q extra"])
def test_quit(key):
    console, out, clears, _ = make_console(key + "\n")
    run(console)
    assert "[q] Выйти." in out.getvalue()
    assert len(clears) == 1


def test_blank_lines_are_skipped():
    console, _, clears, _ = make_console("\n   \nq\n")
    run(console)
    assert len(clears) == 1


def test_unknown_operator_reported_then_cleared():
    console, out, clears, _ = make_console("x\n+\n2.25, 2\ny\nq\nq\n")
    run(console)
    text = out.getvalue()
    assert text.count("[ERROR] Неизвестный оператор.") == 1
    assert "[ANSWER] 2.25 + 2.00" in text
    assert len(clears) == 4


@pytest.mark.parametrize(
    "key,name",
    [("+", "сложение"), ("-", "вычитание"), ("*", "умножение"), ("/", "деление")],
)
def test_dispatch(key, name):
    console, out, _, _ = make_console(f"{key}\n2.25, 2\ny\nq\nq\n")
    run(console)
    assert f"Вы выбрали {name}." in out.getvalue()


def test_run_raises_at_end_of_input():
    console, _, _, _ = make_console("")
    with pytest.raises(EndOfInput):
        run(console)


@mock.patch("ptenchik_calc.input_utils.subprocess.run")
def test_main_quits(subprocess_run, monkeypatch):
    out = io.StringIO()
    monkeypatch.setattr(sys, "stdin", io.StringIO("q\n"))
    monkeypatch.setattr(sys, "stdout", out)
    assert main([]) == 0
    assert "[+] Сложение." in out.getvalue()
    subprocess_run.assert_called_once_with(["clear"], check=False)


@mock.patch("ptenchik_calc.input_utils.subprocess.run")
def test_main_handles_end_of_input(subprocess_run, monkeypatch):
    out = io.StringIO()
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    monkeypatch.setattr(sys, "stdout", out)
    assert main([]) == 0
    assert out.getvalue().endswith("\n")