# ptenchik_calc

An interactive terminal calculator. It has a menu for adding, subtracting,
multiplying and dividing two numbers, and it asks a yes/no question before
each step. The prompts are in Russian.

## Installation

```
pip install .
```

## Usage

Start the calculator:

```
ptenchik-calc
```

The screen is cleared with the system `clear` command. The calculator reads
the first non-blank character of each line in the main menu:

| Key       | Action         |
|-----------|----------------|
| `+`       | Addition       |
| `-`       | Subtraction    |
| `*`       | Multiplication |
| `/`       | Division       |
| `q` / `Q` | Exit           |

Any other key redraws the menu with an "unknown operator" error.

After you choose an operation, enter two numbers separated by a comma and/or
spaces, for example `2.25, 2`. Any text after the second number is ignored.
The calculator rejects malformed input and asks for it again. It refuses a zero
divisor for division. It then shows the operation with both numbers to two
decimal places and asks you to confirm it with `y` or `n`:

- `y`: the result is printed to two decimal places, computed in single
  precision. Type `q` to return to the menu.
- `n`: the calculator asks whether to start the operation again. Answer `y` to
  enter new numbers. Any other answer cancels and returns to the menu after a
  two-second pause.

Any other answer repeats the question.

The program exits when input ends or on Ctrl-C.

## Using it from Python

The menu loop `ptenchik_calc.calculator.run` and the operation dialogues in
`ptenchik_calc.math_func` (`fold`, `subtract`, `multiply`, `divide`,
`run_operation`) take a `Console` from `ptenchik_calc.input_utils`. A
`Console` is backed by any input and output text streams. You also give it a
screen-clearing function and a sleep function, so a session can be scripted.
Reading past the end of the input raises `EndOfInput`.

```python
import io
from ptenchik_calc.input_utils import Console
from ptenchik_calc.calculator import run

out = io.StringIO()
console = Console(io.StringIO("+\n2.25, 2\ny\nq\nq\n"), out, lambda: None, lambda s: None)
run(console)
print(out.getvalue())
```

You can also use the arithmetic on its own:

```python
from ptenchik_calc.math_func import Operation, parse_operands, format_number

a, b = parse_operands("7, 2")
print(format_number(Operation.DIVIDE.apply(a, b)))  # 3.50
```

`parse_operands` raises `OperandError`, a subclass of `ValueError`, when the
text does not start with two numbers.

## Running the tests

```
pip install .[test]
pytest
```