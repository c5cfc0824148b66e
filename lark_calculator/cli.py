"""
Line calculator
===============

Reads equations from standard input, one per line, and prints
``Result: <n>`` for each one that evaluates, or ``Parse failed: <reason>``
on standard error for each one that doesn't. A bad line never stops the
loop; only a failure to read the input does.
"""
import io
import logging
import sys
from typing import Optional

from .calculator import Calculator
from .errors import CalculatorError, StreamReadFailure

logger = logging.getLogger(__name__)


def chomp(line: str) -> str:
    "Remove a trailing \\n or \\r\\n"
    if line.endswith('\n'):
        line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
    return line


def read_lines(stream):
    while True:
        try:
            line = stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise StreamReadFailure(e) from e
        if not line:
            return
        yield chomp(line)


def process_line(calculator: Calculator, line: str, stdout, stderr) -> bool:
    try:
        result = calculator.calc(line)
    except CalculatorError as e:
        logger.debug("Rejected %r: %s", line, type(e).__name__)
        print("Parse failed: %s" % e, file=stderr)
        return False

    print("Result: %d" % result, file=stdout)
    return True


def run(stdin, stdout, stderr, calculator: Optional[Calculator] = None) -> int:
    """Process every line of ``stdin``. Returns the exit status."""
    if calculator is None:
        calculator = Calculator()

    try:
        for line in read_lines(stdin):
            process_line(calculator, line, stdout, stderr)
    except StreamReadFailure as e:
        print("Error: %s" % e, file=stderr)
        return 1
    return 0


def main():
    stdin = io.TextIOWrapper(sys.stdin.buffer, encoding='utf-8', newline='')
    try:
        status = run(stdin, sys.stdout, sys.stderr)
    except KeyboardInterrupt:
        status = 0
    sys.exit(status)


if __name__ == '__main__':
    main()
