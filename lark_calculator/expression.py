"""
Expression trees
================

The parser builds one tree per input line out of three node types:
``Integer``, ``UnaryMinus`` and ``BinaryOp``. Nodes are immutable and own
their children, so a tree is finite, acyclic and never shared between lines.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


class Operator(Enum):
    ADD = ("+", "addition", "add")
    SUBTRACT = ("-", "subtraction", "subtract")
    MULTIPLY = ("*", "multiplication", "multiply")
    DIVIDE = ("/", "division", "divide")
    MODULO = ("%", "modulo", "calculate the remainder")

    def __init__(self, symbol: str, noun: str, verb: str):
        self.symbol = symbol
        self.noun = noun
        self.verb = verb

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Integer:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UnaryMinus:
    operand: "Expression"

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class BinaryOp:
    left: "Expression"
    operator: Operator
    right: "Expression"

    def __str__(self) -> str:
        return render(self)


Expression = Union[Integer, UnaryMinus, BinaryOp]


def render(expression: Expression) -> str:
    """Fully parenthesised infix form, e.g. ``(1 + (2 * -(3)))``.

    Uses an explicit stack of pending nodes and literal pieces, so deeply
    nested trees render without recursion.
    """
    pieces = []
    stack = [expression]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            pieces.append(item)
        elif isinstance(item, Integer):
            pieces.append(str(item.value))
        elif isinstance(item, UnaryMinus):
            stack += [")", item.operand, "-("]
        elif isinstance(item, BinaryOp):
            stack += [")", item.right, " %s " % item.operator, item.left, "("]
        else:
            raise TypeError("not an expression: %r" % (item,))
    return "".join(pieces)
