"""Evaluates expression trees with signed 32-bit integer semantics.

Python integers never overflow, so every intermediate result is checked
against the 32-bit range and reported instead of wrapping around.
"""
from .errors import DivisionByZero, ArithmeticOverflow
from .expression import INT32_MIN, INT32_MAX, Operator, Expression, Integer, UnaryMinus, BinaryOp


def _checked(value: int, operation: str, expression: Expression) -> int:
    if not INT32_MIN <= value <= INT32_MAX:
        raise ArithmeticOverflow(operation, expression)
    return value


def truncating_divmod(a: int, b: int):
    """Division rounding toward zero, and the remainder that goes with it.

    The remainder takes the sign of the dividend, so ``q * b + r == a``.
    """
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


def _apply(operator: Operator, left: int, right: int, expression: BinaryOp) -> int:
    if operator is Operator.ADD:
        result = left + right
    elif operator is Operator.SUBTRACT:
        result = left - right
    elif operator is Operator.MULTIPLY:
        result = left * right
    elif operator in (Operator.DIVIDE, Operator.MODULO):
        if right == 0:
            raise DivisionByZero(operator, expression.right, expression)
        quotient, remainder = truncating_divmod(left, right)
        # INT32_MIN / -1 is the one quotient that does not fit. Its remainder
        # is 0, but the operation still overflows in 32-bit arithmetic.
        _checked(quotient, operator.verb, expression)
        result = quotient if operator is Operator.DIVIDE else remainder
    else:
        raise AssertionError("unknown operator: %r" % (operator,))

    return _checked(result, operator.verb, expression)


def evaluate(expression: Expression) -> int:
    """Post-order walk with an explicit stack, so depth is not bounded by
    Python's recursion limit.
    """
    values = []
    stack = [(expression, False)]
    while stack:
        node, operands_done = stack.pop()
        if isinstance(node, Integer):
            values.append(node.value)
        elif isinstance(node, UnaryMinus):
            if operands_done:
                values.append(_checked(-values.pop(), 'negate', node))
            else:
                stack.append((node, True))
                stack.append((node.operand, False))
        elif isinstance(node, BinaryOp):
            if operands_done:
                right = values.pop()
                left = values.pop()
                values.append(_apply(node.operator, left, right, node))
            else:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
        else:
            raise TypeError("not an expression: %r" % (node,))

    return values.pop()
