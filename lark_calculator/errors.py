"""Errors raised while matching, building and evaluating one input line.

Everything deriving from :class:`CalculatorError` is recoverable: the line
loop reports it and moves on to the next line.
"""


class CalculatorError(Exception):
    """Base class for per-line errors."""


class GrammarMismatch(CalculatorError):
    """The line does not match the equation grammar."""

    def __init__(self, found, column, expected=()):
        self.found = found
        self.column = column
        self.expected = tuple(expected)

        message = "unexpected %s at column %s" % (found, column)
        if self.expected:
            message += ", expected %s" % " or ".join(self.expected)
        super().__init__(message)


class InvalidLiteral(CalculatorError):
    """An integer literal that does not fit in a signed 32-bit integer."""

    def __init__(self, literal):
        self.literal = literal
        super().__init__("integer literal %s is out of range for a signed 32-bit integer" % literal)


class EvaluationError(CalculatorError):
    pass


class DivisionByZero(EvaluationError):

    def __init__(self, operator, operand, expression):
        self.operator = operator
        self.operand = operand
        self.expression = expression
        super().__init__("%s by zero: divisor %s in %s" % (operator.noun, operand, expression))


class ArithmeticOverflow(EvaluationError):

    def __init__(self, operation, expression):
        self.operation = operation
        self.expression = expression
        super().__init__("attempt to %s with overflow in %s" % (operation, expression))


class StreamReadFailure(Exception):
    """Reading the input stream failed. Not recoverable."""

    def __init__(self, cause):
        self.cause = cause
        super().__init__(str(cause))


class RuleShapeError(RuntimeError):
    """The grammar produced a tree the expression builder cannot handle.

    This is a bug in the grammar, never a problem with the user's input.
    """


class NestingTooDeep(CalculatorError):
    """The expression is nested deeper than the interpreter can follow."""

    def __init__(self):
        super().__init__("expression nested too deeply")
