from .errors import (
    CalculatorError, GrammarMismatch, InvalidLiteral, EvaluationError, NestingTooDeep,
    DivisionByZero, ArithmeticOverflow, StreamReadFailure, RuleShapeError,
)
from .expression import Operator, Expression, Integer, UnaryMinus, BinaryOp
from .grammar import GrammarMatcher, calc_grammar
from .pratt import PrattParser, Assoc, infix, prefix, ExpressionBuilder, build_expression
from .evaluator import evaluate
from .calculator import Calculator, calc

__version__ = "0.1.0"
