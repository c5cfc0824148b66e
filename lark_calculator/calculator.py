"""
Calculator
==========

Glues the three stages together: the grammar matcher, the expression builder
and the evaluator. Each call handles one line and keeps nothing afterwards.
"""
import logging
from typing import Optional

from .errors import NestingTooDeep
from .evaluator import evaluate
from .expression import Expression
from .grammar import GrammarMatcher
from .pratt import ExpressionBuilder, build_expression

logger = logging.getLogger(__name__)


class Calculator:

    def __init__(self, matcher: Optional[GrammarMatcher] = None, builder: Optional[ExpressionBuilder] = None):
        self.matcher = matcher if matcher is not None else GrammarMatcher()
        self.builder = builder if builder is not None else ExpressionBuilder()

    def parse(self, line: str) -> Expression:
        tree = self.matcher.match(line)
        expression = build_expression(tree, self.builder)
        logger.debug("Parsed %r as %s", line, expression)
        return expression

    def calc(self, line: str) -> int:
        try:
            return evaluate(self.parse(line))
        except RecursionError:
            # Only reachable with a precedence table that recurses per operand,
            # such as a long chain of right-associative operators
            raise NestingTooDeep() from None


calc = Calculator().calc
