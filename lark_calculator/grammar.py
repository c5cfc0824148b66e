"""
Equation grammar
================

Matches a single line against the equation grammar and returns the raw
``lark.Tree``. No precedence is resolved here: an ``expr`` node holds its
atoms and operators as one flat sequence, and parenthesised groups show up as
nested ``expr`` nodes. See ``lark_calculator.pratt`` for the next stage.

By default lexing and LALR parsing go through the ``lark_cython`` plugin.
"""
import logging

from lark import Lark, Tree
from lark.exceptions import UnexpectedInput, UnexpectedCharacters, UnexpectedToken
from lark.lexer import PatternStr
import lark_cython

from .errors import GrammarMismatch

logger = logging.getLogger(__name__)


calc_grammar = """
    ?equation: expr

    expr: _atom (_bin_op _atom)*

    _atom: unary_minus? (INTEGER | "(" expr ")")

    _bin_op: add | subtract | multiply | divide | modulo

    add: "+"
    subtract: "-"
    multiply: "*"
    divide: "/"
    modulo: "%"
    unary_minus: "-"

    INTEGER: DIGIT+
    SPACE: " "

    %import common.DIGIT
    %ignore SPACE
"""


class GrammarMatcher:
    """Turns one line of text into a tree of grammar rule matches.

    ``use_cython`` picks the backend: the ``lark_cython`` plugin, or Lark's
    own pure Python LALR implementation. Both build the same trees.
    """

    def __init__(self, use_cython: bool = True):
        self.use_cython = use_cython
        options = {}
        if use_cython:
            options['_plugins'] = lark_cython.plugins
        self.parser = Lark(calc_grammar, parser='lalr', start='equation', **options)

    def match(self, line: str) -> Tree:
        """Match ``line`` in its entirety, or raise ``GrammarMismatch``."""
        try:
            tree = self.parser.parse(line)
        except UnexpectedInput as e:
            logger.debug("Line %r does not match the grammar:\n%s", line, e)
            raise self._mismatch(line, e) from e

        logger.debug("Matched %r as %s", line, tree)
        return tree

    def describe_terminal(self, name: str) -> str:
        if name == '$END':
            return 'end of input'
        pattern = self.parser.get_terminal(name).pattern
        if isinstance(pattern, PatternStr):
            return repr(pattern.value)
        return name.lower()

    def _expected(self, names) -> list:
        ignored = set(self.parser.ignore_tokens)
        return sorted({self.describe_terminal(name) for name in names or () if name not in ignored})

    def _mismatch(self, line: str, e: UnexpectedInput) -> GrammarMismatch:
        end_column = len(line) + 1

        if isinstance(e, UnexpectedCharacters):
            return GrammarMismatch("character %r" % e.char, e.column, self._expected(e.allowed))

        if isinstance(e, UnexpectedToken) and e.token.type != '$END':
            return GrammarMismatch(repr(e.token.value), e.column, self._expected(e.expected))

        # End of input was reached too early (UnexpectedEOF, or a $END token)
        return GrammarMismatch('end of input', end_column, self._expected(getattr(e, 'expected', ())))
