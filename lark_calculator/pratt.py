"""
Precedence climbing
===================

The grammar leaves every ``expr`` as a flat run of atoms and operators:

    expr: _atom (_bin_op _atom)*

``PrattParser`` folds such a run into a tree using a precedence table. The
table is built one level at a time, lowest binding power first, so the
operators and their associativity can change without touching the grammar:

    PrattParser()
        .op(infix('add', Assoc.LEFT), infix('subtract', Assoc.LEFT))
        .op(prefix('unary_minus'))

``ExpressionBuilder`` is the ``lark`` transformer that drives it over a
matched tree and produces ``Expression`` nodes.
"""
from enum import Enum
from typing import Callable, NamedTuple, Optional, Sequence

from lark import Tree
from lark.visitors import Transformer_NonRecursive
from lark.exceptions import VisitError

from .errors import InvalidLiteral, RuleShapeError
from .expression import INT32_MAX, Operator, Expression, Integer, UnaryMinus, BinaryOp


class Assoc(Enum):
    LEFT = 'left'
    RIGHT = 'right'


class Op(NamedTuple):
    rule: str
    assoc: Optional[Assoc]
    is_prefix: bool


def infix(rule: str, assoc: Assoc) -> Op:
    return Op(rule, assoc, False)


def prefix(rule: str) -> Op:
    return Op(rule, None, True)


def rule_name(item) -> Optional[str]:
    "Rule name of a tree node, or None for anything else (tokens, built values)"
    if isinstance(item, Tree):
        return item.data
    return None


class _Cursor:
    def __init__(self, items: Sequence):
        self.items = items
        self.pos = 0

    def peek(self):
        return self.items[self.pos] if self.pos < len(self.items) else None

    def at_end(self) -> bool:
        return self.pos >= len(self.items)

    def next(self):
        if self.at_end():
            raise RuleShapeError("expression ended where an operand was required")
        item = self.items[self.pos]
        self.pos += 1
        return item


class PrattParser:
    """Operator precedence table plus the precedence climbing loop."""

    def __init__(self):
        self._infix = {}
        self._prefix = {}
        self._levels = 0

    def op(self, *ops: Op) -> 'PrattParser':
        "Add a precedence level binding tighter than every level added before it"
        self._levels += 1
        for op in ops:
            if op.is_prefix:
                self._prefix[op.rule] = self._levels
            else:
                self._infix[op.rule] = (self._levels, op.assoc)
        return self

    def parse(self, items: Sequence, primary: Callable, infix: Callable, prefix: Callable):
        """Fold ``items`` into a single value.

        ``primary(item)`` maps an operand, ``infix(lhs, op, rhs)`` combines two
        values and ``prefix(op, operand)`` applies a prefix operator. ``op`` is
        always the raw item taken from ``items``.
        """
        cursor = _Cursor(items)
        result = self._expression(cursor, 0, primary, infix, prefix)
        if not cursor.at_end():
            raise RuleShapeError("unexpected %r after a complete expression" % (cursor.peek(),))
        return result

    def _expression(self, cursor, min_power, primary, infix, prefix):
        item = cursor.next()
        rule = rule_name(item)
        if rule in self._prefix:
            operand = self._expression(cursor, self._prefix[rule], primary, infix, prefix)
            lhs = prefix(item, operand)
        elif rule in self._infix:
            raise RuleShapeError("infix operator %r where an operand was required" % rule)
        else:
            lhs = primary(item)

        while not cursor.at_end():
            op = cursor.peek()
            try:
                power, assoc = self._infix[rule_name(op)]
            except KeyError:
                raise RuleShapeError("expected an infix operator, found %r" % (op,))

            if power <= min_power:
                break
            cursor.next()

            next_power = power if assoc is Assoc.LEFT else power - 1
            rhs = self._expression(cursor, next_power, primary, infix, prefix)
            lhs = infix(lhs, op, rhs)

        return lhs


operator_parser = (
    PrattParser()
    # Lowest to highest
    .op(infix('add', Assoc.LEFT), infix('subtract', Assoc.LEFT))
    .op(infix('multiply', Assoc.LEFT), infix('divide', Assoc.LEFT), infix('modulo', Assoc.LEFT))
    .op(prefix('unary_minus'))
)

OPERATORS = {
    'add': Operator.ADD,
    'subtract': Operator.SUBTRACT,
    'multiply': Operator.MULTIPLY,
    'divide': Operator.DIVIDE,
    'modulo': Operator.MODULO,
}


def parse_integer(digits: str) -> Integer:
    # Checking the digit count first keeps int() away from absurdly long input
    if len(digits.lstrip('0')) > len(str(INT32_MAX)):
        raise InvalidLiteral(digits)
    value = int(digits)
    if value > INT32_MAX:
        raise InvalidLiteral(digits)
    return Integer(value)


class ExpressionBuilder(Transformer_NonRecursive):
    """Builds an ``Expression`` from the tree matched by ``GrammarMatcher``.

    The tree is walked bottom-up without recursion, so nesting depth is not
    bounded by the interpreter stack. A parenthesised ``expr`` has already been
    reduced to an ``Expression`` by the time its parent is handled.
    """

    def __init__(self, parser: PrattParser = operator_parser):
        super().__init__()
        self.parser = parser

    def expr(self, children) -> Expression:
        return self.parser.parse(children, self._primary, self._infix, self._prefix)

    def _primary(self, item) -> Expression:
        if isinstance(item, (Integer, UnaryMinus, BinaryOp)):
            return item
        if getattr(item, 'type', None) == 'INTEGER':
            return parse_integer(item.value)
        raise RuleShapeError("expected an atom, found %r" % (item,))

    def _infix(self, lhs: Expression, op: Tree, rhs: Expression) -> Expression:
        try:
            operator = OPERATORS[op.data]
        except KeyError:
            raise RuleShapeError("expected an infix operation, found %r" % op.data)
        return BinaryOp(lhs, operator, rhs)

    def _prefix(self, op: Tree, operand: Expression) -> Expression:
        if op.data != 'unary_minus':
            raise RuleShapeError("expected a prefix operation, found %r" % op.data)
        return UnaryMinus(operand)


def build_expression(tree: Tree, builder: Optional[ExpressionBuilder] = None) -> Expression:
    """Reduce a matched ``expr`` tree to an ``Expression``.

    Errors raised by the builder come out as themselves rather than wrapped
    in Lark's ``VisitError``.
    """
    if builder is None:
        builder = ExpressionBuilder()
    try:
        return builder.transform(tree)
    except VisitError as e:
        raise e.orig_exc from None
