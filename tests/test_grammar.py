import pytest
from lark import Tree
import lark_cython

from lark_calculator import GrammarMatcher, GrammarMismatch


cython_matcher = GrammarMatcher()
python_matcher = GrammarMatcher(use_cython=False)

both_backends = pytest.mark.parametrize("matcher", [cython_matcher, python_matcher], ids=["cython", "python"])


def shape(tree):
	"Rule names for subtrees, (type, value) for tokens"
	return [
		(c.data, shape(c)) if isinstance(c, Tree) else (c.type, c.value)
		for c in tree.children
	]


@both_backends
def test_flat_expr(matcher):
	res = matcher.match("1+2*3")
	assert isinstance(res, Tree)
	assert res.data == 'expr'
	assert shape(res) == [
		('INTEGER', '1'), ('add', []), ('INTEGER', '2'), ('multiply', []), ('INTEGER', '3'),
	]

@both_backends
def test_nested_parentheses(matcher):
	res = matcher.match("-(1 - 2)%3")
	assert shape(res) == [
		('unary_minus', []),
		('expr', [('INTEGER', '1'), ('subtract', []), ('INTEGER', '2')]),
		('modulo', []),
		('INTEGER', '3'),
	]

@both_backends
def test_minus_after_operator_is_unary(matcher):
	res = matcher.match("4/-2")
	assert shape(res) == [('INTEGER', '4'), ('divide', []), ('unary_minus', []), ('INTEGER', '2')]

def test_cython_tokens():
	res = cython_matcher.match("12 + 34")
	tokens = [c for c in res.children if not isinstance(c, Tree)]
	assert all(isinstance(t, lark_cython.Token) for t in tokens)
	assert [t.value for t in tokens] == ['12', '34']

@both_backends
def test_unexpected_character(matcher):
	with pytest.raises(GrammarMismatch) as excinfo:
		matcher.match("12a")
	e = excinfo.value
	assert "'a'" in e.found
	assert e.column == 3

@both_backends
def test_tab_is_not_whitespace(matcher):
	with pytest.raises(GrammarMismatch) as excinfo:
		matcher.match("1\t+2")
	assert excinfo.value.column == 2
	assert "\\t" in excinfo.value.found

@both_backends
def test_unexpected_operator(matcher):
	with pytest.raises(GrammarMismatch) as excinfo:
		matcher.match("1+*2")
	e = excinfo.value
	assert "'*'" in e.found
	assert e.column == 3
	assert 'integer' in e.expected

@both_backends
@pytest.mark.parametrize("line, column", [("", 1), (" ", 2), ("1+", 3), ("(1+2", 5)])
def test_early_end_of_input(matcher, line, column):
	with pytest.raises(GrammarMismatch) as excinfo:
		matcher.match(line)
	e = excinfo.value
	assert e.found == 'end of input'
	assert e.column == column
	assert str(e).startswith("unexpected end of input at column %d" % column)

def test_missing_close_paren_is_expected():
	with pytest.raises(GrammarMismatch) as excinfo:
		python_matcher.match("(1+2")
	assert "')'" in excinfo.value.expected

def test_describe_terminal():
	assert python_matcher.describe_terminal('INTEGER') == 'integer'
	assert python_matcher.describe_terminal('$END') == 'end of input'
