import pytest

from dsakit.expressions import evaluate_postfix, infix_to_postfix, precedence


@pytest.mark.parametrize(
    "op, expected",
    [("+", 1), ("-", 1), ("*", 2), ("/", 2), ("(", 0), ("^", 0)],
)
def test_precedence(op, expected):
    assert precedence(op) == expected


def test_multiplication_binds_tighter():
    assert infix_to_postfix("a+b*c") == "a b c * +"


def test_parentheses_override_precedence():
    assert infix_to_postfix("(a+b)*c") == "a b + c *"


def test_operands_keep_their_order():
    expression = "(x+y)*z-w/v"
    result = infix_to_postfix(expression)
    operands = [c for c in result.split() if c.isalnum()]
    assert operands == [c for c in expression if c.isalnum()]


def test_whitespace_is_ignored():
    assert infix_to_postfix("a + b * c") == infix_to_postfix("a+b*c")


@pytest.mark.parametrize(
    "infix, value",
    [
        ("1+2*3", 1 + 2 * 3),
        ("(1+2)*3", (1 + 2) * 3),
        ("9-4-3", 9 - 4 - 3),
        ("8/2/2", 8 // 2 // 2),
        ("(7-2)*(3+4)", (7 - 2) * (3 + 4)),
    ],
)
def test_conversion_then_evaluation(infix, value):
    assert evaluate_postfix(infix_to_postfix(infix)) == value


def test_evaluate_simple():
    assert evaluate_postfix("23+") == 2 + 3


def test_division_truncates_toward_zero():
    assert evaluate_postfix("27-2/") == -2


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("50/")


@pytest.mark.parametrize("expression", ["1+", "12", "a", "", "+"])
def test_malformed_postfix(expression):
    with pytest.raises(ValueError):
        evaluate_postfix(expression)


@pytest.mark.parametrize("expression", ["(a+b", "a+b)", ")"])
def test_mismatched_parentheses(expression):
    with pytest.raises(ValueError):
        infix_to_postfix(expression)