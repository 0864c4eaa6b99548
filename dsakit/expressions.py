"""Infix-to-postfix conversion and postfix evaluation."""

from __future__ import annotations

import operator
from collections.abc import Callable

_PRECEDENCE = {"(": 0, "+": 1, "-": 1, "*": 2, "/": 2}


def precedence(op: str) -> int:
    """Return the binding strength of ``op``; unknown operators and '(' bind weakest."""
    return _PRECEDENCE.get(op, 0)


def _is_operand(char: str) -> bool:
    return char.isascii() and char.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Tokens in the result are separated by single spaces; whitespace in the
    input is ignored. Mismatched parentheses raise ValueError.
    """
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if char.isspace():
            continue
        if _is_operand(char):
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while True:
                if not stack:
                    raise ValueError("unmatched ')' in expression")
                top = stack.pop()
                if top == "(":
                    break
                output.append(top)
        else:
            while stack and stack[-1] != "(" and precedence(stack[-1]) >= precedence(char):
                output.append(stack.pop())
            stack.append(char)
    while stack:
        top = stack.pop()
        if top == "(":
            raise ValueError("unmatched '(' in expression")
        output.append(top)
    return " ".join(output)


def _truncating_div(left: int, right: int) -> int:
    if right == 0:
        raise ZeroDivisionError("division by zero in expression")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands and + - * /.

    Division truncates toward zero. Whitespace is ignored.
    """
    stack: list[int] = []
    for char in expression:
        if char.isspace():
            continue
        if char.isascii() and char.isdigit():
            stack.append(int(char))
        elif char in _OPERATIONS:
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(_OPERATIONS[char](left, right))
        else:
            raise ValueError(f"unexpected character {char!r} in expression")
    if len(stack) != 1:
        raise ValueError("expression does not reduce to a single value")
    return stack[0]