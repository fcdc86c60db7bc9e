"""Conversion of regular expressions from infix to postfix notation."""

from __future__ import annotations

from itertools import zip_longest

_PRECEDENCE = {"(": 1, "|": 2, ".": 3, "?": 4, "*": 4, "+": 4}
_OPERAND_PRECEDENCE = max(_PRECEDENCE.values()) + 1


def _is_operand_char(char: str) -> bool:
    return char.isalpha() or char.isdecimal()


def _needs_concat(left: str, right: str) -> bool:
    """Tell whether an implicit concatenation sits between two characters."""
    opens_operand = _is_operand_char(right) or right == "("
    if _is_operand_char(left):
        return opens_operand
    if left == ")":
        return opens_operand
    if left in ("*", "+"):
        return opens_operand
    return False


def _precedence(char: str) -> int:
    return _PRECEDENCE.get(char, _OPERAND_PRECEDENCE)


def insert_concat_operators(infix: str) -> str:
    """Make implicit concatenation explicit with the '.' operator."""
    out: list[str] = []
    for current, following in zip_longest(infix, infix[1:]):
        out.append(current)
        if following is not None and _needs_concat(current, following):
            out.append(".")
    return "".join(out)


def infix_to_postfix(infix: str) -> str:
    """Convert an infix regular expression to postfix notation."""
    postfix: list[str] = []
    stack: list[str] = []

    for char in insert_concat_operators(infix):
        if char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                postfix.append(stack.pop())
            if stack:
                stack.pop()
        else:
            rank = _precedence(char)
            while stack and _precedence(stack[-1]) >= rank:
                postfix.append(stack.pop())
            stack.append(char)

    postfix.extend(reversed(stack))
    return "".join(postfix)