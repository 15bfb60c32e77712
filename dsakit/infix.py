"""Conversion of infix expressions to postfix notation."""

from __future__ import annotations

_PRIORITIES = {"(": 0, "+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


def priority(operator: str) -> int:
    """Return the binding strength of an operator; ``(`` binds weakest."""
    try:
        return _PRIORITIES[operator]
    except KeyError:
        raise ValueError(f"unknown operator: {operator!r}") from None


def infix_to_postfix(expression: str) -> str:
    """Convert a single-character-operand infix expression to space-separated postfix.

    All operators are treated as left-associative.
    """
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if char.isspace():
            continue
        if char.isascii() and char.isalnum():
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while True:
                if not stack:
                    raise ValueError("unmatched ')'")
                top = stack.pop()
                if top == "(":
                    break
                output.append(top)
        else:
            rank = priority(char)
            while stack and priority(stack[-1]) >= rank:
                output.append(stack.pop())
            stack.append(char)
    while stack:
        top = stack.pop()
        if top == "(":
            raise ValueError("unmatched '('")
        output.append(top)
    return " ".join(output)