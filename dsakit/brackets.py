"""Checking that brackets in a string are balanced."""

from __future__ import annotations

_PAIRS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = frozenset(_PAIRS.values())


def is_matching_pair(opening: str, closing: str) -> bool:
    """Return whether ``closing`` closes ``opening``."""
    return _PAIRS.get(opening) == closing


def is_balanced(text: str) -> bool:
    """Return whether every bracket in ``text`` is closed in the right order.

    Characters other than ``()[]{}`` are ignored.
    """
    stack: list[str] = []
    for char in text:
        if char in _PAIRS:
            stack.append(char)
        elif char in _CLOSERS:
            if not stack or not is_matching_pair(stack.pop(), char):
                return False
    return not stack