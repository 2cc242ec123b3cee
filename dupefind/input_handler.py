"""Prompting helpers for reading answers from standard input."""

from __future__ import annotations

import re
import sys

_WHITESPACE = " \t\r\n"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_YES = frozenset({"y", "yes", "1", "true"})
_NO = frozenset({"n", "no", "0", "false"})


def get_user_input(prompt: str = "") -> str:
    """Show ``prompt`` and return the next input line, trimmed.

    Raises EOFError when standard input is exhausted.
    """
    if prompt:
        sys.stdout.write(prompt)
        sys.stdout.flush()
    line = sys.stdin.readline()
    if not line:
        raise EOFError("no more input")
    return line.strip(_WHITESPACE)


def get_user_choice_range(
    prompt: str,
    min_choice: int,
    max_choice: int,
    use_default_value: bool = False,
    default_value: int = -1,
) -> int:
    """Ask until the answer starts with an integer within the given bounds.

    An empty answer yields ``default_value`` when ``use_default_value`` is set.
    """
    while True:
        answer = get_user_input(prompt)
        if use_default_value and not answer:
            return default_value
        match = _LEADING_INT.match(answer)
        if match:
            choice = int(match.group(1))
            if min_choice <= choice <= max_choice:
                return choice
        sys.stdout.write(f"Please enter a number between {min_choice} and {max_choice}: ")
        sys.stdout.flush()


def get_user_confirmation(prompt: str, default_value: bool = True) -> bool:
    """Ask a yes/no question; an empty answer yields ``default_value``."""
    while True:
        answer = get_user_input(prompt)
        if not answer:
            return default_value
        answer = answer.lower()
        if answer in _YES:
            return True
        if answer in _NO:
            return False
        sys.stdout.write("Invalid input. Please enter 'y' for yes or 'n' for no: \n")
        sys.stdout.flush()
        prompt = ""