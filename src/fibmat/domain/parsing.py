"""Index parsing for text input.

Only plain decimal integers with an optional leading minus are accepted.
Whitespace, ``+`` signs, decimals and non-ASCII digits are rejected.
"""

from __future__ import annotations

import re

INTEGER_PATTERN = re.compile(r"-?\d+", re.ASCII)


class ParseError(ValueError):
    """Input text is not an integer."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Not an integer: {text!r}")
        self.text = text


def is_integer(text: str) -> bool:
    return INTEGER_PATTERN.fullmatch(text) is not None


def parse_index(text: str) -> int:
    """Parse *text* as a Fibonacci index.

    Raises:
        ParseError: *text* does not match ``^-?\\d+$``.
        ValueError: *text* is an integer longer than the interpreter's
            int/str digit limit.
    """
    if not is_integer(text):
        raise ParseError(text)
    return int(text)


def ordinal_phrase(text: str) -> str:
    """Prefix the shell prints before a result, echoing *text* as typed."""
    return f"The {text}th Fibonnaci number is: "
