"""Reading the initial contents of stack ``a`` from command-line words."""

from __future__ import annotations

from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """Raised when the input cannot form a valid stack."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def split_words(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    return [word for word in text.split(separator) if word]


def is_valid_number(token: str) -> bool:
    """Tell whether ``token`` is an optional sign followed by decimal digits."""
    body = token[1:] if token[:1] in ("+", "-") else token
    return bool(body) and all(ch in _DIGITS for ch in body)


def parse_number(token: str) -> int:
    """Convert a token to a 32-bit signed integer, raising InputError if invalid."""
    if not is_valid_number(token):
        raise InputError()
    value = int(token)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError()
    return value


def parse_stack(tokens: Iterable[str]) -> list[int]:
    """Parse tokens into distinct integers, in order; raise InputError otherwise."""
    values: list[int] = []
    seen: set[int] = set()
    for token in tokens:
        value = parse_number(token)
        if value in seen:
            raise InputError()
        seen.add(value)
        values.append(value)
    return values