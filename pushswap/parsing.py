"""Validation and parsing of the integers handed to the sorter."""

from collections.abc import Iterable, Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """Raised when an argument is not a valid, unique 32-bit integer."""


def is_valid_int(token: str) -> bool:
    """Return True if ``token`` is an optionally signed decimal 32-bit integer."""
    body = token[1:] if token[:1] in ("-", "+") else token
    if not body or any(ch not in _DIGITS for ch in body):
        return False
    return INT_MIN <= int(token) <= INT_MAX


def parse_argument(arg: str, existing: Iterable[int]) -> list[int]:
    """Parse one space-separated argument into integers.

    Raises InputError on a malformed number or on a value already seen,
    either in ``existing`` or earlier in the same argument.
    """
    seen = set(existing)
    values: list[int] = []
    for token in arg.split(" "):
        if not token:
            continue
        if not is_valid_int(token):
            raise InputError(f"not a valid integer: {token!r}")
        number = int(token)
        if number in seen:
            raise InputError(f"duplicate value: {number}")
        seen.add(number)
        values.append(number)
    return values


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Parse every argument in order into one list of unique integers."""
    values: list[int] = []
    for arg in args:
        values.extend(parse_argument(arg, values))
    return values


def is_sorted(values: Sequence[int]) -> bool:
    """Return True if ``values`` is in non-decreasing order."""
    return all(left <= right for left, right in zip(values, values[1:]))