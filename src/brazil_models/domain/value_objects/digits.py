"""Digit normalization and mask handling shared by every document type.

Normalization turns arbitrary user input into the canonical digit string:
non-digits are dropped and the result is left-padded with zeros up to the
document width. Masks are display templates where ``#`` marks a digit slot.
"""
from __future__ import annotations

import re

PLACEHOLDER = "#"

_NON_DIGITS = re.compile(r"[^0-9]+")


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def remove_non_digits(value: str) -> str:
    """Keeps only ASCII digits, in their original order."""
    return _NON_DIGITS.sub("", value or "")


def pad_left_with_zeros(digits: str, width: int) -> str:
    # longer inputs are kept as-is, width checks belong to the callers
    if len(digits) >= width:
        return digits
    return digits.rjust(width, "0")


def normalize(value: str | None, width: int) -> str:
    """Returns the zero-padded digit string, or ``""`` for blank input.

    >>> normalize("1.123.456/0001-01", 14)
    '01123456000101'
    >>> normalize("   ", 11)
    ''
    """
    if is_blank(value):
        return ""
    return pad_left_with_zeros(remove_non_digits(value), width)


def apply_mask(digits: str, mask: str, placeholder: str = PLACEHOLDER) -> str:
    """Fills the mask placeholders, in order, with the given digits.

    Callers must pass at least as many digits as the mask has placeholders;
    otherwise the remaining placeholders are left in the output untouched.
    """
    result = []
    remaining = iter(digits)
    for char in mask:
        if char == placeholder:
            result.append(next(remaining, placeholder))
        else:
            result.append(char)
    return "".join(result)


remove_mask = remove_non_digits


def format_digits(value: str | None, width: int, mask: str | None = None) -> str:
    """Normalizes ``value`` and optionally masks it.

    Blank input and input with more than ``width`` digits give ``""``.
    """
    normalized = normalize(value, width)
    if not normalized or len(normalized) > width:
        return ""
    if mask is None:
        return normalized
    return apply_mask(normalized, mask)
