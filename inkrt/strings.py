"""String helpers used when writing values to the output stream."""

from __future__ import annotations

import struct

from .core import InkError


def _float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def to_str(value: int | float | str) -> str:
    """Render a numeric value (or a string) as story output text.

    Floats use seven decimals with trailing zeros and a trailing dot removed.
    """
    if isinstance(value, bool):
        raise InkError("only support toStr for numeric types")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        text = "%.7f" % _float32(value)
        if "." in text:
            text = text.rstrip("0")
            if text.endswith("."):
                text = text[:-1]
        return text
    if isinstance(value, str):
        return value
    raise InkError("only support toStr for numeric types")


def decimal_digits(number: int | float) -> int:
    """Return an upper bound for the length of the number's text form."""
    if isinstance(number, float):
        return decimal_digits(int(number)) + 8
    length = 2 if number < 0 else 1
    magnitude = abs(number) // 10
    while magnitude:
        length += 1
        magnitude //= 10
    return length


def value_length(value: int | float | str) -> int:
    """Return an upper bound for the output length of ``value``."""
    if isinstance(value, bool):
        raise InkError("Can't determine length of this value type")
    if isinstance(value, (int, float)):
        return decimal_digits(value)
    if isinstance(value, str):
        return len(value)
    raise InkError("Can't determine length of this value type")


def str_equal(lh: str, rh: str) -> bool:
    """Compare two strings up to their first NUL character."""
    return lh.split("\0", 1)[0] == rh.split("\0", 1)[0]


def clean_string(text: str, leading_spaces: bool, tailing_spaces: bool) -> str:
    """Collapse redundant spaces and newlines.

    Drops spaces before spaces or newlines, whitespace after a newline and
    repeated newlines; optionally strips leading whitespace and a trailing
    space.
    """
    out: list[str] = []
    n = len(text)
    for i, ch in enumerate(text):
        if i == 0:
            if leading_spaces and ch in " \n":
                continue
        elif text[i - 1] == "\n" and ch in " \n":
            continue
        elif ch == " " and (
            (i + 1 == n and tailing_spaces)
            or (i + 1 < n and text[i + 1] in " \n")
        ):
            continue
        elif ch == "\n" and out and out[-1] == "\n":
            continue
        out.append(ch)
    return "".join(out)