"""Byte-size literals such as ``5mb``, ``2GB`` or ``1.5 tb``.

Units are binary multiples and case-insensitive.  A literal without a
suffix is read in the caller's default unit, so ``volsize=5`` means five
megabytes while ``totalsize=5`` means five bytes.
"""
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Final

from backup_options.parsers.errors import OptionParseError

SIZE_UNITS: Final[dict[str, int]] = {
    "b": 1,
    "kb": 1024,
    "mb": 1024**2,
    "gb": 1024**3,
    "tb": 1024**4,
}

# Largest value a signed 64-bit size field can hold; stands for "no limit".
MAX_SIZE: Final[int] = 2**63 - 1

_MAGNITUDE: Final[re.Pattern[str]] = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")


def parse_size(text: str, default_unit: str = "b") -> int:
    """Convert a size literal to a byte count.

    Parameters
    ----------
    text:
        A non-negative magnitude optionally followed by one of
        ``b``, ``kb``, ``mb``, ``gb``, ``tb``.
    default_unit:
        Unit applied when ``text`` carries no suffix.

    Returns
    -------
    int
        The size in bytes.  Fractional byte counts are truncated.

    Raises
    ------
    OptionParseError
        If the magnitude is missing or negative, a suffix is not
        recognised, or the result is larger than ``MAX_SIZE``.
    """
    unit_key = default_unit.strip().lower()
    if unit_key not in SIZE_UNITS:
        raise OptionParseError(
            f"unknown default size unit; expected one of {', '.join(SIZE_UNITS)}",
            default_unit,
        )

    lead = len(text) - len(text.lstrip())
    stripped = text.strip()
    if not stripped:
        raise OptionParseError("size literal is empty", text)

    match = _MAGNITUDE.match(stripped)
    if match is None:
        raise OptionParseError(
            "size must start with a non-negative number", text, position=lead
        )

    rest = stripped[match.end():]
    suffix = rest.strip().lower()
    if suffix:
        if suffix not in SIZE_UNITS:
            raise OptionParseError(
                f"unknown size suffix {suffix!r}; expected one of {', '.join(SIZE_UNITS)}",
                text,
                position=lead + match.end() + (len(rest) - len(rest.lstrip())),
            )
        unit_key = suffix

    try:
        magnitude = Decimal(match.group())
    except InvalidOperation as exc:
        raise OptionParseError("malformed size magnitude", text, position=lead) from exc

    size = int(magnitude * SIZE_UNITS[unit_key])
    if size > MAX_SIZE:
        raise OptionParseError("size exceeds the largest representable value", text)
    return size


__all__ = ["SIZE_UNITS", "MAX_SIZE", "parse_size"]
