"""Permissive boolean parsing for flag-style options.

A flag that is merely present switches the option on; only an explicit
negative literal switches it off.  Anything else, including typos, is
read as ``True``.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Final

FALSY_LITERALS: Final[frozenset[str]] = frozenset({"false", "no", "off"})


def parse_bool(value: str | None) -> bool:
    """Return the boolean a raw flag value stands for.

    Parameters
    ----------
    value:
        The raw value, or ``None`` when the key is absent.

    Returns
    -------
    bool
        ``False`` when absent or one of ``false``/``no``/``off``
        (case-insensitive, surrounding whitespace ignored), ``True``
        otherwise.  Never raises.
    """
    if value is None:
        return False
    normalized = value.strip().lower()
    if not normalized:
        return True
    return normalized not in FALSY_LITERALS


def get_bool(raw: Mapping[str, str], name: str) -> bool:
    """Look ``name`` up in ``raw`` and apply :func:`parse_bool`."""
    return parse_bool(raw.get(name))


__all__ = ["FALSY_LITERALS", "parse_bool", "get_bool"]
