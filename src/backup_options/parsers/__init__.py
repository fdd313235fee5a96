"""Literal parsers for option values.

Exports the boolean, size, and time-interval parsers together with the
error types they raise.
"""
from __future__ import annotations

from backup_options.parsers.boolean import FALSY_LITERALS, get_bool, parse_bool
from backup_options.parsers.errors import OptionErrorCollection, OptionParseError
from backup_options.parsers.size import MAX_SIZE, SIZE_UNITS, parse_size
from backup_options.parsers.timeinterval import (
    TIME_UNITS,
    TimeExpression,
    TimeOffset,
    parse_time_expression,
    parse_time_interval,
)

__all__ = [
    "FALSY_LITERALS",
    "get_bool",
    "parse_bool",
    "OptionErrorCollection",
    "OptionParseError",
    "MAX_SIZE",
    "SIZE_UNITS",
    "parse_size",
    "TIME_UNITS",
    "TimeExpression",
    "TimeOffset",
    "parse_time_expression",
    "parse_time_interval",
]
