"""Time-interval literals: absolute timestamps and anchor-relative offsets.

Three forms are accepted:

- ``now`` (any case) resolves to the anchor itself.
- One or more offset tokens, each an optional sign, an integer and a
  unit letter, e.g. ``-2M``, ``1Y``, ``+1D12h``.  Tokens are applied to
  the anchor left to right.
- An ISO-8601 timestamp such as ``2024-03-01`` or
  ``2024-03-01T12:30:00+02:00``.  A zone-qualified timestamp resolved
  against a naive anchor is converted to naive local time.

Unit letters:

    ====  ========
    s     seconds
    m     minutes
    h     hours
    D d   days
    W w   weeks
    M     months
    Y y   years
    ====  ========

Only ``m``/``M`` are case-sensitive; every other letter is accepted in
either case.  Months and years use calendar arithmetic, so ``+1M`` from
January 31st lands on the last day of February.

Parsing and evaluation are split: :func:`parse_time_expression` checks a
literal once and returns a :class:`TimeExpression` that can then be
resolved against any number of anchors.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Final

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from backup_options.parsers.errors import OptionParseError

# Canonical unit letter -> relativedelta keyword.
TIME_UNITS: Final[dict[str, str]] = {
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "D": "days",
    "W": "weeks",
    "M": "months",
    "Y": "years",
}

_UNIT_ALIASES: Final[dict[str, str]] = {"d": "D", "w": "W", "y": "Y"}

NOW_KEYWORD: Final[str] = "now"


@dataclass(frozen=True, slots=True)
class TimeOffset:
    """A single signed offset such as ``-2M``.

    Parameters
    ----------
    amount:
        Signed number of units.
    unit:
        Canonical unit letter, one of the keys of ``TIME_UNITS``.
    """

    amount: int
    unit: str

    def __str__(self) -> str:
        return f"{self.amount:+d}{self.unit}"

    @property
    def delta(self) -> relativedelta:
        """The offset as a calendar-aware ``relativedelta``."""
        return relativedelta(**{TIME_UNITS[self.unit]: self.amount})


def _match_awareness(value: datetime, anchor: datetime) -> datetime:
    """Express ``value`` in the same naive/aware convention as ``anchor``.

    A zone-qualified timestamp read against a naive anchor is converted
    to local time and stripped of its zone, matching ``datetime.now()``.
    A naive timestamp read against an aware anchor takes the anchor's zone.
    """
    if anchor.tzinfo is None:
        if value.tzinfo is None:
            return value
        return value.astimezone().replace(tzinfo=None)
    if value.tzinfo is None:
        return value.replace(tzinfo=anchor.tzinfo)
    return value


@dataclass(frozen=True)
class TimeExpression:
    """A parsed time literal, not yet bound to an anchor.

    Exactly one of ``absolute`` and ``offsets`` is meaningful: an
    absolute expression ignores the anchor, a relative one applies its
    offsets to it.  A relative expression with no offsets is ``now``.
    """

    literal: str
    offsets: tuple[TimeOffset, ...] = ()
    absolute: datetime | None = None

    @property
    def is_absolute(self) -> bool:
        return self.absolute is not None

    @property
    def is_now(self) -> bool:
        return self.absolute is None and not self.offsets

    def resolve(self, anchor: datetime) -> datetime:
        """Return the instant this expression denotes relative to ``anchor``.

        An absolute timestamp is returned in the anchor's naive or aware
        form, so results can always be compared with the anchor.

        Raises
        ------
        OptionParseError
            If applying the offsets leaves the supported date range.
        """
        if self.absolute is not None:
            try:
                return _match_awareness(self.absolute, anchor)
            except (OverflowError, ValueError) as exc:
                raise OptionParseError(
                    "timestamp cannot be expressed in the local time zone", self.literal
                ) from exc
        result = anchor
        try:
            for offset in self.offsets:
                result = result + offset.delta
        except (OverflowError, ValueError) as exc:
            raise OptionParseError(
                "offset moves outside the supported date range", self.literal
            ) from exc
        return result


class _OffsetScanner:
    """Single-pass scanner for concatenated offset tokens.

    Parameters
    ----------
    source:
        The stripped literal to scan.
    lead:
        Number of whitespace characters stripped from the front of the
        original literal, so reported positions refer to the original.
    literal:
        The original literal, used in error messages.
    """

    __slots__ = ("_source", "_pos", "_lead", "_literal")

    def __init__(self, source: str, lead: int, literal: str) -> None:
        self._source: str = source
        self._pos: int = 0
        self._lead: int = lead
        self._literal: str = literal

    def scan(self) -> tuple[TimeOffset, ...]:
        """Consume the whole source and return its offsets in order."""
        offsets: list[TimeOffset] = []
        while self._pos < len(self._source):
            offsets.append(self._scan_offset())
        return tuple(offsets)

    def _current(self) -> str:
        return self._source[self._pos] if self._pos < len(self._source) else ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        return ch

    def _error(self, message: str) -> OptionParseError:
        return OptionParseError(message, self._literal, position=self._lead + self._pos)

    def _scan_offset(self) -> TimeOffset:
        sign = 1
        if self._current() in ("+", "-"):
            if self._advance() == "-":
                sign = -1
            if self._current() in ("+", "-"):
                raise self._error("malformed number: repeated sign")

        start = self._pos
        while self._current().isdigit() and self._current().isascii():
            self._advance()
        if self._pos == start:
            raise self._error("expected digits")
        amount = int(self._source[start:self._pos])

        ch = self._current()
        if not ch:
            raise self._error("missing unit letter after number")
        unit = _UNIT_ALIASES.get(ch, ch)
        if unit not in TIME_UNITS:
            raise self._error(
                f"unknown time unit {ch!r}; expected one of s, m, h, D, W, M, Y"
            )
        self._advance()
        return TimeOffset(amount=sign * amount, unit=unit)


def parse_time_expression(text: str) -> TimeExpression:
    """Parse a time literal without binding it to an anchor.

    Raises
    ------
    OptionParseError
        If the literal is empty, contains an unknown unit letter or a
        malformed number, or is neither a relative interval nor a valid
        ISO-8601 timestamp.
    """
    stripped = text.strip()
    if not stripped:
        raise OptionParseError("time literal is empty", text)
    if stripped.lower() == NOW_KEYWORD:
        return TimeExpression(literal=text)

    lead = len(text) - len(text.lstrip())
    try:
        offsets = _OffsetScanner(stripped, lead, text).scan()
    except OptionParseError as scan_error:
        if stripped[0] in ("+", "-"):
            raise
        try:
            absolute = isoparse(stripped)
        except (ValueError, OverflowError) as exc:
            raise OptionParseError(
                f"not a relative interval or ISO-8601 timestamp: {scan_error.message}",
                text,
                position=scan_error.position,
            ) from exc
        return TimeExpression(literal=text, absolute=absolute)
    return TimeExpression(literal=text, offsets=offsets)


def parse_time_interval(text: str, anchor: datetime) -> datetime:
    """Parse ``text`` and resolve it against ``anchor``.

    Parameters
    ----------
    text:
        An ISO-8601 timestamp, ``now``, or concatenated offsets.
    anchor:
        The instant relative offsets are applied to.

    Returns
    -------
    datetime
        The timestamp itself for absolute literals, otherwise ``anchor``
        shifted by every offset in turn.

    Raises
    ------
    OptionParseError
        On any malformed literal.
    """
    return parse_time_expression(text).resolve(anchor)


__all__ = [
    "TIME_UNITS",
    "NOW_KEYWORD",
    "TimeOffset",
    "TimeExpression",
    "parse_time_expression",
    "parse_time_interval",
]
