"""Error types raised while parsing option literals.

Only the size and time-interval parsers fail; boolean, path, and plain
string options always resolve.  Every ``OptionParseError`` carries the
offending literal and, once the resolver has attached it, the name of
the option the literal was supplied for.
"""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OptionParseError(ValueError):
    """A malformed option literal.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    literal:
        The raw text that failed to parse.
    position:
        0-based offset into ``literal`` where scanning stopped, if known.
    option:
        Name of the option the literal belongs to.  Parsers leave this
        unset; the resolver fills it in before re-raising.
    """

    message: str
    literal: str
    position: int | None = None
    option: str | None = None

    def __str__(self) -> str:
        if self.option is not None:
            text = f"invalid value {self.literal!r} for option {self.option!r}: {self.message}"
        else:
            text = f"invalid value {self.literal!r}: {self.message}"
        if self.position is not None:
            text += f" (at offset {self.position})"
        return text

    # dataclass(frozen=True) doesn't call Exception.__init__ automatically
    def __post_init__(self) -> None:
        object.__setattr__(self, "args", (str(self),))


@dataclass
class OptionErrorCollection(Exception):
    """Aggregates the per-field failures of one settings snapshot.

    Fields are resolved independently, so a single malformed literal
    never hides problems in the others.

    Parameters
    ----------
    errors:
        Errors in registry order.
    """

    errors: list[OptionParseError] = field(default_factory=list)

    def add(self, error: OptionParseError) -> None:
        """Append a new error to the collection."""
        self.errors.append(error)

    @property
    def has_errors(self) -> bool:
        """Return True if any errors were recorded."""
        return bool(self.errors)

    @property
    def options(self) -> list[str]:
        """Names of the options that failed, in order."""
        return [e.option or "" for e in self.errors]

    def __str__(self) -> str:
        if not self.errors:
            return "OptionErrorCollection (no errors)"
        lines = [f"OptionErrorCollection ({len(self.errors)} error(s)):"]
        for err in self.errors:
            lines.append(f"  {err}")
        return "\n".join(lines)
