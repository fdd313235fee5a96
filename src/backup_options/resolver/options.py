"""Typed, defaulted view over a raw option set.

``ResolvedOptions`` wraps the string-to-string mapping produced by the
command-line or config-file layer and exposes one typed accessor per
recognised option.  Each accessor is resolved on first access and
memoized; a malformed literal only fails the accessor that reads it.

Example
-------
::

    from backup_options import ResolvedOptions

    opts = ResolvedOptions({"volsize": "10", "full": ""})
    opts.volume_size          # 10 * 1024 * 1024
    opts.full                 # True
    settings = opts.to_settings()
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import replace
from datetime import datetime
from functools import cached_property
from types import MappingProxyType
from typing import Final, TypeVar

from dateutil.relativedelta import relativedelta

from backup_options.parsers.boolean import parse_bool
from backup_options.parsers.errors import OptionErrorCollection, OptionParseError
from backup_options.parsers.size import MAX_SIZE, parse_size
from backup_options.parsers.timeinterval import TimeExpression, parse_time_expression
from backup_options.resolver.clock import Clock, system_clock
from backup_options.resolver.settings import BackupSettings
from backup_options.schema import registry
from backup_options.schema.registry import get_descriptor

logger = logging.getLogger(__name__)

T = TypeVar("T")

# How far past "now" the sentinel instant lies.
SENTINEL_OFFSET: Final[relativedelta] = relativedelta(years=1)

VOLUME_SIZE_UNIT: Final[str] = "mb"
DEFAULT_VOLUME_SIZE: Final[str] = "5mb"


class ResolvedOptions:
    """Read-only typed accessors over a raw option set.

    Parameters
    ----------
    raw:
        Option name to raw value.  A private read-only copy is taken, so
        later changes to the caller's mapping are not observed.
    clock:
        Source of the current instant for the time-valued options.
    """

    def __init__(self, raw: Mapping[str, str], clock: Clock = system_clock) -> None:
        self._raw: Mapping[str, str] = MappingProxyType(dict(raw))
        self._clock = clock

    # ------------------------------------------------------------------
    # Raw access
    # ------------------------------------------------------------------

    @property
    def raw(self) -> Mapping[str, str]:
        """The wrapped option set, read-only."""
        return self._raw

    def get_raw(self, name: str) -> str | None:
        """Return the raw value for ``name``, or None when absent or empty."""
        value = self._raw.get(name)
        return value if value else None

    def _bool(self, name: str) -> bool:
        return parse_bool(self._raw.get(name))

    def _attributed(self, name: str, literal: str, compute: Callable[[], T]) -> T:
        """Run ``compute``, tagging any parse error with the option name."""
        try:
            return compute()
        except OptionParseError as exc:
            logger.warning("Option %r has a malformed value %r: %s", name, literal, exc.message)
            raise replace(exc, option=name) from exc

    # ------------------------------------------------------------------
    # Sentinel
    # ------------------------------------------------------------------

    @cached_property
    def sentinel(self) -> datetime:
        """Current time plus one year; stands for "no time configured"."""
        return self._clock() + SENTINEL_OFFSET

    # ------------------------------------------------------------------
    # Typed accessors
    # ------------------------------------------------------------------

    @cached_property
    def full(self) -> bool:
        """Whether a full backup is forced."""
        return self._bool(registry.FULL)

    @cached_property
    def volume_size(self) -> int:
        """Size of each volume in bytes; bare numbers are megabytes."""
        literal = self.get_raw(registry.VOLSIZE)
        if literal is None:
            literal = get_descriptor(registry.VOLSIZE).default or DEFAULT_VOLUME_SIZE
            logger.debug("Option %r not set, using default %r", registry.VOLSIZE, literal)
        return self._attributed(
            registry.VOLSIZE, literal, lambda: parse_size(literal, VOLUME_SIZE_UNIT)
        )

    @cached_property
    def max_size(self) -> int:
        """Total bytes allowed for a single backup run; ``MAX_SIZE`` means no limit."""
        literal = self.get_raw(registry.TOTALSIZE)
        if literal is None:
            logger.debug("Option %r not set, size is unlimited", registry.TOTALSIZE)
            return MAX_SIZE
        return self._attributed(registry.TOTALSIZE, literal, lambda: parse_size(literal))

    @cached_property
    def full_if_older_than_expression(self) -> TimeExpression | None:
        """The parsed ``full-if-older-than`` literal, or None when unset."""
        literal = self.get_raw(registry.FULL_IF_OLDER_THAN)
        if literal is None:
            return None
        return self._attributed(
            registry.FULL_IF_OLDER_THAN, literal, lambda: parse_time_expression(literal)
        )

    def full_if_older_than(self, anchor: datetime) -> datetime:
        """Return the instant after which a full backup is due.

        Parameters
        ----------
        anchor:
            When the last full backup was made.

        Returns
        -------
        datetime
            ``anchor`` shifted by the configured interval, or
            :attr:`sentinel` when the option is unset.
        """
        expression = self.full_if_older_than_expression
        if expression is None:
            logger.debug("Option %r not set, using sentinel", registry.FULL_IF_OLDER_THAN)
            return self.sentinel
        return self._attributed(
            registry.FULL_IF_OLDER_THAN, expression.literal, lambda: expression.resolve(anchor)
        )

    @cached_property
    def auto_cleanup(self) -> bool:
        """Whether orphaned partial files are deleted automatically."""
        return self._bool(registry.AUTO_CLEANUP)

    @cached_property
    def signature_control_files(self) -> str | None:
        """Semicolon-separated control files, unsplit."""
        return self.get_raw(registry.SIGNATURE_CONTROL_FILES)

    @cached_property
    def signature_cache_path(self) -> str | None:
        return self.get_raw(registry.SIGNATURE_CACHE_PATH)

    @cached_property
    def skip_file_hash_checks(self) -> bool:
        return self._bool(registry.SKIP_FILE_HASH_CHECKS)

    @cached_property
    def file_to_restore(self) -> str | None:
        return self.get_raw(registry.FILE_TO_RESTORE)

    @cached_property
    def restore_time(self) -> datetime:
        """The backup to restore from; :attr:`sentinel` means the latest one."""
        literal = self.get_raw(registry.RESTORE_TIME)
        if literal is None:
            logger.debug("Option %r not set, restoring latest", registry.RESTORE_TIME)
            return self.sentinel
        now = self._clock()
        return self._attributed(
            registry.RESTORE_TIME, literal, lambda: parse_time_expression(literal).resolve(now)
        )

    @cached_property
    def disable_filetime_check(self) -> bool:
        return self._bool(registry.DISABLE_FILETIME_CHECK)

    @cached_property
    def force(self) -> bool:
        return self._bool(registry.FORCE)

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    def to_settings(self) -> BackupSettings:
        """Resolve every option into a :class:`BackupSettings` snapshot.

        Each field is attempted even if an earlier one failed.

        Raises
        ------
        OptionErrorCollection
            Listing every malformed option, in registry order.
        """
        getters: tuple[tuple[str, Callable[[], object]], ...] = (
            ("full", lambda: self.full),
            ("volume_size", lambda: self.volume_size),
            ("max_size", lambda: self.max_size),
            ("auto_cleanup", lambda: self.auto_cleanup),
            ("full_if_older_than", lambda: self.full_if_older_than_expression),
            ("signature_control_files", lambda: self.signature_control_files),
            ("signature_cache_path", lambda: self.signature_cache_path),
            ("skip_file_hash_checks", lambda: self.skip_file_hash_checks),
            ("file_to_restore", lambda: self.file_to_restore),
            ("restore_time", lambda: self.restore_time),
            ("disable_filetime_check", lambda: self.disable_filetime_check),
            ("force", lambda: self.force),
        )
        errors = OptionErrorCollection()
        values: dict[str, object] = {}
        for field_name, getter in getters:
            try:
                values[field_name] = getter()
            except OptionParseError as exc:
                errors.add(exc)
        if errors.has_errors:
            raise errors
        return BackupSettings(sentinel=self.sentinel, **values)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"ResolvedOptions(keys={sorted(self._raw)!r})"


def resolve(raw: Mapping[str, str], clock: Clock = system_clock) -> BackupSettings:
    """Resolve ``raw`` into a :class:`BackupSettings` snapshot in one call.

    Raises
    ------
    OptionErrorCollection
        If any option holds a malformed literal.
    """
    return ResolvedOptions(raw, clock).to_settings()
