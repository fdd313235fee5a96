"""Immutable snapshot of fully resolved backup settings."""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from backup_options.parsers.errors import OptionParseError
from backup_options.parsers.timeinterval import TimeExpression
from backup_options.schema.registry import FULL_IF_OLDER_THAN


@dataclass(frozen=True)
class BackupSettings:
    """Typed settings handed to the backup and restore engines.

    Every attribute corresponds to one recognised option.  The
    ``full-if-older-than`` value depends on the time of the last full
    backup, which is only known to the engine, so it is kept in parsed
    form and evaluated through :meth:`full_if_older_than_at`.

    Parameters
    ----------
    sentinel:
        The far-future instant (current time plus one year) used when no
        time was configured.  ``restore_time == sentinel`` means "restore
        the latest backup".
    """

    full: bool
    volume_size: int
    max_size: int
    auto_cleanup: bool
    full_if_older_than: TimeExpression | None
    signature_control_files: str | None
    signature_cache_path: str | None
    skip_file_hash_checks: bool
    file_to_restore: str | None
    restore_time: datetime
    disable_filetime_check: bool
    force: bool
    sentinel: datetime

    def full_if_older_than_at(self, anchor: datetime) -> datetime:
        """Return the instant after which a full backup is due.

        Parameters
        ----------
        anchor:
            When the last full backup was made.

        Raises
        ------
        OptionParseError
            If the configured offset leaves the supported date range.
        """
        if self.full_if_older_than is None:
            return self.sentinel
        try:
            return self.full_if_older_than.resolve(anchor)
        except OptionParseError as exc:
            raise replace(exc, option=FULL_IF_OLDER_THAN) from exc

    @property
    def restores_latest(self) -> bool:
        """True when no restore time was configured."""
        return self.restore_time == self.sentinel
