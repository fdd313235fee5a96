"""backup-options — typed, defaulted option resolution for a backup/restore engine.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import backup_options

    # Resolve a raw option set into typed settings
    settings = backup_options.resolve({
        "volsize": "10",
        "totalsize": "2gb",
        "restore-time": "-2M",
        "force": "",
    })
    settings.volume_size      # 10 * 1024**2
    settings.force            # True

    # Per-field access; a malformed value only fails its own field
    opts = backup_options.ResolvedOptions({"volsize": "5xz", "full": "yes"})
    opts.full                 # True
    opts.volume_size          # raises OptionParseError

    # Describe the recognised options
    for descriptor in backup_options.list_options():
        print(descriptor.name, descriptor.default)

    backup_options.__version__
    '0.1.0'
"""
from __future__ import annotations

from collections.abc import Mapping

from backup_options.parsers.errors import OptionErrorCollection, OptionParseError
from backup_options.resolver.clock import Clock, fixed_clock, system_clock
from backup_options.resolver.options import ResolvedOptions
from backup_options.resolver.settings import BackupSettings
from backup_options.schema.registry import OptionDescriptor, OptionType, UnknownOptionError

__version__: str = "0.1.0"


def resolve(raw: Mapping[str, str], clock: Clock = system_clock) -> BackupSettings:
    """Resolve a raw option set into a ``BackupSettings`` snapshot.

    Parameters
    ----------
    raw:
        Option name to raw string value.
    clock:
        Source of the current instant for the time-valued options.

    Returns
    -------
    BackupSettings
        One typed attribute per recognised option.

    Raises
    ------
    backup_options.OptionErrorCollection
        If any option holds a malformed size or time literal.
    """
    from backup_options.resolver.options import resolve as _resolve

    return _resolve(raw, clock)


def list_options() -> tuple[OptionDescriptor, ...]:
    """Return the descriptors of every recognised option, in presentation order."""
    from backup_options.schema.registry import list_options as _list_options

    return _list_options()


__all__ = [
    "__version__",
    "resolve",
    "list_options",
    "ResolvedOptions",
    "BackupSettings",
    "OptionDescriptor",
    "OptionType",
    "UnknownOptionError",
    "OptionParseError",
    "OptionErrorCollection",
    "Clock",
    "fixed_clock",
    "system_clock",
]
