"""Static registry of the options understood by the backup engine.

Each recognised option is described by an :class:`OptionDescriptor`
carrying its type tag, help texts and documented default literal.  The
registry is built once at import time and never changes; external help
renderers read it through :func:`list_options`, and the resolver reads
default literals from it.

Usage
-----
::

    from backup_options.schema import get_descriptor, list_options

    for descriptor in list_options():
        print(descriptor.name, descriptor.type.name, descriptor.default)

    get_descriptor("volsize").default   # "5mb"
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Final


class OptionType(Enum):
    """Value kinds an option can carry."""

    BOOLEAN = auto()
    SIZE = auto()
    TIMESPAN = auto()
    PATH = auto()
    STRING = auto()


@dataclass(frozen=True)
class OptionDescriptor:
    """Metadata for a single recognised option.

    Parameters
    ----------
    name:
        Case-sensitive option key, e.g. ``"volsize"``.
    type:
        The kind of value the option carries.
    short_description:
        One-line summary for usage listings.
    long_description:
        Full help text.
    default:
        Documented default literal, or ``None`` when the option has no
        value unless supplied.
    legacy_type:
        Type tag published for this option by earlier releases, when it
        differs from ``type``.  Kept so existing help renderers can show
        the historical tag.
    """

    name: str
    type: OptionType
    short_description: str
    long_description: str
    default: str | None = None
    legacy_type: OptionType | None = None

    @property
    def published_type(self) -> OptionType:
        """The tag earlier releases advertised for this option."""
        return self.legacy_type or self.type


class UnknownOptionError(KeyError):
    """Raised when a name is not in the option registry."""

    def __init__(self, name: str) -> None:
        self.option_name = name
        super().__init__(
            f"Option {name!r} is not recognised. "
            f"Known options: {', '.join(option_names())}"
        )


# ---------------------------------------------------------------------------
# Option names
# ---------------------------------------------------------------------------

FULL: Final[str] = "full"
VOLSIZE: Final[str] = "volsize"
TOTALSIZE: Final[str] = "totalsize"
AUTO_CLEANUP: Final[str] = "auto-cleanup"
FULL_IF_OLDER_THAN: Final[str] = "full-if-older-than"
SIGNATURE_CONTROL_FILES: Final[str] = "signature-control-files"
SIGNATURE_CACHE_PATH: Final[str] = "signature-cache-path"
SKIP_FILE_HASH_CHECKS: Final[str] = "skip-file-hash-checks"
FILE_TO_RESTORE: Final[str] = "file-to-restore"
RESTORE_TIME: Final[str] = "restore-time"
DISABLE_FILETIME_CHECK: Final[str] = "disable-filetime-check"
FORCE: Final[str] = "force"


_OPTIONS: Final[tuple[OptionDescriptor, ...]] = (
    OptionDescriptor(
        FULL,
        OptionType.BOOLEAN,
        "A flag used to force full backups",
        "When this flag is specified, a full backup of all files is made "
        "and any incremental data is ignored.",
        "false",
    ),
    OptionDescriptor(
        VOLSIZE,
        OptionType.SIZE,
        "A size string that limits the size of the volumes",
        "This option changes the default volume size. Changing the size "
        "can be useful if the backend has a limit on the size of each "
        "individual file.",
        "5mb",
    ),
    OptionDescriptor(
        TOTALSIZE,
        OptionType.SIZE,
        "The number of bytes generated by each backup run",
        "This option places an upper limit on the total size of each "
        "backup. Note that if this flag is specified the backup may not "
        "contain all files, even for a full backup.",
    ),
    OptionDescriptor(
        AUTO_CLEANUP,
        OptionType.BOOLEAN,
        "A flag indicating that unused files should be removed",
        "If a backup is interrupted there will likely be partial files "
        "present on the backend. Using this flag, such files are removed "
        "automatically when encountered.",
        "false",
    ),
    OptionDescriptor(
        FULL_IF_OLDER_THAN,
        OptionType.TIMESPAN,
        "The max duration between full backups",
        "If the last full backup is older than the duration supplied here, "
        "a full backup is made, otherwise an incremental one. "
        "Without this option no full backup is forced; the '+1y' "
        "default describes that as one year after the current time, whereas "
        "an explicit '+1y' is counted from the last full backup.",
        "+1y",
    ),
    OptionDescriptor(
        SIGNATURE_CONTROL_FILES,
        OptionType.PATH,
        "A list of control files to embed in the backups",
        "Supply a list of files separated with semicolons that will be "
        "added to each backup.",
    ),
    OptionDescriptor(
        SIGNATURE_CACHE_PATH,
        OptionType.PATH,
        "A path to temporary storage",
        "If this path is supplied, all signature files are stored here, "
        "so re-downloads can be avoided.",
    ),
    OptionDescriptor(
        SKIP_FILE_HASH_CHECKS,
        OptionType.BOOLEAN,
        "Set this flag to skip hash checks",
        "If the hash for a volume does not match, the backup is refused. "
        "Supply this flag to proceed anyway.",
        "false",
    ),
    OptionDescriptor(
        FILE_TO_RESTORE,
        OptionType.STRING,
        "A list of files to restore",
        "By default all files in the backup are restored. Use this option "
        "to restore only a subset of the files.",
    ),
    OptionDescriptor(
        RESTORE_TIME,
        OptionType.TIMESPAN,
        "The time to restore files",
        "By default files are restored from the most recent backup. Use "
        "this option to select another one. Relative times are accepted, "
        'like "-2M" for a backup from two months ago.',
        "+1y",
        legacy_type=OptionType.STRING,
    ),
    OptionDescriptor(
        DISABLE_FILETIME_CHECK,
        OptionType.BOOLEAN,
        "Disable checks based on file time",
        "The operating system keeps track of the last time a file was "
        "written, which is used to quickly determine if a file has been "
        "modified. If some application deliberately modifies this "
        "information, backups are unreliable unless this flag is set.",
        "false",
        legacy_type=OptionType.STRING,
    ),
    OptionDescriptor(
        FORCE,
        OptionType.BOOLEAN,
        "Force the removal of files",
        "When deleting old files, only the files that are supposed to be "
        'deleted are listed. Specify the "force" option to actually remove '
        "them.",
        "false",
        legacy_type=OptionType.STRING,
    ),
)

_BY_NAME: Final[dict[str, OptionDescriptor]] = {d.name: d for d in _OPTIONS}


def list_options() -> tuple[OptionDescriptor, ...]:
    """Return every recognised option in presentation order."""
    return _OPTIONS


def option_names() -> list[str]:
    """Return the recognised option names in presentation order."""
    return [d.name for d in _OPTIONS]


def is_known(name: str) -> bool:
    """Return True if ``name`` is a recognised option key."""
    return name in _BY_NAME


def get_descriptor(name: str) -> OptionDescriptor:
    """Return the descriptor registered under ``name``.

    Raises
    ------
    UnknownOptionError
        If ``name`` is not a recognised option.
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownOptionError(name) from None
