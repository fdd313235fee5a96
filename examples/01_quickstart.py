#!/usr/bin/env python3
"""Example: Quickstart — backup-options

Minimal working example: list the recognised options, resolve a raw
option set into typed settings, and report a malformed value.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install backup-options
"""
from __future__ import annotations

from datetime import datetime

import backup_options

RAW_OPTIONS = {
    "volsize": "10",
    "totalsize": "2gb",
    "full-if-older-than": "1M",
    "restore-time": "-2D",
    "auto-cleanup": "",
    "skip-file-hash-checks": "off",
}


def main() -> None:
    print(f"backup-options version: {backup_options.__version__}")

    # Step 1: Describe the recognised options
    for descriptor in backup_options.list_options():
        print(f"  {descriptor.name:<24} {descriptor.type.name.lower():<8} {descriptor.default or '-'}")

    # Step 2: Resolve a raw option set
    clock = backup_options.fixed_clock(datetime(2024, 1, 31, 12, 0))
    settings = backup_options.resolve(RAW_OPTIONS, clock=clock)
    print(f"\nvolume_size={settings.volume_size} max_size={settings.max_size}")
    print(f"auto_cleanup={settings.auto_cleanup} skip_file_hash_checks={settings.skip_file_hash_checks}")
    print(f"restore_time={settings.restore_time.isoformat()}")

    # Step 3: full-if-older-than depends on when the last full backup ran
    last_full = datetime(2024, 1, 10)
    print(f"next full backup due after {settings.full_if_older_than_at(last_full).isoformat()}")

    # Step 4: Malformed values are reported per option
    try:
        backup_options.resolve({"volsize": "5xz", "restore-time": "--3M"}, clock=clock)
    except backup_options.OptionErrorCollection as exc:
        print(f"\n{exc}")


if __name__ == "__main__":
    main()
