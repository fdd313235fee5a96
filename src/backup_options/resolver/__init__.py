"""Typed option resolution.

Exports ``ResolvedOptions``, the ``BackupSettings`` snapshot, the clock
helpers, and the settings serializer.
"""
from __future__ import annotations

from backup_options.resolver.clock import Clock, fixed_clock, system_clock
from backup_options.resolver.options import ResolvedOptions, resolve
from backup_options.resolver.serializer import SettingsSerializer
from backup_options.resolver.settings import BackupSettings

__all__ = [
    "Clock",
    "fixed_clock",
    "system_clock",
    "ResolvedOptions",
    "resolve",
    "SettingsSerializer",
    "BackupSettings",
]
