"""Dump resolved settings to JSON or YAML.

Datetimes are written in ISO-8601 form.  ``full_if_older_than`` is
written as its literal and, when relative, as the list of offsets it
applies.
"""
from __future__ import annotations

import json
from datetime import datetime

import yaml

from backup_options.parsers.timeinterval import TimeExpression
from backup_options.resolver.settings import BackupSettings


class SettingsSerializer:
    """Converts a :class:`BackupSettings` snapshot to a JSON-compatible dict."""

    def _expression_to_dict(self, expr: TimeExpression | None) -> dict[str, object] | None:
        if expr is None:
            return None
        if expr.absolute is not None:
            return {"literal": expr.literal, "absolute": expr.absolute.isoformat()}
        return {"literal": expr.literal, "offsets": [str(o) for o in expr.offsets]}

    def to_dict(
        self, settings: BackupSettings, anchor: datetime | None = None
    ) -> dict[str, object]:
        """Serialize ``settings`` to a plain dict.

        When ``anchor`` is given, the instant ``full_if_older_than`` denotes
        for that anchor is added under ``full_if_older_than_due``.
        """
        data: dict[str, object] = {
            "full": settings.full,
            "volume_size": settings.volume_size,
            "max_size": settings.max_size,
            "auto_cleanup": settings.auto_cleanup,
            "full_if_older_than": self._expression_to_dict(settings.full_if_older_than),
            "signature_control_files": settings.signature_control_files,
            "signature_cache_path": settings.signature_cache_path,
            "skip_file_hash_checks": settings.skip_file_hash_checks,
            "file_to_restore": settings.file_to_restore,
            "restore_time": settings.restore_time.isoformat(),
            "disable_filetime_check": settings.disable_filetime_check,
            "force": settings.force,
            "sentinel": settings.sentinel.isoformat(),
        }
        if anchor is not None:
            data["full_if_older_than_due"] = settings.full_if_older_than_at(anchor).isoformat()
        return data

    def to_json(
        self, settings: BackupSettings, anchor: datetime | None = None, indent: int = 2
    ) -> str:
        """Serialize ``settings`` to a JSON string."""
        return json.dumps(self.to_dict(settings, anchor), indent=indent, ensure_ascii=False)

    def to_yaml(self, settings: BackupSettings, anchor: datetime | None = None) -> str:
        """Serialize ``settings`` to a YAML string."""
        return yaml.dump(self.to_dict(settings, anchor), default_flow_style=False, allow_unicode=True)
