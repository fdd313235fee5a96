"""Unit tests for backup_options.resolver.serializer — settings export."""
from __future__ import annotations

import json
from datetime import datetime

import yaml

from backup_options.resolver.clock import Clock
from backup_options.resolver.options import ResolvedOptions
from backup_options.resolver.serializer import SettingsSerializer


class TestSettingsSerializer:
    def test_to_dict(self, full_raw: dict[str, str], clock: Clock) -> None:
        settings = ResolvedOptions(full_raw, clock=clock).to_settings()
        data = SettingsSerializer().to_dict(settings)
        assert data["volume_size"] == 10 * 1024**2
        assert data["full_if_older_than"] == {"literal": "1M", "offsets": ["+1M"]}
        assert data["restore_time"] == "2024-01-29T12:00:00"
        assert data["sentinel"] == "2025-01-31T12:00:00"
        assert data["signature_control_files"] == "a.db;b.db"

    def test_absolute_expression(self, clock: Clock) -> None:
        settings = ResolvedOptions({"full-if-older-than": "2023-06-15"}, clock=clock).to_settings()
        data = SettingsSerializer().to_dict(settings)
        assert data["full_if_older_than"] == {
            "literal": "2023-06-15",
            "absolute": "2023-06-15T00:00:00",
        }

    def test_unset_expression_is_none(self, clock: Clock) -> None:
        settings = ResolvedOptions({}, clock=clock).to_settings()
        assert SettingsSerializer().to_dict(settings)["full_if_older_than"] is None

    def test_json_round_trip(self, full_raw: dict[str, str], clock: Clock) -> None:
        settings = ResolvedOptions(full_raw, clock=clock).to_settings()
        serializer = SettingsSerializer()
        assert json.loads(serializer.to_json(settings)) == serializer.to_dict(settings)

    def test_yaml_round_trip(self, full_raw: dict[str, str], clock: Clock) -> None:
        settings = ResolvedOptions(full_raw, clock=clock).to_settings()
        serializer = SettingsSerializer()
        assert yaml.safe_load(serializer.to_yaml(settings)) == serializer.to_dict(settings)

    def test_anchor_adds_due_instant(self, full_raw: dict[str, str], clock: Clock) -> None:
        settings = ResolvedOptions(full_raw, clock=clock).to_settings()
        data = SettingsSerializer().to_dict(settings, anchor=datetime(2024, 3, 1))
        assert data["full_if_older_than_due"] == "2024-04-01T00:00:00"

    def test_no_anchor_omits_due_instant(self, full_raw: dict[str, str], clock: Clock) -> None:
        settings = ResolvedOptions(full_raw, clock=clock).to_settings()
        assert "full_if_older_than_due" not in SettingsSerializer().to_dict(settings)
