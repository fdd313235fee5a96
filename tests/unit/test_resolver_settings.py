"""Unit tests for backup_options.resolver.settings — BackupSettings snapshot."""
from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from backup_options.parsers.errors import OptionParseError
from backup_options.resolver.clock import Clock
from backup_options.resolver.options import ResolvedOptions


class TestBackupSettings:
    def test_is_frozen(self, clock: Clock) -> None:
        settings = ResolvedOptions({}, clock=clock).to_settings()
        with pytest.raises(FrozenInstanceError):
            settings.force = True  # type: ignore[misc]

    def test_unset_restore_time_restores_latest(self, clock: Clock) -> None:
        settings = ResolvedOptions({}, clock=clock).to_settings()
        assert settings.restores_latest

    def test_explicit_restore_time_does_not_restore_latest(self, clock: Clock) -> None:
        settings = ResolvedOptions({"restore-time": "-1D"}, clock=clock).to_settings()
        assert not settings.restores_latest

    def test_unset_full_if_older_than_is_sentinel(self, clock: Clock) -> None:
        settings = ResolvedOptions({}, clock=clock).to_settings()
        assert settings.full_if_older_than is None
        assert settings.full_if_older_than_at(datetime(2001, 1, 1)) == settings.sentinel

    def test_full_if_older_than_is_evaluated_per_anchor(self, clock: Clock) -> None:
        settings = ResolvedOptions({"full-if-older-than": "1W"}, clock=clock).to_settings()
        assert settings.full_if_older_than_at(datetime(2024, 1, 1)) == datetime(2024, 1, 8)
        assert settings.full_if_older_than_at(datetime(2024, 6, 1)) == datetime(2024, 6, 8)

    def test_out_of_range_anchor_names_option(self, clock: Clock) -> None:
        settings = ResolvedOptions({"full-if-older-than": "5Y"}, clock=clock).to_settings()
        with pytest.raises(OptionParseError) as ctx:
            settings.full_if_older_than_at(datetime(9998, 1, 1))
        assert ctx.value.option == "full-if-older-than"

    def test_equal_inputs_give_equal_snapshots(self, full_raw: dict[str, str], clock: Clock) -> None:
        first = ResolvedOptions(full_raw, clock=clock).to_settings()
        second = ResolvedOptions(dict(full_raw), clock=clock).to_settings()
        assert first == second
