"""Test that the quickstart API works for backup-options."""
from __future__ import annotations

from datetime import datetime


def test_quickstart_import() -> None:
    import backup_options

    assert callable(backup_options.resolve)
    assert callable(backup_options.list_options)


def test_quickstart_version(expected_version: str) -> None:
    import backup_options

    assert backup_options.__version__ == expected_version


def test_quickstart_resolve_defaults() -> None:
    import backup_options

    settings = backup_options.resolve({})
    assert settings.volume_size == 5 * 1024**2
    assert settings.restores_latest


def test_quickstart_resolve_with_clock() -> None:
    import backup_options

    clock = backup_options.fixed_clock(datetime(2024, 1, 31, 12, 0))
    settings = backup_options.resolve({"restore-time": "now", "force": ""}, clock=clock)
    assert settings.restore_time == datetime(2024, 1, 31, 12, 0)
    assert settings.force is True


def test_quickstart_list_options() -> None:
    import backup_options

    names = [d.name for d in backup_options.list_options()]
    assert "volsize" in names
    assert len(names) == 12


def test_quickstart_errors_are_exported() -> None:
    import pytest

    import backup_options

    with pytest.raises(backup_options.OptionErrorCollection):
        backup_options.resolve({"totalsize": "huge"})


def test_quickstart_resolved_options_repr() -> None:
    from backup_options import ResolvedOptions

    assert "ResolvedOptions" in repr(ResolvedOptions({}))


def test_quickstart_package_importable(package_name: str) -> None:
    import importlib

    module = importlib.import_module(package_name)
    assert hasattr(module, "__version__")
