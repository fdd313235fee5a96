"""CLI entry point for backup-options.

Invoked as::

    backup-options [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m backup_options.cli.main

Commands
--------
options     List the recognised options and their defaults
resolve     Resolve KEY=VALUE pairs into typed settings
version     Show version information
"""
from __future__ import annotations

import sys
from datetime import datetime

import click
from dateutil.parser import isoparse
from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def _parse_pairs(pairs: tuple[str, ...]) -> dict[str, str]:
    """Build a raw option set from ``KEY=VALUE`` strings.

    A bare ``KEY`` yields an empty value, which switches flags on.
    """
    raw: dict[str, str] = {}
    for pair in pairs:
        key, _, value = pair.partition("=")
        key = key.strip()
        if not key:
            raise click.BadParameter(f"missing option name in {pair!r}", param_hint="'-o'")
        if key in raw:
            raise click.BadParameter(f"option {key!r} given more than once", param_hint="'-o'")
        raw[key] = value
    return raw


def _parse_instant(value: str | None, param_hint: str) -> datetime | None:
    if value is None:
        return None
    try:
        return isoparse(value)
    except (ValueError, OverflowError) as exc:
        raise click.BadParameter(
            f"{value!r} is not an ISO-8601 timestamp", param_hint=param_hint
        ) from exc


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="backup-options")
def cli() -> None:
    """Typed option resolution for a backup/restore engine."""


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from backup_options import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]backup-options[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# options command
# ---------------------------------------------------------------------------


@cli.command(name="options")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"], case_sensitive=False),
    default="table",
    help="Output format",
)
def options_command(output_format: str) -> None:
    """List the recognised options with their types and defaults."""
    from backup_options.schema import RegistrySerializer, list_options

    output_format = output_format.lower()
    if output_format == "json":
        click.echo(RegistrySerializer().to_json())
        return
    if output_format == "yaml":
        click.echo(RegistrySerializer().to_yaml(), nl=False)
        return

    table = Table(title="Recognised options", show_lines=True)
    table.add_column("Option", style="bold", min_width=12)
    table.add_column("Type", min_width=8)
    table.add_column("Default", min_width=8)
    table.add_column("Description")

    for descriptor in list_options():
        type_name = descriptor.type.name.lower()
        if descriptor.legacy_type is not None:
            type_name += f"\n[dim]was {descriptor.legacy_type.name.lower()}[/dim]"
        table.add_row(
            descriptor.name,
            type_name,
            escape(descriptor.default) if descriptor.default else "[dim]none[/dim]",
            escape(descriptor.short_description),
        )

    console.print(table)


# ---------------------------------------------------------------------------
# resolve command
# ---------------------------------------------------------------------------


@cli.command(name="resolve")
@click.option(
    "--option",
    "-o",
    "pairs",
    multiple=True,
    metavar="KEY[=VALUE]",
    help="A raw option; repeat for several. A bare KEY gives an empty value.",
)
@click.option("--now", "now_text", default=None, help="Pin the current instant (ISO-8601)")
@click.option(
    "--anchor",
    "anchor_text",
    default=None,
    help=(
        "Time of the last full backup (ISO-8601). Adds the full-if-older-than "
        "due instant to json/yaml output; the table uses now when omitted"
    ),
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"], case_sensitive=False),
    default="table",
    help="Output format",
)
@click.option("--strict", is_flag=True, default=False, help="Fail on unrecognised option names")
def resolve_command(
    pairs: tuple[str, ...],
    now_text: str | None,
    anchor_text: str | None,
    output_format: str,
    strict: bool,
) -> None:
    """Resolve raw options into typed settings.

    Examples:

    \b
        backup-options resolve -o volsize=10 -o full
        backup-options resolve -o restore-time=-2M --now 2024-06-01T12:00:00
        backup-options resolve -o full-if-older-than=1M --anchor 2024-05-01 --format json
    """
    from backup_options.parsers import OptionErrorCollection, OptionParseError
    from backup_options.resolver import (
        ResolvedOptions,
        SettingsSerializer,
        fixed_clock,
        system_clock,
    )
    from backup_options.schema import is_known

    raw = _parse_pairs(pairs)
    now = _parse_instant(now_text, "'--now'")
    anchor = _parse_instant(anchor_text, "'--anchor'")

    unknown = [key for key in raw if not is_known(key)]
    for key in unknown:
        err_console.print(f"[yellow]Warning:[/yellow] unrecognised option {escape(key)!r} is ignored")
    if unknown and strict:
        sys.exit(1)

    clock = fixed_clock(now) if now is not None else system_clock
    options = ResolvedOptions(raw, clock=clock)
    try:
        settings = options.to_settings()
    except OptionErrorCollection as exc:
        err_console.print(f"[red]Invalid options[/red] ({len(exc.errors)}):")
        for error in exc.errors:
            err_console.print(f"  {escape(str(error))}")
        sys.exit(1)

    try:
        due = settings.full_if_older_than_at(anchor if anchor is not None else clock())
    except OptionParseError as exc:
        err_console.print(f"[red]Invalid options[/red] (1):\n  {escape(str(exc))}")
        sys.exit(1)

    output_format = output_format.lower()
    if output_format == "json":
        click.echo(SettingsSerializer().to_json(settings, anchor))
        return
    if output_format == "yaml":
        click.echo(SettingsSerializer().to_yaml(settings, anchor), nl=False)
        return

    table = Table(title="Resolved options", show_lines=True)
    table.add_column("Setting", style="bold", min_width=12)
    table.add_column("Value")
    table.add_column("Source", min_width=8)

    rows: list[tuple[str, str, object]] = [
        ("full", "full", settings.full),
        ("volsize", "volume_size", settings.volume_size),
        ("totalsize", "max_size", settings.max_size),
        ("auto-cleanup", "auto_cleanup", settings.auto_cleanup),
        ("full-if-older-than", "full_if_older_than", due.isoformat()),
        ("signature-control-files", "signature_control_files", settings.signature_control_files),
        ("signature-cache-path", "signature_cache_path", settings.signature_cache_path),
        ("skip-file-hash-checks", "skip_file_hash_checks", settings.skip_file_hash_checks),
        ("file-to-restore", "file_to_restore", settings.file_to_restore),
        ("restore-time", "restore_time", settings.restore_time.isoformat()),
        ("disable-filetime-check", "disable_filetime_check", settings.disable_filetime_check),
        ("force", "force", settings.force),
    ]
    for key, field_name, value in rows:
        source = "set" if key in raw else "[dim]default[/dim]"
        table.add_row(field_name, escape(str(value)), source)

    console.print(table)


if __name__ == "__main__":
    cli()
