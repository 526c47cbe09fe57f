"""
Command-line interface for SurfKit.

Provides commands for inspecting surface type flags and settings profiles.
"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from surfkit import __version__
from surfkit.core.config import ConfigManager
from surfkit.core.exceptions import SurfKitError
from surfkit.core.logging import configure_from_settings, configure_logging
from surfkit.surfaces.surface_type import BITS, ROLES, role_name

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config-dir",
    type=click.Path(path_type=Path),
    default="config",
    help="Configuration directory",
)
@click.option("--log-level", default="WARNING", help="Logging level")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write log records to this file",
)
@click.option(
    "--profile",
    default=None,
    help="Settings profile whose log_level/json_logs/log_file configure logging",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_dir: Path,
    log_level: str,
    log_file: Optional[str],
    profile: Optional[str],
) -> None:
    """SurfKit - Classified layer surfaces for additive manufacturing."""
    ctx.ensure_object(dict)
    ctx.obj["config_dir"] = config_dir

    if profile is None:
        configure_logging(level=log_level, log_file=log_file)
        return

    try:
        settings = ConfigManager(config_dir).get_profile(profile)
    except SurfKitError as e:
        console.print(f"[red]✗[/red] Failed to load profile: {e}")
        raise SystemExit(1)
    configure_from_settings(settings, log_file=log_file)
    ctx.obj["settings"] = settings


@main.command("types")
def types() -> None:
    """Show every surface role and the flag bits it is made of."""
    table = Table(title="Surface Types")
    table.add_column("Role", style="cyan")
    table.add_column("Value", justify="right")
    table.add_column("Bits")

    for role in ROLES:
        bits = "|".join(bit.name for bit in BITS if role & bit)
        table.add_row(role_name(role), str(int(role)), bits)

    console.print(table)


# =============================================================================
# Profile Commands
# =============================================================================


@main.group()
def profiles() -> None:
    """Settings profile commands."""
    pass


@profiles.command("list")
@click.pass_context
def profiles_list(ctx: click.Context) -> None:
    """List available settings profiles."""
    try:
        config_mgr = ConfigManager(ctx.obj["config_dir"])
        names = config_mgr.list_profiles()

        if not names:
            console.print("[yellow]No settings profiles found.[/yellow]")
            return

        table = Table(title="Available Profiles")
        table.add_column("Name", style="cyan")
        table.add_column("Simplify Tolerance", justify="right")
        table.add_column("Thickness Layers", justify="right")

        for name in names:
            settings = config_mgr.get_profile(name)
            table.add_row(
                name,
                f"{settings.simplify_tolerance:g}",
                str(settings.default_thickness_layers),
            )

        console.print(table)

    except SurfKitError as e:
        console.print(f"[red]✗[/red] Failed to list profiles: {e}")
        raise SystemExit(1)


@profiles.command("show")
@click.argument("name")
@click.pass_context
def profiles_show(ctx: click.Context, name: str) -> None:
    """Show every setting of one profile."""
    try:
        settings = ConfigManager(ctx.obj["config_dir"]).get_profile(name)
    except SurfKitError as e:
        console.print(f"[red]✗[/red] Failed to load profile: {e}")
        raise SystemExit(1)

    table = Table(title=f"Profile: {name}")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    for key, value in settings.model_dump().items():
        table.add_row(key, str(value))

    console.print(table)


if __name__ == "__main__":
    main()
