"""Config command — Manage FileTool configuration."""

from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel

from filetool.foundation.config import get_config, load_config, save_default_config

console = Console()


@click.group()
def config() -> None:
    """Manage FileTool configuration.

    Configuration is loaded from (in priority order):
    1. Environment variables (FILETOOL_*)
    2. .filetool/config.yaml (project-local)
    3. ~/.filetool/config.yaml (user-global)
    4. Built-in defaults

    Examples:

        filetool config show
        filetool config init
    """


@config.command()
@click.option("--path", type=click.Path(), help="Config file path to show")
def show(path: str | None) -> None:
    """Show current configuration."""
    cfg = load_config(path) if path else get_config()

    console.print(Panel("[bold]FileTool Configuration[/bold]", border_style="cyan"))
    console.print(f"  Default mode: {cfg.default_mode:04o}")
    console.print(f"  Error status: {cfg.error_status}")
    console.print(f"  Default policy: {cfg.default_policy or 'none'}")
    console.print(f"  Debug: {cfg.debug}")

    console.print("\n[dim]Config sources:[/dim]")
    for candidate in (Path(".filetool/config.yaml"), Path.home() / ".filetool" / "config.yaml"):
        if candidate.exists():
            console.print(f"  [green]✓[/green] {candidate}")
        else:
            console.print(f"  [dim]○[/dim] {candidate} (not found)")


@config.command()
@click.option("--path", type=click.Path(), default=".filetool/config.yaml", show_default=True)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init(path: str, force: bool) -> None:
    """Write a config file with the default settings."""
    target = Path(path)
    if target.exists() and not force:
        console.print(f"[yellow]Config already exists:[/yellow] {target} (use --force)")
        raise SystemExit(1)
    saved = save_default_config(target)
    console.print(f"[green]✓[/green] Wrote {saved}")
