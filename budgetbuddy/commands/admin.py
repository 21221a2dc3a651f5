"""Admin commands for setting up configuration."""

import sys

from rich.console import Console

from budgetbuddy.config import create_default_config, default_config, get_config_path

console = Console()


def init_command(force: bool = False) -> None:
    """Write the default configuration file."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'budgetbuddy init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Config file created at {config_path} (permissions: 600)")
    for key, value in default_config().items():
        console.print(f"[dim]  {key} = {value}[/dim]")
