"""Config inspection CLI commands."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from mdsanitize.cli.context import get_config
from mdsanitize.core.defaults import default_options, describe
from mdsanitize.core.models import SanitizeOptions

console = Console()
config_app = typer.Typer(name="config", help="Inspect sanitizer configuration.")


def _options_table(title: str, options: SanitizeOptions) -> Table:
    table = Table(title=title)
    table.add_column("Option", style="cyan")
    table.add_column("Value", style="white")
    for name, value in describe(options).items():
        table.add_row(name, value if value is not None else "[dim]none[/dim]")
    return table


@config_app.command("show")
def show(ctx: typer.Context) -> None:
    """Show the resolved sanitizer options."""
    cfg = get_config(ctx)
    mode = "[yellow]strict[/yellow]" if cfg.strict else "[green]merged with defaults[/green]"
    console.print(f"Mode: {mode}")
    console.print(f"Markdown extensions: [cyan]{', '.join(cfg.markdown.extensions) or '-'}[/cyan]")
    console.print(_options_table("Sanitizer Options", cfg.options))


@config_app.command("defaults")
def defaults() -> None:
    """Show the built-in default options."""
    console.print(_options_table("Default Options", default_options()))
