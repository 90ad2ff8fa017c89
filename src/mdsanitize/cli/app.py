"""Root CLI application with clean and render commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from mdsanitize.cli.config_cmd import config_app
from mdsanitize.cli.context import get_config
from mdsanitize.content.render import render_markdown
from mdsanitize.sanitize import sanitize_markdown

logger = logging.getLogger(__name__)

console = Console(stderr=True)
app = typer.Typer(
    name="mdsanitize",
    help="Allowlist sanitizer for HTML rendered from user-authored markdown.",
    no_args_is_help=True,
)

# Register sub-command groups
app.add_typer(config_app)


def _read_input(path: Optional[Path]) -> str:
    if path is None or str(path) == "-":
        return sys.stdin.read()
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        console.print(f"[red]Cannot read {path}:[/red] {exc.strerror or exc}")
        raise typer.Exit(1)


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to a YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log dropped tags and attributes"),
) -> None:
    """Sanitize HTML and markdown against an allowlist."""
    ctx.obj = {"config_path": config, "verbose": verbose}


@app.command()
def clean(
    ctx: typer.Context,
    file: Optional[Path] = typer.Argument(None, help="HTML file to sanitize (stdin when omitted or '-')"),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--no-strict", help="Use the configured options as-is instead of merging with defaults",
    ),
) -> None:
    """Sanitize an HTML fragment and print the result."""
    cfg = get_config(ctx, strict=strict)
    html = _read_input(file)
    logger.debug("Sanitizing %d characters (strict=%s)", len(html), cfg.strict)
    # cfg.options is already resolved, so it is passed through unchanged.
    typer.echo(sanitize_markdown(html, cfg.options, strict=True), nl=False)


@app.command()
def render(
    ctx: typer.Context,
    file: Optional[Path] = typer.Argument(None, help="Markdown file to render (stdin when omitted or '-')"),
    extension: Optional[list[str]] = typer.Option(None, "--extension", "-x", help="Markdown extension (repeatable)"),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--no-strict", help="Use the configured options as-is instead of merging with defaults",
    ),
) -> None:
    """Render markdown to HTML and sanitize it."""
    cfg = get_config(ctx, strict=strict)
    text = _read_input(file)
    extensions = extension or cfg.markdown.extensions
    typer.echo(render_markdown(text, cfg.options, strict=True, extensions=extensions), nl=False)
