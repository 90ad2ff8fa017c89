"""Shared CLI helpers: config loading and logging setup."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer
from rich.console import Console

from mdsanitize.core.config import ConfigError, load_config
from mdsanitize.core.models import AppConfig

console = Console(stderr=True)


def setup_logging(level: str, verbose: bool = False) -> None:
    """Log to stderr so stdout carries only sanitized output."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def get_config(ctx: typer.Context, strict: Optional[bool] = None) -> AppConfig:
    """Load the config for this invocation, exiting with status 1 on errors."""
    obj = ctx.obj or {}
    try:
        cfg = load_config(obj.get("config_path"), strict=strict)
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(1)
    setup_logging(cfg.log_level, verbose=obj.get("verbose", False))
    return cfg
