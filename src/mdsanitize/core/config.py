"""Configuration loader: YAML files + environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from mdsanitize.core.defaults import resolve_options
from mdsanitize.core.models import AppConfig, MarkdownConfig

_TRUE_VALUES = {"1", "true", "yes", "on"}


class ConfigError(ValueError):
    """Raised when the configuration file or environment cannot be used."""


def _find_project_root() -> Path:
    """Walk up from cwd to find a directory containing pyproject.toml."""
    cwd = Path.cwd()
    for p in [cwd, *cwd.parents]:
        if (p / "pyproject.toml").exists():
            return p
    return cwd


def _as_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def _read_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")
    return data


def load_config(config_path: Optional[str] = None, strict: Optional[bool] = None) -> AppConfig:
    """Load configuration from YAML + environment variables.

    Priority: env vars > .env file > YAML defaults. An explicit ``strict``
    overrides all of them.
    """
    root = _find_project_root()
    load_dotenv(root / ".env")

    # Explicit path, then MDSANITIZE_CONFIG, then config/default.yaml.
    # A named file must exist; only the default location is optional.
    named_path = config_path or os.getenv("MDSANITIZE_CONFIG")
    if named_path:
        yaml_path = Path(named_path)
        if not yaml_path.exists():
            raise ConfigError(f"Config file not found: {yaml_path}")
    else:
        yaml_path = root / "config" / "default.yaml"
    yaml_data = _read_yaml(yaml_path)

    if strict is None:
        strict = _as_bool(os.getenv("MDSANITIZE_STRICT", yaml_data.get("strict", False)))
    log_level = os.getenv("MDSANITIZE_LOG_LEVEL", yaml_data.get("log_level", "WARNING"))

    # Sanitizer options with env overrides
    sanitizer_data = dict(yaml_data.get("sanitizer") or {})
    schemes = os.getenv("MDSANITIZE_ALLOWED_SCHEMES")
    if schemes is not None:
        sanitizer_data["allowed_schemes"] = [s.strip() for s in schemes.split(",") if s.strip()]

    md_data = yaml_data.get("markdown") or {}

    try:
        options = resolve_options(sanitizer_data, strict=strict)
        markdown_cfg = MarkdownConfig(**md_data)
        return AppConfig(
            options=options,
            strict=strict,
            log_level=str(log_level).upper(),
            markdown=markdown_cfg,
        )
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {yaml_path}: {exc}") from exc
