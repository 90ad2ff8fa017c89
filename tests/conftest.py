"""Test fixtures for mdsanitize."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

_ENV_VARS = (
    "MDSANITIZE_CONFIG",
    "MDSANITIZE_STRICT",
    "MDSANITIZE_LOG_LEVEL",
    "MDSANITIZE_ALLOWED_SCHEMES",
)


class RecordingSink:
    """Collects tokenizer events as tuples."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def open(self, tag, attrs):
        self.events.append(("open", tag, attrs))

    def self_close(self, tag, attrs):
        self.events.append(("self_close", tag, attrs))

    def close(self, tag):
        self.events.append(("close", tag))

    def text(self, chars):
        self.events.append(("text", chars))


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty project root with no mdsanitize env vars set."""
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'site'\n")
    monkeypatch.chdir(tmp_path)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def write_config(project_dir: Path):
    """Write YAML text to config/default.yaml under the project root."""

    def _write(text: str, name: str = "default.yaml") -> Path:
        config_dir = project_dir / "config"
        config_dir.mkdir(exist_ok=True)
        path = config_dir / name
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a CLI test runner."""
    return CliRunner()

