"""Shared fixtures for CLI command tests."""

import sys
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

MODELS_MODULE = "appconfigr_cli_sample_models"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Create a configuration file with one property and one env variable."""
    path = tmp_path / "app.conf"
    path.write_text("greeting: ${greeting}\nport: ${APP_PORT}\n")
    return path


@pytest.fixture
def models_module(tmp_path: Path, monkeypatch: Any) -> Generator[str]:
    """Write an importable module with a model class for --model.

    Yields:
        Import target in MODULE:CLASS form
    """
    module_dir = tmp_path / "models"
    module_dir.mkdir()
    (module_dir / f"{MODELS_MODULE}.py").write_text(
        "from pydantic import BaseModel\n"
        "\n"
        "\n"
        "class AppConfig(BaseModel):\n"
        "    greeting: str\n"
        "    port: int\n"
    )
    monkeypatch.syspath_prepend(str(module_dir))
    yield f"{MODELS_MODULE}:AppConfig"
    sys.modules.pop(MODELS_MODULE, None)
