"""Pytest configuration and shared fixtures for appconfigr tests."""

import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from appconfigr.properties import override_properties


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory

    Cleanup:
        Automatically removes directory after test
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture(autouse=True)
def restore_properties() -> Generator[None]:
    """Restore the process property table after every test."""
    with override_properties():
        yield


@pytest.fixture
def sample_configs_dir() -> Path:
    """Get path to the sample configuration files.

    Returns:
        Path to tests/fixtures/sample-configs
    """
    return Path(__file__).parent / "fixtures" / "sample-configs"
