"""
Shared pytest fixtures for binstall tests.

Fixtures are automatically discovered by pytest.
"""
import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest

from binstall.config import Settings, get_settings
from tests.fixtures.builds import fake_build_command


# =============================================================================
# Temporary Directory Fixtures
# =============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    The directory is automatically cleaned up after the test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def home_dir(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at an empty directory so `~` resolves inside the sandbox."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home


# =============================================================================
# Build Fixtures
# =============================================================================

@pytest.fixture
def project_dir(temp_dir: Path) -> Path:
    """Empty project root for the fake build to write into."""
    project = temp_dir / "project"
    project.mkdir()
    return project


@pytest.fixture
def make_settings(project_dir: Path, home_dir: Path) -> Callable[..., Settings]:
    """
    Factory for Settings wired to the fake build.

    Keyword arguments are forwarded to Settings and override the defaults.
    """

    def _make(
        artifact_name: str = "repman",
        exit_code: int = 0,
        payload: str = "binary",
        **overrides,
    ) -> Settings:
        values = {
            "project_dir": project_dir,
            "build_command": fake_build_command(artifact_name, exit_code, payload),
            "install_root": home_dir / "bin",
        }
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset the cached settings around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
