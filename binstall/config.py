"""Configuration management for binstall."""

import shlex
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import BuildFailure


class Settings(BaseSettings):
    """Install settings loaded from BINSTALL_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BINSTALL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_default=True,
    )

    # Binary Configuration
    binary_name: str = "repman"

    # Build Configuration
    project_dir: Path = Path(".")
    build_command: str = "cargo build --release"
    build_output_dir: Path = Path("target/release")

    # Install Configuration
    install_root: Path = Path("~/bin")

    # Logging
    log_level: str = "WARNING"

    @field_validator("install_root", "project_dir", mode="after")
    @classmethod
    def _expand_home(cls, value: Path) -> Path:
        return value.expanduser()

    @property
    def build_argv(self) -> list[str]:
        """Split build command string into an argument list."""
        try:
            return shlex.split(self.build_command)
        except ValueError as e:
            raise BuildFailure(f"Cannot parse build command {self.build_command!r}: {e}") from e

    @property
    def artifact_dir(self) -> Path:
        """Directory the release build writes its binary into."""
        return self.project_dir / self.build_output_dir


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
