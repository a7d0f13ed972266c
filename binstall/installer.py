"""Copy the build artifact into the install directory."""

import shutil
from dataclasses import dataclass
from pathlib import Path

from .builder import BuildArtifact
from .exceptions import CopyFailure, DirectoryCreationFailure
from .logging_config import get_logger

logger = get_logger("binstall.installer")


@dataclass
class InstallTarget:
    """Destination of the installed executable."""

    directory: Path
    filename: str

    @property
    def path(self) -> Path:
        return self.directory / self.filename


def ensure_directory(path: Path) -> None:
    """Create the directory and any missing parents."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationFailure(f"Cannot create directory {path}: {e}") from e


def copy_artifact(artifact: BuildArtifact, target: InstallTarget) -> Path:
    """
    Copy artifact bytes to the target, replacing any existing file.

    Raises:
        CopyFailure: If the artifact is missing or the target is unwritable
    """
    if not artifact.path.is_file():
        raise CopyFailure(f"Build artifact not found: {artifact.path}")

    try:
        shutil.copyfile(artifact.path, target.path)
    except OSError as e:
        raise CopyFailure(f"Cannot copy {artifact.path} to {target.path}: {e}") from e

    logger.info(f"Copied {artifact.path} -> {target.path}")
    return target.path


def install_artifact(artifact: BuildArtifact, target: InstallTarget) -> Path:
    """Ensure the install directory exists, then copy the artifact in."""
    ensure_directory(target.directory)
    return copy_artifact(artifact, target)
