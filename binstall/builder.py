"""Release build invocation and artifact location."""

import subprocess
from dataclasses import dataclass
from pathlib import Path

from .exceptions import BuildFailure
from .logging_config import get_logger

logger = get_logger("binstall.builder")


@dataclass
class CommandResult:
    """Result of executing the build command."""

    command: list[str]
    return_code: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.return_code == 0


@dataclass
class BuildArtifact:
    """Executable produced by the release build."""

    path: Path

    @property
    def filename(self) -> str:
        return self.path.name


def run_build(command: list[str], cwd: Path) -> CommandResult:
    """
    Run the release build and wait for it to finish.

    Output is not captured so build progress reaches the terminal directly.

    Args:
        command: Build command as an argument list
        cwd: Project root to build in

    Returns:
        CommandResult for a successful build

    Raises:
        BuildFailure: If the command is empty, the build tool is missing
            or the build exits non-zero
    """
    if not command:
        raise BuildFailure("Build command is empty")

    logger.info(f"Running build: {' '.join(command)} (cwd={cwd})")

    try:
        process = subprocess.run(command, cwd=cwd)
    except FileNotFoundError as e:
        raise BuildFailure(f"Build tool not found: {command[0]} ({e})") from e
    except OSError as e:
        raise BuildFailure(f"Could not start build: {e}") from e

    result = CommandResult(command=command, return_code=process.returncode)
    if not result.success:
        raise BuildFailure(
            f"Build command '{' '.join(command)}' exited with status {result.return_code}",
            return_code=result.return_code,
        )

    logger.info("Build finished")
    return result


def locate_artifact(artifact_dir: Path, filename: str) -> BuildArtifact:
    """
    Build the expected artifact path.

    Existence is not checked here; a missing file surfaces when copying.
    """
    return BuildArtifact(path=artifact_dir / filename)
