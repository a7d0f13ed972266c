"""Build, resolve, install and chmod in one sequential run."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .builder import BuildArtifact, locate_artifact, run_build
from .config import Settings
from .exceptions import InstallError
from .installer import InstallTarget, install_artifact
from .logging_config import get_logger
from .permissions import make_executable
from .platform import PlatformProfile, resolve_profile

logger = get_logger("binstall.pipeline")


class RunState(Enum):
    """Stages of a single install run."""

    START = "start"
    BUILDING = "building"
    RESOLVING = "resolving"
    INSTALLING = "installing"
    SETTING_PERMISSIONS = "setting_permissions"
    DONE = "done"
    FAILED = "failed"


@dataclass
class InstallResult:
    """Outcome of a completed run."""

    state: RunState
    profile: PlatformProfile
    artifact: BuildArtifact
    target: InstallTarget
    made_executable: bool
    on_search_path: bool

    @property
    def install_path(self) -> Path:
        return self.target.path


def is_on_search_path(directory: Path, environ: Mapping[str, str]) -> bool:
    """Check whether a directory appears in PATH."""
    wanted = directory.expanduser().resolve()
    for entry in environ.get("PATH", "").split(os.pathsep):
        if entry and Path(entry).expanduser().resolve() == wanted:
            return True
    return False


class InstallPipeline:
    """Runs Builder -> Platform Resolver -> Installer -> Permission Setter."""

    def __init__(
        self,
        settings: Settings,
        environ: Mapping[str, str] | None = None,
        console: Console | None = None,
    ):
        self.settings = settings
        self.environ = os.environ if environ is None else environ
        self.console = console or Console()
        self.state = RunState.START

    def _enter(self, state: RunState, message: str) -> None:
        logger.debug(f"{self.state.value} -> {state.value}")
        self.state = state
        self.console.print(f"[yellow]→[/yellow] {escape(message)}", soft_wrap=True)

    def run(self) -> InstallResult:
        """
        Execute the full install sequence.

        The first failure moves the run to FAILED and re-raises; earlier
        side effects (built output, created directory, copied file) stay.
        """
        settings = self.settings
        try:
            self._enter(RunState.BUILDING, f"Building {settings.binary_name}...")
            run_build(settings.build_argv, cwd=settings.project_dir)

            self._enter(RunState.RESOLVING, "Detecting executable naming convention...")
            profile = resolve_profile(self.environ)
            filename = profile.executable_name(settings.binary_name)
            artifact = locate_artifact(settings.artifact_dir, filename)
            target = InstallTarget(directory=settings.install_root, filename=filename)

            self._enter(RunState.INSTALLING, f"Installing {filename} to {target.directory}...")
            install_artifact(artifact, target)

            self._enter(RunState.SETTING_PERMISSIONS, "Making executable...")
            made_executable = make_executable(target.path, profile.convention)
        except InstallError as e:
            logger.debug(f"Install failed during {self.state.value}: {e}")
            self.state = RunState.FAILED
            raise

        self.state = RunState.DONE
        return InstallResult(
            state=self.state,
            profile=profile,
            artifact=artifact,
            target=target,
            made_executable=made_executable,
            on_search_path=is_on_search_path(target.directory, self.environ),
        )
