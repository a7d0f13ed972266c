"""Executable naming convention detection from environment signals."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from .logging_config import get_logger

logger = get_logger("binstall.platform")


class ExecutableConvention(Enum):
    """How the target OS names executables."""

    UNIX = "unix"
    WINDOWS = "windows"

    @property
    def suffix(self) -> str:
        """Filename suffix for executables under this convention."""
        return ".exe" if self is ExecutableConvention.WINDOWS else ""

    @property
    def has_exec_bit(self) -> bool:
        """Check if marking a file executable is a distinct step."""
        return self is ExecutableConvention.UNIX


class WindowsSignal(Enum):
    """Environment values that identify a Windows-family environment."""

    MSYS = ("OSTYPE", "msys")
    WIN32 = ("OSTYPE", "win32")
    WINDOWS_NT = ("OS", "Windows_NT")

    @property
    def variable(self) -> str:
        return self.value[0]

    @property
    def expected(self) -> str:
        return self.value[1]


def classify_signals(ostype: str | None, os_name: str | None) -> ExecutableConvention:
    """
    Classify platform signals into an executable convention.

    Args:
        ostype: Value of the shell's OSTYPE variable, if any
        os_name: Value of the OS environment variable, if any

    Returns:
        WINDOWS if any recognized Windows signal matches exactly, else UNIX
    """
    observed = {"OSTYPE": ostype, "OS": os_name}
    for signal in WindowsSignal:
        if observed[signal.variable] == signal.expected:
            return ExecutableConvention.WINDOWS
    return ExecutableConvention.UNIX


@dataclass(frozen=True)
class PlatformProfile:
    """Resolved naming convention for a single run."""

    convention: ExecutableConvention

    @property
    def suffix(self) -> str:
        return self.convention.suffix

    def executable_name(self, base_name: str) -> str:
        """Filename used for both the build artifact and the install target."""
        return f"{base_name}{self.suffix}"


def resolve_profile(environ: Mapping[str, str] | None = None) -> PlatformProfile:
    """
    Read platform signals from the environment and build a profile.

    OSTYPE is a bash shell variable and is only visible here when the shell
    exports it; under MSYS or Git Bash it usually is not, and OS=Windows_NT
    is the signal that applies.
    """
    env = os.environ if environ is None else environ
    convention = classify_signals(env.get("OSTYPE"), env.get("OS"))
    logger.debug(
        f"Resolved {convention.value} convention from "
        f"OSTYPE={env.get('OSTYPE')!r} OS={env.get('OS')!r}"
    )
    return PlatformProfile(convention=convention)
