"""Mark installed executables runnable."""

import stat
from pathlib import Path

from .exceptions import PermissionFailure
from .logging_config import get_logger
from .platform import ExecutableConvention

logger = get_logger("binstall.permissions")

EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def make_executable(path: Path, convention: ExecutableConvention) -> bool:
    """
    Make a file executable on Unix-convention platforms.

    Args:
        path: Path to the installed file
        convention: Resolved executable convention

    Returns:
        True if execute bits were set, False if the step does not apply

    Raises:
        PermissionFailure: If the mode change fails
    """
    if not convention.has_exec_bit:
        logger.debug(f"Skipping chmod for {path.name} ({convention.value} convention)")
        return False

    try:
        current_mode = path.stat().st_mode
        path.chmod(current_mode | EXEC_BITS)
    except OSError as e:
        raise PermissionFailure(f"Cannot mark {path} executable: {e}") from e

    logger.info(f"Made executable: {path}")
    return True
