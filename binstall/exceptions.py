"""Install pipeline exceptions."""


class InstallError(Exception):
    """Base exception for build-and-install errors."""
    pass


class BuildFailure(InstallError):
    """Raised when the release build exits non-zero or cannot be started."""

    def __init__(self, message: str, return_code: int | None = None):
        super().__init__(message)
        self.return_code = return_code


class DirectoryCreationFailure(InstallError):
    """Raised when the install directory cannot be created."""
    pass


class CopyFailure(InstallError):
    """Raised when the build artifact cannot be copied to the install target."""
    pass


class PermissionFailure(InstallError):
    """Raised when the installed file cannot be marked executable."""
    pass
