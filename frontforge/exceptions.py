"""Frontforge exception classes."""

__all__ = [
    "ConfigurationError",
    "ExecutableNotFoundError",
    "FrontForgeError",
    "GenerationError",
    "InstallError",
    "PathError",
]


class FrontForgeError(Exception):
    """Base exception for Frontforge related errors."""


class PathError(FrontForgeError):
    """Raised when a target path is empty, unsafe, occupied or cannot be written."""

    def __init__(self, path: str, message: str, cause: "BaseException | None" = None) -> None:
        """Initialize the exception.

        Args:
            path: The offending path, as given or as resolved.
            message: A short description of the problem.
            cause: The underlying exception, if any.
        """
        super().__init__(f"path error for {path!r}: {message}")
        self.path = path
        self.message = message
        self.cause = cause


class ConfigurationError(FrontForgeError):
    """Raised when a configuration names an unknown framework or an unsupported option."""

    def __init__(
        self,
        message: str,
        *,
        framework: "str | None" = None,
        axis: "str | None" = None,
        value: "str | None" = None,
    ) -> None:
        super().__init__(message)
        self.framework = framework
        self.axis = axis
        self.value = value


class GenerationError(FrontForgeError):
    """Raised when an artifact cannot be produced."""

    def __init__(self, stage: str, message: str, cause: "BaseException | None" = None) -> None:
        super().__init__(f"generation failed at {stage}: {message}")
        self.stage = stage
        self.message = message
        self.cause = cause


class InstallError(FrontForgeError):
    """Raised when the dependency install command fails."""

    def __init__(self, command: list[str], return_code: "int | None", stderr: str) -> None:
        if return_code is None:
            detail = f"Command {command!r} did not complete."
        else:
            detail = f"Command {command!r} failed with return code {return_code}."
        if stderr:
            detail = f"{detail}\nStderr: {stderr}"
        super().__init__(detail)
        self.command = command
        self.return_code = return_code
        self.stderr = stderr


class ExecutableNotFoundError(InstallError):
    """Raised when the package manager executable is not on PATH."""

    def __init__(self, executable: str) -> None:
        FrontForgeError.__init__(self, f"Executable {executable!r} not found.")
        self.command = [executable]
        self.return_code = None
        self.stderr = ""
        self.executable = executable
