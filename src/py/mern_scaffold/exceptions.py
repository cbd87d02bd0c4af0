"""mern-scaffold exception classes."""

__all__ = [
    "ExecutableNotFoundError",
    "ExecutionError",
    "InvalidFolderNameError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "MernScaffoldError",
    "TemplateNotFoundError",
]


class MernScaffoldError(Exception):
    """Base exception for mern-scaffold related errors."""


class InvalidFolderNameError(MernScaffoldError, ValueError):
    """Raised when the requested project folder name is not a safe path segment."""

    def __init__(self, folder_name: str, reason: str) -> None:
        """Initialize the exception.

        Args:
            folder_name: The rejected folder name.
            reason: Human readable explanation of why it was rejected.
        """
        super().__init__(f"Invalid folder name {folder_name!r}: {reason}.")
        self.folder_name = folder_name
        self.reason = reason


class TemplateNotFoundError(MernScaffoldError):
    """Raised when a profile lists a file that has no template."""

    def __init__(self, relative_path: str, profile: str) -> None:
        super().__init__(f"No template found for {relative_path!r} in profile {profile!r}.")


class ManifestNotFoundError(MernScaffoldError):
    """Raised when the package manifest was not produced by the initializer."""

    def __init__(self, manifest_path: str) -> None:
        super().__init__(f"Package manifest not found at {manifest_path!r}. Did the package manager init step run?")


class ManifestParseError(MernScaffoldError):
    """Raised when the package manifest cannot be parsed as a JSON object."""

    def __init__(self, manifest_path: str, detail: str) -> None:
        super().__init__(f"Could not parse package manifest at {manifest_path!r}: {detail}")


class ExecutableNotFoundError(MernScaffoldError):
    """Raised when the package manager executable is not found."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"Executable {executable!r} not found.")


class ExecutionError(MernScaffoldError):
    """Raised when a mandatory package manager command fails."""

    def __init__(self, command: list[str], return_code: "int | None", detail: str = "") -> None:
        message = f"Command {command!r} failed with return code {return_code}."
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message)
        self.command = command
        self.return_code = return_code
