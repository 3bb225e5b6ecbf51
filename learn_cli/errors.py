"""Exceptions raised by the scaffolding stages.

Every error the CLI knows how to report derives from ``ScaffoldError``;
``cli.run`` turns each of them into a message and exit status 1.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every failure that aborts a scaffold run."""


class UsageError(ScaffoldError):
    """Raised when the command line is missing required input."""


class DirectoryConflictError(ScaffoldError):
    """Raised when the target directory holds files that could conflict."""

    def __init__(self, directory: str | Path, conflicts: list[str]) -> None:
        self.directory = str(directory)
        self.conflicts = list(conflicts)
        super().__init__(
            f"The directory {self.directory} contains files that could conflict: "
            + ", ".join(self.conflicts)
        )


class UnsupportedPackageManagerError(ScaffoldError):
    """Raised when the operator asks for a package manager we do not drive."""

    def __init__(self, requested: str, supported: str) -> None:
        self.requested = requested
        self.supported = supported
        super().__init__(
            f"You are using {requested}. Please change to use {supported}."
        )


class PackageManagerNotFoundError(ScaffoldError):
    """Raised when the package-manager probe cannot run."""

    def __init__(self, executable: str, stderr: str = "") -> None:
        self.executable = executable
        self.stderr = stderr
        message = f"Could not run '{executable} --version'. Is it installed and on PATH?"
        if stderr:
            message += f"\n{stderr}"
        super().__init__(message)


class InstallStepError(ScaffoldError):
    """Raised when a package-manager step exits with a non-zero code."""

    def __init__(self, step: str, command: list[str], returncode: int, stderr: str = "") -> None:
        self.step = step
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        message = (
            f"Install step '{step}' failed (exit {returncode}): {' '.join(self.command)}"
        )
        if stderr:
            message += f"\n{stderr}"
        super().__init__(message)


class TemplateWriteError(ScaffoldError):
    """Raised when a template file cannot be written."""

    def __init__(self, path: str | Path, cause: OSError) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to write {self.path}: {cause}")
