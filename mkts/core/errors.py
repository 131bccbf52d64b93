"""Exception types raised while scaffolding a project."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class ScaffoldError(RuntimeError):
    """Base class for failures that abort the scaffolding pipeline."""


class ProjectExistsError(ScaffoldError):
    """Raised when the destination directory is already present."""

    def __init__(self, destination: Path) -> None:
        super().__init__(f"{destination} already exists")
        self.destination = destination


class ProjectNameError(ScaffoldError, ValueError):
    """Raised when the project name is blank."""


class CommandError(ScaffoldError):
    """Raised when an external command exits non-zero or cannot be started."""

    def __init__(
        self,
        message: str,
        *,
        args: Sequence[str],
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command = list(args)
        self.returncode = returncode
        self.stderr = stderr

    def __str__(self) -> str:
        detail = super().__str__()
        if self.returncode is not None:
            detail = f"{detail} (exit status {self.returncode})"
        if self.stderr.strip():
            detail = f"{detail}\n{self.stderr.strip()}"
        return detail


class ManifestValidationError(ScaffoldError):
    """Raised when a generated package manifest violates the bundled schema."""


class SettingsError(ScaffoldError):
    """Raised when the scaffolder configuration cannot be loaded."""
