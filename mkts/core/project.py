"""Project data structures for the mkts scaffolder."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class ProjectConfig:
    """Name/destination pair threaded through every scaffolding step."""

    name: str
    destination: Path

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("project name must be a non-empty string")
        if not self.destination.is_absolute():
            raise ValueError(f"destination must be absolute, got {self.destination}")

    @property
    def src_dir(self) -> Path:
        return self.destination / "src"

    @property
    def entry_file(self) -> Path:
        return self.src_dir / "index.ts"


@dataclass(frozen=True)
class ScaffoldOptions:
    """Parsed command-line options handed to the pipeline."""

    name: str
    git: bool = False
    cc: bool = False


@dataclass
class ScaffoldReport:
    """Collect what a pipeline run produced."""

    project: ProjectConfig
    generated: list[Path] = field(default_factory=list)
    installed: list[str] = field(default_factory=list)

    def add(self, path: Path) -> Path:
        if path not in self.generated:
            self.generated.append(path)
        return path

    def to_dict(self) -> dict[str, Any]:
        """Serialise the report to a JSON-friendly dict."""
        return {
            "status": "success",
            "name": self.project.name,
            "destination": str(self.project.destination),
            "generated_files": [str(path) for path in self.generated],
            "installed": list(self.installed),
        }
