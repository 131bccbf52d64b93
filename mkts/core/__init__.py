"""mkts core package - project scaffolding utilities."""

from .errors import (
    CommandError,
    ManifestValidationError,
    ProjectExistsError,
    ProjectNameError,
    ScaffoldError,
    SettingsError,
)
from .foundry import ProjectFoundry
from .manifest import ManifestValidator, build_manifest
from .project import ProjectConfig, ScaffoldOptions, ScaffoldReport
from .runner import AsyncProcessRunner, CommandResult, CommandRunner
from .scaffold import ProjectScaffold, init_project_dir
from .settings import ScaffoldSettings, load_settings

__all__ = [
    "AsyncProcessRunner",
    "CommandError",
    "CommandResult",
    "CommandRunner",
    "ManifestValidationError",
    "ManifestValidator",
    "ProjectConfig",
    "ProjectExistsError",
    "ProjectNameError",
    "ProjectFoundry",
    "ProjectScaffold",
    "ScaffoldError",
    "ScaffoldOptions",
    "ScaffoldReport",
    "ScaffoldSettings",
    "SettingsError",
    "build_manifest",
    "init_project_dir",
    "load_settings",
]
