"""mkts package root exposing core scaffolding utilities."""

from .core import (  # isort: skip
    ProjectConfig,
    ProjectFoundry,
    ScaffoldOptions,
    ScaffoldSettings,
)

__all__ = [
    "ProjectConfig",
    "ProjectFoundry",
    "ScaffoldOptions",
    "ScaffoldSettings",
]
