"""Configuration for the mkts scaffolder."""

from __future__ import annotations

import os
from pathlib import Path
from shutil import which
from typing import Any, List, Mapping

import yaml  # type: ignore[import-not-found]
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import SettingsError

CONFIG_ENV = "MKTS_CONFIG"
ENV_OVERRIDES: tuple[tuple[str, str], ...] = (
    ("MKTS_NPM_BIN", "npm_bin"),
    ("MKTS_GIT_BIN", "git_bin"),
)


def _default_npm() -> str:
    return which("npm") or "npm"


def _default_git() -> str:
    return which("git") or "git"


class ScaffoldSettings(BaseModel):
    npm_bin: str = Field(default_factory=_default_npm)
    git_bin: str = Field(default_factory=_default_git)
    version: str = "0.1.0"
    dependencies: List[str] = Field(default_factory=lambda: ["typescript"])
    dev_dependencies: List[str] = Field(
        default_factory=lambda: ["prettier", "@types/node"]
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="after")
    def _require_names(self) -> "ScaffoldSettings":
        for dep in [*self.dependencies, *self.dev_dependencies]:
            if not dep.strip():
                raise ValueError("dependency names must be non-empty")
        if not self.npm_bin.strip() or not self.git_bin.strip():
            raise ValueError("npm_bin and git_bin must be non-empty")
        return self


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise SettingsError(f"Config file missing at {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise SettingsError(f"Config file {path} is not valid YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(f"Config file {path} must contain a mapping")
    return data


def load_settings(
    path: Path | None = None, environ: Mapping[str, str] | None = None
) -> ScaffoldSettings:
    """Merge defaults, the optional YAML file and environment overrides."""
    env = os.environ if environ is None else environ
    if path is None and env.get(CONFIG_ENV):
        path = Path(env[CONFIG_ENV]).expanduser()

    values: dict[str, Any] = _read_yaml(path) if path is not None else {}
    for env_key, field_name in ENV_OVERRIDES:
        raw = (env.get(env_key) or "").strip()
        if raw:
            values[field_name] = raw

    try:
        return ScaffoldSettings.model_validate(values)
    except ValidationError as exc:
        source = f" from {path}" if path is not None else ""
        raise SettingsError(f"Invalid mkts settings{source}:\n{exc}") from exc
