"""Package manifest construction and schema validation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from jsonschema import Draft202012Validator  # type: ignore[import-not-found]
from jsonschema.exceptions import ValidationError  # type: ignore[import-not-found]

from .errors import ManifestValidationError
from .project import ProjectConfig

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_SCHEMA = PACKAGE_ROOT / "schemas" / "package-manifest.schema.json"

ENTRY_POINT = "./dist/index.js"
PRETTIFY_SCRIPT = (
    "prettier --config .prettierrc.js --ignore-path .prettierignore "
    "--write ./src/**/*.{ts,tsx,js,jsx,json}"
)


def build_manifest(config: ProjectConfig, version: str = "0.1.0") -> dict[str, Any]:
    """Return the package.json document for ``config``."""
    return {
        "name": config.name,
        "version": version,
        "main": ENTRY_POINT,
        "scripts": {
            "watch": "tsc --watch",
            "build": "tsc",
            "start": f"node {ENTRY_POINT}",
            "prettify": PRETTIFY_SCRIPT,
        },
    }


class ManifestValidator:
    """Validate package manifests against the bundled JSON Schema."""

    def __init__(self, schema_path: Path | None = None) -> None:
        self.schema_path = schema_path or DEFAULT_SCHEMA
        self.validator = self._build_validator()

    def _build_validator(self) -> Draft202012Validator:
        if not self.schema_path.exists():
            raise ManifestValidationError(
                f"Package manifest schema missing at {self.schema_path}."
            )
        schema = json.loads(self.schema_path.read_text(encoding="utf-8"))
        return Draft202012Validator(schema)

    def collect_errors(self, payload: dict[str, Any]) -> list[str]:
        return list(self._iter_error_messages(payload))

    def validate(self, payload: dict[str, Any]) -> None:
        errors = self.collect_errors(payload)
        if errors:
            raise ManifestValidationError("\n".join(errors))

    def _iter_error_messages(self, payload: dict[str, Any]) -> Iterable[str]:
        for error in self.validator.iter_errors(payload):
            path = ".".join(str(idx) for idx in error.path) or "manifest"
            if isinstance(error, ValidationError):
                yield f"{path}: {error.message}"
            else:
                yield f"{path}: {error}"
