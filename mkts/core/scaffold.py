"""Write the files and run the commands that make up a new TypeScript project."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import CommandError, ProjectExistsError, ProjectNameError
from .manifest import ManifestValidator, build_manifest
from .project import ProjectConfig
from .runner import CommandRunner

logger = logging.getLogger(__name__)

HELLO_WORLD = "console.log('hello world')"

CHALLENGE_TEMPLATE = """import * as fs from 'fs'
import * as path from 'path'

const input = fs.readFileSync(path.join(__dirname, '..','testcases', 'input.txt')).toString()
"""

PRETTIER_CONFIG: dict[str, Any] = {
    "printWidth": 120,
    "useTabs": True,
    "tabWidth": 4,
    "semi": False,
    "singleQuote": False,
    "trailingComma": "all",
    "bracketSpacing": True,
    "jsxBracketSameLine": False,
    "arrowParens": "always",
}

TS_CONFIG: dict[str, Any] = {
    "compilerOptions": {
        "lib": ["esnext"],
        "target": "esnext",
        "module": "CommonJS",
        "moduleResolution": "node",
        "strict": True,
        "rootDir": "src",
        "outDir": "dist",
        "declaration": True,
        "sourceMap": True,
    },
    "include": ["./src"],
    "compileOnSave": True,
}

VSCODE_LAUNCH = """{
\t// Use IntelliSense to learn about possible attributes.
\t// Hover to view descriptions of existing attributes.
\t// For more information, visit: https://go.microsoft.com/fwlink/?linkid=830387
\t"version": "0.2.0",
\t"configurations": [
\t\t{
\t\t\t"type": "node",
\t\t\t"request": "launch",
\t\t\t"name": "Launch Program",
\t\t\t"skipFiles": [
\t\t\t\t"<node_internals>/**"
\t\t\t],
\t\t\t"program": "${workspaceFolder}/dist/index.js",
\t\t\t"preLaunchTask": "tsc: build - tsconfig.json",
\t\t\t"outFiles": [
\t\t\t\t"${workspaceFolder}/dist/**/*.js"
\t\t\t]
\t\t}
\t]
}
"""

GITIGNORE_ENTRIES = ("node_modules", "dist")


def _dump(document: dict[str, Any]) -> str:
    return json.dumps(document, indent="\t")


def init_project_dir(name: str, cwd: Path | None = None) -> Path:
    """Create ``<cwd>/<name>`` and return its absolute path."""
    if not name or not name.strip():
        raise ProjectNameError("project name must be a non-empty string")
    base = (cwd or Path.cwd()).resolve()
    destination = base / name
    if destination.exists():
        logger.error("%s already exists", destination)
        raise ProjectExistsError(destination)
    logger.info("creating directory %s", destination)
    destination.mkdir()
    return destination


class ProjectScaffold:
    """Create configuration files, sources and tooling for one project."""

    def __init__(
        self,
        config: ProjectConfig,
        runner: CommandRunner,
        *,
        npm_bin: str = "npm",
        git_bin: str = "git",
        validator: ManifestValidator | None = None,
    ) -> None:
        self.config = config
        self.runner = runner
        self.npm_bin = npm_bin
        self.git_bin = git_bin
        self.validator = validator or ManifestValidator()

    def write_manifest(self, version: str = "0.1.0") -> Path:
        manifest = build_manifest(self.config, version)
        self.validator.validate(manifest)
        path = self.config.destination / "package.json"
        logger.info("writing %s", path)
        path.write_text(_dump(manifest), encoding="utf-8")
        return path

    async def install(self, dependency: str, *, dev: bool = False) -> None:
        """Add one npm dependency and wait for npm to finish."""
        args = [self.npm_bin, "install", "--save-dev" if dev else "--save", dependency]
        logger.info("installing %s%s", dependency, " (dev)" if dev else "")
        try:
            await self.runner.run(args, self.config.destination)
        except CommandError:
            logger.error("Error installing %s", dependency)
            raise

    def init_src_dir(self) -> Path:
        self.config.src_dir.mkdir()
        self.config.entry_file.write_text(HELLO_WORLD, encoding="utf-8")
        return self.config.entry_file

    def write_prettier_config(self) -> Path:
        path = self.config.destination / ".prettierrc.js"
        path.write_text(f"module.exports = {_dump(PRETTIER_CONFIG)}", encoding="utf-8")
        return path

    def write_readme(self) -> Path:
        path = self.config.destination / "README.md"
        path.write_text(f"# {self.config.name}", encoding="utf-8")
        return path

    def write_vscode_launch(self) -> Path:
        vscode_dir = self.config.destination / ".vscode"
        vscode_dir.mkdir()
        path = vscode_dir / "launch.json"
        path.write_text(VSCODE_LAUNCH, encoding="utf-8")
        return path

    async def init_git(self) -> Path:
        """Write .gitignore and run ``git init`` in the project directory."""
        path = self.config.destination / ".gitignore"
        path.write_text("\n".join(GITIGNORE_ENTRIES), encoding="utf-8")
        logger.info("initialising git repository")
        try:
            await self.runner.run([self.git_bin, "init"], self.config.destination)
        except CommandError:
            logger.error("Error git init")
            raise
        return path

    def init_coding_challenge(self) -> list[Path]:
        """Swap the entry file for the challenge template and add testcases/."""
        self.config.entry_file.write_text(CHALLENGE_TEMPLATE, encoding="utf-8")
        test_dir = self.config.destination / "testcases"
        test_dir.mkdir()
        input_path = test_dir / "input.txt"
        input_path.write_text("", encoding="utf-8")
        return [self.config.entry_file, input_path]

    def write_tsconfig(self) -> Path:
        path = self.config.destination / "tsconfig.json"
        path.write_text(_dump(TS_CONFIG), encoding="utf-8")
        return path
