"""Project foundry: run the scaffolding pipeline end to end."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .manifest import ManifestValidator
from .project import ProjectConfig, ScaffoldOptions, ScaffoldReport
from .runner import AsyncProcessRunner, CommandRunner
from .scaffold import ProjectScaffold, init_project_dir
from .settings import ScaffoldSettings

logger = logging.getLogger(__name__)


class ProjectFoundry:
    """Scaffold a TypeScript project from parsed options.

    Steps run in a fixed order and the first failure aborts the rest. Files
    written before the failure are left in place.
    """

    def __init__(
        self,
        settings: ScaffoldSettings | None = None,
        runner: CommandRunner | None = None,
        cwd: Path | None = None,
        validator: ManifestValidator | None = None,
    ) -> None:
        self.settings = settings or ScaffoldSettings()
        self.runner = runner or AsyncProcessRunner()
        self.cwd = cwd
        self.validator = validator

    async def execute(self, options: ScaffoldOptions) -> dict[str, Any]:
        destination = init_project_dir(options.name, self.cwd)
        config = ProjectConfig(name=options.name, destination=destination)
        report = ScaffoldReport(project=config)
        scaffold = ProjectScaffold(
            config,
            self.runner,
            npm_bin=self.settings.npm_bin,
            git_bin=self.settings.git_bin,
            validator=self.validator,
        )

        report.add(scaffold.write_manifest(self.settings.version))

        # npm mutates package-lock.json, one install at a time
        for dependency in self.settings.dependencies:
            await scaffold.install(dependency)
            report.installed.append(dependency)
        for dependency in self.settings.dev_dependencies:
            await scaffold.install(dependency, dev=True)
            report.installed.append(dependency)

        report.add(scaffold.init_src_dir())
        report.add(scaffold.write_prettier_config())
        report.add(scaffold.write_readme())
        report.add(scaffold.write_vscode_launch())

        if options.git:
            report.add(await scaffold.init_git())
        if options.cc:
            for path in scaffold.init_coding_challenge():
                report.add(path)

        report.add(scaffold.write_tsconfig())

        logger.info(
            "scaffolded %s with %d files", config.name, len(report.generated)
        )
        return report.to_dict()
