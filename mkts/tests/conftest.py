"""Shared fixtures for the mkts test-suite."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Sequence

import pytest

from mkts.core import CommandError, CommandResult, ScaffoldSettings


class RecordingRunner:
    """Stand-in for AsyncProcessRunner that records call ordering."""

    def __init__(self, fail_on: str | None = None) -> None:
        self.fail_on = fail_on
        self.events: list[tuple[str, tuple[str, ...]]] = []
        self.cwds: list[Path] = []

    @property
    def calls(self) -> list[tuple[str, ...]]:
        return [args for event, args in self.events if event == "start"]

    async def run(self, args: Sequence[str], cwd: Path) -> CommandResult:
        cmd = tuple(args)
        self.events.append(("start", cmd))
        self.cwds.append(cwd)
        await asyncio.sleep(0)
        if self.fail_on is not None and self.fail_on in cmd:
            raise CommandError(
                f"Command failed: {' '.join(cmd)}",
                args=cmd,
                returncode=1,
                stderr="boom",
            )
        self.events.append(("finish", cmd))
        return CommandResult(args=cmd, returncode=0, stdout="", stderr="")


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def runner_factory():
    return RecordingRunner


@pytest.fixture
def settings() -> ScaffoldSettings:
    return ScaffoldSettings(npm_bin="npm", git_bin="git")
