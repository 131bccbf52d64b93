"""Run external commands (npm, git) for the scaffolder."""

from __future__ import annotations

import asyncio
import logging
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

from .errors import CommandError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


class CommandRunner(Protocol):
    async def run(self, args: Sequence[str], cwd: Path) -> CommandResult: ...


class AsyncProcessRunner:
    """Start a subprocess and wait for it to exit.

    A non-zero exit status or a missing executable raises ``CommandError``.
    There is no timeout; a hung process blocks the caller.
    """

    async def run(self, args: Sequence[str], cwd: Path) -> CommandResult:
        cmd = [str(part) for part in args]
        logger.debug("run: %s (cwd=%s)", shlex.join(cmd), cwd)
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                cwd=str(cwd),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as exc:
            raise CommandError(
                f"Command not found: {cmd[0]}. Is it installed and in your PATH?",
                args=cmd,
            ) from exc

        out_b, err_b = await proc.communicate()
        result = CommandResult(
            args=tuple(cmd),
            returncode=proc.returncode if proc.returncode is not None else -1,
            stdout=out_b.decode(errors="replace"),
            stderr=err_b.decode(errors="replace"),
        )
        if result.returncode != 0:
            raise CommandError(
                f"Command failed: {shlex.join(cmd)}",
                args=cmd,
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return result
