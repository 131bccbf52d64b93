#!/usr/bin/env python3
"""Scaffold a new TypeScript project in the current directory."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from mkts.core import ProjectFoundry, ScaffoldError, ScaffoldOptions, load_settings

LOG_ENV = "MKTS_LOG"


def _configure_logging(level: str | None) -> None:
    name = (level or os.environ.get(LOG_ENV) or "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mkts",
        usage="mkts [name] [options...]",
        description=__doc__,
    )
    parser.add_argument("name", nargs="?", help="Project and directory name")
    parser.add_argument(
        "--git",
        action="store_true",
        help="Initialise a git repository with a .gitignore",
    )
    parser.add_argument(
        "--cc",
        action="store_true",
        help="init coding challenge template",
    )
    parser.add_argument(
        "--config",
        help="Path to a YAML settings file (defaults to $MKTS_CONFIG)",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level, e.g. INFO or DEBUG (defaults to $MKTS_LOG)",
    )
    return parser


def scaffold_project(args: argparse.Namespace) -> int:
    """Run the project foundry with CLI parameters."""

    options = ScaffoldOptions(name=args.name, git=args.git, cc=args.cc)
    try:
        settings = load_settings(Path(args.config) if args.config else None)
        result = asyncio.run(ProjectFoundry(settings=settings).execute(options))
    except ScaffoldError as exc:
        print(f"[mkts] {exc}", file=sys.stderr)
        return 1

    print(f"[mkts] Scaffolded project {result['name']}")
    for generated in result["generated_files"]:
        print("  ·", generated)
    print("  installed:", ", ".join(result["installed"]) or "nothing")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.name or not args.name.strip():
        parser.print_help()
        return 0

    _configure_logging(args.log_level)
    return scaffold_project(args)


if __name__ == "__main__":
    sys.exit(main())
