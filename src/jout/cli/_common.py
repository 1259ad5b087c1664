"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from typer.core import TyperCommand

from ..config import JoutConfig, load_config

console = Console(highlight=False, soft_wrap=True)

USAGE = "Usage:\njout <out_dir>"

USAGE_EXIT_CODE = 1


class JoutCommand(TyperCommand):
    """Command whose option-parsing errors exit with status 1 like other usage errors."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = USAGE_EXIT_CODE
            raise


def fail(message: str) -> None:
    """Print an error message to stdout without markup interpretation."""
    console.print(escape(message))


def resolve_config(
    config: Optional[Path] = None,
    strategy: Optional[str] = None,
    workers: Optional[int] = None,
    timeout: Optional[float] = None,
    java_home: Optional[Path] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> JoutConfig:
    """Build settings from CLI options."""
    overrides = {
        "strategy": strategy,
        "workers": workers,
        "timeout_seconds": timeout,
        "java_home": str(java_home) if java_home is not None else None,
        "verbose": verbose,
        "quiet": quiet,
    }
    return load_config(config_file=config, **overrides)
