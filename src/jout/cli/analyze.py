"""The jout command: analyze one output directory and print the report."""

from pathlib import Path
from typing import Optional

import typer

from .. import __version__
from ..core import analyze
from ..exceptions import (
    ConfigurationError,
    DirectoryTraversalError,
    DisassemblerNotFoundError,
    InvalidPathError,
    ProcessError,
    UsageError,
)
from ..formatters import JsonFormatter, TextFormatter
from ..logging_config import get_logger, setup_logging
from . import app
from ._common import USAGE, JoutCommand, console, fail, resolve_config

logger = get_logger(__name__)


def _single_argument(output_dir: Optional[str], extra: list[str]) -> str:
    if output_dir is None:
        raise UsageError("missing output directory")
    if extra:
        raise UsageError(f"unexpected arguments: {' '.join(extra)}")
    return output_dir


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"jout {__version__}")
        raise typer.Exit()


@app.command(cls=JoutCommand, context_settings={"allow_extra_args": True})
def main(
    ctx: typer.Context,
    output_dir: Optional[str] = typer.Argument(
        None,
        metavar="OUT_DIR",
        help="Directory of compiled .class files",
        show_default=False,
    ),
    strategy: Optional[str] = typer.Option(
        None,
        "--strategy",
        "-s",
        help="How to run javap: [bold]parallel[/bold] (per chunk of files) or [bold]batch[/bold] (one run, one pattern per directory)",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Maximum number of concurrent javap processes",
        min=1,
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Kill a javap process after this many seconds",
    ),
    java_home: Optional[Path] = typer.Option(
        None,
        "--java-home",
        help="JDK directory containing bin/javap (default: JAVA_HOME or the java on PATH)",
        file_okay=False,
        dir_okay=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="TOML configuration file",
        dir_okay=False,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the report as JSON",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write logs to this file"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Report output size, class counts and bytecode instruction counts.

    [bold cyan]Examples:[/bold cyan]

      jout build/classes

      jout --strategy batch target/classes

      jout --json --workers 8 out/production
    """
    try:
        output_dir = _single_argument(output_dir, ctx.args)
    except UsageError:
        console.print(USAGE)
        raise typer.Exit(1)

    try:
        settings = resolve_config(
            config=config,
            strategy=strategy,
            workers=workers,
            timeout=timeout,
            java_home=java_home,
            verbose=verbose,
            quiet=quiet,
        )
    except ConfigurationError as e:
        fail(str(e))
        raise typer.Exit(1)

    setup_logging(settings.verbosity, log_file=str(log_file) if log_file else None)

    if not Path(output_dir).exists():
        fail(f"The specified output directory '{output_dir}' does not exist.")
        raise typer.Exit(1)

    if not json_output:
        console.print("Gathering information...")
        console.print()

    try:
        report = analyze(output_dir, settings)
    except InvalidPathError:
        fail(f"The specified output directory '{output_dir}' does not exist.")
        raise typer.Exit(1)
    except DisassemblerNotFoundError as e:
        fail(f"It seems like you do not have 'javap' installed on your system ({e.executable}).")
        raise typer.Exit(1)
    except DirectoryTraversalError as e:
        logger.debug("Traversal failed", exc_info=True)
        fail(f"Failed to get all files inside '{output_dir}': {e.reason}.")
        raise typer.Exit(1)
    except ProcessError as e:
        logger.debug("javap failed: %s", e, exc_info=True)
        fail("Failed to gather bytecode information.")
        raise typer.Exit(1)

    formatter = JsonFormatter() if json_output else TextFormatter()
    formatter.render(report)
