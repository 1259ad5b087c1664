"""CLI entry point."""

import typer

app = typer.Typer(
    name="jout",
    help="jout - size, class and bytecode statistics for compiled JVM output",
    add_completion=False,
    rich_markup_mode="rich",
)


from .analyze import main as _main  # noqa: F401, E402
