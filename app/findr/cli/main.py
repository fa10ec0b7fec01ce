"""Main CLI application entry point.

Defines the Typer application: ``findr [PATH]... [-n NAME]... [-t TYPE]...``
"""

from typing import Annotated

import typer

from findr import __version__
from findr.cli.types import TypeChoice, to_entry_types
from findr.core.log import setup_logging
from findr.search.config import SearchConfigError, build_config
from findr.search.finder import find
from findr.search.models import WalkError
from findr.utils.formatting import print_error, print_path, print_walk_error

app = typer.Typer(
    name="findr",
    help="Find filesystem entries by type and name.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"findr version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    paths: Annotated[
        list[str] | None,
        typer.Argument(
            metavar="PATH",
            help="Search paths. Defaults to the current directory.",
            show_default=False,
        ),
    ] = None,
    names: Annotated[
        list[str] | None,
        typer.Option(
            "--name",
            "-n",
            metavar="NAME",
            help="Regular expression matched against entry base names (repeatable).",
        ),
    ] = None,
    entry_types: Annotated[
        list[TypeChoice] | None,
        typer.Option(
            "--type",
            "-t",
            help="Entry type: f (file), d (directory), l (symlink) (repeatable).",
        ),
    ] = None,
    max_depth: Annotated[
        int | None,
        typer.Option(
            "--max-depth",
            min=0,
            help="Do not descend more than this many levels below a search path.",
        ),
    ] = None,
    min_depth: Annotated[
        int,
        typer.Option(
            "--min-depth",
            min=0,
            help="Do not report entries fewer than this many levels below a search path.",
        ),
    ] = 0,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log traversal details to stderr.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Recursively list entries under each PATH matching the given filters.

    Traversal errors are reported on stderr and do not stop the search.
    """
    setup_logging(verbose)

    try:
        config = build_config(
            paths,
            names,
            to_entry_types(entry_types),
            min_depth=min_depth,
            max_depth=max_depth,
        )
    except SearchConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    for observation in find(config):
        if isinstance(observation, WalkError):
            print_walk_error(observation.message)
        else:
            print_path(observation)
