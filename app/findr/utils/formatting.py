"""Rich console formatting utilities.

Matching paths go to stdout, colored by entry type only when stdout
is a terminal; piped output stays one raw path per line. Diagnostics
go to stderr.
"""

import typer
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from findr.core.colors import load_colors, path_style
from findr.search.models import WalkEntry

# Shared console instances (colors loaded once at import)
_theme = load_colors().to_theme()
console = Console(theme=_theme, highlight=False)
err_console = Console(theme=_theme, stderr=True)


def print_path(entry: WalkEntry) -> None:
    """Print a matching entry's path on stdout."""
    if console.is_terminal and _is_encodable(entry.path):
        console.print(Text(entry.path, style=path_style(entry.entry_type)), soft_wrap=True)
    else:
        typer.echo(entry.path)


def _is_encodable(path: str) -> bool:
    """Names that are not valid UTF-8 (surrogate escapes) bypass Rich."""
    try:
        path.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def print_error(message: str) -> None:
    """Print a fatal error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}", soft_wrap=True)


def print_walk_error(message: str) -> None:
    """Print a non-fatal traversal error on a single line."""
    err_console.print(f"[muted]findr:[/] [warning]{escape(message)}[/]", soft_wrap=True)
