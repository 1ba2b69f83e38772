"""Shared utility functions for gogo.

Provides the Rich console used for all user-facing output, the coloured
message helpers, a key/value summary table, and a few name and file-system
helpers shared by the scaffolder and the CLI.
"""

from __future__ import annotations

import re
import stat
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def go_package_name(name: str) -> str:
    """Convert a project name into a valid Go package identifier.

    * Lowercases the input.
    * Drops every character that is not a letter, digit or underscore.
    * Prefixes ``pkg`` when the result would start with a digit or be empty.

    Examples::

        go_package_name("My-Lib") -> "mylib"
        go_package_name("2fa")    -> "pkg2fa"
    """
    ident = re.sub(r"[^a-z0-9_]", "", name.lower())
    if not ident or ident[0].isdigit():
        ident = f"pkg{ident}"
    return ident


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def write_text(path: str | Path, content: str) -> Path:
    """Create parent directories and write *content* as UTF-8."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding="utf-8")
    return file_path


def make_executable(path: Path) -> None:
    """Set the executable bits on a file."""
    current = path.stat().st_mode
    path.chmod(current | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message to stderr."""
    err_console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
