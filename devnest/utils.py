"""Shared utility functions for DevNest.

Provides synchronous external command execution and Rich-based console
output helpers.  Every external command runs with an explicit working
directory; nothing in DevNest changes the process cwd.
"""

from __future__ import annotations

import os
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# External command execution
# ---------------------------------------------------------------------------


class ExternalCommandError(Exception):
    """Raised when an external command exits with a non-zero code."""

    def __init__(self, code: int, command: str, message: str = "") -> None:
        self.code = code
        self.command = command
        super().__init__(message or f"Command failed (exit {code}): {command}")


def _resolve_executable(args: Sequence[str]) -> list[str]:
    """Resolve the program through PATH so ``npm.cmd`` is found on Windows."""
    cmd = list(args)
    if os.name == "nt" and cmd:
        found = shutil.which(cmd[0])
        if found:
            cmd[0] = found
    return cmd


def run_command(args: Sequence[str], cwd: str | Path) -> int:
    """Run a command synchronously, streaming its output to the terminal.

    The child inherits stdin/stdout/stderr so interactive generators keep
    working.  There is no timeout: the call blocks until the process exits.

    Args:
        args: Program and arguments.
        cwd: Working directory for the child process.

    Returns:
        The exit code (always ``0``).

    Raises:
        ExternalCommandError: If the program is missing (code 127) or exits
            with a non-zero code.
    """
    cmd = _resolve_executable(args)
    cmd_str = " ".join(args)
    try:
        completed = subprocess.run(cmd, cwd=str(cwd))
    except FileNotFoundError as exc:
        raise ExternalCommandError(
            127, cmd_str, f"Command not found: {args[0]} ({exc})"
        ) from exc

    if completed.returncode != 0:
        raise ExternalCommandError(completed.returncode, cmd_str)
    return completed.returncode


class ProcessRunner:
    """Runs external commands one at a time and echoes what it runs."""

    def __init__(self, echo: bool = True) -> None:
        self.echo = echo

    def run(self, args: Sequence[str], cwd: str | Path) -> None:
        if self.echo:
            console.print(f"[dim]$ {escape(' '.join(args))}  ({escape(str(cwd))})[/dim]")
        run_command(args, cwd)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(title: str, subtitle: str = "") -> None:
    """Print the welcome panel shown before the first prompt."""
    body = f"[bold green]{title}[/bold green]"
    if subtitle:
        body += f"\n[cyan]{subtitle}[/cyan]"
    console.print()
    console.print(Panel(body, border_style="green", expand=False))
    console.print()


def print_step(title: str, color: str = "bright_blue") -> None:
    """Print a full-width section rule."""
    console.print()
    console.print(Rule(f"[bold {color}] {title} [/bold {color}]", style=color))
    console.print()


def print_summary_table(
    rows: Sequence[Sequence[str]],
    columns: Sequence[str],
    title: str = "Summary",
) -> None:
    """Print a table with the given column headers."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for index, column in enumerate(columns):
        table.add_column(column, style="dim" if index == 0 else None, no_wrap=index == 0)

    for row in rows:
        table.add_row(*(str(cell) for cell in row))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_info(message: str) -> None:
    console.print(f"[cyan]{message}[/cyan]")


def print_debug(message: str) -> None:
    console.print(f"[dim]{message}[/dim]")
