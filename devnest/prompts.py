"""Interactive prompting built on ``rich.prompt``.

``PromptService`` is the only place that reads from the terminal.  Flows ask
it for text, single choices, confirmations and multi-selections; tests replace
it with a scripted double exposing the same four methods.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from devnest.utils import console as default_console

Validator = Callable[[str], str | None]


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------


def validate_required(label: str) -> Validator:
    """Reject empty (or whitespace-only) answers."""

    def _validate(value: str) -> str | None:
        return None if value.strip() else f"{label} is required."

    return _validate


def validate_path_segment(label: str) -> Validator:
    """Require a single, non-empty path component that npm cannot mistake for an option."""
    required = validate_required(label)

    def _validate(value: str) -> str | None:
        error = required(value)
        if error:
            return error
        value = value.strip()
        if "/" in value or "\\" in value:
            return f"{label} must not contain path separators."
        if value in (".", ".."):
            return f"{label} must not be '.' or '..'."
        if value.startswith("-"):
            return f"{label} must not start with '-'."
        return None

    return _validate


# ---------------------------------------------------------------------------
# Choice parsing
# ---------------------------------------------------------------------------


def match_choice(raw: str, choices: Sequence[str]) -> str | None:
    """Resolve an answer to one of *choices*.

    Accepts a 1-based index or the choice text (case-insensitive).
    """
    raw = raw.strip()
    if not raw:
        return None
    if raw.isdigit():
        index = int(raw)
        if 1 <= index <= len(choices):
            return choices[index - 1]
        return None
    for choice in choices:
        if choice.lower() == raw.lower():
            return choice
    return None


def match_choices(raw: str, choices: Sequence[str]) -> list[str] | None:
    """Resolve a comma-separated answer to a subset of *choices*.

    Returns the selections in *choices* order without duplicates, an empty
    list for a blank answer, or ``None`` if any entry is unknown.
    """
    tokens = [token for token in (part.strip() for part in raw.split(",")) if token]
    picked: set[str] = set()
    for token in tokens:
        match = match_choice(token, choices)
        if match is None:
            return None
        picked.add(match)
    return [choice for choice in choices if choice in picked]


# ---------------------------------------------------------------------------
# PromptService
# ---------------------------------------------------------------------------


class PromptService:
    """Terminal question/answer service."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def ask_text(
        self,
        message: str,
        validate: Validator | None = None,
        default: str | None = None,
    ) -> str:
        """Ask for free text, re-prompting until *validate* accepts it."""
        kwargs = {} if default is None else {"default": default}
        while True:
            answer = Prompt.ask(message, console=self.console, **kwargs)
            answer = (answer or "").strip()
            error = validate(answer) if validate else None
            if error is None:
                return answer
            self.console.print(f"[bold red]{escape(error)}[/bold red]")

    def confirm(self, message: str, default: bool = False) -> bool:
        return Confirm.ask(message, default=default, console=self.console)

    def select(
        self,
        message: str,
        choices: Sequence[str],
        default: str | None = None,
    ) -> str:
        """Ask for exactly one of *choices* (by number or by name)."""
        self._print_choices(choices)
        kwargs = {}
        if default is not None:
            kwargs["default"] = str(list(choices).index(default) + 1)
        while True:
            answer = Prompt.ask(message, console=self.console, **kwargs)
            match = match_choice(answer or "", choices)
            if match is not None:
                return match
            self.console.print(
                f"[bold red]Please enter a number between 1 and {len(choices)} "
                "or one of the listed names.[/bold red]"
            )

    def checkbox(self, message: str, choices: Sequence[str]) -> list[str]:
        """Ask for any subset of *choices* as a comma-separated list."""
        self._print_choices(choices)
        while True:
            answer = Prompt.ask(
                f"{message} (comma-separated, blank for none)",
                console=self.console,
                default="",
                show_default=False,
            )
            matches = match_choices(answer or "", choices)
            if matches is not None:
                return matches
            self.console.print("[bold red]Unknown selection, try again.[/bold red]")

    def _print_choices(self, choices: Sequence[str]) -> None:
        for index, choice in enumerate(choices, start=1):
            self.console.print(f"  [cyan]{index})[/cyan] {escape(choice)}")
