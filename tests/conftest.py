"""Shared pytest fixtures for the DevNest test suite.

Provides reusable fixtures for:
- A scripted stand-in for the interactive prompt service
- A recording process runner that never spawns npm
- A fake Vite generator that lays down the files ``npm create vite`` would
- Project contexts rooted in ``tmp_path``
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest

from devnest.config import DevNestConfig
from devnest.filesystem import FileSystemGateway
from devnest.models import ProjectContext
from devnest.scaffolder.templates import TemplateRenderer
from devnest.utils import ExternalCommandError


# ---------------------------------------------------------------------------
# Prompt double
# ---------------------------------------------------------------------------


class ScriptedPrompts:
    """Answers prompts from a fixed script, in call order.

    Every call is recorded as ``(method, message)`` in ``asked`` so tests can
    assert on the sequence of questions.  ``ask_text`` runs the validator and
    consumes the next answer when one is rejected, like a re-prompt would.
    """

    def __init__(self, answers: Sequence[Any]) -> None:
        self.answers = list(answers)
        self.asked: list[tuple[str, str]] = []
        self.defaults: dict[str, Any] = {}
        self.rejected: list[str] = []

    def _next(self, method: str, message: str) -> Any:
        self.asked.append((method, message))
        if not self.answers:
            raise AssertionError(f"No scripted answer left for {method}: {message!r}")
        return self.answers.pop(0)

    def ask_text(self, message: str, validate: Callable | None = None, default: str | None = None) -> str:
        while True:
            answer = str(self._next("ask_text", message)).strip()
            error = validate(answer) if validate else None
            if error is None:
                return answer
            self.rejected.append(error)

    def confirm(self, message: str, default: bool = False) -> bool:
        self.defaults[message] = default
        answer = self._next("confirm", message)
        assert isinstance(answer, bool), f"Expected bool for {message!r}, got {answer!r}"
        return answer

    def select(self, message: str, choices: Sequence[str], default: str | None = None) -> str:
        answer = self._next("select", message)
        assert answer in choices, f"{answer!r} not in {list(choices)!r}"
        return answer

    def checkbox(self, message: str, choices: Sequence[str]) -> list[str]:
        answer = list(self._next("checkbox", message))
        assert all(a in choices for a in answer), f"{answer!r} not within {list(choices)!r}"
        return answer

    @property
    def messages(self) -> list[str]:
        return [message for _, message in self.asked]


# ---------------------------------------------------------------------------
# Process runner double
# ---------------------------------------------------------------------------


class RecordingRunner:
    """Records every command instead of running it.

    ``hooks`` are called with ``(args, cwd)`` before recording so a test can
    simulate a command's side effects; ``fail_on`` makes any command whose
    joined text contains the substring raise ``ExternalCommandError``.
    """

    def __init__(self, fail_on: str | None = None, fail_code: int = 1) -> None:
        self.calls: list[tuple[list[str], Path]] = []
        self.hooks: list[Callable[[list[str], Path], None]] = []
        self.fail_on = fail_on
        self.fail_code = fail_code

    def run(self, args: Sequence[str], cwd: str | Path) -> None:
        args = list(args)
        cwd = Path(cwd)
        command = " ".join(args)
        if self.fail_on and self.fail_on in command:
            raise ExternalCommandError(self.fail_code, command)
        for hook in self.hooks:
            hook(args, cwd)
        self.calls.append((args, cwd))

    @property
    def commands(self) -> list[str]:
        return [" ".join(args) for args, _ in self.calls]


def fake_vite(args: list[str], cwd: Path) -> None:
    """Lay down the files ``npm create vite <name> -- --template <t>`` creates."""
    if args[1:3] != ["create", "vite@latest"]:
        return
    folder = cwd / args[3]
    template = args[-1]
    ts = template.endswith("-ts")
    src = folder / "src"
    src.mkdir(parents=True, exist_ok=True)
    (folder / "package.json").write_text('{"name": "%s"}\n' % args[3], encoding="utf-8")
    (folder / f"vite.config.{'ts' if ts else 'js'}").write_text(
        "export default defineConfig({ plugins: [react()] })\n", encoding="utf-8"
    )
    (folder / "tailwind.config.js").write_text("module.exports = {}\n", encoding="utf-8")
    (src / "index.css").write_text(":root { color: black; }\nbody { margin: 0; }\n", encoding="utf-8")
    (src / "App.css").write_text(".logo { height: 6em; }\n", encoding="utf-8")
    (src / f"App.{'tsx' if ts else 'jsx'}").write_text("// generated\n", encoding="utf-8")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def config() -> DevNestConfig:
    return DevNestConfig()


@pytest.fixture
def fs() -> FileSystemGateway:
    return FileSystemGateway()


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def vite_runner() -> RecordingRunner:
    """Recording runner that simulates the Vite generator's output."""
    r = RecordingRunner()
    r.hooks.append(fake_vite)
    return r


@pytest.fixture
def project(tmp_path: Path) -> ProjectContext:
    """A created project root ``<tmp>/shop``."""
    root = tmp_path / "shop"
    root.mkdir()
    return ProjectContext(project_name="shop", root_path=root)


@pytest.fixture
def make_prompts() -> Callable[..., ScriptedPrompts]:
    def _make(*answers: Any) -> ScriptedPrompts:
        return ScriptedPrompts(answers)

    return _make


@pytest.fixture
def make_runner() -> Callable[..., RecordingRunner]:
    """Factory for runners that fail on a given command substring."""

    def _make(fail_on: str | None = None, fail_code: int = 1, vite: bool = True) -> RecordingRunner:
        r = RecordingRunner(fail_on=fail_on, fail_code=fail_code)
        if vite:
            r.hooks.append(fake_vite)
        return r

    return _make
