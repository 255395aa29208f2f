"""Integration tests for a full scaffolding session with real subprocesses.

A small stand-in ``npm`` executable (a Python script) is written to a temp
directory and configured as the package manager, so the real
``ProcessRunner`` spawns processes, streams their output and relies on the
working directory it passes, without needing Node.js installed.
"""

from __future__ import annotations

import json
import os
import stat
import sys
import textwrap
from pathlib import Path

import pytest

from devnest.app import DevNest
from devnest.config import DevNestConfig
from devnest.models import SetupStatus
from devnest.utils import ExternalCommandError, ProcessRunner

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(os.name == "nt", reason="shebang scripts are POSIX-only"),
]


FAKE_NPM = textwrap.dedent(
    """\
    #!{python}
    import json, os, sys
    from pathlib import Path

    args = sys.argv[1:]
    cwd = Path.cwd()
    with open(os.environ["FAKE_NPM_LOG"], "a") as log:
        log.write(json.dumps({{"args": args, "cwd": str(cwd)}}) + "\\n")

    if os.environ.get("FAKE_NPM_FAIL") and os.environ["FAKE_NPM_FAIL"] in " ".join(args):
        sys.exit(42)

    if args[:2] == ["create", "vite@latest"]:
        folder = cwd / args[2]
        ts = args[-1].endswith("-ts")
        (folder / "src").mkdir(parents=True, exist_ok=True)
        (folder / "package.json").write_text("{{}}")
        (folder / ("vite.config.ts" if ts else "vite.config.js")).write_text("// vite")
        (folder / "tailwind.config.js").write_text("// tw")
        (folder / "src" / "index.css").write_text("body {{}}")
        (folder / "src" / "App.css").write_text(".app {{}}")
    elif args[:2] == ["init", "-y"]:
        (cwd / "package.json").write_text(json.dumps({{"name": cwd.name}}))
    print("fake npm", *args)
    """
)


@pytest.fixture
def fake_npm(tmp_path: Path, monkeypatch) -> Path:
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "npm"
    script.write_text(FAKE_NPM.format(python=sys.executable))
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    log = tmp_path / "npm-log.jsonl"
    monkeypatch.setenv("FAKE_NPM_LOG", str(log))
    return script


def _log(tmp_path: Path) -> list[dict]:
    path = tmp_path / "npm-log.jsonl"
    if not path.exists():
        return []
    return [json.loads(line) for line in path.read_text().splitlines()]


class TestScaffoldEndToEnd:
    def test_frontend_and_backend(self, tmp_path: Path, fake_npm: Path, make_prompts):
        work = tmp_path / "work"
        work.mkdir()
        prompts = make_prompts(
            "shop",
            "frontend", "client", True,
            "backend", "server", False,
            True, "React", "Tailwind CSS", "JavaScript", True, True, True, False,
            True, ["express"],
        )
        config = DevNestConfig(package_manager=str(fake_npm))
        outcomes = DevNest(
            cwd=work, config=config, prompts=prompts, runner=ProcessRunner(echo=False)
        ).run()

        root = work / "shop"
        assert [o.status for o in outcomes] == [SetupStatus.CONFIGURED, SetupStatus.CONFIGURED]

        calls = _log(tmp_path)
        assert [c["args"] for c in calls] == [
            ["create", "vite@latest", "client", "--", "--template", "react"],
            ["install"],
            ["install", "tailwindcss", "@tailwindcss/vite"],
            ["install", "react-router-dom"],
            ["install", "react-icons"],
            ["init", "-y"],
            ["install", "express"],
        ]
        assert Path(calls[0]["cwd"]) == root
        assert all(Path(c["cwd"]) == root / "client" for c in calls[1:5])
        assert all(Path(c["cwd"]) == root / "server" for c in calls[5:])

        client = root / "client"
        assert (client / "src" / "index.css").read_text() == '@import "tailwindcss";\n'
        assert (client / "src" / "App.css").read_text() == ""
        assert not (client / "tailwind.config.js").exists()
        assert "Welcome to shop" in (client / "src" / "App.jsx").read_text(encoding="utf-8")
        assert (client / "src" / "components").is_dir()

        server = root / "server"
        assert (server / "package.json").exists()
        assert (server / ".env").read_text() == "PORT=5000\n"
        assert {p.name for p in server.iterdir() if p.is_dir()} == {
            "model", "controller", "routes", "middleware", "utils", "config",
        }

    def test_failing_command_aborts_run(self, tmp_path: Path, fake_npm: Path, make_prompts, monkeypatch):
        monkeypatch.setenv("FAKE_NPM_FAIL", "init")
        work = tmp_path / "work"
        work.mkdir()
        prompts = make_prompts("shop", "backend", "api", True, "backend", "jobs", False, True)
        config = DevNestConfig(package_manager=str(fake_npm))

        with pytest.raises(ExternalCommandError) as exc_info:
            DevNest(cwd=work, config=config, prompts=prompts, runner=ProcessRunner(echo=False)).run()

        assert exc_info.value.code == 42
        assert len(_log(tmp_path)) == 1
        assert (work / "shop" / "api").is_dir()
        assert (work / "shop" / "jobs").is_dir()
        assert not (work / "shop" / "api" / ".env").exists()
