"""DevNest orchestrator and CLI entry point.

Runs the whole interactive session:

1. Ask for the project name.
2. Collect role-tagged folders.
3. Create the project root (must not exist) and the folders.
4. Offer a setup flow per folder, in the order they were entered.
5. Print a summary of what happened to each folder.
"""

from __future__ import annotations

import sys
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape

from devnest import __version__
from devnest.config import DevNestConfig
from devnest.filesystem import FileSystemGateway
from devnest.models import SetupOutcome
from devnest.prompts import PromptService, validate_path_segment
from devnest.scaffolder.backend import BackendSetupFlow
from devnest.scaffolder.collector import FolderCollector
from devnest.scaffolder.dispatcher import SetupDispatcher
from devnest.scaffolder.frontend import FrontendSetupFlow
from devnest.scaffolder.initializer import ProjectExistsError, ProjectInitializer
from devnest.scaffolder.templates import TemplateRenderer
from devnest.utils import (
    ExternalCommandError,
    ProcessRunner,
    console,
    print_banner,
    print_error,
    print_step,
    print_success,
    print_summary_table,
)


class DevNest:
    """One interactive scaffolding session.

    Collaborators default to the real terminal, filesystem and process
    runner; tests inject doubles.
    """

    def __init__(
        self,
        cwd: str | Path | None = None,
        config: DevNestConfig | None = None,
        prompts: PromptService | None = None,
        runner: ProcessRunner | None = None,
        fs: FileSystemGateway | None = None,
    ) -> None:
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.config = config or DevNestConfig()
        self.prompts = prompts or PromptService()
        self.runner = runner or ProcessRunner()
        self.fs = fs or FileSystemGateway()

        renderer = TemplateRenderer()
        self.collector = FolderCollector(self.prompts)
        self.initializer = ProjectInitializer(self.fs)
        self.dispatcher = SetupDispatcher(
            self.prompts,
            frontend=FrontendSetupFlow(self.config, self.prompts, self.runner, self.fs, renderer),
            backend=BackendSetupFlow(self.config, self.prompts, self.runner, self.fs, renderer),
        )

    def run(self) -> list[SetupOutcome]:
        """Run the session end to end.

        Raises:
            ProjectExistsError: If the project directory already exists.
            ExternalCommandError: If any generator or installer fails.
        """
        print_banner(
            "Every great project starts with a simple command.",
            "Welcome to DevNest, your fullstack project generator ❤️",
        )

        project_name = self.prompts.ask_text(
            "Enter your project name", validate=validate_path_segment("Project name")
        )
        folders = self.collector.collect()

        context = self.initializer.initialize(self.cwd, project_name)

        print_step("Creating folders", color="yellow")
        self.initializer.create_folders(context, folders)
        print_success("✅ Step 1: Folder creation complete!")

        print_step("Setting up each folder", color="magenta")
        outcomes = self.dispatcher.dispatch(context, folders)

        print_summary_table(
            [
                (o.folder.name, o.folder.role_name, o.status.value)
                for o in outcomes
            ],
            columns=("Folder", "Role", "Status"),
            title=f"{project_name} ({context.root_path})",
        )
        return outcomes


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``devnest`` / ``python -m devnest``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="devnest",
        description="DevNest -- interactive fullstack project scaffolder",
        epilog=(
            "Run it in the directory that should contain the new project;\n"
            "everything else is asked interactively.\n\n"
            "Environment overrides:\n"
            "  DEVNEST_PACKAGE_MANAGER, DEVNEST_FRONTEND_GENERATOR, DEVNEST_BACKEND_PORT\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.parse_args(argv)

    try:
        config = DevNestConfig.from_env()
    except ValidationError as exc:
        print_error(f"Invalid DEVNEST_* environment configuration:\n{escape(str(exc))}")
        sys.exit(2)

    try:
        DevNest(config=config).run()
    except ProjectExistsError as exc:
        print_error(f"❌ {escape(str(exc))}")
        sys.exit(1)
    except ExternalCommandError as exc:
        print_error(f"❌ {escape(str(exc))}")
        sys.exit(exc.code or 1)
    except (KeyboardInterrupt, EOFError):
        console.print()
        print_error("Aborted.")
        sys.exit(130)


if __name__ == "__main__":
    main()
