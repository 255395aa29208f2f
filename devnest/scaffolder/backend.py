"""Backend folder setup: npm manifest, Express dependencies, starter layout."""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape

from devnest.config import DevNestConfig
from devnest.filesystem import FileSystemGateway
from devnest.models import BackendChoice, BackendDependency, ProjectContext, SetupStatus
from devnest.prompts import PromptService
from .templates import TemplateRenderer
from devnest.utils import ProcessRunner, print_info, print_success


class BackendSetupFlow:
    """Sets up one backend folder.

    The folder always ends up with the fixed set of subdirectories, an
    environment file and an entry point, whichever dependencies were picked.
    """

    def __init__(
        self,
        config: DevNestConfig,
        prompts: PromptService,
        runner: ProcessRunner,
        fs: FileSystemGateway | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.prompts = prompts
        self.runner = runner
        self.fs = fs or FileSystemGateway()
        self.renderer = renderer or TemplateRenderer()

    def run(self, context: ProjectContext, folder_name: str) -> SetupStatus:
        folder_path = context.folder_path(folder_name)
        print_info(f"Setting up backend in {escape(folder_name)}...")

        self.runner.run(self.config.init_manifest_command(), cwd=folder_path)

        choice = self.ask_dependencies()
        if choice.packages:
            self.runner.run(self.config.install_command(*choice.packages), cwd=folder_path)
            print_success(f"✅ Installed: {', '.join(choice.packages)}")

        self.create_structure(folder_path)
        self.write_env(folder_path)
        self.write_entry_point(folder_path)
        print_success(f"✅ {self.config.backend_entry_file} and {self.config.env_file} created")

        print_success(f"✅ Backend setup complete for {escape(folder_name)}!")
        return SetupStatus.CONFIGURED

    def ask_dependencies(self) -> BackendChoice:
        selected = self.prompts.checkbox(
            "Install basic backend dependencies?",
            [dep.value for dep in BackendDependency],
        )
        return BackendChoice(selected_dependencies=[BackendDependency(s) for s in selected])

    def create_structure(self, folder_path: Path) -> None:
        for name in self.config.backend_structure:
            if self.fs.create_dir(folder_path / name):
                print_success(f"  ✔ Created {name}/")

    def write_env(self, folder_path: Path) -> Path:
        return self.fs.write_text(
            folder_path / self.config.env_file,
            self.renderer.render("backend/env.j2", {"env": self.config.backend_env}),
        )

    def write_entry_point(self, folder_path: Path) -> Path:
        return self.fs.write_text(
            folder_path / self.config.backend_entry_file,
            self.renderer.render("backend/index.js.j2", {"port": self.config.backend_port}),
        )
