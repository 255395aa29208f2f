"""Frontend folder setup: Vite + React with an optional UI library.

Runs the Vite generator from the project root, installs dependencies inside
the generated folder, then rewrites the starter files.  Only React is
supported; choosing another framework ends the flow for that folder without
touching the disk.
"""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape

from devnest.config import (
    CHAKRA_PACKAGES,
    ICONS_PACKAGE,
    MATERIAL_PACKAGES,
    ROUTER_PACKAGE,
    TAILWIND_CONFIG_FILES,
    TAILWIND_PACKAGES,
    DevNestConfig,
)
from devnest.filesystem import FileSystemGateway
from devnest.models import (
    FrontendChoice,
    FrontendFramework,
    Language,
    ProjectContext,
    SetupStatus,
    UILibrary,
)
from devnest.prompts import PromptService
from .templates import TemplateRenderer
from devnest.utils import ProcessRunner, print_error, print_info, print_success, print_warning

UI_LIBRARY_PACKAGES: dict[UILibrary, list[str]] = {
    UILibrary.TAILWIND: TAILWIND_PACKAGES,
    UILibrary.CHAKRA: CHAKRA_PACKAGES,
    UILibrary.MATERIAL: MATERIAL_PACKAGES,
    UILibrary.NONE: [],
}


class FrontendSetupFlow:
    """Sets up one frontend folder."""

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

    # -- Public API --------------------------------------------------------

    def run(self, context: ProjectContext, folder_name: str) -> SetupStatus:
        """Run the whole flow for *folder_name*.

        Returns:
            ``SetupStatus.UNSUPPORTED`` if a framework other than React was
            picked, otherwise ``SetupStatus.CONFIGURED``.

        Raises:
            ExternalCommandError: If any npm command fails.
        """
        framework = self._ask_framework(folder_name)
        if not framework.supported:
            print_error(
                f"Sorry, {framework.value} is not yet supported. "
                "Only React is available now."
            )
            return SetupStatus.UNSUPPORTED

        choice = FrontendChoice(
            framework=framework,
            ui_library=UILibrary(
                self.prompts.select(
                    "Choose a UI library",
                    [lib.value for lib in UILibrary],
                    default=UILibrary.TAILWIND.value,
                )
            ),
            language=Language(
                self.prompts.select(
                    "Choose language",
                    [lang.value for lang in Language],
                    default=Language.JAVASCRIPT.value,
                )
            ),
        )

        folder_path = self.generate(context, folder_name, choice.language)
        self.install_ui_library(folder_path, choice)

        if self.prompts.confirm(
            "Create folder structure inside src "
            f"({', '.join(self.config.frontend_structure)})?",
            default=True,
        ):
            self.create_structure(folder_path)

        self.write_app(folder_path, context.project_name, choice.language)
        self._install_extras(folder_path)

        if self.prompts.confirm("Do you want to set up backend now?", default=True):
            print_info("Starting backend setup (coming next)...")

        print_success(f"✅ {escape(folder_name)} frontend is all set!")
        return SetupStatus.CONFIGURED

    # -- Steps -------------------------------------------------------------

    def generate(self, context: ProjectContext, folder_name: str, language: Language) -> Path:
        """Run the Vite generator from the root, then ``npm install`` inside."""
        print_info(f"Creating Vite + React ({language.value}) in {escape(folder_name)}...")
        self.runner.run(
            self.config.create_frontend_command(folder_name, language.vite_template),
            cwd=context.root_path,
        )
        folder_path = context.folder_path(folder_name)
        self.runner.run(self.config.install_command(), cwd=folder_path)
        return folder_path

    def install_ui_library(self, folder_path: Path, choice: FrontendChoice) -> None:
        packages = UI_LIBRARY_PACKAGES[choice.ui_library]
        if packages:
            print_info(f"Installing {choice.ui_library.value}...")
            self.runner.run(self.config.install_command(*packages), cwd=folder_path)
        if choice.ui_library is UILibrary.TAILWIND:
            self.configure_tailwind(folder_path, choice.language)

    def configure_tailwind(self, folder_path: Path, language: Language) -> None:
        """Wire Tailwind through the Vite plugin only.

        The main stylesheet becomes a single import, the App stylesheet is
        emptied, and any generated ``tailwind.config.*`` is removed.
        """
        src = folder_path / "src"
        self.fs.write_text(src / "index.css", self.renderer.render("frontend/index.css.j2", {}))
        self.fs.write_text(src / "App.css", "")
        self.fs.write_text(
            folder_path / f"vite.config.{language.config_ext}",
            self.renderer.render("frontend/vite.config.j2", {}),
        )
        for name in TAILWIND_CONFIG_FILES:
            if self.fs.remove_file(folder_path / name):
                print_warning(f"Removed {name} (the Vite plugin handles configuration)")
        print_success("✅ Tailwind CSS set up with @import and plugin only.")

    def create_structure(self, folder_path: Path) -> None:
        for name in self.config.frontend_structure:
            if self.fs.create_dir(folder_path / "src" / name):
                print_success(f"  ✔ Created src/{name}")

    def write_app(self, folder_path: Path, project_name: str, language: Language) -> Path:
        return self.fs.write_text(
            folder_path / "src" / f"App.{language.source_ext}",
            self.renderer.render("frontend/App.jsx.j2", {"project_name": project_name}),
        )

    # -- Internals ---------------------------------------------------------

    def _ask_framework(self, folder_name: str) -> FrontendFramework:
        labels = {fw.label: fw for fw in FrontendFramework}
        answer = self.prompts.select(
            f"Select frontend framework for {escape(folder_name)}",
            list(labels),
            default=FrontendFramework.REACT.label,
        )
        return labels[answer]

    def _install_extras(self, folder_path: Path) -> None:
        if self.prompts.confirm(f"Install {ROUTER_PACKAGE}?", default=True):
            self.runner.run(self.config.install_command(ROUTER_PACKAGE), cwd=folder_path)
        if self.prompts.confirm(f"Install {ICONS_PACKAGE}?", default=True):
            self.runner.run(self.config.install_command(ICONS_PACKAGE), cwd=folder_path)
