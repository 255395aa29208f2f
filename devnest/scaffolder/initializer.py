"""Project root creation.

The root directory must not exist yet: DevNest never scaffolds into an
existing project.  Once created, every later path is resolved against the
returned ``ProjectContext``.
"""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape

from devnest.filesystem import FileSystemGateway
from devnest.models import Folder, ProjectContext
from devnest.utils import print_success


class ProjectExistsError(Exception):
    """Raised when the project root is already present on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Project folder already exists: {path}. Choose a different name."
        )


class ProjectInitializer:
    """Creates the project root and the collected top-level folders."""

    def __init__(self, fs: FileSystemGateway | None = None) -> None:
        self.fs = fs or FileSystemGateway()

    def initialize(self, cwd: str | Path, project_name: str) -> ProjectContext:
        """Create ``<cwd>/<project_name>`` and return its context.

        Raises:
            ProjectExistsError: If anything already exists at that path.
                Nothing is created in that case.
        """
        root = Path(cwd).absolute() / project_name
        if self.fs.exists(root):
            raise ProjectExistsError(root)
        self.fs.create_dir(root)
        return ProjectContext(project_name=project_name, root_path=root)

    def create_folders(self, context: ProjectContext, folders: list[Folder]) -> list[Path]:
        """Create each folder under the root, skipping names already present.

        Returns:
            The paths that were actually created, in folder order.
        """
        created: list[Path] = []
        for folder in folders:
            path = context.folder_path(folder.name)
            if self.fs.create_dir(path):
                print_success(f"  ✔ {escape(folder.name)} ({escape(folder.role_name)})")
                created.append(path)
        return created
