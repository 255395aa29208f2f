"""Interactive collection of the folders to scaffold."""

from __future__ import annotations

from devnest.models import Folder, FolderRole
from devnest.prompts import PromptService, validate_path_segment


class FolderCollector:
    """Asks for role + name pairs until the user declines to add another.

    Always returns at least one folder, in the order they were entered.
    """

    def __init__(self, prompts: PromptService) -> None:
        self.prompts = prompts

    def collect(self) -> list[Folder]:
        folders: list[Folder] = []
        while True:
            folders.append(self._ask_folder())
            if not self.prompts.confirm(
                "Do you want to create another folder?", default=False
            ):
                return folders

    def _ask_folder(self) -> Folder:
        role = self.prompts.select(
            "What kind of folder do you want to create?",
            [role.value for role in FolderRole],
        )
        name = self.prompts.ask_text(
            "Enter the folder name", validate=validate_path_segment("Folder name")
        )
        return Folder(role=role, name=name)
