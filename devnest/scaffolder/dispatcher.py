"""Per-folder routing to the matching setup flow."""

from __future__ import annotations

from rich.markup import escape

from devnest.models import Folder, FolderRole, ProjectContext, SetupOutcome, SetupStatus
from devnest.prompts import PromptService
from .backend import BackendSetupFlow
from .frontend import FrontendSetupFlow
from devnest.utils import print_debug, print_info


class SetupDispatcher:
    """Walks the folders in collection order and runs their setup flow.

    Frontend and backend folders get a dedicated flow; every other role,
    including values outside the known set, only gets a notice.
    """

    def __init__(
        self,
        prompts: PromptService,
        frontend: FrontendSetupFlow,
        backend: BackendSetupFlow,
    ) -> None:
        self.prompts = prompts
        self.frontend = frontend
        self.backend = backend

    def dispatch(self, context: ProjectContext, folders: list[Folder]) -> list[SetupOutcome]:
        return [self.setup_folder(context, folder) for folder in folders]

    def setup_folder(self, context: ProjectContext, folder: Folder) -> SetupOutcome:
        role = folder.known_role
        question = (
            f"Do you want to set up the {escape(folder.role_name)} "
            f"({escape(folder.name)}) folder now?"
        )
        if not self.prompts.confirm(
            question,
            default=role is FolderRole.FRONTEND,
        ):
            return SetupOutcome(folder=folder, status=SetupStatus.SKIPPED)

        if role is FolderRole.FRONTEND:
            print_info(f"Setup options for frontend: {escape(folder.name)}")
            status = self.frontend.run(context, folder.name)
        elif role is FolderRole.BACKEND:
            print_info(f"Starting backend setup for: {escape(folder.name)}")
            status = self.backend.run(context, folder.name)
        else:
            print_info(f"No specific setup defined for '{escape(folder.role_name)}' folder yet.")
            print_debug(f"folder role: {escape(repr(folder.role_name))}")
            status = SetupStatus.NO_SETUP
        return SetupOutcome(folder=folder, status=status)
