"""Data model for a scaffolding run.

Closed enumerations for every fixed choice (folder roles, frameworks, UI
libraries, languages, backend dependencies) plus the immutable records that
flow from folder collection through to the per-folder setup flows.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class FolderRole(str, Enum):
    FRONTEND = "frontend"
    BACKEND = "backend"
    ADMIN = "admin"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Any) -> "FolderRole | None":
        """Return the matching role, ignoring case and surrounding whitespace.

        Returns ``None`` for anything that is not one of the known roles.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class FrontendFramework(str, Enum):
    REACT = "React"
    NEXT = "Next.js"
    VUE = "Vue"

    @property
    def supported(self) -> bool:
        return self is FrontendFramework.REACT

    @property
    def label(self) -> str:
        """Prompt label; unsupported frameworks are marked as upcoming."""
        return self.value if self.supported else f"{self.value} (coming soon)"


class UILibrary(str, Enum):
    TAILWIND = "Tailwind CSS"
    CHAKRA = "Chakra UI"
    MATERIAL = "Material UI"
    NONE = "None"


class Language(str, Enum):
    JAVASCRIPT = "JavaScript"
    TYPESCRIPT = "TypeScript"

    @property
    def vite_template(self) -> str:
        return "react-ts" if self is Language.TYPESCRIPT else "react"

    @property
    def source_ext(self) -> str:
        return "tsx" if self is Language.TYPESCRIPT else "jsx"

    @property
    def config_ext(self) -> str:
        return "ts" if self is Language.TYPESCRIPT else "js"


class BackendDependency(str, Enum):
    EXPRESS = "express"
    NODEMON = "nodemon"


class SetupStatus(str, Enum):
    CONFIGURED = "configured"
    SKIPPED = "skipped"
    UNSUPPORTED = "unsupported"
    NO_SETUP = "no-setup"


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


class Folder(BaseModel):
    """One directory to scaffold, tagged with its role.

    ``role`` is normally a ``FolderRole``; a value outside the known set is
    kept as the raw string so the dispatcher can report it instead of failing.
    """

    model_config = ConfigDict(frozen=True)

    role: FolderRole | str = Field(union_mode="left_to_right")
    name: str = Field(..., min_length=1)

    @field_validator("role", mode="before")
    @classmethod
    def _normalize_role(cls, value: Any) -> Any:
        return FolderRole.parse(value) or value

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Folder name is required.")
        return value

    @property
    def known_role(self) -> FolderRole | None:
        return self.role if isinstance(self.role, FolderRole) else None

    @property
    def role_name(self) -> str:
        return self.role.value if isinstance(self.role, FolderRole) else str(self.role)


class ProjectContext(BaseModel):
    """The project being scaffolded and its absolute root directory.

    Every flow resolves paths through this object instead of changing the
    process working directory.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., min_length=1)
    root_path: Path

    @field_validator("root_path")
    @classmethod
    def _absolute_root(cls, value: Path) -> Path:
        return Path(value).absolute()

    def resolve(self, *parts: str) -> Path:
        """Return an absolute path under the project root."""
        return self.root_path.joinpath(*parts)

    def folder_path(self, folder_name: str) -> Path:
        return self.resolve(folder_name)


class FrontendChoice(BaseModel):
    model_config = ConfigDict(frozen=True)

    framework: FrontendFramework = FrontendFramework.REACT
    ui_library: UILibrary = UILibrary.TAILWIND
    language: Language = Language.JAVASCRIPT


class BackendChoice(BaseModel):
    model_config = ConfigDict(frozen=True)

    selected_dependencies: list[BackendDependency] = Field(default_factory=list)

    @property
    def packages(self) -> list[str]:
        return [dep.value for dep in self.selected_dependencies]


class SetupOutcome(BaseModel):
    """What happened to one folder during the setup phase."""

    model_config = ConfigDict(frozen=True)

    folder: Folder
    status: SetupStatus
    detail: str = ""
