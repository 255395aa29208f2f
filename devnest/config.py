"""DevNest configuration.

Centralised, typed configuration for the scaffolder. Settings use a Pydantic
v2 model so they are validated at construction time and can be overridden
from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Fixed package sets
# ---------------------------------------------------------------------------

TAILWIND_PACKAGES: list[str] = ["tailwindcss", "@tailwindcss/vite"]
CHAKRA_PACKAGES: list[str] = [
    "@chakra-ui/react",
    "@emotion/react",
    "@emotion/styled",
    "framer-motion",
]
MATERIAL_PACKAGES: list[str] = ["@mui/material", "@emotion/react", "@emotion/styled"]
ROUTER_PACKAGE = "react-router-dom"
ICONS_PACKAGE = "react-icons"

# Config files a generator may leave behind that clash with the Vite plugin setup.
TAILWIND_CONFIG_FILES: tuple[str, ...] = ("tailwind.config.js", "tailwind.config.ts")


class DevNestConfig(BaseModel):
    """Global DevNest configuration.

    Created once by the CLI entry point and passed to every flow.
    """

    package_manager: str = Field(default="npm", min_length=1)
    frontend_generator: str = Field(
        default="vite@latest", min_length=1, description="Package passed to `<pm> create`"
    )
    backend_port: int = Field(default=5000, ge=1, le=65535)
    backend_entry_file: str = Field(default="index.js", min_length=1)
    env_file: str = Field(default=".env", min_length=1)
    frontend_structure: list[str] = Field(
        default_factory=lambda: ["components", "utils", "routes", "hooks"]
    )
    backend_structure: list[str] = Field(
        default_factory=lambda: [
            "model",
            "controller",
            "routes",
            "middleware",
            "utils",
            "config",
        ]
    )

    # ------------------------------------------------------------------
    # Command builders
    # ------------------------------------------------------------------

    def create_frontend_command(self, folder_name: str, template: str) -> list[str]:
        """``npm create vite@latest <folder> -- --template <template>``."""
        return [
            self.package_manager,
            "create",
            self.frontend_generator,
            folder_name,
            "--",
            "--template",
            template,
        ]

    def install_command(self, *packages: str) -> list[str]:
        """``npm install`` with optional package names."""
        return [self.package_manager, "install", *packages]

    def init_manifest_command(self) -> list[str]:
        """``npm init -y``."""
        return [self.package_manager, "init", "-y"]

    @property
    def backend_env(self) -> dict[str, str]:
        """Default entries written to the backend environment file."""
        return {"PORT": str(self.backend_port)}

    # ------------------------------------------------------------------
    # Environment overrides
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "DevNestConfig":
        """Build a ``DevNestConfig`` from environment variables.

        Recognised variables (all optional):
            DEVNEST_PACKAGE_MANAGER, DEVNEST_FRONTEND_GENERATOR,
            DEVNEST_BACKEND_PORT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("DEVNEST_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["DEVNEST_PACKAGE_MANAGER"]
        if os.environ.get("DEVNEST_FRONTEND_GENERATOR"):
            kwargs["frontend_generator"] = os.environ["DEVNEST_FRONTEND_GENERATOR"]
        if os.environ.get("DEVNEST_BACKEND_PORT"):
            kwargs["backend_port"] = os.environ["DEVNEST_BACKEND_PORT"]
        return cls(**kwargs)
