"""DevNest -- interactive fullstack project scaffolder.

Prompts for a project name and a set of role-tagged folders, creates the
directory tree, then walks each folder through a frontend (Vite + React) or
backend (Express) setup flow driven by external ``npm`` commands.

Quick usage::

    from devnest import DevNest

    DevNest(cwd=Path.cwd()).run()
"""

__version__ = "0.1.0"

from devnest.app import DevNest, main
from devnest.config import DevNestConfig

__all__ = [
    "DevNest",
    "DevNestConfig",
    "__version__",
    "main",
]
