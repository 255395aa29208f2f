"""DevNest scaffolder -- folder collection, project creation and setup flows.

Quick usage::

    from devnest.scaffolder import FolderCollector, ProjectInitializer

    folders = FolderCollector(prompts).collect()
    context = ProjectInitializer().initialize(Path.cwd(), "shop")
"""

from devnest.scaffolder.backend import BackendSetupFlow
from devnest.scaffolder.collector import FolderCollector
from devnest.scaffolder.dispatcher import SetupDispatcher
from devnest.scaffolder.frontend import FrontendSetupFlow
from devnest.scaffolder.initializer import ProjectExistsError, ProjectInitializer
from devnest.scaffolder.templates import TemplateRenderer

__all__ = [
    "BackendSetupFlow",
    "FolderCollector",
    "FrontendSetupFlow",
    "ProjectExistsError",
    "ProjectInitializer",
    "SetupDispatcher",
    "TemplateRenderer",
]
