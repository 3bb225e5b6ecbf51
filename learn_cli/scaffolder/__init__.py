"""learn-cli scaffolder -- generates a minimal React project.

Quick usage::

    from learn_cli.config import Config
    from learn_cli.scaffolder import ProjectScaffolder

    project = await ProjectScaffolder(Config()).generate("my-app")
"""

from learn_cli.scaffolder.generator import ProjectScaffolder
from learn_cli.scaffolder.initializer import ProjectDescriptor
from learn_cli.scaffolder.installer import DependencyInstaller
from learn_cli.scaffolder.templates import TemplateRenderer

__all__ = [
    "DependencyInstaller",
    "ProjectDescriptor",
    "ProjectScaffolder",
    "TemplateRenderer",
]
