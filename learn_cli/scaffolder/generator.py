"""Main scaffolding orchestrator.

Runs the stages of a scaffold in order against one target directory:
directory guard, package-manager pre-flight, project initialisation,
dependency installation and template writing.  The resolved project root
is passed to every stage explicitly; the process working directory is
never changed.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.markup import escape

from learn_cli.config import Config
from learn_cli.errors import DirectoryConflictError
from learn_cli.utils import (
    CommandRunner,
    console,
    ensure_dir,
    print_info,
    print_success,
    run_command,
)

from .guard import check_safe, find_conflicts
from .initializer import ProjectDescriptor, initialize
from .installer import DependencyInstaller
from .templates import TemplateRenderer, write_templates


class ProjectScaffolder:
    """Creates a React + webpack + Babel project in a directory.

    Args:
        config: Run configuration.
        runner: Command runner handed to the ``DependencyInstaller``.
    """

    def __init__(self, config: Config, runner: CommandRunner = run_command) -> None:
        self.config = config
        self.installer = DependencyInstaller(config, runner)
        self.renderer = TemplateRenderer()

    async def generate(self, directory: str | Path, use_npm: bool = False) -> ProjectDescriptor:
        """Scaffold a project into *directory*.

        Args:
            directory: Project directory as given on the command line.
            use_npm: Whether the operator asked for npm (always refused).

        Returns:
            The descriptor of the generated project.

        Raises:
            DirectoryConflictError: If the directory holds conflicting files.
            ScaffoldError: For any refused option or failed install step.
            OSError: For filesystem failures while initialising.
        """
        name = str(directory)

        with console.status("loading..."):
            root = await asyncio.to_thread(ensure_dir, directory)
            if not await asyncio.to_thread(check_safe, root, name):
                raise DirectoryConflictError(name, find_conflicts(root))

            await self.installer.preflight(use_npm=use_npm)

            console.print(f"Creating a new React app in [green]{escape(str(root))}[/green].\n")
            project = await asyncio.to_thread(initialize, root, self.config)
        print_success("loading succeed.")

        print_info("start installing...")
        await self.installer.install(project.root)

        await write_templates(project.root, self.renderer)
        print_success("finish init.")
        return project
