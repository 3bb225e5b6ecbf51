"""Package-manager driven dependency installation.

The installer runs a fixed, strictly ordered list of ``yarn`` invocations
inside the new project.  Each step inherits the terminal so the operator
sees the package manager's own progress output; a non-zero exit stops the
sequence immediately.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from learn_cli.config import Config
from learn_cli.errors import (
    InstallStepError,
    PackageManagerNotFoundError,
    UnsupportedPackageManagerError,
)
from learn_cli.utils import CommandRunner, console, run_command


@dataclass(frozen=True)
class InstallStep:
    """One package-manager invocation."""

    name: str
    args: list[str] = field(default_factory=list)


@dataclass
class StepResult:
    """Outcome of a single executed step."""

    step: InstallStep
    command: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class DependencyInstaller:
    """Installs the build toolchain and UI framework with yarn.

    Args:
        config: Run configuration (executables, package lists, timeouts).
        runner: Coroutine with the signature of ``utils.run_command``.
            Tests pass a fake to avoid spawning real processes.
    """

    def __init__(self, config: Config, runner: CommandRunner = run_command) -> None:
        self.config = config
        self.runner = runner

    @property
    def executable(self) -> str:
        return self.config.package_manager.executable

    def plan(self) -> list[InstallStep]:
        """Return the install steps in execution order."""
        pm = self.config.package_manager
        return [
            InstallStep("init", ["init", "--yes"]),
            InstallStep("install", ["install"]),
            InstallStep("add dev dependencies", ["add", *pm.dev_dependencies, "--dev"]),
            InstallStep("add dependencies", ["add", *pm.dependencies]),
        ]

    async def preflight(self, use_npm: bool = False) -> str:
        """Refuse npm and make sure yarn can be executed.

        Returns:
            The version string reported by the probe.

        Raises:
            UnsupportedPackageManagerError: If *use_npm* is set.
            PackageManagerNotFoundError: If the version probe fails.
        """
        if use_npm:
            raise UnsupportedPackageManagerError("npm", "yarn")

        pm = self.config.package_manager
        returncode, stdout, stderr = await self.runner(
            [pm.probe_executable, "--version"],
            timeout=pm.probe_timeout,
            capture=True,
        )
        if returncode != 0:
            raise PackageManagerNotFoundError(pm.probe_executable, stderr)
        return stdout

    async def run_step(self, step: InstallStep, root: Path) -> StepResult:
        """Execute *step* in *root*, raising ``InstallStepError`` on failure."""
        command = [self.executable, *step.args]
        console.print(f"[dim]$ {' '.join(command)}[/dim]")
        returncode, stdout, stderr = await self.runner(
            command,
            cwd=root,
            timeout=self.config.package_manager.install_timeout,
            capture=False,
        )
        result = StepResult(step, command, returncode, stdout, stderr)
        if not result.ok:
            raise InstallStepError(step.name, command, returncode, stderr)
        return result

    async def install(self, root: str | Path) -> list[StepResult]:
        """Run every step of :meth:`plan` in order inside *root*."""
        project_root = Path(root)
        results: list[StepResult] = []
        for step in self.plan():
            results.append(await self.run_step(step, project_root))
        return results
