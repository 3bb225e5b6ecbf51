"""Environment report printed by ``learn-cli --info``.

Collects host, toolchain and installed package versions so bug reports
carry the same information every time.  Anything that cannot be found is
reported as ``Not Found`` rather than omitted.
"""

from __future__ import annotations

import json
import os
import platform
from pathlib import Path

from rich.markup import escape

from learn_cli.utils import CommandRunner, console, print_summary_table, run_command

NOT_FOUND = "Not Found"

BINARIES: dict[str, str] = {
    "Node": "node",
    "npm": "npm",
    "Yarn": "yarn",
}
LOCAL_PACKAGES: tuple[str, ...] = ("react", "react-dom", "react-scripts")
GLOBAL_PACKAGES: tuple[str, ...] = ("learn-cli",)


def system_info() -> dict[str, str]:
    os_name = f"{platform.system()} {platform.release()}".strip() or NOT_FOUND
    cpu = f"({os.cpu_count() or '?'}) {platform.machine() or 'unknown'}"
    processor = platform.processor()
    if processor:
        cpu = f"{cpu} {processor}"
    return {"OS": os_name, "CPU": cpu}


async def binary_version(executable: str, runner: CommandRunner = run_command) -> str:
    """Return ``<executable> --version`` output, or ``Not Found``."""
    returncode, stdout, _ = await runner([executable, "--version"], timeout=15, capture=True)
    if returncode != 0 or not stdout:
        return NOT_FOUND
    return stdout.splitlines()[0].strip().lstrip("v")


def package_version(node_modules: str | Path, package: str) -> str:
    """Read the installed version of *package* from a ``node_modules`` tree."""
    manifest = Path(node_modules) / package / "package.json"
    try:
        data = json.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return NOT_FOUND
    version = data.get("version") if isinstance(data, dict) else None
    return str(version) if version else NOT_FOUND


async def global_node_modules(runner: CommandRunner = run_command) -> Path | None:
    returncode, stdout, _ = await runner(["npm", "root", "-g"], timeout=15, capture=True)
    if returncode != 0 or not stdout:
        return None
    return Path(stdout.splitlines()[0].strip())


async def collect(
    cwd: str | Path | None = None, runner: CommandRunner = run_command
) -> dict[str, dict[str, str]]:
    """Gather every report section.

    Args:
        cwd: Directory whose ``node_modules`` is inspected for local
            packages.  Defaults to the current directory.
        runner: Command runner used for version probes.

    Returns:
        ``{section: {item: value}}`` in display order.
    """
    local_modules = Path(cwd or Path.cwd()) / "node_modules"

    binaries = {
        label: await binary_version(executable, runner)
        for label, executable in BINARIES.items()
    }

    global_modules = await global_node_modules(runner)
    global_packages = {
        package: package_version(global_modules, package) if global_modules else NOT_FOUND
        for package in GLOBAL_PACKAGES
    }

    return {
        "System": system_info(),
        "Binaries": binaries,
        "npmPackages": {
            package: package_version(local_modules, package) for package in LOCAL_PACKAGES
        },
        "npmGlobalPackages": global_packages,
    }


async def report(cwd: str | Path | None = None, runner: CommandRunner = run_command) -> None:
    """Print the environment report as one table per section."""
    console.print("\n[bold]Environment Info:[/bold]")
    sections = await collect(cwd, runner)
    for title, rows in sections.items():
        print_summary_table({escape(k): escape(v) for k, v in rows.items()}, title=title)
