"""Project directory and ``package.json`` creation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from learn_cli.config import Config
from learn_cli.utils import ensure_dir, write_json

MANIFEST_FILENAME = "package.json"
PROJECT_SUBDIRS: tuple[str, ...] = ("dist", "src")


@dataclass(frozen=True)
class ProjectDescriptor:
    """A freshly initialised project on disk."""

    root: Path
    name: str

    @property
    def manifest_path(self) -> Path:
        return self.root / MANIFEST_FILENAME

    @property
    def src_dir(self) -> Path:
        return self.root / "src"

    @property
    def dist_dir(self) -> Path:
        return self.root / "dist"


def project_name_for(target_path: str | Path) -> str:
    """Derive the project name from the final segment of the resolved path."""
    return Path(target_path).resolve().name


def build_manifest(name: str, config: Config) -> dict[str, Any]:
    """Build the minimal ``package.json`` record for *name*.

    Key order matches what ``npm init`` writes so the file reads naturally.
    """
    manifest = config.manifest
    return {
        "name": name,
        "version": manifest.version,
        "main": manifest.main,
        "scripts": {
            "test": manifest.test_script,
            "start": manifest.start_script,
        },
        "license": manifest.license,
    }


def initialize(target_path: str | Path, config: Config) -> ProjectDescriptor:
    """Create the project directory, its manifest and the ``dist``/``src`` folders.

    Existing directories are reused.  Any ``OSError`` propagates; files
    written before the failure are left in place.

    Args:
        target_path: Relative or absolute project directory.
        config: Run configuration supplying the manifest constants.

    Returns:
        A ``ProjectDescriptor`` for the resolved root.
    """
    root = ensure_dir(target_path)
    descriptor = ProjectDescriptor(root=root, name=project_name_for(root))

    write_json(build_manifest(descriptor.name, config), descriptor.manifest_path)
    for subdir in PROJECT_SUBDIRS:
        (root / subdir).mkdir(exist_ok=True)

    return descriptor
