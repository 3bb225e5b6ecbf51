"""Pre-flight check that a target directory is safe to scaffold into.

A directory is safe when every entry in it is either harmless metadata
(VCS files, editor project files, docs) or a leftover installer log from
a previous failed run.  Leftover logs are removed once the directory has
been judged safe.
"""

from __future__ import annotations

import os
import re
import shutil
from pathlib import Path

from rich.markup import escape

from learn_cli.utils import console, print_warning

VALID_FILES: frozenset[str] = frozenset({
    ".DS_Store",
    "Thumbs.db",
    ".git",
    ".gitignore",
    ".idea",
    "README.md",
    "LICENSE",
    ".hg",
    ".hgignore",
    ".hgcheck",
    ".npmignore",
    "mkdocs.yml",
    "docs",
    ".travis.yml",
    ".gitlab-ci.yml",
    ".gitattributes",
})

# Matches `(npm-debug|yarn-error|yarn-debug).log*`
ERROR_LOG_PREFIXES: tuple[str, ...] = (
    "npm-debug.log",
    "yarn-error.log",
    "yarn-debug.log",
)

_IDE_PROJECT_FILE = re.compile(r"\.iml\Z")


def is_error_log(filename: str) -> bool:
    return filename.startswith(ERROR_LOG_PREFIXES)


def is_allowed(filename: str) -> bool:
    """Return ``True`` if *filename* never blocks scaffolding."""
    return (
        filename in VALID_FILES
        or bool(_IDE_PROJECT_FILE.search(filename))
        or is_error_log(filename)
    )


def _list_entries(root: Path) -> list[str]:
    return sorted(os.listdir(root))


def find_conflicts(root: str | Path) -> list[str]:
    """Return the entries of *root* that could conflict, in listing order."""
    return [entry for entry in _list_entries(Path(root)) if not is_allowed(entry)]


def remove_error_logs(root: str | Path) -> list[str]:
    """Delete leftover installer logs directly under *root*.

    Failures are reported as warnings and skipped.

    Returns:
        Names of the entries that were actually removed.
    """
    root_path = Path(root)
    removed: list[str] = []
    for entry in _list_entries(root_path):
        if not is_error_log(entry):
            continue
        target = root_path / entry
        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            else:
                target.unlink()
        except OSError as exc:
            print_warning(f"Could not remove leftover log {escape(entry)}: {escape(str(exc))}")
            continue
        removed.append(entry)
    return removed


def report_conflicts(name: str, conflicts: list[str]) -> None:
    console.print()
    console.print(
        f"The directory [green]{escape(name)}[/green] contains files that could conflict:\n"
    )
    for entry in conflicts:
        console.print(f"  {escape(entry)}", soft_wrap=True)
    console.print(
        "\nEither try using a new directory name, or remove the files listed above."
    )


def check_safe(root: str | Path, name: str) -> bool:
    """Decide whether scaffolding may proceed in *root*.

    Args:
        root: Resolved, existing project directory.
        name: Directory name as the operator typed it, used in messages.

    Returns:
        ``False`` (after listing every conflicting entry) if anything
        outside the allow-list is present.  Otherwise leftover installer
        logs are removed and ``True`` is returned.
    """
    conflicts = find_conflicts(root)
    if conflicts:
        report_conflicts(name, conflicts)
        return False

    remove_error_logs(root)
    return True
