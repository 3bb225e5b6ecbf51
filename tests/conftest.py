"""Shared pytest fixtures for the learn-cli test suite.

Provides reusable fixtures for:
- Temporary target directories
- A fake command runner that records invocations instead of spawning them
- A default ``Config``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from learn_cli.config import Config


# ---------------------------------------------------------------------------
# Fake command runner
# ---------------------------------------------------------------------------


class FakeRunner:
    """Stands in for ``learn_cli.utils.run_command``.

    Every call is recorded in ``calls`` as ``(cmd, kwargs)``.  Results are
    looked up by the first two elements of the command (e.g.
    ``("yarn", "add")``), then by the executable alone, falling back to a
    successful empty result.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[list[str], dict[str, Any]]] = []
        self.results: dict[tuple[str, ...], tuple[int, str, str]] = {}

    def set_result(self, *key: str, returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        self.results[tuple(key)] = (returncode, stdout, stderr)

    async def __call__(self, cmd: list[str], **kwargs: Any) -> tuple[int, str, str]:
        self.calls.append((list(cmd), kwargs))
        for key in (tuple(cmd[:2]), tuple(cmd[:1])):
            if key in self.results:
                return self.results[key]
        return (0, "", "")

    @property
    def commands(self) -> list[list[str]]:
        return [cmd for cmd, _ in self.calls]


@pytest.fixture
def fake_runner() -> FakeRunner:
    """A runner where every command succeeds and yarn reports 1.22.19."""
    runner = FakeRunner()
    runner.set_result("yarnpkg", "--version", stdout="1.22.19")
    return runner


# ---------------------------------------------------------------------------
# Paths & configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """An existing, empty target directory."""
    target = tmp_path / "my-app"
    target.mkdir()
    return target
