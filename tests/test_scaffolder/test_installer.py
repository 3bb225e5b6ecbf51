"""Tests for the yarn-driven installer (learn_cli.scaffolder.installer).

All package-manager invocations go through the ``fake_runner`` fixture;
no real processes are spawned.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from learn_cli.config import Config, PackageManagerConfig
from learn_cli.errors import (
    InstallStepError,
    PackageManagerNotFoundError,
    UnsupportedPackageManagerError,
)
from learn_cli.scaffolder.installer import DependencyInstaller, InstallStep

pytestmark = pytest.mark.unit


EXPECTED_DEV = [
    "@babel/core",
    "babel-loader",
    "@babel/preset-env",
    "@babel/preset-react",
    "@babel/register",
    "webpack",
    "webpack-cli",
    "webpack-dev-server",
    "html-webpack-plugin",
]


class TestPlan:
    def test_step_order(self, config):
        steps = DependencyInstaller(config).plan()
        assert [s.args[0] for s in steps] == ["init", "install", "add", "add"]

    def test_init_is_non_interactive(self, config):
        assert DependencyInstaller(config).plan()[0] == InstallStep("init", ["init", "--yes"])

    def test_dev_dependencies(self, config):
        step = DependencyInstaller(config).plan()[2]
        assert step.args == ["add", *EXPECTED_DEV, "--dev"]

    def test_runtime_dependencies(self, config):
        step = DependencyInstaller(config).plan()[3]
        assert step.args == ["add", "react", "react-dom"]


class TestPreflight:
    @pytest.mark.asyncio
    async def test_probe_success(self, config, fake_runner):
        version = await DependencyInstaller(config, fake_runner).preflight()
        assert version == "1.22.19"
        assert fake_runner.commands == [["yarnpkg", "--version"]]

    @pytest.mark.asyncio
    async def test_probe_failure(self, config, fake_runner):
        fake_runner.set_result("yarnpkg", "--version", returncode=127, stderr="not found")
        with pytest.raises(PackageManagerNotFoundError) as exc_info:
            await DependencyInstaller(config, fake_runner).preflight()
        assert exc_info.value.executable == "yarnpkg"
        assert "not found" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_npm_refused_before_probe(self, config, fake_runner):
        with pytest.raises(UnsupportedPackageManagerError) as exc_info:
            await DependencyInstaller(config, fake_runner).preflight(use_npm=True)
        assert "yarn" in str(exc_info.value)
        assert fake_runner.calls == []

    @pytest.mark.asyncio
    async def test_configured_probe_executable(self, fake_runner):
        config = Config(package_manager=PackageManagerConfig(probe_executable="yarn-1"))
        fake_runner.set_result("yarn-1", returncode=0, stdout="1.0.0")
        assert await DependencyInstaller(config, fake_runner).preflight() == "1.0.0"


class TestInstall:
    @pytest.mark.asyncio
    async def test_runs_all_steps_in_root(self, config, fake_runner, tmp_path):
        results = await DependencyInstaller(config, fake_runner).install(tmp_path)

        assert [r.command for r in results] == [
            ["yarn", "init", "--yes"],
            ["yarn", "install"],
            ["yarn", "add", *EXPECTED_DEV, "--dev"],
            ["yarn", "add", "react", "react-dom"],
        ]
        assert all(r.ok for r in results)
        for _, kwargs in fake_runner.calls:
            assert kwargs["cwd"] == Path(tmp_path)
            assert kwargs["capture"] is False
            assert kwargs["timeout"] == config.package_manager.install_timeout

    @pytest.mark.asyncio
    async def test_failure_stops_sequence(self, config, fake_runner, tmp_path):
        fake_runner.set_result("yarn", "install", returncode=1, stderr="network down")
        with pytest.raises(InstallStepError) as exc_info:
            await DependencyInstaller(config, fake_runner).install(tmp_path)

        err = exc_info.value
        assert err.step == "install"
        assert err.returncode == 1
        assert err.command == ["yarn", "install"]
        assert fake_runner.commands == [["yarn", "init", "--yes"], ["yarn", "install"]]

    @pytest.mark.asyncio
    async def test_no_retry(self, config, fake_runner, tmp_path):
        fake_runner.set_result("yarn", "init", returncode=2)
        with pytest.raises(InstallStepError):
            await DependencyInstaller(config, fake_runner).install(tmp_path)
        assert len(fake_runner.calls) == 1
