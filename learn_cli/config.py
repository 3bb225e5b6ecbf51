"""learn-cli configuration.

Typed settings for a scaffold run. Every stage receives a ``Config``
instance from the CLI instead of reading the environment on its own, so
tests can build one directly with whatever values they need.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field


DEFAULT_DEV_DEPENDENCIES: list[str] = [
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

DEFAULT_DEPENDENCIES: list[str] = ["react", "react-dom"]


class ManifestConfig(BaseModel):
    """Fixed values written into the generated ``package.json``."""

    version: str = Field(default="0.1.0")
    main: str = Field(default="index.js")
    test_script: str = Field(default='echo "Error: no test specified" && exit 1')
    start_script: str = Field(default="webpack-dev-server")
    license: str = Field(default="MIT")


class PackageManagerConfig(BaseModel):
    """How the external package manager is invoked."""

    executable: str = Field(default="yarn", description="Binary used for init/install/add")
    probe_executable: str = Field(
        default="yarnpkg", description="Binary queried with --version before installing"
    )
    install_timeout: int = Field(
        default=600, ge=30, description="Per-step timeout for install commands, in seconds"
    )
    probe_timeout: int = Field(default=30, ge=1, description="Timeout for version probes")
    dev_dependencies: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DEV_DEPENDENCIES)
    )
    dependencies: list[str] = Field(default_factory=lambda: list(DEFAULT_DEPENDENCIES))


class Config(BaseModel):
    """Global learn-cli configuration.

    Created once by the CLI entry point and passed to each stage.
    """

    tool_name: str = Field(default="learn-cli")
    manifest: ManifestConfig = Field(default_factory=ManifestConfig)
    package_manager: PackageManagerConfig = Field(default_factory=PackageManagerConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            LEARN_CLI_YARN, LEARN_CLI_YARN_PROBE,
            LEARN_CLI_INSTALL_TIMEOUT, LEARN_CLI_PROBE_TIMEOUT.
        """
        pm_kwargs: dict[str, Any] = {}
        if os.environ.get("LEARN_CLI_YARN"):
            pm_kwargs["executable"] = os.environ["LEARN_CLI_YARN"]
        if os.environ.get("LEARN_CLI_YARN_PROBE"):
            pm_kwargs["probe_executable"] = os.environ["LEARN_CLI_YARN_PROBE"]
        if os.environ.get("LEARN_CLI_INSTALL_TIMEOUT"):
            pm_kwargs["install_timeout"] = int(os.environ["LEARN_CLI_INSTALL_TIMEOUT"])
        if os.environ.get("LEARN_CLI_PROBE_TIMEOUT"):
            pm_kwargs["probe_timeout"] = int(os.environ["LEARN_CLI_PROBE_TIMEOUT"])

        return cls(package_manager=PackageManagerConfig(**pm_kwargs))
