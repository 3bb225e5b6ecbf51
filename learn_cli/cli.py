"""learn-cli command-line entry point.

Usage::

    learn-cli my-app
    learn-cli my-app --info
    python -m learn_cli my-app
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from rich.markup import escape

from learn_cli import __version__
from learn_cli.config import Config
from learn_cli.envinfo import report
from learn_cli.errors import DirectoryConflictError, ScaffoldError, UsageError
from learn_cli.scaffolder import ProjectScaffolder
from learn_cli.utils import CommandRunner, console, print_error, print_info, run_command


def build_parser(prog: str = "learn-cli") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        usage=f"{prog} <project-directory> [options]",
        description="Create a React app with webpack, Babel and yarn.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {prog} my-app\n"
            f"  {prog} --info\n"
        ),
    )
    parser.add_argument(
        "project_directory",
        nargs="?",
        metavar="<project-directory>",
        help="Directory to create the project in",
    )
    parser.add_argument(
        "--info",
        action="store_true",
        help="print environment debug info",
    )
    parser.add_argument(
        "--use-npm",
        action="store_true",
        help="use npm instead of yarn (not supported)",
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=__version__,
    )
    return parser


def print_usage_guidance(prog: str) -> None:
    print_error("Please specify the project directory:")
    console.print(f"  [cyan]{prog}[/cyan] [green]<project-directory>[/green]")
    console.print()
    console.print("For example:")
    console.print(f"  [cyan]{prog}[/cyan] [green]my-app[/green]")
    console.print()
    console.print(f"Run [cyan]{prog} --help[/cyan] to see all options.")


async def run(
    argv: list[str] | None = None,
    runner: CommandRunner = run_command,
    config: Config | None = None,
) -> int:
    """Parse *argv*, run the requested action and return the exit status."""
    try:
        config = config or Config.from_env()
    except ValueError as exc:
        # pydantic.ValidationError is a ValueError
        print_error(f"Invalid configuration: {escape(str(exc))}")
        return 1

    parser = build_parser(config.tool_name)
    # Unknown options are ignored.
    args, _unknown = parser.parse_known_args(argv)

    if args.info:
        await report(runner=runner)
        return 0

    try:
        if not args.project_directory:
            raise UsageError("missing <project-directory>")

        project = await ProjectScaffolder(config, runner).generate(
            args.project_directory, use_npm=args.use_npm
        )
    except UsageError:
        print_usage_guidance(config.tool_name)
        return 1
    except DirectoryConflictError:
        # The guard has already listed the conflicting files.
        return 1
    except ScaffoldError as exc:
        print_error(escape(str(exc)))
        return 1
    except OSError as exc:
        print_error(f"Error: {escape(str(exc))}")
        return 1

    console.print()
    console.print(
        f"Success! Created [green]{escape(project.name)}[/green] at "
        f"[green]{escape(str(project.root))}[/green]"
    )
    print_info("Inside that directory, you can run:\n")
    console.print("  [cyan]yarn start[/cyan]")
    console.print("    Starts the development server.\n")
    return 0


def main() -> None:
    """CLI entry point for ``learn-cli`` and ``python -m learn_cli``."""
    sys.exit(asyncio.run(run(sys.argv[1:])))


if __name__ == "__main__":
    main()
