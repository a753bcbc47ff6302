"""CLI entry point for notice-checker."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from notice_checker import __version__
from notice_checker.config import load_config
from notice_checker.constants import EXIT_ERROR, EXIT_ISSUES, EXIT_SUCCESS
from notice_checker.exceptions import ConfigurationError, NoticeCheckerError
from notice_checker.host import Compilation, Compiler
from notice_checker.output.terminal import ViolationFormatter
from notice_checker.plugin import LicenseCheckerPlugin
from notice_checker.scanner import discover_file_dependencies

# Module-level console for consistent output
_console = Console()
# Separate console for error output (writes to stderr)
_error_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """Notice Checker - License policy checks and third-party notices.

    Checks the licenses of installed dependencies against an allowed
    SPDX expression and generates a third-party notice file.

    \b
    Examples:
        notice-checker check
        notice-checker check path/to/project
        notice-checker check --config custom-config.yaml
        notice-checker check --output-dir dist
    """
    pass


@main.command()
@click.argument(
    "project_dir",
    type=click.Path(exists=True, file_okay=False),
    default=".",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
@click.option(
    "--output-dir",
    "-o",
    "output_dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory to write the notice file to (default: PROJECT_DIR).",
)
@click.option(
    "--watch-mode",
    "watch_mode",
    is_flag=True,
    default=False,
    help="Treat the run as a watch-mode build.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_flag",
    is_flag=True,
    default=False,
    help="Only print errors.",
)
def check(
    project_dir: str,
    config_path: str | None,
    output_dir: str | None,
    watch_mode: bool,
    quiet_flag: bool,
) -> None:
    """Check dependency licenses and write the notice file.

    Every package installed in PROJECT_DIR/node_modules is treated as a
    build dependency. Configuration is read from --config, or from
    .notice-checker.yaml in PROJECT_DIR when present.

    \b
    Examples:
        notice-checker check
        notice-checker check --config custom-config.yaml
        notice-checker check --output-dir dist --quiet
    """
    project_path = Path(project_dir)

    try:
        options = load_config(config_path, start_dir=project_path)

        plugin = LicenseCheckerPlugin(options, console=_console)
        compiler = Compiler(watch_mode=watch_mode)
        plugin.apply(compiler)

        compilation = Compilation(
            file_dependencies=discover_file_dependencies(project_path)
        )
        compilation = asyncio.run(compiler.run(compilation))

        target_dir = Path(output_dir) if output_dir else project_path
        for filename, content in compilation.assets.items():
            _write_asset(content, target_dir / filename, quiet_flag)

        ViolationFormatter(
            console=_console, error_console=_error_console, quiet=quiet_flag
        ).format_compilation(compilation)

        # Violations routed to errors fail the build
        if compilation.errors:
            sys.exit(EXIT_ISSUES)
        sys.exit(EXIT_SUCCESS)

    except NoticeCheckerError as e:
        _display_error(e)
        sys.exit(EXIT_ERROR)


def _write_asset(content: str, path: Path, quiet: bool = False) -> None:
    """Write an emitted asset to disk.

    Args:
        content: The asset content to write.
        path: The file path to write to.
        quiet: Suppress the confirmation message.

    Raises:
        ConfigurationError: If file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot write notice file '{path}': {e}") from e

    if not quiet:
        _console.print(f"[green]Notice written to {escape(str(path))}[/green]")


def _display_error(error: NoticeCheckerError) -> None:
    """Display error message to user on stderr.

    Args:
        error: The exception that occurred.
    """
    error_type = type(error).__name__
    _error_console.print(
        f"Error: {error_type}: {error}", style="red bold", markup=False
    )


if __name__ == "__main__":
    main()
