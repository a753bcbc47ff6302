"""Terminal output for build errors and warnings using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape

from notice_checker.host import Compilation


class ViolationFormatter:
    """Print the license violations of a compilation.

    Errors go to the error console in red, warnings to the regular console
    in yellow, followed by a one-line summary.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
        quiet: bool = False,
    ) -> None:
        """Initialize the formatter with Rich consoles.

        Args:
            console: Console for warnings and the summary. A new Console
                is created if not provided.
            error_console: Console for errors. Defaults to a stderr Console.
            quiet: Only print errors.
        """
        self._console = console if console is not None else Console()
        self._error_console = (
            error_console if error_console is not None else Console(stderr=True)
        )
        self._quiet = quiet

    def format_compilation(self, compilation: Compilation) -> None:
        """Print errors, warnings and a summary for a compilation."""
        for error in compilation.errors:
            self._error_console.print(
                f"[red]ERROR[/red] {escape(str(error))}", highlight=False
            )

        if self._quiet:
            return

        for warning in compilation.warnings:
            self._console.print(
                f"[yellow]WARNING[/yellow] {escape(str(warning))}", highlight=False
            )

        self._print_summary(compilation)

    def _print_summary(self, compilation: Compilation) -> None:
        errors = len(compilation.errors)
        warnings = len(compilation.warnings)
        if errors == 0 and warnings == 0:
            self._console.print(
                "[green]No license violations found[/green]", highlight=False
            )
            return

        parts = []
        if errors:
            parts.append(f"[red]{errors} error(s)[/red]")
        if warnings:
            parts.append(f"[yellow]{warnings} warning(s)[/yellow]")
        self._console.print(
            f"License check finished with {', '.join(parts)}", highlight=False
        )
