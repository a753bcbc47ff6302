"""Build plugin that checks dependency licenses and emits a notice file."""
from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, NamedTuple, Optional, Union

from rich.console import Console

from notice_checker.analysis.filtering import ignore_licenses
from notice_checker.analysis.overrides import override_licenses
from notice_checker.analysis.policy import get_license_violations
from notice_checker.config.loader import get_options
from notice_checker.constants import PLUGIN_NAME
from notice_checker.host import Compilation, Compiler
from notice_checker.models.config import PluginOptions
from notice_checker.models.policy import PolicyViolation
from notice_checker.models.record import LicenseRecord
from notice_checker.output.report import (
    get_sorted_license_information,
    write_license_information,
)
from notice_checker.output.writers import OutputWriter, resolve_output_writer
from notice_checker.scanner import get_license_information_for_compilation


class EmitState(Enum):
    """Whether the notice has been emitted for the current build."""

    PENDING = "pending"
    DONE = "done"


class PipelineResult(NamedTuple):
    """Result of one license check run.

    Attributes:
        license_information: Records after ignore and override rules.
        violations: Policy violations in dependency order.
        report: Rendered notice text.
    """

    license_information: dict[str, LicenseRecord]
    violations: list[PolicyViolation]
    report: str


def run_license_pipeline(
    compilation: Compilation,
    options: PluginOptions,
    output_writer: OutputWriter,
) -> PipelineResult:
    """Collect, filter, check and render the licenses of a compilation.

    Args:
        compilation: Compilation snapshot. It is not modified.
        options: Validated plugin options.
        output_writer: Resolved writer for the notice report.

    Returns:
        PipelineResult with final records, violations and the report text.

    Raises:
        ManifestReadError: If a matched dependency has no readable manifest.
    """
    license_information = get_license_information_for_compilation(
        compilation, options.filter, options.include_delegated
    )
    license_information = ignore_licenses(license_information, options.ignore)
    license_information = override_licenses(license_information, options.override)

    violations = get_license_violations(
        license_information, options.allow, options.allow_override
    )

    sorted_license_information = get_sorted_license_information(
        license_information, options.additional_licenses
    )
    report = write_license_information(output_writer, sorted_license_information)

    return PipelineResult(
        license_information=license_information,
        violations=violations,
        report=report,
    )


class LicenseCheckerPlugin:
    """Checks dependency licenses once per build and emits a notice file.

    Subscribes to the compiler's emit hook. The first emit of a build runs the
    check and writes the notice; any later emit is a no-op.
    """

    def __init__(
        self,
        options: Optional[Union[PluginOptions, Mapping[str, Any]]] = None,
        console: Optional[Console] = None,
    ) -> None:
        """Validate the options and resolve the output writer.

        Args:
            options: Plugin options; unspecified options use defaults.
            console: Optional Rich Console for status messages.

        Raises:
            ConfigurationError: If the options or output template are invalid.
        """
        self.options = get_options(options)
        self.output_writer = resolve_output_writer(self.options.output_writer)
        self.state = EmitState.PENDING
        self._console = console if console is not None else Console()

    def apply(self, compiler: Compiler) -> None:
        """Subscribe to the compiler's emit hook.

        Args:
            compiler: Compiler the plugin is applied to.
        """
        if not self.options.when_in_watch_mode and compiler.watch_mode:
            self._console.print(
                f"{PLUGIN_NAME}: not running due to whenInWatchMode=false "
                "and compilation is running in watch mode"
            )
            return

        compiler.hooks.emit.tap_promise(PLUGIN_NAME, self.emit)

    async def emit(self, compilation: Compilation) -> None:
        """Check licenses and add the notice to the compilation's assets."""
        if self.state is EmitState.DONE:
            return

        result = run_license_pipeline(compilation, self.options, self.output_writer)

        if self.options.emit_error:
            compilation.errors.extend(result.violations)
        else:
            compilation.warnings.extend(result.violations)

        compilation.assets[self.options.output_filename] = result.report
        self.state = EmitState.DONE
