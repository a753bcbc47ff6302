"""Report builders, writers and formatters for notice-checker."""

from notice_checker.output.report import (
    get_sorted_license_information,
    write_license_information,
)
from notice_checker.output.terminal import ViolationFormatter
from notice_checker.output.writers import (
    CallableWriter,
    OutputWriter,
    TemplateWriter,
    resolve_output_writer,
)

__all__ = [
    "CallableWriter",
    "OutputWriter",
    "TemplateWriter",
    "ViolationFormatter",
    "get_sorted_license_information",
    "resolve_output_writer",
    "write_license_information",
]
