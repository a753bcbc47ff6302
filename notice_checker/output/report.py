"""Report building for the generated notice file."""
from __future__ import annotations

from typing import Iterable, Optional, Union

from notice_checker.models.record import LicenseRecord
from notice_checker.output.writers import OutputWriter

ReportEntry = Union[LicenseRecord, str]


def _sort_key(entry: ReportEntry) -> str:
    name = entry if isinstance(entry, str) else entry.name
    return str(name).lower()


def get_sorted_license_information(
    license_information: dict[str, LicenseRecord],
    additional_licenses: Optional[Iterable[ReportEntry]] = None,
) -> list[ReportEntry]:
    """Merge additional entries into the records and sort by name.

    Sorting is case-insensitive and stable, so entries with equal names
    keep their relative order (collected records before additional ones).

    Args:
        license_information: License records keyed by dependency name.
        additional_licenses: Extra records or literal text entries.

    Returns:
        Report entries sorted by lowercase name.
    """
    entries: list[ReportEntry] = list(license_information.values())
    if additional_licenses:
        entries.extend(additional_licenses)
    return sorted(entries, key=_sort_key)


def write_license_information(
    output_writer: OutputWriter,
    dependencies: list[ReportEntry],
) -> str:
    """Render the sorted report entries with the output writer.

    Args:
        output_writer: Resolved writer.
        dependencies: Sorted report entries.

    Returns:
        Rendered notice text.
    """
    return output_writer.render({"dependencies": dependencies})
