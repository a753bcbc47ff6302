"""License override functionality for manual record corrections."""
from __future__ import annotations

from notice_checker.analysis.rules import matches_version, parse_rule
from notice_checker.models.record import LicensePatch, LicenseRecord


def override_licenses(
    license_information: dict[str, LicenseRecord],
    override: dict[str, LicensePatch],
) -> dict[str, LicenseRecord]:
    """Apply override patches to matching dependencies.

    Override keys name a dependency exactly (no globbing), optionally with a
    version range. Every matching patch is applied in mapping order, so a
    later patch overwrites fields set by an earlier one. Version ranges are
    checked against the version collected from disk, not a patched one.

    Args:
        license_information: License records keyed by dependency name.
        override: Patches keyed by ``name`` or ``name@range``.

    Returns:
        New mapping with patched records. The mapping passed in and its
        records are not modified.
    """
    if not override:
        return dict(license_information)

    rules = [(parse_rule(key), patch) for key, patch in override.items()]

    result: dict[str, LicenseRecord] = {}
    for name, record in license_information.items():
        updated = record
        for rule, patch in rules:
            if rule.name == name and matches_version(record.version, rule):
                updated = updated.patched(patch)
        result[name] = updated

    return result
