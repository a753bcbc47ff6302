"""Dependency filtering for ignore rules."""

from __future__ import annotations

from wcmatch import glob

from notice_checker.analysis.rules import matches_version, parse_rule
from notice_checker.models.record import LicenseRecord

# Case-sensitive path globs with brace expansion
_GLOB_FLAGS = glob.BRACE | glob.CASE


def ignore_licenses(
    license_information: dict[str, LicenseRecord],
    ignore: list[str],
) -> dict[str, LicenseRecord]:
    """Remove dependencies matched by any ignore rule.

    A rule matches when the dependency name matches its glob pattern and,
    if the rule carries a version range, the dependency's version satisfies
    it. Patterns are case-sensitive path globs with brace expansion, so
    ``*`` does not cross the ``/`` of a scoped name and ``{a,b}`` matches
    either name.

    Args:
        license_information: License records keyed by dependency name.
        ignore: Ignore rules (``pattern`` or ``pattern@range``), in order.

    Returns:
        New mapping without the ignored dependencies, in the original order.
        The mapping passed in is not modified.
    """
    rules = [parse_rule(expression) for expression in ignore]

    filtered: dict[str, LicenseRecord] = {}
    for name, record in license_information.items():
        ignored = any(
            glob.globmatch(name, rule.name, flags=_GLOB_FLAGS)
            and matches_version(record.version, rule)
            for rule in rules
        )
        if not ignored:
            filtered[name] = record

    return filtered
