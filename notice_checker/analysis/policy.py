"""License policy checking against an allowed SPDX license expression.

Uses the license-expression library for SPDX parsing and validation.
"""
from __future__ import annotations

from collections.abc import Collection
from typing import Optional

from license_expression import ExpressionError, get_spdx_licensing

from notice_checker.constants import UNKNOWN, UNLICENSED
from notice_checker.models.policy import PolicyViolation, ViolationKind
from notice_checker.models.record import LicenseRecord

# Initialize SPDX licensing for parsing
_licensing = get_spdx_licensing()


def is_valid_license_expression(expression: Optional[str]) -> bool:
    """Check if a string is a valid SPDX license expression."""
    if not expression or not expression.strip():
        return False
    try:
        _licensing.parse(expression, validate=True, strict=True)
        return True
    except ExpressionError:
        return False


def is_satisfied_license(expression: str, allow: str) -> bool:
    """Check if a license expression is satisfied by an allow expression.

    The expression is expanded into disjunctive normal form. It is satisfied
    when at least one of its AND-clauses uses only licenses that appear in
    the allow expression.

    Args:
        expression: SPDX expression declared by a dependency.
        allow: SPDX expression listing the allowed licenses.

    Returns:
        True if the expression is satisfied, False otherwise (including
        when either expression is invalid).
    """
    try:
        parsed = _licensing.parse(expression, validate=True, strict=True)
        allowed = _licensing.parse(allow, validate=True, strict=True)
    except ExpressionError:
        return False
    if parsed is None or allowed is None:
        return False

    allowed_keys = set(_licensing.license_keys(allowed))

    normalized = _licensing.dnf(parsed)
    if isinstance(normalized, _licensing.OR):
        clauses = list(normalized.args)
    else:
        clauses = [normalized]

    return any(
        set(_licensing.license_keys(clause)) <= allowed_keys for clause in clauses
    )


def _violation(
    kind: ViolationKind, record: LicenseRecord, message: str
) -> PolicyViolation:
    return PolicyViolation(
        kind=kind,
        package_name=record.name,
        package_version=record.version,
        detected_license=record.license_name,
        message=message,
    )


def get_license_violations(
    license_information: dict[str, LicenseRecord],
    allow: str,
    allow_override: Collection[str] = (),
) -> list[PolicyViolation]:
    """Check dependencies against the license policy.

    License names listed in ``allow_override`` skip the license name checks.
    The license text check applies to every dependency, exempted or not.

    Args:
        license_information: License records keyed by dependency name.
        allow: SPDX expression of allowed licenses.
        allow_override: License names exempted from the policy check.

    Returns:
        Violations in dependency order. Each dependency can produce a license
        name violation followed by a missing text violation.
    """
    exempted = set(allow_override)
    violations: list[PolicyViolation] = []

    for name, record in license_information.items():
        version = record.version or UNKNOWN
        license_name = record.license_name

        if license_name not in exempted:
            if not license_name or license_name == UNLICENSED:
                violations.append(
                    _violation(
                        ViolationKind.UNLICENSED,
                        record,
                        f"{name}@{version} is unlicensed",
                    )
                )
            elif not is_valid_license_expression(
                license_name
            ) or not is_satisfied_license(license_name, allow):
                violations.append(
                    _violation(
                        ViolationKind.DISALLOWED_LICENSE,
                        record,
                        f"{name}@{version} has disallowed license {license_name}",
                    )
                )

        if not record.license_text or not record.license_text.strip():
            violations.append(
                _violation(
                    ViolationKind.MISSING_LICENSE_TEXT,
                    record,
                    f"{name}@{version} has a license of type "
                    f"{license_name or UNKNOWN} but has no license text",
                )
            )

    return violations
