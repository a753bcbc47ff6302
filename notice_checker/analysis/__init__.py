"""License analysis logic for notice-checker."""
from notice_checker.analysis.filtering import ignore_licenses
from notice_checker.analysis.overrides import override_licenses
from notice_checker.analysis.policy import (
    get_license_violations,
    is_satisfied_license,
    is_valid_license_expression,
)
from notice_checker.analysis.rules import Rule, matches_version, parse_rule

__all__ = [
    "Rule",
    "get_license_violations",
    "ignore_licenses",
    "is_satisfied_license",
    "is_valid_license_expression",
    "matches_version",
    "override_licenses",
    "parse_rule",
]
