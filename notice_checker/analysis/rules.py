"""Parsing and matching of ``name[@versionRange]`` dependency rules.

Ignore and override rules share the same key syntax. The version part is an
npm-style range (``^1.0.0``, ``~1.2``, ``1.x``, ``>=1 <2 || 3``) and is matched
with ``semantic_version.NpmSpec``.
"""
from __future__ import annotations

import re
from typing import NamedTuple, Optional

from semantic_version import NpmSpec, Version

# Split on "@" unless it is the leading "@" of a scoped package name
_RULE_SEPARATOR = re.compile(r"(?!^)@")


class Rule(NamedTuple):
    """A parsed dependency rule.

    Attributes:
        name: Package name, or glob pattern for ignore rules.
        version_range: npm range expression, or None to match any version.
    """

    name: str
    version_range: Optional[str]


def parse_rule(expression: str) -> Rule:
    """Parse a rule key into its name and optional version range.

    Args:
        expression: Rule key such as ``lodash``, ``lodash@^4.0.0`` or
            ``@babel/core@7.x``.

    Returns:
        Rule with name and version range (None when no range is given).
    """
    parts = _RULE_SEPARATOR.split(expression)
    version_range = parts[1] if len(parts) > 1 and parts[1] else None
    return Rule(name=parts[0], version_range=version_range)


def is_valid_range(version_range: str) -> bool:
    """Check if a string is a valid npm version range."""
    try:
        NpmSpec(version_range)
    except ValueError:
        return False
    return True


def satisfies_range(version: Optional[str], version_range: str) -> bool:
    """Check if a version satisfies an npm version range.

    Args:
        version: Version declared by the dependency (may be None).
        version_range: npm range expression.

    Returns:
        True if the version is valid semver and inside the range.
        Missing or invalid versions and invalid ranges never match.
    """
    if not version:
        return False
    try:
        return NpmSpec(version_range).match(Version(version))
    except ValueError:
        return False


def matches_version(version: Optional[str], rule: Rule) -> bool:
    """Check the version part of a rule. Rules without a range match any version."""
    return rule.version_range is None or satisfies_range(version, rule.version_range)
