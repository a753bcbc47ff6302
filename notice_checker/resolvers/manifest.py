"""Package manifest and license file resolver.

Reads ``package.json`` and the license file from a dependency root directory
and turns them into a LicenseRecord.
"""
from __future__ import annotations

import json
import re
import textwrap
from pathlib import Path
from typing import Any, Optional, Union

from notice_checker.constants import LICENSE_WRAP_WIDTH, MANIFEST_FILENAME
from notice_checker.exceptions import ManifestReadError
from notice_checker.models.record import LicenseRecord

# License files are LICENSE*, LICENCE* or COPYING*, in any case
LICENSE_FILE_PATTERN = re.compile(r"^(LICENSE|LICENCE|COPYING)", re.IGNORECASE)


def read_manifest(dependency_path: Union[str, Path]) -> dict[str, Any]:
    """Read and parse the manifest of a dependency.

    Args:
        dependency_path: Dependency root directory.

    Returns:
        Parsed manifest mapping.

    Raises:
        ManifestReadError: If the manifest is missing, unreadable, not valid
            JSON, or not a JSON object.
    """
    manifest_path = Path(dependency_path) / MANIFEST_FILENAME
    try:
        content = manifest_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestReadError(
            f"Cannot read manifest '{manifest_path}': {e}"
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestReadError(
            f"Invalid JSON in manifest '{manifest_path}': {e}"
        ) from e

    if not isinstance(data, dict):
        raise ManifestReadError(
            f"Invalid manifest '{manifest_path}': "
            f"expected an object at root level, got {type(data).__name__}"
        )
    return data


def _field_or_nested(value: Any, key: str) -> Optional[str]:
    """Return ``value[key]`` for objects like ``{"name": ...}``, else the string."""
    if isinstance(value, dict):
        nested = value.get(key)
        return str(nested) if nested is not None else None
    if value is None:
        return None
    return str(value)


def extract_license_from_manifest(manifest: dict[str, Any]) -> Optional[str]:
    """Extract the declared license expression from a manifest.

    Supports the ``license`` string as well as the deprecated
    ``license: {"type": ...}`` and ``licenses: [{"type": ...}]`` forms.
    Several legacy entries are combined with OR.

    Args:
        manifest: Parsed package manifest.

    Returns:
        License expression string, or None if none is declared.
    """
    declared = manifest.get("license")
    if isinstance(declared, str):
        return declared
    if isinstance(declared, dict):
        return _field_or_nested(declared, "type")

    legacy = manifest.get("licenses")
    if isinstance(legacy, list):
        types = [_field_or_nested(entry, "type") for entry in legacy]
        types = [t for t in types if t]
        if len(types) == 1:
            return types[0]
        if types:
            return "(" + " OR ".join(types) + ")"

    return None


def find_license_file(dependency_path: Union[str, Path]) -> Optional[Path]:
    """Find the license file in a dependency root directory.

    Args:
        dependency_path: Dependency root directory.

    Returns:
        Path of the first matching file in name order, or None.
    """
    root = Path(dependency_path)
    if not root.is_dir():
        return None

    candidates = sorted(
        entry
        for entry in root.iterdir()
        if LICENSE_FILE_PATTERN.match(entry.name) and entry.is_file()
    )
    return candidates[0] if candidates else None


def wrap_license_text(text: str, width: int = LICENSE_WRAP_WIDTH) -> str:
    """Word-wrap license text, keeping existing line breaks.

    Words longer than ``width`` (URLs, for example) are kept whole.
    """
    wrapped_lines = [
        textwrap.fill(
            line,
            width=width,
            break_long_words=False,
            break_on_hyphens=False,
        )
        if line.strip()
        else ""
        for line in text.splitlines()
    ]
    return "\n".join(wrapped_lines)


def get_license_contents(dependency_path: Union[str, Path]) -> Optional[str]:
    """Read and wrap the license text of a dependency.

    Returns:
        Wrapped license text, or None if no license file exists.

    Raises:
        ManifestReadError: If the license file exists but cannot be read.
    """
    license_path = find_license_file(dependency_path)
    if license_path is None:
        return None

    try:
        content = license_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ManifestReadError(
            f"Cannot read license file '{license_path}': {e}"
        ) from e
    return wrap_license_text(content)


def get_license_information_for_dependency(
    dependency_path: Union[str, Path],
) -> LicenseRecord:
    """Build the license record of a dependency from its root directory.

    Args:
        dependency_path: Dependency root directory.

    Returns:
        LicenseRecord with manifest metadata and wrapped license text.

    Raises:
        ManifestReadError: If the manifest is missing, invalid, or has no name.
    """
    manifest = read_manifest(dependency_path)

    name = manifest.get("name")
    if not isinstance(name, str) or not name:
        raise ManifestReadError(
            f"Manifest in '{dependency_path}' does not declare a package name"
        )

    version = manifest.get("version")
    return LicenseRecord(
        name=name,
        version=str(version) if version is not None else None,
        author=_field_or_nested(manifest.get("author"), "name"),
        repository=_field_or_nested(manifest.get("repository"), "url"),
        homepage=str(manifest.get("homepage") or ""),
        license_name=extract_license_from_manifest(manifest),
        license_text=get_license_contents(dependency_path),
    )
