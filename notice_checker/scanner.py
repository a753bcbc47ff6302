"""Scanner module for dependency discovery and license collection."""
from __future__ import annotations

import re
from pathlib import Path
from typing import Union

from notice_checker.constants import DEPENDENCY_STORE_SEGMENT, MANIFEST_FILENAME
from notice_checker.host import Compilation, Module
from notice_checker.models.record import LicenseRecord
from notice_checker.resolvers.manifest import get_license_information_for_dependency

_DEPENDENCY_STORE = re.compile(re.escape(DEPENDENCY_STORE_SEGMENT))


def _is_delegated_dependency(module: Module) -> bool:
    """Check if a module is a delegated request issued from first-party code."""
    return bool(
        module.delegate_data
        and module.original_request
        and (
            not module.issuer_context
            or not _DEPENDENCY_STORE.search(module.issuer_context)
        )
    )


def get_dependency_paths(
    compilation: Compilation,
    include_delegated: bool = False,
) -> list[str]:
    """List the file paths of a compilation that may belong to dependencies.

    Args:
        compilation: Compilation snapshot. It is not modified.
        include_delegated: Also list the original requests of delegated
            modules that were not issued from inside the dependency store.

    Returns:
        File dependencies followed by delegated request paths.
    """
    paths = list(compilation.file_dependencies)
    if include_delegated:
        paths.extend(
            module.original_request
            for module in compilation.modules
            if _is_delegated_dependency(module) and module.original_request
        )
    return paths


def get_license_information_for_compilation(
    compilation: Compilation,
    filter: re.Pattern[str],
    include_delegated: bool = False,
) -> dict[str, LicenseRecord]:
    """Collect license records for every dependency of a compilation.

    Paths that do not match ``filter`` are skipped. When several paths map
    to the same dependency name, the last one read wins.

    Args:
        compilation: Compilation snapshot. It is not modified.
        filter: Pattern whose first group is the dependency root directory
            and whose second group is the dependency name.
        include_delegated: Include delegated modules.

    Returns:
        License records keyed by dependency name, in discovery order.

    Raises:
        ManifestReadError: If a matched dependency has no readable manifest.
    """
    license_information: dict[str, LicenseRecord] = {}

    for dependency_path in get_dependency_paths(compilation, include_delegated):
        match = filter.search(dependency_path)
        if match is None:
            continue
        root_path, dependency_name = match.group(1), match.group(2)
        license_information[dependency_name] = get_license_information_for_dependency(
            root_path
        )

    return license_information


def _is_package_manifest(relative: Path) -> bool:
    """Check if a manifest path inside the store sits at a package root.

    Accepts ``<name>/package.json`` and ``@scope/<name>/package.json``,
    also below nested stores. Hidden directories (tool caches such as
    ``.vite``) and manifests in package subdirectories are rejected.
    """
    parts = relative.parts[:-1]
    if any(part.startswith(".") for part in parts):
        return False

    index = 0
    while index < len(parts):
        if parts[index].startswith("@"):
            index += 1
        if index >= len(parts):
            return False
        index += 1
        if index == len(parts):
            return True
        if parts[index] != DEPENDENCY_STORE_SEGMENT:
            return False
        index += 1
    return False


def discover_file_dependencies(project_dir: Union[str, Path]) -> list[str]:
    """Discover installed dependency manifests below a project directory.

    Used to build a compilation snapshot when no build tool provides one.

    Args:
        project_dir: Project root containing the dependency store.

    Returns:
        Sorted absolute paths of the manifests at every package root in the
        dependency store, nested stores included.
    """
    store = Path(project_dir).resolve() / DEPENDENCY_STORE_SEGMENT
    if not store.is_dir():
        return []

    return sorted(
        str(path)
        for path in store.rglob(MANIFEST_FILENAME)
        if path.is_file() and _is_package_manifest(path.relative_to(store))
    )
