"""Dependency metadata resolvers package."""

from notice_checker.resolvers.manifest import (
    find_license_file,
    get_license_information_for_dependency,
    read_manifest,
)

__all__ = [
    "find_license_file",
    "get_license_information_for_dependency",
    "read_manifest",
]
