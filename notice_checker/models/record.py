"""License record models for notice-checker."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class LicenseRecord(BaseModel):
    """License information extracted for a single dependency.

    Records are frozen. Overrides produce a new record via ``patched()``
    instead of mutating the one collected from disk.
    """

    model_config = {"extra": "forbid", "frozen": True, "populate_by_name": True}

    name: str = Field(description="Dependency name, unique within a run")
    version: Optional[str] = Field(default=None, description="Semantic version")
    author: Optional[str] = Field(default=None, description="Package author")
    repository: Optional[str] = Field(default=None, description="Repository URL")
    homepage: Optional[str] = Field(default=None, description="Homepage URL")
    license_name: Optional[str] = Field(
        default=None,
        alias="licenseName",
        description="Declared SPDX license expression (or UNLICENSED)",
    )
    license_text: Optional[str] = Field(
        default=None,
        alias="licenseText",
        description="Wrapped contents of the dependency's license file",
    )

    def patched(self, patch: LicensePatch) -> LicenseRecord:
        """Return a copy of this record with the patch's set fields applied.

        Args:
            patch: Partial record; only explicitly set fields are applied.

        Returns:
            New LicenseRecord. This record is left unchanged.
        """
        return self.model_copy(update=patch.model_dump(exclude_unset=True))


class LicensePatch(BaseModel):
    """Partial license record used by override rules."""

    model_config = {"extra": "forbid", "populate_by_name": True}

    name: Optional[str] = None
    version: Optional[str] = None
    author: Optional[str] = None
    repository: Optional[str] = None
    homepage: Optional[str] = None
    license_name: Optional[str] = Field(default=None, alias="licenseName")
    license_text: Optional[str] = Field(default=None, alias="licenseText")
