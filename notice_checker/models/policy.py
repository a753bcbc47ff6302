"""Policy-related Pydantic models for notice-checker."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ViolationKind(Enum):
    """Kinds of license policy violations."""

    UNLICENSED = "unlicensed"
    DISALLOWED_LICENSE = "disallowed_license"
    MISSING_LICENSE_TEXT = "missing_license_text"


class PolicyViolation(BaseModel):
    """A license policy violation for a dependency.

    Violations are collected during a run and handed to the build's
    error or warning channel. They are never raised.
    """

    model_config = {"extra": "forbid"}

    kind: ViolationKind = Field(description="Which policy rule was violated")
    package_name: str = Field(description="Name of the dependency with violation")
    package_version: Optional[str] = Field(
        default=None,
        description="Version of the dependency (None if undeclared)",
    )
    detected_license: Optional[str] = Field(
        default=None,
        description="The declared license (None if undeclared)",
    )
    message: str = Field(description="Human-readable description of the violation")

    def __str__(self) -> str:
        return self.message
