"""Pydantic data models for notice-checker."""

from notice_checker.models.record import LicensePatch, LicenseRecord
from notice_checker.models.policy import PolicyViolation, ViolationKind
from notice_checker.models.config import PluginOptions, RenderFunction

__all__ = [
    "LicensePatch",
    "LicenseRecord",
    "PluginOptions",
    "PolicyViolation",
    "RenderFunction",
    "ViolationKind",
]
