"""Configuration Pydantic models for notice-checker."""
from __future__ import annotations

import re
from typing import Any, Callable, Dict, List, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from notice_checker.constants import (
    DEFAULT_ALLOW,
    DEFAULT_FILTER,
    DEFAULT_OUTPUT_FILENAME,
    DEFAULT_OUTPUT_WRITER,
)
from notice_checker.models.record import LicensePatch, LicenseRecord

# Renders the report context ({"dependencies": [...]}) to text
RenderFunction = Callable[[Dict[str, Any]], str]


class PluginOptions(BaseModel):
    """Options for the license checker plugin.

    Every option can be given by its snake_case field name or by its
    camelCase option name (``allowOverride``, ``emitError``, ...).
    Unspecified options take their defaults.
    """

    model_config = {"extra": "forbid", "populate_by_name": True}

    filter: re.Pattern[str] = Field(
        default=re.compile(DEFAULT_FILTER),
        description="Pattern with two capture groups (dependency root, "
        "dependency name) selecting which file dependencies are packages.",
    )
    allow: str = Field(
        default=DEFAULT_ALLOW,
        description="SPDX expression of allowed licenses.",
    )
    allow_override: List[str] = Field(
        default_factory=list,
        alias="allowOverride",
        description="License names exempted from the policy check.",
    )
    ignore: List[str] = Field(
        default_factory=list,
        description="Rules (name glob, optionally @range) of dependencies to drop.",
    )
    override: Dict[str, LicensePatch] = Field(
        default_factory=dict,
        description="Field patches keyed by dependency name, optionally @range.",
    )
    emit_error: bool = Field(
        default=False,
        alias="emitError",
        description="Report violations as build errors instead of warnings.",
    )
    output_writer: Union[str, RenderFunction] = Field(
        default=DEFAULT_OUTPUT_WRITER,
        alias="outputWriter",
        description="Built-in template name ('default', 'html'), "
        "path to a Jinja2 template, or a render function.",
    )
    output_filename: str = Field(
        default=DEFAULT_OUTPUT_FILENAME,
        alias="outputFilename",
        description="Name of the generated notice artifact.",
    )
    when_in_watch_mode: bool = Field(
        default=False,
        alias="whenInWatchMode",
        description="Run when the build is in watch mode.",
    )
    include_delegated: bool = Field(
        default=False,
        alias="includeDelegated",
        description="Include modules resolved indirectly by the build tool.",
    )
    additional_licenses: List[Union[LicenseRecord, str]] = Field(
        default_factory=list,
        alias="additionalLicenses",
        description="Extra entries merged into the generated report.",
    )

    @field_validator("filter")
    @classmethod
    def _check_filter_groups(cls, value: re.Pattern[str]) -> re.Pattern[str]:
        if value.groups < 2:
            raise ValueError(
                "filter must have two capture groups (dependency root, "
                f"dependency name), got {value.groups}"
            )
        return value

    @field_validator("allow")
    @classmethod
    def _check_allow_expression(cls, value: str) -> str:
        from notice_checker.analysis.policy import is_valid_license_expression

        if not is_valid_license_expression(value):
            raise ValueError(f"'{value}' is not a valid SPDX license expression")
        return value

    @field_validator("output_filename")
    @classmethod
    def _check_output_filename(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("output filename must not be empty")
        return value

    @model_validator(mode="after")
    def _check_rule_ranges(self) -> PluginOptions:
        from notice_checker.analysis.rules import is_valid_range, parse_rule

        for expression in [*self.ignore, *self.override]:
            rule = parse_rule(expression)
            if rule.version_range is not None and not is_valid_range(
                rule.version_range
            ):
                raise ValueError(
                    f"rule '{expression}' has an invalid version range "
                    f"'{rule.version_range}'"
                )
        return self
