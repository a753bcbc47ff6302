"""Tests for PluginOptions Pydantic model."""
import re

import pytest
from pydantic import ValidationError

from notice_checker.constants import (
    DEFAULT_ALLOW,
    DEFAULT_OUTPUT_FILENAME,
    DEFAULT_OUTPUT_WRITER,
)
from notice_checker.models.config import PluginOptions
from notice_checker.models.record import LicensePatch, LicenseRecord


class TestPluginOptionsDefaults:
    """Tests for PluginOptions default values."""

    def test_defaults(self) -> None:
        """Test that every option has its default."""
        options = PluginOptions()

        assert options.filter.groups == 2
        assert options.allow == DEFAULT_ALLOW
        assert options.allow_override == []
        assert options.ignore == []
        assert options.override == {}
        assert options.emit_error is False
        assert options.output_writer == DEFAULT_OUTPUT_WRITER
        assert options.output_filename == DEFAULT_OUTPUT_FILENAME
        assert options.when_in_watch_mode is False
        assert options.include_delegated is False
        assert options.additional_licenses == []

    def test_default_lists_are_not_shared(self) -> None:
        """Test that list defaults are independent between instances."""
        first = PluginOptions()
        second = PluginOptions()

        first.ignore.append("lodash")

        assert second.ignore == []


class TestPluginOptionsParsing:
    """Tests for PluginOptions validation from mappings."""

    def test_camel_case_option_names(self) -> None:
        """Test that camelCase option names are accepted."""
        options = PluginOptions.model_validate(
            {
                "allowOverride": ["WTFPL"],
                "emitError": True,
                "outputFilename": "NOTICE.txt",
                "whenInWatchMode": True,
                "includeDelegated": True,
            }
        )

        assert options.allow_override == ["WTFPL"]
        assert options.emit_error is True
        assert options.output_filename == "NOTICE.txt"
        assert options.when_in_watch_mode is True
        assert options.include_delegated is True

    def test_snake_case_option_names(self) -> None:
        """Test that snake_case field names are accepted."""
        options = PluginOptions.model_validate(
            {"allow_override": ["WTFPL"], "emit_error": True}
        )

        assert options.allow_override == ["WTFPL"]
        assert options.emit_error is True

    def test_filter_from_string(self) -> None:
        """Test that a filter string is compiled."""
        options = PluginOptions.model_validate({"filter": r"(^.*/vendor/([^/]+))"})

        assert isinstance(options.filter, re.Pattern)
        assert options.filter.pattern == r"(^.*/vendor/([^/]+))"

    def test_filter_from_compiled_pattern(self) -> None:
        """Test that a compiled filter is accepted."""
        pattern = re.compile(r"(^.*/vendor/([^/]+))")

        options = PluginOptions(filter=pattern)

        assert options.filter.pattern == pattern.pattern

    def test_filter_needs_two_groups(self) -> None:
        """Test that a filter with one group is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            PluginOptions.model_validate({"filter": r"node_modules/([^/]+)"})

        assert "two capture groups" in str(exc_info.value)

    def test_invalid_allow_expression(self) -> None:
        """Test that the allow policy must be a valid SPDX expression."""
        with pytest.raises(ValidationError) as exc_info:
            PluginOptions.model_validate({"allow": "Totally-Made-Up-License"})

        assert "not a valid SPDX license expression" in str(exc_info.value)

    def test_override_patches(self) -> None:
        """Test that override values become patches."""
        options = PluginOptions.model_validate(
            {"override": {"bar@1.x": {"licenseName": "MIT"}}}
        )

        assert isinstance(options.override["bar@1.x"], LicensePatch)
        assert options.override["bar@1.x"].license_name == "MIT"

    def test_override_patch_unknown_field(self) -> None:
        """Test that override patches reject unknown fields."""
        with pytest.raises(ValidationError):
            PluginOptions.model_validate({"override": {"bar": {"licence": "MIT"}}})

    def test_invalid_ignore_range(self) -> None:
        """Test that ignore rules must carry valid version ranges."""
        with pytest.raises(ValidationError) as exc_info:
            PluginOptions.model_validate({"ignore": ["foo@not-a-range"]})

        assert "invalid version range" in str(exc_info.value)

    def test_invalid_override_range(self) -> None:
        """Test that override keys must carry valid version ranges."""
        with pytest.raises(ValidationError):
            PluginOptions.model_validate(
                {"override": {"foo@not-a-range": {"licenseName": "MIT"}}}
            )

    def test_scoped_rules_are_valid(self) -> None:
        """Test that scoped package rules pass range validation."""
        options = PluginOptions.model_validate(
            {"ignore": ["@types/*", "@babel/core@^7.0.0"]}
        )

        assert options.ignore == ["@types/*", "@babel/core@^7.0.0"]

    def test_output_writer_callable(self) -> None:
        """Test that a render function is accepted as output writer."""

        def render(context: dict) -> str:
            return "rendered"

        options = PluginOptions(output_writer=render)

        assert options.output_writer is render

    def test_output_writer_rejects_other_types(self) -> None:
        """Test that output writer must be a string or callable."""
        with pytest.raises(ValidationError):
            PluginOptions.model_validate({"outputWriter": 42})

    def test_empty_output_filename(self) -> None:
        """Test that an empty output filename is rejected."""
        with pytest.raises(ValidationError):
            PluginOptions.model_validate({"outputFilename": " "})

    def test_additional_licenses(self) -> None:
        """Test that additional entries are records or literal strings."""
        options = PluginOptions.model_validate(
            {
                "additionalLicenses": [
                    {"name": "fonts", "licenseName": "OFL-1.1"},
                    "Icons by Example Co.",
                ]
            }
        )

        assert options.additional_licenses[0] == LicenseRecord(
            name="fonts", license_name="OFL-1.1"
        )
        assert options.additional_licenses[1] == "Icons by Example Co."

    def test_unknown_option_forbidden(self) -> None:
        """Test that unknown options are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            PluginOptions.model_validate({"allowList": ["MIT"]})

        assert "allowList" in str(exc_info.value)
