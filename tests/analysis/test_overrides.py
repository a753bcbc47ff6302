"""Tests for license override functionality."""
from notice_checker.analysis.overrides import override_licenses
from notice_checker.models.record import LicensePatch, LicenseRecord


def _records() -> dict[str, LicenseRecord]:
    return {
        "bar": LicenseRecord(
            name="bar",
            version="1.4.0",
            author="Bar Author",
            homepage="https://bar.example",
            license_name="SEE LICENSE IN LICENSE.md",
            license_text="Bar license text",
        ),
        "baz": LicenseRecord(name="baz", version="3.0.0", license_name="ISC"),
    }


class TestOverrideLicenses:
    """Tests for override_licenses function."""

    def test_patches_only_given_field(self) -> None:
        """Test that bar@1.x with a license name changes only that field."""
        records = _records()

        result = override_licenses(
            records, {"bar@1.x": LicensePatch(license_name="MIT")}
        )

        assert result["bar"].license_name == "MIT"
        assert result["bar"].version == "1.4.0"
        assert result["bar"].author == "Bar Author"
        assert result["bar"].homepage == "https://bar.example"
        assert result["bar"].license_text == "Bar license text"
        assert result["baz"] == records["baz"]

    def test_version_mismatch_is_not_patched(self) -> None:
        """Test that bar@2.x leaves bar 1.4.0 alone."""
        result = override_licenses(
            _records(), {"bar@2.x": LicensePatch(license_name="MIT")}
        )

        assert result["bar"].license_name == "SEE LICENSE IN LICENSE.md"

    def test_name_match_is_exact(self) -> None:
        """Test that override keys are not glob patterns."""
        result = override_licenses(
            _records(), {"ba*": LicensePatch(license_name="MIT")}
        )

        assert result["bar"].license_name == "SEE LICENSE IN LICENSE.md"
        assert result["baz"].license_name == "ISC"

    def test_later_rules_overwrite_earlier_fields(self) -> None:
        """Test that rules apply in order, later fields winning."""
        result = override_licenses(
            _records(),
            {
                "bar": LicensePatch(license_name="MIT", author="First"),
                "bar@^1.0.0": LicensePatch(license_name="Apache-2.0"),
            },
        )

        assert result["bar"].license_name == "Apache-2.0"
        assert result["bar"].author == "First"

    def test_version_range_uses_collected_version(self) -> None:
        """Test that a patched version does not affect later range checks."""
        result = override_licenses(
            _records(),
            {
                "bar": LicensePatch(version="2.0.0"),
                "bar@^1.0.0": LicensePatch(license_name="MIT"),
            },
        )

        assert result["bar"].version == "2.0.0"
        assert result["bar"].license_name == "MIT"

    def test_camel_case_patch_fields(self) -> None:
        """Test that patches accept camelCase option names."""
        patch = LicensePatch.model_validate({"licenseText": "Patched text"})

        result = override_licenses(_records(), {"baz": patch})

        assert result["baz"].license_text == "Patched text"
        assert result["baz"].license_name == "ISC"

    def test_unknown_dependency_no_error(self) -> None:
        """Test that an override for a missing dependency is ignored."""
        records = _records()

        result = override_licenses(records, {"missing": LicensePatch(license_name="MIT")})

        assert result == records

    def test_empty_overrides_return_copy(self) -> None:
        """Test that no overrides return an equal but new mapping."""
        records = _records()

        result = override_licenses(records, {})

        assert result == records
        assert result is not records

    def test_input_is_not_mutated(self) -> None:
        """Test that the mapping and records passed in are left untouched."""
        records = _records()
        original_bar = records["bar"]
        snapshot = {name: record.model_dump() for name, record in records.items()}

        override_licenses(records, {"bar": LicensePatch(license_name="MIT")})

        assert records["bar"] is original_bar
        assert {
            name: record.model_dump() for name, record in records.items()
        } == snapshot
