"""Constants for notice-checker."""

# Exit codes
EXIT_SUCCESS = 0  # Report written, violations (if any) were warnings
EXIT_ISSUES = 1  # Violations reported as build errors
EXIT_ERROR = 2  # Run failed due to configuration or manifest error

PLUGIN_NAME = "LicenseCheckerPlugin"

# Dependency layout
MANIFEST_FILENAME = "package.json"
DEPENDENCY_STORE_SEGMENT = "node_modules"
LICENSE_WRAP_WIDTH = 80

# License declared by packages that are explicitly not licensed for reuse
UNLICENSED = "UNLICENSED"

# Placeholder used in messages for missing version/license values
UNKNOWN = "unknown"

# Option defaults
DEFAULT_FILTER = r"(^.*[/\\]node_modules[/\\]((?:@[^/\\]+[/\\])?(?:[^/\\]+)))"
DEFAULT_ALLOW = "(Apache-2.0 OR BSD-2-Clause OR BSD-3-Clause OR MIT)"
DEFAULT_OUTPUT_WRITER = "default"
DEFAULT_OUTPUT_FILENAME = "ThirdPartyNotice.txt"
