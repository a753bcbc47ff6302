"""Shared fixtures for notice-checker tests."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Optional

import pytest
from click.testing import CliRunner

MIT_TEXT = (
    "MIT License\n"
    "\n"
    "Permission is hereby granted, free of charge, to any person obtaining a copy "
    "of this software and associated documentation files (the \"Software\"), to deal "
    "in the Software without restriction.\n"
)

WritePackage = Callable[..., Path]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def mit_text() -> str:
    """Provide a short MIT license text."""
    return MIT_TEXT


@pytest.fixture
def write_package(tmp_path: Path) -> WritePackage:
    """Create installed packages under ``tmp_path/node_modules``.

    Returns a factory taking the package name, an optional manifest
    mapping (defaults to name/version/MIT) and optional license file
    name and contents. It returns the package root directory.
    """

    def _write(
        name: str,
        manifest: Optional[dict[str, Any]] = None,
        license_file: Optional[str] = "LICENSE",
        license_text: str = MIT_TEXT,
        base: Optional[Path] = None,
    ) -> Path:
        root = (base or tmp_path) / "node_modules" / name
        root.mkdir(parents=True, exist_ok=True)
        data = (
            manifest
            if manifest is not None
            else {"name": name, "version": "1.0.0", "license": "MIT"}
        )
        (root / "package.json").write_text(json.dumps(data), encoding="utf-8")
        if license_file is not None:
            (root / license_file).write_text(license_text, encoding="utf-8")
        return root

    return _write
