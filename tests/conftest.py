"""Shared fixtures for building installed package trees on disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


def write_package(
    directory: Path,
    name: str,
    dependencies: dict[str, str] | None = None,
    dev_dependencies: dict[str, str] | None = None,
    optional_dependencies: dict[str, str] | None = None,
    **extra: Any,
) -> Path:
    """Create ``directory`` with a package.json declaring the given sections."""
    directory.mkdir(parents=True, exist_ok=True)
    manifest: dict[str, Any] = {"name": name, "version": "1.0.0", **extra}
    if dependencies is not None:
        manifest["dependencies"] = dependencies
    if dev_dependencies is not None:
        manifest["devDependencies"] = dev_dependencies
    if optional_dependencies is not None:
        manifest["optionalDependencies"] = optional_dependencies
    (directory / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
    return directory


@pytest.fixture
def make_package():
    return write_package


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root
