"""Load package.json into a PackageManifest."""

from __future__ import annotations

import json
from pathlib import Path

from ..errors import ManifestError
from ..models import PackageManifest


def load(module_path: Path, manifest_name: str = "package.json") -> PackageManifest | None:
    """Return the manifest of the package at module_path, or None if it has none.

    A missing file is a normal state (package managers leave empty directories
    behind). Unreadable or malformed files raise ManifestError.
    """
    path = module_path / manifest_name
    if not path.is_file():
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Failed to read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid JSON in {path}: {exc}") from exc

    return PackageManifest.from_dict(data, source=str(path))
