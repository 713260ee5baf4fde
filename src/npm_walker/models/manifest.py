"""Structured view of a package.json dependency declaration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..errors import ManifestError

_SECTIONS = (
    ("dependencies", "dependencies"),
    ("devDependencies", "dev_dependencies"),
    ("optionalDependencies", "optional_dependencies"),
)


@dataclass(frozen=True)
class PackageManifest:
    """Name plus the three dependency sections the walker cares about."""

    name: str
    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)
    optional_dependencies: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: str = "package.json") -> PackageManifest:
        """Build a manifest, normalising absent sections to empty mappings."""
        if not isinstance(data, dict):
            raise ManifestError(f"{source}: manifest must be a JSON object")

        name = data.get("name", "")
        if not isinstance(name, str):
            raise ManifestError(f"{source}: 'name' must be a string")

        sections: dict[str, dict[str, str]] = {}
        for key, attr in _SECTIONS:
            deps = data.get(key) or {}
            if not isinstance(deps, dict):
                raise ManifestError(f"{source}: '{key}' must be an object")
            sections[attr] = {str(dep): str(version) for dep, version in deps.items()}

        return cls(name=name, **sections)
