"""Discovered module record."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .native_module import NativeModuleType
from .relationship import DepRelationship


@dataclass(frozen=True)
class DiscoveredModule:
    """One physical package directory found during a tree walk.

    ``path`` is the identity of the record. ``relationship`` is the strongest
    relationship seen so far; the walker swaps in a new record when it changes.
    """

    path: Path
    name: str
    relationship: DepRelationship
    native_module_type: NativeModuleType

    def to_dict(self, root: Path | None = None) -> dict[str, object]:
        # Hoisted installs may live above the root, so relpath rather than relative_to.
        path = Path(os.path.relpath(self.path, root)).as_posix() if root else str(self.path)
        return {
            "name": self.name,
            "path": path,
            "type": self.relationship.type.name,
            "required": self.relationship.required.name,
            "relationship": str(self.relationship),
            "nativeModuleType": self.native_module_type.value,
        }
