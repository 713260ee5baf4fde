"""Data models for the dependency tree walker."""

from __future__ import annotations

from .manifest import PackageManifest
from .module import DiscoveredModule
from .native_module import NativeModuleType
from .relationship import (
    DepRelationship,
    DepRequireState,
    DepType,
    child_dep_type,
    child_required,
    dep_relationship_greater,
    dep_require_state_greater,
    dep_type_greater,
)

__all__ = [
    "DepRelationship",
    "DepRequireState",
    "DepType",
    "DiscoveredModule",
    "NativeModuleType",
    "PackageManifest",
    "child_dep_type",
    "child_required",
    "dep_relationship_greater",
    "dep_require_state_greater",
    "dep_type_greater",
]
