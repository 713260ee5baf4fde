"""Walk the installed dependency tree of a package.

The walker starts at a root package, resolves every declared dependency to
the directory it is physically installed in (following Node's hoisting
lookup) and records one ``DiscoveredModule`` per directory. When the same
directory is reached through several declaration chains, the strongest
relationship wins.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable
from dataclasses import replace
from functools import partial
from pathlib import Path

from .config import WalkerSettings
from .discovery import locate_module
from .errors import ArgumentError, ResolutionError
from .models import (
    DepRelationship,
    DepRequireState,
    DepType,
    DiscoveredModule,
    NativeModuleType,
    PackageManifest,
    child_dep_type,
    child_required,
    dep_relationship_greater,
)
from .native import detect_native_module_type
from .parsers import package_json

logger = logging.getLogger(__name__)

ManifestLoader = Callable[[Path], PackageManifest | None]
NativeDetector = Callable[[Path, PackageManifest], NativeModuleType]
# (dependency name, declaring package path, relationship to propagate)
Edge = tuple[str, Path, DepRelationship]


class Walker:
    """Discover the physical dependency tree below ``module_path``.

    ``walk_tree`` computes the tree once per instance; later and concurrent
    calls return the same tuple.
    """

    def __init__(
        self,
        module_path: str | os.PathLike[str],
        *,
        settings: WalkerSettings | None = None,
        manifest_loader: ManifestLoader | None = None,
        native_detector: NativeDetector | None = None,
    ) -> None:
        if not isinstance(module_path, (str, os.PathLike)):
            raise ArgumentError("module_path must be provided as a string or path")
        # Path("") normalises to ".", so both spellings count as absent.
        if os.fspath(module_path) in ("", "."):
            raise ArgumentError("module_path must be provided as a non-empty string or path")
        logger.debug("creating walker with root_module=%s", module_path)

        self._root_module = Path(module_path)
        self._settings = settings or WalkerSettings()
        self._load_manifest = manifest_loader or partial(
            package_json.load, manifest_name=self._settings.manifest_name
        )
        self._detect_native = native_detector or partial(
            detect_native_module_type, settings=self._settings
        )

        self._modules: dict[Path, DiscoveredModule] = {}
        self._cache: tuple[DiscoveredModule, ...] | None = None
        self._lock = threading.Lock()

    @property
    def root_module(self) -> Path:
        return self._root_module

    def get_root_module(self) -> Path:
        return self._root_module

    def walk_tree(self) -> tuple[DiscoveredModule, ...]:
        """Return every discovered module in first-visited order.

        Raises:
            ResolutionError: If a required dependency is not installed.
            ManifestError: If an installed package.json cannot be parsed.
        """
        logger.debug("starting tree walk")
        with self._lock:
            if self._cache is None:
                self._cache = self._uncached_walk_tree()
            else:
                logger.debug("tree walk completed already, returning cached result")
            return self._cache

    def _uncached_walk_tree(self) -> tuple[DiscoveredModule, ...]:
        self._modules = {}
        try:
            root = Path(os.path.abspath(self._root_module))
            pending = self._walk_module(
                root, DepRelationship(DepType.ROOT, DepRequireState.REQUIRED)
            )
            # Children are pushed reversed so they pop in declaration order and
            # each subtree is finished before its next sibling is resolved.
            pending.reverse()
            while pending:
                module_name, module_path, relationship = pending.pop()
                children = self._walk_dependency(module_name, module_path, relationship)
                pending.extend(reversed(children))
            return tuple(self._modules.values())
        finally:
            self._modules = {}

    def _walk_dependency(
        self, module_name: str, module_path: Path, relationship: DepRelationship
    ) -> list[Edge]:
        """Resolve one declared dependency of the package at module_path."""
        discovered = locate_module(module_name, module_path, self._settings.modules_dir)
        if discovered is None:
            if relationship.required != DepRequireState.OPTIONAL:
                raise ResolutionError(module_name, module_path)
            logger.debug("optional dependency %s of %s is not installed", module_name, module_path)
            return []
        return self._walk_module(discovered, relationship)

    def _walk_module(self, module_path: Path, relationship: DepRelationship) -> list[Edge]:
        """Record the package at module_path and return its outgoing edges.

        A package already recorded only has its relationship upgraded; its
        edges were returned on the first visit and are not returned again.
        """
        logger.debug("walk reached: %s type is: %s", module_path, relationship)

        existing = self._modules.get(module_path)
        if existing is not None:
            logger.debug("already walked %s", module_path)
            if dep_relationship_greater(relationship, existing.relationship):
                logger.debug(
                    "existing module has a type of %s, new type would be %s, updating",
                    existing.relationship,
                    relationship,
                )
                self._modules[module_path] = replace(existing, relationship=relationship)
            return []

        manifest = self._load_manifest(module_path)
        if manifest is None:
            # Yarn and npm sometimes leave empty directories behind.
            logger.debug("walk hit a dead end, %s is incomplete", module_path)
            return []

        self._modules[module_path] = DiscoveredModule(
            path=module_path,
            name=manifest.name,
            relationship=relationship,
            native_module_type=self._detect_native(module_path, manifest),
        )

        child_type = child_dep_type(relationship.type)
        edges: list[Edge] = []

        for name in manifest.dependencies:
            # npm copies optional dependencies into "dependencies" on install.
            if name in manifest.optional_dependencies:
                logger.debug(
                    "found %s in prod deps of %s but it is also marked optional",
                    name,
                    module_path,
                )
                continue
            edges.append(
                (
                    name,
                    module_path,
                    DepRelationship(
                        child_type,
                        child_required(relationship.required, DepRequireState.REQUIRED),
                    ),
                )
            )

        for name in manifest.optional_dependencies:
            edges.append(
                (
                    name,
                    module_path,
                    DepRelationship(
                        child_type,
                        child_required(relationship.required, DepRequireState.OPTIONAL),
                    ),
                )
            )

        if relationship.type == DepType.ROOT:
            logger.debug("still at the root, walking down the dev route")
            for name in manifest.dev_dependencies:
                edges.append(
                    (
                        name,
                        module_path,
                        DepRelationship(
                            DepType.DEV,
                            child_required(relationship.required, DepRequireState.REQUIRED),
                        ),
                    )
                )

        return edges
