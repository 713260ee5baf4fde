"""Report aggregation and JSON-friendly output."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .models import DepRequireState, DepType, DiscoveredModule, NativeModuleType


def aggregate(root: Path, modules: Iterable[DiscoveredModule]) -> dict[str, Any]:
    """Aggregate discovered modules into a single report.

    Module paths are reported relative to ``root`` with POSIX separators; the
    root itself is ``"."``. Totals count modules per relationship type,
    optional modules, and modules needing native build tooling.
    """
    modules = list(modules)

    report: dict[str, Any] = {
        "version": "1",
        "root": str(root),
        "modules": [module.to_dict(root) for module in modules],
        "totals": {
            "modules": len(modules),
            "production": sum(1 for m in modules if m.relationship.type == DepType.PROD),
            "development": sum(1 for m in modules if m.relationship.type == DepType.DEV),
            "optional": sum(
                1 for m in modules if m.relationship.required == DepRequireState.OPTIONAL
            ),
            "native": sum(
                1 for m in modules if m.native_module_type != NativeModuleType.NONE
            ),
        },
    }

    return report
