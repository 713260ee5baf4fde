"""Core scanning entrypoints.

This module has no output formatting so the CLI and library callers share
the same walk and report shape.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from .config import WalkerSettings, load_settings
from .models import DepType
from .report import aggregate
from .walker import Walker


def scan_tree(
    root: Path,
    settings: WalkerSettings | None = None,
    production_only: bool = False,
) -> dict[str, Any]:
    """Walk the dependency tree below root and return a report dict.

    Params:
        root: directory of the package whose dependencies are walked
        settings: walker settings; when None they are loaded from the
            NPM_WALKER_CONFIG file, or the defaults are used
        production_only: if True, modules only reachable through
            devDependencies are left out of the report

    Raises ResolutionError when a required dependency is not installed.
    """
    root = Path(os.path.abspath(root))
    settings = settings or load_settings()

    modules = Walker(root, settings=settings).walk_tree()
    if production_only:
        modules = tuple(m for m in modules if m.relationship.type != DepType.DEV)

    return aggregate(root, modules)
