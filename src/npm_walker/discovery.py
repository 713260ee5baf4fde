"""Locate installed packages the way Node resolves them from a directory."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path


def iter_candidates(
    name: str, from_path: Path, modules_dir: str = "node_modules"
) -> Iterator[Path]:
    """Yield ``<ancestor>/node_modules/<name>`` for each ancestor of from_path.

    Ancestors that are themselves ``node_modules`` folders are skipped, so a
    package at ``a/node_modules/b`` looks in ``a/node_modules/b/node_modules``,
    then ``a/node_modules`` (hoisted), and so on up to the filesystem root.
    """
    for directory in (from_path, *from_path.parents):
        if directory.name == modules_dir:
            continue
        yield directory / modules_dir / name


def locate_module(name: str, from_path: Path, modules_dir: str = "node_modules") -> Path | None:
    """Return the closest installed directory for ``name``, or None."""
    for candidate in iter_candidates(name, from_path, modules_dir):
        if candidate.exists():
            return candidate
    return None
