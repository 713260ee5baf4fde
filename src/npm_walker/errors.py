"""Exceptions raised while walking an installed dependency tree."""

from __future__ import annotations

from pathlib import Path


class ArgumentError(ValueError):
    """Raised when a walker is constructed with an invalid root path."""


class ManifestError(RuntimeError):
    """Raised when a package.json exists but cannot be read or parsed."""


class ResolutionError(RuntimeError):
    """Raised when a required dependency cannot be located on disk.

    This normally means the package was deleted after install (check ignore
    settings of whatever copied the tree) or the install itself failed.
    """

    def __init__(self, module_name: str, search_path: Path) -> None:
        self.module_name = module_name
        self.search_path = search_path
        super().__init__(
            f'Failed to locate module "{module_name}" from "{search_path}". '
            "Either the package was removed after install or the installation failed."
        )
