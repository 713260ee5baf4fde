"""Detect packages that need native build tooling."""

from __future__ import annotations

from pathlib import Path

from .config import WalkerSettings
from .models import NativeModuleType, PackageManifest


def detect_native_module_type(
    module_path: Path,
    manifest: PackageManifest,
    settings: WalkerSettings | None = None,
) -> NativeModuleType:
    """Classify a package as prebuilt, compiled from source, or pure JS.

    A production dependency on a prebuilt-binary fetcher wins over the
    presence of a build descriptor, since such packages ship both.
    """
    settings = settings or WalkerSettings()
    if any(tool in manifest.dependencies for tool in settings.prebuild_tools):
        return NativeModuleType.PREBUILD
    if any((module_path / name).exists() for name in settings.build_descriptors):
        return NativeModuleType.NODE_GYP
    return NativeModuleType.NONE
