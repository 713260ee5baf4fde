"""Configuration loader for the tree walker.

Settings are read from a JSON file when one is given explicitly or through
the ``NPM_WALKER_CONFIG`` environment variable; otherwise the npm defaults
are used. Files are validated against ``SETTINGS_SCHEMA`` with jsonschema.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

CONFIG_PATH_ENV_VAR = "NPM_WALKER_CONFIG"

SETTINGS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "modulesDir": {"type": "string", "minLength": 1},
        "manifestName": {"type": "string", "minLength": 1},
        "prebuildTools": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
            "uniqueItems": True,
        },
        "buildDescriptors": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
            "uniqueItems": True,
        },
    },
}


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class WalkerSettings:
    """Filesystem conventions used while walking and classifying packages."""

    modules_dir: str = "node_modules"
    manifest_name: str = "package.json"
    prebuild_tools: tuple[str, ...] = ("prebuild-install",)
    build_descriptors: tuple[str, ...] = ("binding.gyp",)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WalkerSettings:
        defaults = cls()
        return cls(
            modules_dir=data.get("modulesDir", defaults.modules_dir),
            manifest_name=data.get("manifestName", defaults.manifest_name),
            prebuild_tools=tuple(data.get("prebuildTools", defaults.prebuild_tools)),
            build_descriptors=tuple(data.get("buildDescriptors", defaults.build_descriptors)),
        )


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. NPM_WALKER_CONFIG environment variable
    3. None (built-in defaults)
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def _format_errors(errors: list) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def load_settings(path: Path | str | None = None) -> WalkerSettings:
    """Load and validate walker settings.

    Args:
        path: Optional path to a JSON config file. If not provided, uses the
            NPM_WALKER_CONFIG env var or falls back to the defaults.

    Returns:
        A WalkerSettings instance.

    Raises:
        ConfigError: If the file cannot be read or does not match the schema.
    """
    config_path = _resolve_config_path(path)
    if config_path is None:
        return WalkerSettings()

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    validator = Draft202012Validator(SETTINGS_SCHEMA)
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    if errors:
        raise ConfigError(f"Invalid configuration in {config_path}:\n{_format_errors(errors)}")

    return WalkerSettings.from_dict(data)
