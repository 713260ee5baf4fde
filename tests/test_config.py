from __future__ import annotations

import json

import pytest

from npm_walker.config import CONFIG_PATH_ENV_VAR, ConfigError, WalkerSettings, load_settings


def test_defaults_without_config(monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)
    settings = load_settings()
    assert settings == WalkerSettings()
    assert settings.modules_dir == "node_modules"
    assert settings.manifest_name == "package.json"
    assert settings.prebuild_tools == ("prebuild-install",)
    assert settings.build_descriptors == ("binding.gyp",)


def test_explicit_path_overrides_defaults(tmp_path):
    path = tmp_path / "walker.json"
    path.write_text(
        json.dumps({"prebuildTools": ["prebuild-install", "node-pre-gyp"]}), encoding="utf-8"
    )
    settings = load_settings(path)
    assert settings.prebuild_tools == ("prebuild-install", "node-pre-gyp")
    assert settings.modules_dir == "node_modules"


def test_env_var_is_used(tmp_path, monkeypatch):
    path = tmp_path / "walker.json"
    path.write_text(json.dumps({"buildDescriptors": ["CMakeLists.txt"]}), encoding="utf-8")
    monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(path))
    assert load_settings().build_descriptors == ("CMakeLists.txt",)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_settings(tmp_path / "missing.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "walker.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_settings(path)


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"modulesDir": ""},
        {"prebuildTools": "prebuild-install"},
        {"buildDescriptors": [1]},
        {"unknown": True},
    ],
)
def test_schema_violations(tmp_path, payload):
    path = tmp_path / "walker.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_settings(path)
