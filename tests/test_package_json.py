from __future__ import annotations

import json

import pytest

from npm_walker.errors import ManifestError
from npm_walker.models import PackageManifest
from npm_walker.parsers import package_json


def test_missing_manifest_returns_none(tmp_path):
    assert package_json.load(tmp_path) is None


def test_absent_sections_are_empty(tmp_path):
    (tmp_path / "package.json").write_text(json.dumps({"name": "a"}), encoding="utf-8")
    manifest = package_json.load(tmp_path)
    assert manifest == PackageManifest(name="a")
    assert manifest.dependencies == {}
    assert manifest.dev_dependencies == {}
    assert manifest.optional_dependencies == {}


def test_sections_are_read(tmp_path):
    data = {
        "name": "a",
        "dependencies": {"b": "^1.0.0"},
        "devDependencies": {"c": "~2.0.0"},
        "optionalDependencies": {"d": "*"},
        "peerDependencies": {"e": "*"},
    }
    (tmp_path / "package.json").write_text(json.dumps(data), encoding="utf-8")
    manifest = package_json.load(tmp_path)
    assert manifest.dependencies == {"b": "^1.0.0"}
    assert manifest.dev_dependencies == {"c": "~2.0.0"}
    assert manifest.optional_dependencies == {"d": "*"}


def test_custom_manifest_name(tmp_path):
    (tmp_path / "manifest.json").write_text(json.dumps({"name": "a"}), encoding="utf-8")
    assert package_json.load(tmp_path) is None
    assert package_json.load(tmp_path, manifest_name="manifest.json").name == "a"


@pytest.mark.parametrize(
    "content",
    [
        "{oops",
        json.dumps(["not", "an", "object"]),
        json.dumps({"name": 1}),
        json.dumps({"name": "a", "dependencies": ["b"]}),
    ],
)
def test_malformed_manifest_raises(tmp_path, content):
    (tmp_path / "package.json").write_text(content, encoding="utf-8")
    with pytest.raises(ManifestError):
        package_json.load(tmp_path)
