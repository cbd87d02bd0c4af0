"""Tests for mern_scaffold.manifest module."""

from pathlib import Path

import msgspec
import pytest

from mern_scaffold.exceptions import ManifestNotFoundError, ManifestParseError
from mern_scaffold.manifest import apply_manifest_fields, load_manifest, rewrite_manifest, write_manifest
from mern_scaffold.scaffolding.profiles import PROFILES, SCRIPTS, ProfileType
from tests.conftest import npm_init_manifest


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    project = tmp_path / "myapp"
    project.mkdir()
    (project / "package.json").write_bytes(msgspec.json.encode(npm_init_manifest(project)))
    return project


def test_rewrite_manifest_minimal(project_dir: Path) -> None:
    fields = PROFILES[ProfileType.MINIMAL].manifest_fields

    manifest = rewrite_manifest(project_dir, fields)

    on_disk = msgspec.json.decode((project_dir / "package.json").read_bytes())
    assert on_disk == manifest
    assert on_disk["type"] == "module"
    assert on_disk["scripts"] == {"start": "node server.js", "dev": "nodemon server.js"}
    assert on_disk["keywords"] == ["mern", "express", "mongodb", "nodejs", "backend"]
    # fields produced by the initializer are preserved
    assert on_disk["name"] == "myapp"
    assert on_disk["version"] == "1.0.0"
    assert on_disk["main"] == "index.js"
    assert on_disk["license"] == "ISC"


def test_rewrite_manifest_auth_overwrites_metadata(project_dir: Path) -> None:
    manifest = rewrite_manifest(project_dir, PROFILES[ProfileType.AUTH].manifest_fields)

    assert manifest["main"] == "server.js"
    assert manifest["license"] == "MIT"
    assert manifest["name"] == "myapp"


def test_write_manifest_is_indented_and_ordered(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    manifest = apply_manifest_fields({"name": "app", "scripts": {"test": "x"}}, {"type": "module", "scripts": SCRIPTS})

    write_manifest(path, manifest)

    text = path.read_text()
    assert text.endswith("}\n")
    assert '\n  "name": "app"' in text
    assert list(msgspec.json.decode(text)) == ["name", "scripts", "type"]


def test_apply_manifest_fields_copies_values() -> None:
    manifest = apply_manifest_fields({}, {"scripts": SCRIPTS})
    manifest["scripts"]["lint"] = "eslint ."

    assert "lint" not in SCRIPTS


def test_load_manifest_missing(tmp_path: Path) -> None:
    with pytest.raises(ManifestNotFoundError):
        load_manifest(tmp_path / "package.json")


@pytest.mark.parametrize("content", [b"{not json", b"", b"[1, 2, 3]", b'"text"'])
def test_load_manifest_malformed(tmp_path: Path, content: bytes) -> None:
    path = tmp_path / "package.json"
    path.write_bytes(content)

    with pytest.raises(ManifestParseError):
        load_manifest(path)
