"""``package.json`` rewriting.

``npm init`` writes the manifest; the generator then overwrites a fixed set of
fields and keeps everything else the initializer produced.
"""

import copy
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import msgspec

from mern_scaffold.exceptions import ManifestNotFoundError, ManifestParseError

__all__ = (
    "MANIFEST_FILENAME",
    "apply_manifest_fields",
    "load_manifest",
    "rewrite_manifest",
    "write_manifest",
)

MANIFEST_FILENAME = "package.json"


def load_manifest(path: Path) -> dict[str, Any]:
    """Read and parse a package manifest.

    Args:
        path: Path to ``package.json``.

    Raises:
        ManifestNotFoundError: If the file does not exist.
        ManifestParseError: If the content is not a JSON object.

    Returns:
        The parsed manifest.
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError as e:
        raise ManifestNotFoundError(str(path)) from e
    try:
        manifest = msgspec.json.decode(raw)
    except msgspec.DecodeError as e:
        raise ManifestParseError(str(path), str(e)) from e
    if not isinstance(manifest, dict):
        raise ManifestParseError(str(path), f"expected a JSON object, got {type(manifest).__name__}")
    return manifest


def apply_manifest_fields(manifest: dict[str, Any], fields: Mapping[str, Any]) -> dict[str, Any]:
    """Overwrite the given fields in place.

    Existing keys keep their position; new keys are appended in ``fields`` order.

    Args:
        manifest: Parsed manifest.
        fields: Keys to set and their values.

    Returns:
        The same manifest object.
    """
    for key, value in fields.items():
        manifest[key] = copy.deepcopy(value)
    return manifest


def write_manifest(path: Path, manifest: dict[str, Any]) -> None:
    """Serialize a manifest with two-space indentation.

    Args:
        path: Path to ``package.json``.
        manifest: Manifest to write.
    """
    content = msgspec.json.format(msgspec.json.encode(manifest), indent=2)
    path.write_bytes(content + b"\n")


def rewrite_manifest(project_dir: Path, fields: Mapping[str, Any]) -> dict[str, Any]:
    """Load ``package.json`` from a project, apply fields and write it back.

    Args:
        project_dir: Project folder holding the manifest.
        fields: Keys to overwrite.

    Returns:
        The rewritten manifest.
    """
    path = project_dir / MANIFEST_FILENAME
    manifest = apply_manifest_fields(load_manifest(path), fields)
    write_manifest(path, manifest)
    return manifest
