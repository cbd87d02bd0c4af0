"""Utility helpers for mern-scaffold."""

from importlib.util import find_spec
from pathlib import Path

from rich.console import Console

__all__ = ("console", "get_package_path", "get_template_dir")

console = Console()
"""Shared console for operator-facing output."""


def get_package_path(*parts: str) -> Path:
    """Resolve a path inside the installed mern-scaffold package.

    Args:
        *parts: Path segments relative to the package root.

    Returns:
        The resolved package path.
    """
    spec = find_spec("mern_scaffold")
    if spec and spec.origin:
        return Path(spec.origin).parent.joinpath(*parts)
    # Fallback for uncommon import contexts.
    return Path(__file__).resolve().parent.joinpath(*parts)


def get_template_dir() -> Path:
    """Get the directory containing the profile templates.

    Returns:
        Path to the templates directory.
    """
    return get_package_path("templates")
