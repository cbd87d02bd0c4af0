"""Profile definitions for scaffolding.

A profile is a named bundle of template files, npm dependencies and the
``package.json`` fields the generator writes after ``npm init``.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

__all__ = (
    "PROFILES",
    "SCRIPTS",
    "SUBDIRECTORIES",
    "ProfileType",
    "ScaffoldProfile",
    "get_available_profiles",
    "get_profile",
)


def _str_list_factory() -> list[str]:
    return []


def _dict_factory() -> dict[str, Any]:
    return {}


_ListStrFactory: Callable[[], list[str]] = _str_list_factory
_DictStrAnyFactory: Callable[[], dict[str, Any]] = _dict_factory

SUBDIRECTORIES: tuple[str, ...] = ("config", "controllers", "middlewares", "models", "routes", "utils")
"""Directories created under the project folder for every profile."""

SCRIPTS: dict[str, str] = {"start": "node server.js", "dev": "nodemon server.js"}
"""Script map written into ``package.json``."""


class ProfileType(str, Enum):
    """Supported scaffolding profiles."""

    MINIMAL = "minimal"
    AUTH = "auth"


@dataclass
class ScaffoldProfile:
    """Configuration for a backend scaffolding profile.

    Attributes:
        name: Display name for the profile
        type: Profile type enum
        description: Brief description shown in help output
        dependencies: NPM dependencies to install
        dev_dependencies: NPM dev dependencies to install
        files: Output paths (relative to the project folder) to generate
        manifest_fields: ``package.json`` keys overwritten after ``npm init``
    """

    name: str
    type: ProfileType
    description: str
    dependencies: list[str] = field(default_factory=_ListStrFactory)
    dev_dependencies: list[str] = field(default_factory=_ListStrFactory)
    files: list[str] = field(default_factory=_ListStrFactory)
    manifest_fields: dict[str, Any] = field(default_factory=_DictStrAnyFactory)


PROFILES: dict[ProfileType, ScaffoldProfile] = {
    ProfileType.MINIMAL: ScaffoldProfile(
        name="Minimal",
        type=ProfileType.MINIMAL,
        description="Express + MongoDB item API with a JWT middleware",
        dependencies=["express", "mongoose", "dotenv", "cors", "jsonwebtoken"],
        dev_dependencies=["nodemon"],
        files=[
            ".env",
            ".gitignore",
            "server.js",
            "config/db.js",
            "controllers/itemController.js",
            "middlewares/authMiddleware.js",
            "models/itemModel.js",
            "routes/itemRoutes.js",
            "utils/generateToken.js",
        ],
        manifest_fields={
            "type": "module",
            "scripts": SCRIPTS,
            "description": "MERN backend server with ESM modules",
            "keywords": ["mern", "express", "mongodb", "nodejs", "backend"],
        },
    ),
    ProfileType.AUTH: ScaffoldProfile(
        name="Full auth",
        type=ProfileType.AUTH,
        description="Express + MongoDB API with user registration, login and protected item routes",
        dependencies=["express", "mongoose", "dotenv", "cors", "jsonwebtoken", "bcryptjs", "morgan"],
        dev_dependencies=["nodemon"],
        files=[
            ".env",
            ".gitignore",
            "README.md",
            "server.js",
            "config/db.js",
            "controllers/authController.js",
            "controllers/itemController.js",
            "middlewares/authMiddleware.js",
            "middlewares/asyncHandler.js",
            "middlewares/errorHandler.js",
            "models/User.js",
            "models/Item.js",
            "routes/auth.js",
            "routes/items.js",
            "utils/generateToken.js",
        ],
        manifest_fields={
            "type": "module",
            "main": "server.js",
            "scripts": SCRIPTS,
            "description": "MERN backend server with JWT authentication",
            "keywords": ["mern", "express", "mongodb", "nodejs", "backend", "jwt", "auth"],
            "author": "",
            "license": "MIT",
        },
    ),
}


def get_available_profiles() -> list[ScaffoldProfile]:
    """Get all available scaffolding profiles.

    Returns:
        List of all profile configurations.
    """
    return list(PROFILES.values())


def get_profile(profile_type: "ProfileType | str") -> "ScaffoldProfile | None":
    """Get a specific profile by type.

    Args:
        profile_type: The profile type (enum or string value).

    Returns:
        The profile configuration, or None if not found.
    """
    if isinstance(profile_type, str):
        try:
            profile_type = ProfileType(profile_type)
        except ValueError:
            return None
    return PROFILES.get(profile_type)
