"""Project scaffolding module for mern-scaffold.

This module writes the folder tree and template files of a new Express and
MongoDB backend. The file set is chosen by profile:

- minimal: item API with a JWT middleware
- auth: user registration and login, protected item routes, error handling
"""

from mern_scaffold.scaffolding.generator import (
    TemplateContext,
    create_directories,
    generate_project,
    resolve_target_dir,
)
from mern_scaffold.scaffolding.profiles import (
    SUBDIRECTORIES,
    ProfileType,
    ScaffoldProfile,
    get_available_profiles,
    get_profile,
)

__all__ = [
    "SUBDIRECTORIES",
    "ProfileType",
    "ScaffoldProfile",
    "TemplateContext",
    "create_directories",
    "generate_project",
    "get_available_profiles",
    "get_profile",
    "resolve_target_dir",
]
