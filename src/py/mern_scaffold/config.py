"""Generator configuration.

Every field can be preset through an environment variable and is overridden by
the matching command line option.
"""

import os
from dataclasses import dataclass, field

from mern_scaffold.scaffolding.profiles import get_profile

__all__ = (
    "DEFAULT_EXECUTOR",
    "DEFAULT_PROFILE",
    "EXECUTOR_NAMES",
    "TRUE_VALUES",
    "ScaffoldConfig",
)

TRUE_VALUES = {"True", "true", "1", "yes", "Y", "T"}
DEFAULT_PROFILE = "minimal"
DEFAULT_EXECUTOR = "npm"
EXECUTOR_NAMES = ("npm", "pnpm", "yarn", "bun")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip() in TRUE_VALUES


@dataclass
class ScaffoldConfig:
    """Settings for a single generator run.

    Attributes:
        profile: Name of the template profile to generate (``minimal`` or ``auth``).
        executor: Package manager used for init, install and launch steps.
        install: Run the package manager steps after writing the templates.
        update: Attempt the optional "upgrade all dependencies" step.
        start: Launch the generated server's ``dev`` script at the end.
    """

    profile: str = field(default_factory=lambda: os.getenv("MERN_SCAFFOLD_PROFILE", DEFAULT_PROFILE))
    executor: str = field(default_factory=lambda: os.getenv("MERN_SCAFFOLD_EXECUTOR", DEFAULT_EXECUTOR))
    install: bool = field(default_factory=lambda: _env_flag("MERN_SCAFFOLD_INSTALL", True))
    update: bool = field(default_factory=lambda: _env_flag("MERN_SCAFFOLD_UPDATE", True))
    start: bool = field(default_factory=lambda: _env_flag("MERN_SCAFFOLD_START", True))

    def __post_init__(self) -> None:
        """Normalize names and validate them against the known profiles and executors.

        Raises:
            ValueError: If the profile or executor name is unknown.
        """
        self.profile = self.profile.strip().lower()
        self.executor = self.executor.strip().lower()
        if self.executor == "node":
            self.executor = "npm"

        if get_profile(self.profile) is None:
            msg = f"Invalid profile: {self.profile!r}. Expected one of: minimal, auth"
            raise ValueError(msg)
        if self.executor not in EXECUTOR_NAMES:
            msg = f"Invalid executor: {self.executor!r}. Expected one of: npm, pnpm, yarn, bun"
            raise ValueError(msg)
