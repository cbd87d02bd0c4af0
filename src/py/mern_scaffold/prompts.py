"""Interactive prompt for the project folder name."""

import re
from pathlib import PurePosixPath, PureWindowsPath
from typing import TYPE_CHECKING

from mern_scaffold.exceptions import InvalidFolderNameError

if TYPE_CHECKING:
    from rich.console import Console

__all__ = (
    "DEFAULT_FOLDER_NAME",
    "PROMPT_TEXT",
    "ask_folder_name",
    "resolve_folder_name",
    "validate_folder_name",
)

DEFAULT_FOLDER_NAME = "server"
PROMPT_TEXT = f"Enter folder name for your project (default: {DEFAULT_FOLDER_NAME})"

_INVALID_CHARACTERS = re.compile(r'[<>:"|?*\x00-\x1f\x7f]')
_RESERVED_NAMES = frozenset(
    {"CON", "PRN", "AUX", "NUL"} | {f"COM{i}" for i in range(1, 10)} | {f"LPT{i}" for i in range(1, 10)}
)


def resolve_folder_name(answer: "str | None") -> str:
    """Trim the operator's answer and fall back to the default.

    Args:
        answer: Raw line read from the prompt, or None on end of input.

    Returns:
        The trimmed answer, or ``"server"`` when it is blank.
    """
    if answer is None:
        return DEFAULT_FOLDER_NAME
    return answer.strip() or DEFAULT_FOLDER_NAME


def validate_folder_name(folder_name: str) -> str:
    """Check that a folder name is a single, portable path segment.

    Args:
        folder_name: The resolved folder name.

    Raises:
        InvalidFolderNameError: If the name would escape the working directory
            or cannot be created on common filesystems.

    Returns:
        The folder name, unchanged.
    """
    if folder_name in {".", ".."}:
        raise InvalidFolderNameError(folder_name, "it must name a new folder, not the current or parent directory")
    if "/" in folder_name or "\\" in folder_name:
        raise InvalidFolderNameError(folder_name, "path separators are not allowed")
    if PurePosixPath(folder_name).is_absolute() or PureWindowsPath(folder_name).is_absolute():
        raise InvalidFolderNameError(folder_name, "absolute paths are not allowed")
    match = _INVALID_CHARACTERS.search(folder_name)
    if match:
        raise InvalidFolderNameError(folder_name, f"character {match.group()!r} is not allowed")
    if folder_name.split(".")[0].upper() in _RESERVED_NAMES:
        raise InvalidFolderNameError(folder_name, "it is a reserved device name")
    return folder_name


def ask_folder_name(console: "Console | None" = None) -> str:
    """Prompt for the project folder name.

    Blocks until a line is entered. End of input counts as a blank answer.

    Args:
        console: Console used to display the prompt.

    Returns:
        The validated folder name.
    """
    from rich.prompt import Prompt

    try:
        answer: "str | None" = Prompt.ask(PROMPT_TEXT, console=console, default="", show_default=False)
    except EOFError:
        answer = None
    return validate_folder_name(resolve_folder_name(answer))
