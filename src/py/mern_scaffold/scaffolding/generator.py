"""Project scaffolding generator.

This module creates the project folder tree and writes the profile's files
from Jinja2 templates.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from mern_scaffold.exceptions import TemplateNotFoundError
from mern_scaffold.scaffolding.profiles import SUBDIRECTORIES
from mern_scaffold.utils import console, get_template_dir

if TYPE_CHECKING:
    from mern_scaffold.scaffolding.profiles import ScaffoldProfile

__all__ = (
    "TemplateContext",
    "create_directories",
    "find_template",
    "generate_project",
    "render_template",
    "resolve_target_dir",
)

_DOTFILE_PREFIX = "dot."
_TEMPLATE_SUFFIX = ".j2"


@dataclass
class TemplateContext:
    """Context variables for template rendering.

    Only ``project_name`` comes from the operator; the remaining values are the
    defaults written into the generated ``.env`` and docs.

    Attributes:
        project_name: Folder name chosen at the prompt
        profile: The selected scaffolding profile
        port: Port the generated server listens on
        mongo_uri: MongoDB connection string
        jwt_secret: Secret used to sign tokens
        jwt_expire: Token lifetime
        node_env: Value of ``NODE_ENV``
        client_url: Allowed CORS origin
    """

    project_name: str
    profile: "ScaffoldProfile"
    port: int = 5000
    mongo_uri: str = "mongodb://localhost:27017/mern_app"
    jwt_secret: str = "supersecretkey"
    jwt_expire: str = "30d"
    node_env: str = "development"
    client_url: str = "http://localhost:3000"

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for Jinja2 rendering.

        Returns:
            Dictionary of template variables.
        """
        return {
            "project_name": self.project_name,
            "port": self.port,
            "mongo_uri": self.mongo_uri,
            "jwt_secret": self.jwt_secret,
            "jwt_expire": self.jwt_expire,
            "node_env": self.node_env,
            "client_url": self.client_url,
        }


def resolve_target_dir(folder_name: str, cwd: "Path | None" = None) -> Path:
    """Resolve the project folder against the working directory.

    Args:
        folder_name: Folder name chosen at the prompt.
        cwd: Base directory. Defaults to the process working directory.

    Returns:
        Absolute path of the project folder.
    """
    return Path(cwd or Path.cwd()).joinpath(folder_name).resolve()


def create_directories(target_dir: Path) -> list[Path]:
    """Create the project folder and its fixed subdirectories.

    Existing directories are left in place. Filesystem errors propagate and
    directories created before the failure are kept.

    Args:
        target_dir: Absolute path of the project folder.

    Returns:
        The subdirectories, in creation order.
    """
    target_dir.mkdir(parents=True, exist_ok=True)
    created: list[Path] = []
    for name in SUBDIRECTORIES:
        directory = target_dir / name
        directory.mkdir(parents=True, exist_ok=True)
        created.append(directory)
    return created


def render_template(template_path: Path, context: dict[str, Any]) -> str:
    """Render a Jinja2 template with the given context.

    Templates are rendered with autoescaping disabled because the output is
    JavaScript and configuration files, not HTML.

    Args:
        template_path: Path to the template file.
        context: Dictionary of template variables.

    Returns:
        Rendered template content.
    """
    from jinja2 import Environment, FileSystemLoader

    env = Environment(
        loader=FileSystemLoader(str(template_path.parent)),
        keep_trailing_newline=True,
        autoescape=False,  # noqa: S701
    )
    template = env.get_template(template_path.name)
    return template.render(**context)


def _template_name(relative_path: str) -> str:
    path = Path(relative_path)
    name = path.name
    if name.startswith("."):
        name = _DOTFILE_PREFIX + name[1:]
    return str(path.with_name(name + _TEMPLATE_SUFFIX))


def find_template(relative_path: str, profile: "ScaffoldProfile", template_dir: "Path | None" = None) -> Path:
    """Locate the template for an output file.

    The profile directory is searched first, then ``base``. Dotfiles are stored
    as ``dot.<name>.j2`` so they survive packaging.

    Args:
        relative_path: Output path relative to the project folder.
        profile: The selected profile.
        template_dir: Root of the template tree. Defaults to the bundled templates.

    Raises:
        TemplateNotFoundError: If neither directory has the template.

    Returns:
        Path to the template file.
    """
    template_dir = template_dir or get_template_dir()
    name = _template_name(relative_path)
    for candidate in (template_dir / profile.type.value / name, template_dir / "base" / name):
        if candidate.is_file():
            return candidate
    raise TemplateNotFoundError(relative_path, profile.type.value)


def generate_project(
    target_dir: Path,
    context: TemplateContext,
    *,
    template_dir: "Path | None" = None,
) -> list[Path]:
    """Generate project files from templates.

    Every file of the profile is written, replacing whatever was at that path.

    Args:
        target_dir: Project folder to generate files in.
        context: Template context with configuration.
        template_dir: Root of the template tree. Defaults to the bundled templates.

    Returns:
        List of generated file paths.
    """
    context_dict = context.to_dict()
    generated_files: list[Path] = []

    for relative_path in context.profile.files:
        template_path = find_template(relative_path, context.profile, template_dir)
        output_path = target_dir / relative_path
        _render_and_write(template_path, output_path, context_dict)
        generated_files.append(output_path)

    return generated_files


def _render_and_write(template_path: Path, output_path: Path, context: dict[str, Any]) -> None:
    """Render a template and write to output file.

    Args:
        template_path: Path to the template file.
        output_path: Path to write the rendered content.
        context: Template context dictionary.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)

    content = render_template(template_path, context)
    output_path.write_text(content, encoding="utf-8")
    console.print(f"[green]Created {escape(str(output_path))}[/]")
