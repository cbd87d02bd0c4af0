"""Generator run.

``init_project`` performs one linear pass: folders, templates, manifest,
dependencies, optional upgrade, then the dev server. Only the upgrade and the
dev server are allowed to fail, and only the dev server may be interrupted.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from mern_scaffold.executor import Outcome
from mern_scaffold.manifest import rewrite_manifest
from mern_scaffold.scaffolding import TemplateContext, create_directories, generate_project, get_profile
from mern_scaffold.scaffolding.generator import resolve_target_dir
from mern_scaffold.utils import console

if TYPE_CHECKING:
    from mern_scaffold.config import ScaffoldConfig
    from mern_scaffold.executor import ExecutionResult, JSExecutor

__all__ = ("ScaffoldResult", "init_project", "print_next_steps")

logger = logging.getLogger("mern_scaffold")


def _dict_factory() -> dict[str, Any]:
    return {}


def _path_list_factory() -> list[Path]:
    return []


@dataclass
class ScaffoldResult:
    """What a generator run produced.

    Attributes:
        folder_name: Folder name chosen at the prompt.
        profile_name: Key of the generated profile (``minimal`` or ``auth``).
        target_dir: Absolute project folder.
        files: Template files written.
        manifest: The rewritten ``package.json`` (empty when installs were skipped).
        installed: Whether the package manager steps ran.
        update: Result of the optional upgrade step, if attempted.
        launch: Result of the dev server step, if attempted.
    """

    folder_name: str
    target_dir: Path
    profile_name: str = "minimal"
    files: list[Path] = field(default_factory=_path_list_factory)
    manifest: dict[str, Any] = field(default_factory=_dict_factory)
    installed: bool = False
    update: "ExecutionResult | None" = None
    launch: "ExecutionResult | None" = None


def init_project(
    config: "ScaffoldConfig",
    *,
    executor: "JSExecutor",
    folder_name: str,
    cwd: "Path | None" = None,
) -> ScaffoldResult:
    """Generate a backend project and run the package manager steps.

    Args:
        config: Generator settings.
        executor: Package manager executor.
        folder_name: Validated project folder name.
        cwd: Directory the folder is created in. Defaults to the process working directory.

    Raises:
        ValueError: If the configured profile does not exist.
        ExecutionError: If a mandatory step fails or the upgrade is interrupted.

    Returns:
        Summary of the run.
    """
    profile = get_profile(config.profile)
    if profile is None:  # pragma: no cover
        msg = f"Could not find profile: {config.profile}"
        raise ValueError(msg)

    target_dir = resolve_target_dir(folder_name, cwd)
    result = ScaffoldResult(folder_name=folder_name, target_dir=target_dir, profile_name=profile.type.value)

    console.rule(f"[yellow]Creating MERN backend in {escape(folder_name)}[/]", align="left")
    create_directories(target_dir)
    console.print("[dim]Folder structure created.[/]")

    console.rule("[yellow]Writing starter files[/]", align="left")
    result.files = generate_project(target_dir, TemplateContext(project_name=folder_name, profile=profile))

    if not config.install:
        console.print("[dim]Skipping package manager steps.[/]")
        return result

    console.rule(f"[yellow]Initializing {executor.bin_name} project[/]", align="left")
    executor.init(target_dir)
    result.manifest = rewrite_manifest(target_dir, profile.manifest_fields)
    console.print("[green]Updated package.json with module type and scripts[/]")

    console.rule("[yellow]Installing dependencies[/]", align="left")
    executor.add(profile.dependencies, target_dir)
    executor.add(profile.dev_dependencies, target_dir, dev=True)
    result.installed = True

    if config.update:
        console.rule("[yellow]Checking for package updates[/]", align="left")
        result.update = executor.upgrade(target_dir)
        if result.update.outcome is Outcome.INTERRUPTED:
            result.update.raise_for_status()
        if not result.update.ok:
            logger.warning("Package update failed: %s", result.update.error)
            console.print("[yellow]Package update check failed, continuing...[/]")

    if config.start:
        console.rule(f"[yellow]Starting development server with {' '.join(executor.dev_command)}[/]", align="left")
        result.launch = executor.run_script("dev", target_dir)
        if result.launch.ok:
            console.print("[yellow]Development server stopped.[/]")
        else:
            logger.warning("Development server exited: %s", result.launch.error)
            console.print(f"[yellow]Development server stopped ({result.launch.error}).[/]")

    return result


def print_next_steps(result: ScaffoldResult, executor: "JSExecutor", port: int = 5000) -> None:
    """Print how to start the generated server again.

    When the package manager steps were skipped, print the command that
    completes the setup instead.
    """
    if not result.installed:
        options = "" if result.profile_name == "minimal" else f" --profile {result.profile_name}"
        if executor.bin_name != "npm":
            options += f" --executor {executor.bin_name}"
        console.print(f"\n[bold green]Starter files written to {escape(result.folder_name)}/[/]")
        console.print("\nDependencies are not installed yet. To finish the setup, run:")
        console.print(f"   mern-scaffold {escape(result.folder_name)}{options}")
        return

    console.print(f"\n[bold green]MERN backend is ready in {escape(result.folder_name)}/[/]")
    console.print("\nTo start your server again:")
    console.print(f"   cd {escape(result.folder_name)}")
    console.print(f"   {' '.join(executor.dev_command)}     [dim]# development mode with nodemon[/]")
    console.print(f"   {' '.join(executor.start_command)}       [dim]# production mode[/]")
    console.print("\nEnvironment variables are in the .env file")
    console.print(f"Test your API at: http://localhost:{port}")
