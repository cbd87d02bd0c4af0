import logging
from typing import Any, Optional

from click import Choice, ClickException, argument, command, option, version_option

from mern_scaffold.__metadata__ import __version__


@command(name="mern-scaffold", help="Generate an Express + MongoDB backend project.")
@argument("folder", required=False, default=None)
@option(
    "--profile",
    type=Choice(["minimal", "auth"], case_sensitive=False),
    help="Template profile to generate.  Defaults to $MERN_SCAFFOLD_PROFILE or 'minimal'.",
    default=None,
    required=False,
)
@option(
    "--executor",
    type=Choice(["npm", "pnpm", "yarn", "bun"], case_sensitive=False),
    help="Package manager used to initialize, install and run the project.",
    default=None,
    required=False,
)
@option(
    "--no-install",
    help="Do not run the package manager after generating templates.",
    type=bool,
    default=False,
    required=False,
    show_default=True,
    is_flag=True,
)
@option(
    "--no-update",
    help="Skip upgrading dependencies to their latest versions.",
    type=bool,
    default=False,
    required=False,
    show_default=True,
    is_flag=True,
)
@option(
    "--no-start",
    help="Do not start the development server when setup finishes.",
    type=bool,
    default=False,
    required=False,
    show_default=True,
    is_flag=True,
)
@option("--verbose", type=bool, help="Enable verbose output.", default=False, is_flag=True)
@version_option(version=__version__, prog_name="mern-scaffold")
def scaffold(
    folder: "Optional[str]",
    profile: "Optional[str]",
    executor: "Optional[str]",
    no_install: "bool",
    no_update: "bool",
    no_start: "bool",
    verbose: "bool",
) -> None:
    """Prompt for a folder name and generate the project in it."""
    from mern_scaffold.commands import init_project, print_next_steps
    from mern_scaffold.config import ScaffoldConfig
    from mern_scaffold.exceptions import MernScaffoldError
    from mern_scaffold.executor import get_executor
    from mern_scaffold.prompts import ask_folder_name, resolve_folder_name, validate_folder_name
    from mern_scaffold.utils import console

    if verbose:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("mern_scaffold").setLevel(logging.DEBUG)

    try:
        overrides: dict[str, Any] = {}
        if profile:
            overrides["profile"] = profile
        if executor:
            overrides["executor"] = executor
        if no_install:
            overrides["install"] = False
        if no_update:
            overrides["update"] = False
        if no_start:
            overrides["start"] = False
        config = ScaffoldConfig(**overrides)

        if folder is None:
            folder_name = ask_folder_name(console)
        else:
            folder_name = validate_folder_name(resolve_folder_name(folder))
        js_executor = get_executor(config.executor)
        result = init_project(config, executor=js_executor, folder_name=folder_name)
    except (MernScaffoldError, OSError, ValueError) as e:
        raise ClickException(str(e)) from e

    print_next_steps(result, js_executor)
