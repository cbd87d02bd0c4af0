"""mern-scaffold: generate an Express + MongoDB backend from the command line.

Basic usage::

    $ mern-scaffold
    Enter folder name for your project (default: server): my-api

Programmatic usage::

    from mern_scaffold import ScaffoldConfig, get_executor, init_project

    config = ScaffoldConfig(profile="auth", start=False)
    init_project(config, executor=get_executor(config.executor), folder_name="my-api")
"""

from mern_scaffold.commands import ScaffoldResult, init_project
from mern_scaffold.config import ScaffoldConfig
from mern_scaffold.executor import ExecutionResult, Outcome, get_executor

__all__ = (
    "ExecutionResult",
    "Outcome",
    "ScaffoldConfig",
    "ScaffoldResult",
    "get_executor",
    "init_project",
)
