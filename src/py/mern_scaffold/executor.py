"""Package manager executors.

This module provides executor classes for the JavaScript package managers
(npm, pnpm, Yarn, Bun) that initialize the generated project, install its
dependencies and launch its ``dev`` script.

Every command runs synchronously in the project folder with the terminal's
standard streams inherited. The process working directory is never changed.
"""

import logging
import platform
import shutil
import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar

from mern_scaffold.exceptions import ExecutableNotFoundError, ExecutionError

__all__ = (
    "EXECUTORS",
    "BunExecutor",
    "ExecutionResult",
    "JSExecutor",
    "NodeExecutor",
    "Outcome",
    "PnpmExecutor",
    "YarnExecutor",
    "get_executor",
)

logger = logging.getLogger("mern_scaffold")

Runner = Callable[..., "subprocess.CompletedProcess[Any]"]
"""Signature of :func:`subprocess.run`, injectable for tests."""

NPM_CHECK_UPDATES = "npm-check-updates"


class Outcome(str, Enum):
    """How an external command ended."""

    SUCCESS = "success"
    FAILED = "failed"
    INTERRUPTED = "interrupted"


@dataclass
class ExecutionResult:
    """Outcome of a single package manager invocation.

    Attributes:
        command: The command line that was run.
        outcome: Whether it succeeded, failed or was interrupted.
        return_code: Exit status, or None when the process never ran to completion.
        error: Message describing the failure, empty on success.
    """

    command: list[str]
    outcome: Outcome
    return_code: "int | None" = None
    error: str = ""

    @property
    def ok(self) -> bool:
        """Whether the command exited with status 0."""
        return self.outcome is Outcome.SUCCESS

    def raise_for_status(self) -> "ExecutionResult":
        """Raise if the command did not succeed.

        Raises:
            ExecutionError: If the outcome is not a success.

        Returns:
            The result itself, for chaining.
        """
        if not self.ok:
            detail = self.error if self.return_code is None else ""
            raise ExecutionError(self.command, self.return_code, detail)
        return self


class JSExecutor:
    """Base class for Javascript package manager executors."""

    bin_name: ClassVar[str]
    init_args: ClassVar[list[str]] = ["init", "-y"]
    add_args: ClassVar[list[str]] = ["install"]
    dev_flag: ClassVar[str] = "-D"
    package_runner: ClassVar[list[str]] = ["npx"]

    def __init__(self, executable_path: "Path | str | None" = None, runner: "Runner | None" = None) -> None:
        self.executable_path = executable_path
        self.runner = runner

    def _resolve_executable(self) -> str:
        if self.executable_path:
            return str(self.executable_path)
        path = shutil.which(self.bin_name)
        if path is None:
            raise ExecutableNotFoundError(self.bin_name)
        return path

    def call(self, args: Sequence[str], cwd: Path) -> ExecutionResult:
        """Run a command and report how it ended instead of raising.

        Args:
            args: Arguments for the package manager. When the first argument is
                a different program (such as ``npx``) it is run as given.
            cwd: Working directory for the subprocess.

        Returns:
            The execution result.
        """
        try:
            command = self._build_command(args)
        except ExecutableNotFoundError as e:
            return ExecutionResult(command=list(args), outcome=Outcome.FAILED, error=str(e))
        return self._run(command, cwd)

    def _run(self, command: list[str], cwd: Path) -> ExecutionResult:
        runner = self.runner or subprocess.run
        logger.debug("Running %s in %s", command, cwd)
        try:
            process = runner(
                command,
                cwd=cwd,
                shell=platform.system() == "Windows",
                check=False,
            )
        except KeyboardInterrupt:
            return ExecutionResult(command=command, outcome=Outcome.INTERRUPTED, error="interrupted by operator")
        except OSError as e:
            return ExecutionResult(command=command, outcome=Outcome.FAILED, error=str(e))

        if process.returncode != 0:
            return ExecutionResult(
                command=command,
                outcome=Outcome.FAILED,
                return_code=process.returncode,
                error=f"exited with status {process.returncode}",
            )
        return ExecutionResult(command=command, outcome=Outcome.SUCCESS, return_code=0)

    def execute(self, args: Sequence[str], cwd: Path) -> ExecutionResult:
        """Execute a command that must succeed.

        Raises:
            ExecutableNotFoundError: If the package manager is not installed.
            ExecutionError: If the command fails or is interrupted.

        Returns:
            The successful execution result.
        """
        return self._run(self._build_command(args), cwd).raise_for_status()

    def _build_command(self, args: Sequence[str]) -> list[str]:
        if args and args[0] in self.package_runner[:1]:
            return list(args)
        executable = self._resolve_executable()
        # Avoid double-prefixing the executable when callers pass it explicitly
        if args and Path(args[0]).name == Path(executable).name:
            return list(args)
        return [executable, *args]

    def init(self, cwd: Path) -> ExecutionResult:
        """Create ``package.json`` with the package manager's initializer."""
        return self.execute(self.init_args, cwd)

    def add(self, packages: Sequence[str], cwd: Path, *, dev: bool = False) -> ExecutionResult:
        """Install packages and record them in ``package.json``."""
        args = [*self.add_args, *([self.dev_flag] if dev else []), *packages]
        return self.execute(args, cwd)

    def upgrade(self, cwd: Path) -> ExecutionResult:
        """Bump every dependency to its latest version and reinstall.

        Never raises; a failure of either step is reported in the result.
        """
        result = self.call([*self.package_runner, NPM_CHECK_UPDATES, "-u"], cwd)
        if not result.ok:
            return result
        return self.call(["install"], cwd)

    def run_script(self, script: str, cwd: Path) -> ExecutionResult:
        """Run a ``package.json`` script until it exits.

        Never raises; an interrupt or crash is reported in the result.
        """
        return self.call(["run", script], cwd)

    @property
    def dev_command(self) -> list[str]:
        """Get the command that starts the generated server (e.g., npm run dev)."""
        return [self.bin_name, "run", "dev"]

    @property
    def start_command(self) -> list[str]:
        """Get the command that starts the server in production mode (e.g., npm start)."""
        return [self.bin_name, "start"]


class NodeExecutor(JSExecutor):
    """Node.js executor."""

    bin_name = "npm"


class PnpmExecutor(JSExecutor):
    """PNPM executor."""

    bin_name = "pnpm"
    init_args = ["init"]
    add_args = ["add"]
    package_runner = ["pnpm", "dlx"]


class YarnExecutor(JSExecutor):
    """Yarn executor."""

    bin_name = "yarn"
    add_args = ["add"]
    package_runner = ["yarn", "dlx"]


class BunExecutor(JSExecutor):
    """Bun executor."""

    bin_name = "bun"
    add_args = ["add"]
    package_runner = ["bunx"]


EXECUTORS: dict[str, type[JSExecutor]] = {
    "npm": NodeExecutor,
    "node": NodeExecutor,
    "pnpm": PnpmExecutor,
    "yarn": YarnExecutor,
    "bun": BunExecutor,
}


def get_executor(name: str, runner: "Runner | None" = None) -> JSExecutor:
    """Create the executor for a package manager name.

    Args:
        name: ``npm`` (alias ``node``), ``pnpm``, ``yarn`` or ``bun``.
        runner: Replacement for :func:`subprocess.run`.

    Raises:
        ValueError: If the name is unknown.

    Returns:
        The executor instance.
    """
    try:
        executor_class = EXECUTORS[name.lower()]
    except KeyError:
        msg = f"Invalid executor: {name!r}. Expected one of: npm, pnpm, yarn, bun"
        raise ValueError(msg) from None
    return executor_class(runner=runner)
