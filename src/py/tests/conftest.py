import subprocess
from collections.abc import Generator, Sequence
from pathlib import Path
from typing import Any

import msgspec
import pytest

from mern_scaffold.config import ScaffoldConfig

# Environment variables that may affect test behavior - clear before each test
_SCAFFOLD_ENV_VARS = [
    "MERN_SCAFFOLD_PROFILE",
    "MERN_SCAFFOLD_EXECUTOR",
    "MERN_SCAFFOLD_INSTALL",
    "MERN_SCAFFOLD_UPDATE",
    "MERN_SCAFFOLD_START",
]


@pytest.fixture(autouse=True)
def clean_scaffold_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear generator environment variables before each test for isolation."""
    for var in _SCAFFOLD_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


def npm_init_manifest(cwd: Path) -> dict[str, Any]:
    """Return what ``npm init -y`` writes for a folder."""
    return {
        "name": cwd.name.lower(),
        "version": "1.0.0",
        "description": "",
        "main": "index.js",
        "scripts": {"test": 'echo "Error: no test specified" && exit 1'},
        "keywords": [],
        "author": "",
        "license": "ISC",
    }


class FakeRunner:
    """Stand-in for :func:`subprocess.run` that records package manager calls.

    ``init`` writes a ``package.json`` like npm does. Commands whose joined text
    contains one of ``fail_on`` exit with status 1, ``interrupt_on`` raises
    ``KeyboardInterrupt`` as if the operator pressed Ctrl+C.
    """

    def __init__(
        self,
        *,
        fail_on: Sequence[str] = (),
        interrupt_on: Sequence[str] = (),
        manifest_content: "bytes | None" = None,
    ) -> None:
        self.calls: list[tuple[list[str], Path]] = []
        self.fail_on = list(fail_on)
        self.interrupt_on = list(interrupt_on)
        self.manifest_content = manifest_content

    @property
    def commands(self) -> list[str]:
        return [" ".join(command) for command, _ in self.calls]

    def __call__(self, command: list[str], *, cwd: Path, **kwargs: Any) -> "subprocess.CompletedProcess[Any]":
        self.calls.append((list(command), Path(cwd)))
        joined = " ".join(command)
        if any(needle in joined for needle in self.interrupt_on):
            raise KeyboardInterrupt
        if any(needle in joined for needle in self.fail_on):
            return subprocess.CompletedProcess(command, 1)
        if command[1:2] == ["init"]:
            content = self.manifest_content
            if content is None:
                content = msgspec.json.format(msgspec.json.encode(npm_init_manifest(Path(cwd))), indent=2)
            (Path(cwd) / "package.json").write_bytes(content)
        return subprocess.CompletedProcess(command, 0)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def config() -> ScaffoldConfig:
    return ScaffoldConfig()
