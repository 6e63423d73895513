"""Shared pytest fixtures for create-lithia-app tests."""

from __future__ import annotations

import json
import subprocess
from collections.abc import Sequence
from pathlib import Path

import pytest

from create_lithia_app.core.dependencies import KNOWN_TOOLS, SystemDependencies
from create_lithia_app.core.errors import ScaffoldError

TEMPLATE_MANIFEST = {
    "name": "lithia-default-app-template",
    "version": "1.4.2",
    "description": "Default Lithia app template",
    "private": True,
    "scripts": {"dev": "lithia dev", "build": "lithia build"},
    "dependencies": {"lithia": "^1.0.0"},
}


class FakeCommands:
    """Stand-in for run_command that records calls and fakes a git clone."""

    def __init__(self) -> None:
        self.calls: list[tuple[list[str], Path]] = []
        self.failures: dict[str, str] = {}
        self.manifest: dict | None = dict(TEMPLATE_MANIFEST)
        self.extra_files: dict[str, str | bytes] = {}

    def fail_on(self, command: str, message: str = "boom") -> None:
        self.failures[command] = message

    def commands(self) -> list[str]:
        return [" ".join(args[:2]) for args, _ in self.calls]

    def __call__(self, args: Sequence[str], cwd: Path) -> subprocess.CompletedProcess[str]:
        args = list(args)
        self.calls.append((args, cwd))
        key = " ".join(args[:2])
        if key in self.failures:
            raise ScaffoldError(f"'{' '.join(args)}' failed with exit code 1\n{self.failures[key]}")

        if args[:2] == ["git", "clone"]:
            (cwd / ".git").mkdir()
            (cwd / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
            (cwd / "package-lock.json").write_text("{}\n")
            (cwd / "src").mkdir()
            (cwd / "src" / "index.ts").write_text("export default {};\n")
            if self.manifest is not None:
                (cwd / "package.json").write_text(json.dumps(self.manifest, indent=2))
            for rel, content in self.extra_files.items():
                if isinstance(content, bytes):
                    (cwd / rel).write_bytes(content)
                else:
                    (cwd / rel).write_text(content)
        elif args[:2] == ["git", "init"]:
            (cwd / ".git").mkdir()

        return subprocess.CompletedProcess(args, 0, stdout="", stderr="")


@pytest.fixture
def fake_commands(monkeypatch: pytest.MonkeyPatch) -> FakeCommands:
    """Replace external commands run during project creation."""
    fake = FakeCommands()
    monkeypatch.setattr("create_lithia_app.core.init_impl.project.run_command", fake)
    return fake


def make_dependencies(**overrides: bool) -> SystemDependencies:
    tools = {tool: True for tool in KNOWN_TOOLS}
    tools.update(overrides)
    return SystemDependencies(tools=tools)


@pytest.fixture
def all_tools() -> SystemDependencies:
    """Every package manager and git available."""
    return make_dependencies()


@pytest.fixture
def dependencies_with():
    """Factory for SystemDependencies with some tools marked unavailable."""
    return make_dependencies
