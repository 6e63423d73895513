"""Tests for the create-lithia-app command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from create_lithia_app import cli
from create_lithia_app.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def host_tools(monkeypatch: pytest.MonkeyPatch, all_tools):
    """Skip real tool probing; returns the list of probe calls."""
    probes: list[int] = []

    def check_all():
        probes.append(1)
        return all_tools

    monkeypatch.setattr(cli, "check_all", check_all)
    return probes


DEMO_ARGS = ["--yes", "--name", "demo-app", "--template", "default", "--no-git", "--no-install"]


def test_end_to_end_without_git_or_install(cli_runner, workdir, host_tools, fake_commands):
    result = cli_runner.invoke(app, DEMO_ARGS)

    assert result.exit_code == 0, result.output
    project_dir = workdir / "demo-app"
    assert not (project_dir / ".git").exists()
    manifest = json.loads((project_dir / "package.json").read_text())
    assert manifest["name"] == "demo-app"
    assert manifest["version"] == "0.1.0"
    assert "description" not in manifest

    lines = [line for line in result.output.splitlines() if line.strip()]
    assert "cd demo-app" in lines[-2]
    assert lines[-1].endswith("npm install && npm run dev")


def test_next_steps_use_package_manager(cli_runner, workdir, host_tools, fake_commands):
    result = cli_runner.invoke(
        app, ["-y", "--name", "demo-app", "--package-manager", "bun", "--git", "--install"]
    )

    assert result.exit_code == 0, result.output
    assert fake_commands.commands() == ["git clone", "git init", "bun install"]
    assert result.output.rstrip().endswith("bun run dev")
    assert "Installing dependencies..." in result.output
    assert "Done in" in result.output


def test_rerun_with_overwrite_declined(cli_runner, workdir, host_tools, fake_commands):
    existing = workdir / "demo-app"
    existing.mkdir()
    (existing / "notes.txt").write_text("keep me")

    result = cli_runner.invoke(app, DEMO_ARGS, input="n\n")

    assert result.exit_code == 0, result.output
    assert "already exists" in result.output
    assert "Operation cancelled" in result.output
    assert [p.name for p in existing.iterdir()] == ["notes.txt"]
    assert fake_commands.calls == []


def test_rerun_with_overwrite_confirmed(cli_runner, workdir, host_tools, fake_commands):
    existing = workdir / "demo-app"
    existing.mkdir()
    (existing / "notes.txt").write_text("old")

    result = cli_runner.invoke(app, DEMO_ARGS, input="y\n")

    assert result.exit_code == 0, result.output
    assert not (existing / "notes.txt").exists()
    assert (existing / "package.json").exists()


def test_overwrite_flag(cli_runner, workdir, host_tools, fake_commands):
    (workdir / "demo-app").mkdir()

    result = cli_runner.invoke(app, [*DEMO_ARGS, "--overwrite"])

    assert result.exit_code == 0, result.output
    assert "already exists" not in result.output


def test_yes_without_name(cli_runner, workdir, host_tools, fake_commands):
    result = cli_runner.invoke(app, ["--yes"])

    assert result.exit_code == 1
    assert "--name is required" in result.output
    assert host_tools == []
    assert fake_commands.calls == []
    assert list(workdir.iterdir()) == []


def test_conflicting_install_flags(cli_runner, workdir, host_tools, fake_commands):
    result = cli_runner.invoke(app, ["--name", "foo", "--install", "--no-install"])

    assert result.exit_code == 1
    assert "--install and --no-install" in result.output
    assert "?" not in result.output


def test_invalid_template(cli_runner, workdir, host_tools, fake_commands):
    result = cli_runner.invoke(app, ["-y", "--name", "foo", "--template", "svelte"])

    assert result.exit_code == 1
    assert "svelte" in result.output


def test_unavailable_package_manager(
    cli_runner, workdir, monkeypatch, dependencies_with, fake_commands
):
    monkeypatch.setattr(cli, "check_all", lambda: dependencies_with(pnpm=False))

    result = cli_runner.invoke(app, ["--yes", "--name", "foo", "--package-manager", "pnpm"])

    assert result.exit_code == 1
    assert "pnpm" in result.output
    assert fake_commands.calls == []


def test_clone_failure_exit_code(cli_runner, workdir, host_tools, fake_commands):
    fake_commands.fail_on("git clone", "fatal: unable to access")

    result = cli_runner.invoke(app, DEMO_ARGS)

    assert result.exit_code == 1
    assert "unable to access" in result.output


def test_interactive_session(cli_runner, workdir, host_tools, fake_commands):
    # name, template, install?, package manager, git?
    answers = "\n".join(["shop", "2", "y", "yarn", "n"]) + "\n"

    result = cli_runner.invoke(app, [], input=answers)

    assert result.exit_code == 0, result.output
    clone_args, _ = fake_commands.calls[0]
    assert "https://github.com/lithiajs/lithia-with-drizzle-template.git" in clone_args
    assert fake_commands.commands() == ["git clone", "yarn install"]
    assert result.output.rstrip().endswith("yarn run dev")


def test_interactive_enter_accepts_defaults(cli_runner, workdir, host_tools, fake_commands):
    # template, install?, package manager, git?
    result = cli_runner.invoke(app, ["--name", "shop"], input="\n" * 4)

    assert result.exit_code == 0, result.output
    assert "Operation cancelled" not in result.output
    clone_args, _ = fake_commands.calls[0]
    assert "https://github.com/lithiajs/lithia-default-app-template.git" in clone_args
    assert fake_commands.commands() == ["git clone", "git init", "npm install"]
    assert result.output.rstrip().endswith("npm run dev")


def test_interactive_cancel(cli_runner, workdir, host_tools, fake_commands):
    result = cli_runner.invoke(app, ["--name", "shop"], input="q\n")

    assert result.exit_code == 0
    assert "Operation cancelled" in result.output
    assert fake_commands.calls == []


def test_list_templates(cli_runner, workdir, host_tools):
    result = cli_runner.invoke(app, ["--list"])

    assert result.exit_code == 0
    assert "default" in result.output
    assert "with-drizzle" in result.output
    assert host_tools == []


def test_version(cli_runner):
    result = cli_runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "create-lithia-app version" in result.output
