"""Tests for version lookup."""

from importlib.metadata import PackageNotFoundError
from pathlib import Path

import pytest

from create_lithia_app import _version


def test_version_from_source_checkout():
    assert _version.get_version() == "0.1.0"


def test_version_from_installed_metadata(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(_version, "_PYPROJECT", tmp_path / "pyproject.toml")
    monkeypatch.setattr(_version, "version", lambda name: "2.3.4")

    assert _version.get_version() == "2.3.4"


def test_unknown_version(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    def not_installed(name):
        raise PackageNotFoundError(name)

    monkeypatch.setattr(_version, "_PYPROJECT", tmp_path / "pyproject.toml")
    monkeypatch.setattr(_version, "version", not_installed)

    assert _version.get_version() == _version.UNKNOWN_VERSION
