"""Tests for ensuring project packaging metadata stays consistent."""

from __future__ import annotations

import tomllib
from pathlib import Path

import hexcube


def _load_pyproject() -> dict:
    with Path("pyproject.toml").open("rb") as handle:
        return tomllib.load(handle)


def test_pyproject_declares_expected_metadata() -> None:
    pyproject = _load_pyproject()
    project = pyproject["project"]

    assert project["name"] == "hexcube"
    assert project["version"] == hexcube.__version__
    assert project["scripts"]["hexcube"] == "hexcube.__main__:main"

    dependencies = " ".join(project["dependencies"])
    for dependency in ("pydantic", "polars", "rich"):
        assert dependency in dependencies, f"missing dependency declaration for {dependency}"

    test_extra = " ".join(project["optional-dependencies"]["test"])
    for dependency in ("pytest", "numpy"):
        assert dependency in test_extra, f"missing test dependency declaration for {dependency}"
