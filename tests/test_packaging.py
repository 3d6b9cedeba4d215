"""
Tests for project metadata in pyproject.toml.
"""

from __future__ import annotations

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

ROOT = Path(__file__).resolve().parent.parent


def _project() -> dict:
    with open(ROOT / "pyproject.toml", "rb") as f:
        return tomllib.load(f)["project"]


def test_readme_is_not_a_design_document():
    readme = _project().get("readme")
    assert readme not in ("SPEC_FULL.md", "DESIGN.md", "spec.md")
    if readme:
        assert (ROOT / readme).is_file()


def test_runtime_dependencies_declared():
    names = {dep.split(">")[0].split("=")[0].strip() for dep in _project()["dependencies"]}
    assert {"structlog", "fastapi", "pydantic", "python-dotenv", "uvicorn"} <= names
