"""Tests for packaging consistency."""

from pathlib import Path

import tomllib

import bindgen_expand


REPO_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT = REPO_ROOT / "pyproject.toml"


class TestVersionConsistency:
    """Ensure __version__ and pyproject.toml stay in sync."""

    def test_version_matches_pyproject(self):
        with open(PYPROJECT, "rb") as f:
            meta = tomllib.load(f)
        assert bindgen_expand.__version__ == meta["project"]["version"]


class TestEntryPoint:
    """Ensure the CLI entry point is importable and registered."""

    def test_cli_main_importable(self):
        from bindgen_expand.cli import main  # noqa: F401

    def test_cli_create_parser_importable(self):
        from bindgen_expand.cli import create_parser  # noqa: F401

    def test_script_registered(self):
        with open(PYPROJECT, "rb") as f:
            meta = tomllib.load(f)
        assert meta["project"]["scripts"]["bindgen-expand"] == "bindgen_expand.cli:main"


class TestPublicApi:
    """Ensure the top-level package exports the public API."""

    def test_exports(self):
        for name in bindgen_expand.__all__:
            assert hasattr(bindgen_expand, name)
