"""Pytest configuration and fixtures for bindgen_expand tests."""

from pathlib import Path

import pytest

from bindgen_expand.core.config import CARGO_ENV, TARGET_DIR_ENV
from bindgen_expand.core.runner import RecordingRunner

DEMO_MANIFEST = """\
[package]
name = "demo"
version = "0.1.0"
edition = "2021"

[lib]
path = "src/lib.rs"
"""

DEMO_LIB = """\
pub struct Point {
    pub x: i32,
    pub y: i32,
}

pub fn origin() -> Point {
    Point { x: 0, y: 0 }
}
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's cargo overrides out of every test."""
    monkeypatch.delenv(CARGO_ENV, raising=False)
    monkeypatch.delenv(TARGET_DIR_ENV, raising=False)


@pytest.fixture
def demo_crate(tmp_path: Path) -> Path:
    """Path to the Cargo.toml of a macro-free 'demo' 0.1.0 crate."""
    crate_dir = tmp_path / "demo"
    (crate_dir / "src").mkdir(parents=True)
    (crate_dir / "src" / "lib.rs").write_text(DEMO_LIB, encoding="utf-8")
    manifest = crate_dir / "Cargo.toml"
    manifest.write_text(DEMO_MANIFEST, encoding="utf-8")
    return manifest


@pytest.fixture
def expanded_demo() -> bytes:
    """Canned expansion output for the demo crate."""
    return ("#![feature(prelude_import)]\n" + DEMO_LIB).encode("utf-8")


@pytest.fixture
def recording_runner():
    """Factory for RecordingRunner with canned output."""

    def _make(stdout: bytes = b"", stderr: bytes = b"", returncode: int = 0):
        return RecordingRunner(stdout=stdout, stderr=stderr, returncode=returncode)

    return _make
