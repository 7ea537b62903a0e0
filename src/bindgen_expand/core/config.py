"""
Toolchain configuration for cargo expansion.

Environment overrides are resolved once into an ExpandConfig and passed
explicitly to the expander:

- CARGO:                   path to the cargo driver (default: ``cargo``)
- CARGO_EXPAND_TARGET_DIR: reusable target directory (default: a fresh
                           temporary directory per call)
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

CARGO_ENV = "CARGO"
TARGET_DIR_ENV = "CARGO_EXPAND_TARGET_DIR"
DEFAULT_CARGO = "cargo"


@dataclass(frozen=True)
class ExpandConfig:
    """Resolved settings for one or more expansions."""

    cargo: str = DEFAULT_CARGO
    target_dir: Optional[Path] = None

    # Where each value came from ('default', 'env', 'cli'), for display only
    cargo_source: str = "default"
    target_dir_source: str = "default"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ExpandConfig":
        """Resolve configuration from environment variables.

        Empty values are treated as unset.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            ExpandConfig with env overrides applied over the defaults.
        """
        if environ is None:
            environ = os.environ

        config = cls()

        env_cargo = environ.get(CARGO_ENV)
        if env_cargo:
            config = replace(config, cargo=env_cargo, cargo_source="env")

        env_target = environ.get(TARGET_DIR_ENV)
        if env_target:
            config = replace(
                config, target_dir=Path(env_target), target_dir_source="env"
            )

        return config

    def with_overrides(
        self,
        cargo: Optional[str] = None,
        target_dir: Optional[Path | str] = None,
    ) -> "ExpandConfig":
        """Return a copy with explicit (command-line) values applied on top."""
        config = self
        if cargo:
            config = replace(config, cargo=cargo, cargo_source="cli")
        if target_dir:
            config = replace(
                config, target_dir=Path(target_dir), target_dir_source="cli"
            )
        return config

    @property
    def uses_temporary_target(self) -> bool:
        return self.target_dir is None

    def describe(self) -> dict[str, str]:
        """Human-readable summary of the resolved values and their sources."""
        target = str(self.target_dir) if self.target_dir else "(temporary per call)"
        return {
            "cargo": f"{self.cargo}  ({self.cargo_source})",
            "target_dir": f"{target}  ({self.target_dir_source})",
        }
