"""
Macro expansion of a single crate via ``cargo rustc --pretty=expanded``.

The whole crate is compiled with all features enabled and pretty printed
back to source with every macro invocation replaced by its expansion.
The result is handed back as one string; nothing here parses it.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from bindgen_expand.core.config import ExpandConfig
from bindgen_expand.core.runner import CapturedOutput, CommandRunner, SubprocessRunner
from bindgen_expand.core.target_dir import target_directory
from bindgen_expand.errors import CompileError, ExpandEncodingError, ExpandIOError

TARGET_DIR_VAR = "CARGO_TARGET_DIR"

# Flags passed through to rustc after "--"
EXPAND_FLAGS = ["-Z", "unstable-options", "--pretty=expanded"]


@dataclass(frozen=True)
class ExpansionRequest:
    """Which crate to expand."""

    manifest_path: Path
    package_name: str
    version: str

    @property
    def selector(self) -> str:
        """Package spec that pins the crate inside a workspace."""
        return f"{self.package_name}:{self.version}"


def build_command(cargo: str, request: ExpansionRequest) -> list[str]:
    """
    Build the cargo command line for an expansion.

    Args:
        cargo: Cargo driver executable.
        request: Crate to expand.

    Returns:
        Command and arguments.
    """
    return [
        cargo,
        "rustc",
        "--manifest-path",
        str(request.manifest_path),
        "--all-features",
        "-p",
        request.selector,
        "--",
        *EXPAND_FLAGS,
    ]


def _decode(data: bytes, stream: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ExpandEncodingError(stream, str(e)) from e


class Expander:
    """Expand crates with a configured cargo and command runner."""

    def __init__(
        self,
        config: Optional[ExpandConfig] = None,
        runner: Optional[CommandRunner] = None,
    ):
        """
        Initialize the expander.

        Args:
            config: Resolved toolchain settings. Defaults to ExpandConfig()
                with no overrides; use ExpandConfig.from_env() to honor
                CARGO and CARGO_EXPAND_TARGET_DIR.
            runner: Command runner. Defaults to SubprocessRunner.
        """
        self.config = config if config is not None else ExpandConfig()
        self.runner = runner if runner is not None else SubprocessRunner()

    def expand(self, request: ExpansionRequest) -> str:
        """
        Expand and pretty print a crate into a single source string.

        Args:
            request: Manifest, package name and version to expand.

        Returns:
            The expanded source text (never empty).

        Raises:
            ExpandIOError: If cargo could not be started or the temporary
                target directory failed.
            ExpandEncodingError: If cargo's stdout or stderr is not UTF-8.
            CompileError: If cargo produced no output on stdout.
        """
        with target_directory(self.config.target_dir) as target_dir:
            return self._run(request, target_dir)

    def _run(self, request: ExpansionRequest, target_dir: Path) -> str:
        cmd = build_command(self.config.cargo, request)
        env = {TARGET_DIR_VAR: str(target_dir)}

        try:
            output = self.runner.run(cmd, env=env)
        except OSError as e:
            raise ExpandIOError(f"Failed to run {self.config.cargo}: {e}") from e

        return self._interpret(output)

    @staticmethod
    def _interpret(output: CapturedOutput) -> str:
        src = _decode(output.stdout, "stdout")
        error = _decode(output.stderr, "stderr")

        # Exit status is not consulted: empty stdout is the
        # only failure signal.
        if not src:
            raise CompileError(error, returncode=output.returncode, command=output.args)

        return src


def expand(
    manifest_path: Path | str,
    package_name: str,
    version: str,
    config: Optional[ExpandConfig] = None,
    runner: Optional[CommandRunner] = None,
) -> str:
    """
    Expand a crate using the given (or default) configuration.

    Convenience wrapper around :class:`Expander`.
    """
    request = ExpansionRequest(Path(manifest_path), package_name, version)
    return Expander(config, runner).expand(request)
