"""
Process execution for toolchain commands.

The expander talks to cargo only through a CommandRunner, so tests
can substitute a runner that never spawns anything.
"""

import os
import shlex
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence


@dataclass
class CapturedOutput:
    """Raw result of a finished command. Streams are undecoded bytes."""

    args: list[str]
    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""


def format_command(cmd: Sequence[str]) -> str:
    """Render a command as a shell-quoted string."""
    return " ".join(shlex.quote(str(part)) for part in cmd)


class CommandRunner(ABC):
    """Spawn a command, wait for it, and capture both output streams."""

    @abstractmethod
    def run(
        self,
        cmd: Sequence[str],
        env: Optional[Mapping[str, str]] = None,
    ) -> CapturedOutput:
        """
        Run a command to completion.

        Args:
            cmd: Command and arguments.
            env: Extra environment variables, merged over the current
                process environment.

        Returns:
            CapturedOutput with the exit code and raw stdout/stderr.

        Raises:
            OSError: If the command could not be started.
        """
        ...


class SubprocessRunner(CommandRunner):
    """Runner backed by :func:`subprocess.run`."""

    def run(
        self,
        cmd: Sequence[str],
        env: Optional[Mapping[str, str]] = None,
    ) -> CapturedOutput:
        merged_env: Optional[dict[str, str]] = None
        if env is not None:
            merged_env = {**os.environ, **env}

        args = [str(part) for part in cmd]
        process = subprocess.run(
            args,
            env=merged_env,
            capture_output=True,
            check=False,
        )
        return CapturedOutput(
            args=args,
            returncode=process.returncode,
            stdout=process.stdout,
            stderr=process.stderr,
        )


@dataclass
class RecordedCommand:
    args: list[str]
    env: dict[str, str] = field(default_factory=dict)


class RecordingRunner(CommandRunner):
    """Runner that records commands and returns canned output without executing."""

    def __init__(
        self,
        stdout: bytes = b"",
        stderr: bytes = b"",
        returncode: int = 0,
    ) -> None:
        self.commands: list[RecordedCommand] = []
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode

    def run(
        self,
        cmd: Sequence[str],
        env: Optional[Mapping[str, str]] = None,
    ) -> CapturedOutput:
        args = [str(part) for part in cmd]
        self.commands.append(RecordedCommand(args=args, env=dict(env or {})))
        return CapturedOutput(
            args=args,
            returncode=self.returncode,
            stdout=self.stdout,
            stderr=self.stderr,
        )
