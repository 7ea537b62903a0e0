"""
Custom exceptions for bindgen_expand.
"""

from typing import Optional, Sequence


class ExpandError(Exception):
    """Base exception for bindgen_expand errors."""

    pass


class ExpandIOError(ExpandError):
    """The toolchain could not be spawned or the scratch directory failed."""

    pass


class ExpandEncodingError(ExpandError):
    """Captured toolchain output was not valid UTF-8."""

    def __init__(self, stream: str, reason: str):
        super().__init__(f"cargo {stream} was not valid UTF-8: {reason}")
        self.stream = stream


class CompileError(ExpandError):
    """
    The toolchain ran but produced no expanded source.

    ``stderr`` holds the toolchain's own diagnostics and is meant to be
    shown to the user as-is.
    """

    def __init__(
        self,
        stderr: str,
        returncode: Optional[int] = None,
        command: Optional[Sequence[str]] = None,
    ):
        super().__init__(stderr.strip() or "cargo produced no expanded output")
        self.stderr = stderr
        self.returncode = returncode
        self.command = list(command) if command is not None else None
