"""
bindgen_expand - Macro-expand a Rust crate into a single source file.

This package provides tools to:
- Run ``cargo rustc --pretty=expanded`` for one package of a workspace
- Isolate each run in its own scratch target directory
- Classify failures (spawn/IO, bad encoding, compile errors)
"""

from bindgen_expand.core.config import ExpandConfig
from bindgen_expand.core.expander import Expander, ExpansionRequest, expand
from bindgen_expand.errors import (
    CompileError,
    ExpandEncodingError,
    ExpandError,
    ExpandIOError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ExpandConfig",
    "Expander",
    "ExpansionRequest",
    "expand",
    "ExpandError",
    "ExpandIOError",
    "ExpandEncodingError",
    "CompileError",
]
