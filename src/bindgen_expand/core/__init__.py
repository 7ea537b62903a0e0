"""
Core modules for bindgen_expand.
"""

from bindgen_expand.core.config import ExpandConfig
from bindgen_expand.core.expander import Expander, ExpansionRequest, expand
from bindgen_expand.core.runner import CommandRunner, RecordingRunner, SubprocessRunner

__all__ = [
    "ExpandConfig",
    "Expander",
    "ExpansionRequest",
    "expand",
    "CommandRunner",
    "RecordingRunner",
    "SubprocessRunner",
]
