"""
Scratch target directory for cargo.

Either a borrowed, caller-managed directory or a private temporary one
that is removed when the block exits.
"""

import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from bindgen_expand.errors import ExpandIOError

TEMP_PREFIX = "bindgen-expand-"


@contextmanager
def target_directory(override: Optional[Path] = None) -> Iterator[Path]:
    """
    Provide a cargo target directory for the duration of a block.

    Args:
        override: Existing directory to reuse verbatim. It is neither
            created nor removed here.

    Yields:
        Path to use as CARGO_TARGET_DIR.

    Raises:
        ExpandIOError: If the temporary directory cannot be created or
            removed.
    """
    if override is not None:
        yield Path(override)
        return

    try:
        path = Path(tempfile.mkdtemp(prefix=TEMP_PREFIX))
    except OSError as e:
        raise ExpandIOError(f"Failed to create temporary target directory: {e}") from e

    try:
        yield path
    except BaseException as e:
        # The block's error wins; a cleanup failure is attached as a note
        try:
            shutil.rmtree(path)
        except OSError as cleanup_error:
            e.add_note(
                f"Also failed to remove temporary target directory {path}: "
                f"{cleanup_error}"
            )
        raise

    try:
        shutil.rmtree(path)
    except OSError as e:
        raise ExpandIOError(
            f"Failed to remove temporary target directory {path}: {e}"
        ) from e
