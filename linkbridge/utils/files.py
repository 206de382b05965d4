"""File system helpers

Functions:
    write_text_atomically(path: Path, content: str) -> None
        Publish a text file so readers never observe a partially written file.
"""

import os
from pathlib import Path


def write_text_atomically(path: Path, content: str) -> None:
    """Write UTF-8 text to `path` atomically

    The content goes to a hidden temporary file next to `path`, is flushed and
    synced to disk, then moved into place with os.replace(). The temporary file
    is removed if anything fails before the move.

    Args:
        path (Path): destination file; its parent directory must exist
        content (str): text to write

    Raises:
        OSError: on any file system failure.
    """
    tmp_path = path.with_name(f'.{path.name}.tmp')
    try:
        with open(tmp_path, 'w', encoding='utf-8') as f:
            f.write(content)
            # Ensure data is on disk before the atomic replace
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
