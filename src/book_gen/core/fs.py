"""Small filesystem helpers shared by the builder and the renderers."""

import shutil
from pathlib import Path


def create_dir_all(path: Path) -> None:
    """Create a directory and its parents; no-op if it already exists."""
    path.mkdir(parents=True, exist_ok=True)


def remove_dir_content(path: Path) -> None:
    """Delete everything inside a directory, keeping the directory itself.

    Raises:
        NotADirectoryError: If path is not a directory
    """
    for entry in path.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()


def write_file(root: Path, relative: Path, content: bytes) -> Path:
    """Write content to root/relative, creating parent directories as needed.

    Returns:
        The path that was written
    """
    target = root / relative
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(content)
    return target
