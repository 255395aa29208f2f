"""Filesystem gateway used by every setup flow.

A narrow wrapper over ``pathlib`` so flows only ever touch the disk through
absolute paths and so tests can swap in a recording double if needed.
"""

from __future__ import annotations

from pathlib import Path


class FileSystemGateway:
    """Create-if-absent directories, text writes, existence checks."""

    def exists(self, path: str | Path) -> bool:
        return Path(path).exists()

    def create_dir(self, path: str | Path) -> bool:
        """Create *path* (and parents) unless something already exists there.

        Returns:
            ``True`` if the directory was created, ``False`` if it was
            already present.
        """
        dir_path = Path(path)
        if dir_path.exists():
            return False
        dir_path.mkdir(parents=True)
        return True

    def write_text(self, path: str | Path, content: str) -> Path:
        """Write UTF-8 *content* to *path*, replacing any existing file."""
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8", newline="\n")
        return file_path

    def remove_file(self, path: str | Path) -> bool:
        """Delete *path* if it is a file. Returns whether anything was removed."""
        file_path = Path(path)
        if not file_path.is_file():
            return False
        file_path.unlink()
        return True
