"""Save rendered diagrams next to the analysed project."""

from __future__ import annotations

import hashlib
import os

DISK_FOLDER_NAME = "dddplayer"
PROJECT_MARKER = "go.mod"


def sha1_sum(text: str) -> str:
    """Return the hex SHA-1 digest of ``text``."""
    return hashlib.sha1(text.encode()).hexdigest()


def find_project_root_dir(start_dir: str) -> str:
    """Walk up from ``start_dir`` to the first directory holding the project marker."""
    directory = start_dir
    while True:
        if os.path.exists(os.path.join(directory, PROJECT_MARKER)):
            return directory
        parent = os.path.normpath(os.path.dirname(directory) or ".")
        if directory in ("/", ".") or parent == directory:
            raise FileNotFoundError(f"cannot find {PROJECT_MARKER} file")
        directory = parent


class DiskWriter:
    """Writes a diagram and its hash under the project's output folder."""

    def __init__(self, content: str, filename: str, main_path: str) -> None:
        self.content = content
        self.name = filename
        self.root = os.path.join(find_project_root_dir(main_path), DISK_FOLDER_NAME)
        os.makedirs(self.root, exist_ok=True)

    @property
    def dot_path(self) -> str:
        return os.path.join(self.root, f"{self.name}.dot")

    @property
    def hash_path(self) -> str:
        return os.path.join(self.root, f"{self.name}.hash")

    def digest(self) -> str:
        """Return the SHA-1 of the content."""
        return sha1_sum(self.content)

    def _is_updated(self) -> bool:
        try:
            with open(self.hash_path, encoding="utf-8") as fh:
                return fh.read() != self.digest()
        except OSError:
            return True

    def write(self) -> bool:
        """Write the diagram and its hash unless unchanged; return whether it wrote."""
        if not self._is_updated():
            return False
        with open(self.dot_path, "w", encoding="utf-8") as fh:
            fh.write(self.content)
        with open(self.hash_path, "w", encoding="utf-8") as fh:
            fh.write(self.digest())
        return True


def write_to_disk(raw: str, filename: str, main_path: str) -> bool:
    """Save ``raw`` as ``filename`` in the project found from ``main_path``."""
    return DiskWriter(raw, filename, main_path).write()