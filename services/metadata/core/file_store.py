"""
Local file store.

Thin wrapper over the filesystem primitives the metadata projections need.
Errors are not handled here; callers decide which failures are fatal.
"""

import os


class FileStore:
    """Blocking UTF-8 file access rooted on the local disk.

    Line endings are neither translated on read nor on write.
    """

    encoding = "utf-8"

    def directory_exists(self, path: str) -> bool:
        return bool(path) and os.path.isdir(path)

    def file_exists(self, path: str) -> bool:
        return bool(path) and os.path.isfile(path)

    def read_text(self, path: str, errors: str = "strict") -> str:
        """
        Args:
            path: file path
            errors: codec error handler; "replace" substitutes U+FFFD for bad bytes
        """
        with open(path, "r", encoding=self.encoding, errors=errors, newline="") as f:
            return f.read()

    def write_text(self, path: str, content: str) -> None:
        with open(path, "w", encoding=self.encoding, newline="") as f:
            f.write(content)

    def ensure_directory_exists(self, path: str) -> None:
        if path:
            os.makedirs(path, exist_ok=True)
