"""
Per-function test data cache.

Test data lives in `{TEST_DATA_PATH}/{name}.dat`. The file is created empty on
first access; content larger than the inline cap is withheld so callers fetch
it through the test data href instead.
"""

import logging
import os
from typing import Optional

from ..core.file_store import FileStore
from ..models import HostPaths

logger = logging.getLogger("metadata.testdata_cache")

TEST_DATA_FILE_SUFFIX = ".dat"


def get_test_data_file_path(function_name: str, host_paths: HostPaths) -> str:
    if not host_paths.test_data_path:
        raise ValueError("Test data path is not configured")
    return os.path.join(host_paths.test_data_path, f"{function_name}{TEST_DATA_FILE_SUFFIX}")


class TestDataCache:
    __test__ = False  # not a pytest test class

    def __init__(self, file_store: Optional[FileStore] = None):
        self.file_store = file_store or FileStore()

    def get_or_create(self, path: str, capping_enabled: bool, cap_length: int) -> Optional[str]:
        """
        Read test data, creating an empty file when none exists yet.

        Args:
            path: test data file path
            capping_enabled: whether oversized content is withheld
            cap_length: maximum length returned inline, counted in Unicode code
                points (characters outside the BMP count once, not as two
                UTF-16 units)

        Returns:
            File content exactly as stored (line endings untouched, undecodable
            bytes replaced with U+FFFD), or None when capped.

        Raises:
            OSError: when the directory or file cannot be created or read
        """
        if not self.file_store.file_exists(path):
            # Concurrent first access may create the file twice; both write "".
            self.file_store.ensure_directory_exists(os.path.dirname(path))
            self.file_store.write_text(path, "")
            logger.info(f"Created empty test data file {path}")

        data = self.file_store.read_text(path, errors="replace")

        if capping_enabled and len(data) > cap_length:
            logger.debug(
                "Test data exceeds inline cap",
                extra={"path": path, "length": len(data), "cap_length": cap_length},
            )
            return None

        return data
