"""
Core logic package.

Provides shared helpers such as file access, VFS hrefs and name validation.
"""

from .case_insensitive import find_key_ignore_case, get_ignore_case
from .file_store import FileStore
from .function_name import function_name_key, validate_function_name
from .vfs import file_path_to_vfs_uri

__all__ = [
    "find_key_ignore_case",
    "get_ignore_case",
    "FileStore",
    "function_name_key",
    "validate_function_name",
    "file_path_to_vfs_uri",
]
