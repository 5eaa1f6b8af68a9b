"""
Where: services/metadata/core/vfs.py
What: Map host file paths to /admin/vfs hrefs.
Why: Descriptors link to the script root, function.json, test data and script.
"""

import os
from urllib.parse import quote


def file_path_to_vfs_uri(
    file_path: str, base_url: str, root: str, is_directory: bool = False
) -> str:
    """
    Build the VFS href for a file or directory.

    Paths under `root` are addressed relative to it; anything else by its
    absolute path without the leading separator. Directories end with "/".

    Example: ("/home/site/wwwroot/Foo/function.json", "https://host/", "/home/site/wwwroot")
        → "https://host/admin/vfs/Foo/function.json"
    """
    normalized = os.path.normpath(file_path)
    root_normalized = os.path.normpath(root) if root else ""

    relative = normalized
    if root_normalized:
        try:
            if os.path.commonpath([normalized, root_normalized]) == root_normalized:
                relative = os.path.relpath(normalized, root_normalized)
        except ValueError:
            # Mixed absolute/relative paths or different drives.
            relative = normalized

    if relative == os.curdir:
        relative = ""

    relative = relative.replace("\\", "/").strip("/")
    suffix = "/" if is_directory and relative else ""
    vfs_path = quote(relative, safe="/")

    return f"{base_url.rstrip('/')}/admin/vfs/{vfs_path}{suffix}"
