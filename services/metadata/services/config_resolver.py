"""
Function configuration resolver.

Produces the canonical configuration object of a function: the parsed
function.json when one exists on disk, otherwise a projection of the
in-memory definition.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from ..core.file_store import FileStore
from ..models import FunctionDefinition, HostPaths

logger = logging.getLogger("metadata.config_resolver")

FUNCTION_METADATA_FILE_NAME = "function.json"


def get_function_path_or_none(
    root_script_path: str, function_name: str, file_store: FileStore
) -> Optional[str]:
    function_path = os.path.join(root_script_path, function_name)
    if file_store.directory_exists(function_path):
        return function_path
    return None


def get_metadata_path_or_none(
    function_path: Optional[str], file_store: FileStore
) -> Optional[str]:
    if function_path:
        metadata_path = os.path.join(function_path, FUNCTION_METADATA_FILE_NAME)
        if file_store.file_exists(metadata_path):
            return metadata_path
    return None


class ConfigResolver:
    def __init__(self, file_store: Optional[FileStore] = None):
        self.file_store = file_store or FileStore()

    def resolve(self, definition: FunctionDefinition, host_paths: HostPaths) -> Dict[str, Any]:
        """
        Resolve the configuration object of a function.

        Args:
            definition: function definition
            host_paths: host paths (script root is used)

        Returns:
            JSON object. Never None; {} when function.json cannot be parsed.
        """
        function_path = get_function_path_or_none(
            host_paths.root_script_path, definition.name, self.file_store
        )
        metadata_path = get_metadata_path_or_none(function_path, self.file_store)
        return self.resolve_from_path(definition, metadata_path)

    def resolve_from_path(
        self, definition: FunctionDefinition, metadata_path: Optional[str]
    ) -> Dict[str, Any]:
        if metadata_path and self.file_store.file_exists(metadata_path):
            return self._load_config_file(metadata_path)
        return self.config_from_definition(definition)

    def _load_config_file(self, path: str) -> Dict[str, Any]:
        # Callers rely on getting an object back, never an error.
        try:
            parsed = json.loads(self.file_store.read_text(path))
        except FileNotFoundError:
            logger.warning(f"function.json disappeared before it could be read: {path}")
            return {}
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Error parsing function config {path}: {e}")
            return {}
        except Exception:
            logger.exception(f"Unexpected error reading function config {path}")
            return {}

        if not isinstance(parsed, dict):
            logger.warning(
                f"function.json is not a JSON object: {path}",
                extra={"json_type": type(parsed).__name__},
            )
            return {}

        return parsed

    @staticmethod
    def config_from_definition(definition: FunctionDefinition) -> Dict[str, Any]:
        """Build the configuration object from the in-memory definition."""
        return {
            "name": definition.name,
            "entryPoint": definition.entry_point,
            "scriptFile": definition.script_file,
            "language": definition.language,
            "functionDirectory": definition.function_directory,
            "bindings": [dict(binding.raw) for binding in definition.bindings],
        }
