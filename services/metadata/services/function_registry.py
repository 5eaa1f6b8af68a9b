"""
Function registry.

Discovers functions under the script root (one directory per function, each
holding a function.json) and provides case-insensitive name lookup.
In-memory definitions can be registered alongside discovered ones.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ..core.case_insensitive import equals_ignore_case, get_ignore_case
from ..core.file_store import FileStore
from ..core.function_name import function_name_key
from ..models import Binding, FunctionDefinition
from .config_resolver import FUNCTION_METADATA_FILE_NAME

logger = logging.getLogger("metadata.function_registry")

# Script extension -> language reported when function.json declares none.
_LANGUAGE_BY_EXTENSION = {
    ".py": "python",
    ".js": "node",
    ".mjs": "node",
    ".ps1": "powershell",
    ".csx": "CSharp",
    ".dll": "DotNetAssembly",
    ".jar": "java",
}


class FunctionRegistry:
    def __init__(self, root_script_path: str, file_store: Optional[FileStore] = None):
        self.root_script_path = root_script_path
        self.file_store = file_store or FileStore()
        # Keyed by casefolded name.
        self._registry: Dict[str, FunctionDefinition] = {}

    def load_functions(self) -> Dict[str, FunctionDefinition]:
        """
        Scan the script root and cache the discovered functions.

        Returns:
            Dict of casefolded function name -> definition
        """
        registry: Dict[str, FunctionDefinition] = {}

        try:
            entries = sorted(os.listdir(self.root_script_path))
        except FileNotFoundError:
            logger.warning(f"Script root not found at {self.root_script_path}")
            self._registry = {}
            return self._registry

        for entry in entries:
            function_path = os.path.join(self.root_script_path, entry)
            metadata_path = os.path.join(function_path, FUNCTION_METADATA_FILE_NAME)
            if not self.file_store.directory_exists(function_path):
                continue
            if not self.file_store.file_exists(metadata_path):
                continue

            definition = self._load_function(entry, function_path, metadata_path)
            if definition is not None:
                registry[function_name_key(definition.name)] = definition

        self._registry = registry
        logger.info(f"Loaded {len(self._registry)} functions from {self.root_script_path}")
        return self._registry

    def _load_function(
        self, name: str, function_path: str, metadata_path: str
    ) -> Optional[FunctionDefinition]:
        try:
            data = json.loads(self.file_store.read_text(metadata_path))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error(f"Error parsing function config {metadata_path}: {e}")
            return None

        if not isinstance(data, dict):
            logger.error(f"function.json is not a JSON object: {metadata_path}")
            return None

        try:
            return self.definition_from_config(name, function_path, data)
        except (ValidationError, ValueError) as e:
            logger.error(f"Skipping function {name!r}: {e}")
            return None

    @staticmethod
    def definition_from_config(
        name: str, function_path: str, data: Dict[str, Any]
    ) -> FunctionDefinition:
        """Build a FunctionDefinition from a parsed function.json."""
        script_file = get_ignore_case(data, "scriptFile")
        if isinstance(script_file, str) and script_file:
            script_file = os.path.normpath(os.path.join(function_path, script_file))
        else:
            script_file = None

        language = get_ignore_case(data, "language")
        if not language and script_file:
            language = _LANGUAGE_BY_EXTENSION.get(os.path.splitext(script_file)[1].lower())

        raw_bindings = get_ignore_case(data, "bindings")
        if not isinstance(raw_bindings, list):
            raw_bindings = []

        return FunctionDefinition(
            name=name,
            entry_point=get_ignore_case(data, "entryPoint"),
            script_file=script_file,
            language=language,
            function_directory=function_path,
            bindings=[Binding.from_raw(raw) for raw in raw_bindings if isinstance(raw, dict)],
            is_direct=equals_ignore_case(get_ignore_case(data, "configurationSource"), "attributes"),
            is_disabled=get_ignore_case(data, "disabled") is True,
        )

    def register(self, definition: FunctionDefinition) -> None:
        """Add or replace an in-memory definition."""
        self._registry[function_name_key(definition.name)] = definition

    def get_function(self, function_name: str) -> Optional[FunctionDefinition]:
        """
        Get a definition by function name, ignoring case.

        Returns:
            Function definition, or None if missing
        """
        return self._registry.get(function_name_key(function_name))

    def list_functions(self) -> List[FunctionDefinition]:
        return sorted(self._registry.values(), key=lambda d: function_name_key(d.name))
