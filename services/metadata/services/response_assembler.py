"""
Function descriptor assembly.

Combines the resolved configuration, synthesized URLs and test data into the
FunctionDescriptor returned by the admin API.
"""

import logging
import os
from typing import Any, Dict, Optional

from ..core.file_store import FileStore
from ..core.vfs import file_path_to_vfs_uri
from ..models import FunctionDefinition, FunctionDescriptor, HostPaths
from .config_resolver import ConfigResolver, get_function_path_or_none, get_metadata_path_or_none
from .testdata_cache import TestDataCache, get_test_data_file_path
from .url_synthesizer import build_href, build_invoke_url_template, resolve_base_url

logger = logging.getLogger("metadata.response_assembler")

DEFAULT_MAX_TEST_DATA_INLINE_LENGTH = 4096


class ResponseAssembler:
    def __init__(
        self,
        file_store: Optional[FileStore] = None,
        config_resolver: Optional[ConfigResolver] = None,
        test_data_cache: Optional[TestDataCache] = None,
        vfs_root: Optional[str] = None,
        test_data_capping_enabled: bool = True,
        max_test_data_inline_length: int = DEFAULT_MAX_TEST_DATA_INLINE_LENGTH,
    ):
        """
        Args:
            file_store: file access shared by all collaborators
            config_resolver: ConfigResolver instance
            test_data_cache: TestDataCache instance
            vfs_root: root of VFS hrefs (defaults to the script root)
            test_data_capping_enabled: withhold oversized test data
            max_test_data_inline_length: inline cap for test data
        """
        self.file_store = file_store or FileStore()
        self.config_resolver = config_resolver or ConfigResolver(self.file_store)
        self.test_data_cache = test_data_cache or TestDataCache(self.file_store)
        self.vfs_root = vfs_root
        self.test_data_capping_enabled = test_data_capping_enabled
        self.max_test_data_inline_length = max_test_data_inline_length

    def assemble(
        self,
        definition: FunctionDefinition,
        host_paths: HostPaths,
        route_prefix: Optional[str] = None,
        base_url: Optional[str] = None,
    ) -> FunctionDescriptor:
        """
        Map a function definition to its descriptor.

        Args:
            definition: function definition
            host_paths: script root and optional test data path
            route_prefix: HTTP route prefix
            base_url: base URL for hrefs (defaults to https://localhost/)

        Returns:
            FunctionDescriptor with optional fields set only when their
            source exists or is configured.

        Raises:
            OSError: when the test data file cannot be created
        """
        base_url = resolve_base_url(base_url)
        vfs_root = self.vfs_root or host_paths.root_script_path

        function_path = get_function_path_or_none(
            host_paths.root_script_path, definition.name, self.file_store
        )
        metadata_path = get_metadata_path_or_none(function_path, self.file_store)

        fields: Dict[str, Any] = {
            "name": definition.name,
            "href": build_href(definition.name, base_url),
            "config": self.config_resolver.resolve_from_path(definition, metadata_path),
            "is_direct": definition.is_direct,
            "is_disabled": definition.is_disabled,
            "is_proxy": False,
            "language": definition.language,
            "invoke_url_template": build_invoke_url_template(base_url, definition, route_prefix),
        }

        if function_path:
            fields["script_root_path_href"] = file_path_to_vfs_uri(
                function_path, base_url, vfs_root, is_directory=True
            )

        if metadata_path:
            fields["config_href"] = file_path_to_vfs_uri(metadata_path, base_url, vfs_root)

        if host_paths.test_data_path:
            test_data_path = get_test_data_file_path(definition.name, host_paths)
            fields["test_data_href"] = file_path_to_vfs_uri(test_data_path, base_url, vfs_root)
            fields["test_data"] = self.test_data_cache.get_or_create(
                test_data_path,
                self.test_data_capping_enabled,
                self.max_test_data_inline_length,
            )

        if definition.script_file:
            script_path = os.path.join(host_paths.root_script_path, definition.script_file)
            fields["script_href"] = file_path_to_vfs_uri(script_path, base_url, vfs_root)

        return FunctionDescriptor(**fields)
