"""
Where: services/metadata/lifecycle.py
What: Startup/shutdown orchestration for shared metadata services.
Why: Keep main.py focused on app assembly.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .config import MetadataConfig
from .core.file_store import FileStore
from .services.config_resolver import ConfigResolver
from .services.function_registry import FunctionRegistry
from .services.response_assembler import ResponseAssembler
from .services.testdata_cache import TestDataCache
from .services.trigger_extractor import TriggerExtractor

logger = logging.getLogger("metadata.main")


def init_services(app: FastAPI, metadata_config: MetadataConfig) -> None:
    """Build the services and store them in app.state for DI."""
    file_store = FileStore()
    config_resolver = ConfigResolver(file_store)

    function_registry = FunctionRegistry(metadata_config.SCRIPT_ROOT_PATH, file_store)
    function_registry.load_functions()

    app.state.function_registry = function_registry
    app.state.trigger_extractor = TriggerExtractor(config_resolver)
    app.state.response_assembler = ResponseAssembler(
        file_store=file_store,
        config_resolver=config_resolver,
        test_data_cache=TestDataCache(file_store),
        vfs_root=metadata_config.vfs_root_path,
        test_data_capping_enabled=metadata_config.test_data_capping_enabled,
        max_test_data_inline_length=metadata_config.MAX_TEST_DATA_INLINE_LENGTH,
    )
    app.state.host_paths = metadata_config.host_paths()


@asynccontextmanager
async def manage_lifespan(app: FastAPI, metadata_config: MetadataConfig) -> AsyncIterator[None]:
    """Manage application lifecycle."""
    init_services(app, metadata_config)
    logger.info(
        "Metadata service initialized",
        extra={
            "script_root": metadata_config.SCRIPT_ROOT_PATH,
            "test_data_path": metadata_config.TEST_DATA_PATH or None,
        },
    )

    yield

    logger.info("Metadata service shutting down.")
