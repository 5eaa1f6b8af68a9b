"""
Services package.

Provides the projections of function definitions served by the admin API.
"""

from .config_resolver import ConfigResolver
from .function_registry import FunctionRegistry
from .response_assembler import ResponseAssembler
from .testdata_cache import TestDataCache, get_test_data_file_path
from .trigger_extractor import TriggerExtractor
from .url_synthesizer import build_href, build_invoke_url_template

__all__ = [
    "ConfigResolver",
    "FunctionRegistry",
    "ResponseAssembler",
    "TestDataCache",
    "TriggerExtractor",
    "build_href",
    "build_invoke_url_template",
    "get_test_data_file_path",
]
