"""
Dependency Injection for the metadata API.

Manage request handler dependencies using FastAPI Depends.
"""

from typing import Annotated

from fastapi import Depends, Request

from ..config import config
from ..core.exceptions import FunctionNotFoundError
from ..models import FunctionDefinition, HostPaths
from ..services.function_registry import FunctionRegistry
from ..services.response_assembler import ResponseAssembler
from ..services.trigger_extractor import TriggerExtractor


# ==========================================
# 1. Service Accessors
# ==========================================


def get_function_registry(request: Request) -> FunctionRegistry:
    return request.app.state.function_registry


def get_response_assembler(request: Request) -> ResponseAssembler:
    return request.app.state.response_assembler


def get_trigger_extractor(request: Request) -> TriggerExtractor:
    return request.app.state.trigger_extractor


def get_host_paths(request: Request) -> HostPaths:
    return request.app.state.host_paths


# Service Dependency Type Aliases
FunctionRegistryDep = Annotated[FunctionRegistry, Depends(get_function_registry)]
ResponseAssemblerDep = Annotated[ResponseAssembler, Depends(get_response_assembler)]
TriggerExtractorDep = Annotated[TriggerExtractor, Depends(get_trigger_extractor)]
HostPathsDep = Annotated[HostPaths, Depends(get_host_paths)]


# ==========================================
# 2. Logic Dependencies (Resolution)
# ==========================================


def get_base_url(request: Request) -> str:
    """
    Base URL used for hrefs.

    The configured BASE_URL wins; otherwise the URL the request came in on.
    """
    return config.BASE_URL or str(request.base_url)


def resolve_function(name: str, function_registry: FunctionRegistryDep) -> FunctionDefinition:
    """
    Resolve a function definition from the path parameter.

    Raises:
        FunctionNotFoundError: when no function has that name
    """
    definition = function_registry.get_function(name)
    if definition is None:
        raise FunctionNotFoundError(name)
    return definition


# Logic Dependency Type Aliases
BaseUrlDep = Annotated[str, Depends(get_base_url)]
FunctionDep = Annotated[FunctionDefinition, Depends(resolve_function)]
