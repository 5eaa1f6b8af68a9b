"""
Function Metadata Service - admin API for function descriptors

Serves function descriptors to management clients and trigger projections
to the scale controller, based on the functions found under the script root.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging

from fastapi import FastAPI, Response

from .api.deps import (
    BaseUrlDep,
    FunctionDep,
    FunctionRegistryDep,
    HostPathsDep,
    ResponseAssemblerDep,
    TriggerExtractorDep,
)
from .config import config
from .core.logging_config import setup_logging
from .exceptions import register_exception_handlers
from .lifecycle import manage_lifespan
from .middleware import request_context_middleware

# Logger setup
setup_logging()
logger = logging.getLogger("metadata.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with manage_lifespan(app, config):
        yield


app = FastAPI(
    title="Function Metadata Service", version="1.0.0", lifespan=lifespan, root_path=config.root_path
)

app.middleware("http")(request_context_middleware)
register_exception_handlers(app)


# ===========================================
# Endpoint definitions.
# ===========================================


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.get("/admin/functions")
def list_functions(
    function_registry: FunctionRegistryDep,
    assembler: ResponseAssemblerDep,
    host_paths: HostPathsDep,
    base_url: BaseUrlDep,
):
    """Descriptors of every known function."""
    return [
        assembler.assemble(definition, host_paths, config.HTTP_ROUTE_PREFIX, base_url).to_response()
        for definition in function_registry.list_functions()
    ]


@app.get("/admin/functions/{name}")
def get_function(
    definition: FunctionDep,
    assembler: ResponseAssemblerDep,
    host_paths: HostPathsDep,
    base_url: BaseUrlDep,
):
    """Descriptor of a single function."""
    descriptor = assembler.assemble(definition, host_paths, config.HTTP_ROUTE_PREFIX, base_url)
    return descriptor.to_response()


@app.get("/admin/functions/{name}/trigger")
def get_function_trigger(
    definition: FunctionDep,
    trigger_extractor: TriggerExtractorDep,
    host_paths: HostPathsDep,
):
    """Trigger binding of a function for the scale controller (204 when none)."""
    trigger = trigger_extractor.extract(definition, host_paths)
    if trigger is None:
        return Response(status_code=204)
    return trigger


@app.get("/admin/host/triggers")
def list_triggers(
    function_registry: FunctionRegistryDep,
    trigger_extractor: TriggerExtractorDep,
    host_paths: HostPathsDep,
):
    """Trigger bindings of every function that has one."""
    return trigger_extractor.extract_all(function_registry.list_functions(), host_paths)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
