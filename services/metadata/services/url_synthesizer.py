"""
URL synthesis for function descriptors.

Builds the admin href of a function and the invocation URL template of
HTTP-triggered functions.

Example:
    base_url="https://host/", route_prefix="api", name="Foo"
        → href:   "https://host/admin/functions/Foo"
        → invoke: "https://host/api/foo"
    with a binding route of "items/{id}"
        → invoke: "https://host/api/items/{id}"
"""

from typing import Any, Optional
from urllib.parse import urlsplit

from ..core.case_insensitive import equals_ignore_case, get_ignore_case
from ..models import Binding, FunctionDefinition

DEFAULT_BASE_URL = "https://localhost/"
HTTP_TRIGGER_TYPE = "httpTrigger"


def resolve_base_url(base_url: Optional[str]) -> str:
    if not base_url or not base_url.strip():
        return DEFAULT_BASE_URL
    return base_url.strip()


def build_href(name: str, base_url: Optional[str] = None) -> str:
    return f"{resolve_base_url(base_url).rstrip('/')}/admin/functions/{name}"


def find_http_trigger(definition: FunctionDefinition) -> Optional[Binding]:
    """First input binding whose type is httpTrigger, ignoring case."""
    for binding in definition.input_bindings:
        if equals_ignore_case(binding.type, HTTP_TRIGGER_TYPE):
            return binding
    return None


def _custom_route(binding: Binding) -> Optional[str]:
    value: Any = get_ignore_case(binding.raw, "route")
    if value is None or isinstance(value, (dict, list)):
        return None
    route = value if isinstance(value, str) else str(value)
    return route or None


def _ends_with_segment(url: str, segment: str) -> bool:
    path = urlsplit(url).path.rstrip("/")
    return path.casefold().endswith(f"/{segment}".casefold())


def build_invoke_url_template(
    base_url: Optional[str], definition: FunctionDefinition, route_prefix: Optional[str]
) -> Optional[str]:
    """
    Build the invocation URL template of an HTTP-triggered function.

    Args:
        base_url: host base URL (defaults to https://localhost/)
        definition: function definition
        route_prefix: host-level HTTP route prefix (may be empty)

    Returns:
        Lower-cased URL template, or None when the function has no
        httpTrigger input binding.
    """
    http_binding = find_http_trigger(definition)
    if http_binding is None:
        return None

    uri = resolve_base_url(base_url).rstrip("/")

    prefix = (route_prefix or "").strip("/")
    # A base URL that already carries the prefix is not prefixed twice.
    if prefix and not _ends_with_segment(uri, prefix):
        uri += f"/{prefix}"

    custom_route = _custom_route(http_binding)
    if custom_route:
        uri += f"/{custom_route}"
    else:
        uri += f"/{definition.name}"

    # Routing is case-insensitive.
    return uri.lower()
