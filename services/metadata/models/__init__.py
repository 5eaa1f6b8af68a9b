"""
Data model definitions package.

Aggregates Pydantic models for use in other modules.
"""

from .descriptor import FunctionDescriptor
from .function import Binding, BindingDirection, FunctionDefinition, HostPaths

__all__ = [
    "Binding",
    "BindingDirection",
    "FunctionDefinition",
    "FunctionDescriptor",
    "HostPaths",
]
