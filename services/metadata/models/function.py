"""
Function domain models.

Defines a function definition and its bindings as Pydantic models.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from ..core.case_insensitive import ends_with_ignore_case, get_ignore_case
from ..core.function_name import validate_function_name


class BindingDirection(str, Enum):
    IN = "in"
    OUT = "out"
    INOUT = "inout"

    @classmethod
    def parse(cls, value: Any) -> "BindingDirection":
        """Parse a function.json direction, defaulting to `in`."""
        if isinstance(value, str):
            for member in cls:
                if member.value == value.strip().lower():
                    return member
        return cls.IN


class Binding(BaseModel):
    """
    A declared input/output connection point of a function.

    `raw` keeps the binding object exactly as declared (key order included);
    it is what gets projected back to API clients.
    """

    type: str
    direction: BindingDirection = BindingDirection.IN
    raw: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_trigger(self) -> bool:
        return ends_with_ignore_case(self.type, "Trigger")

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "Binding":
        """Factory to create from a function.json binding object."""
        binding_type = get_ignore_case(raw, "type")
        return cls(
            type=binding_type if isinstance(binding_type, str) else "",
            direction=BindingDirection.parse(get_ignore_case(raw, "direction")),
            raw=dict(raw),
        )


class FunctionDefinition(BaseModel):
    """
    Core domain entity for a function known to the host.
    """

    name: str
    entry_point: Optional[str] = None
    script_file: Optional[str] = None
    language: Optional[str] = None
    function_directory: Optional[str] = None
    bindings: List[Binding] = Field(default_factory=list)
    is_direct: bool = False
    is_disabled: bool = False

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return validate_function_name(value)

    @property
    def input_bindings(self) -> List[Binding]:
        return [b for b in self.bindings if b.direction != BindingDirection.OUT]


class HostPaths(BaseModel):
    """Host-level locations the projections are resolved against."""

    root_script_path: str
    test_data_path: Optional[str] = None
