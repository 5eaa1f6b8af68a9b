"""
FunctionDescriptor model.

Externally consumable projection of a function, returned by the admin API.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Serialized even when null; every other optional field is omitted unless set.
_ALWAYS_EMITTED = {
    "name",
    "href",
    "config",
    "is_direct",
    "is_disabled",
    "is_proxy",
    "language",
    "invoke_url_template",
}


class FunctionDescriptor(BaseModel):
    """
    Function metadata as seen by management API clients.

    Optional hrefs are only set when the underlying path exists; `test_data`
    is set (possibly to None) whenever a test data path is configured.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    href: str
    config: Dict[str, Any] = Field(default_factory=dict)
    is_direct: bool = False
    is_disabled: bool = False
    is_proxy: bool = False
    language: Optional[str] = None
    invoke_url_template: Optional[str] = None
    script_root_path_href: Optional[str] = None
    config_href: Optional[str] = None
    test_data_href: Optional[str] = None
    test_data: Optional[str] = None
    script_href: Optional[str] = None

    def to_response(self) -> Dict[str, Any]:
        """Serialize with camelCase keys, omitting optional fields never set."""
        return self.model_dump(by_alias=True, include=_ALWAYS_EMITTED | self.model_fields_set)
