import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pytest

from services.metadata.models import Binding, FunctionDefinition, HostPaths


def _write_function_json(root: Path, name: str, content: Union[Dict[str, Any], str]) -> Path:
    function_dir = root / name
    function_dir.mkdir(parents=True, exist_ok=True)
    metadata_path = function_dir / "function.json"
    if isinstance(content, str):
        metadata_path.write_text(content, encoding="utf-8")
    else:
        metadata_path.write_text(json.dumps(content), encoding="utf-8")
    return metadata_path


def _make_definition(
    name: str = "Foo",
    bindings: Optional[List[Dict[str, Any]]] = None,
    **kwargs: Any,
) -> FunctionDefinition:
    return FunctionDefinition(
        name=name,
        bindings=[Binding.from_raw(raw) for raw in (bindings or [])],
        **kwargs,
    )


@pytest.fixture
def write_function_json():
    """Create `root/name/function.json`; strings are written as-is."""
    return _write_function_json


@pytest.fixture
def make_definition():
    return _make_definition


@pytest.fixture
def script_root(tmp_path) -> Path:
    root = tmp_path / "wwwroot"
    root.mkdir()
    return root


@pytest.fixture
def host_paths(script_root) -> HostPaths:
    return HostPaths(root_script_path=str(script_root))
