"""
Where: services/metadata/tests/test_response_assembler.py
What: Descriptor assembly from definitions, host paths and files on disk.
Why: Optional fields must follow file existence and configuration exactly.
"""

import pytest

from services.metadata.models import HostPaths
from services.metadata.services.response_assembler import ResponseAssembler

BASE_URL = "https://host/"

HTTP_BINDINGS = [
    {"type": "httpTrigger", "direction": "in", "methods": ["get"]},
    {"type": "http", "direction": "out", "name": "$return"},
]


@pytest.fixture
def assembler(tmp_path):
    # hrefs relative to tmp_path: "wwwroot/..." and "data/..."
    return ResponseAssembler(vfs_root=str(tmp_path))


def test_assemble_function_with_directory_and_metadata(
    assembler, host_paths, script_root, write_function_json, make_definition
):
    on_disk = {"bindings": HTTP_BINDINGS, "scriptFile": "run.py"}
    write_function_json(script_root, "Foo", on_disk)
    definition = make_definition("Foo", bindings=HTTP_BINDINGS, language="python")

    response = assembler.assemble(definition, host_paths, "api", BASE_URL).to_response()

    assert response == {
        "name": "Foo",
        "href": "https://host/admin/functions/Foo",
        "config": on_disk,
        "isDirect": False,
        "isDisabled": False,
        "isProxy": False,
        "language": "python",
        "invokeUrlTemplate": "https://host/api/foo",
        "scriptRootPathHref": "https://host/admin/vfs/wwwroot/Foo/",
        "configHref": "https://host/admin/vfs/wwwroot/Foo/function.json",
    }


def test_assemble_omits_hrefs_when_directory_missing(assembler, host_paths, make_definition):
    definition = make_definition("Foo", bindings=[{"type": "queueTrigger", "direction": "in"}])

    response = assembler.assemble(definition, host_paths, "api", BASE_URL).to_response()

    assert "scriptRootPathHref" not in response
    assert "configHref" not in response
    assert "testDataHref" not in response
    assert "testData" not in response
    assert "scriptHref" not in response
    assert response["invokeUrlTemplate"] is None
    assert response["config"]["name"] == "Foo"


def test_assemble_directory_without_metadata_file(
    assembler, host_paths, script_root, make_definition
):
    (script_root / "Foo").mkdir()

    response = assembler.assemble(make_definition("Foo"), host_paths, "api", BASE_URL).to_response()

    assert response["scriptRootPathHref"] == "https://host/admin/vfs/wwwroot/Foo/"
    assert "configHref" not in response


def test_assemble_attaches_test_data_when_configured(
    assembler, tmp_path, script_root, make_definition
):
    host_paths = HostPaths(root_script_path=str(script_root), test_data_path=str(tmp_path / "data"))

    response = assembler.assemble(make_definition("Foo"), host_paths, "api", BASE_URL).to_response()

    assert response["testDataHref"] == "https://host/admin/vfs/data/Foo.dat"
    assert response["testData"] == ""
    assert (tmp_path / "data" / "Foo.dat").is_file()


def test_assemble_emits_null_test_data_when_capped(tmp_path, script_root, make_definition):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "Foo.dat").write_text("y" * 20, encoding="utf-8")
    host_paths = HostPaths(root_script_path=str(script_root), test_data_path=str(data_dir))

    capped = ResponseAssembler(vfs_root=str(tmp_path), max_test_data_inline_length=10)
    uncapped = ResponseAssembler(
        vfs_root=str(tmp_path), test_data_capping_enabled=False, max_test_data_inline_length=10
    )

    capped_response = capped.assemble(make_definition("Foo"), host_paths).to_response()
    uncapped_response = uncapped.assemble(make_definition("Foo"), host_paths).to_response()

    assert "testData" in capped_response
    assert capped_response["testData"] is None
    assert capped_response["testDataHref"] == "https://localhost/admin/vfs/data/Foo.dat"
    assert uncapped_response["testData"] == "y" * 20


def test_assemble_script_href_only_with_script_file(assembler, host_paths, make_definition):
    with_script = make_definition("Foo", script_file="Foo/run.py")
    without_script = make_definition("Bar", script_file="")

    assert (
        assembler.assemble(with_script, host_paths, "api", BASE_URL).to_response()["scriptHref"]
        == "https://host/admin/vfs/wwwroot/Foo/run.py"
    )
    assert "scriptHref" not in assembler.assemble(
        without_script, host_paths, "api", BASE_URL
    ).to_response()


def test_assemble_defaults_blank_base_url(assembler, host_paths, make_definition):
    definition = make_definition("Foo", bindings=[{"type": "httpTrigger", "direction": "in"}])

    descriptor = assembler.assemble(definition, host_paths, "api", "")

    assert descriptor.href == "https://localhost/admin/functions/Foo"
    assert descriptor.invoke_url_template == "https://localhost/api/foo"


def test_assemble_carries_definition_flags(assembler, host_paths, make_definition):
    definition = make_definition("Foo", is_direct=True, is_disabled=True, language="node")

    descriptor = assembler.assemble(definition, host_paths, "api", BASE_URL)

    assert descriptor.is_direct is True
    assert descriptor.is_disabled is True
    assert descriptor.is_proxy is False
    assert descriptor.language == "node"


def test_assemble_malformed_metadata_yields_empty_config(
    assembler, host_paths, script_root, write_function_json, make_definition
):
    write_function_json(script_root, "Foo", "{not json")

    response = assembler.assemble(make_definition("Foo"), host_paths, "api", BASE_URL).to_response()

    assert response["config"] == {}
    assert response["configHref"] == "https://host/admin/vfs/wwwroot/Foo/function.json"


def test_assemble_propagates_test_data_creation_failure(tmp_path, script_root, make_definition):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    host_paths = HostPaths(
        root_script_path=str(script_root), test_data_path=str(blocker / "data")
    )

    with pytest.raises(OSError):
        ResponseAssembler().assemble(make_definition("Foo"), host_paths)
