import logging

from services.metadata.services.function_registry import FunctionRegistry


def test_load_functions_discovers_function_directories(script_root, write_function_json):
    write_function_json(
        script_root,
        "HttpFoo",
        {
            "scriptFile": "__init__.py",
            "entryPoint": "main",
            "bindings": [
                {"type": "httpTrigger", "direction": "in", "route": "foo"},
                {"type": "http", "direction": "out", "name": "$return"},
            ],
        },
    )
    write_function_json(
        script_root,
        "QueueBar",
        {"language": "node", "disabled": True, "bindings": [{"type": "queueTrigger"}]},
    )
    (script_root / "not-a-function").mkdir()
    (script_root / "host.json").write_text("{}", encoding="utf-8")

    registry = FunctionRegistry(str(script_root))
    loaded = registry.load_functions()

    assert set(loaded) == {"httpfoo", "queuebar"}

    foo = registry.get_function("HttpFoo")
    assert foo.script_file == str(script_root / "HttpFoo" / "__init__.py")
    assert foo.entry_point == "main"
    assert foo.language == "python"
    assert foo.function_directory == str(script_root / "HttpFoo")
    assert [b.type for b in foo.bindings] == ["httpTrigger", "http"]
    assert foo.bindings[0].raw["route"] == "foo"
    assert foo.is_disabled is False

    bar = registry.get_function("queuebar")
    assert bar.language == "node"
    assert bar.is_disabled is True
    assert [b.type for b in bar.bindings if b.is_trigger] == ["queueTrigger"]


def test_load_functions_skips_invalid_function_json(script_root, write_function_json, caplog):
    write_function_json(script_root, "Broken", "{not json")
    write_function_json(script_root, "Listed", "[]")
    write_function_json(script_root, "Good", {"bindings": []})

    with caplog.at_level(logging.ERROR, logger="metadata.function_registry"):
        registry = FunctionRegistry(str(script_root))
        registry.load_functions()

    assert [d.name for d in registry.list_functions()] == ["Good"]
    assert "Broken" in caplog.text


def test_load_functions_skips_unsafe_directory_names(script_root, write_function_json):
    write_function_json(script_root, "1starts-with-digit", {"bindings": []})
    write_function_json(script_root, "has.dot", {"bindings": []})

    registry = FunctionRegistry(str(script_root))

    assert registry.load_functions() == {}


def test_load_functions_missing_root(tmp_path):
    registry = FunctionRegistry(str(tmp_path / "missing"))

    assert registry.load_functions() == {}
    assert registry.list_functions() == []


def test_direct_functions_are_flagged(script_root, write_function_json):
    write_function_json(
        script_root,
        "Compiled",
        {"configurationSource": "attributes", "scriptFile": "../bin/App.dll", "bindings": []},
    )

    registry = FunctionRegistry(str(script_root))
    registry.load_functions()

    compiled = registry.get_function("compiled")
    assert compiled.is_direct is True
    assert compiled.language == "DotNetAssembly"
    assert compiled.script_file == str(script_root / "bin" / "App.dll")


def test_register_and_lookup_ignore_case(script_root, make_definition):
    registry = FunctionRegistry(str(script_root))
    registry.register(make_definition("InMemory"))

    assert registry.get_function("INMEMORY").name == "InMemory"
    assert registry.get_function("other") is None


def test_list_functions_is_sorted_by_name(script_root, make_definition):
    registry = FunctionRegistry(str(script_root))
    for name in ("charlie", "Alpha", "bravo"):
        registry.register(make_definition(name))

    assert [d.name for d in registry.list_functions()] == ["Alpha", "bravo", "charlie"]
