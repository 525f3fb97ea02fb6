import re

import pytest

from declarecli.exceptions import (
    ConflictingPropertyError,
    DeclarationError,
    DuplicateAliasError,
    DuplicateNameError,
    InvalidCheckError,
    InvalidDefaultError,
    InvalidPropertyError,
    MissingHandlerError,
    UnknownDescribeTargetError,
    UnknownNameError,
)
from declarecli.parser import NO_DESCRIPTION, SpecRegistry


def handler(consumer, name, opts, *args):
    return args


def test_add_opt_registers_name_and_aliases():
    registry = SpecRegistry()
    spec = registry.add_opt("verbose", bool=True, alias=["v", "loud"])

    assert registry.options.get("verbose") is spec
    assert registry.options.get("v") is spec
    assert registry.options.get("loud") is spec
    assert registry.options.canonical("loud") == "verbose"
    assert registry.options.names() == ["verbose"]
    assert len(registry.options) == 1


def test_single_string_alias():
    registry = SpecRegistry()
    spec = registry.add_opt("config", alias="c")
    assert spec.aliases == ("c",)
    assert spec.keys == ("config", "c")


def test_default_description():
    registry = SpecRegistry()
    assert registry.add_opt("foo").description == NO_DESCRIPTION
    assert registry.add_opt("bar", description="").description == NO_DESCRIPTION
    assert registry.add_arg("baz", handler).description == NO_DESCRIPTION


def test_description_is_coerced_to_text():
    registry = SpecRegistry()
    assert registry.add_opt("foo", description=5).description == "5"
    assert registry.add_arg("bar", handler, description=1.5).description == "1.5"


@pytest.mark.parametrize(
    "config, is_list, is_bool",
    [
        ({"list": 2}, True, False),
        ({"list": "yes"}, True, False),
        ({"list": 0}, False, False),
        ({"bool": "yes"}, False, True),
        ({"bool": "no"}, False, True),
        ({"bool": 0}, False, False),
        ({"bool": None}, False, False),
    ],
)
def test_flag_properties_use_truthiness(config, is_list, is_bool):
    registry = SpecRegistry()
    spec = registry.add_opt("foo", **config)
    assert spec.is_list is is_list
    assert spec.is_bool is is_bool


@pytest.mark.parametrize("name", ["foo", "f"])
def test_duplicate_option_name(name):
    registry = SpecRegistry()
    registry.add_opt("foo", alias="f")
    with pytest.raises(DuplicateNameError):
        registry.add_opt(name)


def test_duplicate_alias_leaves_registry_unchanged():
    registry = SpecRegistry()
    registry.add_opt("foo", alias="f")

    with pytest.raises(DuplicateAliasError):
        registry.add_opt("bar", alias=["b", "f"])

    assert "bar" not in registry.options
    assert "b" not in registry.options
    assert registry.options.names() == ["foo"]


def test_alias_repeating_own_name():
    registry = SpecRegistry()
    with pytest.raises(DuplicateAliasError):
        registry.add_opt("foo", alias="foo")
    with pytest.raises(DuplicateAliasError):
        registry.add_opt("bar", alias=["b", "b"])
    assert len(registry.options) == 0


def test_duplicate_alias_is_duplicate_name():
    assert issubclass(DuplicateAliasError, DuplicateNameError)


def test_duplicate_argument_name_and_alias():
    registry = SpecRegistry()
    registry.add_arg("sort", handler, alias="s")
    with pytest.raises(DuplicateNameError):
        registry.add_arg("sort", handler)
    with pytest.raises(DuplicateNameError):
        registry.add_arg("s", handler)
    with pytest.raises(DuplicateAliasError):
        registry.add_arg("shuffle", handler, alias="s")
    assert registry.arguments.names() == ["sort"]


def test_options_and_arguments_are_separate_namespaces():
    registry = SpecRegistry()
    registry.add_opt("sort", alias="s")
    registry.add_arg("sort", handler, alias="s")
    assert registry.options.canonical("s") == "sort"
    assert registry.arguments.canonical("s") == "sort"


@pytest.mark.parametrize("prop", ["required", "nargs", "handler", "is_list"])
def test_invalid_option_property(prop):
    registry = SpecRegistry()
    with pytest.raises(InvalidPropertyError, match=prop):
        registry.add_opt("foo", **{prop: True})
    assert "foo" not in registry.options


@pytest.mark.parametrize(
    "config",
    [
        {"bool": True, "check": "number"},
        {"bool": True, "transform": lambda consumer, value: value},
        {"bool": True, "list": True},
    ],
)
def test_conflicting_option_properties(config):
    registry = SpecRegistry()
    with pytest.raises(ConflictingPropertyError):
        registry.add_opt("foo", **config)


@pytest.mark.parametrize("default", [[1, 2], ("a",), {"a": 1}, {"a"}])
def test_collection_default_must_be_wrapped(default):
    registry = SpecRegistry()
    with pytest.raises(InvalidDefaultError):
        registry.add_opt("foo", default=default)


@pytest.mark.parametrize("default", ["x", 0, 1.5, None, True, lambda: [1, 2]])
def test_accepted_defaults(default):
    registry = SpecRegistry()
    spec = registry.add_opt("foo", default=default)
    assert spec.has_default
    assert spec.default is default


def test_no_default_declared():
    registry = SpecRegistry()
    assert not registry.add_opt("foo").has_default


@pytest.mark.parametrize("check", ["bogus", "\\d+", 5, ["file"]])
def test_invalid_check(check):
    registry = SpecRegistry()
    with pytest.raises(InvalidCheckError):
        registry.add_opt("foo", check=check)


@pytest.mark.parametrize(
    "check", [re.compile(r"^\d+$"), str.isdigit, "file", "dir", "number"]
)
def test_valid_check(check):
    registry = SpecRegistry()
    assert registry.add_opt("foo", check=check).check is check


def test_add_arg_requires_handler():
    registry = SpecRegistry()
    with pytest.raises(MissingHandlerError):
        registry.add_arg("foo")
    with pytest.raises(MissingHandlerError):
        registry.add_arg("foo", description="does nothing")
    assert "foo" not in registry.arguments


def test_add_arg_handler_keyword():
    registry = SpecRegistry()
    spec = registry.add_arg("foo", handler=handler, description="Foo it", alias="f")
    assert spec.handler is handler
    assert spec.description == "Foo it"
    assert registry.arguments.get("f") is spec


def test_invalid_argument_property():
    registry = SpecRegistry()
    with pytest.raises(InvalidPropertyError, match="list"):
        registry.add_arg("foo", handler, list=True)


def test_declaration_errors_chain_pydantic_error():
    registry = SpecRegistry()
    with pytest.raises(DeclarationError) as excinfo:
        registry.add_opt("foo", bogus=1)
    assert excinfo.value.__cause__ is not None


def test_describe_through_alias_updates_shared_spec():
    registry = SpecRegistry()
    registry.add_opt("verbose", alias="v")
    registry.add_arg("sort", handler, alias="s")

    assert registry.describe("opt", "v", "Be loud") == "Be loud"
    assert registry.options.get("verbose").description == "Be loud"
    assert registry.describe_arg("s", "Sort things") == "Sort things"
    assert registry.arguments.get("sort").description == "Sort things"


def test_describe_empty_text_keeps_description():
    registry = SpecRegistry()
    registry.add_opt("verbose", description="Be loud")
    assert registry.describe_opt("verbose") == "Be loud"
    assert registry.describe("option", "verbose", "") == "Be loud"


def test_describe_unknown_target():
    registry = SpecRegistry()
    registry.add_opt("sort")
    with pytest.raises(UnknownDescribeTargetError) as excinfo:
        registry.describe("arg", "sort", "Sort things")
    assert isinstance(excinfo.value, UnknownNameError)
    assert isinstance(excinfo.value, DeclarationError)
    assert excinfo.value.key == "sort"
    assert excinfo.value.kind == "argument"


def test_describe_invalid_kind():
    registry = SpecRegistry()
    with pytest.raises(ValueError):
        registry.describe("flag", "foo", "bar")


def test_registry_from_mappings():
    registry = SpecRegistry(
        options={"types": {"list": True, "alias": "t"}, "verbose": {"bool": True}},
        arguments={"sort": handler, "filter": {"handler": handler, "alias": "f"}},
    )
    assert registry.options.names() == ["types", "verbose"]
    assert registry.options.get("t").is_list
    assert registry.arguments.get("sort").handler is handler
    assert registry.arguments.canonical("f") == "filter"
