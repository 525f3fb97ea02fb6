# Declare CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Holds the declared options and arguments of a command-line program.

`SpecRegistry` owns two independent namespaces, one for options and one for
arguments (sub-commands). Each namespace is a `SpecTable`: canonical names map
to a single owned spec and aliases map to the canonical name, so an update made
through any alias is seen through every other key.

Declarations are validated up front and a failing declaration leaves the
registry untouched.

Example Usage:
    registry = SpecRegistry()
    registry.add_opt("types", list=True, alias="t", default=lambda: ["txt"])
    registry.add_opt("verbose", bool=True)
    registry.add_arg("sort", lambda consumer, name, opts, *rest: sorted(rest))
    registry.describe("arg", "sort", "Sort the remaining arguments")
"""
from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, Mapping, TypeVar

from pydantic import ValidationError as PydanticValidationError

from declarecli.exceptions import (
    DuplicateAliasError,
    DuplicateNameError,
    UnknownDescribeTargetError,
)
from declarecli.logger import logger
from declarecli.parser.argument import ArgumentSpec
from declarecli.parser.models import RawArgument, RawOption, declaration_error
from declarecli.parser.option import OptionSpec

SpecT = TypeVar("SpecT", OptionSpec, ArgumentSpec)

KINDS = {
    "opt": "option",
    "option": "option",
    "arg": "argument",
    "argument": "argument",
}


class SpecTable(Generic[SpecT]):
    """
    One namespace of specs: canonical name -> spec, alias -> canonical name.

    Specs are kept in declaration order.
    """

    def __init__(self, kind: str) -> None:
        self.kind: str = kind
        self._specs: dict[str, SpecT] = {}
        self._aliases: dict[str, str] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._specs or key in self._aliases

    def __iter__(self) -> Iterator[SpecT]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    def canonical(self, key: str) -> str | None:
        """Return the canonical name for a name or alias, or None."""
        if key in self._specs:
            return key
        return self._aliases.get(key)

    def get(self, key: str) -> SpecT | None:
        name = self.canonical(key)
        if name is None:
            return None
        return self._specs[name]

    def names(self) -> list[str]:
        return list(self._specs)

    def lookup_keys(self) -> dict[str, str]:
        """Every lookup key (names and aliases) mapped to its canonical name."""
        keys = {name: name for name in self._specs}
        keys.update(self._aliases)
        return keys

    def as_dict(self) -> dict[str, SpecT]:
        return dict(self._specs)

    def register(self, spec: SpecT) -> None:
        if spec.name in self:
            raise DuplicateNameError(f"{self.kind} '{spec.name}' already defined")
        seen = {spec.name}
        for alias in spec.aliases:
            if alias in self or alias in seen:
                raise DuplicateAliasError(
                    f"Cannot use alias '{alias}', name is already taken by "
                    f"another {self.kind}."
                )
            seen.add(alias)

        self._specs[spec.name] = spec
        for alias in spec.aliases:
            self._aliases[alias] = spec.name


class SpecRegistry:
    """
    Registry of option and argument specs.

    Options and arguments live in separate namespaces, so an option and an
    argument may share a name.
    """

    def __init__(
        self,
        options: Mapping[str, Mapping[str, Any]] | None = None,
        arguments: Mapping[str, Mapping[str, Any] | Callable[..., Any]] | None = None,
    ) -> None:
        self.options: SpecTable[OptionSpec] = SpecTable("option")
        self.arguments: SpecTable[ArgumentSpec] = SpecTable("argument")
        for name, config in (options or {}).items():
            self.add_opt(name, **config)
        for name, arg_config in (arguments or {}).items():
            if callable(arg_config):
                self.add_arg(name, arg_config)
            else:
                self.add_arg(name, **arg_config)

    def add_opt(self, name: str, **config: Any) -> OptionSpec:
        """
        Declare an option.

        Accepted properties: alias, list, bool, default, check, transform,
        description, trigger.

        Raises:
            DuplicateNameError / DuplicateAliasError: On a name collision.
            InvalidPropertyError: On an unrecognized property.
            ConflictingPropertyError: If `bool` is combined with `check`,
                `transform` or `list`.
            InvalidDefaultError: If `default` is a collection not wrapped
                in a callable.
            InvalidCheckError: If `check` is not a regex, callable or keyword.
        """
        if name in self.options:
            raise DuplicateNameError(f"option '{name}' already defined")
        try:
            raw = RawOption.model_validate(config)
        except PydanticValidationError as error:
            raise declaration_error("option", name, error) from error

        spec = OptionSpec(
            name=name,
            aliases=raw.aliases,
            is_bool=raw.is_bool,
            is_list=raw.is_list,
            default=raw.default,
            has_default=raw.has_default,
            description=raw.get_description(),
            check=raw.check,
            transform=raw.transform,
            trigger=raw.trigger,
        )
        self.options.register(spec)
        logger.debug("Registered option '%s' (aliases: %s)", name, spec.aliases)
        return spec

    def add_arg(
        self, name: str, handler: Callable[..., Any] | None = None, **config: Any
    ) -> ArgumentSpec:
        """
        Declare an argument (sub-command).

        The handler may be passed positionally or as `handler=`. Other accepted
        properties: alias, description.

        Raises:
            DuplicateNameError / DuplicateAliasError: On a name collision.
            InvalidPropertyError: On an unrecognized property.
            MissingHandlerError: If no handler is given.
        """
        if name in self.arguments:
            raise DuplicateNameError(f"argument '{name}' already defined")
        try:
            raw = RawArgument.model_validate({"handler": handler, **config})
        except PydanticValidationError as error:
            raise declaration_error("argument", name, error) from error

        assert raw.handler is not None
        spec = ArgumentSpec(
            name=name,
            handler=raw.handler,
            aliases=raw.aliases,
            description=raw.get_description(),
        )
        self.arguments.register(spec)
        logger.debug("Registered argument '%s' (aliases: %s)", name, spec.aliases)
        return spec

    def table(self, kind: str) -> SpecTable:
        try:
            return self.options if KINDS[kind] == "option" else self.arguments
        except KeyError:
            raise ValueError(
                f"Invalid kind '{kind}', expected one of {', '.join(KINDS)}"
            ) from None

    def describe(self, kind: str, name: str, text: str | None = None) -> str:
        """
        Set the description of a declared option or argument.

        Empty text leaves the description unchanged. Returns the current
        description.

        Raises:
            UnknownDescribeTargetError: If `name` is not declared under `kind`.
        """
        table = self.table(kind)
        spec = table.get(name)
        if spec is None:
            raise UnknownDescribeTargetError(name, table.kind)
        if text:
            spec.description = text
        return spec.description

    def describe_opt(self, name: str, text: str | None = None) -> str:
        return self.describe("opt", name, text)

    def describe_arg(self, name: str, text: str | None = None) -> str:
        return self.describe("arg", name, text)
