# Declare CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `DeclarativeParser`, the entry point of Declare CLI.

Callers declare named options and named arguments (sub-commands bound to a
handler); the parser turns a raw token stream into resolved option values and
dispatches the handler selected by the first positional token.

Key Features:
- Declarative option registration via `add_opt()` (boolean, list, default,
  transform, check and trigger support)
- Sub-command registration via `add_arg()`
- Shortest unambiguous prefix matching for option and argument names
- `--` to stop option processing
- Plain usage text generated from the declarations

Public Interface:
- `add_opt(...)` / `add_arg(...)` / `describe(...)`: Build the declarations.
- `preparse(tokens)`: Scan, default and check, no transform/trigger.
- `parse(consumer, tokens)`: Scan and run the full value pipeline.
- `run(consumer, options, positionals)`: Dispatch pre-parsed input.
- `handle(consumer, tokens)`: `parse()` followed by `run()`.
- `usage()` / `render_usage()`: Usage text, returned or printed.

Example Usage:
    parser = DeclarativeParser()
    parser.add_opt("types", list=True, default=lambda: ["txt", "rtf"])
    parser.add_opt("verbose", bool=True, alias="v")
    parser.add_arg("sort", lambda consumer, name, opts, *rest: sorted(rest))

    parser.handle(app, ["-v", "sort", "banana", "apple"])
    # ['apple', 'banana']

Consumer-bound hooks (`transform`, `trigger` and argument handlers) receive the
consumer object as their first parameter. When the consumer defines
`set_opts()`, it is called with the finalized options after a successful parse.
Errors are raised, never printed; the calling program decides how to report them.
"""
from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

from rich.console import Console

from declarecli.console import console as default_console
from declarecli.exceptions import UnknownNameError
from declarecli.logger import logger
from declarecli.parser.argument import ArgumentSpec
from declarecli.parser.option import OptionSpec
from declarecli.parser.parser_types import ParseResult
from declarecli.parser.pipeline import finalize_options
from declarecli.parser.registry import SpecRegistry
from declarecli.parser.scanner import scan_tokens
from declarecli.parser.usage import render_usage


class DeclarativeParser:
    """
    Declarative command-line parser.

    Holds a `SpecRegistry` for the lifetime of the program and runs the
    scan -> value pipeline -> dispatch flow once per token stream.
    """

    def __init__(
        self,
        options: Mapping[str, Mapping[str, Any]] | None = None,
        arguments: Mapping[str, Mapping[str, Any] | Callable[..., Any]] | None = None,
        console: Console | None = None,
    ) -> None:
        self.registry: SpecRegistry = SpecRegistry(options, arguments)
        self.console: Console = console or default_console

    def add_opt(self, name: str, **config: Any) -> OptionSpec:
        """Declare an option. See `SpecRegistry.add_opt()`."""
        return self.registry.add_opt(name, **config)

    def add_arg(
        self, name: str, handler: Callable[..., Any] | None = None, **config: Any
    ) -> ArgumentSpec:
        """Declare an argument. See `SpecRegistry.add_arg()`."""
        return self.registry.add_arg(name, handler, **config)

    def describe(self, kind: str, name: str, text: str | None = None) -> str:
        return self.registry.describe(kind, name, text)

    def describe_opt(self, name: str, text: str | None = None) -> str:
        return self.registry.describe_opt(name, text)

    def describe_arg(self, name: str, text: str | None = None) -> str:
        return self.registry.describe_arg(name, text)

    @property
    def options(self) -> dict[str, OptionSpec]:
        """Declared options keyed by canonical name."""
        return self.registry.options.as_dict()

    @property
    def arguments(self) -> dict[str, ArgumentSpec]:
        """Declared arguments keyed by canonical name."""
        return self.registry.arguments.as_dict()

    def get_option(self, name: str) -> OptionSpec | None:
        """Look up an option by name or alias."""
        return self.registry.options.get(name)

    def get_argument(self, name: str) -> ArgumentSpec | None:
        """Look up an argument by name or alias."""
        return self.registry.arguments.get(name)

    def preparse(self, tokens: Sequence[str] | None = None) -> ParseResult:
        """
        Scan `tokens`, fill in defaults and run checks without running any
        transform or trigger.

        Useful to read an option (a config path, say) before the hooks that
        depend on it run.
        """
        raw, positionals = scan_tokens(self.registry, tokens or [])
        options = finalize_options(self.registry, raw, transform=False, trigger=False)
        return ParseResult(options, positionals)

    def parse(self, consumer: Any, tokens: Sequence[str] | None = None) -> ParseResult:
        """
        Scan `tokens` and run the full value pipeline.

        Returns:
            ParseResult: Finalized options and positional tokens; the first
            positional, if any, is the canonical argument name.
        """
        raw, positionals = scan_tokens(self.registry, tokens or [])
        options = finalize_options(self.registry, raw, consumer)

        set_opts = getattr(consumer, "set_opts", None)
        if callable(set_opts):
            set_opts(options)
        return ParseResult(options, positionals)

    def run(
        self, consumer: Any, options: dict[str, Any], positionals: Sequence[str]
    ) -> Any:
        """
        Dispatch pre-parsed input.

        Without positionals the options map is returned. Otherwise the handler
        of the argument named by the first positional is called as
        `handler(consumer, name, options, *rest)` and its result returned.
        """
        if not positionals:
            return options

        key, *rest = positionals
        spec = self.registry.arguments.get(key)
        if spec is None:
            raise UnknownNameError(key, "argument")

        logger.debug(
            "Dispatching argument '%s' with %d positional(s)", spec.name, len(rest)
        )
        return spec.handler(consumer, spec.name, options, *rest)

    def handle(self, consumer: Any, tokens: Sequence[str] | None = None) -> Any:
        """Parse `tokens` and dispatch the selected argument."""
        options, positionals = self.parse(consumer, tokens)
        return self.run(consumer, options, positionals)

    def usage(self) -> str:
        """Return the usage text for every declared option and argument."""
        return render_usage(self.registry)

    def render_usage(self, console: Console | None = None) -> None:
        """Print the usage text through a Rich console."""
        (console or self.console).print(self.usage(), markup=False, highlight=False)

    def __str__(self) -> str:
        return (
            f"DeclarativeParser(options={len(self.registry.options)}, "
            f"arguments={len(self.registry.arguments)})"
        )

    def __repr__(self) -> str:
        return str(self)
