# Declare CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `ArgumentSpec` dataclass used for sub-commands.

An argument is selected by the first positional token on the command line
(after prefix resolution) and owns the handler invoked with the finalized
options and the remaining positional tokens.
"""
from dataclasses import dataclass, field
from typing import Any, Callable

from declarecli.parser.option import NO_DESCRIPTION


@dataclass
class ArgumentSpec:
    """
    Represents a declared sub-command.

    Attributes:
        name (str): Canonical name of the argument.
        handler (Callable): Called as `handler(consumer, name, options, *rest)`.
        aliases (tuple[str, ...]): Extra lookup keys for the same argument.
        description (str): Help text shown in usage.
    """

    name: str
    handler: Callable[..., Any]
    aliases: tuple[str, ...] = ()
    description: str = NO_DESCRIPTION
    keys: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.keys = (self.name, *self.aliases)
