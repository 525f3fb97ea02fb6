# Declare CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `OptionSpec` dataclass held by `SpecRegistry` for every declared
option, along with the check rule kinds it understands.

An option is a named flag parsed from tokens shaped like `-name`,
`--name` or `-name=value`. Its flags decide how a value is collected:

- `is_bool`: bare presence sets truth (or negates a truthy static default)
- `is_list`: values accumulate, comma separated or repeated
- otherwise: a single scalar, the last occurrence wins

Hooks:
- `transform(consumer, value)`: per-value mapping applied before validation
- `check`: regex, free function, or one of "file", "dir", "number"
- `trigger(consumer, name, value, options)`: called once the final value is known
"""
import re
from dataclasses import dataclass, field
from typing import Any, Callable

NO_DESCRIPTION = "No Description."

CHECK_KEYWORDS = ("file", "dir", "number")


def check_kind(check: Any) -> str:
    """Return the rule kind name used in validation reports."""
    if isinstance(check, re.Pattern):
        return "regex"
    if callable(check):
        return "function"
    return str(check)


@dataclass
class OptionSpec:
    """
    Represents a declared command-line option.

    Attributes:
        name (str): Canonical name of the option.
        aliases (tuple[str, ...]): Extra lookup keys for the same option.
        is_bool (bool): True if the option is a boolean flag.
        is_list (bool): True if the option accumulates a list of values.
        default (Any): Static default or zero-argument callable producing one.
        has_default (bool): True if a default was declared (even a falsy one).
        description (str): Help text shown in usage.
        check (Any): Validation rule, or None.
        transform (Callable | None): Per-value transform bound to the consumer.
        trigger (Callable | None): Hook bound to the consumer, run with the final value.
    """

    name: str
    aliases: tuple[str, ...] = ()
    is_bool: bool = False
    is_list: bool = False
    default: Any = None
    has_default: bool = False
    description: str = NO_DESCRIPTION
    check: Any = None
    transform: Callable[..., Any] | None = None
    trigger: Callable[..., Any] | None = None
    keys: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.keys = (self.name, *self.aliases)

    def resolve_default(self) -> Any:
        """Return the default value, invoking it if it is a callable."""
        if callable(self.default):
            return self.default()
        return self.default

    def flag_value(self) -> bool:
        """
        Value for a bare boolean flag. A truthy static default is negated;
        callable defaults are never inspected.
        """
        if self.has_default and not callable(self.default) and self.default:
            return False
        return True

    def get_value_text(self) -> str:
        """Placeholder shown after the option name in usage."""
        if self.is_bool:
            return ""
        if self.is_list:
            return "XXX,..."
        return "XXX"
