# Declare CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value pipeline turning raw scanned option values into final values.

Stages, per option, in declaration order:
1. defaults: declared options missing from the command line get their default
   (callables are invoked, literals used as-is)
2. every value is handled as a list internally
3. transform: `transform(consumer, value)` per element
4. check: all failing elements are reported in one `ValidationError`
5. values that started as scalars on non-list options are flattened back
6. trigger: `trigger(consumer, name, value, options)` where `options` holds the
   values finalized so far in this pass

`transform`, `check` and `trigger` can be switched off, which is how
`DeclarativeParser.preparse()` produces its partial map.
"""
from __future__ import annotations

from typing import Any, Mapping

from declarecli.logger import logger
from declarecli.parser.checks import validate
from declarecli.parser.option import OptionSpec
from declarecli.parser.registry import SpecRegistry


def apply_defaults(registry: SpecRegistry, raw: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of `raw` completed with the declared defaults."""
    options = dict(raw)
    for spec in registry.options:
        if spec.name in options or not spec.has_default:
            continue
        options[spec.name] = spec.resolve_default()
        logger.debug("Option '%s' defaulted to %r", spec.name, options[spec.name])
    return options


def finalize_value(
    consumer: Any,
    spec: OptionSpec,
    value: Any,
    transform: bool = True,
    check: bool = True,
) -> Any:
    is_list = isinstance(value, (list, tuple))
    values = list(value) if is_list else [value]

    if transform and spec.transform is not None:
        values = [spec.transform(consumer, item) for item in values]

    if check:
        validate(spec, values)

    if is_list or spec.is_list:
        return values
    return values[0]


def finalize_options(
    registry: SpecRegistry,
    raw: Mapping[str, Any],
    consumer: Any = None,
    transform: bool = True,
    check: bool = True,
    trigger: bool = True,
) -> dict[str, Any]:
    """
    Run the value pipeline over every declared option present in `raw` or
    carrying a default. Returns a new map; `raw` is never modified.
    """
    completed = apply_defaults(registry, raw)
    options: dict[str, Any] = {}
    for spec in registry.options:
        if spec.name not in completed:
            continue
        options[spec.name] = finalize_value(
            consumer, spec, completed[spec.name], transform=transform, check=check
        )
        if trigger and spec.trigger is not None:
            logger.debug("Triggering '%s' with %r", spec.name, options[spec.name])
            spec.trigger(consumer, spec.name, options[spec.name], options)
    return options
