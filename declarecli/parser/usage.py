# Declare CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""Plain fixed-width usage text for a `SpecRegistry`."""
from typing import Any

from declarecli.parser.registry import SpecRegistry, SpecTable


def sorted_specs(table: SpecTable) -> list[Any]:
    """One spec per canonical name, ordered by name."""
    return [table.get(name) for name in sorted(table.names())]


def get_options_text(registry: SpecRegistry) -> str:
    specs = sorted_specs(registry.options)
    width = max((len(spec.name) for spec in specs), default=0)
    return "\n".join(
        f"    -{spec.name:<{width}} {spec.get_value_text():<7}    {spec.description}"
        for spec in specs
    )


def get_arguments_text(registry: SpecRegistry) -> str:
    specs = sorted_specs(registry.arguments)
    width = max((len(spec.name) for spec in specs), default=0)
    return "\n".join(
        f"    {spec.name:<{width}}    {spec.description}" for spec in specs
    )


def render_usage(registry: SpecRegistry) -> str:
    """
    Render the options and arguments blocks, each sorted by canonical name
    with one line per spec regardless of its aliases.
    """
    return (
        "Options:\n"
        f"{get_options_text(registry)}\n"
        "\n"
        "Arguments:\n"
        f"{get_arguments_text(registry)}\n"
    )
