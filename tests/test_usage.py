from io import StringIO

from rich.console import Console

from declarecli.parser import NO_DESCRIPTION, DeclarativeParser
from declarecli.parser.usage import render_usage, sorted_specs


def noop(consumer, name, opts, *rest):
    return None


def build_parser():
    parser = DeclarativeParser()
    parser.add_opt("gamma")
    parser.add_opt("beta", bool=True, alias=["b", "bb"], description="Beta flag")
    parser.add_opt("alpha", list=True, description="Alpha values")
    parser.add_arg("sort", noop, alias=["s", "order"], description="Sort things")
    parser.add_arg("filter", noop)
    return parser


def test_usage_blocks():
    usage = build_parser().usage()
    assert usage == (
        "Options:\n"
        "    -alpha XXX,...    Alpha values\n"
        "    -beta             Beta flag\n"
        "    -gamma XXX        No Description.\n"
        "\n"
        "Arguments:\n"
        "    filter    No Description.\n"
        "    sort      Sort things\n"
    )


def test_usage_lists_each_canonical_name_once():
    usage = build_parser().usage()
    lines = usage.splitlines()
    assert sum("-beta" in line for line in lines) == 1
    assert sum("sort" in line for line in lines) == 1
    assert not any(line.strip().startswith(("-bb", "order", "s ")) for line in lines)


def test_usage_descriptions_never_blank():
    parser = DeclarativeParser()
    parser.add_opt("x", description="")
    parser.add_arg("y", noop)
    assert render_usage(parser.registry).count(NO_DESCRIPTION) == 2


def test_usage_follows_describe():
    parser = build_parser()
    parser.describe_opt("bb", "Renamed")
    assert "    -beta             Renamed\n" in parser.usage()


def test_empty_usage():
    assert DeclarativeParser().usage() == "Options:\n\n\nArguments:\n\n"


def test_render_usage_prints_plain_text():
    output = StringIO()
    console = Console(file=output, width=120, color_system=None)
    parser = build_parser()

    parser.render_usage(console)

    assert output.getvalue().rstrip("\n") == parser.usage().rstrip("\n")


def test_render_usage_uses_parser_console():
    output = StringIO()
    parser = DeclarativeParser(console=Console(file=output, color_system=None))
    parser.add_opt("[bold]odd")
    parser.render_usage()
    assert "-[bold]odd" in output.getvalue()


def test_sorted_specs_orders_canonical_names():
    registry = build_parser().registry
    assert [spec.name for spec in sorted_specs(registry.options)] == [
        "alpha",
        "beta",
        "gamma",
    ]
    assert [spec.name for spec in sorted_specs(registry.arguments)] == ["filter", "sort"]
