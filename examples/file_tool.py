import os
import re
import sys

from declarecli import DeclarativeParser
from declarecli.console import console
from declarecli.exceptions import DeclareCLIError
from declarecli.utils import setup_logging

setup_logging()

EXTENSION = re.compile(r"\.(\w{3,4})$")


class FileTool:
    def __init__(self) -> None:
        self.opts: dict = {}

    def set_opts(self, opts: dict) -> None:
        self.opts = opts


def filter_files(tool: FileTool, name: str, opts: dict, *files: str) -> list[str]:
    types = set(opts["types"])
    kept = []
    for path in files:
        match = EXTENSION.search(path)
        if match and match.group(1) in types:
            kept.append(path)
    return kept


def sort_files(tool: FileTool, name: str, opts: dict, *files: str) -> list[str]:
    return sorted(files)


def show_help(tool: FileTool, name: str, opts: dict, *files: str) -> list[str]:
    return [f"Usage: {sys.argv[0]} [OPTS] [COMMAND] [FILES]\n", parser.usage()]


parser = DeclarativeParser()
parser.add_opt("enable-X", bool=True, description="Include X")
parser.add_opt(
    "config",
    default=os.path.expanduser("~/.config/file_tool.conf"),
    description="the config file",
)
parser.add_opt(
    "types",
    list=True,
    default=lambda: ["txt", "rtf", "doc"],
    check=re.compile(r"^\w+$"),
    description="File types on which to act",
)

parser.add_arg("filter", filter_files)
parser.describe_arg("filter", "Filters args to only show those specified in types")
parser.add_arg("sort", sort_files, description="sort args")
parser.add_arg("help", show_help, alias="usage")


if __name__ == "__main__":
    try:
        results = parser.handle(FileTool(), sys.argv[1:])
    except DeclareCLIError as error:
        console.print(f"[red]❌ {error}[/]")
        sys.exit(1)
    if isinstance(results, dict):
        parser.render_usage()
    else:
        console.print("\n".join(results), markup=False)
