# Declare CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Shortest-unambiguous-prefix name resolution shared by options and arguments.

Resolution order:
1. An exact name or alias wins immediately, even if it prefixes other names.
2. Otherwise every canonical name whose name or alias starts with the token
   is a candidate (a spec reached through several aliases counts once).
3. An empty token matches nothing. No candidate raises `UnknownNameError`, more than one raises
   `AmbiguousNameError` with the sorted candidates.
"""
from difflib import get_close_matches

from declarecli.exceptions import AmbiguousNameError, UnknownNameError
from declarecli.logger import logger
from declarecli.parser.registry import SpecTable


def prefix_matches(table: SpecTable, key: str) -> list[str]:
    """Return the sorted canonical names reachable through a prefix of `key`."""
    return sorted(
        {name for lookup, name in table.lookup_keys().items() if lookup.startswith(key)}
    )


def resolve_name(table: SpecTable, key: str) -> str:
    """Resolve a full or partial name against one namespace."""
    if not key:
        raise UnknownNameError(key, table.kind)

    name = table.canonical(key)
    if name is not None:
        logger.debug("Resolved %s '%s' -> '%s' (exact)", table.kind, key, name)
        return name

    matches = prefix_matches(table, key)
    if not matches:
        suggestions = get_close_matches(key, list(table.lookup_keys()), n=3, cutoff=0.7)
        raise UnknownNameError(key, table.kind, suggestions)
    if len(matches) > 1:
        raise AmbiguousNameError(key, matches, table.kind)

    logger.debug("Resolved %s '%s' -> '%s' (prefix)", table.kind, key, matches[0])
    return matches[0]
