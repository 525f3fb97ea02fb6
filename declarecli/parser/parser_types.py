# Declare CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result and token models shared by the scanner, the value pipeline and
`DeclarativeParser`.

Contents:
- `TokenKind`: classification of a raw command-line token.
- `ParseResult`: option map plus positional tokens, unpackable as a tuple.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, NamedTuple


class TokenKind(Enum):
    """How the scanner treats a single token."""

    OPTION = "option"
    SEPARATOR = "separator"
    POSITIONAL = "positional"


class ParseResult(NamedTuple):
    """Options keyed by canonical name and the ordered positional tokens."""

    options: dict[str, Any]
    positionals: list[str]
