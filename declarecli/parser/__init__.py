"""
Declare CLI

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import ArgumentSpec
from .declarative_parser import DeclarativeParser
from .option import NO_DESCRIPTION, OptionSpec
from .parser_types import ParseResult, TokenKind
from .registry import SpecRegistry, SpecTable

__all__ = [
    "ArgumentSpec",
    "DeclarativeParser",
    "NO_DESCRIPTION",
    "OptionSpec",
    "ParseResult",
    "SpecRegistry",
    "SpecTable",
    "TokenKind",
]
