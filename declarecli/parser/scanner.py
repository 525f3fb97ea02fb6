# Declare CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Single left-to-right pass over a token stream.

Each token is one of:
- an option token, `-name`, `--name` or `-name=value` (one or more dashes, a
  key without `-` or `=`, and an optional non-empty inline value)
- the literal separator `--`, after which no token is read as an option
- a positional token

The first positional token is resolved against the argument namespace and
stored under its canonical name; every later positional is kept verbatim.

Option values:
- boolean options take their inline value as-is, or `True` (`False` when the
  option has a truthy static default)
- other options take the inline value or consume the next token
- list options split the value on commas and accumulate across tokens
"""
from __future__ import annotations

import re
from typing import Any, Iterator, Sequence

from declarecli.exceptions import MissingValueError
from declarecli.logger import logger
from declarecli.parser.option import OptionSpec
from declarecli.parser.parser_types import ParseResult, TokenKind
from declarecli.parser.registry import SpecRegistry
from declarecli.parser.resolver import resolve_name

OPTION_TOKEN = re.compile(r"-+([^-=]+)(?:=(.+))?", re.DOTALL)
SEPARATOR = "--"


def classify_token(token: str, literals_only: bool = False) -> TokenKind:
    if token == SEPARATOR:
        return TokenKind.SEPARATOR
    if not literals_only and OPTION_TOKEN.fullmatch(token):
        return TokenKind.OPTION
    return TokenKind.POSITIONAL


def split_list(value: str) -> list[str]:
    """
    Split a list value on commas, trimming whitespace around each piece.

    Trailing empty pieces are dropped, so `"a,b,"` is `["a", "b"]`.
    """
    pieces = [piece.strip() for piece in value.split(",")]
    while pieces and not pieces[-1]:
        pieces.pop()
    return pieces


def extract_value(spec: OptionSpec, inline: str | None, stream: Iterator[str]) -> Any:
    """
    Extract the value carried by one occurrence of an option.

    `stream` is the iterator over the remaining tokens; non-boolean options
    without an inline value consume its next item.
    """
    if spec.is_bool:
        if inline is not None:
            return inline
        return spec.flag_value()

    if inline is None:
        try:
            inline = next(stream)
        except StopIteration:
            raise MissingValueError(spec.name) from None

    if spec.is_list:
        return split_list(inline)
    return inline


def scan_tokens(registry: SpecRegistry, tokens: Sequence[str]) -> ParseResult:
    """
    Split `tokens` into raw option values and positional tokens.

    List options map to lists, every other option holds its last value.
    Nothing is transformed, validated or defaulted here.
    """
    options: dict[str, Any] = {}
    positionals: list[str] = []
    literals_only = False

    stream = iter(tokens)
    for token in stream:
        kind = classify_token(token, literals_only)
        if kind is TokenKind.SEPARATOR:
            literals_only = True
            continue

        if kind is TokenKind.OPTION:
            match = OPTION_TOKEN.fullmatch(token)
            assert match is not None
            key, inline = match.group(1), match.group(2)
            name = resolve_name(registry.options, key)
            spec = registry.options.get(name)
            assert spec is not None
            value = extract_value(spec, inline, stream)
            if spec.is_list:
                options.setdefault(name, []).extend(value)
            else:
                options[name] = value
            logger.debug("Option '%s' <- %r", name, value)
        elif positionals:
            positionals.append(token)
        else:
            positionals.append(resolve_name(registry.arguments, token))

    return ParseResult(options, positionals)
