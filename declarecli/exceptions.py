# Declare CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by the Declare CLI engine.

Declaration errors are raised by `SpecRegistry.add_opt()`, `add_arg()` and
`describe()` as soon as a malformed or colliding spec is declared. Resolution,
parse and validation errors are raised while a token stream is processed and
abort the whole invocation.

All exceptions inherit from `DeclareCLIError`, the base exception for the engine.

Exception Hierarchy:
- DeclareCLIError
    ├── DeclarationError
    │   ├── DuplicateNameError
    │   │   └── DuplicateAliasError
    │   ├── InvalidPropertyError
    │   ├── ConflictingPropertyError
    │   ├── InvalidDefaultError
    │   ├── InvalidCheckError
    │   ├── MissingHandlerError
    │   └── UnknownDescribeTargetError (also an UnknownNameError)
    ├── ResolutionError
    │   ├── UnknownNameError
    │   └── AmbiguousNameError
    ├── ParseError
    │   └── MissingValueError
    └── ValidationError

The engine never prints these or exits the process; the calling entry point
decides how to report them.
"""
from typing import Any, Sequence


class DeclareCLIError(Exception):
    """Base exception for the Declare CLI engine."""


class DeclarationError(DeclareCLIError):
    """Exception raised when an option or argument declaration is invalid."""


class DuplicateNameError(DeclarationError):
    """Exception raised when a name is already taken in its namespace."""


class DuplicateAliasError(DuplicateNameError):
    """Exception raised when an alias is already taken in its namespace."""


class InvalidPropertyError(DeclarationError):
    """Exception raised when a declaration uses an unrecognized property."""


class ConflictingPropertyError(DeclarationError):
    """Exception raised when declared properties cannot be combined."""


class InvalidDefaultError(DeclarationError):
    """Exception raised when a default is a collection not wrapped in a callable."""


class InvalidCheckError(DeclarationError):
    """Exception raised when a check is not a regex, a callable or a known keyword."""


class MissingHandlerError(DeclarationError):
    """Exception raised when an argument is declared without a handler."""


class ResolutionError(DeclareCLIError):
    """Exception raised when a token cannot be resolved to a single name."""


class UnknownNameError(ResolutionError):
    """Exception raised when a token matches no registered name or alias."""

    def __init__(
        self,
        key: str,
        kind: str = "option",
        suggestions: Sequence[str] | None = None,
        message: str | None = None,
    ) -> None:
        self.key = key
        self.kind = kind
        self.suggestions = list(suggestions or [])
        if message is None:
            message = f"unknown {kind} '{key}'"
            if self.suggestions:
                message += f". Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)


class UnknownDescribeTargetError(DeclarationError, UnknownNameError):
    """Exception raised when `describe()` references an undeclared name."""

    def __init__(self, key: str, kind: str = "option") -> None:
        UnknownNameError.__init__(self, key, kind, message=f"No such {kind} '{key}'")


class AmbiguousNameError(ResolutionError):
    """Exception raised when a partial token matches more than one canonical name."""

    def __init__(self, key: str, candidates: Sequence[str], kind: str = "option") -> None:
        self.key = key
        self.kind = kind
        self.candidates = sorted(candidates)
        super().__init__(
            f"partial {kind} '{key}' is ambiguous, could be: "
            f"{', '.join(self.candidates)}"
        )


class ParseError(DeclareCLIError):
    """Exception raised when the token stream cannot be scanned."""


class MissingValueError(ParseError):
    """Exception raised when an option expects a value but the tokens ran out."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"option '{option}' requires a value")


class ValidationError(DeclareCLIError):
    """Exception raised when one or more option values fail their check."""

    def __init__(self, option: str, rule: str, values: Sequence[Any]) -> None:
        self.option = option
        self.rule = rule
        self.values = list(values)
        super().__init__(
            f"Validation Failed for '{option}={rule}': "
            f"{', '.join(str(value) for value in self.values)}"
        )
