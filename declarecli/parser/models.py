# Declare CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Declaration models for options and arguments.

`RawOption` and `RawArgument` validate the keyword configuration handed to
`SpecRegistry.add_opt()` / `add_arg()`. Unknown keys are rejected by
`extra="forbid"`; combination rules raise `PydanticCustomError` with a stable
error type so the registry can translate them into the engine's own
declaration errors via `declaration_error()`.
"""
from __future__ import annotations

import re
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from declarecli.exceptions import (
    ConflictingPropertyError,
    DeclarationError,
    InvalidCheckError,
    InvalidDefaultError,
    InvalidPropertyError,
    MissingHandlerError,
)
from declarecli.parser.option import CHECK_KEYWORDS, NO_DESCRIPTION
from declarecli.utils import is_collection

ERROR_TYPES: dict[str, type[DeclarationError]] = {
    "extra_forbidden": InvalidPropertyError,
    "conflicting_property": ConflictingPropertyError,
    "invalid_default": InvalidDefaultError,
    "invalid_check": InvalidCheckError,
    "missing_handler": MissingHandlerError,
}


def normalize_aliases(alias: str | list[str] | None) -> tuple[str, ...]:
    if alias is None:
        return ()
    if isinstance(alias, str):
        return (alias,)
    return tuple(alias)


def coerce_description(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


class RawOption(BaseModel):
    """Raw option declaration."""

    model_config = ConfigDict(extra="forbid")

    alias: str | list[str] | None = None
    is_list: bool = Field(default=False, alias="list")
    is_bool: bool = Field(default=False, alias="bool")
    default: Any = None
    check: Any = None
    transform: Callable[..., Any] | None = None
    description: str | None = None
    trigger: Callable[..., Any] | None = None

    @field_validator("is_list", "is_bool", mode="before")
    @classmethod
    def validate_flag(cls, value: Any) -> bool:
        return bool(value)

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, value: Any) -> str | None:
        return coerce_description(value)

    @field_validator("default")
    @classmethod
    def validate_default(cls, value: Any) -> Any:
        if is_collection(value):
            raise PydanticCustomError(
                "invalid_default",
                "Collections cannot be used in default, wrap them in a callable.",
            )
        return value

    @field_validator("check")
    @classmethod
    def validate_check(cls, value: Any) -> Any:
        if value is None or isinstance(value, re.Pattern) or callable(value):
            return value
        if isinstance(value, str) and value in CHECK_KEYWORDS:
            return value
        raise PydanticCustomError(
            "invalid_check",
            "'{check}' is not a valid value for 'check'",
            {"check": str(value)},
        )

    @model_validator(mode="after")
    def validate_combinations(self) -> RawOption:
        if self.is_bool and self.check is not None:
            raise PydanticCustomError(
                "conflicting_property", "'check' cannot be used with 'bool'"
            )
        if self.is_bool and self.transform is not None:
            raise PydanticCustomError(
                "conflicting_property", "'transform' cannot be used with 'bool'"
            )
        if self.is_bool and self.is_list:
            raise PydanticCustomError(
                "conflicting_property",
                "opt properties 'list' and 'bool' are mutually exclusive",
            )
        return self

    @property
    def aliases(self) -> tuple[str, ...]:
        return normalize_aliases(self.alias)

    @property
    def has_default(self) -> bool:
        return "default" in self.model_fields_set

    def get_description(self) -> str:
        return self.description or NO_DESCRIPTION


class RawArgument(BaseModel):
    """Raw argument (sub-command) declaration."""

    model_config = ConfigDict(extra="forbid")

    alias: str | list[str] | None = None
    description: str | None = None
    handler: Callable[..., Any] | None = None

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, value: Any) -> str | None:
        return coerce_description(value)

    @model_validator(mode="after")
    def validate_handler(self) -> RawArgument:
        if self.handler is None:
            raise PydanticCustomError("missing_handler", "You must provide a handler")
        return self

    @property
    def aliases(self) -> tuple[str, ...]:
        return normalize_aliases(self.alias)

    def get_description(self) -> str:
        return self.description or NO_DESCRIPTION


def declaration_error(
    kind: str, name: str, error: PydanticValidationError
) -> DeclarationError:
    """Translate a pydantic validation failure into a declaration error."""
    details = error.errors()
    for error_type, exception_type in ERROR_TYPES.items():
        for detail in details:
            if detail["type"] != error_type:
                continue
            if error_type == "extra_forbidden":
                prop = detail["loc"][0] if detail["loc"] else "?"
                return exception_type(f"invalid {kind} property: '{prop}'")
            return exception_type(f"{kind} '{name}': {detail['msg']}")
    messages = "; ".join(
        f"{'.'.join(str(part) for part in detail['loc'])}: {detail['msg']}"
        for detail in details
    )
    return InvalidPropertyError(f"{kind} '{name}': {messages}")
