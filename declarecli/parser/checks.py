# Declare CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Check rule evaluation for option values.

Every value of an option is checked on its own and all failures are reported
together:

- regex: the value must match (`re.Pattern.search`, like an unanchored match)
- callable: `check(value)` must return something truthy
- "file": the value must name an existing regular file
- "dir": the value must name an existing directory
- "number": the value must contain nothing but digits
"""
import os
import re
from typing import Any, Sequence

from declarecli.exceptions import ValidationError
from declarecli.parser.option import OptionSpec, check_kind

NON_DIGIT = re.compile(r"\D")


def passes(check: Any, value: Any) -> bool:
    if isinstance(check, re.Pattern):
        return check.search(str(value)) is not None
    if callable(check):
        return bool(check(value))
    if check == "file":
        return os.path.isfile(str(value))
    if check == "dir":
        return os.path.isdir(str(value))
    if check == "number":
        return NON_DIGIT.search(str(value)) is None
    raise ValueError(f"Unsupported check rule: {check!r}")


def find_failures(check: Any, values: Sequence[Any]) -> list[Any]:
    """Return every value that fails `check`, in order."""
    return [value for value in values if not passes(check, value)]


def validate(spec: OptionSpec, values: Sequence[Any]) -> None:
    """Raise `ValidationError` if any value fails the option's check."""
    if spec.check is None:
        return
    bad = find_failures(spec.check, values)
    if bad:
        raise ValidationError(spec.name, check_kind(spec.check), bad)
