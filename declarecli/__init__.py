"""
Declare CLI

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .parser import DeclarativeParser, SpecRegistry
from .version import __version__

__all__ = [
    "DeclarativeParser",
    "SpecRegistry",
    "__version__",
]
