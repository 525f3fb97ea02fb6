# Declare CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Declare CLI applications."""
from rich.console import Console

console = Console()
