# Declare CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Declare CLI."""
import logging

logger = logging.getLogger("declarecli")
