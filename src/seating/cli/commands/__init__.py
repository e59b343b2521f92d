"""CLI command implementations for the seating application.

This package contains subcommands for the seating CLI, including:
- validate: Validate a stored configuration file
"""

from seating.cli.commands.validate import validate_command

__all__ = ["validate_command"]
