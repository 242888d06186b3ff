"""CLI command implementations for the carcass application.

This package contains subcommands for the carcass CLI, including:
- validate: Validate a design document
"""

from carcass.cli.commands.validate import validate_command

__all__ = ["validate_command"]
