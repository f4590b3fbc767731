"""CLI command implementations for the toterack application.

This package contains subcommands for the toterack CLI, including:
- validate: Validate a configuration file
- templates: Manage quote configuration templates
"""

from toterack.cli.commands.validate import display_load_error, validate_command
from toterack.cli.commands.templates import templates_app

__all__ = ["display_load_error", "templates_app", "validate_command"]
