"""CLI command implementations for the corpus application.

This package contains subcommands for the corpus CLI, including:
- validate: Validate a corpus file
"""

from corpus.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
