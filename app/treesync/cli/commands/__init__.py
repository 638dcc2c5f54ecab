"""CLI commands for treesync.

This package contains all subcommand implementations.
"""

from treesync.cli.commands import config, gerrit, tree

__all__ = ["config", "gerrit", "tree"]
