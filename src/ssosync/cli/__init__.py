"""
ssosync CLI Module.

Provides command-line interface for ssosync operations.
"""

from ssosync.cli.main import main, cli

__all__ = ["main", "cli"]
