"""
ssosync Commands.

Command implementations driven by the CLI.
"""

from ssosync.commands.integration_sync import SyncCommand

__all__ = ["SyncCommand"]
