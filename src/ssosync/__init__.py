"""
ssosync - Session synchronization for AWS SSO integrations.

Reconciles the locally known sessions of an SSO integration with the
sessions currently available online and asks running processes to
refresh their session views.
"""

__version__ = "1.0.0"
__author__ = "ssosync Team"

from ssosync.core.config import SsoSyncConfig
from ssosync.commands.integration_sync import SyncCommand

__all__ = ["SsoSyncConfig", "SyncCommand", "__version__"]
