"""
ssosync Core - Shared building blocks.

Contains the data models, error taxonomy, configuration and logging
used by the commands and providers.
"""

from ssosync.core.config import SsoSyncConfig, load_config
from ssosync.core.errors import (
    CollaboratorError,
    CommandError,
    IntegrationNotFoundError,
    SelectionError,
    SsoSyncError,
    UnknownError,
    to_display_error,
)
from ssosync.core.logging import get_logger, setup_logging
from ssosync.core.models import Found, Integration, NotFound, SessionDiff

__all__ = [
    "SsoSyncConfig",
    "load_config",
    "CollaboratorError",
    "CommandError",
    "IntegrationNotFoundError",
    "SelectionError",
    "SsoSyncError",
    "UnknownError",
    "to_display_error",
    "get_logger",
    "setup_logging",
    "Found",
    "Integration",
    "NotFound",
    "SessionDiff",
]
