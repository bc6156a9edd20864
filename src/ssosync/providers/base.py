"""
ssosync Provider Base.

Defines the abstract collaborator interfaces a command depends on.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ssosync.core.models import Integration, SelectionPrompt, SessionDiff


class IntegrationDirectory(ABC):
    """Lookup of configured AWS SSO integrations."""

    @abstractmethod
    async def get_integration(self, integration_id: str) -> Integration | None:
        """Get an integration by id, or None when it does not exist."""

    @abstractmethod
    async def get_online_integrations(self) -> list[Integration]:
        """Get the integrations that are currently logged in, in display order."""


class InteractiveSelector(ABC):
    """Asks the user to pick one entry from a list."""

    @abstractmethod
    async def prompt(self, prompt: SelectionPrompt) -> dict[str, Integration]:
        """
        Present a single-select list.

        Returns a mapping from ``prompt.name`` to the chosen value.
        """


class SessionSynchronizer(ABC):
    """Reconciles local sessions with the sessions available online."""

    @abstractmethod
    async def sync_sessions(self, integration_id: str) -> SessionDiff:
        """Synchronize one integration and return what changed."""


class Notifier(ABC):
    """Tells other running processes that session state changed."""

    @abstractmethod
    async def refresh_sessions(self) -> None:
        """Ask listeners to reload their session list."""


@dataclass
class CliProvider:
    """Bundle of collaborators handed to commands."""

    integration_directory: IntegrationDirectory
    selector: InteractiveSelector
    synchronizer: SessionSynchronizer
    notifier: Notifier
