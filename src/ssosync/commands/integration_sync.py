"""
Integration sync command.

Resolves one AWS SSO integration, reconciles its sessions through the
session synchronizer, reports the diff and asks running processes to
refresh their session lists.
"""

from __future__ import annotations

from typing import Any, Callable

import click

from ssosync.core.errors import (
    IntegrationNotFoundError,
    SelectionError,
    to_display_error,
)
from ssosync.core.logging import SyncRunLogger, get_logger
from ssosync.core.models import (
    Found,
    Integration,
    LookupResult,
    NotFound,
    SelectionPrompt,
    SyncState,
)
from ssosync.providers.base import CliProvider

logger = get_logger(__name__)


class SyncCommand:
    """Synchronize the sessions of a single integration."""

    def __init__(
        self,
        provider: CliProvider,
        log: Callable[[str], Any] | None = None,
        prompt_message: str = "select an integration",
    ) -> None:
        self.provider = provider
        self.log = log or click.echo
        self.prompt_message = prompt_message
        self.state = SyncState.START

    async def run(self, integration_id: str | None = None) -> None:
        """
        Resolve the target integration and sync it.

        An absent or empty id falls back to interactive selection. Every
        failure is re-raised as a CommandError.
        """
        self.state = SyncState.START
        try:
            self._transition(SyncState.RESOLVING, integration_id=integration_id or None)
            if integration_id:
                integration = await self._resolve_by_id(integration_id)
            else:
                integration = await self.select_integration()
            self._transition(SyncState.RESOLVED, integration_id=integration.id)

            await self.sync(integration)
        except Exception as e:
            self._transition(SyncState.FAILED, error=str(e) or type(e).__name__)
            raise to_display_error(e)

        self._transition(SyncState.DONE)

    async def lookup_integration(self, integration_id: str) -> LookupResult:
        """Look an integration up in the directory."""
        integration = await self.provider.integration_directory.get_integration(integration_id)
        if integration is None:
            return NotFound(integration_id)
        return Found(integration)

    async def select_integration(self) -> Integration:
        """Let the user pick one of the online integrations."""
        integrations = await self.provider.integration_directory.get_online_integrations()
        if not integrations:
            raise SelectionError()

        prompt = SelectionPrompt.for_integrations(list(integrations), self.prompt_message)
        answer = await self.provider.selector.prompt(prompt)
        return answer[prompt.name]

    async def sync(self, integration: Integration) -> None:
        """Reconcile sessions, report the counts and notify listeners."""
        with SyncRunLogger(integration.id, logger) as run_log:
            self._transition(SyncState.SYNCING, integration_id=integration.id)
            diff = await self.provider.synchronizer.sync_sessions(integration.id)

            self.log(f"{len(diff.sessions_to_add)} sessions added")
            self.log(f"{len(diff.sessions_to_delete)} sessions removed")
            run_log.record_diff(diff)

            self._transition(SyncState.NOTIFYING, integration_id=integration.id)
            await self.provider.notifier.refresh_sessions()

    async def _resolve_by_id(self, integration_id: str) -> Integration:
        result = await self.lookup_integration(integration_id)
        if isinstance(result, NotFound):
            raise IntegrationNotFoundError(result.integration_id)
        return result.integration

    def _transition(self, state: SyncState, **context: Any) -> None:
        logger.debug("Sync state changed", previous=self.state.name, state=state.name, **context)
        self.state = state
