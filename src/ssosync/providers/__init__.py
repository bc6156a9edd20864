"""
ssosync Provider Layer.

Resolves the collaborator bundle a command runs against from the
configured provider factory.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any, Callable

from ssosync.core.errors import ProviderError
from ssosync.core.logging import get_logger
from ssosync.providers.base import (
    CliProvider,
    IntegrationDirectory,
    InteractiveSelector,
    Notifier,
    SessionSynchronizer,
)

if TYPE_CHECKING:
    from ssosync.core.config import SsoSyncConfig

logger = get_logger(__name__)

ProviderFactory = Callable[["SsoSyncConfig"], CliProvider]


def load_provider_factory(reference: str) -> ProviderFactory:
    """Import a ``package.module:callable`` reference."""
    module_name, _, attr_path = reference.partition(":")
    if not module_name or not attr_path:
        raise ProviderError(f"Invalid provider factory reference: {reference}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ProviderError(f"Cannot import provider module {module_name}: {e}") from e

    target: Any = module
    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ProviderError(
                f"Provider factory {attr_path} not found in {module_name}"
            ) from e

    if not callable(target):
        raise ProviderError(f"Provider factory {reference} is not callable")
    return target


def get_cli_provider(config: SsoSyncConfig) -> CliProvider:
    """Build the collaborator bundle described by the configuration."""
    reference = config.provider.factory
    if not reference:
        raise ProviderError(
            "No provider configured; set provider.factory in the ssosync config"
        )

    factory = load_provider_factory(reference)
    provider = factory(config)
    if not isinstance(provider, CliProvider):
        raise ProviderError(
            f"Provider factory {reference} returned {type(provider).__name__}, "
            "expected CliProvider"
        )

    logger.debug("Provider loaded", factory=reference)
    return provider


__all__ = [
    "CliProvider",
    "IntegrationDirectory",
    "InteractiveSelector",
    "Notifier",
    "SessionSynchronizer",
    "get_cli_provider",
    "load_provider_factory",
]
