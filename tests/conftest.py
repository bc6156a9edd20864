"""
Pytest configuration and fixtures for ssosync tests.
"""

import json
import sys
from pathlib import Path
from typing import Generator
from unittest.mock import AsyncMock, Mock

import pytest
import structlog

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ssosync.core.config import LoggingConfig, SsoSyncConfig  # noqa: E402
from ssosync.core.models import BrowserOpening, Integration, SessionDiff  # noqa: E402
from ssosync.providers.base import CliProvider  # noqa: E402


@pytest.fixture(autouse=True)
def reset_logging(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Let every test configure logging from scratch."""
    monkeypatch.setattr("ssosync.core.logging._configured", False)
    yield
    structlog.reset_defaults()


@pytest.fixture
def integration() -> Integration:
    """A logged-in integration."""
    return Integration(
        id="validId",
        alias="mock",
        portal_url="url",
        browser_opening=BrowserOpening.IN_APP,
    )


@pytest.fixture
def session_diff() -> SessionDiff:
    return SessionDiff(
        sessions_to_add=["session1", "session2"],
        sessions_to_delete=["session3"],
    )


@pytest.fixture
def mock_provider(integration: Integration, session_diff: SessionDiff) -> CliProvider:
    """Create a provider whose collaborators are async mocks."""
    directory = Mock()
    directory.get_integration = AsyncMock(
        side_effect=lambda integration_id: (
            integration if integration_id == integration.id else None
        )
    )
    directory.get_online_integrations = AsyncMock(return_value=[integration])

    selector = Mock()
    selector.prompt = AsyncMock(
        side_effect=lambda prompt: {prompt.name: prompt.choices[0].value}
    )

    synchronizer = Mock()
    synchronizer.sync_sessions = AsyncMock(return_value=session_diff)

    notifier = Mock()
    notifier.refresh_sessions = AsyncMock(return_value=None)

    return CliProvider(
        integration_directory=directory,
        selector=selector,
        synchronizer=synchronizer,
        notifier=notifier,
    )


@pytest.fixture
def sample_config(tmp_path: Path) -> SsoSyncConfig:
    """Create a sample configuration that keeps logs out of the home directory."""
    return SsoSyncConfig(
        logging=LoggingConfig(
            console_enabled=False,
            file_enabled=False,
            log_directory=tmp_path / "logs",
        ),
    )


@pytest.fixture
def config_file(tmp_path: Path, sample_config: SsoSyncConfig) -> Path:
    """Write the sample configuration to disk for CLI tests."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps(sample_config.model_dump(mode="json")))
    return path


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "cli: Tests driving the click CLI")
