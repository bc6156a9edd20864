"""
Tests for ssosync.providers package.
"""

import io
import sys
import types
from unittest.mock import Mock

import pytest
from rich.console import Console

from ssosync.core.config import ProviderConfig, SsoSyncConfig
from ssosync.core.errors import ProviderError
from ssosync.core.models import Integration, SelectionPrompt
from ssosync.providers import get_cli_provider, load_provider_factory
from ssosync.providers.base import CliProvider, IntegrationDirectory
from ssosync.providers.console import ConsoleSelector


@pytest.fixture
def provider_module(
    monkeypatch: pytest.MonkeyPatch, mock_provider: CliProvider
) -> types.ModuleType:
    """Register an importable module exposing provider factories."""
    module = types.ModuleType("fake_sso_provider")
    module.create = lambda config: mock_provider  # type: ignore[attr-defined]
    module.broken = lambda config: object()  # type: ignore[attr-defined]
    module.not_callable = 42  # type: ignore[attr-defined]
    module.factories = types.SimpleNamespace(create=module.create)  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "fake_sso_provider", module)
    return module


class TestLoadProviderFactory:
    """Tests for load_provider_factory."""

    def test_loads_callable(self, provider_module: types.ModuleType) -> None:
        assert load_provider_factory("fake_sso_provider:create") is provider_module.create

    def test_loads_nested_attribute(self, provider_module: types.ModuleType) -> None:
        assert load_provider_factory("fake_sso_provider:factories.create") is provider_module.create

    def test_missing_module(self) -> None:
        with pytest.raises(ProviderError, match="Cannot import provider module"):
            load_provider_factory("no_such_module_for_ssosync:create")

    def test_missing_attribute(self, provider_module: types.ModuleType) -> None:
        with pytest.raises(ProviderError, match="not found"):
            load_provider_factory("fake_sso_provider:missing")

    def test_not_callable(self, provider_module: types.ModuleType) -> None:
        with pytest.raises(ProviderError, match="not callable"):
            load_provider_factory("fake_sso_provider:not_callable")

    def test_malformed_reference(self) -> None:
        with pytest.raises(ProviderError, match="Invalid provider factory reference"):
            load_provider_factory("fake_sso_provider")


class TestGetCliProvider:
    """Tests for get_cli_provider."""

    def test_no_factory_configured(self, sample_config: SsoSyncConfig) -> None:
        with pytest.raises(ProviderError, match="No provider configured"):
            get_cli_provider(sample_config)

    def test_builds_provider(
        self, provider_module: types.ModuleType, mock_provider: CliProvider
    ) -> None:
        config = SsoSyncConfig(provider=ProviderConfig(factory="fake_sso_provider:create"))
        assert get_cli_provider(config) is mock_provider

    def test_factory_receives_config(self, provider_module: types.ModuleType) -> None:
        factory = Mock(return_value=Mock(spec=CliProvider))
        provider_module.spy = factory  # type: ignore[attr-defined]
        config = SsoSyncConfig(provider=ProviderConfig(factory="fake_sso_provider:spy"))

        get_cli_provider(config)

        factory.assert_called_once_with(config)

    def test_rejects_wrong_return_type(self, provider_module: types.ModuleType) -> None:
        config = SsoSyncConfig(provider=ProviderConfig(factory="fake_sso_provider:broken"))
        with pytest.raises(ProviderError, match="expected CliProvider"):
            get_cli_provider(config)


class TestInterfaces:
    """Tests for the abstract collaborator interfaces."""

    def test_directory_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            IntegrationDirectory()  # type: ignore[abstract]


class TestConsoleSelector:
    """Tests for ConsoleSelector."""

    @pytest.mark.asyncio
    async def test_returns_picked_integration(self, mocker) -> None:
        first = Integration(id="1", alias="first")
        second = Integration(id="2", alias="second")
        output = io.StringIO()
        selector = ConsoleSelector(console=Console(file=output, width=80))
        prompt_mock = mocker.patch("ssosync.providers.console.click.prompt", return_value=2)

        answer = await selector.prompt(SelectionPrompt.for_integrations([first, second]))

        assert answer == {"selectedIntegration": second}
        assert answer["selectedIntegration"] is second
        prompt_mock.assert_called_once()
        rendered = output.getvalue()
        assert "select an integration" in rendered
        assert "first" in rendered
        assert "second" in rendered

    @pytest.mark.asyncio
    async def test_message_printed_verbatim(self, mocker) -> None:
        output = io.StringIO()
        selector = ConsoleSelector(console=Console(file=output, width=80))
        mocker.patch("ssosync.providers.console.click.prompt", return_value=1)
        prompt = SelectionPrompt.for_integrations(
            [Integration(id="1", alias="x")], message="[sso] select an integration to sync"
        )

        await selector.prompt(prompt)

        assert output.getvalue().splitlines()[0] == "[sso] select an integration to sync"

    @pytest.mark.asyncio
    async def test_rejects_empty_prompt(self) -> None:
        selector = ConsoleSelector(console=Console(file=io.StringIO()))
        with pytest.raises(ValueError):
            await selector.prompt(SelectionPrompt(choices=[]))
