"""
ssosync CLI Main Entry Point.

Provides the command-line interface for integration session sync.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from ssosync import __version__
from ssosync.commands.integration_sync import SyncCommand
from ssosync.core.config import SsoSyncConfig, load_config
from ssosync.core.errors import SsoSyncError
from ssosync.core.logging import get_logger, setup_logging
from ssosync.providers import get_cli_provider

console = Console()
logger = get_logger(__name__)

INTEGRATION_ID_FLAG = "--integrationId"


class IntegrationIdCommand(click.Command):
    """Command whose ``--integrationId`` option reports a missing value explicitly."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.BadOptionUsage as e:
            if e.option_name == INTEGRATION_ID_FLAG:
                raise click.UsageError(
                    f"Flag {INTEGRATION_ID_FLAG} expects a value", ctx=ctx
                ) from e
            raise


def get_config(ctx: click.Context) -> SsoSyncConfig:
    """Get or load configuration from context."""
    if "config" not in ctx.obj:
        ctx.obj["config"] = load_config()
    return ctx.obj["config"]


def _discard(message: str) -> None:
    return None


@click.group()
@click.version_option(version=__version__, prog_name="ssosync")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.pass_context
def cli(ctx: click.Context, config: Path | None, quiet: bool) -> None:
    """
    ssosync - AWS SSO integration session sync.

    Keeps the sessions of an SSO integration in line with what the
    identity provider currently exposes.
    """
    ctx.ensure_object(dict)

    ctx.obj["config"] = load_config(config)
    ctx.obj["quiet"] = quiet

    setup_logging(ctx.obj["config"].logging)


@cli.group("integration")
def integration() -> None:
    """Manage AWS SSO integrations."""


@integration.command("sync", cls=IntegrationIdCommand)
@click.option(
    INTEGRATION_ID_FLAG,
    "integration_id",
    type=str,
    default=None,
    help="Id of the integration to sync; omit it to pick one interactively",
)
@click.pass_context
def sync_integration(ctx: click.Context, integration_id: str | None) -> None:
    """Synchronize the sessions of an integration."""
    config = get_config(ctx)
    quiet = ctx.obj.get("quiet", False)

    try:
        provider = get_cli_provider(config)
        command = SyncCommand(
            provider,
            log=_discard if quiet else click.echo,
            prompt_message=config.prompt.message,
        )
        asyncio.run(command.run(integration_id))
    except SsoSyncError as e:
        console.print(f"[red]Error: {escape(e.message or str(e))}[/red]")
        sys.exit(1)


def main() -> None:
    """Main entry point."""
    try:
        cli(obj={})
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled[/yellow]")
        sys.exit(130)
    except Exception as e:
        logger.error("Unhandled error", error=str(e), error_type=type(e).__name__)
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
