"""
Terminal rendition of the interactive selector.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.table import Table

from ssosync.providers.base import InteractiveSelector

if TYPE_CHECKING:
    from ssosync.core.models import Integration, SelectionPrompt


class ConsoleSelector(InteractiveSelector):
    """Shows the choices as a numbered table and reads the pick from stdin."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    async def prompt(self, prompt: SelectionPrompt) -> dict[str, Integration]:
        if not prompt.choices:
            raise ValueError("prompt has no choices")

        self.console.print(prompt.message, style="bold", markup=False)
        table = Table()
        table.add_column("#", style="dim")
        table.add_column("Integration", style="cyan")
        for index, choice in enumerate(prompt.choices, start=1):
            table.add_row(str(index), choice.name)
        self.console.print(table)

        picked = click.prompt(
            "Choice",
            type=click.IntRange(1, len(prompt.choices)),
            default=1,
        )
        return {prompt.name: prompt.choices[picked - 1].value}
