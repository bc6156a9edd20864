"""
ssosync data models.

Defines integrations, session diffs, lookup results and the selection
prompt handed to the interactive selector.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Union


class BrowserOpening(Enum):
    """Where an integration opens its SSO portal."""

    IN_APP = "In-app"
    EXTERNAL = "External"

    @classmethod
    def from_string(cls, value: str) -> BrowserOpening:
        """Create BrowserOpening from string value."""
        value_lower = value.lower().strip()
        for mode in cls:
            if mode.value.lower() == value_lower or mode.name.lower() == value_lower:
                return mode
        return cls.IN_APP


class SyncState(Enum):
    """Lifecycle of a single sync invocation."""

    START = auto()
    RESOLVING = auto()
    RESOLVED = auto()
    SYNCING = auto()
    NOTIFYING = auto()
    DONE = auto()
    FAILED = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (SyncState.DONE, SyncState.FAILED)


@dataclass(frozen=True)
class Integration:
    """A configured connection to an AWS SSO-like identity provider."""

    id: str
    alias: str
    portal_url: str = ""
    region: str = ""
    browser_opening: BrowserOpening = BrowserOpening.IN_APP
    metadata: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Integration:
        """Build an Integration from a provider payload (camelCase or snake_case)."""
        known = {
            "id",
            "alias",
            "portalUrl",
            "portal_url",
            "region",
            "browserOpening",
            "browser_opening",
        }
        browser_opening = data.get("browserOpening", data.get("browser_opening"))
        return cls(
            id=str(data["id"]),
            alias=str(data.get("alias", "")),
            portal_url=data.get("portalUrl", data.get("portal_url", "")) or "",
            region=data.get("region", "") or "",
            browser_opening=(
                BrowserOpening.from_string(browser_opening)
                if browser_opening
                else BrowserOpening.IN_APP
            ),
            metadata={k: v for k, v in data.items() if k not in known},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "alias": self.alias,
            "portal_url": self.portal_url,
            "region": self.region,
            "browser_opening": self.browser_opening.value,
            "metadata": self.metadata,
        }


@dataclass
class SessionDiff:
    """Session ids to add and to remove, produced by one reconciliation."""

    sessions_to_add: list[str] = field(default_factory=list)
    sessions_to_delete: list[str] = field(default_factory=list)

    @property
    def added_count(self) -> int:
        return len(self.sessions_to_add)

    @property
    def removed_count(self) -> int:
        return len(self.sessions_to_delete)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SessionDiff:
        return cls(
            sessions_to_add=list(data.get("sessionsToAdd", data.get("sessions_to_add", []))),
            sessions_to_delete=list(
                data.get("sessionsToDelete", data.get("sessions_to_delete", []))
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "sessions_to_add": list(self.sessions_to_add),
            "sessions_to_delete": list(self.sessions_to_delete),
            "summary": {
                "added": self.added_count,
                "removed": self.removed_count,
            },
        }


@dataclass(frozen=True)
class Found:
    """Directory lookup hit."""

    integration: Integration


@dataclass(frozen=True)
class NotFound:
    """Directory lookup miss."""

    integration_id: str


LookupResult = Union[Found, NotFound]


@dataclass(frozen=True)
class PromptChoice:
    """One entry of a single-select list."""

    name: str
    value: Integration


@dataclass
class SelectionPrompt:
    """Single-select list question answered by an InteractiveSelector."""

    choices: list[PromptChoice]
    name: str = "selectedIntegration"
    message: str = "select an integration"
    type: str = "list"

    @classmethod
    def for_integrations(
        cls,
        integrations: list[Integration],
        message: str = "select an integration",
    ) -> SelectionPrompt:
        return cls(
            choices=[PromptChoice(name=i.alias, value=i) for i in integrations],
            message=message,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "message": self.message,
            "type": self.type,
            "choices": [{"name": c.name, "value": c.value} for c in self.choices],
        }
