"""
ssosync error taxonomy.

Every failure that leaves a command is converted into a CommandError by
``to_display_error`` so the CLI has exactly one kind of error to render.
"""

from __future__ import annotations

NO_ONLINE_INTEGRATIONS = "no online integrations available"


class SsoSyncError(Exception):
    """Base class for ssosync errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class CommandError(SsoSyncError):
    """Normalized error raised by a command."""


class SelectionError(SsoSyncError):
    """Interactive selection could not be offered."""

    def __init__(self, message: str = NO_ONLINE_INTEGRATIONS) -> None:
        super().__init__(message)


class IntegrationNotFoundError(SsoSyncError):
    """An explicit integration id did not resolve."""

    def __init__(self, integration_id: str) -> None:
        super().__init__(f"integration {integration_id} not found")
        self.integration_id = integration_id


class CollaboratorError(SsoSyncError):
    """A provider collaborator failed."""


class ProviderError(CollaboratorError):
    """The configured provider could not be built."""


class UnknownError(CommandError):
    """A failure that carried no usable message."""


def _message_of(value: object) -> str:
    message = getattr(value, "message", None)
    if isinstance(message, str) and message:
        return message
    if isinstance(value, BaseException):
        # KeyError quotes its key in str()
        if len(value.args) == 1 and isinstance(value.args[0], str):
            return value.args[0]
        return str(value)
    return ""


def to_display_error(value: object) -> CommandError:
    """
    Convert any raised or reported failure into a CommandError.

    A non-empty message is kept verbatim. Anything else becomes
    ``"Unknown error: <value>"``, using the class name for message-less
    exceptions.
    """
    if isinstance(value, CommandError):
        return value

    message = _message_of(value)
    if message:
        error = CommandError(message)
    elif isinstance(value, BaseException):
        error = UnknownError(f"Unknown error: {type(value).__name__}")
    else:
        error = UnknownError(f"Unknown error: {value}")

    if isinstance(value, BaseException):
        error.__cause__ = value
    return error
