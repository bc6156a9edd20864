"""
ssosync structured logging.

Every sync run leaves one structured record naming the integration, the
session counts and whether the run succeeded.
"""

from __future__ import annotations

import logging
import sys
import time
from datetime import date
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from ssosync.core.config import LoggingConfig
    from ssosync.core.models import SessionDiff


_configured = False


def _handlers_for(config: LoggingConfig) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []

    if config.console_enabled:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(config.level)
        handlers.append(console_handler)

    if config.file_enabled:
        config.log_directory.mkdir(parents=True, exist_ok=True)
        log_file = config.log_directory / f"ssosync_{date.today():%Y%m%d}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)

    return handlers or [logging.NullHandler()]


def setup_logging(config: LoggingConfig) -> None:
    """Route structlog through the stdlib handlers described by ``config``."""
    global _configured

    if _configured:
        return

    logging.basicConfig(level=logging.DEBUG, handlers=_handlers_for(config), format="%(message)s")

    renderer: structlog.types.Processor
    if config.json_format:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name or "ssosync")


class SyncRunLogger:
    """
    Context manager recording one session sync of an integration.

    The integration id is bound for the whole run; the diff counts are
    bound once known and the closing event carries the outcome.
    """

    def __init__(self, integration_id: str, logger: Any | None = None) -> None:
        self.log = (logger or get_logger()).bind(integration_id=integration_id)
        self._started: float | None = None

    def __enter__(self) -> SyncRunLogger:
        self._started = time.monotonic()
        self.log.debug("sessions sync started")
        return self

    def record_diff(self, diff: SessionDiff) -> None:
        self.log = self.log.bind(
            sessions_added=len(diff.sessions_to_add),
            sessions_removed=len(diff.sessions_to_delete),
        )

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        elapsed = round(time.monotonic() - self._started, 3) if self._started else 0.0

        if exc_type is None:
            self.log.info("sessions sync finished", outcome="succeeded", duration_seconds=elapsed)
        else:
            self.log.error(
                "sessions sync finished",
                outcome="failed",
                duration_seconds=elapsed,
                error_type=exc_type.__name__,
                error=str(exc_val),
            )
