"""
Logger configuration for textparts.

structlog is bridged into the standard logging module. The library only
emits events; applications opt into output by calling ``configure_logging``.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog
from structlog.stdlib import ProcessorFormatter
from structlog.typing import Processor

_PRE_CHAIN: tuple[Processor, ...] = (
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.TimeStamper(fmt="iso"),
)


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def _configure_structlog(min_level: int) -> None:
    """Bridge structlog into the standard logging framework."""
    structlog.configure(
        processors=_PRE_CHAIN + (ProcessorFormatter.wrap_for_formatter,),
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(level: int | str = logging.INFO) -> None:
    """
    Configure global logging.

    Parameters
    ----------
    level:
        Logging level for the root logger, as a number or a name such as
        ``"DEBUG"``.
    """
    min_level = _resolve_level(level)
    _configure_structlog(min_level)

    handler = logging.StreamHandler()
    handler.setLevel(min_level)
    handler.setFormatter(
        ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=False),
            foreign_pre_chain=_PRE_CHAIN,
        )
    )
    logging.basicConfig(level=min_level, handlers=[handler], force=True)


def get_logger(name: str | None = None) -> Any:
    """Retrieve a structlog logger wrapping the stdlib logger ``name``.

    Until ``configure_logging`` runs, events go through the stdlib logger's
    own level filtering, so debug events stay silent.
    """
    return structlog.wrap_logger(logging.getLogger(name))
