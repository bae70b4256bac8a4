"""structlog configuration for recordkeep.

Library modules log through the standard ``logging`` module. The CLI calls
``configure_logging`` once to render the ``recordkeep`` logger tree through
structlog on stderr:
- interactive terminal: colored console lines
- redirected stderr: ``key=value`` lines
- ``--log-json``: one JSON object per line
"""

from __future__ import annotations

import logging
import sys
from typing import IO

import structlog

PACKAGE_LOGGER = "recordkeep"


def _select_renderer(stream: IO[str], log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    if stream.isatty():
        return structlog.dev.ConsoleRenderer(colors=True)
    return structlog.processors.KeyValueRenderer(
        key_order=["timestamp", "level", "logger", "event"],
        drop_missing=True,
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Install a structlog-rendered handler on the package logger.

    Repeated calls replace the handler installed by the previous call; the
    root logger is left untouched.

    Args:
        verbose: Emit DEBUG and INFO records. When False, only WARNING+.
        log_json: Render JSON lines instead of console or key=value lines.
        stream: Destination (defaults to the current sys.stderr)

    Returns:
        The installed handler
    """
    if stream is None:
        stream = sys.stderr

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=False),
    ]

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _select_renderer(stream, log_json),
        ],
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)
    handler.set_name(PACKAGE_LOGGER)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if existing.get_name() == PACKAGE_LOGGER:
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False
    return handler
