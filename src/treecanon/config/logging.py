"""structlog wiring for scripts built on treecanon.

The library only logs through stdlib loggers under "treecanon", at DEBUG.
configure_logging() renders those records with structlog (console or JSON
lines on stderr) without touching the root logger, so applications that
embed treecanon keep their own handlers.
"""

from __future__ import annotations

import logging
import sys

import structlog

_HANDLER_NAME = "treecanon-structlog"


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> logging.Handler:
    """Route the "treecanon" logger through a structlog formatter on stderr.

    Args:
        verbose: Emit DEBUG records (limit breaches, cycles, key mismatches).
            When False, only WARNING+.
        log_json: One JSON object per record instead of console output.

    Calling it again replaces the handler installed by the previous call.
    Returns the installed handler.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    pkg_logger = logging.getLogger("treecanon")
    for old in [h for h in pkg_logger.handlers if h.get_name() == _HANDLER_NAME]:
        pkg_logger.removeHandler(old)
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    pkg_logger.propagate = False
    return handler
