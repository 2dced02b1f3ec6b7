"""
Logging setup for the wallet tracker service.

Every record, whether emitted through structlog or the stdlib ``logging``
module, is rendered by structlog: JSON lines by default, a colored console
when running at DEBUG.
"""

import logging
import sys
from typing import Optional

import structlog

from .config import settings

# Upstream clients log every request at INFO; the service logs its own.
_NOISY_LOGGERS = ("uvicorn.access", "httpcore", "httpx")


def _renderer(debug: bool) -> structlog.types.Processor:
    if debug:
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def setup_logging(log_level: Optional[str] = None) -> None:
    """Route structlog and stdlib logging through one stdout handler.

    Args:
        log_level: Override for ``settings.log_level``.
    """
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)
    debug = level == logging.DEBUG

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if not debug:
        pre_chain.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(debug),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
