"""structlog routing for the ``zenn2qiita`` logger tree.

Package modules log through plain ``logging.getLogger(__name__)``; this
module decides how those records look. Console lines by default, one JSON
object per record with ``log_json``. Tracebacks attached with
``exc_info=True`` (failed prior-output lookups) are rendered as structured
frames in JSON mode.

Only the ``zenn2qiita`` logger is raised to DEBUG by ``verbose``; every
other logger stays at WARNING.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

PACKAGE_LOGGER = "zenn2qiita"

# Marks the handler this module installs so reconfiguring replaces it.
_HANDLER_NAME = "zenn2qiita-structlog"


def _renderer(log_json: bool, stream: TextIO) -> list[structlog.types.Processor]:
    if log_json:
        return [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    colors = hasattr(stream, "isatty") and stream.isatty()
    return [structlog.dev.ConsoleRenderer(colors=colors)]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Install the structlog formatter on the root logger.

    Args:
        verbose: DEBUG level for the ``zenn2qiita`` logger; WARNING otherwise.
        log_json: JSON lines instead of console output.
        stream: Destination, ``sys.stderr`` by default.
    """
    out = stream if stream is not None else sys.stderr

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_renderer(log_json, out),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers = [h for h in root.handlers if h.get_name() != _HANDLER_NAME]
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
