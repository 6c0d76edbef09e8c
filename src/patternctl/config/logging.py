"""Log routing for patternctl.

Results go to stdout; logs always go to stderr.  Everything under the
``patternctl`` logger stays at WARNING unless ``-v`` is passed, which
surfaces the pattern internals:

- ``patternctl.domain.approval``: each tier that forwards a request
- ``patternctl.domain.commands``: dispatched, rebound and unbound buttons
- ``patternctl.domain.connection``: connect and disconnect transitions
- ``patternctl.telemetry``: span timings recorded by ``@traced``

``--log-json`` swaps the console renderer for one JSON object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog

APP_LOGGER = "patternctl"


def _shared_processors() -> list[structlog.types.Processor]:
    # Applied to structlog events and to stdlib records alike.
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _stderr_handler(log_json: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_shared_processors(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install a single stderr handler on the root logger.

    Safe to call more than once; each call replaces the previous handler.
    Third-party loggers stay at WARNING even with *verbose*.
    """
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_stderr_handler(log_json))
    root.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
