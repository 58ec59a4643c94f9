"""Structured logging for the ``tallycounter`` command.

The counter and the label helpers never log. Only the command-line layer
emits events, after :func:`setup_logging` has run. Applications embedding
the counter that want the same output call :func:`setup_logging` themselves.
"""

import logging
import sys

import structlog


def setup_logging(debug: bool) -> None:
    """Route structlog through stdlib logging on stderr.

    Stdout stays reserved for the enumerated states, so piping the command's
    output never mixes log lines into the data.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )

    processors: list[structlog.types.Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        # Readable lines when inspecting a run by hand, JSON lines for scripts
        structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
