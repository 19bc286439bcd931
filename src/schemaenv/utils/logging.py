"""
Structured logging using structlog on top of stdlib logging.

Library modules log through get_logger(), which wraps a stdlib logger under
the "schemaenv" namespace. That namespace carries a NullHandler, so nothing
is emitted unless the host application (or the CLI, via configure_logging)
attaches a handler.
"""

import logging
import sys

import structlog

LIBRARY_LOGGER = "schemaenv"
CLI_HANDLER_NAME = "schemaenv-cli"

# Run on events from schemaenv loggers and on foreign stdlib records alike
SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.processors.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for a schemaenv module.

    The logger is independent of the global structlog configuration; its
    events are rendered by whatever handler sits on the stdlib logger.

    Args:
        name: Logger name (typically __name__ of the module).

    Returns:
        Bound structlog logger wrapping a stdlib logger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or LIBRARY_LOGGER),
        processors=[
            structlog.stdlib.filter_by_level,
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
) -> None:
    """
    Attach a stderr handler to the schemaenv logger namespace.

    Used by the CLI; calling it again replaces the previous handler, so the
    stream is always the current sys.stderr.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_output: If True, render events as JSON lines.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
        final_processors = [structlog.processors.format_exc_info, renderer]
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
        final_processors = [renderer]

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *final_processors,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(CLI_HANDLER_NAME)
    handler.setFormatter(formatter)

    logger = logging.getLogger(LIBRARY_LOGGER)
    reset_logging()
    logger.addHandler(handler)
    logger.setLevel(log_level)
    logger.propagate = False


def reset_logging() -> None:
    """Remove the handler added by configure_logging and restore defaults."""
    logger = logging.getLogger(LIBRARY_LOGGER)
    for existing in list(logger.handlers):
        if existing.get_name() == CLI_HANDLER_NAME:
            logger.removeHandler(existing)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
