# random_word/logging_config.py
import logging
import sys
from typing import Optional

import structlog

from .config import LogFormat, WordSettings, get_config


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Module logger for library code.

    Events are rendered by the structlog processor chain and handed to the
    stdlib logger `name`. Until an application configures logging, stdlib
    rules apply: nothing below WARNING is emitted and nothing reaches stdout.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(settings: Optional[WordSettings] = None) -> None:
    """
    Configures structlog and the standard logging library to emit
    structured JSON logs or colored console logs.

    random_word never calls this on import; applications opt in.
    """
    settings = settings or get_config()
    level = logging.getLevelName(settings.LOG_LEVEL)

    # 1. Define the chain of processors (Middleware for logs)
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,           # Add "level": "info"
        structlog.processors.TimeStamper(fmt="iso"),  # Add "timestamp": "2023-..."
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # 2. Determine the Output Format
    if settings.LOG_FORMAT == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    # 3. Configure Structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # 4. Standard library logging (random_word's own module loggers included)
    #    goes to the same stream, filtered at the same level
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )
