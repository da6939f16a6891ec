"""
Console tracing of conversion engine diagnostics.

Engines report problems they work around (unmapped functions, unsupported
controls) through the ``reports_import.engine`` logger.
"""

import logging
import sys
from typing import Optional, TextIO

ENGINE_LOGGER_NAME = "reports_import.engine"
TRACE_FORMAT = "%(name)s %(levelname)s: %(message)s"


class ConsoleTraceHandler(logging.StreamHandler):
    """Stream handler writing engine diagnostics to the console."""
    pass


def get_engine_logger() -> logging.Logger:
    """Logger the conversion engines write their diagnostics to."""
    return logging.getLogger(ENGINE_LOGGER_NAME)


def configure_tracer(level: str = "WARNING", stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a console listener to the engine logger.

    Calling this again replaces the previous listener rather than adding a
    second one.

    Args:
        level: WARNING (warnings and errors) or ERROR
        stream: Output stream, standard output by default

    Returns:
        The configured engine logger
    """
    engine_logger = get_engine_logger()
    for handler in list(engine_logger.handlers):
        if isinstance(handler, ConsoleTraceHandler):
            engine_logger.removeHandler(handler)

    handler = ConsoleTraceHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(TRACE_FORMAT))
    engine_logger.addHandler(handler)
    engine_logger.setLevel(level)
    engine_logger.propagate = False
    return engine_logger
