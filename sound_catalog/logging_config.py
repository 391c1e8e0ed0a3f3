import logging
import sys
from typing import Any, MutableMapping, Optional, TextIO

import structlog
from flask import has_request_context, request
from structlog.types import Processor


def add_request_context(logger: Any, method_name: str, event_dict: MutableMapping[str, Any]):
    """Tag events emitted while serving a request with its method and path."""
    if has_request_context():
        event_dict.setdefault("http_method", request.method)
        event_dict.setdefault("path", request.path)
    return event_dict


def configure_logging(log_level: str = "INFO", is_debug: bool = False, stream: Optional[TextIO] = None):
    """
    Route stdlib and structlog output to ``stream`` (stderr by default).

    stdout stays reserved for command output such as ``flask list-sounds``.
    Debug mode renders for humans, colouring only a terminal; otherwise
    one JSON object per line.
    """
    stream = stream or sys.stderr
    level = log_level.upper()

    logging.basicConfig(format="%(message)s", stream=stream, level=level)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        add_request_context,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.UnicodeDecoder(),
    ]
    if is_debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=stream.isatty()))
    else:
        processors += [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    structlog.get_logger(__name__).debug(
        "logging.configured", level=level, renderer="console" if is_debug else "json"
    )
