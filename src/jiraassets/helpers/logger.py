import logging
import os
import sys
from typing import Any

import structlog

from jiraassets._package import PROVIDER_TYPE_NAME
from jiraassets.config.settings import get_setting

MASKED = "***"
SENSITIVE_KEYS = frozenset({"password", "jiraassets_password", "authorization", "Authorization"})


def mask_sensitive_fields(_logger: Any, _method_name: str, event_dict: dict) -> dict:
    """Structlog processor replacing credentials with a fixed mask."""
    for key in list(event_dict):
        if key in SENSITIVE_KEYS and event_dict[key]:
            event_dict[key] = MASKED
        elif key == "headers" and isinstance(event_dict[key], dict):
            event_dict[key] = {
                k: (MASKED if k in SENSITIVE_KEYS else v) for k, v in event_dict[key].items()
            }
    return event_dict


def setup_logging(
    log_dir: str = None,
    log_filename: str = None,
    log_level: str = None,
    log_destination: str = None,
):
    """
    Set up structured logging for the provider using structlog.

    Standard output carries protocol responses, so console logs go to stderr.

    :param log_dir: Directory where the log file will be stored.
    :param log_filename: Name of the log file.
    :param log_level: Logging level (e.g., DEBUG, INFO, WARNING, ERROR, CRITICAL).
    :param log_destination: Where to send logs ("file", "stderr", or "both").
    :return: Configured structlog logger instance.
    """
    log_dir = log_dir or get_setting("LOG_DIR", f"./{PROVIDER_TYPE_NAME}/logs")
    log_filename = log_filename or get_setting("LOG_FILENAME", f"{PROVIDER_TYPE_NAME}_log.log")
    log_level = log_level or get_setting("LOG_LEVEL", "WARNING")
    log_destination = log_destination or get_setting("LOG_DESTINATION", "stderr")

    shared_processors = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        mask_sensitive_fields,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.JSONRenderer(default=str),
        foreign_pre_chain=shared_processors,
    )

    handlers: list[logging.Handler] = []
    if log_destination in ("file", "both"):
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(os.path.join(log_dir, log_filename)))

    if log_destination in ("stderr", "both"):
        handlers.append(logging.StreamHandler(sys.stderr))

    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[structlog.stdlib.filter_by_level]
        + shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, str(log_level).upper(), logging.WARNING),
        handlers=handlers,
        force=True,
    )

    return structlog.get_logger(PROVIDER_TYPE_NAME)


def get_logger(name: str):
    """Return a structlog logger bound to the given module name."""
    return structlog.get_logger(name)
