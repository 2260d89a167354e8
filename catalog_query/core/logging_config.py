"""
Console logging for the collection service.

Log lines carry the request context passed through `extra=` (generation,
page, action, status, reason) as trailing key=value pairs.
"""

import logging

CONTEXT_KEYS = ("generation", "page", "action", "status", "reason")


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        pairs = [
            f"{key}={getattr(record, key)}"
            for key in CONTEXT_KEYS
            if getattr(record, key, None) not in (None, "")
        ]
        return f"{base} | {' '.join(pairs)}" if pairs else base


def setup_logging(level: str = "INFO", format_string: str = "%(levelname)s:%(name)s:%(message)s") -> logging.Handler:
    """Replace the root handlers with one console handler using ContextFormatter."""
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter(format_string))

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    return handler
