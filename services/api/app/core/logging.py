from __future__ import annotations

import logging
import sys

from app.middleware.correlation_id import correlation_id_var

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] [%(correlation_id)s] %(message)s"
HANDLER_NAME = "app"


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id_var.get() or "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    """Send all records to stdout tagged with the current request's correlation id.

    Safe to call more than once; the previous handler is replaced.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(CorrelationIdFilter())

    root = logging.getLogger()
    for h in list(root.handlers):
        if h.get_name() == HANDLER_NAME:
            root.removeHandler(h)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
