"""
Logging setup for the JSA API

Every record carries the id of the request that produced it. The id comes
from ``RequestContextMiddleware`` (client-supplied X-Request-ID or a fresh
uuid), so a render, its storage write and the ``app.access`` line for the
same call can be matched up. Records logged outside a request show "none".
"""

import contextvars
import logging
import sys
from typing import Optional

request_id_ctx_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "request_id", default=None
)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_ctx_var.get() or "none"
        return True


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logger with a formatter that includes the request id."""
    root = logging.getLogger()
    if root.handlers:
        # keep existing handlers (uvicorn, pytest) but make request_id resolvable
        for handler in root.handlers:
            if not any(isinstance(f, RequestIdFilter) for f in handler.filters):
                handler.addFilter(RequestIdFilter())
        if level:
            root.setLevel(level.upper())
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    root.addHandler(handler)
    root.setLevel((level or "INFO").upper())
