from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import Optional, Union

# Set by the request-context middleware (correlation id, header slug) and by the
# tenant resolver (tenant id, once the slug has matched a stored tenant).
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)
tenant_slug_var: ContextVar[Optional[str]] = ContextVar("tenant_slug", default=None)
tenant_id_var: ContextVar[Optional[str]] = ContextVar("tenant_id", default=None)

_HANDLER_NAME = "tenancy-stdout"
LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | cid=%(correlation_id)s | tenant=%(tenant)s | "
    "%(message)s"
)


def describe_tenant(slug: Optional[str], tenant_id: Optional[str]) -> str:
    """
    Render the tenant part of a log line.

    "-" without a slug, "acme?" for a slug no tenant owns yet, "acme/<id>" once resolved.
    """
    if not slug:
        return "-"
    if not tenant_id:
        return f"{slug}?"
    return f"{slug}/{tenant_id}"


class LoggingContextFilter(logging.Filter):
    """Copy the request's correlation id and tenant onto every record."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        record.correlation_id = correlation_id_var.get() or "-"
        record.tenant = describe_tenant(tenant_slug_var.get(), tenant_id_var.get())
        return True


# PUBLIC_INTERFACE
def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Route root logging to stdout with the tenant-aware format.

    Safe to call more than once (app import, seed CLI): the previously installed
    handler is replaced rather than stacked.
    """
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.addFilter(LoggingContextFilter())

    root = logging.getLogger()
    # Drop our earlier handler and console handlers from basicConfig; capture
    # handlers (files, test harnesses) stay attached.
    for h in list(root.handlers):
        is_console = isinstance(h, logging.StreamHandler) and h.stream in (sys.stdout, sys.stderr)
        if h.get_name() == _HANDLER_NAME or is_console:
            root.removeHandler(h)
    root.addHandler(handler)
    root.setLevel(level)
