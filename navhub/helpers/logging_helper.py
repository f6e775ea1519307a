"""
Logging helpers: record tagging, per-request context and safe error text.

NavhubLogFilter derives a readable identity/role pair from the logger
name (module suffix convention) and appends any context set through
set_log_context(). The formatter installed by configure_logging() uses
both, so a line from navhub.services.route_registration_svc reads:

    2026-01-01 12:00:00 INFO [Route Registration] [Service] [module=billing] Registered 3 route(s)
"""

from __future__ import annotations

import contextvars
import logging
from typing import Any

logger = logging.getLogger(__name__)

_ROLE_SUFFIXES: dict[str, str] = {
    "_svc": "[Service]",
    "_comp": "[Component]",
    "_aql": "[AQL]",
    "_if": "[Interface]",
    "_helper": "[Helper]",
    "_dto": "[DTO]",
    "_cli": "[CLI]",
}

_log_context: contextvars.ContextVar[dict[str, Any] | None] = contextvars.ContextVar("navhub_log_context", default=None)

LOG_FORMAT = "%(asctime)s %(levelname)s %(navhub_identity_tag)s %(navhub_role_tag)s %(context_str)s%(message)s"


def set_log_context(**values: Any) -> None:
    """Merge key/value pairs into the logging context of the current task or thread."""
    current = dict(_log_context.get() or {})
    current.update(values)
    _log_context.set(current)


def clear_log_context() -> None:
    """Drop all context values for the current task or thread."""
    _log_context.set(None)


def _derive_tags(name: str) -> tuple[str, str]:
    module = name.rsplit(".", 1)[-1]
    for suffix, role in _ROLE_SUFFIXES.items():
        if module.endswith(suffix):
            stem = module[: -len(suffix)]
            if not stem.strip("_"):
                break
            identity = " ".join(part.capitalize() for part in stem.split("_") if part)
            return f"[{identity}]", role
    return name, ""


class NavhubLogFilter(logging.Filter):
    """Attach identity, role and context attributes to every record. Never drops a record."""

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            identity, role = _derive_tags(str(record.name or ""))
        except Exception:
            identity, role = str(getattr(record, "name", "")), ""
        record.navhub_identity_tag = identity
        record.navhub_role_tag = role

        context = _log_context.get() or {}
        if context:
            pairs = " ".join(f"{k}={v}" for k, v in context.items())
            record.context_str = f"[{pairs}] "
        else:
            record.context_str = ""
        return True


def configure_logging(level: str | int = "INFO") -> None:
    """
    Configure root logging once for the whole process.

    Installs NavhubLogFilter on the root handler so third-party records
    (uvicorn, arango) also carry the attributes LOG_FORMAT expects.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = logging.StreamHandler()
    handler.addFilter(NavhubLogFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)


def sanitize_exception_message(e: Exception, safe_message: str = "An error occurred") -> str:
    """
    Sanitize exception message for user display.

    The full exception is logged with traceback; only safe_message is
    returned for inclusion in a response body.

    Args:
        e: The exception to sanitize
        safe_message: Generic message to return to users

    Returns:
        Safe error message for user display
    """
    logger.exception(f"[security] Exception sanitized: {e}")
    return safe_message
