"""Small structured logging helpers.

Every event is a single line: the event name followed by space-separated
``key=value`` pairs, with a handful of keys floated to the front so that
``path`` and the tag counts are easy to spot when tailing a run.
"""

from __future__ import annotations

import contextvars
import logging
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any


__all__ = [
    "bind_log_context",
    "get_log_context",
    "log_debug",
    "log_error",
    "log_info",
    "log_warning",
    "set_log_context",
    "timed",
]


_CTX: contextvars.ContextVar[dict[str, Any] | None] = contextvars.ContextVar(
    "readme_toc_log_ctx",
    default=None,
)

_DEFAULT_TRUNCATE_AT = 200
_MAX_LIST_ITEMS = 4

_KEY_PRIORITY: dict[str, int] = {
    "run_id": 0,
    "op": 1,
    "status": 2,
    "duration_ms": 3,
    "path": 10,
    "root": 11,
    "marks": 20,
    "ends": 21,
    "active": 22,
    "regions": 23,
    "moved": 24,
    "lines": 25,
    "count": 30,
    "error": 90,
    "exc": 91,
}


def bind_log_context(**fields: Any):
    """Bind fields to the current context for the duration of a ``with`` block."""

    @contextmanager
    def _cm():
        merged = dict(_CTX.get() or {})
        merged.update({k: v for k, v in fields.items() if v is not None})
        token = _CTX.set(merged)
        try:
            yield
        finally:
            _CTX.reset(token)

    return _cm()


def set_log_context(**fields: Any) -> None:
    """Set fields on the current context without automatic reset."""
    merged = dict(_CTX.get() or {})
    merged.update({k: v for k, v in fields.items() if v is not None})
    _CTX.set(merged)


def get_log_context() -> dict[str, Any]:
    """Return a copy of the currently bound context."""
    return dict(_CTX.get() or {})


def _shorten(s: str, *, limit: int = _DEFAULT_TRUNCATE_AT) -> str:
    if len(s) <= limit:
        return s
    return f"{s[: limit - 20]}...{s[-17:]}"


def _fmt_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (str, Path)):
        return _shorten(str(value))
    if isinstance(value, (list, tuple, set)):
        seq = list(value)
        if len(seq) > _MAX_LIST_ITEMS:
            return f"[len={len(seq)}]"
        return "[" + ",".join(_fmt_value(v) for v in seq) + "]"
    if isinstance(value, dict):
        return f"{{len={len(value)}}}"
    return _shorten(repr(value))


def _format_event(event: str, fields: dict[str, Any]) -> str:
    merged = dict(_CTX.get() or {})
    merged.update(fields)
    items = sorted(
        ((k, v) for k, v in merged.items() if v is not None),
        key=lambda kv: (_KEY_PRIORITY.get(kv[0], 50), kv[0]),
    )
    return " ".join([event, *(f"{k}={_fmt_value(v)}" for k, v in items)])


def _log(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    if not logger.isEnabledFor(level):
        return
    logger.log(level, _format_event(event, fields))


def log_debug(logger: logging.Logger, event: str, **fields: Any) -> None:
    _log(logger, logging.DEBUG, event, **fields)


def log_info(logger: logging.Logger, event: str, **fields: Any) -> None:
    _log(logger, logging.INFO, event, **fields)


def log_warning(logger: logging.Logger, event: str, **fields: Any) -> None:
    _log(logger, logging.WARNING, event, **fields)


def log_error(logger: logging.Logger, event: str, **fields: Any) -> None:
    _log(logger, logging.ERROR, event, **fields)


@contextmanager
def timed(
    logger: logging.Logger,
    op: str,
    *,
    level: int = logging.DEBUG,
    **fields: Any,
):
    """Log ``<op>.start`` and ``<op>.ok``/``<op>.error`` with the elapsed time."""
    start = time.perf_counter()
    _log(logger, level, f"{op}.start", **fields)
    try:
        yield
    except Exception as exc:
        duration_ms = int((time.perf_counter() - start) * 1000.0)
        _log(
            logger,
            logging.ERROR,
            f"{op}.error",
            duration_ms=duration_ms,
            exc=type(exc).__name__,
            **fields,
        )
        raise
    else:
        duration_ms = int((time.perf_counter() - start) * 1000.0)
        _log(logger, level, f"{op}.ok", duration_ms=duration_ms, **fields)
