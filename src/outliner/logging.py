"""Logging utilities."""

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Any

from rich.logging import RichHandler


_owner_var: contextvars.ContextVar[str] = contextvars.ContextVar("outliner_owner", default="-")
_item_var: contextvars.ContextVar[str] = contextvars.ContextVar("outliner_item", default="-")


class _ContextFilter(logging.Filter):
    """Inject document context into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.owner = _owner_var.get()  # type: ignore[attr-defined]
        record.item = _item_var.get()  # type: ignore[attr-defined]
        return True


@contextlib.contextmanager
def document_context(*, owner: str, item_id: str | None = None) -> Any:
    """Temporarily bind the document being edited for structured logging.

    Args:
        owner: Document owner (user id or the shared scope owner).
        item_id: Optional item the current request targets.
    """

    token_owner = _owner_var.set(owner)
    token_item = _item_var.set(item_id or _item_var.get())
    try:
        yield
    finally:
        _owner_var.reset(token_owner)
        _item_var.reset(token_item)


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Logging level name.
    """

    handler = RichHandler(rich_tracebacks=True, show_time=True, show_level=True)
    handler.addFilter(_ContextFilter())

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s owner=%(owner)s item=%(item)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Avoid duplicate handlers if configure_logging is called multiple times
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(handler)
    else:
        for h in root.handlers:
            if isinstance(h, RichHandler):
                if not any(isinstance(f, _ContextFilter) for f in h.filters):
                    h.addFilter(_ContextFilter())
                h.setFormatter(formatter)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)


def log_exception(logger: logging.Logger, msg: str, exc: BaseException, **context: Any) -> None:
    """Log `exc` with its traceback and optional structured context.

    `exc` is passed explicitly since handlers may run outside the `except` block.
    """

    if context:
        logger.error("%s | context=%s", msg, context, exc_info=exc)
    else:
        logger.error("%s", msg, exc_info=exc)
