"""Logging helpers for id3.

The package logs through loguru and is disabled by default, as libraries
using loguru should be. `enable_logging()` adds a stderr handler filtered to
id3 records and returns a handle that removes it again.

Note:
    Importing this module removes loguru's default stderr handler (ID 0) so
    records routed through `enable_logging()` are not printed twice. If
    handler 0 was already removed or replaced, the removal is a no-op.
"""

from __future__ import annotations

import contextlib
import sys
import threading
from typing import TYPE_CHECKING, ClassVar, Final, Literal, TextIO

from loguru import logger

if TYPE_CHECKING:
    from types import TracebackType

    from loguru import Record

PACKAGE_NAME: Final[str] = __name__.split(".")[0]

with contextlib.suppress(ValueError):
    logger.remove(0)

logger.disable(PACKAGE_NAME)

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_FORMAT: Final[str] = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def _is_package_record(record: Record) -> bool:
    name = record["name"] or ""
    return name == PACKAGE_NAME or name.startswith(f"{PACKAGE_NAME}.")


class LoggingHandle:
    """Handle for one handler added by `enable_logging`.

    The id3 namespace stays enabled while any handle is active. Usable as a
    context manager:

        >>> with enable_logging("DEBUG"):  # doctest: +SKIP
        ...     train(instances)
    """

    _active_ids: ClassVar[set[int]] = set()
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, handler_id: int) -> None:
        self.handler_id: int | None = handler_id
        with LoggingHandle._lock:
            LoggingHandle._active_ids.add(handler_id)

    def disable(self) -> None:
        """Remove the handler; silence id3 once no handle is left. Safe to call twice."""
        with LoggingHandle._lock:
            if self.handler_id is None:
                return
            logger.remove(self.handler_id)
            LoggingHandle._active_ids.discard(self.handler_id)
            self.handler_id = None
            if not LoggingHandle._active_ids:
                logger.disable(PACKAGE_NAME)

    def __enter__(self) -> LoggingHandle:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.disable()


def enable_logging(level: LogLevel = "INFO", sink: TextIO | None = None) -> LoggingHandle:
    """Route id3 log records at `level` and above to `sink` (default: current stderr)."""
    if sink is None:
        sink = sys.stderr
    logger.enable(PACKAGE_NAME)
    handler_id = logger.add(
        sink, level=level, format=_FORMAT, filter=_is_package_record
    )
    return LoggingHandle(handler_id)


def disable_logging() -> None:
    """Silence id3 records without touching any handler."""
    logger.disable(PACKAGE_NAME)
