"""Logging utilities for id3py.

id3py logs through loguru and is silent by default (``logger.disable`` is
called on import).  :func:`enable_logging` attaches a stderr handler that only
passes id3py records and returns a :class:`LoggingHandle` that removes it
again.

Training and querying also accept an injected ``reporter``: any object with
loguru-style ``debug``/``info``/``warning``/``error`` methods that format
``{}`` placeholders from positional arguments.  The loguru logger itself is
the default.
"""

from __future__ import annotations

import contextlib
import sys
import threading
from typing import TYPE_CHECKING, ClassVar, Final, Literal, Protocol

from loguru import logger

if TYPE_CHECKING:
    from types import TracebackType

    from loguru import Record

PACKAGE_NAME: Final[str] = __name__.split(".")[0]

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LogFormat = Literal["short", "full"]


class Reporter(Protocol):
    """Diagnostics sink accepted by :func:`~id3py.tree.train` and :class:`~id3py.tree.DecisionTree`."""

    def debug(self, message: str, *args, **kwargs) -> None: ...

    def info(self, message: str, *args, **kwargs) -> None: ...

    def warning(self, message: str, *args, **kwargs) -> None: ...

    def error(self, message: str, *args, **kwargs) -> None: ...


class LoggingHandle:
    """Handle for a stderr handler added by :func:`enable_logging`.

    Examples
    --------
    >>> with enable_logging(level="DEBUG"):  # doctest: +SKIP
    ...     tree = train(table)
    """

    _active_ids: ClassVar[set[int]] = set()
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, handler_id: int) -> None:
        self.handler_id: int | None = handler_id
        with LoggingHandle._lock:
            LoggingHandle._active_ids.add(handler_id)

    def disable(self) -> None:
        """Remove the handler; re-disable id3py logging when no handle is left."""
        with LoggingHandle._lock:
            if self.handler_id is None:
                return
            LoggingHandle._active_ids.discard(self.handler_id)
            with contextlib.suppress(ValueError):
                logger.remove(self.handler_id)
            self.handler_id = None
            if not LoggingHandle._active_ids:
                logger.disable(PACKAGE_NAME)

    def __enter__(self) -> LoggingHandle:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.disable()

    @classmethod
    def get_active_handle_count(cls) -> int:
        with cls._lock:
            return len(cls._active_ids)


def enable_logging(*, level: LogLevel = "INFO", log_format: LogFormat = "short") -> LoggingHandle:
    """Enable id3py logging on stderr.

    Parameters
    ----------
    level : LogLevel, default="INFO"
        Minimum level.  ``"DEBUG"`` shows every split and leaf chosen while
        training; ``"WARNING"`` keeps only mixed-leaf answers and
        inconsistent column types; ``"ERROR"`` only rejected queries.
    log_format : {"short", "full"}, default="short"
        ``"full"`` adds ``module:function:line`` to each line.

    Returns
    -------
    LoggingHandle
        Call ``disable()`` or use it as a context manager to remove the handler.
    """
    logger.enable(PACKAGE_NAME)

    if log_format == "short":
        format_str = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{function}</cyan> - "
            "<level>{message}</level>"
        )
    else:
        format_str = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        )

    handler_id = logger.add(sys.stderr, level=level, filter=_is_id3py_record, format=format_str)
    return LoggingHandle(handler_id)


def _is_id3py_record(record: Record) -> bool:
    name = record["name"]
    return name is not None and name.startswith(PACKAGE_NAME)
