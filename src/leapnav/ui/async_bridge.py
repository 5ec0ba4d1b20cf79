"""Async bridge: qasync event loop integration for PySide6."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any, TypeVar

from PySide6.QtWidgets import QApplication
from qasync import QEventLoop

logger = logging.getLogger(__name__)
T = TypeVar("T")
_SCHEDULED_TASKS: set[asyncio.Task[Any]] = set()


def create_event_loop(app: QApplication) -> QEventLoop:
    """Create and install a qasync event loop bridging Qt and asyncio."""
    loop = QEventLoop(app)
    asyncio.set_event_loop(loop)
    return loop


def schedule(coro: Coroutine[Any, Any, T]) -> asyncio.Task[T]:
    """Run ``coro`` as a tracked task; exceptions it leaks get logged."""
    task: asyncio.Task[T] = asyncio.create_task(coro)
    _SCHEDULED_TASKS.add(task)
    task.add_done_callback(_discard_task)
    task.add_done_callback(_log_exception)
    return task


async def settle(turns: int = 2) -> None:
    """Give Qt a few loop iterations to deliver focus and paint events."""
    for _ in range(turns):
        await asyncio.sleep(0)


def cancel_all_tasks() -> None:
    """Cancel every tracked task except the caller's."""
    current = asyncio.current_task()
    for task in list(_SCHEDULED_TASKS):
        if task is not current:
            task.cancel()


def _log_exception(task: asyncio.Future[Any]) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.exception("Unhandled exception in scheduled task", exc_info=exc)


def _discard_task(task: asyncio.Future[Any]) -> None:
    _SCHEDULED_TASKS.discard(task)  # type: ignore[arg-type]
