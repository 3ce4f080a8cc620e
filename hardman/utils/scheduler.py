"""
Cancellable timers

Game engines and the motivation loop never sleep in a loop; they schedule a
single callback and keep the handle so it can be cancelled when the state that
owns it changes.
"""
import asyncio
import inspect
import logging
from typing import Callable, Optional, Protocol, Set

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def schedule(self, delay_ms: int, callback: Callable[[], object]) -> TimerHandle: ...


class AsyncioScheduler:
    """Scheduler backed by loop.call_later; coroutine callbacks become tasks"""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop
        self._tasks: Set[asyncio.Task] = set()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def schedule(self, delay_ms: int, callback: Callable[[], object]) -> asyncio.TimerHandle:
        return self.loop.call_later(delay_ms / 1000, self._run, callback)

    def _run(self, callback: Callable[[], object]) -> None:
        try:
            result = callback()
        except Exception as e:
            logger.error(f"Scheduled callback {callback!r} failed: {e}", exc_info=True)
            return
        if inspect.iscoroutine(result):
            task = self.loop.create_task(result)
            self._tasks.add(task)
            task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(f"Scheduled task failed: {error}", exc_info=error)


def cancel_timer(handle: Optional[TimerHandle]) -> None:
    """Cancel a handle if there is one"""
    if handle is not None:
        handle.cancel()
