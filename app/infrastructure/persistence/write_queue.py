"""FIFO serialization of store writers."""

from typing import Any, Awaitable, Callable, TypeVar
import asyncio

T = TypeVar("T")


class WriteQueue:
    """Runs async critical sections one at a time, in submission order.

    Backed by ``asyncio.Lock``, which hands the lock to waiters in the order
    they started waiting and does not let a newcomer jump ahead of queued
    waiters. One queue is owned by each store instance; there is no
    cross-process coordination.

    Example:
        queue = WriteQueue()
        result = await queue.run_exclusive(write_document, document)
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()

    async def run_exclusive(
        self, fn: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any
    ) -> T:
        """Await ``fn(*args, **kwargs)`` once every earlier caller has finished.

        The slot is released when ``fn`` returns or raises; the exception
        propagates to the caller and the next queued writer proceeds.
        """
        async with self._lock:
            return await fn(*args, **kwargs)
