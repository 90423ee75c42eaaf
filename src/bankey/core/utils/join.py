"""Join barrier — wait for N independent operations to finish.

Each operation calls :meth:`JoinGroup.enter` before it starts and
:meth:`JoinGroup.leave` when it finishes, whatever the outcome.
:meth:`JoinGroup.wait` resolves once the count drops back to zero.

``leave()`` is safe to call from the loop thread or from worker threads
(e.g. a callback-style client running on its own pool); the wakeup is
always delivered on the loop that owns the group.

Usage::

    group = JoinGroup()

    group.enter()
    asyncio.create_task(fetch_a(done=group.leave))
    group.enter()
    asyncio.create_task(fetch_b(done=group.leave))

    await group.wait()
"""

from __future__ import annotations

import asyncio
import threading


class JoinGroup:
    """Counting barrier bound to the running event loop."""

    def __init__(self) -> None:
        self._loop = asyncio.get_running_loop()
        self._lock = threading.Lock()
        self._count = 0
        self._done = asyncio.Event()
        self._done.set()

    @property
    def count(self) -> int:
        """Number of operations entered but not yet left."""
        with self._lock:
            return self._count

    def enter(self) -> None:
        """Register one more outstanding operation."""
        with self._lock:
            self._count += 1
            if self._count == 1:
                self._done.clear()

    def leave(self) -> None:
        """Mark one outstanding operation as finished.

        Raises:
            RuntimeError: if called more times than :meth:`enter`.
        """
        with self._lock:
            if self._count == 0:
                raise RuntimeError("JoinGroup.leave() called more times than enter()")
            self._count -= 1
            finished = self._count == 0

        if not finished:
            return
        if self._on_loop_thread():
            self._release()
        else:
            self._loop.call_soon_threadsafe(self._release)

    async def wait(self) -> None:
        """Block until every entered operation has left."""
        await self._done.wait()

    def _release(self) -> None:
        # A re-enter may have raced in between leave() and this callback.
        with self._lock:
            if self._count == 0:
                self._done.set()

    def _on_loop_thread(self) -> bool:
        try:
            return asyncio.get_running_loop() is self._loop
        except RuntimeError:
            return False
