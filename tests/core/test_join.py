"""Tests for bankey.core.utils.join — JoinGroup barrier."""

from __future__ import annotations

import asyncio
import threading

import pytest

from bankey.core.utils.join import JoinGroup

pytestmark = pytest.mark.smoke


async def test_wait_with_nothing_entered_returns_immediately():
    group = JoinGroup()
    await asyncio.wait_for(group.wait(), timeout=1)


async def test_wait_blocks_until_all_leave():
    group = JoinGroup()
    group.enter()
    group.enter()

    waiter = asyncio.create_task(group.wait())
    await asyncio.sleep(0)
    assert not waiter.done()

    group.leave()
    await asyncio.sleep(0)
    assert not waiter.done()
    assert group.count == 1

    group.leave()
    await asyncio.wait_for(waiter, timeout=1)
    assert group.count == 0


async def test_leave_more_than_enter_raises():
    group = JoinGroup()
    group.enter()
    group.leave()
    with pytest.raises(RuntimeError, match="more times"):
        group.leave()


async def test_leave_from_worker_thread():
    group = JoinGroup()
    group.enter()
    group.enter()

    def worker() -> None:
        group.leave()

    threads = [threading.Thread(target=worker) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    await asyncio.wait_for(group.wait(), timeout=1)


async def test_group_is_reusable_after_release():
    group = JoinGroup()
    group.enter()
    group.leave()
    await group.wait()

    group.enter()
    waiter = asyncio.create_task(group.wait())
    await asyncio.sleep(0)
    assert not waiter.done()
    group.leave()
    await asyncio.wait_for(waiter, timeout=1)


def test_requires_running_loop():
    with pytest.raises(RuntimeError):
        JoinGroup()
