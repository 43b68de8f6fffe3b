"""Threads, locks, condition variables and basic process and memory queries."""

from __future__ import annotations

import mmap
import os
import threading
import time
from collections import deque
from collections.abc import Callable
from typing import Any

_U32_MAX = 0xFFFFFFFF


def core_amount() -> int:
    """Return the number of processors available, or 0 when unknown."""
    count = os.cpu_count()
    return count if count and count > 0 else 0


def current_thread_sleep(millis: int) -> None:
    """Suspend the calling thread for millis milliseconds."""
    if millis < 0:
        raise ValueError(f"millis must not be negative, got {millis}")
    time.sleep(millis / 1000)


def current_thread_ident() -> int:
    """Return an identifier of the calling thread."""
    return threading.get_ident()


def page_size() -> int:
    """Return the size in bytes of a memory page."""
    return mmap.PAGESIZE


def reserve(amount: int) -> bytearray:
    """Return a zeroed block of amount memory pages."""
    stride = page_size()
    if amount <= 0:
        raise ValueError(f"amount must be positive, got {amount}")
    if stride > _U32_MAX // amount:
        raise ValueError(f"{amount} pages exceed the reservable size")
    return bytearray(amount * stride)


class Thread:
    """A thread running proc(ctxt) from the moment it is created."""

    def __init__(self, proc: Callable[[Any], Any], ctxt: Any = None) -> None:
        self._result: Any = None
        self._error: BaseException | None = None
        self._detached = False
        self._thread = threading.Thread(target=self._run, args=(proc, ctxt))
        self._thread.start()

    def _run(self, proc: Callable[[Any], Any], ctxt: Any) -> None:
        try:
            self._result = proc(ctxt)
        except BaseException as exc:  # handed over to wait()
            self._error = exc

    def wait(self) -> Any:
        """Block until the thread ends; return what proc returned."""
        if self._detached:
            raise RuntimeError("cannot wait for a detached thread")
        self._thread.join()
        if self._error is not None:
            raise self._error
        return self._result

    def detach(self) -> None:
        """Let the thread run on its own; it can no longer be waited for."""
        self._detached = True


class Lock:
    """A mutual-exclusion lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def enter(self) -> None:
        self._lock.acquire()

    def leave(self) -> None:
        self._lock.release()

    def __enter__(self) -> Lock:
        self.enter()
        return self

    def __exit__(self, *args) -> None:
        self.leave()


class Cond:
    """A condition variable that sleeps on any Lock handed to it."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._waiters: deque[threading.Lock] = deque()

    def sleep(self, lock: Lock) -> None:
        """Release lock, wait to be woken, then take lock again."""
        waiter = threading.Lock()
        waiter.acquire()
        with self._guard:
            self._waiters.append(waiter)
        lock.leave()
        try:
            waiter.acquire()
        finally:
            lock.enter()

    def wake(self) -> None:
        """Wake one sleeping thread, if any."""
        with self._guard:
            if self._waiters:
                self._waiters.popleft().release()

    def wake_all(self) -> None:
        """Wake every sleeping thread."""
        with self._guard:
            while self._waiters:
                self._waiters.popleft().release()