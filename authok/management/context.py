"""Cooperative cancellation for management calls.

A ``Context`` is handed to a call through the ``context()`` request option.
The dispatcher checks it before sending and then waits for the response, the
deadline or a cancellation, whichever comes first.
"""
from __future__ import annotations

import threading
import time
from datetime import datetime, timezone
from typing import Callable, List, Optional

from .exceptions import DeadlineExceededError, RequestCancelledError


class Context:
    """Cancellation signal with an optional deadline.

    Usage:
        ctx = Context.with_timeout(2.0)
        api.user.read("authok|123", context(ctx))

        ctx = Context.with_cancel()
        threading.Timer(1.0, ctx.cancel).start()
    """

    def __init__(self, deadline: Optional[float] = None, parent: Optional["Context"] = None):
        self._cancelled = threading.Event()
        self._lock = threading.Lock()
        self._callbacks: List[Callable[[], None]] = []
        self._parent = parent
        if parent is not None and parent.deadline is not None:
            deadline = parent.deadline if deadline is None else min(deadline, parent.deadline)
        self.deadline = deadline

    @classmethod
    def background(cls) -> "Context":
        """A context that is never cancelled and has no deadline."""
        return cls()

    @classmethod
    def with_cancel(cls, parent: Optional["Context"] = None) -> "Context":
        return cls(parent=parent)

    @classmethod
    def with_timeout(cls, seconds: float, parent: Optional["Context"] = None) -> "Context":
        return cls(deadline=time.monotonic() + seconds, parent=parent)

    @classmethod
    def with_deadline(cls, when: datetime, parent: Optional["Context"] = None) -> "Context":
        if when.tzinfo is None:
            when = when.replace(tzinfo=timezone.utc)
        remaining = (when - datetime.now(timezone.utc)).total_seconds()
        return cls.with_timeout(remaining, parent=parent)

    def cancel(self) -> None:
        with self._lock:
            if self._cancelled.is_set():
                return
            self._cancelled.set()
            callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()

    def on_cancel(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Run ``callback`` when this context or one of its parents is cancelled.

        Runs it right away if that already happened. The callback may run
        more than once when a parent and the context itself are both cancelled.

        Returns:
            A function that unregisters the callback
        """
        with self._lock:
            fire_now = self._cancelled.is_set()
            if not fire_now:
                self._callbacks.append(callback)
        if fire_now:
            callback()
            return lambda: None

        remove_from_parent = self._parent.on_cancel(callback) if self._parent is not None else None

        def remove() -> None:
            with self._lock:
                if callback in self._callbacks:
                    self._callbacks.remove(callback)
            if remove_from_parent is not None:
                remove_from_parent()

        return remove

    @property
    def cancelled(self) -> bool:
        if self._cancelled.is_set():
            return True
        return self._parent is not None and self._parent.cancelled

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or None without a deadline."""
        if self.deadline is None:
            return None
        return max(self.deadline - time.monotonic(), 0.0)

    def error(self) -> Optional[Exception]:
        """Return the error describing why the context is done, if it is.

        Cancellation wins over an expired deadline.
        """
        if self.cancelled:
            return RequestCancelledError("context canceled")
        if self.expired:
            return DeadlineExceededError("context deadline exceeded")
        return None

    def raise_if_done(self) -> None:
        err = self.error()
        if err is not None:
            raise err
