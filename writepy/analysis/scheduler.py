"""Debounced analysis scheduling.

Rapid edits are coalesced into one analysis pass that runs after a quiet
window. Timing goes through a ``TimerBackend`` so the same scheduler works with
threads, an asyncio loop, or a virtual clock in tests.
"""

import asyncio
import threading
from collections.abc import Callable
from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Any, Protocol

from loguru import logger

from writepy.analysis.dismissals import DismissedPatternKey
from writepy.analysis.orchestrator import analyze_text
from writepy.core.types import AnalysisResult
from writepy.utils.constants import Constants

AnalysisCallback = Callable[[AnalysisResult], None]
DismissedPatternsProvider = Callable[[], frozenset[DismissedPatternKey]]


class TimerBackend(Protocol):
    """A cancelable deferred task primitive."""

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> Any:
        """Run ``fn`` once after ``delay_ms`` milliseconds and return a handle."""

    def cancel(self, handle: Any) -> None:
        """Cancel a pending call; cancelling a fired or cancelled handle is a no-op."""


class ThreadingTimerBackend:
    """Runs callbacks on ``threading.Timer`` daemon threads."""

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay_ms / 1000, fn)
        timer.daemon = True
        timer.start()
        return timer

    def cancel(self, handle: threading.Timer) -> None:
        handle.cancel()


class AsyncioTimerBackend:
    """Runs callbacks on an asyncio event loop.

    Without an explicit loop, the running loop at scheduling time is used.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay_ms / 1000, fn)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()


@dataclass
class _ManualTask:
    due_ms: int
    sequence: int
    fn: Callable[[], None]
    cancelled: bool = False


class ManualTimerBackend:
    """Virtual clock; tasks only run when ``advance`` moves time past them.

    Tasks due at the same instant run in the order they were scheduled.
    """

    def __init__(self) -> None:
        self.now_ms = 0
        self._tasks: list[_ManualTask] = []
        self._sequence = 0

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> _ManualTask:
        self._sequence += 1
        task = _ManualTask(self.now_ms + delay_ms, self._sequence, fn)
        self._tasks.append(task)
        return task

    def cancel(self, handle: _ManualTask) -> None:
        handle.cancelled = True

    @property
    def pending_count(self) -> int:
        return sum(1 for task in self._tasks if not task.cancelled)

    def advance(self, ms: int) -> None:
        """Move the clock forward by ``ms``, running every task that falls due."""
        target = self.now_ms + ms
        while True:
            self._tasks = [task for task in self._tasks if not task.cancelled]
            due = [task for task in self._tasks if task.due_ms <= target]
            if not due:
                break
            task = min(due, key=lambda t: (t.due_ms, t.sequence))
            self._tasks.remove(task)
            self.now_ms = task.due_ms
            task.fn()
        self.now_ms = target


class DebouncedAnalyzer:
    """Coalesce analysis requests into one pass after a quiet window.

    Only one timer is tracked at a time: every ``schedule`` or
    ``analyze_immediate`` call cancels the previous one, so only the most
    recent text within the window is analyzed. A generation counter discards a
    threaded timer that fires after it was superseded.
    """

    def __init__(
        self,
        callback: AnalysisCallback,
        dismissed_patterns: DismissedPatternsProvider | None = None,
        delay_ms: int = Constants.DEBOUNCE_DELAY_MS,
        timer: TimerBackend | None = None,
        lock: AbstractContextManager | None = None,
    ) -> None:
        self._callback = callback
        self._dismissed_patterns = dismissed_patterns or frozenset
        self.delay_ms = delay_ms
        self._timer = timer if timer is not None else ThreadingTimerBackend()
        self._lock = lock if lock is not None else threading.RLock()
        self._handle: Any = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, text: str) -> None:
        """Analyze ``text`` once no other request arrives for ``delay_ms``."""
        with self._lock:
            self.cancel()
            generation = self._generation
            self._handle = self._timer.call_later(
                self.delay_ms, lambda: self._fire(generation, text)
            )
            logger.debug(f"Scheduled analysis of {len(text)} chars in {self.delay_ms}ms")

    def cancel(self) -> None:
        """Drop the pending timer, if any."""
        with self._lock:
            self._generation += 1
            if self._handle is None:
                return
            self._timer.cancel(self._handle)
            self._handle = None
            logger.debug("Cancelled pending analysis")

    def analyze_immediate(self, text: str) -> AnalysisResult:
        """Cancel any pending timer, then analyze and deliver synchronously."""
        with self._lock:
            self.cancel()
            result = analyze_text(text, self._dismissed_patterns())
            self._callback(result)
            return result

    def _fire(self, generation: int, text: str) -> None:
        with self._lock:
            if generation != self._generation:
                logger.debug("Discarded superseded analysis timer")
                return
            self._handle = None
            result = analyze_text(text, self._dismissed_patterns())
            self._callback(result)
