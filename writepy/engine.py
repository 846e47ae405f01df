"""Stateful analysis engine for one editing session.

The engine owns the current text, the latest analysis result, the dismissed
patterns and the undo history. Every public method runs under one re-entrant
lock, so a threaded debounce timer never interleaves with a synchronous call.
"""

import threading
from collections.abc import Iterable

from loguru import logger

from writepy.analysis.dismissals import DismissalManager, DismissedPatternKey
from writepy.analysis.orchestrator import analyze_text, create_empty_analysis_result
from writepy.analysis.scheduler import AnalysisCallback, DebouncedAnalyzer, TimerBackend
from writepy.core.config import Config
from writepy.core.types import AnalysisResult, Correction, Issue
from writepy.corrections.apply import (
    CorrectionResult,
    SpanCorrection,
    apply_correction_from_issue,
    apply_multiple_corrections,
)
from writepy.corrections.history import CorrectionHistory, HistoryEntry


class AnalysisEngine:
    """Debounced analysis with corrections, undo and dismissals.

    Args:
        on_analysis_complete: Called with every result that becomes current
        config: Debounce window, undo depth and dismissal cap
        timer: Timer backend for debounced analysis; threads by default
    """

    def __init__(
        self,
        on_analysis_complete: AnalysisCallback | None = None,
        config: Config | None = None,
        timer: TimerBackend | None = None,
    ) -> None:
        config = config or Config()
        self._lock = threading.RLock()
        self._callback = on_analysis_complete
        self._text = ""
        self._result = create_empty_analysis_result()
        # Text the current result was computed from; differs from _text while
        # a debounced analysis is pending
        self._result_text = ""
        self._dismissals = DismissalManager(config.max_dismissed_patterns)
        self._history = CorrectionHistory(config.max_history)
        self._scheduler = DebouncedAnalyzer(
            callback=self._deliver,
            dismissed_patterns=self._dismissals.keys,
            delay_ms=config.debounce_ms,
            timer=timer,
            lock=self._lock,
        )

    @property
    def text(self) -> str:
        return self._text

    @property
    def result(self) -> AnalysisResult:
        return self._result

    @property
    def dismissed_patterns(self) -> frozenset[DismissedPatternKey]:
        return self._dismissals.keys()

    @property
    def dismissals(self) -> DismissalManager:
        return self._dismissals

    @property
    def pending(self) -> bool:
        """True while a debounced analysis is waiting to fire."""
        return self._scheduler.pending

    def set_callback(self, callback: AnalysisCallback | None) -> None:
        with self._lock:
            self._callback = callback

    def _deliver(self, result: AnalysisResult) -> None:
        self._result = result
        self._result_text = self._text
        if self._callback is not None:
            self._callback(result)

    def _snapshot(self) -> HistoryEntry:
        """Current text with a result that is guaranteed to describe it."""
        if self._result_text == self._text:
            return HistoryEntry(text=self._text, result=self._result)
        result = analyze_text(self._text, self.dismissed_patterns)
        return HistoryEntry(text=self._text, result=result)

    def schedule(self, text: str) -> None:
        """Record ``text`` as current and analyze it after the quiet window."""
        with self._lock:
            self._text = text
            self._scheduler.schedule(text)

    def analyze_immediate(self, text: str) -> AnalysisResult:
        """Record ``text`` as current and analyze it now, cancelling any pending pass."""
        with self._lock:
            self._text = text
            return self._scheduler.analyze_immediate(text)

    def cancel(self) -> None:
        self._scheduler.cancel()

    def apply_correction(self, issue: Issue, correction: Correction) -> CorrectionResult:
        """Apply a correction to the current text.

        A pending debounced analysis is cancelled since its captured text
        predates the correction. The returned result becomes current and is
        delivered in both the success and the stale-issue case. Only a
        successful correction is recorded in the undo history.
        """
        with self._lock:
            prior = self._snapshot()
            outcome = apply_correction_from_issue(
                self._text, issue, correction, self.dismissed_patterns
            )
            self._scheduler.cancel()
            if outcome.success:
                self._history.push(prior)
                self._text = outcome.text
            self._deliver(outcome.result)
            return outcome

    def apply_corrections(self, corrections: Iterable[SpanCorrection]) -> CorrectionResult:
        """Apply a batch of corrections as a single undoable step.

        Raises:
            OverlappingCorrectionsError: If two corrections overlap; engine state
                is left untouched
        """
        with self._lock:
            prior = self._snapshot()
            outcome = apply_multiple_corrections(self._text, corrections, self.dismissed_patterns)
            self._scheduler.cancel()
            if outcome.text != prior.text:
                self._history.push(prior)
                self._text = outcome.text
            self._deliver(outcome.result)
            return outcome

    def undo(self) -> HistoryEntry | None:
        """Restore the state before the last correction.

        Returns:
            The restored entry, or None when there is nothing to undo
        """
        with self._lock:
            entry = self._history.pop()
            if entry is None:
                logger.debug("Nothing to undo")
                return None
            self._scheduler.cancel()
            self._text = entry.text
            self._deliver(entry.result)
            logger.debug(f"Undid correction, {len(self._history)} entries left")
            return entry

    def can_undo(self) -> bool:
        return self._history.can_undo()

    def clear_history(self) -> None:
        with self._lock:
            self._history.clear()

    def dismiss_issue(self, issue: Issue) -> DismissedPatternKey:
        """Suppress every occurrence of ``issue``'s rule and text, then re-analyze.

        Dismissal is not recorded in the undo history.
        """
        with self._lock:
            key = self._dismissals.dismiss(issue)
            self.analyze_immediate(self._text)
            return key

    def undismiss_issue(self, issue: Issue) -> bool:
        with self._lock:
            removed = self._dismissals.undismiss(issue)
            if removed:
                self.analyze_immediate(self._text)
            return removed

    def clear_dismissals(self) -> None:
        with self._lock:
            self._dismissals.reset()
            self.analyze_immediate(self._text)

    def restore_dismissals(self, state: Iterable[Iterable[str]]) -> None:
        """Load exported ``[rule, text]`` pairs and re-analyze the current text."""
        with self._lock:
            self._dismissals.import_state(state)
            self.analyze_immediate(self._text)

    def reset(self) -> None:
        """Clear text, dismissals and history, then deliver the empty result."""
        with self._lock:
            self._scheduler.cancel()
            self._dismissals.reset()
            self._history.clear()
            self._text = ""
            self._deliver(create_empty_analysis_result())
            logger.debug("Engine reset")
