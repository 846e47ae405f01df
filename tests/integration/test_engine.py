"""Integration tests for the stateful analysis engine."""

import asyncio
import threading

import pytest

from writepy.analysis.orchestrator import analyze_text, create_empty_analysis_result
from writepy.analysis.scheduler import (
    AsyncioTimerBackend,
    ManualTimerBackend,
    ThreadingTimerBackend,
)
from writepy.core.config import Config
from writepy.core.exceptions import OverlappingCorrectionsError
from writepy.core.types import Correction
from writepy.corrections.apply import SpanCorrection
from writepy.engine import AnalysisEngine


@pytest.fixture
def timer():
    return ManualTimerBackend()


@pytest.fixture
def delivered():
    return []


@pytest.fixture
def engine(timer, delivered):
    return AnalysisEngine(on_analysis_complete=delivered.append, timer=timer)


def _issue(engine, rule):
    return next(issue for issue in engine.result.issues if issue.rule == rule)


class TestDebouncedEditing:
    """Tests for scheduling through the engine."""

    def test_rapid_edits_deliver_once(self, engine, timer, delivered):
        """Three edits inside the window produce one result for the last text."""
        for text in ("I recieve", "I recieve teh", "I recieve teh mail."):
            engine.schedule(text)
            timer.advance(100)

        assert delivered == []
        assert engine.pending
        assert engine.text == "I recieve teh mail."

        timer.advance(400)

        assert delivered == [analyze_text("I recieve teh mail.")]
        assert engine.result == delivered[0]
        assert not engine.pending

    def test_analyze_immediate_supersedes_pending(self, engine, timer, delivered):
        """An immediate pass cancels the scheduled one."""
        engine.schedule("draft")
        result = engine.analyze_immediate("final draft")
        timer.advance(1000)

        assert delivered == [result]
        assert engine.text == "final draft"

    def test_cancel(self, engine, timer, delivered):
        """Cancelling keeps the text but drops the pending analysis."""
        engine.schedule("teh")
        engine.cancel()
        timer.advance(1000)
        assert delivered == []
        assert engine.text == "teh"

    def test_configured_delay(self, timer, delivered):
        """The debounce window comes from the configuration."""
        engine = AnalysisEngine(delivered.append, Config(debounce_ms=50), timer)
        engine.schedule("text")
        timer.advance(50)
        assert len(delivered) == 1


class TestCorrections:
    """Tests for corrections, undo and stale issues."""

    def test_correction_reanalyzes_and_records_history(self, engine, delivered):
        """A correction delivers the new result and can be undone."""
        engine.analyze_immediate("I recieve teh mail.")
        issue = _issue(engine, "typo-recieve")

        outcome = engine.apply_correction(issue, Correction(text="receive"))

        assert outcome.success
        assert engine.text == "I receive teh mail."
        assert engine.result == analyze_text("I receive teh mail.")
        assert delivered[-1] == engine.result
        assert engine.can_undo()

    def test_correction_cancels_pending_analysis(self, engine, timer, delivered):
        """A pending analysis of older text never overwrites the corrected result."""
        engine.analyze_immediate("I recieve mail.")
        issue = _issue(engine, "typo-recieve")
        engine.schedule("I recieve mail.")

        engine.apply_correction(issue, Correction(text="receive"))
        timer.advance(1000)

        assert engine.result == analyze_text("I receive mail.")
        assert len(delivered) == 2

    def test_stale_issue_fails_without_history(self, engine, timer, delivered):
        """An issue from an older text is rejected and the current text re-analyzed."""
        engine.analyze_immediate("I recieve mail.")
        stale = _issue(engine, "typo-recieve")
        engine.schedule("We recieve mail.")
        timer.advance(500)

        outcome = engine.apply_correction(stale, Correction(text="receive"))

        assert not outcome.success
        assert outcome.error == 'Text mismatch: expected "recieve" but found " reciev"'
        assert engine.text == "We recieve mail."
        assert engine.result == analyze_text("We recieve mail.")
        assert delivered[-1] == engine.result
        assert not engine.can_undo()

    def test_undo_restores_text_and_result(self, engine, delivered):
        """Undo brings back the text and result from before the correction."""
        before = engine.analyze_immediate("I recieve teh mail.")
        engine.apply_correction(_issue(engine, "typo-teh"), Correction(text="the"))

        entry = engine.undo()

        assert entry.text == "I recieve teh mail."
        assert engine.text == "I recieve teh mail."
        assert engine.result == before
        assert delivered[-1] == before
        assert not engine.can_undo()
        assert engine.undo() is None

    def test_undo_after_unanalyzed_edit(self, engine, timer):
        """The snapshot describes the text even when its analysis was still pending."""
        engine.schedule("teh cat")
        issue = next(i for i in analyze_text("teh cat").issues if i.rule == "typo-teh")

        engine.apply_correction(issue, Correction(text="the"))
        engine.undo()

        assert engine.text == "teh cat"
        assert engine.result == analyze_text("teh cat")

    def test_batch_is_one_undo_step(self, engine):
        """A batch of corrections is undone together."""
        engine.analyze_immediate("The quick brown fox jumps")
        outcome = engine.apply_corrections(
            [
                SpanCorrection(start_index=10, end_index=15, text="red"),
                SpanCorrection(start_index=0, end_index=3, text="A"),
            ]
        )

        assert outcome.text == "A quick red fox jumps"
        assert engine.text == "A quick red fox jumps"

        engine.undo()
        assert engine.text == "The quick brown fox jumps"
        assert not engine.can_undo()

    def test_overlapping_batch_leaves_state_untouched(self, engine, delivered):
        """A rejected batch changes nothing and delivers nothing."""
        engine.analyze_immediate("The quick brown fox jumps")
        result = engine.result

        with pytest.raises(OverlappingCorrectionsError):
            engine.apply_corrections(
                [
                    SpanCorrection(start_index=0, end_index=9, text="x"),
                    SpanCorrection(start_index=4, end_index=15, text="y"),
                ]
            )

        assert engine.text == "The quick brown fox jumps"
        assert engine.result == result
        assert len(delivered) == 1
        assert not engine.can_undo()

    def test_history_depth_comes_from_config(self, timer):
        """Only the configured number of corrections can be undone."""
        engine = AnalysisEngine(config=Config(max_history=1), timer=timer)
        engine.analyze_immediate("teh teh")
        for _ in range(2):
            engine.apply_correction(_issue(engine, "typo-teh"), Correction(text="the"))

        assert engine.text == "the the"
        engine.undo()
        assert engine.text == "the teh"
        assert engine.undo() is None

    def test_clear_history(self, engine):
        """Clearing the history keeps the text."""
        engine.analyze_immediate("teh")
        engine.apply_correction(_issue(engine, "typo-teh"), Correction(text="the"))
        engine.clear_history()
        assert not engine.can_undo()
        assert engine.text == "the"


class TestDismissals:
    """Tests for dismissing issues through the engine."""

    def test_dismiss_hides_every_occurrence(self, engine, delivered):
        """Dismissing one issue hides all issues with the same rule and text."""
        engine.analyze_immediate("teh cat and teh dog")
        key = engine.dismiss_issue(_issue(engine, "typo-teh"))

        assert str(key) == "typo-teh:teh"
        assert not any(issue.rule == "typo-teh" for issue in engine.result.issues)
        assert delivered[-1] == engine.result

    def test_dismissal_applies_to_later_analyses(self, engine, timer):
        """Dismissed patterns are used by scheduled analyses."""
        engine.analyze_immediate("teh cat")
        engine.dismiss_issue(_issue(engine, "typo-teh"))

        engine.schedule("teh dog")
        timer.advance(500)

        assert not any(issue.rule == "typo-teh" for issue in engine.result.issues)

    def test_undismiss_restores_issue(self, engine):
        """Undismissing brings the issue back."""
        engine.analyze_immediate("teh cat")
        issue = _issue(engine, "typo-teh")
        engine.dismiss_issue(issue)

        assert engine.undismiss_issue(issue)
        assert _issue(engine, "typo-teh") == issue
        assert not engine.undismiss_issue(issue)

    def test_dismissal_is_not_undoable(self, engine):
        """Undo only covers corrections."""
        engine.analyze_immediate("teh cat")
        engine.dismiss_issue(_issue(engine, "typo-teh"))
        assert not engine.can_undo()

    def test_export_and_restore(self, engine, timer):
        """Dismissals survive into a new engine through their exported state."""
        engine.analyze_immediate("teh cat")
        engine.dismiss_issue(_issue(engine, "typo-teh"))
        state = engine.dismissals.export_state()

        other = AnalysisEngine(timer=timer)
        other.analyze_immediate("teh cat")
        other.restore_dismissals(state)

        assert other.dismissed_patterns == engine.dismissed_patterns
        assert not any(issue.rule == "typo-teh" for issue in other.result.issues)

    def test_clear_dismissals(self, engine):
        """Clearing dismissals re-analyzes with nothing suppressed."""
        engine.analyze_immediate("teh cat")
        engine.dismiss_issue(_issue(engine, "typo-teh"))
        engine.clear_dismissals()
        assert engine.dismissed_patterns == frozenset()
        assert _issue(engine, "typo-teh")


class TestReset:
    """Tests for resetting the engine."""

    def test_reset_clears_everything(self, engine, timer, delivered):
        """Reset drops text, history, dismissals and pending work."""
        engine.analyze_immediate("teh cat")
        engine.dismiss_issue(_issue(engine, "typo-teh"))
        engine.analyze_immediate("I recieve")
        engine.apply_correction(_issue(engine, "typo-recieve"), Correction(text="receive"))
        engine.schedule("pending text")

        engine.reset()
        timer.advance(1000)

        assert engine.text == ""
        assert engine.result == create_empty_analysis_result()
        assert delivered[-1] == create_empty_analysis_result()
        assert engine.dismissed_patterns == frozenset()
        assert not engine.can_undo()
        assert not engine.pending

    def test_set_callback(self, engine):
        """Results go to the latest callback."""
        received = []
        engine.set_callback(received.append)
        engine.analyze_immediate("teh")
        assert len(received) == 1


class TestRealTimers:
    """Tests with the threading and asyncio backends."""

    def test_threading_backend(self):
        """The default backend delivers on a timer thread."""
        done = threading.Event()
        results = []

        def on_result(result):
            results.append(result)
            done.set()

        engine = AnalysisEngine(on_result, Config(debounce_ms=10), ThreadingTimerBackend())
        engine.schedule("teh cat")

        assert done.wait(timeout=5)
        assert results == [analyze_text("teh cat")]

    def test_asyncio_backend(self):
        """The asyncio backend delivers on the running loop."""

        async def scenario():
            results = []
            engine = AnalysisEngine(results.append, Config(debounce_ms=10), AsyncioTimerBackend())
            engine.schedule("teh")
            engine.schedule("teh cat")
            await asyncio.sleep(0.1)
            return results

        assert asyncio.run(scenario()) == [analyze_text("teh cat")]
