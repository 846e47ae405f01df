"""Unit tests for the analysis orchestrator."""

from writepy.analysis import orchestrator
from writepy.analysis.dismissals import DismissedPatternKey
from writepy.analysis.orchestrator import (
    analyze_text,
    create_empty_analysis_result,
    deduplicate_issues,
    filter_dismissed_issues,
)
from writepy.core.types import IssueCategory, IssueSeverity, ToneType


def _stub_detectors(monkeypatch, rules=(), advanced=(), readability=(), tone=()):
    """Replace every issue detector with one returning a fixed list."""
    monkeypatch.setattr(orchestrator, "analyze_with_rules", lambda _text: list(rules))
    monkeypatch.setattr(orchestrator, "run_advanced_checks", lambda _text: list(advanced))
    monkeypatch.setattr(
        orchestrator, "generate_readability_issues", lambda _text: list(readability)
    )
    monkeypatch.setattr(orchestrator, "generate_tone_issues", lambda _text: list(tone))


class TestEmptyInput:
    """Tests for empty and whitespace-only text."""

    def test_empty_string_returns_canonical_empty_result(self):
        """Empty text yields the canonical empty result."""
        assert analyze_text("") == create_empty_analysis_result()

    def test_whitespace_only_returns_canonical_empty_result(self):
        """Whitespace-only text is treated like empty text."""
        assert analyze_text("   \n\t ") == create_empty_analysis_result()

    def test_empty_result_has_perfect_scores(self):
        """Every score category is 100 for empty text."""
        score = create_empty_analysis_result().score
        assert (score.overall, score.correctness, score.clarity) == (100, 100, 100)
        assert (score.engagement, score.delivery) == (100, 100)

    def test_empty_result_has_zero_statistics(self):
        """All counts are zero for empty text."""
        stats = create_empty_analysis_result().statistics
        assert stats.word_count == 0
        assert stats.character_count == 0
        assert stats.sentence_count == 0
        assert stats.paragraph_count == 0
        assert stats.reading_time_minutes == 0

    def test_empty_result_is_fully_neutral(self):
        """Tone breakdown is 100% neutral with no issues."""
        result = create_empty_analysis_result()
        assert result.issues == ()
        assert result.tone.dominant == ToneType.NEUTRAL
        neutral = [b for b in result.tone.breakdown if b.tone == ToneType.NEUTRAL]
        assert neutral[0].percentage == 100
        assert sum(b.percentage for b in result.tone.breakdown) == 100


class TestPurity:
    """Tests for deterministic analysis."""

    def test_same_input_gives_equal_results(self):
        """Two calls with identical arguments produce equal results."""
        text = "I recieve alot of mail. Their going to the store in order to buy food."
        assert analyze_text(text) == analyze_text(text)

    def test_issue_ids_are_stable(self):
        """Issue ids do not change between calls."""
        text = "Teh cat sat on teh mat."
        first = [issue.id for issue in analyze_text(text).issues]
        second = [issue.id for issue in analyze_text(text).issues]
        assert first == second
        assert "typo-teh-0-3" in first


class TestDeduplication:
    """Tests for duplicate issue removal."""

    def test_same_span_and_rule_collapse(self, make_issue):
        """Issues sharing start, end and rule collapse to the first."""
        first = make_issue("long-sentence", 0, 10, "x" * 10, severity=IssueSeverity.WARNING)
        second = first.model_copy(update={"message": "duplicate"})
        assert deduplicate_issues([first, second]) == [first]

    def test_different_rules_on_same_span_are_kept(self, make_issue):
        """Distinct rules flagging the same span are both reported."""
        a = make_issue("typo-teh", 0, 3, "teh")
        b = make_issue("other-rule", 0, 3, "teh")
        assert deduplicate_issues([a, b]) == [a, b]

    def test_duplicates_across_detectors_keep_detector_order(self, monkeypatch, make_issue):
        """The readability copy of a long sentence wins over the tone copy."""
        text = "word " * 30
        readability_issue = make_issue("dup", 0, 4, "word", category=IssueCategory.CLARITY)
        tone_issue = make_issue("dup", 0, 4, "word", category=IssueCategory.DELIVERY)
        _stub_detectors(monkeypatch, readability=[readability_issue], tone=[tone_issue])

        result = analyze_text(text)

        assert result.issues == (readability_issue,)


class TestDismissedFiltering:
    """Tests for dismissed-pattern filtering."""

    def test_dismissed_pattern_is_case_insensitive(self, make_issue):
        """Keys hold lowercase text and match any casing of the issue text."""
        issue = make_issue("typo-teh", 0, 3, "Teh")
        dismissed = frozenset({DismissedPatternKey("typo-teh", "teh")})
        assert filter_dismissed_issues([issue], dismissed) == []

    def test_other_rules_are_not_filtered(self, make_issue):
        """A key only suppresses its own rule."""
        issue = make_issue("typo-teh", 0, 3, "teh")
        dismissed = frozenset({DismissedPatternKey("other", "teh")})
        assert filter_dismissed_issues([issue], dismissed) == [issue]

    def test_dismissal_does_not_change_metrics(self):
        """Readability, tone and statistics ignore dismissals."""
        text = "Teh cat sat on teh mat."
        full = analyze_text(text)
        dismissed = analyze_text(text, frozenset({DismissedPatternKey("typo-teh", "teh")}))

        assert not any(issue.rule == "typo-teh" for issue in dismissed.issues)
        assert dismissed.readability == full.readability
        assert dismissed.tone == full.tone
        assert dismissed.statistics == full.statistics
        assert dismissed.score.correctness > full.score.correctness


class TestOrdering:
    """Tests for result ordering."""

    def test_issues_sorted_by_start(self, monkeypatch, make_issue):
        """Final issues are in ascending start order."""
        late = make_issue("a", 10, 12, "xx")
        early = make_issue("b", 0, 2, "xx")
        middle = make_issue("c", 5, 7, "xx")
        _stub_detectors(monkeypatch, rules=[late], advanced=[early], tone=[middle])

        result = analyze_text("x" * 20)

        assert [issue.start_index for issue in result.issues] == [0, 5, 10]

    def test_equal_starts_keep_detector_order(self, monkeypatch, make_issue):
        """Sorting is stable for issues starting at the same position."""
        rule_issue = make_issue("rule", 0, 5, "xxxxx")
        advanced_issue = make_issue("advanced", 0, 3, "xxx")
        _stub_detectors(monkeypatch, rules=[rule_issue], advanced=[advanced_issue])

        result = analyze_text("x" * 20)

        assert [issue.rule for issue in result.issues] == ["rule", "advanced"]

    def test_real_text_issues_are_sorted(self):
        """Issues from every detector come out sorted."""
        text = "In order to win, i recieve alot of help. The letter was written by them."
        starts = [issue.start_index for issue in analyze_text(text).issues]
        assert starts == sorted(starts)
