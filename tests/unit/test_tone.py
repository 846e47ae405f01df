"""Unit tests for tone classification."""

from writepy.core.types import IssueCategory, IssueSeverity, ToneBreakdown, ToneType
from writepy.detectors.tone import (
    analyze_sentence_tone,
    analyze_tone,
    calculate_tone_scores,
    generate_tone_issues,
    get_dominant_tone,
    get_tone_suggestions,
    has_mixed_tones,
    is_valid_tone_analysis,
    normalize_to_percentages,
)

MIXED = (
    "Therefore we must consequently implement the plan accordingly. "
    "Yeah this stuff is totally cool lol."
)


def _percentages(analysis):
    return {entry.tone: entry.percentage for entry in analysis.breakdown}


class TestToneScores:
    """Tests for indicator counting and percentages."""

    def test_neutral_only_without_other_indicators(self):
        """Neutral scores one only when nothing else matched."""
        assert calculate_tone_scores("The sky.")[ToneType.NEUTRAL] == 1
        assert calculate_tone_scores("Therefore the sky.")[ToneType.NEUTRAL] == 0

    def test_indicators_match_whole_words(self):
        """'totally' is not counted as the confident word 'total'."""
        assert calculate_tone_scores("totally")[ToneType.CONFIDENT] == 0
        assert calculate_tone_scores("totally")[ToneType.INFORMAL] == 1

    def test_percentages_sum_to_100(self):
        """Rounding drift goes to the largest entry."""
        scores = {tone: 1 for tone in ToneType}
        scores[ToneType.NEUTRAL] = 0
        scores[ToneType.FRIENDLY] = 0
        breakdown = normalize_to_percentages(scores)
        assert sum(entry.percentage for entry in breakdown) == 100
        assert breakdown[0] == ToneBreakdown(tone=ToneType.FORMAL, percentage=34)

    def test_tie_prefers_first_tone(self):
        """On a tie, tone order decides."""
        scores = {tone: 0 for tone in ToneType}
        scores[ToneType.FRIENDLY] = 2
        scores[ToneType.INFORMAL] = 2
        assert get_dominant_tone(scores) == ToneType.INFORMAL


class TestAnalyzeTone:
    """Tests for whole-text tone analysis."""

    def test_empty_text_is_neutral(self):
        """Blank text is fully neutral and consistent."""
        analysis = analyze_tone("")
        assert analysis.dominant == ToneType.NEUTRAL
        assert analysis.is_consistent
        assert _percentages(analysis)[ToneType.NEUTRAL] == 100
        assert is_valid_tone_analysis(analysis)

    def test_mixed_text(self):
        """A casual sentence in formal text is an inconsistency."""
        analysis = analyze_tone(MIXED)

        assert analysis.dominant == ToneType.FORMAL
        assert not analysis.is_consistent
        assert _percentages(analysis) == {
            ToneType.FORMAL: 42,
            ToneType.INFORMAL: 42,
            ToneType.CONFIDENT: 8,
            ToneType.NEUTRAL: 0,
            ToneType.FRIENDLY: 8,
        }
        (inconsistency,) = analysis.inconsistencies
        assert inconsistency.detected_tone == ToneType.INFORMAL
        assert inconsistency.expected_tone == ToneType.FORMAL
        assert MIXED[inconsistency.start_index:inconsistency.end_index] == (
            "Yeah this stuff is totally cool lol."
        )
        assert is_valid_tone_analysis(analysis)

    def test_neutral_sentences_are_never_inconsistent(self):
        """A sentence without indicators fits any tone."""
        analysis = analyze_tone("Therefore we proceed accordingly. The sky is blue.")
        assert analysis.is_consistent

    def test_breakdown_covers_every_tone(self):
        """Every tone appears once in the breakdown."""
        analysis = analyze_tone("Thanks so much, we appreciate your help!")
        assert [entry.tone for entry in analysis.breakdown] == list(ToneType)

    def test_invalid_breakdown_is_detected(self):
        """A breakdown that does not sum to 100 is invalid."""
        analysis = analyze_tone("").model_copy(
            update={"breakdown": (ToneBreakdown(tone=ToneType.NEUTRAL, percentage=100),)}
        )
        assert not is_valid_tone_analysis(analysis)


class TestToneIssues:
    """Tests for tone issues and suggestions."""

    def test_issue_per_inconsistency(self):
        """Each inconsistent sentence becomes a delivery suggestion."""
        (issue,) = generate_tone_issues(MIXED)
        assert issue.rule == "tone-inconsistency"
        assert issue.category == IssueCategory.DELIVERY
        assert issue.severity == IssueSeverity.SUGGESTION
        assert issue.original_text == "Yeah this stuff is totally cool lol."
        assert issue.suggestions[0].text == "[rephrase formally]"
        assert issue.message == "Tone inconsistency: informal tone in formal text"

    def test_long_sentence_snapshot_is_truncated(self):
        """Sentences over 50 characters are quoted with an ellipsis."""
        casual = "Yeah the quarterly numbers from the northern region look totally cool."
        text = f"Therefore we must consequently implement the plan accordingly. {casual}"
        (issue,) = generate_tone_issues(text)
        assert issue.original_text == casual[:50] + "..."

    def test_consistent_text_has_no_issues(self):
        """No inconsistencies, no issues."""
        assert generate_tone_issues("Therefore we must proceed accordingly.") == []

    def test_suggestions(self):
        """Suggestion text depends on the detected and expected tones."""
        assert get_tone_suggestions(ToneType.FORMAL, ToneType.INFORMAL)[0].text == (
            "[rephrase casually]"
        )
        assert get_tone_suggestions(ToneType.CONFIDENT, ToneType.FORMAL)[0].text == (
            "[soften language]"
        )
        assert get_tone_suggestions(ToneType.FORMAL, ToneType.FRIENDLY)[0].text == "[add warmth]"
        (fallback,) = get_tone_suggestions(ToneType.FRIENDLY, ToneType.FORMAL)
        assert fallback.text == "[adjust tone]"
        assert fallback.confidence == 0.5


class TestSentenceHelpers:
    """Tests for sentence-level helpers."""

    def test_has_mixed_tones(self):
        """Two sentences with different clear tones are mixed."""
        assert has_mixed_tones(MIXED)
        assert not has_mixed_tones("Therefore we proceed.")

    def test_analyze_sentence_tone(self):
        """A single sentence gets its own tone and breakdown."""
        analysis = analyze_sentence_tone("Yeah this is cool.")
        assert analysis.tone == ToneType.INFORMAL
        assert sum(entry.percentage for entry in analysis.breakdown) == 100
