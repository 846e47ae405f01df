"""Unit tests for readability, statistics and scoring."""

import math

import pytest

from writepy.core.types import IssueCategory, IssueSeverity
from writepy.detectors.readability import (
    calculate_average_word_length,
    calculate_flesch_kincaid_grade,
    calculate_readability,
    count_syllables,
    generate_readability_issues,
    get_education_level,
)
from writepy.detectors.score import (
    calculate_score_after_fix,
    calculate_writing_score,
    clamp_score,
    create_empty_score,
    get_score_description,
    is_perfect_score,
)
from writepy.detectors.statistics import (
    calculate_reading_time,
    calculate_statistics,
    count_paragraphs,
    count_sentences,
)


class TestSyllables:
    """Tests for the syllable heuristic."""

    @pytest.mark.parametrize(
        "word,expected",
        [("table", 2), ("beautiful", 3), ("the", 1), ("cake", 1), ("", 0), ("123", 0)],
    )
    def test_count_syllables(self, word, expected):
        """Vowel groups with silent-e and consonant-le adjustments."""
        assert count_syllables(word) == expected


class TestReadability:
    """Tests for Flesch-Kincaid metrics."""

    def test_empty_text(self):
        """Empty text has grade zero and the lowest level."""
        metrics = calculate_readability("")
        assert metrics.flesch_kincaid_grade == 0.0
        assert metrics.education_level == "Grade 1"
        assert metrics.average_sentence_length == 0.0
        assert metrics.difficult_sentences == ()

    @pytest.mark.parametrize(
        "grade,level",
        [(0, "Grade 1"), (-3.2, "Grade 1"), (9.4, "High School Freshman"), (25, "Graduate Level")],
    )
    def test_education_level_is_clamped(self, grade, level):
        """Grades outside the known range map to the nearest level."""
        assert get_education_level(grade) == level

    def test_grade_is_rounded_to_one_decimal(self):
        """The grade carries a single decimal."""
        grade = calculate_flesch_kincaid_grade("The cat sat on the mat. It was a sunny day.")
        assert grade == round(grade, 1)

    def test_average_word_length_ignores_punctuation(self):
        """Only letters and digits count toward word length."""
        assert calculate_average_word_length("Hi, you.") == 2.5

    def test_long_sentence_issue(self):
        """A sentence over 25 words is a clarity warning."""
        sentence = " ".join(["cat"] * 26)
        text = f"Short. {sentence}."
        (issue,) = generate_readability_issues(text)

        assert issue.rule == "long-sentence"
        assert issue.severity == IssueSeverity.WARNING
        assert issue.category == IssueCategory.CLARITY
        assert issue.original_text == sentence
        assert text[issue.start_index:issue.end_index] == sentence
        assert calculate_readability(text).difficult_sentences == (1,)

    def test_complex_vocabulary_issue(self):
        """Long average word length flags the whole text."""
        text = "Extraordinarily sophisticated terminology."
        issues = generate_readability_issues(text)
        (issue,) = [i for i in issues if i.rule == "complex-vocabulary"]
        assert (issue.start_index, issue.end_index) == (0, len(text))
        assert issue.severity == IssueSeverity.SUGGESTION

    def test_blank_text_has_no_issues(self):
        """Whitespace produces nothing."""
        assert generate_readability_issues("   ") == []


class TestStatistics:
    """Tests for raw text statistics."""

    def test_statistics(self):
        """Words, sentences and paragraphs are counted from the raw text."""
        stats = calculate_statistics("Hello world. This is a test!\n\nSecond paragraph here.")
        assert stats.word_count == 9
        assert stats.sentence_count == 3
        assert stats.paragraph_count == 2
        assert stats.reading_time_minutes == 1
        assert stats.average_sentence_length == 3.0

    def test_empty_text(self):
        """Empty text is all zeros."""
        stats = calculate_statistics("")
        assert stats.word_count == 0
        assert stats.sentence_count == 0
        assert stats.paragraph_count == 0
        assert stats.reading_time_minutes == 0

    def test_punctuation_runs_count_once(self):
        """'?!' ends a single sentence."""
        assert count_sentences("Really?! Yes.") == 2

    def test_text_without_blank_lines_is_one_paragraph(self):
        """A single block of text is one paragraph."""
        assert count_paragraphs("one line\nanother line") == 1

    def test_reading_time_rounds_up(self):
        """Any partial minute counts as a whole one."""
        assert calculate_reading_time(201) == 2


class TestScore:
    """Tests for the writing score."""

    def test_no_issues_is_perfect(self):
        """Without issues every score is 100."""
        score = calculate_writing_score([])
        assert score == create_empty_score()
        assert is_perfect_score(score)

    def test_one_correctness_error(self, make_issue):
        """One error costs 15 correctness points and 6 overall."""
        score = calculate_writing_score([make_issue("typo-teh", 0, 3, "teh")])
        assert score.correctness == 85
        assert score.overall == 94
        assert score.clarity == score.engagement == score.delivery == 100
        assert not is_perfect_score(score)

    def test_severity_weights(self, make_issue):
        """Warnings cost 10 points and suggestions 5."""
        warning = make_issue(
            "a", 0, 1, "a", category=IssueCategory.CLARITY, severity=IssueSeverity.WARNING
        )
        suggestion = make_issue(
            "b", 2, 3, "b", category=IssueCategory.DELIVERY, severity=IssueSeverity.SUGGESTION
        )
        score = calculate_writing_score([warning, suggestion])
        assert score.clarity == 90
        assert score.delivery == 95

    def test_scores_do_not_go_below_zero(self, make_issue):
        """Many issues clamp a category at zero."""
        issues = [make_issue("typo", i, i + 1, "x") for i in range(20)]
        assert calculate_writing_score(issues).correctness == 0

    def test_score_after_fix(self, make_issue):
        """Removing the only issue restores a perfect score."""
        issue = make_issue("typo-teh", 0, 3, "teh")
        assert is_perfect_score(calculate_score_after_fix([issue], issue.id))

    @pytest.mark.parametrize(
        "value,expected", [(math.nan, 0), (math.inf, 0), (-5, 0), (150, 100), (84.5, 85)]
    )
    def test_clamp_score(self, value, expected):
        """Scores round half up into [0, 100]; non-finite values become 0."""
        assert clamp_score(value) == expected

    @pytest.mark.parametrize(
        "value,description",
        [
            (95, "Excellent"),
            (90, "Excellent"),
            (85, "Very Good"),
            (70, "Good"),
            (65, "Fair"),
            (50, "Needs Improvement"),
            (45, "Poor"),
            (10, "Very Poor"),
        ],
    )
    def test_score_description(self, value, description):
        """Each band has its own description."""
        assert get_score_description(value) == description
