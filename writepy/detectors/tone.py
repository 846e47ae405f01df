"""Tone classification.

Tone is estimated by counting indicator words per tone. Sentence-level tones
are compared against the dominant tone of the whole text to find
inconsistencies.
"""

from typing import NamedTuple

from writepy.core.types import (
    TONE_TYPES,
    Correction,
    Issue,
    IssueCategory,
    IssueSeverity,
    ToneAnalysis,
    ToneBreakdown,
    ToneInconsistency,
    ToneType,
    make_issue_id,
)
from writepy.utils.constants import Constants
from writepy.utils.helpers import compile_word_regex, get_sentence_spans, is_blank, truncate

# fmt: off
FORMAL_INDICATORS: tuple[str, ...] = (
    "therefore", "consequently", "furthermore", "moreover", "nevertheless",
    "notwithstanding", "henceforth", "hereby", "whereas", "whereby",
    "accordingly", "subsequently", "thus", "hence", "regarding",
    "concerning", "pertaining", "pursuant", "aforementioned", "herein",
    "shall", "ought", "must", "require", "necessitate",
    "demonstrate", "indicate", "illustrate", "establish", "constitute",
    "facilitate", "implement", "utilize", "endeavor", "commence",
    "terminate", "ascertain", "procure", "substantiate", "corroborate",
)

INFORMAL_INDICATORS: tuple[str, ...] = (
    "gonna", "wanna", "gotta", "kinda", "sorta", "dunno", "lemme",
    "yeah", "yep", "nope", "okay", "ok", "cool", "awesome", "stuff",
    "things", "lots", "tons", "super", "really", "pretty", "kind of",
    "sort of", "like", "basically", "actually", "literally", "totally",
    "absolutely", "definitely", "honestly", "seriously", "obviously",
    "hey", "hi", "bye", "thanks", "cheers", "lol", "omg", "btw",
    "don't", "won't", "can't", "shouldn't", "wouldn't", "couldn't",
    "isn't", "aren't", "wasn't", "weren't", "haven't", "hasn't",
)

CONFIDENT_INDICATORS: tuple[str, ...] = (
    "will", "must", "certainly", "definitely", "absolutely", "clearly",
    "undoubtedly", "unquestionably", "without doubt", "assuredly",
    "guaranteed", "proven", "established", "confirmed", "verified",
    "know", "believe", "confident", "sure", "certain", "convinced",
    "determined", "committed", "dedicated", "focused", "driven",
    "achieve", "accomplish", "succeed", "excel", "lead", "dominate",
    "best", "top", "premier", "leading", "superior", "exceptional",
    "always", "never", "every", "all", "none", "complete", "total",
)

FRIENDLY_INDICATORS: tuple[str, ...] = (
    "please", "thank", "thanks", "appreciate", "grateful", "welcome",
    "glad", "happy", "delighted", "pleased", "excited", "thrilled",
    "wonderful", "great", "fantastic", "amazing", "lovely", "nice",
    "help", "support", "assist", "guide", "share", "together",
    "we", "us", "our", "team", "community", "family", "friends",
    "hope", "wish", "look forward", "enjoy", "love", "care",
    "feel free", "no problem", "of course", "happy to", "glad to",
    "smile", "laugh", "fun", "joy", "warm", "kind", "gentle",
)
# fmt: on

TONE_INDICATORS: dict[ToneType, tuple[str, ...]] = {
    ToneType.FORMAL: FORMAL_INDICATORS,
    ToneType.INFORMAL: INFORMAL_INDICATORS,
    ToneType.CONFIDENT: CONFIDENT_INDICATORS,
    ToneType.FRIENDLY: FRIENDLY_INDICATORS,
}

# (detected, expected) -> (suggestion text, confidence, description)
_TONE_SUGGESTIONS: dict[tuple[ToneType, ToneType], tuple[str, float, str]] = {
    (ToneType.INFORMAL, ToneType.FORMAL): (
        "[rephrase formally]",
        0.6,
        "Replace contractions and casual words with formal alternatives",
    ),
    (ToneType.FORMAL, ToneType.INFORMAL): (
        "[rephrase casually]",
        0.6,
        "Use contractions and simpler words for a more casual tone",
    ),
}


class SentenceTone(NamedTuple):
    """Tone of a single sentence and its position in the text."""

    text: str
    start_index: int
    end_index: int
    tone: ToneType
    scores: dict[ToneType, int]


class SentenceToneAnalysis(NamedTuple):
    tone: ToneType
    scores: dict[ToneType, int]
    breakdown: tuple[ToneBreakdown, ...]


def count_indicators(text: str, indicators: tuple[str, ...]) -> int:
    """Count whole-word, case-insensitive occurrences of every indicator."""
    return sum(len(compile_word_regex(indicator).findall(text)) for indicator in indicators)


def calculate_tone_scores(text: str) -> dict[ToneType, int]:
    """Raw indicator counts per tone.

    Neutral scores 1 only when no other indicator is present, so text with any
    clear indicator is never classified as neutral.
    """
    scores = {tone: count_indicators(text, words) for tone, words in TONE_INDICATORS.items()}
    scores[ToneType.NEUTRAL] = 0 if sum(scores.values()) else 1
    return {tone: scores[tone] for tone in TONE_TYPES}


def _neutral_breakdown() -> tuple[ToneBreakdown, ...]:
    return tuple(
        ToneBreakdown(tone=tone, percentage=100 if tone == ToneType.NEUTRAL else 0)
        for tone in TONE_TYPES
    )


def normalize_to_percentages(scores: dict[ToneType, int]) -> tuple[ToneBreakdown, ...]:
    """Convert raw scores to integer percentages summing to exactly 100.

    Rounding drift is absorbed by the largest entry (the first one on ties).
    """
    total = sum(scores.values())
    if total == 0:
        return _neutral_breakdown()

    # Half up, not banker's rounding
    percentages = [int(scores[tone] * 100 / total + 0.5) for tone in TONE_TYPES]
    drift = 100 - sum(percentages)
    if drift:
        largest = percentages.index(max(percentages))
        percentages[largest] += drift

    return tuple(
        ToneBreakdown(tone=tone, percentage=pct) for tone, pct in zip(TONE_TYPES, percentages)
    )


def get_dominant_tone(scores: dict[ToneType, int]) -> ToneType:
    """Tone with the highest score; the first in tone order wins a tie."""
    return max(TONE_TYPES, key=lambda tone: scores[tone])


def analyze_sentence_tones(text: str) -> list[SentenceTone]:
    sentence_tones: list[SentenceTone] = []
    for sentence, start, end in get_sentence_spans(text):
        scores = calculate_tone_scores(sentence)
        sentence_tones.append(SentenceTone(sentence, start, end, get_dominant_tone(scores), scores))
    return sentence_tones


def detect_inconsistencies(
    sentence_tones: list[SentenceTone], dominant: ToneType
) -> tuple[ToneInconsistency, ...]:
    """Find sentences whose own tone clearly outweighs the dominant tone.

    Neutral is compatible with everything: a neutral sentence or a neutral
    dominant tone never produces an inconsistency.
    """
    if dominant == ToneType.NEUTRAL:
        return ()

    return tuple(
        ToneInconsistency(
            start_index=sentence.start_index,
            end_index=sentence.end_index,
            detected_tone=sentence.tone,
            expected_tone=dominant,
        )
        for sentence in sentence_tones
        if sentence.tone not in (dominant, ToneType.NEUTRAL)
        and sentence.scores[sentence.tone] > sentence.scores[dominant]
    )


def analyze_tone(text: str) -> ToneAnalysis:
    """Analyze the tone of text.

    Args:
        text: Text to analyze

    Returns:
        ToneAnalysis with the dominant tone, a breakdown over every tone type,
        a consistency flag and the sentence-level inconsistencies
    """
    if is_blank(text):
        return ToneAnalysis(
            dominant=ToneType.NEUTRAL,
            breakdown=_neutral_breakdown(),
            is_consistent=True,
            inconsistencies=(),
        )

    scores = calculate_tone_scores(text)
    dominant = get_dominant_tone(scores)
    inconsistencies = detect_inconsistencies(analyze_sentence_tones(text), dominant)

    return ToneAnalysis(
        dominant=dominant,
        breakdown=normalize_to_percentages(scores),
        is_consistent=not inconsistencies,
        inconsistencies=inconsistencies,
    )


def get_tone_suggestions(current: ToneType, target: ToneType) -> tuple[Correction, ...]:
    """Placeholder rewrite hints for moving a sentence from one tone to another."""
    if (current, target) in _TONE_SUGGESTIONS:
        text, confidence, description = _TONE_SUGGESTIONS[(current, target)]
    elif current == ToneType.CONFIDENT:
        text, confidence, description = (
            "[soften language]",
            0.6,
            'Use hedging words like "may", "might", "could" to soften assertions',
        )
    elif target == ToneType.FRIENDLY:
        text, confidence, description = (
            "[add warmth]",
            0.6,
            "Add personal pronouns and positive language",
        )
    else:
        text, confidence, description = (
            "[adjust tone]",
            0.5,
            f"Rephrase to match the {target.value} tone of the rest of the text",
        )
    return (Correction(text=text, confidence=confidence, description=description),)


def generate_tone_issues(text: str) -> list[Issue]:
    """One delivery suggestion per tone inconsistency."""
    analysis = analyze_tone(text)
    dominant = analysis.dominant.value
    issues: list[Issue] = []

    for inconsistency in analysis.inconsistencies:
        start, end = inconsistency.start_index, inconsistency.end_index
        detected = inconsistency.detected_tone.value
        issues.append(
            Issue(
                id=make_issue_id("tone-inconsistency", start, end),
                rule="tone-inconsistency",
                category=IssueCategory.DELIVERY,
                severity=IssueSeverity.SUGGESTION,
                message=f"Tone inconsistency: {detected} tone in {dominant} text",
                description=(
                    f"This sentence has a {detected} tone, but the overall text is "
                    f"{dominant}. Consider adjusting for consistency."
                ),
                start_index=start,
                end_index=end,
                original_text=truncate(text[start:end], Constants.TRUNCATE_LENGTH),
                suggestions=get_tone_suggestions(
                    inconsistency.detected_tone, inconsistency.expected_tone
                ),
            )
        )

    return issues


def has_mixed_tones(text: str) -> bool:
    """True when at least two sentences carry different non-neutral tones."""
    sentence_tones = analyze_sentence_tones(text)
    if len(sentence_tones) < 2:
        return False
    return len({s.tone for s in sentence_tones if s.tone != ToneType.NEUTRAL}) > 1


def analyze_sentence_tone(sentence: str) -> SentenceToneAnalysis:
    scores = calculate_tone_scores(sentence)
    return SentenceToneAnalysis(get_dominant_tone(scores), scores, normalize_to_percentages(scores))


def is_valid_tone_analysis(analysis: ToneAnalysis) -> bool:
    """Check that every tone is present once and percentages are >= 0 and sum to 100."""
    tones = [entry.tone for entry in analysis.breakdown]
    if len(tones) != len(TONE_TYPES) or set(tones) != set(TONE_TYPES):
        return False
    if any(entry.percentage < 0 for entry in analysis.breakdown):
        return False
    return sum(entry.percentage for entry in analysis.breakdown) == 100
