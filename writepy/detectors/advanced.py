"""Advanced writing checks.

Passive voice, wordy phrases, clichés, inconsistent number formatting and long
sentences. Phrase checks match case-insensitively while ``original_text`` keeps
the author's casing.
"""

import re

from writepy.core.types import Correction, Issue, IssueCategory, IssueSeverity, make_issue_id
from writepy.detectors.rules import PASSIVE_PARTICIPLES
from writepy.utils.constants import Constants
from writepy.utils.helpers import get_sentence_spans, get_words, slugify_phrase

# Most specific first: a later pattern never re-flags a covered span
_PASSIVE_PATTERNS: list[re.Pattern] = [
    # is/was being + participle
    re.compile(rf"\b(is|are|was|were|am)\s+being\s+({PASSIVE_PARTICIPLES})\b", re.IGNORECASE),
    # is/was/were + participle
    re.compile(rf"\b(is|are|was|were|am)\s+({PASSIVE_PARTICIPLES})\b", re.IGNORECASE),
    # has/have/had been + participle
    re.compile(rf"\b(has|have|had)\s+been\s+({PASSIVE_PARTICIPLES})\b", re.IGNORECASE),
    # will be + participle
    re.compile(rf"\bwill\s+be\s+({PASSIVE_PARTICIPLES})\b", re.IGNORECASE),
]

WORDY_PHRASES: list[tuple[str, list[str]]] = [
    ("in order to", ["to"]),
    ("due to the fact that", ["because"]),
    ("at this point in time", ["now"]),
    ("in the event that", ["if"]),
    ("for the purpose of", ["to", "for"]),
    ("in spite of the fact that", ["although", "despite"]),
    ("with regard to", ["about", "regarding"]),
    ("in the near future", ["soon"]),
    ("at the present time", ["now", "currently"]),
    ("in close proximity to", ["near"]),
    ("a large number of", ["many"]),
    ("a small number of", ["few"]),
    ("on a daily basis", ["daily"]),
    ("on a regular basis", ["regularly"]),
    ("in the process of", ["currently"]),
    ("has the ability to", ["can"]),
    ("is able to", ["can"]),
    ("make a decision", ["decide"]),
    ("take into consideration", ["consider"]),
    ("give consideration to", ["consider"]),
]

CLICHES: list[tuple[str, list[str]]] = [
    ("at the end of the day", ["ultimately", "in conclusion"]),
    ("think outside the box", ["be creative", "innovate"]),
    ("low-hanging fruit", ["easy wins", "quick opportunities"]),
    ("move the needle", ["make progress", "have impact"]),
    ("hit the ground running", ["start quickly", "begin immediately"]),
    ("take it to the next level", ["improve", "advance"]),
    ("give 110 percent", ["work hard", "do your best"]),
    ("push the envelope", ["innovate", "challenge limits"]),
    ("circle back", ["revisit", "return to"]),
    ("touch base", ["contact", "check in"]),
    ("deep dive", ["thorough analysis", "detailed examination"]),
    ("bandwidth", ["capacity", "availability"]),
    ("leverage", ["use", "utilize"]),
    ("synergy", ["collaboration", "combined effort"]),
    ("paradigm shift", ["fundamental change", "transformation"]),
    ("game changer", ["breakthrough", "significant development"]),
    ("best practices", ["recommended approaches", "proven methods"]),
    ("win-win", ["mutually beneficial", "advantageous for all"]),
    ("on the same page", ["in agreement", "aligned"]),
    ("drill down", ["examine closely", "analyze in detail"]),
]

# fmt: off
NUMBER_WORDS: list[str] = [
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine", "ten",
    "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen", "seventeen",
    "eighteen", "nineteen", "twenty",
]
# fmt: on

_DIGIT_NUMBER_RE = re.compile(r"\b([1-9]|1[0-9]|20)\b")
_WORD_NUMBER_RE = re.compile(rf"\b({'|'.join(NUMBER_WORDS)})\b", re.IGNORECASE)


def detect_passive_voice(text: str) -> list[Issue]:
    """Detect be-verb + past participle constructions.

    A span already flagged by an earlier (more specific) pattern is not flagged
    again by a later one.
    """
    issues: list[Issue] = []
    covered: list[tuple[int, int]] = []

    for pattern in _PASSIVE_PATTERNS:
        for match in pattern.finditer(text):
            start, end = match.start(), match.end()
            if any(start < c_end and end > c_start for c_start, c_end in covered):
                continue
            covered.append((start, end))
            issues.append(
                Issue(
                    id=make_issue_id("passive-voice-construction", start, end),
                    rule="passive-voice-construction",
                    category=IssueCategory.DELIVERY,
                    severity=IssueSeverity.SUGGESTION,
                    message="Consider using active voice",
                    description=(
                        "Passive voice can make writing less direct. "
                        "Consider rephrasing with active voice."
                    ),
                    start_index=start,
                    end_index=end,
                    original_text=match.group(0),
                    suggestions=(
                        Correction(
                            text="[rephrase with active voice]",
                            confidence=0.5,
                            description="Identify the actor and make them the subject",
                        ),
                    ),
                )
            )

    return issues


def _find_phrase(text: str, phrase: str) -> list[int]:
    """Return every non-overlapping, case-insensitive start offset of ``phrase``."""
    return [m.start() for m in re.finditer(re.escape(phrase), text, re.IGNORECASE)]


def detect_wordy_phrases(text: str) -> list[Issue]:
    """Detect wordy phrases and suggest concise alternatives."""
    issues: list[Issue] = []

    for phrase, alternatives in WORDY_PHRASES:
        rule = f"wordy-{slugify_phrase(phrase)}"
        joined = "' or '".join(alternatives)
        for found in _find_phrase(text, phrase):
            end = found + len(phrase)
            issues.append(
                Issue(
                    id=make_issue_id(rule, found, end),
                    rule=rule,
                    category=IssueCategory.CLARITY,
                    severity=IssueSeverity.SUGGESTION,
                    message=f"Wordy phrase: consider using '{alternatives[0]}'",
                    description=f"'{phrase}' can be simplified to '{joined}'.",
                    start_index=found,
                    end_index=end,
                    original_text=text[found:end],
                    suggestions=tuple(Correction(text=alt, confidence=0.8) for alt in alternatives),
                )
            )

    return issues


def detect_cliches(text: str) -> list[Issue]:
    """Detect clichés and suggest original alternatives."""
    issues: list[Issue] = []

    for phrase, alternatives in CLICHES:
        rule = f"cliche-{slugify_phrase(phrase)}"
        joined = "' or '".join(alternatives)
        for found in _find_phrase(text, phrase):
            end = found + len(phrase)
            issues.append(
                Issue(
                    id=make_issue_id(rule, found, end),
                    rule=rule,
                    category=IssueCategory.ENGAGEMENT,
                    severity=IssueSeverity.SUGGESTION,
                    message=f"Cliché detected: '{phrase}'",
                    description=f"Consider a more original expression like '{joined}'.",
                    start_index=found,
                    end_index=end,
                    original_text=text[found:end],
                    suggestions=tuple(Correction(text=alt, confidence=0.7) for alt in alternatives),
                )
            )

    return issues


def number_to_word(num: int) -> str:
    """Spell out 0-20; larger numbers are returned as digits."""
    if 0 <= num < len(NUMBER_WORDS):
        return NUMBER_WORDS[num]
    return str(num)


def detect_inconsistent_number_formatting(text: str) -> list[Issue]:
    """Flag the minority format when digits 1-20 and number words are mixed.

    On a tie the digits are flagged.
    """
    digit_matches = [
        (int(m.group(0)), m.start(), m.group(0)) for m in _DIGIT_NUMBER_RE.finditer(text)
    ]
    word_matches = [
        (NUMBER_WORDS.index(m.group(0).lower()), m.start(), m.group(0))
        for m in _WORD_NUMBER_RE.finditer(text)
    ]

    if not digit_matches or not word_matches:
        return []

    flag_digits = len(digit_matches) <= len(word_matches)
    issues: list[Issue] = []
    for value, index, matched in digit_matches if flag_digits else word_matches:
        end = index + len(matched)
        replacement = number_to_word(value) if flag_digits else str(value)
        issues.append(
            Issue(
                id=make_issue_id("inconsistent-number-format", index, end),
                rule="inconsistent-number-format",
                category=IssueCategory.DELIVERY,
                severity=IssueSeverity.SUGGESTION,
                message="Inconsistent number formatting detected",
                description=(
                    "Consider using consistent number formatting "
                    "(all digits or all words) throughout your text."
                ),
                start_index=index,
                end_index=end,
                original_text=matched,
                suggestions=(Correction(text=replacement, confidence=0.6),),
            )
        )
    return issues


def run_advanced_checks(text: str) -> list[Issue]:
    """Run every advanced check, sorted by start position."""
    issues: list[Issue] = [
        *detect_passive_voice(text),
        *detect_wordy_phrases(text),
        *detect_cliches(text),
        *detect_inconsistent_number_formatting(text),
    ]
    issues.sort(key=lambda issue: issue.start_index)
    return issues


def detect_long_sentences(
    text: str, max_words: int = Constants.DIFFICULT_SENTENCE_THRESHOLD
) -> list[Issue]:
    """Flag sentences with more than ``max_words`` words."""
    issues: list[Issue] = []
    for sentence, start, end in get_sentence_spans(text):
        word_count = len(get_words(sentence))
        if word_count <= max_words:
            continue
        issues.append(
            Issue(
                id=make_issue_id("long-sentence", start, end),
                rule="long-sentence",
                category=IssueCategory.CLARITY,
                severity=IssueSeverity.WARNING,
                message=f"Long sentence ({word_count} words)",
                description=(
                    f"This sentence has {word_count} words. Consider breaking it into "
                    "shorter sentences for better readability."
                ),
                start_index=start,
                end_index=end,
                original_text=sentence,
                suggestions=(
                    Correction(
                        text="[split into shorter sentences]",
                        confidence=0.5,
                        description="Break this sentence into two or more shorter sentences",
                    ),
                ),
            )
        )
    return issues
