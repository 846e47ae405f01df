"""Regex rule engine with position tracking for inline highlighting."""

import re
from collections.abc import Callable
from dataclasses import dataclass
from re import Pattern

from writepy.core.types import Correction, Issue, IssueCategory, IssueSeverity, make_issue_id

SuggestionFn = Callable[[str, str], list[Correction]]


@dataclass(frozen=True)
class RuleMatch:
    """A match found by a rule pattern."""

    text: str
    start_index: int
    end_index: int


@dataclass(frozen=True)
class AnalysisRule:
    """A single regex-driven rule."""

    id: str
    category: IssueCategory
    severity: IssueSeverity
    pattern: Pattern
    message: str
    description: str
    get_suggestions: SuggestionFn


def _fixed(*texts: str, confidence: float = 1.0) -> SuggestionFn:
    """Suggestion factory returning the same corrections for every match."""
    return lambda _match, _context: [Correction(text=t, confidence=confidence) for t in texts]


def _alternatives(table: dict[str, list[str]], confidence: float) -> SuggestionFn:
    """Suggestion factory keyed on the lower-cased match."""

    def suggest(match: str, _context: str) -> list[Correction]:
        return [Correction(text=t, confidence=confidence) for t in table.get(match.lower(), [])]

    return suggest


def _typo(
    rule_id: str, pattern: str, target: str, description: str, message: str | None = None
) -> AnalysisRule:
    return AnalysisRule(
        id=rule_id,
        category=IssueCategory.CORRECTNESS,
        severity=IssueSeverity.ERROR,
        pattern=re.compile(pattern, re.IGNORECASE),
        message=message or f"Spelling error: should be '{target}'",
        description=description,
        get_suggestions=_fixed(target),
    )


def _contraction(word: str, fixed: str, expansion: str) -> AnalysisRule:
    # Case-sensitive: 'Wont' or 'CANT' may be proper nouns or acronyms
    return AnalysisRule(
        id=f"contraction-{word}",
        category=IssueCategory.CORRECTNESS,
        severity=IssueSeverity.ERROR,
        pattern=re.compile(rf"\b{word}\b"),
        message=f"Missing apostrophe: should be '{fixed}'",
        description=f"Contraction of '{expansion}' requires an apostrophe.",
        get_suggestions=_fixed(fixed),
    )


def _confused(
    rule_id: str, table: dict[str, list[str]], confidence: float, description: str
) -> AnalysisRule:
    words = "|".join(re.escape(w) for w in table)
    label = "/".join(table)
    return AnalysisRule(
        id=rule_id,
        category=IssueCategory.CORRECTNESS,
        severity=IssueSeverity.WARNING,
        pattern=re.compile(rf"\b({words})\b", re.IGNORECASE),
        message=f"Check usage of '{label}'",
        description=description,
        get_suggestions=_alternatives(table, confidence),
    )


def _suggestion_rule(
    rule_id: str,
    category: IssueCategory,
    pattern: str,
    message: str,
    description: str,
    *alternatives: str,
    confidence: float = 0.9,
) -> AnalysisRule:
    return AnalysisRule(
        id=rule_id,
        category=category,
        severity=IssueSeverity.SUGGESTION,
        pattern=re.compile(pattern, re.IGNORECASE),
        message=message,
        description=description,
        get_suggestions=_fixed(*alternatives, confidence=confidence),
    )


TYPO_RULES: list[AnalysisRule] = [
    _typo(
        "typo-alot",
        r"\balot\b",
        "a lot",
        "The word 'alot' is not a valid English word. Use 'a lot' (two words) instead.",
        message="Spelling error: 'alot' should be 'a lot'",
    ),
    _typo(
        "typo-definately",
        r"\b(definately|definatly)\b",
        "definitely",
        "Common misspelling of 'definitely'.",
    ),
    _typo("typo-seperate", r"\bseperate\b", "separate", "Common misspelling of 'separate'."),
    _typo("typo-occured", r"\boccured\b", "occurred", "The word 'occurred' has double 'r'."),
    _typo("typo-recieve", r"\brecieve\b", "receive", "Remember: 'i' before 'e' except after 'c'."),
    _typo(
        "typo-irregardless",
        r"\birregardless\b",
        "regardless",
        "'Irregardless' is nonstandard. Use 'regardless'.",
        message="Use 'regardless' instead of 'irregardless'",
    ),
    _typo("typo-teh", r"\bteh\b", "the", "Common typo for 'the'."),
    _typo("typo-wierd", r"\bwierd\b", "weird", "Exception to 'i before e' rule."),
    _typo(
        "typo-accomodate",
        r"\baccomodate\b",
        "accommodate",
        "'Accommodate' has double 'c' and double 'm'.",
    ),
    _typo("typo-untill", r"\buntill\b", "until", "'Until' has only one 'l'."),
    _typo("typo-belive", r"\bbelive\b", "believe", "Common misspelling of 'believe'."),
    _typo("typo-calender", r"\bcalender\b", "calendar", "Common misspelling of 'calendar'."),
    _typo("typo-collegue", r"\bcollegue\b", "colleague", "Common misspelling of 'colleague'."),
    _typo("typo-comming", r"\bcomming\b", "coming", "'Coming' has only one 'm'."),
    _typo("typo-existance", r"\bexistance\b", "existence", "Common misspelling of 'existence'."),
    _typo("typo-foreward", r"\b(foreward|foward)\b", "forward", "Common misspelling of 'forward'."),
    _typo("typo-goverment", r"\bgoverment\b", "government", "Common misspelling of 'government'."),
    _typo("typo-knowlege", r"\bknowlege\b", "knowledge", "Common misspelling of 'knowledge'."),
    _typo("typo-mispell", r"\bmispell\b", "misspell", "'Misspell' has double 's'."),
    _typo(
        "typo-neccessary",
        r"\bneccessary\b",
        "necessary",
        "'Necessary' has one 'c' and double 's'.",
    ),
    _typo("typo-publically", r"\bpublically\b", "publicly", "'Publicly' does not have 'al'."),
    _typo("typo-suprise", r"\bsuprise\b", "surprise", "Common misspelling of 'surprise'."),
    _typo("typo-truely", r"\btruely\b", "truly", "'Truly' drops the 'e' from 'true'."),
    _typo("typo-wich", r"\bwich\b", "which", "Common typo for 'which'."),
]

CONTRACTION_RULES: list[AnalysisRule] = [
    _contraction("wont", "won't", "will not"),
    _contraction("dont", "don't", "do not"),
    _contraction("cant", "can't", "cannot"),
    _contraction("shouldnt", "shouldn't", "should not"),
    _contraction("couldnt", "couldn't", "could not"),
    _contraction("wouldnt", "wouldn't", "would not"),
    _contraction("hasnt", "hasn't", "has not"),
    _contraction("havent", "haven't", "have not"),
    _contraction("isnt", "isn't", "is not"),
    _contraction("arent", "aren't", "are not"),
    _contraction("didnt", "didn't", "did not"),
    _contraction("doesnt", "doesn't", "does not"),
]

CONFUSED_WORDS_RULES: list[AnalysisRule] = [
    _confused(
        "confused-their-there",
        {
            "their": ["there", "they're"],
            "there": ["their", "they're"],
            "they're": ["their", "there"],
        },
        0.5,
        "'their' (possessive), 'there' (location), 'they're' (they are).",
    ),
    _confused(
        "confused-its-its",
        {"its": ["it's"], "it's": ["its"]},
        0.7,
        "'its' (possessive) vs 'it's' (it is).",
    ),
    _confused(
        "confused-your-youre",
        {"your": ["you're"], "you're": ["your"]},
        0.7,
        "'your' (possessive) vs 'you're' (you are).",
    ),
    _confused(
        "confused-affect-effect",
        {"affect": ["effect"], "effect": ["affect"]},
        0.5,
        "'affect' (verb) vs 'effect' (noun, usually).",
    ),
    _confused(
        "confused-then-than",
        {"then": ["than"], "than": ["then"]},
        0.5,
        "'then' (time) vs 'than' (comparison).",
    ),
    _confused(
        "confused-loose-lose",
        {"loose": ["lose"], "lose": ["loose"]},
        0.5,
        "'loose' (not tight) vs 'lose' (misplace).",
    ),
    _confused(
        "confused-to-too-two",
        {"to": ["too", "two"], "too": ["to", "two"], "two": ["to", "too"]},
        0.3,
        "'to' (direction), 'too' (also/excessive), 'two' (2).",
    ),
    _confused(
        "confused-whose-whos",
        {"whose": ["who's"], "who's": ["whose"]},
        0.7,
        "'whose' (possessive) vs 'who's' (who is).",
    ),
    _confused(
        "confused-accept-except",
        {"accept": ["except"], "except": ["accept"]},
        0.5,
        "'accept' (receive) vs 'except' (exclude).",
    ),
]

GRAMMAR_RULES: list[AnalysisRule] = [
    AnalysisRule(
        id="grammar-could-of",
        category=IssueCategory.CORRECTNESS,
        severity=IssueSeverity.ERROR,
        pattern=re.compile(r"\b(could|would|should) of\b", re.IGNORECASE),
        message="Use 'have' instead of 'of'",
        description="The correct form is 'could have', 'would have', or 'should have'.",
        get_suggestions=lambda match, _context: [
            Correction(text=re.sub(r" of$", " have", match, flags=re.IGNORECASE))
        ],
    ),
    AnalysisRule(
        id="grammar-lowercase-i",
        category=IssueCategory.CORRECTNESS,
        severity=IssueSeverity.ERROR,
        pattern=re.compile(r"\bi\b"),
        message="Capitalize 'I' when referring to yourself",
        description="The pronoun 'I' should always be capitalized.",
        get_suggestions=_fixed("I"),
    ),
    AnalysisRule(
        id="grammar-double-spaces",
        category=IssueCategory.CORRECTNESS,
        severity=IssueSeverity.ERROR,
        pattern=re.compile(r"\s{2,}"),
        message="Multiple consecutive spaces detected",
        description="Use single spaces between words.",
        get_suggestions=_fixed(" "),
    ),
    AnalysisRule(
        id="grammar-space-before-punct",
        category=IssueCategory.CORRECTNESS,
        severity=IssueSeverity.ERROR,
        pattern=re.compile(r"\s+([,.!?;:])"),
        message="Remove space before punctuation",
        description="Punctuation should directly follow the preceding word.",
        get_suggestions=lambda match, _context: [Correction(text=match.strip())],
    ),
]

# (rule id, pattern, message, description, alternatives, confidence)
_WORDY_PHRASES: list[tuple[str, str, str, str, tuple[str, ...], float]] = [
    (
        "wordy-in-order-to",
        r"\bin order to\b",
        "Wordy phrase: consider using 'to'",
        "'In order to' can usually be simplified to 'to'.",
        ("to",),
        0.9,
    ),
    (
        "wordy-due-to-fact",
        r"\bdue to the fact that\b",
        "Wordy phrase: consider using 'because'",
        "'Due to the fact that' can be simplified to 'because'.",
        ("because",),
        0.9,
    ),
    (
        "wordy-at-this-point",
        r"\bat this point in time\b",
        "Wordy phrase: consider using 'now'",
        "'At this point in time' can be simplified to 'now'.",
        ("now",),
        0.9,
    ),
    (
        "wordy-utilize",
        r"\butilize\b",
        "Consider using 'use' instead of 'utilize'",
        "'Use' is simpler and more direct than 'utilize'.",
        ("use",),
        0.8,
    ),
    (
        "wordy-a-number-of",
        r"\ba number of\b",
        "Wordy phrase: consider 'many' or 'some'",
        "'A number of' can often be replaced with 'many' or 'some'.",
        ("many", "some"),
        0.7,
    ),
    (
        "wordy-absolutely-essential",
        r"\babsolutely essential\b",
        "Redundant: 'essential' implies absolute",
        "'Essential' already means absolutely necessary.",
        ("essential",),
        0.9,
    ),
    (
        "wordy-advance-planning",
        r"\badvance planning\b",
        "Redundant: planning is done in advance",
        "Planning inherently involves looking ahead.",
        ("planning",),
        0.9,
    ),
    (
        "wordy-ask-question",
        r"\bask the question\b",
        "Redundant: 'ask' implies a question",
        "Simply use 'ask' without 'the question'.",
        ("ask",),
        0.9,
    ),
    (
        "wordy-at-later-date",
        r"\bat a later date\b",
        "Wordy phrase: consider using 'later'",
        "'At a later date' can be simplified to 'later'.",
        ("later",),
        0.9,
    ),
    (
        "wordy-basic-fundamentals",
        r"\bbasic fundamentals\b",
        "Redundant: fundamentals are basic by definition",
        "Use either 'basics' or 'fundamentals'.",
        ("fundamentals", "basics"),
        0.9,
    ),
    (
        "wordy-completely-eliminate",
        r"\bcompletely eliminate\b",
        "Redundant: 'eliminate' implies completeness",
        "'Eliminate' already means to remove completely.",
        ("eliminate",),
        0.9,
    ),
    (
        "wordy-during-course",
        r"\bduring the course of\b",
        "Wordy phrase: consider using 'during'",
        "'During the course of' can be simplified to 'during'.",
        ("during",),
        0.9,
    ),
    (
        "wordy-end-result",
        r"\bend result\b",
        "Redundant: 'result' implies the end",
        "A result is already the end of a process.",
        ("result",),
        0.9,
    ),
    (
        "wordy-future-plans",
        r"\bfuture plans\b",
        "Redundant: plans are for the future",
        "Plans inherently refer to the future.",
        ("plans",),
        0.9,
    ),
    (
        "wordy-past-history",
        r"\bpast history\b",
        "Redundant: history is in the past",
        "History by definition refers to the past.",
        ("history",),
        0.9,
    ),
]

_CLICHES: list[tuple[str, str, str, str, tuple[str, ...], float]] = [
    (
        "cliche-at-end-of-day",
        r"\bat the end of the day\b",
        "Cliché detected: 'at the end of the day'",
        "Consider a more original expression like 'ultimately' or 'in conclusion'.",
        ("ultimately", "in conclusion"),
        0.7,
    ),
    (
        "cliche-think-outside-box",
        r"\bthink outside the box\b",
        "Cliché detected: 'think outside the box'",
        "Consider 'be creative' or 'innovate'.",
        ("be creative", "innovate"),
        0.7,
    ),
    (
        "cliche-low-hanging-fruit",
        r"\blow[- ]hanging fruit\b",
        "Cliché detected: 'low-hanging fruit'",
        "Consider 'easy wins' or 'quick opportunities'.",
        ("easy wins", "quick opportunities"),
        0.7,
    ),
    (
        "cliche-move-needle",
        r"\bmove the needle\b",
        "Cliché detected: 'move the needle'",
        "Consider 'make progress' or 'have impact'.",
        ("make progress", "have impact"),
        0.7,
    ),
    (
        "cliche-synergy",
        r"\bsynergy\b",
        "Overused business jargon: 'synergy'",
        "Consider 'collaboration' or 'combined effort'.",
        ("collaboration", "combined effort"),
        0.7,
    ),
    (
        "cliche-paradigm-shift",
        r"\bparadigm shift\b",
        "Overused phrase: 'paradigm shift'",
        "Consider 'fundamental change' or 'transformation'.",
        ("fundamental change", "transformation"),
        0.7,
    ),
    (
        "cliche-game-changer",
        r"\bgame[- ]changer\b",
        "Cliché detected: 'game-changer'",
        "Consider 'breakthrough' or 'significant development'.",
        ("breakthrough", "significant development"),
        0.7,
    ),
    (
        "cliche-best-practice",
        r"\bbest practices?\b",
        "Overused phrase: 'best practice(s)'",
        "Consider 'recommended approach' or 'proven method'.",
        ("recommended approach", "proven method"),
        0.7,
    ),
]

WORDY_PHRASE_RULES: list[AnalysisRule] = [
    _suggestion_rule(
        rule_id, IssueCategory.CLARITY, pattern, message, description, *alts, confidence=conf
    )
    for rule_id, pattern, message, description, alts, conf in _WORDY_PHRASES
]

CLICHE_RULES: list[AnalysisRule] = [
    _suggestion_rule(
        rule_id, IssueCategory.ENGAGEMENT, pattern, message, description, *alts, confidence=conf
    )
    for rule_id, pattern, message, description, alts, conf in _CLICHES
]

PASSIVE_PARTICIPLES = (
    r"\w+ed|written|done|made|taken|given|shown|known|seen|found|told|thought|felt|left|kept|"
    r"held|brought|bought|caught|taught|sought|fought|meant|sent|spent|built|lent|lost|met|"
    r"paid|said|sold|stood|understood|won|wound|woken|worn|woven"
)

PASSIVE_VOICE_RULES: list[AnalysisRule] = [
    AnalysisRule(
        id="passive-voice",
        category=IssueCategory.DELIVERY,
        severity=IssueSeverity.SUGGESTION,
        pattern=re.compile(
            rf"\b(is|are|was|were|be|been|being)\s+(being\s+)?({PASSIVE_PARTICIPLES})\b",
            re.IGNORECASE,
        ),
        message="Consider using active voice",
        description=(
            "Passive voice can make writing less direct. "
            "Consider rephrasing with active voice."
        ),
        get_suggestions=lambda _match, _context: [
            Correction(
                text="[rephrase with active voice]",
                confidence=0.5,
                description="Identify the actor and make them the subject",
            )
        ],
    ),
]

_SMALL_NUMBER_WORDS = r"one|two|three|four|five|six|seven|eight|nine|ten"

NUMBER_FORMAT_RULES: list[AnalysisRule] = [
    AnalysisRule(
        id="number-mixed-format",
        category=IssueCategory.DELIVERY,
        severity=IssueSeverity.SUGGESTION,
        pattern=re.compile(
            rf"\b(\d+)\b.*\b({_SMALL_NUMBER_WORDS})\b|\b({_SMALL_NUMBER_WORDS})\b.*\b(\d+)\b",
            re.IGNORECASE,
        ),
        message="Inconsistent number formatting detected",
        description="Consider using consistent number formatting (all digits or all words).",
        get_suggestions=lambda _match, _context: [
            Correction(
                text="[use consistent format]",
                confidence=0.6,
                description="Use either all digits or all words for numbers",
            )
        ],
    ),
]

# (adjective, stronger word, alternative)
_WEAK_ADJECTIVES: list[tuple[str, str, str]] = [
    ("good", "excellent", "outstanding"),
    ("bad", "terrible", "awful"),
    ("happy", "ecstatic", "delighted"),
    ("sad", "devastated", "heartbroken"),
    ("big", "massive", "enormous"),
    ("small", "tiny", "minuscule"),
]


def _weak_adjective(adjective: str, strong: str, alternative: str) -> AnalysisRule:
    return AnalysisRule(
        id=f"weak-very-{adjective}",
        category=IssueCategory.ENGAGEMENT,
        severity=IssueSeverity.SUGGESTION,
        pattern=re.compile(rf"\bvery {adjective}\b", re.IGNORECASE),
        message=f"Weak phrase: consider '{strong}'",
        description=f"'Very {adjective}' can be replaced with a stronger word.",
        get_suggestions=lambda _match, _context: [
            Correction(text=strong, confidence=0.8),
            Correction(text=alternative, confidence=0.7),
        ],
    )


WEAK_ADJECTIVE_RULES: list[AnalysisRule] = [_weak_adjective(*entry) for entry in _WEAK_ADJECTIVES]

ALL_RULES: list[AnalysisRule] = [
    *TYPO_RULES,
    *CONTRACTION_RULES,
    *CONFUSED_WORDS_RULES,
    *GRAMMAR_RULES,
    *WORDY_PHRASE_RULES,
    *CLICHE_RULES,
    *PASSIVE_VOICE_RULES,
    *NUMBER_FORMAT_RULES,
    *WEAK_ADJECTIVE_RULES,
]


def find_matches(text: str, pattern: Pattern) -> list[RuleMatch]:
    """Find every non-overlapping match of a pattern with its position."""
    return [RuleMatch(m.group(0), m.start(), m.end()) for m in pattern.finditer(text)]


def apply_rule(text: str, rule: AnalysisRule) -> list[Issue]:
    """Apply a single rule to text and return all issues found."""
    return [
        Issue(
            id=make_issue_id(rule.id, match.start_index, match.end_index),
            rule=rule.id,
            category=rule.category,
            severity=rule.severity,
            message=rule.message,
            description=rule.description,
            start_index=match.start_index,
            end_index=match.end_index,
            original_text=match.text,
            suggestions=tuple(rule.get_suggestions(match.text, text)),
        )
        for match in find_matches(text, rule.pattern)
    ]


def analyze_with_rules(text: str, rules: list[AnalysisRule] | None = None) -> list[Issue]:
    """Apply all rules to text, sorted by start position.

    Args:
        text: Text to check
        rules: Rules to apply (default: ALL_RULES)

    Returns:
        Issues in ascending start order; ties keep rule order
    """
    issues: list[Issue] = []
    for rule in ALL_RULES if rules is None else rules:
        issues.extend(apply_rule(text, rule))
    issues.sort(key=lambda issue: issue.start_index)
    return issues


def get_issues_by_category(issues: list[Issue], category: IssueCategory) -> list[Issue]:
    """Return the issues of one category."""
    return [issue for issue in issues if issue.category == category]


def get_issue_counts(issues: list[Issue]) -> dict[IssueCategory, int]:
    """Count issues per category; every category is present."""
    counts = {category: 0 for category in IssueCategory}
    for issue in issues:
        counts[issue.category] += 1
    return counts
