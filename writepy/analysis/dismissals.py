"""Dismissed-pattern keys and the per-session dismissal manager."""

from collections.abc import Iterable
from typing import NamedTuple

from loguru import logger

from writepy.core.types import Issue, WritingScore
from writepy.detectors.score import calculate_writing_score
from writepy.utils.constants import Constants


class DismissedPatternKey(NamedTuple):
    """Position-independent key suppressing every occurrence of a rule + text pair."""

    rule: str
    text: str

    def __str__(self) -> str:
        return f"{self.rule}{Constants.DISMISSED_KEY_SEPARATOR}{self.text}"


def create_pattern_key(rule: str, original_text: str) -> DismissedPatternKey:
    return DismissedPatternKey(rule, original_text.lower())


def pattern_key(issue: Issue) -> DismissedPatternKey:
    """Key under which ``issue`` would be dismissed."""
    return create_pattern_key(issue.rule, issue.original_text)


def parse_pattern_key(value: str) -> DismissedPatternKey:
    """Parse a ``rule:text`` string into a key.

    Only the first separator splits, so the text part may itself contain ':'.

    Raises:
        ValueError: If the separator is missing or the rule is empty
    """
    rule, separator, text = value.partition(Constants.DISMISSED_KEY_SEPARATOR)
    if not separator or not rule:
        raise ValueError(f"Invalid dismissed pattern {value!r}, expected 'rule:text'")
    return create_pattern_key(rule, text)


def is_issue_dismissed(issue: Issue, dismissed_patterns: frozenset[DismissedPatternKey]) -> bool:
    return pattern_key(issue) in dismissed_patterns


class DismissalManager:
    """Insertion-ordered set of dismissed pattern keys with a size cap.

    When the cap is reached the oldest dismissal is evicted to make room.
    """

    def __init__(self, max_patterns: int = Constants.MAX_DISMISSED_PATTERNS) -> None:
        if max_patterns < 1:
            raise ValueError("max_patterns must be at least 1")
        self.max_patterns = max_patterns
        # dict preserves insertion order
        self._patterns: dict[DismissedPatternKey, None] = {}

    def __len__(self) -> int:
        return len(self._patterns)

    def __contains__(self, key: object) -> bool:
        return key in self._patterns

    def add_key(self, key: DismissedPatternKey) -> DismissedPatternKey:
        """Add a key, refreshing its position if it is already present."""
        self._patterns.pop(key, None)
        while len(self._patterns) >= self.max_patterns:
            oldest = next(iter(self._patterns))
            del self._patterns[oldest]
            logger.debug(f"Evicted oldest dismissed pattern {oldest}")
        self._patterns[key] = None
        return key

    def dismiss(self, issue: Issue) -> DismissedPatternKey:
        """Dismiss every future occurrence of ``issue``'s rule and text."""
        key = self.add_key(pattern_key(issue))
        logger.debug(f"Dismissed pattern {key} ({len(self._patterns)} total)")
        return key

    def undismiss(self, issue: Issue) -> bool:
        """Remove the dismissal for ``issue``; returns whether one existed."""
        key = pattern_key(issue)
        if key not in self._patterns:
            return False
        del self._patterns[key]
        logger.debug(f"Removed dismissed pattern {key}")
        return True

    def is_dismissed(self, issue: Issue) -> bool:
        return pattern_key(issue) in self._patterns

    def keys(self) -> frozenset[DismissedPatternKey]:
        """Snapshot of the current keys for passing to the orchestrator."""
        return frozenset(self._patterns)

    def filter_issues(self, issues: Iterable[Issue]) -> list[Issue]:
        return [issue for issue in issues if not self.is_dismissed(issue)]

    def calculate_score_excluding_dismissed(self, issues: Iterable[Issue]) -> WritingScore:
        return calculate_writing_score(self.filter_issues(issues))

    def reset(self) -> None:
        self._patterns.clear()

    def export_state(self) -> list[list[str]]:
        """Serialize keys, oldest first, as ``[rule, text]`` pairs."""
        return [[key.rule, key.text] for key in self._patterns]

    def import_state(self, state: Iterable[Iterable[str]]) -> None:
        """Replace the current keys with previously exported pairs.

        Raises:
            ValueError: If an entry is not a ``[rule, text]`` pair
        """
        patterns: list[DismissedPatternKey] = []
        for entry in state:
            pair = list(entry)
            if len(pair) != 2 or not all(isinstance(part, str) for part in pair):
                raise ValueError(f"Invalid dismissed pattern entry: {entry!r}")
            patterns.append(create_pattern_key(pair[0], pair[1]))

        self.reset()
        for key in patterns:
            self.add_key(key)
        logger.debug(f"Imported {len(self._patterns)} dismissed patterns")
