"""Constants used throughout the WritePy codebase."""


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Scheduling
    DEBOUNCE_DELAY_MS = 500
    """Quiet window after the last edit before an automatic analysis fires."""

    # Session limits
    MAX_HISTORY_SIZE = 50
    """Default undo depth of the correction history."""

    MAX_DISMISSED_PATTERNS = 1000
    """Maximum number of dismissed patterns kept per session."""

    # Readability
    DIFFICULT_SENTENCE_THRESHOLD = 25
    """Sentences with more words than this are flagged as difficult."""

    COMPLEX_WORD_LENGTH_THRESHOLD = 6
    """Average word length above which vocabulary is flagged as complex."""

    MIN_GRADE = 1
    MAX_GRADE = 17

    # Statistics
    AVERAGE_READING_SPEED_WPM = 200
    """Reading speed used for reading-time estimates."""

    # Scoring
    BASE_SCORE = 100
    MIN_SCORE = 0
    MAX_SCORE = 100

    POINTS_PER_WEIGHTED_ISSUE = 5
    """Points deducted from a category score per weighted issue."""

    # Display
    TRUNCATE_LENGTH = 50
    """Length at which quoted sentence snippets are truncated."""

    DISMISSED_KEY_SEPARATOR = ":"
    """Separator between rule and text in ``rule:text`` dismissal strings."""
