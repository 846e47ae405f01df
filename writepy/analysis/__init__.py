"""Analysis orchestration, dismissals and debounced scheduling."""

from .dismissals import DismissalManager, DismissedPatternKey, parse_pattern_key, pattern_key
from .orchestrator import analyze_text, create_empty_analysis_result
from .scheduler import (
    AsyncioTimerBackend,
    DebouncedAnalyzer,
    ManualTimerBackend,
    ThreadingTimerBackend,
    TimerBackend,
)

__all__ = [
    "AsyncioTimerBackend",
    "DebouncedAnalyzer",
    "DismissalManager",
    "DismissedPatternKey",
    "ManualTimerBackend",
    "ThreadingTimerBackend",
    "TimerBackend",
    "analyze_text",
    "create_empty_analysis_result",
    "parse_pattern_key",
    "pattern_key",
]
