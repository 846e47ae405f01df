"""WritePy - Writing analysis engine.

Flags grammar, clarity, engagement and delivery issues in text, scores it, and
applies corrections while keeping the remaining issues positionally correct.
"""

from .analysis import analyze_text, create_empty_analysis_result
from .core import AnalysisResult, Config, Correction, Issue, load_config
from .corrections import SpanCorrection
from .engine import AnalysisEngine

__version__ = "0.1.0"
__all__ = [
    "AnalysisEngine",
    "AnalysisResult",
    "Config",
    "Correction",
    "Issue",
    "SpanCorrection",
    "analyze_text",
    "create_empty_analysis_result",
    "load_config",
]
