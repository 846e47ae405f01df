"""Report generation entry points."""

import sys
from datetime import datetime
from pathlib import Path
from typing import TextIO

from loguru import logger

from writepy.core.config import Config
from writepy.core.types import AnalysisResult
from writepy.reports.json_report import render_json_report
from writepy.reports.text_report import render_text_report

_EXTENSIONS = {"text": ".txt", "json": ".json"}


def create_report_directory(base_dir: str) -> Path:
    """Create a timestamped subdirectory of ``base_dir`` for this run's reports."""
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    report_dir = Path(base_dir) / timestamp
    report_dir.mkdir(parents=True, exist_ok=True)
    return report_dir


def render_report(result: AnalysisResult, source: str | None, config: Config) -> str:
    """Render ``result`` in the configured format."""
    if config.format == "json":
        return render_json_report(result, source, config.categories)
    return render_text_report(result, source, config.categories)


def _report_path(report_dir: Path, source: str, fmt: str, used: set[Path]) -> Path:
    stem = Path(source).stem or "report"
    path = report_dir / f"{stem}{_EXTENSIONS[fmt]}"
    counter = 2
    while path in used:
        path = report_dir / f"{stem}_{counter}{_EXTENSIONS[fmt]}"
        counter += 1
    used.add(path)
    return path


def generate_reports(
    results: list[tuple[str, AnalysisResult]],
    config: Config,
    stream: TextIO | None = None,
) -> Path | None:
    """Write one report per analyzed input.

    Args:
        results: (source name, analysis result) pairs in input order
        config: Output directory, format and category filter
        stream: Where to print reports when no output directory is set;
            defaults to stdout

    Returns:
        The timestamped report directory, or None when reports were printed
    """
    if not config.output:
        out = stream or sys.stdout
        for source, result in results:
            out.write(render_report(result, source, config))
            out.write("\n")
        return None

    report_dir = create_report_directory(config.output)
    used: set[Path] = set()
    for source, result in results:
        path = _report_path(report_dir, source, config.format, used)
        with open(path, "w", encoding="utf-8") as f:
            f.write(render_report(result, source, config))
        logger.info(f"  Wrote {path}")

    return report_dir
