"""Report generation for WritePy."""

from .core import create_report_directory, generate_reports, render_report
from .helpers import format_time, write_report_header
from .json_report import render_json_report
from .text_report import render_text_report, write_text_report

__all__ = [
    "create_report_directory",
    "format_time",
    "generate_reports",
    "render_json_report",
    "render_report",
    "render_text_report",
    "write_report_header",
    "write_text_report",
]
