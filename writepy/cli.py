"""Command-line interface."""

import argparse

from writepy.core.types import IssueCategory


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="writepy",
        description="Analyze text files for grammar, clarity, tone and readability issues",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print a text report for one file
  %(prog)s essay.txt

  # Read from stdin
  cat essay.txt | %(prog)s -

  # JSON reports for several files, written to a timestamped directory
  %(prog)s chapter1.txt chapter2.txt --format json -o ./reports

  # Ignore a known false positive and only list correctness issues
  %(prog)s essay.txt --dismiss "passive-voice-construction:was written" --category correctness

  # Using JSON config (CLI args override JSON values)
  %(prog)s --config config.json essay.txt

Example config.json:
{
  "inputs": ["essay.txt"],
  "output": "./reports",
  "format": "text",
  "dismiss": ["cliche-deep-dive:deep dive"],
  "categories": ["correctness", "clarity"],
  "verbose": true
}
        """,
    )

    # Input
    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="FILE",
        help="Text files to analyze ('-' reads from stdin)",
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Output
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Directory for reports (creates timestamped subdirectories); stdout if omitted",
    )
    parser.add_argument(
        "--format", choices=["text", "json"], help="Report format (default: text)"
    )

    # Filtering
    parser.add_argument(
        "--dismiss",
        action="append",
        metavar="RULE:TEXT",
        help="Suppress every issue of RULE on TEXT (repeatable)",
    )
    parser.add_argument(
        "--category",
        dest="categories",
        action="append",
        choices=[category.value for category in IssueCategory],
        help="Only list issues in this category (repeatable)",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Debug logging (implies --verbose)"
    )

    return parser
