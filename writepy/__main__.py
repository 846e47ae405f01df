"""Main entry point for the writepy package."""

import sys
import time
from pathlib import Path

from loguru import logger
from tqdm import tqdm

from writepy.analysis.dismissals import DismissalManager, parse_pattern_key
from writepy.analysis.orchestrator import analyze_text
from writepy.cli import create_parser
from writepy.core import AnalysisResult, Config, load_config
from writepy.reports import format_time, generate_reports
from writepy.utils.logging import setup_logger

STDIN_INPUT = "-"


def _print_startup_banner(verbose: bool) -> None:
    """Print startup banner if verbose."""
    if verbose:
        logger.info("=" * 60)
        logger.info("WritePy - Writing Analysis")
        logger.info("=" * 60)
        logger.info("")


def _validate_config(config: Config, parser) -> None:
    """Validate configuration settings."""
    if not config.inputs:
        parser.error("No input files given (pass FILE arguments or 'inputs' in the config)")

    if config.inputs.count(STDIN_INPUT) > 1:
        parser.error("stdin ('-') can only be read once")

    missing = [path for path in config.inputs if path != STDIN_INPUT and not Path(path).is_file()]
    if missing:
        parser.error(f"Input file not found: {', '.join(missing)}")


def _print_config_summary(config: Config) -> None:
    """Print configuration summary if verbose."""
    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Inputs: {len(config.inputs)} file(s)")
        logger.info(f"  Format: {config.format}")
        logger.info(f"  Output: {config.output or 'stdout'}")
        if config.dismiss:
            logger.info(f"  Dismissed patterns: {len(config.dismiss)}")
        if config.categories:
            logger.info(f"  Categories: {', '.join(c.value for c in config.categories)}")
        logger.info("")


def _read_input(path: str) -> str:
    if path == STDIN_INPUT:
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def run_analysis(config: Config) -> list[tuple[str, AnalysisResult]]:
    """Analyze every configured input and write the reports.

    Returns:
        (source name, analysis result) pairs in input order
    """
    dismissals = DismissalManager(config.max_dismissed_patterns)
    for entry in config.dismiss:
        dismissals.add_key(parse_pattern_key(entry))
    dismissed_patterns = dismissals.keys()

    start_time = time.time()
    inputs = config.inputs
    if config.verbose:
        inputs = tqdm(config.inputs, desc="Analyzing files", unit="file")

    results: list[tuple[str, AnalysisResult]] = []
    for path in inputs:
        text = _read_input(path)
        result = analyze_text(text, dismissed_patterns)
        source = "stdin" if path == STDIN_INPUT else path
        logger.debug(f"{source}: {len(result.issues)} issues, score {result.score.overall}")
        results.append((source, result))

    if config.verbose:
        logger.info(f"  Analyzed {len(results)} file(s) in {format_time(time.time() - start_time)}")

    report_dir = generate_reports(results, config)
    if report_dir is not None and config.verbose:
        logger.info(f"  Reports written to {report_dir}")

    return results


def _run_with_error_handling(config: Config) -> None:
    """Run analysis with proper error handling."""
    try:
        run_analysis(config)
        if config.verbose:
            logger.info("")
            logger.info("=" * 60)
            logger.info("✓ Analysis completed successfully")
            logger.info("=" * 60)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Analysis interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * 60)
            logger.error("✗ Analysis failed")
            logger.error("=" * 60)
        raise


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Load configuration
    config = load_config(args.config, args, parser)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)

    _print_startup_banner(config.verbose)
    _validate_config(config, parser)
    _print_config_summary(config)
    _run_with_error_handling(config)


if __name__ == "__main__":
    main()
