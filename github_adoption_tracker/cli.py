"""CLI entry point for the adoption tracker."""

import argparse
import logging
import sys
from pathlib import Path

from .models import DEFAULT_FILENAMES, DEFAULT_LABEL, DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find GitHub repositories using a config file, rank them and chart adoption",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--filename",
        action="append",
        default=None,
        dest="filenames",
        help=f"Config filename to search for (repeatable, default: {', '.join(DEFAULT_FILENAMES)})",
    )
    parser.add_argument(
        "--language",
        default=DEFAULT_LANGUAGE,
        help=f"Language qualifier for the search (default: {DEFAULT_LANGUAGE})",
    )
    parser.add_argument(
        "--qualifier",
        action="append",
        default=[],
        dest="qualifiers",
        metavar="QUALIFIER",
        help="Extra search qualifier (repeatable, e.g., --qualifier fork:false)",
    )
    parser.add_argument(
        "--label",
        default=DEFAULT_LABEL,
        help=f"Tool name shown in the report header (default: {DEFAULT_LABEL})",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory for the chart file (default: current directory)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Repositories enriched in parallel per search page (default: 1)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    from .logs import configure_logging

    configure_logging(verbose=args.verbose)
    logger.info("starting up...")

    from .chart import ChartError, render_chart
    from .fetch_candidates import fetch_candidates
    from .github import get_client
    from .report import print_report

    try:
        repos = fetch_candidates(
            get_client(),
            filenames=args.filenames or DEFAULT_FILENAMES,
            language=args.language,
            qualifiers=args.qualifiers,
            workers=max(args.workers, 1),
        )
    except Exception as e:
        logger.error("failed to gather results: %s", e)
        sys.exit(1)

    print_report(repos, label=args.label)

    try:
        path = render_chart(repos, output_dir=args.output_dir)
    except ChartError as e:
        logger.error("failed to graph repos: %s", e)
        sys.exit(1)

    print(f"\ngraph saved at {path}")


if __name__ == "__main__":
    main()
