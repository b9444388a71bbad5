"""
Command-line entry point.

Usage:
    classification-agreement RUNLIST DESTINATION [--subsample N] [--log-level LEVEL]
"""

import argparse
import logging
import sys
from typing import List, Optional

from .batch import AgreementBatch
from .config import config
from .exceptions import AgreementError


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classification-agreement",
        description="Append a classifier vs. expert confusion matrix for every run in a run list."
    )
    parser.add_argument("runlist", help="run list file (first line: run directory, then one run per line)")
    parser.add_argument("destination", help="directory receiving ConfusionMatrix.txt")
    parser.add_argument(
        "--subsample", type=int, default=config.run.default_subsample,
        help="one-based subsample number to compare (default: %(default)s)"
    )
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: %(default)s)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    logger.info(f"Readying {args.runlist} for processing.")
    try:
        summary = AgreementBatch(args.destination, args.subsample).run(args.runlist)
    except AgreementError as e:
        logger.error(str(e))
        return 1

    return 0 if summary.succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
