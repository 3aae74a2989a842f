#!/usr/bin/env python3

import argparse
import os
import sys

from loguru import logger

from table_harvest.config import (
    DEFAULT_ATTRIBUTES,
    DEFAULT_ELEMENTS,
    DEFAULT_HEADER_SELECTORS,
    DEFAULT_TABLE_NAME_SEPARATOR,
    HarvestConfig,
)
from table_harvest.errors import HarvestError
from table_harvest.logs import setup_logging
from table_harvest.pipeline import harvest


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Extract every table of HTML files into CSV files, one file per table."
    )
    parser.add_argument("-i", "--input", required=True, help="Input HTML file or directory")
    parser.add_argument("-o", "--output", required=True, help="Output directory")
    parser.add_argument(
        "-a", "--attributes", nargs="+", default=list(DEFAULT_ATTRIBUTES),
        help="Attributes to extract from cells and nested elements",
    )
    parser.add_argument(
        "-e", "--elements", nargs="+", default=list(DEFAULT_ELEMENTS),
        help="HTML elements to extract from cells",
    )
    parser.add_argument(
        "-hs", "--header-selectors", nargs="+", default=list(DEFAULT_HEADER_SELECTORS),
        help="Selectors of heading elements preceding tables, used to name them",
    )
    parser.add_argument(
        "-ts", "--table-name-separator", default=DEFAULT_TABLE_NAME_SEPARATOR,
        help="Only the heading text before this separator names the table",
    )
    parser.add_argument("-l", "--log", help="Log file path")
    parser.add_argument(
        "-k", "--keep-going", action="store_true",
        help="Continue with the remaining files when one fails",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log, verbose=args.verbose)

    if not os.path.exists(args.input):
        logger.error(f"Error: input not found: {args.input}")
        return 1

    if not os.path.isdir(args.output):
        logger.error(f"Error: output directory not found: {args.output}")
        return 1

    config = HarvestConfig.from_args(args)

    try:
        run = harvest(args.input, args.output, config, keep_going=args.keep_going)
    except (HarvestError, OSError) as e:
        logger.error(f"Error: {e}")
        return 1
    except Exception:
        logger.exception("Error: unexpected failure")
        return 1

    if not run.ok:
        logger.error(f"{len(run.failures)} file(s) failed:")
        for path, error in run.failures:
            logger.error(f"  {path}: {error}")
        return 1

    logger.info(f"Done: {len(run.written)} table(s) from {len(run.files)} file(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
