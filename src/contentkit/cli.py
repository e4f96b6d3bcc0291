"""
contentkit Command Line Entry Point.

Builds the collections declared in a manifest and reports how many records
each holds. Intended as a build step: a broken content source makes the
command exit non-zero before anything else in the build runs.

Exit Codes:
    0: Every requested collection loaded
    1: A collection failed (the ContentError is logged with file and index)
    2: A requested collection name is not in the manifest

Example:
    $ contentkit --config site/collections.yml
    2026-10-18 10:00:00,000 - contentkit.cli - INFO - posts: 12 items
    2026-10-18 10:00:00,004 - contentkit.cli - INFO - products: 40 items
"""
import argparse
import logging
import os
import sys
from typing import List, Optional

from contentkit.collection import build_collection
from contentkit.config import get_collection_configs, load_config
from contentkit.errors import ContentError

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False) -> None:
    """Send log records to stdout at INFO, or DEBUG when ``debug`` is set."""
    log_level = logging.DEBUG if debug else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear any existing handlers to avoid duplicates
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contentkit",
        description="Load and validate the content collections declared in a manifest.",
    )
    parser.add_argument(
        "names",
        nargs="*",
        help="Collections to build (default: all collections in the manifest)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to collections.yml (default: search the working directory and its parents)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the contentkit command.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:]

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    debug = args.debug or os.environ.get("CONTENTKIT_DEBUG", "").lower() in ("true", "1", "yes")
    configure_logging(debug)

    try:
        config = load_config(args.config)
        collection_configs = get_collection_configs(config)
    except ContentError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    unknown = [name for name in args.names if name not in collection_configs]
    if unknown:
        logger.error(f"Unknown collection(s): {', '.join(unknown)}")
        return 2

    names = args.names or list(collection_configs)
    if not names:
        logger.warning("No collections configured")
        return 0

    for name in names:
        try:
            collection = build_collection(collection_configs[name])
        except ContentError as e:
            logger.error(f"{name}: {e}")
            return 1
        logger.info(f"{name}: {len(collection)} items")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
