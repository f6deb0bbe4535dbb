"""CLI entry point for ingestview."""

import argparse
import sys
from typing import NoReturn

from loguru import logger

from .. import __version__
from ..core.config import Config
from . import commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="ingestview",
        description="Fetch sample documents from a search index and ingest JSON documents",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="TOML configuration file (default: INGESTVIEW_CONFIG)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    # sample
    sample_parser = subparsers.add_parser("sample", help="Fetch a sample document")
    commands.add_index_arguments(sample_parser)
    sample_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the sample to this file instead of stdout",
    )

    # index
    index_parser = subparsers.add_parser("index", help="Ingest a JSON document file")
    commands.add_index_arguments(index_parser)
    index_parser.add_argument("file", help="JSON file to ingest ('-' for stdin)")
    index_parser.add_argument(
        "--rewrite",
        action="store_true",
        help="Rewrite the file with the normalized document",
    )

    # status
    subparsers.add_parser("status", help="Show configuration")

    return parser


def configure_logging(verbose: bool) -> None:
    """Route loguru output to stderr at the requested level."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = Config.from_env_or_file(args.config)

        if args.command == "sample":
            commands.handle_sample(args, config)
        elif args.command == "index":
            commands.handle_index(args, config)
        elif args.command == "status":
            commands.handle_status(args, config)
        else:
            parser.print_help()

        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
