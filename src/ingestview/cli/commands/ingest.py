"""Sample and ingest commands for ingestview CLI."""

import asyncio
import sys
from pathlib import Path

from ...core.config import Config
from ...core.exceptions import IngestViewError
from ...gateway import HTTPIndexGateway
from ...workflow import IngestionController, StatusPrinter


def add_index_arguments(parser) -> None:
    """Add the index selection argument.

    Args:
        parser: Argument parser for the command.
    """
    parser.add_argument(
        "-i",
        "--index",
        default=None,
        help="Target index (default: INGESTVIEW_INDEX or config default_index)",
    )


def _selected_index(args, config: Config) -> str | None:
    return args.index or config.default_index


def handle_sample(args, config: Config) -> None:
    """Fetch a sample document and print or save it.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    document = asyncio.run(_sample_async(args, config))
    if args.output:
        Path(args.output).write_text(document + "\n", encoding="utf-8")
        print(f"✓ Sample written to {args.output}")
    else:
        print(document)


async def _sample_async(args, config: Config) -> str:
    async with HTTPIndexGateway(config.gateway) as gateway:
        controller = IngestionController(
            gateway, config, selected_index=_selected_index(args, config)
        )
        controller.subscribe(StatusPrinter(show_errors=False))
        if not await controller.generate_sample():
            raise IngestViewError(controller.state.error)
        return controller.document


def handle_index(args, config: Config) -> None:
    """Submit a JSON document file for ingestion.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    if args.file == "-":
        text = sys.stdin.read()
    else:
        text = Path(args.file).read_text(encoding="utf-8")

    controller = asyncio.run(_index_async(args, config, text))

    if args.rewrite and args.file != "-":
        Path(args.file).write_text(controller.document + "\n", encoding="utf-8")

    print(controller.state.ingest_result)
    print(f"✓ {controller.state.task}")


async def _index_async(args, config: Config, text: str) -> IngestionController:
    async with HTTPIndexGateway(config.gateway) as gateway:
        controller = IngestionController(
            gateway,
            config,
            selected_index=_selected_index(args, config),
            document=text,
        )
        controller.subscribe(StatusPrinter(show_errors=False))
        if not await controller.index_documents():
            raise IngestViewError(controller.state.error)
        return controller
