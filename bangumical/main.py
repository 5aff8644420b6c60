"""Command line entry point: catalog JSON in, calendar events JSON out."""

import argparse
import logging
import sys
from pathlib import Path

from whenever import Instant

from .assembler import EventAssembler
from .config import settings
from .exporter import EventExporter
from .loader import load_catalog

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate upcoming anime broadcast events from a catalog"
    )
    parser.add_argument(
        "--data",
        type=str,
        default="data.json",
        help="Catalog JSON with items and siteMeta (default: data.json)",
    )
    parser.add_argument(
        "--site-meta",
        type=str,
        default=None,
        help="Separate site metadata JSON, overrides the catalog's siteMeta",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default="output",
        help="Output directory for events.json (default: output/)",
    )
    manual = parser.add_mutually_exclusive_group()
    manual.add_argument(
        "--manual",
        dest="manual",
        action="store_true",
        default=None,
        help="Enter each anime's remaining episode count by hand",
    )
    manual.add_argument(
        "--no-manual",
        dest="manual",
        action="store_false",
        help="Use configured episode counts without asking",
    )
    return parser


def run(args: argparse.Namespace) -> Path:
    """Load the catalog, assemble events and export them."""
    catalog = load_catalog(args.data, args.site_meta)
    now = Instant.now().to_tz(settings.timezone)
    logger.info(f"Scheduling from {now}")

    assembler = EventAssembler(settings)
    events = assembler.run(catalog.items, catalog.site_meta, now, args.manual)

    return EventExporter(args.output).export_events(events)


def main() -> None:
    """Main entry point."""
    args = build_parser().parse_args()

    if not Path(args.data).exists():
        logger.error(f"Catalog not found: {args.data}")
        sys.exit(1)

    try:
        run(args)
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, exiting...")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
