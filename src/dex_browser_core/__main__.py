"""
Command line entry point: render a catalog page to a static HTML file.

Usage:
    python -m dex_browser_core --limit 20 --offset 0 --detail 25 --output dex.html
"""

import argparse
import asyncio
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

from dex_browser_core.browser import CatalogBrowser
from dex_browser_core.config import BrowserConfig
from dex_browser_core.utils.core.client import PokeAPIClient
from dex_browser_core.utils.core.config_registry import set_config
from dex_browser_core.utils.core.logger import configure_logging_system, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dex_browser_core",
        description="Fetch a page of the PokeAPI catalog and render it as HTML.",
    )
    parser.add_argument("--config", type=Path, help="YAML config file")
    parser.add_argument("--limit", type=int, help="Page size (overrides config page_size)")
    parser.add_argument("--offset", type=int, default=0, help="Index of the first entry")
    parser.add_argument("--detail", help="ID, name or URL of a Pokemon to open in the overlay")
    parser.add_argument("--types", action="store_true", help="Also render the type filter")
    parser.add_argument("--output", type=Path, help="Output file (defaults to stdout)")
    return parser


async def run(args: argparse.Namespace, config: BrowserConfig) -> str:
    """Render the requested page and return the document HTML."""
    async with PokeAPIClient(config) as client:
        browser = CatalogBrowser(config, client)

        if args.types:
            await browser.load_type_filter()

        entries = await browser.load_page(args.offset)
        if not entries:
            logger.warning("Listing is empty (end of data or request failure)")

        if args.detail:
            await browser.open_detail(args.detail)

        return browser.to_html()


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = BrowserConfig.from_yaml(args.config) if args.config else BrowserConfig()
        if args.limit is not None:
            config = replace(config, page_size=args.limit)
    except (OSError, ValueError, TypeError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    configure_logging_system(config)
    set_config(config)

    html = asyncio.run(run(args, config))

    if args.output:
        args.output.write_text(html, encoding="utf-8")
        logger.info(f"Wrote {args.output}")
    else:
        sys.stdout.write(html)

    return 0


if __name__ == "__main__":
    sys.exit(main())
