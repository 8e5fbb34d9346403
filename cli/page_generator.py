"""CLI page generator: render a JSON page config to a static HTML file."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from cli.common import configure_logging
from pagesmith.config import Settings
from pagesmith.exceptions import PageConfigError
from pagesmith.services.build_service import build_page, write_page
from pagesmith.services.example_page import EXAMPLE_PAGE_CONFIG
from pagesmith.services.page_service import parse_page_config

BLOCK_TYPES_HELP = """
Config structure:
  {
    "slug": "page-url-slug",
    "title": "Page Title",
    "description": "Meta description",
    "cover": { "gradient": "..." } or { "src": "image.jpg" },
    "icon": { "emoji": "🚀" } or { "type": "none" } or { "type": "image", "src": "..." },
    "toc": true/false,
    "backLink": true/false,
    "blocks": [ ... ]
  }

Block types:
  cover, icon, h1, h2, h3, paragraph, callout, bulletList, numberedList,
  quote, divider, columns, threeColumns, toggle, numberedToggle,
  button, link, code, image, gallery, toc, spacer, centered, html
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagesmith-page",
        description="Generate a static HTML page from a JSON block config",
        epilog=BLOCK_TYPES_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("config", nargs="?", help="Page config JSON file")
    parser.add_argument(
        "--output-dir", "-o", help="Output directory (default: PAGESMITH_OUTPUT_DIR or current)"
    )
    parser.add_argument("--example", action="store_true", help="Print the example config JSON")
    parser.add_argument(
        "--build-example", action="store_true", help="Build the example page"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.example:
        print(json.dumps(EXAMPLE_PAGE_CONFIG, indent=2, ensure_ascii=False))
        return

    if not args.config and not args.build_example:
        parser.print_help()
        return

    settings = Settings()
    configure_logging(args.debug or settings.debug)
    output_dir = Path(args.output_dir) if args.output_dir else settings.output_dir

    try:
        if args.build_example:
            config = parse_page_config(EXAMPLE_PAGE_CONFIG, source="<example>")
            path = write_page(config, settings, output_dir)
        else:
            path = build_page(Path(args.config), settings, output_dir)
    except PageConfigError as exc:
        print(f"Error: {exc}")
        sys.exit(1)
    except (OSError, ValueError) as exc:
        print(f"Error: cannot write page: {exc}")
        sys.exit(1)

    print(f"Generated: {path}")


if __name__ == "__main__":
    main()
