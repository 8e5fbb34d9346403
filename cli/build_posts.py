"""CLI blog builder: fetch published posts and write static post pages."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from cli.common import configure_logging
from pagesmith.config import Settings
from pagesmith.exceptions import PostFetchError
from pagesmith.services.build_service import build_posts
from pagesmith.services.post_store import LocalPostStore, SupabasePostStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagesmith-posts",
        description="Build static blog post pages and the blog index",
    )
    parser.add_argument(
        "--output-dir", "-o", help="Output directory (default: PAGESMITH_BLOG_DIR)"
    )
    parser.add_argument(
        "--from-dir",
        help="Read Markdown posts with front matter from this directory instead of Supabase",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    configure_logging(args.debug or settings.debug)
    output_dir = Path(args.output_dir) if args.output_dir else settings.blog_dir

    try:
        if args.from_dir:
            store = LocalPostStore(Path(args.from_dir), default_tz=settings.timezone)
            result = build_posts(store, settings, output_dir)
        else:
            settings.validate_post_store()
            with SupabasePostStore(settings) as supabase_store:
                result = build_posts(supabase_store, settings, output_dir)
    except (PostFetchError, ValueError) as exc:
        print(f"Error: Build failed: {exc}")
        sys.exit(1)
    except OSError as exc:
        print(f"Error: cannot write output: {exc}")
        sys.exit(1)

    if result.total == 0:
        print("No published posts found.")
        return
    print(f"Build complete: {len(result.post_files)} post(s) generated in {output_dir}")


if __name__ == "__main__":
    main()
