"""Build service: render configs and posts to static files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pagesmith.filesystem.output import write_html
from pagesmith.services.page_service import load_page_config, render_page
from pagesmith.services.post_service import render_blog_index, render_post

if TYPE_CHECKING:
    from pathlib import Path

    from pagesmith.config import Settings
    from pagesmith.schemas.page import PageConfig
    from pagesmith.services.post_store import PostStore

logger = logging.getLogger(__name__)

BLOG_INDEX_NAME = "index"


@dataclass
class BuildResult:
    """Files written by a blog build."""

    post_files: list[Path] = field(default_factory=list)
    index_file: Path | None = None

    @property
    def total(self) -> int:
        return len(self.post_files) + (1 if self.index_file is not None else 0)


def write_page(config: PageConfig, settings: Settings, output_dir: Path) -> Path:
    """Render a page config and write it as ``<slug>.html``."""
    return write_html(output_dir, config.slug, render_page(config, settings))


def build_page(config_path: Path, settings: Settings, output_dir: Path) -> Path:
    """Load a page config file and write the rendered page."""
    config = load_page_config(config_path)
    return write_page(config, settings, output_dir)


def build_posts(store: PostStore, settings: Settings, output_dir: Path) -> BuildResult:
    """Render every published post plus the blog index.

    Nothing is written when the store has no published posts.
    """
    posts = store.fetch_published()
    result = BuildResult()
    if not posts:
        logger.info("No published posts found")
        return result

    for post in posts:
        result.post_files.append(write_html(output_dir, post.slug, render_post(post, settings)))
    result.index_file = write_html(
        output_dir, BLOG_INDEX_NAME, render_blog_index(posts, settings)
    )
    logger.info("Build complete: %d post(s) generated in %s", len(posts), output_dir)
    return result
