"""Page service: page config loading and full-document assembly."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from pagesmith.exceptions import PageConfigError
from pagesmith.rendering.blocks import render_blocks
from pagesmith.rendering.inline import escape_html
from pagesmith.rendering.navcover import NO_ICON, PROFILE_ICON, NavCover, NavCoverOptions
from pagesmith.rendering.styles import PAGE_STYLES
from pagesmith.schemas.page import PageConfig

if TYPE_CHECKING:
    from pathlib import Path
    from typing import Any

    from pagesmith.config import Settings

logger = logging.getLogger(__name__)

TOC_SCRIPT = """
        // Table of contents: link every h2 in document order
        document.addEventListener('DOMContentLoaded', () => {
            const headings = document.querySelectorAll('h2');
            const tocLinks = document.getElementById('toc-links');
            if (tocLinks && headings.length) {
                headings.forEach((h, i) => {
                    const id = 'section-' + i;
                    h.id = id;
                    tocLinks.innerHTML += '<a href="#' + id + '">' + h.textContent + '</a>';
                });
            }
        });"""


def parse_page_config(data: Any, source: str = "<config>") -> PageConfig:
    """Validate raw page data, reporting schema problems as PageConfigError."""
    try:
        return PageConfig.model_validate(data)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in exc.errors()
        )
        raise PageConfigError(f"Invalid page config {source}: {problems}") from None


def load_page_config(path: Path) -> PageConfig:
    """Load and validate a page config JSON file."""
    if not path.is_file():
        raise PageConfigError(f"Config file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise PageConfigError(
            f"Malformed JSON in {path} (line {exc.lineno}, column {exc.colno}): {exc.msg}"
        ) from None
    except (OSError, UnicodeDecodeError) as exc:
        raise PageConfigError(f"Cannot read config file {path}: {exc}") from None
    return parse_page_config(data, source=str(path))


def nav_cover_options(config: PageConfig) -> NavCoverOptions:
    """Resolve the page's cover and icon choices into header options."""
    cover_image: str | None = None
    cover_gradient: str | None = None
    if config.cover is not None:
        if config.cover.gradient:
            cover_gradient = config.cover.gradient
        elif config.cover.src:
            cover_image = config.cover.src

    page_icon: str | None = PROFILE_ICON
    page_icon_image: str | None = None
    icon = config.icon
    if icon is not None:
        if icon.type == "none":
            page_icon = NO_ICON
        elif icon.emoji:
            page_icon = icon.emoji
        elif icon.type == "image" and icon.src:
            page_icon_image = icon.src

    return NavCoverOptions(
        current_page=config.breadcrumb or config.title,
        parent_page=config.parent_page,
        parent_href=config.parent_href,
        cover_image=cover_image,
        cover_gradient=cover_gradient,
        page_icon=page_icon,
        page_icon_image=page_icon_image,
    )


def render_page(config: PageConfig, settings: Settings) -> str:
    """Render a page config into a complete HTML5 document."""
    nav_cover = NavCover(settings)
    options = nav_cover_options(config)
    blocks_html = render_blocks(config.blocks, separator="\n\n")
    icon_html = nav_cover.page_icon_html(options)
    logger.debug("Rendered %d blocks for page %s", len(config.blocks), config.slug)

    page_url = escape_html(f"{settings.site_url}/{config.slug}.html")
    title = escape_html(config.title)
    description = escape_html(config.description)
    og_image = escape_html(config.og_image or settings.og_image_url)
    main_class = "main-container" if icon_html else "main-container no-icon"
    back_link = (
        f'<a href="{escape_html(settings.site_url)}" class="back-link">← Back to Home</a>'
        if config.back_link
        else ""
    )
    toc_script = TOC_SCRIPT if config.toc else ""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{config.title} - {settings.site_name}</title>

    <!-- SEO -->
    <meta name="description" content="{description}">
    <meta name="author" content="{escape_html(settings.author_name)}">
    <link rel="canonical" href="{page_url}">

    <!-- Open Graph -->
    <meta property="og:title" content="{title}">
    <meta property="og:description" content="{description}">
    <meta property="og:image" content="{og_image}">
    <meta property="og:url" content="{page_url}">
    <meta property="og:type" content="website">

    <!-- Twitter -->
    <meta name="twitter:card" content="summary_large_image">
    <meta name="twitter:title" content="{title}">
    <meta name="twitter:description" content="{description}">

    <style>
{PAGE_STYLES}
        /* NavCover Component Styles */
{nav_cover.styles()}
    </style>
</head>
<body class="dark-mode">
    {nav_cover.header_html(options)}

    <main class="{main_class}">
        {icon_html}
{blocks_html}

        {back_link}
    </main>

    <script>
{nav_cover.script()}
{toc_script}
    </script>
</body>
</html>"""
