"""Post service: blog post pages and the blog index."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from pagesmith.rendering.inline import escape_html
from pagesmith.rendering.markdown import markdown_to_html
from pagesmith.rendering.navcover import NO_ICON, NavCover, NavCoverOptions
from pagesmith.rendering.styles import BLOG_INDEX_STYLES, POST_STYLES
from pagesmith.services.datetime_service import format_display_date, format_iso

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pagesmith.config import Settings
    from pagesmith.schemas.post import Post

DEFAULT_POST_ICON = "📝"
BLOG_PATH = "blog"


def count_words(text: str) -> int:
    """Number of whitespace-separated words."""
    return len(text.split())


def post_url(post: Post, settings: Settings) -> str:
    return f"{settings.site_url}/{BLOG_PATH}/{post.slug}.html"


def build_post_schema(post: Post, settings: Settings) -> dict[str, Any]:
    """Schema.org ``BlogPosting`` structured data for a post."""
    url = post_url(post, settings)
    author = {"@type": "Person", "name": settings.author_name, "url": settings.site_url}
    published = format_iso(post.created_at)
    return {
        "@context": "https://schema.org",
        "@type": "BlogPosting",
        "@id": url,
        "mainEntityOfPage": url,
        "headline": post.title,
        "description": post.excerpt or "",
        "articleBody": post.content,
        "datePublished": published,
        "dateModified": format_iso(post.updated_at) if post.updated_at else published,
        "author": author,
        "publisher": dict(author),
        "image": [post.cover_image] if post.cover_image else [],
        "inLanguage": "en",
        "wordCount": count_words(post.content),
    }


def _json_ld(data: dict[str, Any]) -> str:
    # "</" would close the surrounding <script> element early.
    return json.dumps(data, indent=4, ensure_ascii=False).replace("</", "<\\/")


def render_post(post: Post, settings: Settings) -> str:
    """Render a post into a complete HTML5 document."""
    nav_cover = NavCover(settings)
    options = NavCoverOptions(
        current_page=post.title,
        parent_page="Blog",
        parent_href=f"{settings.site_url}/#blog",
        cover_image=post.cover_image,
        page_icon=NO_ICON,
    )
    url = escape_html(post_url(post, settings))
    title = escape_html(post.title)
    description = escape_html(post.excerpt or "")
    image = escape_html(post.cover_image or settings.og_image_url)
    author = escape_html(settings.author_name)
    excerpt = f'<p class="excerpt">{post.excerpt}</p>' if post.excerpt else ""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{post.title} - {settings.site_name}</title>

    <!-- SEO Meta Tags -->
    <meta name="description" content="{description}">
    <meta name="author" content="{author}">
    <link rel="canonical" href="{url}">

    <!-- Open Graph -->
    <meta property="og:title" content="{title}">
    <meta property="og:description" content="{description}">
    <meta property="og:image" content="{image}">
    <meta property="og:url" content="{url}">
    <meta property="og:type" content="article">
    <meta property="article:published_time" content="{format_iso(post.created_at)}">
    <meta property="article:author" content="{author}">

    <!-- Twitter Card -->
    <meta name="twitter:card" content="summary_large_image">
    <meta name="twitter:title" content="{title}">
    <meta name="twitter:description" content="{description}">
    <meta name="twitter:image" content="{image}">

    <!-- JSON-LD Schema -->
    <script type="application/ld+json">
{_json_ld(build_post_schema(post, settings))}
    </script>

    <style>
{POST_STYLES}
{nav_cover.styles()}
    </style>
</head>
<body class="dark-mode">
    {nav_cover.header_html(options)}

    <main class="post-container">
        <div class="icon">{post.icon or DEFAULT_POST_ICON}</div>
        <p class="meta">{format_display_date(post.created_at, settings.timezone)}</p>
        <h1>{post.title}</h1>
        {excerpt}

        <article class="content">
{markdown_to_html(post.content)}
        </article>

        <a href="{escape_html(settings.site_url)}/#blog" class="back-link">← Back to Blog</a>
    </main>

    <script>
{nav_cover.script()}
    </script>
</body>
</html>"""


def _render_post_card(post: Post, settings: Settings) -> str:
    cover = (
        f'<img src="{escape_html(post.cover_image)}" alt="{escape_html(post.title)}" '
        'class="post-cover">'
        if post.cover_image
        else ""
    )
    excerpt = f'<p class="post-excerpt">{post.excerpt}</p>' if post.excerpt else ""
    return f"""
        <a href="/{BLOG_PATH}/{escape_html(post.slug)}.html" class="post-card">
            {cover}
            <div class="post-info">
                <span class="post-icon">{post.icon or DEFAULT_POST_ICON}</span>
                <h2>{post.title}</h2>
                <p class="post-date">{format_display_date(post.created_at, settings.timezone)}</p>
                {excerpt}
            </div>
        </a>
    """


def render_blog_index(posts: Sequence[Post], settings: Settings) -> str:
    """Render the blog index listing every post as a card."""
    nav_cover = NavCover(settings)
    options = NavCoverOptions(current_page="Blog", page_icon=NO_ICON)
    cards = "\n".join(_render_post_card(post, settings) for post in posts)
    site_url = escape_html(settings.site_url)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Blog - {settings.site_name}</title>
    <meta name="description" content="Blog posts by {escape_html(settings.author_name)}.">
    <link rel="canonical" href="{site_url}/{BLOG_PATH}/">
    <style>
{BLOG_INDEX_STYLES}
{nav_cover.styles()}
    </style>
</head>
<body class="dark-mode">
    {nav_cover.header_html(options)}

    <div class="index-container">
        <a href="{site_url}" class="back-link">← Back to Home</a>
        <h1>{DEFAULT_POST_ICON} Blog</h1>

        <div class="posts-grid">
{cards}
        </div>
    </div>

    <script>
{nav_cover.script()}
    </script>
</body>
</html>"""
