"""Minimal Markdown to HTML converter for blog posts.

This is a fixed sequence of regex substitutions over the whole document, not
a block-structured parser.  Known limitations, pinned by tests:

- ordered and unordered list items both become ``<li>`` and every run of
  items is wrapped in ``<ul>``;
- each ``> `` line becomes its own ``<blockquote>``;
- a heading followed by a single newline keeps a stray ``<br>``.
"""

from __future__ import annotations

import re

from pagesmith.rendering.inline import (
    BOLD_RE,
    INLINE_CODE_RE,
    ITALIC_RE,
    LINK_RE,
    escape_html,
)

_HEADING_SUBS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^### (.*)$", re.MULTILINE), r"<h3>\1</h3>"),
    (re.compile(r"^## (.*)$", re.MULTILINE), r"<h2>\1</h2>"),
    (re.compile(r"^# (.*)$", re.MULTILINE), r"<h1>\1</h1>"),
)
_FENCED_CODE_RE = re.compile(r"```(\w*)\n(.*?)```", re.DOTALL)
_UNORDERED_ITEM_RE = re.compile(r"^[ \t]*[-*][ \t]+(.*)$", re.MULTILINE)
_ORDERED_ITEM_RE = re.compile(r"^[ \t]*\d+\.[ \t]+(.*)$", re.MULTILINE)
# Input is escaped first, so the marker arrives as "&gt;".
_BLOCKQUOTE_RE = re.compile(r"^&gt;[ \t]+(.*)$", re.MULTILINE)
_HR_RE = re.compile(r"^---$", re.MULTILINE)

_CLEANUP_SUBS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"<p></p>"), ""),
    (re.compile(r"<p>\s*<hr>\s*</p>"), "<hr>"),
    (re.compile(r"<p>\s*(<h[1-6]>)"), r"\1"),
    (re.compile(r"(</h[1-6]>)\s*</p>"), r"\1"),
    (re.compile(r"<p>\s*<pre>"), "<pre>"),
    (re.compile(r"</pre>\s*</p>"), "</pre>"),
    (re.compile(r"<p>\s*<blockquote>"), "<blockquote>"),
    (re.compile(r"</blockquote>\s*</p>"), "</blockquote>"),
)
_LIST_RUN_RE = re.compile(r"<li>.*?</li>(?:\s*(?:<br>\s*)*<li>.*?</li>)*", re.DOTALL)
_ITEM_GAP_RE = re.compile(r"</li>\s*(?:<br>\s*)*<li>")


def _wrap_list_run(match: re.Match[str]) -> str:
    items = _ITEM_GAP_RE.sub("</li><li>", match.group(0))
    return f"<ul>{items}</ul>"


def markdown_to_html(markdown: str | None) -> str:
    """Convert a Markdown string to an HTML fragment.

    Never raises; malformed input yields visually broken but well-formed
    output.
    """
    if not markdown:
        return ""

    html = escape_html(markdown, quote=False)

    for pattern, replacement in _HEADING_SUBS:
        html = pattern.sub(replacement, html)

    html = BOLD_RE.sub(r"<strong>\1</strong>", html)
    html = ITALIC_RE.sub(r"<em>\1</em>", html)

    html = _FENCED_CODE_RE.sub(r"<pre><code>\2</code></pre>", html)
    html = INLINE_CODE_RE.sub(r"<code>\1</code>", html)

    html = LINK_RE.sub(r'<a href="\2">\1</a>', html)

    html = _UNORDERED_ITEM_RE.sub(r"<li>\1</li>", html)
    html = _ORDERED_ITEM_RE.sub(r"<li>\1</li>", html)

    html = _BLOCKQUOTE_RE.sub(r"<blockquote>\1</blockquote>", html)
    html = _HR_RE.sub("<hr>", html)

    html = html.replace("\n\n", "</p><p>")
    html = html.replace("\n", "<br>")

    html = f"<p>{html}</p>"
    for pattern, replacement in _CLEANUP_SUBS:
        html = pattern.sub(replacement, html)
    return _LIST_RUN_RE.sub(_wrap_list_run, html)
