"""HTML escaping and inline text formatting shared by both renderers."""

from __future__ import annotations

import re

BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
ITALIC_RE = re.compile(r"\*(.*?)\*")
INLINE_CODE_RE = re.compile(r"`(.*?)`")
LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")


def escape_html(text: str, *, quote: bool = True) -> str:
    """Escape ``&``, ``<``, ``>`` and, when *quote* is true, ``"``.

    Single quotes are never escaped.  Block attributes and code use the quoting
    form; the Markdown converter escapes its whole input without quotes.
    """
    escaped = text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
    if quote:
        escaped = escaped.replace('"', "&quot;")
    return escaped


def format_inline(text: str | None) -> str:
    """Apply bold, italic, inline code and link markup, in that order.

    Each substitution runs once over the whole string.  Bold goes first so its
    ``**`` delimiters are not consumed as italics.  The input is not escaped:
    callers passing untrusted text must escape it first.
    """
    if not text:
        return ""
    text = BOLD_RE.sub(r"<strong>\1</strong>", text)
    text = ITALIC_RE.sub(r"<em>\1</em>", text)
    text = INLINE_CODE_RE.sub(r"<code>\1</code>", text)
    return LINK_RE.sub(r'<a href="\2" class="text-link">\1</a>', text)
