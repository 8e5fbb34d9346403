"""Block tree to HTML renderer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pagesmith.rendering.inline import escape_html, format_inline
from pagesmith.schemas.blocks import (
    BulletListBlock,
    ButtonBlock,
    CalloutBlock,
    CenteredBlock,
    CodeBlock,
    ColumnsBlock,
    CoverBlock,
    DividerBlock,
    GalleryBlock,
    GalleryCard,
    Heading1Block,
    Heading2Block,
    Heading3Block,
    HtmlBlock,
    IconBlock,
    ImageBlock,
    LeadItem,
    LinkBlock,
    NumberedListBlock,
    NumberedToggleBlock,
    ParagraphBlock,
    QuoteBlock,
    SpacerBlock,
    ThreeColumnsBlock,
    TocBlock,
    ToggleBlock,
    UnknownBlock,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from pagesmith.schemas.blocks import Block

logger = logging.getLogger(__name__)


def _attr(name: str, value: str | None) -> str:
    """Render ` name="value"` with the value escaped, or nothing when unset."""
    if not value:
        return ""
    return f' {name}="{escape_html(value)}"'


def render_blocks(blocks: Sequence[Block], separator: str = "\n") -> str:
    """Render a block list, joining the fragments with *separator*."""
    return separator.join(render_block(block) for block in blocks)


def _render_content(content: str | list[Block], wrap: str) -> str:
    """Render composite content: nested blocks, or inline text inside *wrap*."""
    if isinstance(content, list):
        return render_blocks(content)
    return wrap.format(format_inline(content))


def _render_cover(block: CoverBlock) -> str:
    if block.gradient:
        return (
            f'<div class="cover-image" style="background: {escape_html(block.gradient)}; '
            'height: 30vh;"></div>'
        )
    src = escape_html(block.src or "")
    return f'<img src="{src}" class="cover-image" alt="{escape_html(block.alt)}">'


def _render_icon(block: IconBlock) -> str:
    if block.kind == "none":
        return ""
    if block.kind == "image":
        return f'<div class="page-icon"><img src="{escape_html(block.src or "")}" alt=""></div>'
    return f'<div class="page-icon">{block.emoji}</div>'


def _render_h1(block: Heading1Block) -> str:
    return f'<h1 class="page-title"{_attr("style", block.style)}>{block.text}</h1>'


def _render_h2(block: Heading2Block) -> str:
    return f'<h2{_attr("style", block.style)}>{block.text}</h2>'


def _render_h3(block: Heading3Block) -> str:
    return f'<h3{_attr("style", block.style)}>{block.text}</h3>'


def _render_paragraph(block: ParagraphBlock) -> str:
    return f'<p{_attr("style", block.style)}>{format_inline(block.text)}</p>'


def _render_callout(block: CalloutBlock) -> str:
    icon = f'<div class="callout-icon">{block.icon}</div>' if block.icon else ""
    background = (
        f' style="background: {escape_html(block.background)};"' if block.background else ""
    )
    content = _render_content(block.content, '<div class="callout-content">{}</div>')
    return f'<div class="callout"{background}>{icon}{content}</div>'


def _render_list_item(item: str | LeadItem) -> str:
    if isinstance(item, str):
        return f"<li>{format_inline(item)}</li>"
    trailing = f" — {item.text}" if item.text else ""
    return f"<li><strong>{item.lead}</strong>{trailing}</li>"


def _render_bullet_list(block: BulletListBlock) -> str:
    items = "\n".join(_render_list_item(item) for item in block.items)
    return f"<ul>\n{items}\n</ul>"


def _render_numbered_list(block: NumberedListBlock) -> str:
    items = "\n".join(_render_list_item(item) for item in block.items)
    return f"<ol>\n{items}\n</ol>"


def _render_quote(block: QuoteBlock) -> str:
    attribution = f"<cite>— {block.attribution}</cite>" if block.attribution else ""
    return f"<blockquote>{format_inline(block.text)}{attribution}</blockquote>"


def _render_divider(block: DividerBlock) -> str:
    return "<hr>"


def _render_columns(block: ColumnsBlock) -> str:
    cols = "\n".join(
        f'<div class="notion-col"{_attr("style", col.style)}>\n{render_blocks(col.blocks)}\n</div>'
        for col in block.columns
    )
    return f'<div class="notion-row">\n{cols}\n</div>'


def _render_three_columns(block: ThreeColumnsBlock) -> str:
    cols = "\n".join(
        f'<div class="notion-col-3">\n{render_blocks(col.blocks)}\n</div>'
        for col in block.columns
    )
    return f'<div class="notion-row-3">\n{cols}\n</div>'


def _render_details(classes: str, marker: str, title: str, content: str) -> str:
    return f"""
<details class="{classes}">
    <summary>
        {marker}
        <span>{title}</span>
    </summary>
    <div class="toggle-content">
        {content}
    </div>
</details>"""


def _render_toggle(block: ToggleBlock) -> str:
    return _render_details(
        "notion-toggle",
        '<div class="toggle-triangle">▶</div>',
        block.title,
        _render_content(block.content, "<p>{}</p>"),
    )


def _render_numbered_toggle(block: NumberedToggleBlock) -> str:
    return _render_details(
        "notion-toggle numbered-toggle",
        f'<div class="toggle-number">{block.number}</div>',
        block.title,
        _render_content(block.content, "<p>{}</p>"),
    )


def _render_button(block: ButtonBlock) -> str:
    return (
        f'<a href="{escape_html(block.href)}" class="notion-button {escape_html(block.style)}" '
        f'target="{escape_html(block.target)}">{block.text}</a>'
    )


def _render_link(block: LinkBlock) -> str:
    return f'<a href="{escape_html(block.href)}" class="text-link">{block.text}</a>'


def _render_code(block: CodeBlock) -> str:
    return f'<div class="code-block">{escape_html(block.code)}</div>'


def _render_image(block: ImageBlock) -> str:
    caption = f"<figcaption>{block.caption}</figcaption>" if block.caption else ""
    return (
        f'<figure class="notion-image"><img src="{escape_html(block.src)}" '
        f'alt="{escape_html(block.alt)}">{caption}</figure>'
    )


def _render_gallery_card(card: GalleryCard) -> str:
    onclick = (
        f' onclick="window.location=\'{escape_html(card.href)}\'"' if card.href else ""
    )
    cover = ""
    if card.cover:
        cover = (
            f'<img class="gallery-cover" src="{escape_html(card.cover)}" '
            f'alt="{escape_html(card.title)}">'
        )
    subtitle = f'<div class="gallery-subtitle">{card.subtitle}</div>' if card.subtitle else ""
    description = (
        f'<div class="gallery-description">{card.description}</div>' if card.description else ""
    )
    return f"""
<div class="gallery-card"{onclick}>
    {cover}
    <div class="gallery-content">
        <div class="gallery-title">{card.icon or ""} {card.title}</div>
        {subtitle}
        {description}
    </div>
</div>"""


def _render_gallery(block: GalleryBlock) -> str:
    cards = "\n".join(_render_gallery_card(card) for card in block.cards)
    return f'<div class="gallery-grid">\n{cards}\n</div>'


def _render_toc(block: TocBlock) -> str:
    return (
        '<nav class="notion-toc"><div class="toc-title">On this page</div>'
        '<div id="toc-links"></div></nav>'
    )


def _render_spacer(block: SpacerBlock) -> str:
    return f'<div style="height: {escape_html(block.height)};"></div>'


def _render_centered(block: CenteredBlock) -> str:
    return f'<div class="centered-block">\n{render_blocks(block.blocks)}\n</div>'


def _render_html(block: HtmlBlock) -> str:
    # Verbatim by contract; see HtmlBlock.
    return block.content


def _render_unknown(block: Any) -> str:
    block_type = getattr(block, "type", None)
    logger.warning("Unknown block type: %s", block_type)
    return f"<!-- Unknown block type: {escape_html(str(block_type))} -->"


BLOCK_RENDERERS: dict[type[Any], Callable[[Any], str]] = {
    CoverBlock: _render_cover,
    IconBlock: _render_icon,
    Heading1Block: _render_h1,
    Heading2Block: _render_h2,
    Heading3Block: _render_h3,
    ParagraphBlock: _render_paragraph,
    CalloutBlock: _render_callout,
    BulletListBlock: _render_bullet_list,
    NumberedListBlock: _render_numbered_list,
    QuoteBlock: _render_quote,
    DividerBlock: _render_divider,
    ColumnsBlock: _render_columns,
    ThreeColumnsBlock: _render_three_columns,
    ToggleBlock: _render_toggle,
    NumberedToggleBlock: _render_numbered_toggle,
    ButtonBlock: _render_button,
    LinkBlock: _render_link,
    CodeBlock: _render_code,
    ImageBlock: _render_image,
    GalleryBlock: _render_gallery,
    TocBlock: _render_toc,
    SpacerBlock: _render_spacer,
    CenteredBlock: _render_centered,
    HtmlBlock: _render_html,
    UnknownBlock: _render_unknown,
}


def render_block(block: Block) -> str:
    """Render one block, recursing into nested block lists.

    Anything without a registered renderer degrades to an HTML comment so one
    bad block never aborts the page.
    """
    return BLOCK_RENDERERS.get(type(block), _render_unknown)(block)
