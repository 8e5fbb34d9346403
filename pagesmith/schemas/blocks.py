"""Content block schemas.

A page body is a tree of blocks.  Each block is a JSON object tagged by its
``type`` field; the set of recognised tags is closed and every tag maps to one
model below.  Objects carrying any other tag (or none at all) validate as
:class:`UnknownBlock` so a single unexpected block never rejects a whole page.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    model_validator,
)


class _BlockModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class CoverBlock(_BlockModel):
    """Full-width banner: a CSS gradient or an image."""

    type: Literal["cover"] = "cover"
    gradient: str | None = None
    src: str | None = None
    alt: str = ""


class IconBlock(_BlockModel):
    """Page icon: an emoji, an avatar-style image, or nothing."""

    type: Literal["icon"] = "icon"
    kind: Literal["emoji", "image", "none"] = "emoji"
    emoji: str = ""
    src: str | None = None

    @model_validator(mode="before")
    @classmethod
    def nested_icon_choice(cls, data: Any) -> Any:
        """Accept the page-level form ``{"icon": {"type": ..., "emoji"|"src": ...}}``."""
        if not isinstance(data, dict) or not isinstance(data.get("icon"), dict):
            return data
        choice = data["icon"]
        merged = {key: value for key, value in data.items() if key != "icon"}
        if choice.get("type") in ("none", "image", "emoji"):
            merged.setdefault("kind", choice["type"])
        elif choice.get("emoji"):
            merged.setdefault("kind", "emoji")
        for key in ("emoji", "src"):
            if choice.get(key) is not None:
                merged.setdefault(key, choice[key])
        return merged


class Heading1Block(_BlockModel):
    type: Literal["h1"] = "h1"
    text: str
    style: str | None = None


class Heading2Block(_BlockModel):
    type: Literal["h2"] = "h2"
    text: str
    style: str | None = None


class Heading3Block(_BlockModel):
    type: Literal["h3"] = "h3"
    text: str
    style: str | None = None


class ParagraphBlock(_BlockModel):
    type: Literal["paragraph"] = "paragraph"
    text: str = ""
    style: str | None = None


class CalloutBlock(_BlockModel):
    """Highlighted box holding inline text or nested blocks."""

    type: Literal["callout"] = "callout"
    content: str | list[Block] = ""
    icon: str | None = None
    background: str | None = None


class LeadItem(_BlockModel):
    """List item with a bold lead-in and optional trailing text."""

    lead: str
    text: str | None = None


class BulletListBlock(_BlockModel):
    type: Literal["bulletList"] = "bulletList"
    items: list[str | LeadItem]


class NumberedListBlock(_BlockModel):
    type: Literal["numberedList"] = "numberedList"
    items: list[str | LeadItem]


class QuoteBlock(_BlockModel):
    type: Literal["quote"] = "quote"
    text: str = ""
    attribution: str | None = None


class DividerBlock(_BlockModel):
    type: Literal["divider"] = "divider"


class Column(_BlockModel):
    """One column of a multi-column layout."""

    blocks: list[Block] = Field(default_factory=list)
    style: str | None = None


class ColumnsBlock(_BlockModel):
    """Flex row of columns."""

    type: Literal["columns"] = "columns"
    columns: list[Column]


class ThreeColumnsBlock(_BlockModel):
    """Fixed three-track grid; per-column styles are not applied."""

    type: Literal["threeColumns"] = "threeColumns"
    columns: list[Column]


class ToggleBlock(_BlockModel):
    """Collapsible disclosure with a triangle indicator."""

    type: Literal["toggle"] = "toggle"
    title: str
    content: str | list[Block] = ""


class NumberedToggleBlock(_BlockModel):
    """Collapsible disclosure with a numeric badge, used for process steps."""

    type: Literal["numberedToggle"] = "numberedToggle"
    number: int | str
    title: str
    content: str | list[Block] = ""


class ButtonBlock(_BlockModel):
    """Call-to-action link; ``style`` names a button variant, not CSS."""

    type: Literal["button"] = "button"
    text: str
    href: str
    style: str = "primary"
    target: str = "_self"


class LinkBlock(_BlockModel):
    type: Literal["link"] = "link"
    text: str
    href: str


class CodeBlock(_BlockModel):
    type: Literal["code"] = "code"
    code: str


class ImageBlock(_BlockModel):
    type: Literal["image"] = "image"
    src: str
    alt: str = ""
    caption: str | None = None


class GalleryCard(_BlockModel):
    title: str
    href: str | None = None
    cover: str | None = None
    icon: str | None = None
    subtitle: str | None = None
    description: str | None = None


class GalleryBlock(_BlockModel):
    type: Literal["gallery"] = "gallery"
    cards: list[GalleryCard]


class TocBlock(_BlockModel):
    """Placeholder filled client-side with links to every ``h2``."""

    type: Literal["toc"] = "toc"


class SpacerBlock(_BlockModel):
    type: Literal["spacer"] = "spacer"
    height: str = "24px"


class CenteredBlock(_BlockModel):
    type: Literal["centered"] = "centered"
    blocks: list[Block]


class HtmlBlock(_BlockModel):
    """Raw HTML inserted verbatim.

    This is a trust boundary: content is never escaped or sanitized, so
    whoever produces the page config is responsible for what reaches it.
    """

    type: Literal["html"] = "html"
    content: str = ""


class UnknownBlock(_BlockModel):
    """Any block whose ``type`` is not recognised.

    ``type`` keeps whatever value the input carried.  Entries that are not
    objects at all are kept under ``value``.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    type: Any = None

    @model_validator(mode="before")
    @classmethod
    def wrap_non_object(cls, data: Any) -> Any:
        if isinstance(data, (dict, BaseModel)):
            return data
        return {"type": None, "value": data}


BLOCK_TYPES: frozenset[str] = frozenset(
    {
        "cover",
        "icon",
        "h1",
        "h2",
        "h3",
        "paragraph",
        "callout",
        "bulletList",
        "numberedList",
        "quote",
        "divider",
        "columns",
        "threeColumns",
        "toggle",
        "numberedToggle",
        "button",
        "link",
        "code",
        "image",
        "gallery",
        "toc",
        "spacer",
        "centered",
        "html",
    }
)

_UNKNOWN_TAG = "unknown"


def _block_tag(value: Any) -> str:
    """Pick the union member for a raw dict or an already-built block."""
    if isinstance(value, dict):
        tag = value.get("type")
    else:
        tag = getattr(value, "type", None)
    if isinstance(value, UnknownBlock) or not (isinstance(tag, str) and tag in BLOCK_TYPES):
        return _UNKNOWN_TAG
    return str(tag)


Block = Annotated[
    Union[
        Annotated[CoverBlock, Tag("cover")],
        Annotated[IconBlock, Tag("icon")],
        Annotated[Heading1Block, Tag("h1")],
        Annotated[Heading2Block, Tag("h2")],
        Annotated[Heading3Block, Tag("h3")],
        Annotated[ParagraphBlock, Tag("paragraph")],
        Annotated[CalloutBlock, Tag("callout")],
        Annotated[BulletListBlock, Tag("bulletList")],
        Annotated[NumberedListBlock, Tag("numberedList")],
        Annotated[QuoteBlock, Tag("quote")],
        Annotated[DividerBlock, Tag("divider")],
        Annotated[ColumnsBlock, Tag("columns")],
        Annotated[ThreeColumnsBlock, Tag("threeColumns")],
        Annotated[ToggleBlock, Tag("toggle")],
        Annotated[NumberedToggleBlock, Tag("numberedToggle")],
        Annotated[ButtonBlock, Tag("button")],
        Annotated[LinkBlock, Tag("link")],
        Annotated[CodeBlock, Tag("code")],
        Annotated[ImageBlock, Tag("image")],
        Annotated[GalleryBlock, Tag("gallery")],
        Annotated[TocBlock, Tag("toc")],
        Annotated[SpacerBlock, Tag("spacer")],
        Annotated[CenteredBlock, Tag("centered")],
        Annotated[HtmlBlock, Tag("html")],
        Annotated[UnknownBlock, Tag(_UNKNOWN_TAG)],
    ],
    Discriminator(_block_tag),
]

for _model in (
    CalloutBlock,
    Column,
    ColumnsBlock,
    ThreeColumnsBlock,
    ToggleBlock,
    NumberedToggleBlock,
    CenteredBlock,
):
    _model.model_rebuild()

_BLOCK_ADAPTER: TypeAdapter[Any] = TypeAdapter(Block)
_BLOCK_LIST_ADAPTER: TypeAdapter[list[Any]] = TypeAdapter(list[Block])


def parse_block(data: Any) -> Block:
    """Validate one raw block.

    Raises pydantic.ValidationError when a recognised block is missing a
    required field (e.g. a ``bulletList`` without ``items``).
    """
    return _BLOCK_ADAPTER.validate_python(data)


def parse_blocks(data: Any) -> list[Block]:
    """Validate a list of raw blocks."""
    return _BLOCK_LIST_ADAPTER.validate_python(data)
