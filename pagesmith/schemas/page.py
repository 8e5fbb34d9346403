"""Page-related schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pagesmith.schemas.blocks import Block

SLUG_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9_-]*$"


class CoverConfig(BaseModel):
    """Page cover: a CSS gradient or an image source."""

    model_config = ConfigDict(frozen=True)

    gradient: str | None = None
    src: str | None = None


class IconConfig(BaseModel):
    """Page icon: ``{type: "none"}``, ``{emoji}`` or ``{type: "image", src}``."""

    model_config = ConfigDict(frozen=True)

    type: Literal["none", "emoji", "image"] | None = None
    emoji: str | None = None
    src: str | None = None


class PageConfig(BaseModel):
    """Root descriptor of a generated page."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    slug: str = Field(min_length=1, max_length=200, pattern=SLUG_PATTERN)
    title: str
    description: str = ""
    cover: CoverConfig | None = None
    icon: IconConfig | None = None
    toc: bool = False
    back_link: bool = True
    breadcrumb: str | None = None
    parent_page: str | None = None
    parent_href: str | None = None
    og_image: str | None = None
    blocks: list[Block] = Field(default_factory=list)
