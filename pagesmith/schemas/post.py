"""Post-related schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pagesmith.schemas.page import SLUG_PATTERN


class Post(BaseModel):
    """A published blog post as delivered by a post store."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    slug: str = Field(min_length=1, max_length=200, pattern=SLUG_PATTERN)
    title: str = Field(min_length=1)
    content: str = ""
    excerpt: str | None = None
    icon: str | None = None
    cover_image: str | None = None
    published: bool = True
    created_at: datetime
    updated_at: datetime | None = None

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v

    @field_validator("content", mode="before")
    @classmethod
    def none_content_to_empty(cls, v: str | None) -> str:
        return "" if v is None else v
