"""Post stores: where published blog posts come from."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import frontmatter
import httpx
import yaml
from pydantic import ValidationError

from pagesmith.exceptions import PostFetchError
from pagesmith.schemas.post import Post
from pagesmith.services.datetime_service import parse_datetime

if TYPE_CHECKING:
    from pathlib import Path

    from pagesmith.config import Settings

logger = logging.getLogger(__name__)


@runtime_checkable
class PostStore(Protocol):
    """Protocol for sources of published posts."""

    def fetch_published(self) -> list[Post]:
        """Return every published post."""
        ...


def _validate_posts(records: list[Any], source: str) -> list[Post]:
    """Build Post models, skipping records that do not validate."""
    posts: list[Post] = []
    for record in records:
        try:
            post = Post.model_validate(record)
        except ValidationError as exc:
            slug = record.get("slug") if isinstance(record, dict) else None
            logger.warning(
                "Skipping invalid post %r from %s: %d validation error(s)",
                slug,
                source,
                exc.error_count(),
            )
            continue
        if post.published:
            posts.append(post)
    return posts


class SupabasePostStore:
    """Reads published posts from a Supabase (PostgREST) table."""

    def __init__(self, settings: Settings, client: httpx.Client | None = None) -> None:
        self.table = settings.posts_table
        self.client = client or httpx.Client(
            base_url=settings.supabase_url.rstrip("/"),
            headers={
                "apikey": settings.supabase_anon_key,
                "Authorization": f"Bearer {settings.supabase_anon_key}",
            },
            timeout=settings.request_timeout,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self) -> SupabasePostStore:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def fetch_published(self) -> list[Post]:
        """Fetch every row with ``published = true``."""
        path = f"/rest/v1/{self.table}"
        try:
            response = self.client.get(path, params={"published": "eq.true", "select": "*"})
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise PostFetchError(
                f"Post store returned HTTP {exc.response.status_code} for {path}"
            ) from None
        except httpx.HTTPError as exc:
            raise PostFetchError(f"Post store unreachable: {exc}") from None

        try:
            data = response.json()
        except ValueError:
            raise PostFetchError(
                f"Post store returned non-JSON response (HTTP {response.status_code})"
            ) from None
        if not isinstance(data, list):
            raise PostFetchError(f"Post store returned {type(data).__name__}, expected a list")

        posts = _validate_posts(data, source="supabase")
        logger.info("Fetched %d published post(s) from %s", len(posts), self.table)
        return posts


def extract_title(content: str) -> str | None:
    """Return the text of the first level-1 heading, if any."""
    for line in content.strip().split("\n"):
        stripped = line.strip()
        if stripped.startswith("# ") and not stripped.startswith("## "):
            return stripped.removeprefix("# ").strip()
    return None


class LocalPostStore:
    """Reads posts from a directory of Markdown files with YAML front matter.

    Recognised front matter keys: ``title``, ``slug``, ``excerpt``, ``icon``,
    ``cover_image``, ``published``, ``created_at``, ``updated_at``.  The slug
    defaults to the file name without extension.
    """

    def __init__(self, posts_dir: Path, default_tz: str = "UTC") -> None:
        self.posts_dir = posts_dir
        self.default_tz = default_tz

    def fetch_published(self) -> list[Post]:
        if not self.posts_dir.is_dir():
            raise PostFetchError(f"Posts directory not found: {self.posts_dir}")

        records: list[dict[str, Any]] = []
        for path in sorted(self.posts_dir.glob("*.md")):
            try:
                records.append(self._read_record(path))
            except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as exc:
                logger.warning("Skipping unreadable post %s: %s", path, exc)
        posts = _validate_posts(records, source=str(self.posts_dir))
        logger.info("Loaded %d published post(s) from %s", len(posts), self.posts_dir)
        return posts

    def _read_record(self, path: Path) -> dict[str, Any]:
        post = frontmatter.loads(path.read_text(encoding="utf-8"))
        record: dict[str, Any] = {
            key: post.get(key)
            for key in ("excerpt", "icon", "cover_image")
            if post.get(key) is not None
        }
        record["slug"] = str(post.get("slug") or path.stem)
        record["content"] = post.content
        record["published"] = bool(post.get("published", True))

        fm_title = post.get("title")
        if fm_title is not None and str(fm_title).strip():
            record["title"] = str(fm_title)
        else:
            record["title"] = extract_title(post.content) or path.stem.replace("-", " ").title()

        raw_created = post.get("created_at")
        if raw_created is None:
            raise ValueError("missing created_at")
        record["created_at"] = self._parse_date(raw_created)
        raw_updated = post.get("updated_at")
        if raw_updated is not None:
            record["updated_at"] = self._parse_date(raw_updated)
        return record

    def _parse_date(self, raw: object) -> datetime:
        # YAML yields date/datetime objects for unquoted values
        if isinstance(raw, datetime):
            return parse_datetime(raw, default_tz=self.default_tz)
        if isinstance(raw, date):
            return parse_datetime(raw.isoformat(), default_tz=self.default_tz)
        return parse_datetime(str(raw), default_tz=self.default_tz)
