"""Tests for the Supabase and local Markdown post stores."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx
import pytest

from pagesmith.exceptions import PostFetchError
from pagesmith.services.post_store import (
    LocalPostStore,
    PostStore,
    SupabasePostStore,
    extract_title,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from pagesmith.config import Settings


def _row(**overrides: Any) -> dict[str, Any]:
    row: dict[str, Any] = {
        "id": 1,
        "slug": "first",
        "title": "First",
        "content": "Body",
        "excerpt": None,
        "icon": None,
        "cover_image": None,
        "published": True,
        "created_at": "2026-03-05T12:00:00+00:00",
        "updated_at": None,
    }
    row.update(overrides)
    return row


def _store(
    settings: Settings, handler: Callable[[httpx.Request], httpx.Response]
) -> SupabasePostStore:
    client = httpx.Client(
        base_url=settings.supabase_url, transport=httpx.MockTransport(handler)
    )
    return SupabasePostStore(settings, client=client)


class TestSupabasePostStore:
    def test_satisfies_protocol(self, test_settings: Settings) -> None:
        with SupabasePostStore(test_settings) as store:
            assert isinstance(store, PostStore)

    def test_default_client_headers(self, test_settings: Settings) -> None:
        with SupabasePostStore(test_settings) as store:
            assert store.client.headers["apikey"] == "anon-key"
            assert store.client.headers["Authorization"] == "Bearer anon-key"
            assert str(store.client.base_url).startswith("https://db.site.test")

    def test_fetch_published(self, test_settings: Settings) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[_row(), _row(slug="second", title="Second")])

        with _store(test_settings, handler) as store:
            posts = store.fetch_published()

        assert [p.slug for p in posts] == ["first", "second"]
        assert seen[0].method == "GET"
        assert seen[0].url.path == "/rest/v1/posts"
        assert seen[0].url.params["published"] == "eq.true"
        assert seen[0].url.params["select"] == "*"

    def test_unpublished_rows_are_dropped(self, test_settings: Settings) -> None:
        rows = [_row(), _row(slug="draft", published=False)]
        with _store(test_settings, lambda _: httpx.Response(200, json=rows)) as store:
            assert [p.slug for p in store.fetch_published()] == ["first"]

    def test_invalid_rows_are_skipped(
        self, test_settings: Settings, caplog: pytest.LogCaptureFixture
    ) -> None:
        rows = [_row(), _row(slug="broken", created_at=None), "not-a-row"]
        with (
            _store(test_settings, lambda _: httpx.Response(200, json=rows)) as store,
            caplog.at_level(logging.WARNING),
        ):
            posts = store.fetch_published()
        assert [p.slug for p in posts] == ["first"]
        assert "Skipping invalid post 'broken'" in caplog.text

    def test_http_error(self, test_settings: Settings) -> None:
        with (
            _store(test_settings, lambda _: httpx.Response(401, json={"msg": "no"})) as store,
            pytest.raises(PostFetchError, match="HTTP 401"),
        ):
            store.fetch_published()

    def test_transport_error(self, test_settings: Settings) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with (
            _store(test_settings, handler) as store,
            pytest.raises(PostFetchError, match="unreachable"),
        ):
            store.fetch_published()

    def test_non_json_response(self, test_settings: Settings) -> None:
        with (
            _store(test_settings, lambda _: httpx.Response(200, text="<html>")) as store,
            pytest.raises(PostFetchError, match="non-JSON"),
        ):
            store.fetch_published()

    def test_non_list_response(self, test_settings: Settings) -> None:
        with (
            _store(test_settings, lambda _: httpx.Response(200, json={"rows": []})) as store,
            pytest.raises(PostFetchError, match="expected a list"),
        ):
            store.fetch_published()


class TestExtractTitle:
    def test_first_h1(self) -> None:
        assert extract_title("intro\n# Title\n# Other") == "Title"

    def test_h2_is_not_a_title(self) -> None:
        assert extract_title("## Sub\ntext") is None


class TestLocalPostStore:
    def _write(self, directory: Path, name: str, text: str) -> None:
        directory.mkdir(parents=True, exist_ok=True)
        (directory / name).write_text(text, encoding="utf-8")

    def test_reads_front_matter(self, tmp_path: Path) -> None:
        self._write(
            tmp_path,
            "hello.md",
            "---\n"
            "title: Hello\n"
            "excerpt: Short\n"
            "icon: 🚀\n"
            "created_at: 2026-03-05 12:00:00+00:00\n"
            "updated_at: '2026-03-06'\n"
            "---\n"
            "Body text\n",
        )
        (post,) = LocalPostStore(tmp_path).fetch_published()
        assert post.slug == "hello"
        assert post.title == "Hello"
        assert post.excerpt == "Short"
        assert post.icon == "🚀"
        assert post.content.strip() == "Body text"
        assert post.created_at.day == 5
        assert post.updated_at is not None
        assert post.updated_at.day == 6

    def test_slug_override_and_date_only(self, tmp_path: Path) -> None:
        self._write(
            tmp_path, "x.md", "---\nslug: custom\ntitle: T\ncreated_at: 2026-01-02\n---\nB\n"
        )
        (post,) = LocalPostStore(tmp_path, default_tz="UTC").fetch_published()
        assert post.slug == "custom"
        assert (post.created_at.year, post.created_at.month, post.created_at.day) == (2026, 1, 2)
        assert post.created_at.tzinfo is not None

    def test_title_from_heading_then_stem(self, tmp_path: Path) -> None:
        self._write(tmp_path, "a.md", "---\ncreated_at: 2026-01-01\n---\n# From Heading\n")
        self._write(tmp_path, "my-post.md", "---\ncreated_at: 2026-01-01\n---\nno heading\n")
        posts = {p.slug: p for p in LocalPostStore(tmp_path).fetch_published()}
        assert posts["a"].title == "From Heading"
        assert posts["my-post"].title == "My Post"

    def test_unpublished_and_broken_files_skipped(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        self._write(tmp_path, "ok.md", "---\ntitle: Ok\ncreated_at: 2026-01-01\n---\n")
        self._write(
            tmp_path, "draft.md", "---\ntitle: D\npublished: false\ncreated_at: 2026-01-01\n---\n"
        )
        self._write(tmp_path, "nodate.md", "---\ntitle: N\n---\nbody\n")
        self._write(tmp_path, "badyaml.md", "---\ntitle: [unclosed\n---\nbody\n")
        self._write(tmp_path, "notes.txt", "ignored")
        with caplog.at_level(logging.WARNING):
            posts = LocalPostStore(tmp_path).fetch_published()
        assert [p.slug for p in posts] == ["ok"]
        assert "nodate.md" in caplog.text
        assert "badyaml.md" in caplog.text

    def test_sorted_by_file_name(self, tmp_path: Path) -> None:
        for name in ("b.md", "a.md", "c.md"):
            self._write(tmp_path, name, "---\ncreated_at: 2026-01-01\n---\n")
        assert [p.slug for p in LocalPostStore(tmp_path).fetch_published()] == ["a", "b", "c"]

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(PostFetchError, match="Posts directory not found"):
            LocalPostStore(tmp_path / "nope").fetch_published()

    def test_satisfies_protocol(self, tmp_path: Path) -> None:
        assert isinstance(LocalPostStore(tmp_path), PostStore)
