"""Tests for static output writing and build orchestration."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest

from pagesmith.exceptions import PageConfigError, PostFetchError
from pagesmith.filesystem.output import write_html
from pagesmith.schemas.post import Post
from pagesmith.services.build_service import BuildResult, build_page, build_posts

if TYPE_CHECKING:
    from pathlib import Path

    from pagesmith.config import Settings


class _StaticStore:
    def __init__(self, posts: list[Post]) -> None:
        self.posts = posts

    def fetch_published(self) -> list[Post]:
        return self.posts


class _FailingStore:
    def fetch_published(self) -> list[Post]:
        raise PostFetchError("Post store returned HTTP 500 for /rest/v1/posts")


class TestWriteHtml:
    def test_writes_and_creates_directory(self, tmp_path: Path) -> None:
        out = tmp_path / "nested" / "out"
        path = write_html(out, "about", "<p>hi</p>")
        assert path == (out / "about.html").resolve()
        assert path.read_text(encoding="utf-8") == "<p>hi</p>"

    def test_overwrites(self, tmp_path: Path) -> None:
        write_html(tmp_path, "a", "old")
        assert write_html(tmp_path, "a", "new").read_text(encoding="utf-8") == "new"

    @pytest.mark.parametrize("name", ["../escape", "a/b", "", ".hidden", "a b", "/abs"])
    def test_rejects_unsafe_names(self, tmp_path: Path, name: str) -> None:
        with pytest.raises(ValueError, match="Unsafe output name"):
            write_html(tmp_path, name, "x")
        assert list(tmp_path.iterdir()) == []


class TestBuildPage:
    def test_build_page(self, tmp_path: Path, test_settings: Settings) -> None:
        config_path = tmp_path / "about.json"
        config_path.write_text(
            json.dumps({"slug": "about", "title": "About", "blocks": []}), encoding="utf-8"
        )
        path = build_page(config_path, test_settings, test_settings.output_dir)
        assert path.name == "about.html"
        assert "<title>About - Test Site</title>" in path.read_text(encoding="utf-8")

    def test_invalid_config_writes_nothing(self, tmp_path: Path, test_settings: Settings) -> None:
        config_path = tmp_path / "bad.json"
        config_path.write_text("{}", encoding="utf-8")
        with pytest.raises(PageConfigError):
            build_page(config_path, test_settings, test_settings.output_dir)
        assert not test_settings.output_dir.exists()


class TestBuildPosts:
    def test_posts_and_index(self, test_settings: Settings, sample_post: Post) -> None:
        second = Post(
            slug="second", title="Second", created_at=datetime(2026, 4, 1, tzinfo=UTC)
        )
        out = test_settings.blog_dir
        result = build_posts(_StaticStore([sample_post, second]), test_settings, out)

        assert isinstance(result, BuildResult)
        assert [p.name for p in result.post_files] == ["hello-world.html", "second.html"]
        assert result.index_file is not None
        assert result.index_file.name == "index.html"
        assert result.total == 3
        index = result.index_file.read_text(encoding="utf-8")
        assert "/blog/hello-world.html" in index
        assert "/blog/second.html" in index

    def test_no_posts_writes_nothing(self, test_settings: Settings) -> None:
        result = build_posts(_StaticStore([]), test_settings, test_settings.blog_dir)
        assert result.total == 0
        assert result.index_file is None
        assert not test_settings.blog_dir.exists()

    def test_fetch_failure_propagates(self, test_settings: Settings) -> None:
        with pytest.raises(PostFetchError, match="HTTP 500"):
            build_posts(_FailingStore(), test_settings, test_settings.blog_dir)
        assert not test_settings.blog_dir.exists()
