"""Shared test fixtures for pagesmith."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest

from pagesmith.config import Settings
from pagesmith.schemas.post import Post

if TYPE_CHECKING:
    from pathlib import Path

TEST_BASE_URL = "https://site.test"


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings isolated from the environment, writing under tmp_path."""
    return Settings(
        _env_file=None,
        base_url=TEST_BASE_URL,
        site_name="Test Site",
        author_name="Test Author",
        contact_email="author@site.test",
        linkedin_url="https://linkedin.test/in/author",
        default_cover="https://site.test/default-cover.jpg",
        profile_image="https://site.test/profile.png",
        og_image="https://site.test/og.png",
        supabase_url="https://db.site.test",
        supabase_anon_key="anon-key",
        output_dir=tmp_path / "out",
        blog_dir=tmp_path / "blog",
    )


@pytest.fixture
def sample_post() -> Post:
    return Post(
        slug="hello-world",
        title="Hello World",
        content="# Intro\n\nSome **bold** words.\n\n- one\n- two",
        excerpt='A "quoted" excerpt',
        icon="🚀",
        cover_image="https://site.test/cover.jpg",
        created_at=datetime(2026, 3, 5, 12, 0, tzinfo=UTC),
        updated_at=datetime(2026, 3, 6, 8, 30, tzinfo=UTC),
    )
