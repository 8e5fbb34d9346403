"""Site configuration loaded from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Pagesmith site settings.

    Instances are immutable and passed explicitly to every renderer that needs
    site-wide values, so a single build never reads process-wide state.
    """

    model_config = SettingsConfigDict(
        env_prefix="PAGESMITH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    debug: bool = False

    # Site identity
    base_url: str = "https://example.com"
    site_name: str = "My Site"
    author_name: str = "Site Author"
    contact_email: str = "hello@example.com"
    linkedin_url: str = ""
    timezone: str = "UTC"

    # Images
    default_cover: str = "https://example.com/cover.jpg"
    profile_image: str = "https://example.com/profile.png"
    og_image: str = ""

    # Post store
    supabase_url: str = ""
    supabase_anon_key: str = ""
    posts_table: str = "posts"
    request_timeout: float = Field(default=30.0, gt=0)

    # Output
    output_dir: Path = Path(".")
    blog_dir: Path = Path("./blog")

    @property
    def site_url(self) -> str:
        """Base URL without a trailing slash."""
        return self.base_url.rstrip("/")

    @property
    def og_image_url(self) -> str:
        """Social preview image, falling back to the profile image."""
        return self.og_image or self.profile_image

    def validate_post_store(self) -> None:
        """Validate the settings required to fetch posts from Supabase."""
        violations: list[str] = []
        if not self.supabase_url.startswith("https://"):
            violations.append("PAGESMITH_SUPABASE_URL must be an https:// URL")
        if not self.supabase_anon_key:
            violations.append("PAGESMITH_SUPABASE_ANON_KEY must be set")

        if violations:
            joined = "; ".join(violations)
            raise ValueError(f"Incomplete post store configuration: {joined}")
