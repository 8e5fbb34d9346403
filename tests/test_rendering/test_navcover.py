"""Tests for the shared header and cover component."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pagesmith.rendering.navcover import NO_ICON, NavCover, NavCoverOptions

if TYPE_CHECKING:
    from pagesmith.config import Settings


class TestHeader:
    def test_breadcrumbs_without_parent(self, test_settings: Settings) -> None:
        html = NavCover(test_settings).header_html(NavCoverOptions(current_page="About"))
        assert "onclick=\"window.location.href='https://site.test'\"" in html
        assert '<img src="https://site.test/profile.png" alt="Test Author">' in html
        assert html.count('<span class="divider">/</span>') == 1
        assert "About" in html

    def test_parent_crumb(self, test_settings: Settings) -> None:
        options = NavCoverOptions(
            current_page="Post", parent_page="Blog", parent_href="https://site.test/#blog"
        )
        html = NavCover(test_settings).header_html(options)
        assert html.count('<span class="divider">/</span>') == 2
        assert "onclick=\"window.location.href='https://site.test/#blog'\"" in html
        assert html.index("Blog") < html.index("Post")

    def test_parent_crumb_needs_href(self, test_settings: Settings) -> None:
        options = NavCoverOptions(current_page="Post", parent_page="Blog")
        html = NavCover(test_settings).header_html(options)
        assert html.count('<span class="divider">/</span>') == 1

    def test_controls_and_menu(self, test_settings: Settings) -> None:
        html = NavCover(test_settings).header_html(NavCoverOptions())
        assert 'onclick="toggleTheme()"' in html
        assert 'onclick="toggleOverflow(event)"' in html
        assert 'href="mailto:author@site.test"' in html
        assert 'href="https://linkedin.test/in/author"' in html

    def test_menu_without_linkedin(self, test_settings: Settings) -> None:
        settings = test_settings.model_copy(update={"linkedin_url": ""})
        html = NavCover(settings).header_html(NavCoverOptions())
        assert "LinkedIn" not in html
        assert "Socials" not in html
        assert "mailto:author@site.test" in html

    def test_header_includes_cover(self, test_settings: Settings) -> None:
        html = NavCover(test_settings).header_html(NavCoverOptions())
        assert html.index("</header>") < html.index('class="cover-image"')


class TestCover:
    def test_gradient_wins(self, test_settings: Settings) -> None:
        options = NavCoverOptions(cover_gradient="red", cover_image="x.jpg")
        html = NavCover(test_settings).cover_html(options)
        assert html == '<div class="cover-image" style="background: red;"></div>'

    def test_cover_image(self, test_settings: Settings) -> None:
        html = NavCover(test_settings).cover_html(NavCoverOptions(cover_image="x.jpg"))
        assert html == '<img src="x.jpg" class="cover-image" alt="Cover">'

    def test_default_cover_fallback(self, test_settings: Settings) -> None:
        html = NavCover(test_settings).cover_html(NavCoverOptions())
        assert 'src="https://site.test/default-cover.jpg"' in html


class TestPageIcon:
    def test_profile_image_by_default(self, test_settings: Settings) -> None:
        html = NavCover(test_settings).page_icon_html(NavCoverOptions())
        assert html == (
            '<div class="page-icon"><img src="https://site.test/profile.png" alt=""></div>'
        )

    def test_custom_icon_image(self, test_settings: Settings) -> None:
        options = NavCoverOptions(page_icon_image="me.png")
        html = NavCover(test_settings).page_icon_html(options)
        assert 'src="me.png"' in html

    def test_emoji(self, test_settings: Settings) -> None:
        html = NavCover(test_settings).page_icon_html(NavCoverOptions(page_icon="🫡"))
        assert html == '<div class="page-icon">🫡</div>'

    def test_none(self, test_settings: Settings) -> None:
        assert NavCover(test_settings).page_icon_html(NavCoverOptions(page_icon=NO_ICON)) == ""
        assert NavCover(test_settings).page_icon_html(NavCoverOptions(page_icon="")) == ""


class TestAssets:
    def test_styles_and_script(self, test_settings: Settings) -> None:
        nav_cover = NavCover(test_settings)
        assert ".overflow-menu.active" in nav_cover.styles()
        assert "function toggleTheme()" in nav_cover.script()
        assert "localStorage" in nav_cover.script()
