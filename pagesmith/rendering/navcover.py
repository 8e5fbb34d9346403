"""Shared header, breadcrumb and cover fragment used atop every generated page."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pagesmith.rendering.inline import escape_html

if TYPE_CHECKING:
    from pagesmith.config import Settings

PROFILE_ICON = "image"
NO_ICON = "none"


@dataclass(frozen=True)
class NavCoverOptions:
    """What the header should show for one page.

    ``page_icon`` is an emoji, ``"image"`` for an avatar image (the profile
    picture unless ``page_icon_image`` is given) or ``"none"``.
    ``cover_gradient`` overrides ``cover_image`` when both are set.
    """

    current_page: str = "Page"
    parent_page: str | None = None
    parent_href: str | None = None
    cover_image: str | None = None
    cover_gradient: str | None = None
    page_icon: str | None = PROFILE_ICON
    page_icon_image: str | None = None


_STYLES = """
        /* ============================================
           NAVCOVER COMPONENT STYLES
           ============================================ */

        /* Header / Navigation */
        header {
            position: sticky;
            top: 0;
            z-index: 100;
            display: flex;
            justify-content: space-between;
            align-items: center;
            padding: 10px 16px;
            font-size: 14px;
            backdrop-filter: blur(8px);
            -webkit-backdrop-filter: blur(8px);
        }
        body.dark-mode header { background-color: rgba(25, 25, 25, 0.8); }
        body:not(.dark-mode) header { background-color: rgba(255, 255, 255, 0.9); }

        .breadcrumbs {
            display: flex;
            align-items: center;
            gap: 6px;
            flex-wrap: wrap;
        }
        .crumb {
            display: flex;
            align-items: center;
            gap: 6px;
            cursor: pointer;
            padding: 4px 6px;
            border-radius: 4px;
            transition: background 0.15s;
        }
        .crumb:hover { background: var(--hover-bg); }
        .crumb-icon img {
            width: 20px;
            height: 20px;
            border-radius: 50%;
            object-fit: cover;
        }
        .divider {
            color: var(--fg-light);
            user-select: none;
        }

        .header-controls {
            display: flex;
            align-items: center;
            gap: 4px;
            position: relative;
        }
        .header-btn {
            padding: 6px 10px;
            border-radius: 4px;
            cursor: pointer;
            transition: background 0.15s;
        }
        .header-btn:hover { background: var(--hover-bg); }

        /* Overflow Menu */
        .overflow-menu {
            position: absolute;
            top: 100%;
            right: 0;
            background: var(--bg-color);
            border: 1px solid var(--border-color);
            border-radius: 8px;
            box-shadow: 0 4px 16px rgba(0,0,0,0.15);
            min-width: 220px;
            padding: 8px 0;
            display: none;
            z-index: 200;
        }
        .overflow-menu.active { display: block; }
        .menu-section-title {
            font-size: 11px;
            font-weight: 600;
            color: var(--fg-light);
            padding: 8px 12px 4px;
            text-transform: uppercase;
        }
        .menu-item {
            display: flex;
            align-items: center;
            gap: 10px;
            padding: 8px 12px;
            color: var(--fg-color);
            text-decoration: none;
            transition: background 0.15s;
        }
        .menu-item:hover { background: var(--hover-bg); }
        .menu-icon { font-size: 16px; }

        /* Cover Image */
        .cover-image {
            width: 100%;
            height: 30vh;
            object-fit: cover;
        }

        /* Page Icon */
        .page-icon {
            font-size: 78px;
            margin-top: -42px;
            margin-bottom: 4px;
            position: relative;
            z-index: 10;
        }
        .page-icon img {
            width: 78px;
            height: 78px;
            border-radius: 50%;
            object-fit: cover;
        }
"""

_SCRIPT = """
        // --- THEME TOGGLE ---
        function toggleTheme() {
            const body = document.body;
            const icon = document.getElementById('theme-icon');
            body.classList.toggle('dark-mode');
            if (body.classList.contains('dark-mode')) {
                icon.textContent = '☀️';
                localStorage.setItem('theme', 'dark');
            } else {
                icon.textContent = '🌙';
                localStorage.setItem('theme', 'light');
            }
        }

        // --- OVERFLOW MENU ---
        function toggleOverflow(e) {
            e.stopPropagation();
            const menu = document.getElementById('overflow-menu');
            menu.classList.toggle('active');
        }

        document.addEventListener('click', (e) => {
            const menu = document.getElementById('overflow-menu');
            const trigger = document.querySelector('.header-btn[title="More options"]');
            if (menu && menu.classList.contains('active') && !menu.contains(e.target) && e.target !== trigger) {
                menu.classList.remove('active');
            }
        });

        // Saved theme, dark by default
        (function() {
            const savedTheme = localStorage.getItem('theme');
            if (savedTheme === 'light') {
                document.body.classList.remove('dark-mode');
                document.getElementById('theme-icon').textContent = '🌙';
            } else {
                document.body.classList.add('dark-mode');
                document.getElementById('theme-icon').textContent = '☀️';
            }
        })();
"""


class NavCover:
    """Produces the header stylesheet, markup and client script for a site."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def styles(self) -> str:
        """CSS for the header, cover and page icon."""
        return _STYLES

    def script(self) -> str:
        """Client-side theme toggle and overflow menu behaviour."""
        return _SCRIPT

    def header_html(self, options: NavCoverOptions) -> str:
        """Header with breadcrumbs and controls, followed by the cover element."""
        settings = self.settings
        home_href = escape_html(settings.site_url)
        profile_image = escape_html(settings.profile_image)

        middle_crumb = ""
        if options.parent_page and options.parent_href:
            middle_crumb = f"""
            <span class="divider">/</span>
            <div class="crumb" onclick="window.location.href='{escape_html(options.parent_href)}'">
                {options.parent_page}
            </div>"""

        return f"""
    <!-- NAVCOVER COMPONENT -->
    <header>
        <div class="breadcrumbs">
            <div class="crumb" onclick="window.location.href='{home_href}'">
                <span class="crumb-icon"><img src="{profile_image}" alt="{escape_html(settings.author_name)}"></span> {settings.author_name}
            </div>
            {middle_crumb}
            <span class="divider">/</span>
            <div class="crumb" style="cursor: default;">
                {options.current_page}
            </div>
        </div>

        <div class="header-controls">
            <div class="header-btn" onclick="toggleTheme()" title="Toggle Dark Mode">
                <span id="theme-icon">☀️</span>
            </div>
            <div class="header-btn" onclick="toggleOverflow(event)" title="More options">⋯</div>
            <div id="overflow-menu" class="overflow-menu">
{self._menu_html()}
            </div>
        </div>
    </header>

    {self.cover_html(options)}
    <!-- END NAVCOVER COMPONENT -->"""

    def cover_html(self, options: NavCoverOptions) -> str:
        """Cover element: the gradient when given, otherwise an image."""
        if options.cover_gradient:
            return (
                f'<div class="cover-image" '
                f'style="background: {escape_html(options.cover_gradient)};"></div>'
            )
        cover_image = options.cover_image or self.settings.default_cover
        return f'<img src="{escape_html(cover_image)}" class="cover-image" alt="Cover">'

    def page_icon_html(self, options: NavCoverOptions) -> str:
        """Page icon element, or an empty string when the page has none."""
        if options.page_icon == PROFILE_ICON:
            src = options.page_icon_image or self.settings.profile_image
            return f'<div class="page-icon"><img src="{escape_html(src)}" alt=""></div>'
        if not options.page_icon or options.page_icon == NO_ICON:
            return ""
        return f'<div class="page-icon">{options.page_icon}</div>'

    def _menu_html(self) -> str:
        settings = self.settings
        sections = [
            f"""                <div class="menu-section-title">Contact</div>
                <a href="mailto:{escape_html(settings.contact_email)}" class="menu-item">
                    <span class="menu-icon">✉️</span>
                    <span class="menu-label">{escape_html(settings.contact_email)}</span>
                </a>"""
        ]
        if settings.linkedin_url:
            sections.append(
                f"""                <div style="height: 1px; background: var(--border-color); margin: 4px 0;"></div>
                <div class="menu-section-title">Socials</div>
                <a href="{escape_html(settings.linkedin_url)}" target="_blank" class="menu-item">
                    <span class="menu-icon">🔗</span>
                    <span class="menu-label">LinkedIn</span>
                </a>"""
            )
        return "\n".join(sections)
