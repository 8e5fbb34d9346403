"""Stylesheets for generated pages, blog posts and the blog index."""

from __future__ import annotations

PAGE_STYLES = """
        /* ============================================
           DESIGN SYSTEM - CORE VARIABLES
           ============================================ */
        :root {
            /* Light Mode */
            --bg-color: #FFFFFF;
            --fg-color: #37352F;
            --fg-light: #9B9A97;
            --border-color: #E9E9E7;
            --hover-bg: rgba(55, 53, 47, 0.08);
            --callout-bg: #F1F1EF;
            --code-bg: #F7F6F3;
            --card-shadow: rgba(15, 15, 15, 0.1);
            --font-main: -apple-system, BlinkMacSystemFont, "Segoe UI", Helvetica, "Apple Color Emoji", Arial, sans-serif;
            --font-mono: "SFMono-Regular", Consolas, "Liberation Mono", Menlo, Courier, monospace;
        }

        /* Dark Mode */
        body.dark-mode {
            --bg-color: #191919;
            --fg-color: rgba(255, 255, 255, 0.9);
            --fg-light: rgba(255, 255, 255, 0.443);
            --border-color: rgba(255, 255, 255, 0.094);
            --hover-bg: rgba(255, 255, 255, 0.055);
            --callout-bg: #2F2F2F;
            --code-bg: #262626;
        }

        /* ============================================
           BASE STYLES
           ============================================ */
        * { box-sizing: border-box; margin: 0; padding: 0; }

        body {
            font-family: var(--font-main);
            background: var(--bg-color);
            color: var(--fg-color);
            line-height: 1.5;
            font-size: 16px;
        }

        .cover-image {
            width: 100%;
            height: 30vh;
            object-fit: cover;
        }

        .main-container {
            max-width: 900px;
            margin: 0 auto;
            padding: 0 96px 100px;
        }

        @media (max-width: 768px) {
            .main-container { padding: 0 24px 60px; }
        }

        /* ============================================
           PAGE ICON & TITLE
           ============================================ */
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

        h1.page-title {
            font-weight: 700;
            font-size: 40px;
            line-height: 1.2;
            margin-bottom: 24px;
        }

        /* When no icon, title overlaps cover */
        .no-icon h1.page-title {
            margin-top: -42px;
            padding-top: 60px;
            background: linear-gradient(to bottom, transparent 0%, var(--bg-color) 42px);
        }

        /* ============================================
           TYPOGRAPHY
           ============================================ */
        h2 {
            font-size: 1.875em;
            font-weight: 600;
            margin: 32px 0 16px;
        }

        h3 {
            font-size: 1.25em;
            font-weight: 600;
            margin: 24px 0 12px;
            color: var(--fg-light);
        }

        p {
            margin-bottom: 16px;
            line-height: 1.6;
        }

        strong { font-weight: 600; }
        em { font-style: italic; }
        code {
            font-family: var(--font-mono);
            background: var(--callout-bg);
            padding: 2px 6px;
            border-radius: 3px;
            font-size: 0.9em;
        }

        /* ============================================
           LISTS
           ============================================ */
        ul, ol {
            margin: 16px 0;
            padding-left: 24px;
        }
        li { margin-bottom: 8px; }

        /* ============================================
           CALLOUT
           ============================================ */
        .callout {
            display: flex;
            background: var(--callout-bg);
            padding: 16px;
            border-radius: 4px;
            margin: 16px 0;
        }
        .callout-icon {
            font-size: 1.2em;
            margin-right: 12px;
            flex-shrink: 0;
        }
        .callout-content { flex: 1; }
        .callout p:last-child { margin-bottom: 0; }

        /* ============================================
           QUOTE
           ============================================ */
        blockquote {
            border-left: 3px solid var(--fg-color);
            padding-left: 16px;
            margin: 24px 0;
            font-style: italic;
            color: var(--fg-light);
        }
        blockquote cite {
            display: block;
            margin-top: 8px;
            font-style: normal;
            font-size: 14px;
        }

        /* ============================================
           DIVIDER
           ============================================ */
        hr {
            border: none;
            border-top: 1px solid var(--border-color);
            margin: 32px 0;
        }

        /* ============================================
           COLUMNS
           ============================================ */
        .notion-row {
            display: flex;
            gap: 24px;
            margin: 24px 0;
        }
        .notion-col { flex: 1; }

        .notion-row-3 {
            display: grid;
            grid-template-columns: repeat(3, 1fr);
            gap: 24px;
            margin: 24px 0;
        }
        .notion-col-3 { }

        @media (max-width: 768px) {
            .notion-row { flex-direction: column; }
            .notion-row-3 { grid-template-columns: 1fr; }
        }

        /* ============================================
           TOGGLE
           ============================================ */
        details.notion-toggle {
            margin: 8px 0;
        }
        .notion-toggle summary {
            cursor: pointer;
            display: flex;
            align-items: center;
            padding: 8px 0;
            font-weight: 500;
            list-style: none;
        }
        .notion-toggle summary::-webkit-details-marker { display: none; }
        .toggle-triangle {
            margin-right: 8px;
            transition: transform 0.2s;
            font-size: 12px;
            color: var(--fg-light);
        }
        .notion-toggle[open] .toggle-triangle {
            transform: rotate(90deg);
        }
        .toggle-content {
            padding-left: 24px;
            padding-bottom: 8px;
        }

        /* Numbered Toggle */
        .numbered-toggle .toggle-number {
            width: 24px;
            height: 24px;
            background: var(--fg-color);
            color: var(--bg-color);
            border-radius: 50%;
            display: flex;
            align-items: center;
            justify-content: center;
            font-size: 12px;
            font-weight: 600;
            margin-right: 12px;
        }

        /* ============================================
           BUTTON
           ============================================ */
        .notion-button {
            display: inline-block;
            padding: 12px 24px;
            border-radius: 4px;
            text-decoration: none;
            font-weight: 500;
            transition: all 0.2s;
            cursor: pointer;
        }
        .notion-button.primary {
            background: var(--fg-color);
            color: var(--bg-color);
        }
        .notion-button.primary:hover {
            opacity: 0.85;
        }
        .notion-button.secondary {
            background: transparent;
            border: 1px solid var(--border-color);
            color: var(--fg-color);
        }
        .notion-button.secondary:hover {
            background: var(--hover-bg);
        }

        /* ============================================
           LINKS
           ============================================ */
        .text-link {
            color: var(--fg-color);
            text-decoration: none;
            border-bottom: 1px solid var(--fg-light);
            transition: border-color 0.2s;
        }
        .text-link:hover {
            border-color: var(--fg-color);
        }

        /* ============================================
           CODE BLOCK
           ============================================ */
        .code-block {
            background: var(--code-bg);
            font-family: var(--font-mono);
            font-size: 14px;
            padding: 16px;
            border-radius: 4px;
            overflow-x: auto;
            white-space: pre;
            margin: 16px 0;
        }

        /* ============================================
           IMAGE
           ============================================ */
        .notion-image {
            margin: 24px 0;
        }
        .notion-image img {
            max-width: 100%;
            border-radius: 4px;
        }
        .notion-image figcaption {
            font-size: 14px;
            color: var(--fg-light);
            text-align: center;
            margin-top: 8px;
        }

        /* ============================================
           GALLERY GRID
           ============================================ */
        .gallery-grid {
            display: grid;
            grid-template-columns: repeat(auto-fill, minmax(260px, 1fr));
            gap: 16px;
            margin: 24px 0;
        }
        .gallery-card {
            background: var(--bg-color);
            border-radius: 4px;
            overflow: hidden;
            box-shadow: 0 1px 3px var(--card-shadow);
            cursor: pointer;
            transition: box-shadow 0.2s;
        }
        .gallery-card:hover {
            box-shadow: 0 4px 12px var(--card-shadow);
        }
        .gallery-cover {
            width: 100%;
            height: 140px;
            object-fit: cover;
        }
        .gallery-content { padding: 12px 16px; }
        .gallery-title { font-weight: 500; }
        .gallery-subtitle {
            font-size: 12px;
            color: var(--fg-light);
            margin-top: 4px;
        }
        .gallery-description {
            font-size: 13px;
            color: var(--fg-light);
            margin-top: 8px;
        }

        /* ============================================
           TABLE OF CONTENTS
           ============================================ */
        .notion-toc {
            position: sticky;
            top: 20px;
            padding: 16px;
            background: var(--callout-bg);
            border-radius: 4px;
            margin-bottom: 24px;
        }
        .toc-title {
            font-size: 12px;
            font-weight: 600;
            color: var(--fg-light);
            text-transform: uppercase;
            margin-bottom: 8px;
        }
        .notion-toc a {
            display: block;
            color: var(--fg-color);
            text-decoration: none;
            padding: 4px 0;
            font-size: 14px;
        }
        .notion-toc a:hover {
            background: var(--hover-bg);
        }

        /* ============================================
           CENTERED BLOCK
           ============================================ */
        .centered-block {
            text-align: center;
            max-width: 600px;
            margin: 32px auto;
        }

        /* ============================================
           BACK LINK
           ============================================ */
        .back-link {
            display: inline-block;
            margin-top: 40px;
            color: var(--fg-light);
            text-decoration: none;
            border-bottom: 1px solid var(--fg-light);
        }
        .back-link:hover {
            color: var(--fg-color);
        }

"""

POST_STYLES = """
        :root {
            --bg-color: #FFFFFF;
            --fg-color: #37352F;
            --fg-light: #9B9A97;
            --border-color: #E9E9E7;
            --hover-bg: rgba(55, 53, 47, 0.08);
            --callout-bg: #F1F1EF;
            --font-main: -apple-system, BlinkMacSystemFont, "Segoe UI", Helvetica, Arial, sans-serif;
            --font-mono: "SFMono-Regular", Consolas, "Liberation Mono", Menlo, monospace;
        }

        body.dark-mode {
            --bg-color: #191919;
            --fg-color: rgba(255, 255, 255, 0.9);
            --fg-light: rgba(255, 255, 255, 0.443);
            --border-color: rgba(255, 255, 255, 0.094);
            --hover-bg: rgba(255, 255, 255, 0.055);
            --callout-bg: #2F2F2F;
        }

        * { box-sizing: border-box; margin: 0; padding: 0; }

        body {
            font-family: var(--font-main);
            background: var(--bg-color);
            color: var(--fg-color);
            line-height: 1.6;
        }

        .post-container {
            max-width: 720px;
            margin: 0 auto;
            padding: 0 20px 60px;
        }

        .meta {
            font-size: 14px;
            color: var(--fg-light);
            margin-bottom: 8px;
        }

        .icon {
            font-size: 48px;
            margin-bottom: 8px;
        }

        h1 {
            font-size: 2.5em;
            font-weight: 700;
            margin-bottom: 16px;
            line-height: 1.2;
        }

        .excerpt {
            font-size: 1.1em;
            color: var(--fg-light);
            margin-bottom: 32px;
            padding-bottom: 24px;
            border-bottom: 1px solid var(--border-color);
        }

        .content h2 {
            font-size: 1.5em;
            margin: 32px 0 16px;
        }

        .content h3 {
            font-size: 1.25em;
            margin: 24px 0 12px;
        }

        .content p {
            margin-bottom: 16px;
        }

        .content ul, .content ol {
            margin: 16px 0;
            padding-left: 24px;
        }

        .content li {
            margin-bottom: 8px;
        }

        .content blockquote {
            border-left: 3px solid var(--fg-color);
            padding-left: 16px;
            margin: 16px 0;
            color: var(--fg-light);
        }

        .content code {
            font-family: var(--font-mono);
            background: var(--callout-bg);
            padding: 2px 6px;
            border-radius: 3px;
            font-size: 0.9em;
        }

        .content pre {
            background: var(--callout-bg);
            padding: 16px;
            border-radius: 4px;
            overflow-x: auto;
            margin: 16px 0;
        }

        .content pre code {
            background: none;
            padding: 0;
        }

        .content a {
            color: var(--fg-color);
            text-decoration: underline;
        }

        .content hr {
            border: none;
            border-top: 1px solid var(--border-color);
            margin: 32px 0;
        }

        .back-link {
            display: inline-block;
            margin-top: 40px;
            color: var(--fg-light);
            text-decoration: none;
            border-bottom: 1px solid var(--fg-light);
        }

        .back-link:hover {
            color: var(--fg-color);
        }
"""

BLOG_INDEX_STYLES = """
        :root {
            --bg-color: #FFFFFF;
            --fg-color: #37352F;
            --fg-light: #9B9A97;
            --border-color: #E9E9E7;
            --hover-bg: rgba(55, 53, 47, 0.08);
            --callout-bg: #F1F1EF;
            --font-main: -apple-system, BlinkMacSystemFont, "Segoe UI", Helvetica, Arial, sans-serif;
            --font-mono: "SFMono-Regular", Consolas, "Liberation Mono", Menlo, monospace;
        }

        body.dark-mode {
            --bg-color: #191919;
            --fg-color: rgba(255, 255, 255, 0.9);
            --fg-light: rgba(255, 255, 255, 0.443);
            --border-color: rgba(255, 255, 255, 0.094);
            --hover-bg: rgba(255, 255, 255, 0.055);
            --callout-bg: #2F2F2F;
        }

        * { box-sizing: border-box; margin: 0; padding: 0; }

        body {
            font-family: var(--font-main);
            background: var(--bg-color);
            color: var(--fg-color);
            line-height: 1.6;
        }

        .index-container {
            max-width: 900px;
            margin: 0 auto;
            padding: 40px 20px;
        }

        h1 {
            font-size: 2.5em;
            margin-bottom: 32px;
        }

        .posts-grid {
            display: grid;
            grid-template-columns: repeat(auto-fill, minmax(280px, 1fr));
            gap: 24px;
        }

        .post-card {
            text-decoration: none;
            color: inherit;
            border: 1px solid var(--border-color);
            border-radius: 8px;
            overflow: hidden;
            transition: box-shadow 0.2s;
        }

        .post-card:hover {
            box-shadow: 0 4px 12px rgba(0,0,0,0.1);
        }

        .post-cover {
            width: 100%;
            height: 160px;
            object-fit: cover;
        }

        .post-info {
            padding: 16px;
        }

        .post-icon {
            font-size: 24px;
        }

        .post-info h2 {
            font-size: 1.1em;
            margin: 8px 0;
        }

        .post-date {
            font-size: 12px;
            color: var(--fg-light);
        }

        .post-excerpt {
            font-size: 13px;
            color: var(--fg-light);
            margin-top: 8px;
        }

        .back-link {
            display: inline-block;
            margin-bottom: 24px;
            color: var(--fg-light);
            text-decoration: none;
        }
"""
