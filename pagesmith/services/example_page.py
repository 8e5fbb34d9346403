"""Sample page config exercising the composite block types."""

from __future__ import annotations

from typing import Any

EXAMPLE_PAGE_CONFIG: dict[str, Any] = {
    "slug": "work-with-me",
    "title": "Work With Me",
    "description": "Build smarter. Move faster. Make better decisions.",
    "cover": {"gradient": "linear-gradient(135deg, #1a1a2e 0%, #16213e 50%, #0f3460 100%)"},
    "icon": {"emoji": "🫡"},
    "toc": False,
    "blocks": [
        {"type": "h1", "text": "WORK WITH ME"},
        {
            "type": "h3",
            "text": "Build smarter. Move faster. Make better decisions.",
            "style": "color: var(--fg-light); margin-top: -16px;",
        },
        {"type": "spacer", "height": "16px"},
        {
            "type": "callout",
            "content": (
                "One conversation can replace months of spinning wheels. I help founders, "
                "operators, and creators cut through noise, build leverage, and move with clarity."
            ),
        },
        {"type": "divider"},
        {"type": "h2", "text": "What I Help You Do"},
        {
            "type": "columns",
            "columns": [
                {
                    "blocks": [
                        {
                            "type": "bulletList",
                            "items": [
                                {
                                    "lead": "Make Better Decisions",
                                    "text": "Frameworks for clarity under uncertainty",
                                },
                                {
                                    "lead": "Build High-Leverage Systems",
                                    "text": "Automate the repeatable, focus on the irreplaceable",
                                },
                                {
                                    "lead": "Modernize Your Stack",
                                    "text": "AI-native workflows that actually ship",
                                },
                            ],
                        }
                    ]
                },
                {
                    "blocks": [
                        {
                            "type": "callout",
                            "icon": "⚡",
                            "content": (
                                "**The goal isn't more work, it's sharper work.** Find the 20% "
                                "that drives 80% of results, then systematize it."
                            ),
                        }
                    ]
                },
            ],
        },
        {"type": "divider"},
        {"type": "h2", "text": "How We Work Together"},
        {
            "type": "numberedToggle",
            "number": 1,
            "title": "One Conversation",
            "content": (
                "We start with a single focused session. You bring your challenge; "
                "I bring frameworks and direct feedback."
            ),
        },
        {
            "type": "numberedToggle",
            "number": 2,
            "title": "A Flexible Model That Fits You",
            "content": "Advisory calls, monthly retainers or project-based sprints.",
        },
        {
            "type": "numberedToggle",
            "number": 3,
            "title": "Immediate, Practical Output",
            "content": [
                {
                    "type": "bulletList",
                    "items": [
                        "Decision frameworks you can use tomorrow",
                        "AI prompts and workflows tailored to your context",
                        "Clear next actions, not vague advice",
                    ],
                }
            ],
        },
        {"type": "divider"},
        {"type": "h2", "text": "Who This Is For"},
        {
            "type": "threeColumns",
            "columns": [
                {
                    "blocks": [
                        {
                            "type": "bulletList",
                            "items": ["Founders building momentum", "Operators tightening systems"],
                        }
                    ]
                },
                {
                    "blocks": [
                        {
                            "type": "bulletList",
                            "items": ["Creators shaping products", "Teams experimenting with AI"],
                        }
                    ]
                },
                {
                    "blocks": [
                        {
                            "type": "bulletList",
                            "items": ["Professionals leveling up", "Anyone seeking clarity"],
                        }
                    ]
                },
            ],
        },
        {"type": "divider"},
        {
            "type": "quote",
            "text": "One conversation replaced months of spinning wheels.",
            "attribution": "Founder, Series A Startup",
        },
        {"type": "divider"},
        {"type": "h2", "text": "Simple Next Step"},
        {
            "type": "callout",
            "content": [
                {
                    "type": "button",
                    "text": "Book a Quick Call →",
                    "href": "https://example.com/book",
                    "style": "primary",
                },
                {"type": "spacer", "height": "12px"},
                {
                    "type": "paragraph",
                    "text": "Or [send a message](mailto:hello@example.com), whatever is easiest.",
                    "style": "margin-bottom: 0; font-size: 14px;",
                },
            ],
        },
        {"type": "spacer", "height": "32px"},
        {
            "type": "centered",
            "blocks": [
                {
                    "type": "callout",
                    "background": "var(--callout-bg)",
                    "content": "**You bring the ambition.** I help you sharpen it and make it real.",
                }
            ],
        },
    ],
}
