"""Tests for the Markdown to HTML converter used by blog posts."""

from __future__ import annotations

from pagesmith.rendering.markdown import markdown_to_html


class TestMarkdownBasics:
    def test_empty_input(self) -> None:
        assert markdown_to_html("") == ""

    def test_none_input(self) -> None:
        assert markdown_to_html(None) == ""

    def test_plain_paragraph(self) -> None:
        assert markdown_to_html("Hello") == "<p>Hello</p>"

    def test_heading_then_paragraph(self) -> None:
        assert markdown_to_html("# Title\n\nHello **world**") == (
            "<h1>Title</h1><p>Hello <strong>world</strong></p>"
        )

    def test_heading_levels(self) -> None:
        html = markdown_to_html("# A\n\n## B\n\n### C")
        assert html == "<h1>A</h1><h2>B</h2><h3>C</h3>"

    def test_paragraph_break_and_line_break(self) -> None:
        assert markdown_to_html("a\nb\n\nc") == "<p>a<br>b</p><p>c</p>"

    def test_blank_runs_leave_no_empty_paragraphs(self) -> None:
        assert "<p></p>" not in markdown_to_html("a\n\n\n\nb")
        assert markdown_to_html("\n\n\n\n") == ""


class TestMarkdownEscaping:
    def test_markup_is_escaped(self) -> None:
        assert markdown_to_html("<script>x</script>") == "<p>&lt;script&gt;x&lt;/script&gt;</p>"

    def test_ampersand_is_escaped(self) -> None:
        assert markdown_to_html("salt & pepper") == "<p>salt &amp; pepper</p>"

    def test_double_quotes_are_kept(self) -> None:
        assert markdown_to_html('say "hi"') == '<p>say "hi"</p>'


class TestMarkdownInline:
    def test_italic_and_code(self) -> None:
        assert markdown_to_html("*a* and `b`") == "<p><em>a</em> and <code>b</code></p>"

    def test_link_has_no_class(self) -> None:
        assert markdown_to_html("[site](https://example.com)") == (
            '<p><a href="https://example.com">site</a></p>'
        )


class TestMarkdownBlocks:
    def test_unordered_list(self) -> None:
        assert markdown_to_html("- one\n- two") == "<p><ul><li>one</li><li>two</li></ul></p>"

    def test_ordered_list_is_rendered_as_ul(self) -> None:
        assert markdown_to_html("1. a\n2. b") == "<p><ul><li>a</li><li>b</li></ul></p>"

    def test_separate_lists_stay_separate(self) -> None:
        html = markdown_to_html("- a\n\ntext\n\n- b")
        assert html.count("<ul>") == 2

    def test_paragraph_break_before_list_survives(self) -> None:
        assert markdown_to_html("para\n\n- a\n- b") == (
            "<p>para</p><p><ul><li>a</li><li>b</li></ul></p>"
        )

    def test_paragraph_break_before_ordered_list_survives(self) -> None:
        assert markdown_to_html("para\n\n1. a") == "<p>para</p><p><ul><li>a</li></ul></p>"

    def test_bare_quote_marker_does_not_swallow_next_line(self) -> None:
        assert markdown_to_html("a\n>\nb") == "<p>a<br>&gt;<br>b</p>"

    def test_each_quote_line_is_its_own_blockquote(self) -> None:
        assert markdown_to_html("> one\n> two") == (
            "<blockquote>one</blockquote><br><blockquote>two</blockquote>"
        )

    def test_fenced_code_block(self) -> None:
        assert markdown_to_html("```python\nx = a < b\n```") == (
            "<pre><code>x = a &lt; b<br></code></pre>"
        )

    def test_horizontal_rule(self) -> None:
        assert markdown_to_html("a\n\n---\n\nb") == "<p>a</p><hr><p>b</p>"

    def test_heading_followed_by_single_newline_keeps_br(self) -> None:
        assert markdown_to_html("# T\nbody").startswith("<h1>T</h1><br>body")

    def test_full_post_body(self) -> None:
        html = markdown_to_html("# Intro\n\nSome **bold** words.\n\n- one\n- two")
        assert html == (
            "<h1>Intro</h1><p>Some <strong>bold</strong> words.</p>"
            "<p><ul><li>one</li><li>two</li></ul></p>"
        )
