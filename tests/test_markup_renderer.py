"""Tests for the note renderer."""

import io
import unittest

from rich.console import Console

from reponotes.markup.blocks import Paragraph, classify
from reponotes.markup.console import to_rich
from reponotes.markup.options import RenderConfig
from reponotes.markup.renderer import (
    NodeKind,
    NoteRenderer,
    render,
    render_block,
    render_note_page,
    to_html,
)
from reponotes.markup.spans import Span, SpanKind

SAMPLE = (
    "# Title\n"
    "- [ ] task one\n"
    "- [x] done\n"
    "• a bullet\n"
    "plain **line**\n"
    "\n"
    "```js\n"
    "const a = '**not bold**';\n"
    "```"
)


class RenderTest(unittest.TestCase):
    """Tests for render() and the HTML output."""

    def test_render_is_idempotent(self):
        blocks = classify(SAMPLE)
        self.assertEqual(render(blocks), render(blocks))
        self.assertEqual(to_html(render(blocks)), to_html(render(blocks)))

    def test_one_node_per_block(self):
        nodes = render(classify(SAMPLE))
        self.assertEqual(
            [n.kind for n in nodes],
            [
                NodeKind.HEADING,
                NodeKind.CHECKBOX,
                NodeKind.CHECKBOX,
                NodeKind.BULLET,
                NodeKind.PARAGRAPH,
                NodeKind.LINE_BREAK,
                NodeKind.CODE_BLOCK,
            ],
        )

    def test_node_attributes(self):
        nodes = render(classify(SAMPLE))
        self.assertEqual(nodes[0].attr("level"), 1)
        self.assertEqual(nodes[2].attr("line"), 2)
        self.assertTrue(nodes[2].attr("checked"))
        self.assertTrue(nodes[2].attr("strikethrough"))
        self.assertFalse(nodes[1].attr("strikethrough"))
        self.assertEqual(nodes[3].text, "•")
        self.assertEqual(nodes[6].attr("language"), "js")
        self.assertEqual(nodes[6].text, "const a = '**not bold**';")

    def test_language_tag_can_be_hidden(self):
        nodes = render(classify("```js\nx\n```"), RenderConfig(show_language_tag=False))
        self.assertIsNone(nodes[0].attr("language"))

    def test_whitespace_only_paragraph_renders_a_line_break(self):
        node = render_block(Paragraph(line=0, spans=(Span(SpanKind.TEXT, "   "),)))
        self.assertEqual(node.kind, NodeKind.LINE_BREAK)

    def test_inline_html(self):
        html = to_html(render(classify("**b** *i* ***bi*** `c`")))
        self.assertEqual(
            html,
            "<p><strong>b</strong> <em>i</em> <strong><em>bi</em></strong> <code>c</code></p>",
        )

    def test_fenced_code_is_not_formatted(self):
        html = to_html(render(classify(SAMPLE)))
        self.assertIn("**not bold**", html)
        self.assertNotIn("<strong>not bold</strong>", html)
        self.assertIn('data-language="js"', html)

    def test_checkbox_html(self):
        html = to_html(render(classify("- [ ] open\n- [x] closed")))
        self.assertIn('<input type="checkbox" data-line="0">', html)
        self.assertIn('<input type="checkbox" data-line="1" checked>', html)
        self.assertIn("line-through", html)

    def test_read_only_checkboxes(self):
        cfg = RenderConfig(interactive_checkboxes=False)
        html = to_html(render(classify("- [x] a"), cfg), cfg)
        self.assertIn("checked disabled", html)

    def test_html_is_escaped(self):
        html = to_html(render(classify("<script>alert(1)</script>")))
        self.assertEqual(html, "<p>&lt;script&gt;alert(1)&lt;/script&gt;</p>")

    def test_headers_and_breaks(self):
        html = to_html(render(classify("## Sub\n\nx")))
        self.assertEqual(html, "<h2>Sub</h2><br><p>x</p>")


class NoteRendererTest(unittest.TestCase):
    """Tests for the NoteRenderer facade."""

    def test_render_html_and_page(self):
        renderer = NoteRenderer()
        fragment = renderer.render_html("# Hi")
        self.assertEqual(fragment, "<h1>Hi</h1>")
        page = renderer.render_full_page("a/<b>", fragment)
        self.assertTrue(page.startswith("<!doctype html>"))
        self.assertIn("<title>a/&lt;b&gt;</title>", page)
        self.assertIn('<div class="note-content"><h1>Hi</h1></div>', page)

    def test_empty_note(self):
        self.assertEqual(NoteRenderer().render(""), ())
        self.assertEqual(render_note_page("t", "").count("note-content"), 1)


class ConsoleRenderTest(unittest.TestCase):
    """Tests for terminal output."""

    def test_to_rich_output(self):
        console = Console(file=io.StringIO(), record=True, width=80)
        console.print(to_rich(NoteRenderer().render(SAMPLE)))
        out = console.export_text()
        self.assertIn("Title", out)
        self.assertIn("[ ] task one", out)
        self.assertIn("[x] done", out)
        self.assertIn("• a bullet", out)
        self.assertIn("**not bold**", out)


if __name__ == "__main__":
    unittest.main()
