"""Tests for the reponotes CLI."""

import os
import re
import shutil
import tempfile
import unittest

from typer.testing import CliRunner

from reponotes.cli.main import app


class CliTest(unittest.TestCase):
    """End-to-end tests of the CLI against a temporary store."""

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.runner = CliRunner()
        self.env = {
            "REPONOTES_STORE_PATH": os.path.join(self.tmpdir, "store.json"),
            "REPONOTES_CONFIG": os.path.join(self.tmpdir, "missing.json"),
            "REPONOTES_MIRROR_URL": None,
        }

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def invoke(self, *args, **kwargs):
        return self.runner.invoke(app, list(args), env=self.env, **kwargs)

    def test_set_then_show(self):
        result = self.invoke("set", "a/b", "# Plan\n- [ ] ship it")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Saved note for", result.output)

        result = self.invoke("show", "a/b")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Plan", result.output)
        self.assertIn("[ ] ship it", result.output)

    def test_show_missing_note(self):
        result = self.invoke("show", "nobody/nothing")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("No note for", result.output)

    def test_set_from_stdin(self):
        result = self.invoke("set", "a/b", input="from stdin")
        self.assertEqual(result.exit_code, 0, result.output)
        result = self.invoke("export", "a/b")
        self.assertIn("<p>from stdin", result.output)

    def test_set_text_and_file_is_an_error(self):
        path = os.path.join(self.tmpdir, "note.md")
        with open(path, "w", encoding="utf-8") as f:
            f.write("x")
        result = self.invoke("set", "a/b", "text", "--file", path)
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error", result.output)

    def test_clear_note(self):
        self.invoke("set", "a/b", "hello")
        result = self.invoke("set", "a/b", "")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Cleared note for", result.output)

    def test_toggle_checked(self):
        self.invoke("set", "a/b", "- [ ] one\n- [ ] two")
        result = self.invoke("toggle", "a/b", "1", "--checked")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("is now checked", result.output)

        result = self.invoke("export", "a/b")
        self.assertIn('data-line="1" checked', result.output)
        self.assertNotIn('data-line="0" checked', result.output)

    def test_toggle_flips_when_state_omitted(self):
        self.invoke("set", "a/b", "- [x] done")
        result = self.invoke("toggle", "a/b", "0")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("is now unchecked", result.output)

    def test_toggle_non_checkbox_fails(self):
        self.invoke("set", "a/b", "just text")
        result = self.invoke("toggle", "a/b", "0", "--checked")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error", result.output)

        result = self.invoke("toggle", "a/b", "5")
        self.assertEqual(result.exit_code, 1)

    def test_list(self):
        self.invoke("set", "a/b", "- [ ] open\n- [x] done")
        self.invoke("set", "c/d", "plain")
        result = self.invoke("list")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("a/b", result.output)
        self.assertIn("c/d", result.output)

    def test_list_counts_lines_like_toggle(self):
        self.invoke("set", "a/b", "a\r\nb\n- [ ] task\n")
        result = self.invoke("list")
        self.assertEqual(result.exit_code, 0, result.output)
        (row,) = [line for line in result.output.splitlines() if "a/b" in line]
        cells = [cell.strip() for cell in re.split(r"[│|]", row) if cell.strip()]
        self.assertEqual(cells, ["a/b", "4", "1"])

        result = self.invoke("toggle", "a/b", "2", "--checked")
        self.assertEqual(result.exit_code, 0, result.output)

    def test_list_empty(self):
        result = self.invoke("list")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("No notes found", result.output)

    def test_export_stdout(self):
        self.invoke("set", "a/b", "# T\nsome **bold**")
        result = self.invoke("export", "a/b")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("<h1>T</h1>", result.output)
        self.assertIn("<strong>bold</strong>", result.output)

    def test_export_full_page_to_file(self):
        self.invoke("set", "a/b", "- [ ] task")
        out = os.path.join(self.tmpdir, "out", "note.html")
        result = self.invoke("export", "a/b", "--output", out, "--full-page", "--read-only")
        self.assertEqual(result.exit_code, 0, result.output)
        with open(out, encoding="utf-8") as f:
            page = f.read()
        self.assertTrue(page.startswith("<!doctype html>"))
        self.assertIn("<title>a/b</title>", page)
        self.assertIn(" disabled>", page)


if __name__ == "__main__":
    unittest.main()
