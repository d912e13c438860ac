"""
Unit tests for the text renderer and reporter
"""

import sys
import unittest
from io import StringIO
from pathlib import Path

# Add the project root to Python path for development testing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from metaprops.config.settings import RenderConfig
from metaprops.core.exceptions import PathResolutionError, PropertyStoreOpenError
from metaprops.core.keys import PropertyKey
from metaprops.core.models import FileResult, PathFailure, PropertyRow
from metaprops.reporters.text import TextReporter, name_segment, render_row, render_rows

KEY = PropertyKey.parse("F29F85E0-4FF9-1068-AB91-08002B27B3D9", 2)
ROW = PropertyRow(KEY, "Title", "System.Title", "Holiday", "S--V")


class TestRenderRow(unittest.TestCase):
    """Test the aligned line layout."""

    def test_default_layout(self):
        line = render_row(ROW, RenderConfig())
        self.assertEqual(line, "   " + "Title:".ljust(45) + " Holiday")

    def test_name_padded_to_field_width(self):
        line = render_row(ROW, RenderConfig())
        name_field = line[3:3 + 45]
        self.assertEqual(len(name_field), 45)
        self.assertEqual(name_field.rstrip(), "Title:")
        self.assertEqual(line[48:], " Holiday")

    def test_canonical_names(self):
        line = render_row(ROW, RenderConfig(use_canonical_names=True))
        self.assertEqual(line, "   " + "System.Title:".ljust(45) + " Holiday")

    def test_both_names_win_over_canonical(self):
        config = RenderConfig(use_canonical_names=True, use_both_names=True)
        self.assertEqual(name_segment(ROW, config), "System.Title(Title):")

    def test_flags_and_keys(self):
        config = RenderConfig(include_keys=True, include_flags=True)
        line = render_row(ROW, config)
        expected = "   S--V " + str(KEY).ljust(45) + "Title:".ljust(45) + " Holiday"
        self.assertEqual(line, expected)

    def test_long_name_not_truncated(self):
        long_name = "System.Very.Long.Canonical.Property.Name.That.Overflows"
        row = PropertyRow(KEY, long_name, long_name, "x", "----")
        line = render_row(row, RenderConfig())
        self.assertEqual(line, f"   {long_name}: x")

    def test_exact_width_name(self):
        name = "N" * 44
        row = PropertyRow(KEY, name, name, "v", "----")
        self.assertEqual(render_row(row, RenderConfig()), f"   {name}: v")

    def test_empty_value(self):
        row = PropertyRow(KEY, "Tags", "System.Keywords", "", "----")
        self.assertEqual(render_row(row, RenderConfig()), "   " + "Tags:".ljust(45) + " ")

    def test_render_rows(self):
        lines = render_rows([ROW, ROW], RenderConfig())
        self.assertEqual(len(lines), 2)
        self.assertEqual(lines[0], lines[1])


class TestTextReporter(unittest.TestCase):
    """Test writing outcomes to a stream."""

    def setUp(self):
        self.stream = StringIO()
        self.reporter = TextReporter(RenderConfig(), self.stream)

    def test_file_block(self):
        self.reporter.write(FileResult("/data/a.jpg", [ROW]))
        self.assertEqual(self.stream.getvalue().splitlines(),
                         ["/data/a.jpg", "   " + "Title:".ljust(45) + " Holiday", ""])

    def test_file_error(self):
        error = PropertyStoreOpenError("/data/a.jpg", OSError("locked"))
        self.reporter.write(FileResult("/data/a.jpg", error=error))
        lines = self.stream.getvalue().splitlines()
        self.assertEqual(lines[0], "/data/a.jpg")
        self.assertEqual(lines[1], error.message)
        self.assertEqual(lines[2], "")

    def test_path_failure(self):
        error = PathResolutionError("*.xyz", "no matching files")
        self.reporter.write(PathFailure("*.xyz", error))
        self.assertEqual(self.stream.getvalue(), "Could not resolve '*.xyz': no matching files\n")

    def test_verbose_error_detail(self):
        try:
            raise OSError("locked")
        except OSError as e:
            error = PropertyStoreOpenError("/data/a.jpg", e)
            error.__cause__ = e

        reporter = TextReporter(RenderConfig(), self.stream, verbose=True)
        reporter.write(FileResult("/data/a.jpg", error=error))
        output = self.stream.getvalue()
        self.assertIn("Technical details", output)
        self.assertIn("Traceback", output)

    def test_no_colors_for_non_tty(self):
        self.reporter.write(PathFailure("x", PathResolutionError("x", "no matching files")))
        self.assertNotIn("\x1b[", self.stream.getvalue())


if __name__ == '__main__':
    unittest.main()
