"""
Tests for command line parsing and the main entry point
"""

import os
import sys
import tempfile
import unittest
from io import StringIO
from pathlib import Path
from unittest import mock

# Add the project root to Python path for development testing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import metaprops
from metaprops.config.constants import ENV_DEBUG, ENV_LOG_FILE, LICENSE_TEXT, VERSION
from metaprops.config.settings import RenderConfig, load_settings
from metaprops.core.keys import PropertyDescriptor, TypeFlags
from metaprops.main import build_parser, main, parse_arguments
from tests.fakes import FakePropertyStore, FakeProviders, make_key


class TestParseArguments(unittest.TestCase):
    """Test flag recognition and path collection."""

    def setUp(self):
        self.parser = build_parser()

    def test_no_arguments_means_help(self):
        self.assertTrue(parse_arguments(self.parser, []).help)

    def test_flags_case_insensitive(self):
        args = parse_arguments(self.parser, ["-C", "-K", "a.jpg"])
        self.assertTrue(args.canonical)
        self.assertTrue(args.keys)
        self.assertFalse(args.flags)
        self.assertEqual(args.paths, ["a.jpg"])

    def test_unknown_flag_is_a_path(self):
        args = parse_arguments(self.parser, ["-x", "b.jpg"])
        self.assertEqual(args.paths, ["-x", "b.jpg"])
        self.assertFalse(args.help)

    def test_question_mark_help(self):
        self.assertTrue(parse_arguments(self.parser, ["-?"]).help)

    def test_render_config(self):
        args = parse_arguments(self.parser, ["-b", "-f", "a.jpg"])
        config = RenderConfig.from_args(args)
        self.assertEqual(config, RenderConfig(use_both_names=True, include_flags=True))


class TestLoadSettings(unittest.TestCase):
    """Test reading run settings from the environment."""

    def test_defaults(self):
        settings = load_settings({})
        self.assertFalse(settings.debug)
        self.assertIsNone(settings.log_file)

    def test_debug_values(self):
        self.assertTrue(load_settings({ENV_DEBUG: "1"}).debug)
        self.assertTrue(load_settings({ENV_DEBUG: " Yes "}).debug)
        self.assertFalse(load_settings({ENV_DEBUG: "0"}).debug)

    def test_log_file(self):
        self.assertEqual(load_settings({ENV_LOG_FILE: "run.log"}).log_file, "run.log")
        self.assertIsNone(load_settings({ENV_LOG_FILE: ""}).log_file)


@mock.patch.dict(os.environ, {ENV_DEBUG: "", ENV_LOG_FILE: ""})
class TestMain(unittest.TestCase):
    """Test the CLI end to end with in-memory providers."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.file_path = os.path.join(self.temp_dir.name, "song.mp3")
        with open(self.file_path, "wb") as f:
            f.write(b"\x00")

        self.title_key = make_key(2)
        self.fakes = FakeProviders(
            stores={"song.mp3": FakePropertyStore([(self.title_key, "Intro")])},
            descriptions={
                self.title_key: PropertyDescriptor("System.Title", "Title",
                                                   TypeFlags.IS_INNATE | TypeFlags.IS_VIEWABLE),
            },
        )
        self.stream = StringIO()

    def tearDown(self):
        self.temp_dir.cleanup()

    def run_main(self, argv):
        return main(argv, providers=self.fakes.providers(), stream=self.stream)

    def test_help_without_arguments(self):
        self.assertEqual(self.run_main([]), 0)
        self.assertIn("Lists all metadata properties", self.stream.getvalue())
        self.assertEqual(self.fakes.property_system.open_count, 0)

    def test_uppercase_help(self):
        self.run_main(["-H", self.file_path])
        self.assertIn("Lists all metadata properties", self.stream.getvalue())
        self.assertEqual(self.fakes.opened, [])

    def test_help_wins_over_license(self):
        self.run_main(["-l", "-?"])
        output = self.stream.getvalue()
        self.assertIn("Lists all metadata properties", output)
        self.assertNotIn(LICENSE_TEXT, output)
        self.assertNotIn("Redistribution and use in source and binary forms", output)

    def test_version_in_help(self):
        self.assertEqual(metaprops.__version__, VERSION)
        self.run_main(["-h"])
        self.assertIn(f"metaprops v{VERSION}", self.stream.getvalue())

    def test_license(self):
        self.assertEqual(self.run_main(["-l"]), 0)
        self.assertIn("BSD 3-Clause License", self.stream.getvalue())
        self.assertEqual(self.fakes.opened, [])

    def test_listing_with_keys_flags_and_both_names(self):
        self.assertEqual(self.run_main(["-b", "-f", "-k", self.file_path]), 0)
        lines = self.stream.getvalue().splitlines()

        self.assertEqual(lines[0], self.file_path)
        expected = "   -I-V " + str(self.title_key).ljust(45) + "System.Title(Title):".ljust(45) + " Intro"
        self.assertEqual(lines[1], expected)
        self.assertEqual(lines[2], "")

    def test_unknown_flag_reported_as_path(self):
        self.assertEqual(self.run_main(["-x"]), 0)
        self.assertIn("Could not resolve '-x'", self.stream.getvalue())

    def test_errors_still_exit_zero(self):
        missing = os.path.join(self.temp_dir.name, "*.none")
        self.assertEqual(self.run_main([missing, self.file_path]), 0)
        output = self.stream.getvalue()
        self.assertIn("no matching files", output)
        self.assertIn("Intro", output)
        self.assertEqual(self.fakes.property_system.close_count, 1)


if __name__ == '__main__':
    unittest.main()
