"""
Tests for the interactive read-tokenize-print loop.
"""

import io
import logging
import os
import sys
import tempfile
import unittest
from unittest import mock

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from monkey import repl
from monkey.lexer import tokenize


class TestFormatTokens(unittest.TestCase):

    def test_format_tokens(self):
        self.assertEqual(
            repl.format_tokens(tokenize("let x = 1;")),
            "[<let, let>, <identifier, x>, <=, =>, <integer, 1>, <;, ;>]",
        )

    def test_format_no_tokens(self):
        self.assertEqual(repl.format_tokens([]), "[]")


class TestRepl(unittest.TestCase):
    """Drive run_repl with in-memory streams."""

    def _run(self, text):
        stdout, stderr = io.StringIO(), io.StringIO()
        status = repl.run_repl(io.StringIO(text), stdout, stderr)
        return status, stdout.getvalue(), stderr.getvalue()

    def test_prints_banner_and_tokens(self):
        status, out, err = self._run("23 == 342 - 12\n")

        self.assertEqual(status, 0)
        self.assertTrue(out.startswith(repl.BANNER))
        self.assertIn(">> [<integer, 23>, <==, ==>, <integer, 342>, <-, ->, <integer, 12>]\n", out)
        self.assertEqual(err, "")

    def test_one_prompt_per_line_plus_final(self):
        _, out, _ = self._run("a\nb\n")
        self.assertEqual(out.count(repl.PROMPT), 3)

    def test_blank_line_prints_empty_list(self):
        _, out, _ = self._run("\n")
        self.assertIn(">> []\n", out)

    def test_error_is_reported_and_loop_continues(self):
        status, out, err = self._run("1 $ 2\nlet y = 3;\n")

        self.assertEqual(status, 0)
        self.assertIn("UnexpectedCharacterError", err)
        self.assertIn("position 2", err)
        self.assertIn("[<let, let>, <identifier, y>, <=, =>, <integer, 3>, <;, ;>]", out)

    def test_overflow_is_reported(self):
        _, _, err = self._run("123456789012345\n")
        self.assertIn("IntegerOverflowError", err)
        self.assertIn("123456789012345", err)

    def test_zero_padded_numeral_keeps_the_loop_alive(self):
        status, out, err = self._run("0" * 5000 + "7\nfn\n")

        self.assertEqual(status, 0)
        self.assertIn(">> [<integer, 7>]\n", out)
        self.assertIn("[<fn, fn>]", out)
        self.assertEqual(err, "")

    def test_last_line_without_newline(self):
        _, out, _ = self._run("true")
        self.assertIn("[<boolean, true>]", out)

    def test_keyboard_interrupt_ends_loop(self):
        stdin = mock.Mock()
        stdin.readline.side_effect = KeyboardInterrupt
        stdout = io.StringIO()
        status = repl.run_repl(stdin, stdout, io.StringIO())
        self.assertEqual(status, 0)
        self.assertIn("Bye.", stdout.getvalue())


class TestLogConfiguration(unittest.TestCase):
    """MONKEY_LOG_LEVEL handling."""

    def test_resolve_known_levels(self):
        self.assertEqual(repl.resolve_log_level("debug"), logging.DEBUG)
        self.assertEqual(repl.resolve_log_level(" Info "), logging.INFO)
        self.assertEqual(repl.resolve_log_level("WARNING"), logging.WARNING)

    def test_resolve_unknown_or_missing_level(self):
        self.assertIsNone(repl.resolve_log_level("verbose"))
        self.assertIsNone(repl.resolve_log_level(""))
        self.assertIsNone(repl.resolve_log_level(None))

    @mock.patch("logging.basicConfig")
    @mock.patch.dict(os.environ, {repl.LOG_LEVEL_ENV: "verbose"})
    def test_unknown_level_falls_back_to_warning(self, basic_config):
        with self.assertLogs("monkey.repl", level="WARNING") as logs:
            level = repl.configure_logging()

        self.assertEqual(level, logging.WARNING)
        self.assertEqual(basic_config.call_args.kwargs["level"], logging.WARNING)
        self.assertIn("verbose", logs.output[0])

    @mock.patch("logging.basicConfig")
    @mock.patch.dict(os.environ, {repl.LOG_LEVEL_ENV: "debug"})
    def test_known_level_is_used(self, basic_config):
        self.assertEqual(repl.configure_logging(), logging.DEBUG)
        self.assertEqual(basic_config.call_args.kwargs["level"], logging.DEBUG)

    @mock.patch("logging.basicConfig")
    def test_unset_level_defaults_to_warning(self, basic_config):
        with mock.patch.dict(os.environ):
            os.environ.pop(repl.LOG_LEVEL_ENV, None)
            self.assertEqual(repl.configure_logging(), logging.WARNING)


class TestMain(unittest.TestCase):
    """The console script entry point."""

    def setUp(self):
        with tempfile.NamedTemporaryFile("w", suffix=".mk", delete=False, encoding="utf-8") as f:
            f.write("if (x) { 1 }\n")
            self.path = f.name

    def tearDown(self):
        os.unlink(self.path)

    @mock.patch("sys.stdout", new_callable=io.StringIO)
    def test_file_argument_prints_one_token_per_line(self, stdout):
        self.assertEqual(repl.main([self.path]), 0)
        self.assertEqual(
            stdout.getvalue().splitlines(),
            ["<if, if>", "<(, (>", "<identifier, x>", "<), )>", "<{, {>", "<integer, 1>", "<}, }>"],
        )

    @mock.patch("sys.stderr", new_callable=io.StringIO)
    def test_file_with_lexer_error_fails(self, stderr):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("let a = 1 ? 2;\n")
        self.assertEqual(repl.main([self.path]), 1)
        self.assertIn("UnexpectedCharacterError", stderr.getvalue())

    @mock.patch("sys.stderr", new_callable=io.StringIO)
    def test_missing_file_fails(self, stderr):
        self.assertEqual(repl.main([self.path + ".missing"]), 1)
        self.assertIn("cannot read", stderr.getvalue())

    @mock.patch("sys.stderr", new_callable=io.StringIO)
    def test_too_many_arguments(self, stderr):
        self.assertEqual(repl.main(["a", "b"]), 2)
        self.assertIn("usage", stderr.getvalue())

    @mock.patch.dict(os.environ, {repl.LOG_LEVEL_ENV: "verbose"})
    @mock.patch("sys.stdin", new=io.StringIO("let\n"))
    @mock.patch("sys.stdout", new_callable=io.StringIO)
    def test_bad_log_level_does_not_stop_the_loop(self, stdout):
        with mock.patch("logging.basicConfig"):
            self.assertEqual(repl.main([]), 0)
        self.assertIn("[<let, let>]", stdout.getvalue())

    @mock.patch("sys.stdin", new=io.StringIO("fn\n"))
    @mock.patch("sys.stdout", new_callable=io.StringIO)
    def test_no_arguments_runs_the_loop(self, stdout):
        self.assertEqual(repl.main([]), 0)
        self.assertIn("[<fn, fn>]", stdout.getvalue())


if __name__ == "__main__":
    unittest.main()
