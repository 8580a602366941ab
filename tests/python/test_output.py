"""Unit tests for output sinks."""

import io
import unittest

from rich.console import Console

from termshell.output import BufferedOutput, ConsoleOutput


class TestBufferedOutput(unittest.TestCase):
    def test_lines_and_errors(self):
        output = BufferedOutput()
        output.record("one")
        output.record_error("bad")
        output.record()

        self.assertEqual(["one", ""], output.lines)
        self.assertEqual(["bad"], output.errors)
        self.assertEqual("one\nbad\n", output.text())

    def test_clear(self):
        output = BufferedOutput()
        output.record("one")
        output.clear()
        self.assertEqual([], output.entries)


class TestConsoleOutput(unittest.TestCase):
    """Test writing through rich consoles."""

    def setUp(self):
        self.out = io.StringIO()
        self.err = io.StringIO()
        self.output = ConsoleOutput(
            Console(file=self.out, width=200), Console(file=self.err, width=200)
        )

    def test_record_goes_to_console(self):
        self.output.record("hello")
        self.assertEqual("hello\n", self.out.getvalue())
        self.assertEqual("", self.err.getvalue())

    def test_record_error_goes_to_error_console(self):
        self.output.record_error("tsh: command not found: x")
        self.assertEqual("tsh: command not found: x\n", self.err.getvalue())
        self.assertEqual("", self.out.getvalue())

    def test_markup_in_user_text_is_printed_literally(self):
        self.output.record("[red]not a tag[/red]")
        self.assertEqual("[red]not a tag[/red]\n", self.out.getvalue())


if __name__ == "__main__":
    unittest.main()
