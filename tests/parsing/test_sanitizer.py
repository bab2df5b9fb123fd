from winget_updater.parsing.sanitizer import (
    collapse_overwrites,
    sanitize,
    sanitize_lines,
    strip_ansi,
)
from tests.parsing.conftest import HEADER, SAMPLE_OUTPUT, SPINNER_OUTPUT


class TestCollapseOverwrites:
    def test_keeps_text_after_last_carriage_return(self):
        assert collapse_overwrites("\r<a>\r<b>\r<final>") == "<final>"

    def test_line_without_carriage_return_unchanged(self):
        assert collapse_overwrites("Google Chrome") == "Google Chrome"

    def test_trailing_carriage_return_blanks_line(self):
        assert collapse_overwrites("  45%\r") == ""

    def test_progress_frames(self):
        line = "  ██░░░░  10%\r  ████░░  50%\r  ██████ 100%"
        assert collapse_overwrites(line) == "  ██████ 100%"


class TestStripAnsi:
    def test_colors_removed(self):
        assert strip_ansi("\x1b[32mSuccessfully installed\x1b[0m") == "Successfully installed"

    def test_cursor_forward_becomes_spaces(self):
        assert strip_ansi("Name\x1b[3CId") == "Name   Id"

    def test_private_mode_removed(self):
        assert strip_ansi("\x1b[?25lDownloading\x1b[?25h") == "Downloading"


class TestSanitize:
    def test_spinner_before_header_collapsed(self):
        lines = sanitize_lines(SPINNER_OUTPUT)
        assert lines[0] == HEADER

    def test_crlf_is_not_an_overwrite(self):
        assert sanitize_lines("abc\r\ndef\r\n") == ["abc", "def", ""]

    def test_line_count_preserved(self):
        text = "a\r b\n\rc\nd\n"
        assert len(sanitize_lines(text)) == len(text.split("\n"))

    def test_unterminated_osc_does_not_swallow_lines(self):
        lines = sanitize_lines("a\x1b]0;title\nb\nc\x07d\ne")
        assert len(lines) == 4
        assert lines[1:] == ["b", "c\x07d", "e"]

    def test_osc_with_string_terminator_removed(self):
        assert sanitize_lines("\x1b]0;winget\x1b\\Name") == ["Name"]

    def test_no_carriage_returns_is_noop(self):
        assert sanitize(SAMPLE_OUTPUT) == SAMPLE_OUTPUT

    def test_idempotent(self):
        once = sanitize(SPINNER_OUTPUT)
        assert sanitize(once) == once
        assert "\r" not in once

    def test_empty_input(self):
        assert sanitize("") == ""
