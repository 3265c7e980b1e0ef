from snipls.utils.text import (
    get_line_at,
    line_until_cursor,
    split_lines,
    utf16_length,
    utf16_to_offset,
)


class TestGetLineAt:
    def test_first_line(self):
        content = "line1\nline2\nline3"
        assert get_line_at(content, 0) == "line1"

    def test_middle_line(self):
        content = "line1\nline2\nline3"
        assert get_line_at(content, 1) == "line2"

    def test_out_of_range(self):
        content = "line1\nline2"
        assert get_line_at(content, 5) == ""

    def test_negative(self):
        assert get_line_at("line1", -1) == ""

    def test_crlf(self):
        assert get_line_at("a\r\nb\r\n", 1) == "b"


class TestLineUntilCursor:
    def test_middle(self):
        assert line_until_cursor("  View0style", 0, 6) == "  View"

    def test_past_end(self):
        assert line_until_cursor("View", 0, 40) == "View"

    def test_zero(self):
        assert line_until_cursor("View", 0, 0) == ""

    def test_other_line(self):
        assert line_until_cursor("a\nbcd", 1, 2) == "bc"


class TestLineBreaks:
    def test_only_lsp_terminators_split(self):
        content = "const s = 'a\x0cb\x0bc d\x85e';\nCard0title"
        assert split_lines(content) == ["const s = 'a\x0cb\x0bc d\x85e';", "Card0title"]
        assert get_line_at(content, 1) == "Card0title"

    def test_mixed_terminators(self):
        assert split_lines("a\rb\r\nc\nd") == ["a", "b", "c", "d"]

    def test_trailing_newline(self):
        assert get_line_at("a\n", 1) == ""


class TestUtf16:
    def test_length_ascii(self):
        assert utf16_length("Card0title") == 10

    def test_length_astral(self):
        assert utf16_length("Card0title // 😀 smile") == 22

    def test_offset_before_astral(self):
        assert utf16_to_offset("a😀b", 1) == 1

    def test_offset_after_astral(self):
        assert utf16_to_offset("a😀b", 3) == 2

    def test_offset_past_end(self):
        assert utf16_to_offset("a😀b", 10) == 3

    def test_cursor_after_emoji(self):
        assert line_until_cursor("😀 View0x tail", 0, 9) == "😀 View0x"
