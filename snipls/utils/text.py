import re

# LSP only recognizes these three line terminators.
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def split_lines(content: str) -> list[str]:
    return LINE_BREAK_RE.split(content)


def get_line_at(content: str, line: int) -> str:
    lines = split_lines(content)
    if 0 <= line < len(lines):
        return lines[line]
    return ""


def utf16_length(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


def utf16_to_offset(text: str, column: int) -> int:
    """Convert an LSP character column (UTF-16 code units) to a string index."""
    units = 0
    for offset, char in enumerate(text):
        if units >= column:
            return offset
        units += 2 if ord(char) > 0xFFFF else 1
    return len(text)


def line_until_cursor(content: str, line: int, character: int) -> str:
    text = get_line_at(content, line)
    return text[: utf16_to_offset(text, character)]
