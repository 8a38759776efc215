from typing import List, Tuple


class TextDocument:
    """
    A flat document text with line/column conversions. Lines and columns are
    0-based; positions outside the text are clamped onto it.
    """

    def __init__(self, text: str = ""):
        self.set_text(text)

    def set_text(self, text: str):
        self._text = text
        self._lines: List[str] = text.split("\n")

    def get_text(self) -> str:
        return self._text

    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, line: int) -> str:
        if 0 <= line < len(self._lines):
            return self._lines[line]
        return ""

    def offset_to_position(self, offset: int) -> Tuple[int, int]:
        remaining = max(offset, 0)
        for line, text in enumerate(self._lines):
            if remaining <= len(text):
                return line, remaining
            remaining -= len(text) + 1  # newline
        last = len(self._lines) - 1
        return last, len(self._lines[last])

    def position_to_offset(self, line: int, column: int) -> int:
        line = min(max(line, 0), len(self._lines) - 1)
        offset = sum(len(text) + 1 for text in self._lines[:line])
        return offset + min(max(column, 0), len(self._lines[line]))

    def get_text_before(self, offset: int) -> str:
        """Text of the current line up to `offset`."""
        line, column = self.offset_to_position(offset)
        return self._lines[line][:column]

    def __len__(self) -> int:
        return len(self._text)
