"""
Offset to line/character mapping.

Columns are counted in UTF-16 code units so that ranges line up with what
editors display for astral-plane characters.
"""

from bisect import bisect_right

from minihtml.ir.schema import Position, Range


def utf16_len(s: str) -> int:
    """Length of ``s`` in UTF-16 code units."""
    return len(s.encode("utf-16-le")) // 2


class LineIndex:
    """Maps string offsets of one text snapshot to editor positions."""

    def __init__(self, text: str):
        self.text = text
        self.line_starts = [0]
        for i, ch in enumerate(text):
            if ch == "\n":
                self.line_starts.append(i + 1)

    @property
    def line_count(self) -> int:
        return len(self.line_starts)

    def line_of(self, offset: int) -> int:
        """Zero-based line containing ``offset``."""
        offset = max(0, min(offset, len(self.text)))
        return bisect_right(self.line_starts, offset) - 1

    def position(self, offset: int) -> Position:
        offset = max(0, min(offset, len(self.text)))
        line = self.line_of(offset)
        character = utf16_len(self.text[self.line_starts[line]:offset])
        return Position(line=line, character=character)

    def range(self, start: int, end: int) -> Range:
        return Range(start=self.position(start), end=self.position(end))

    def line_text(self, line: int) -> str:
        """Text of a line without its trailing newline."""
        start = self.line_starts[line]
        if line + 1 < len(self.line_starts):
            return self.text[start:self.line_starts[line + 1] - 1]
        return self.text[start:]
