"""Line/column addressing for document text.

Provides Position and Span, the coordinates every converter works in.
Both are zero-indexed, matching the editor model: ``line`` counts rows from
the top of the document and ``ch`` counts characters from the start of the
row.

Positions shift when text before them is replaced, so a span is only valid
against the text it was computed from.

Thread Safety:
Position and Span are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A zero-indexed line and character offset.

    Examples:
        >>> Position(2, 5)
        Position(line=2, ch=5)

    """

    line: int
    ch: int

    def __str__(self) -> str:
        return f"{self.line}:{self.ch}"

    def to_offset(self, text: str) -> int:
        """Convert to an absolute offset into ``text``.

        Lines are separated by ``\\n``. The character offset may equal the
        line length (end of line) but not exceed it.

        Raises:
            ValueError: If the line or character is outside ``text``.
        """
        if self.line < 0 or self.ch < 0:
            raise ValueError(f"Negative position {self}")
        offset = 0
        for _ in range(self.line):
            newline = text.find("\n", offset)
            if newline == -1:
                raise ValueError(f"Line {self.line} is past the end of the text")
            offset = newline + 1
        line_end = text.find("\n", offset)
        if line_end == -1:
            line_end = len(text)
        if offset + self.ch > line_end:
            raise ValueError(f"Column {self.ch} is past the end of line {self.line}")
        return offset + self.ch


@dataclass(frozen=True, slots=True)
class Span:
    """An exact replaceable range of text, ``start`` inclusive, ``end`` exclusive.

    Invariant: ``start <= end``.

    Examples:
        >>> span = Span(Position(0, 6), Position(0, 11))
        >>> str(span)
        '0:6-0:11'
        >>> span.length
        5

    """

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"Span end {self.end} is before start {self.start}")

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"

    @classmethod
    def on_line(cls, line: int, start: int, end: int) -> Span:
        """Create a single-line span from two character offsets."""
        return cls(Position(line, start), Position(line, end))

    @property
    def length(self) -> int:
        """Character length of a single-line span."""
        if self.start.line != self.end.line:
            raise ValueError("length is only defined for single-line spans")
        return self.end.ch - self.start.ch

    def to_offsets(self, text: str) -> tuple[int, int]:
        """Convert to absolute ``(start, end)`` offsets into ``text``."""
        return self.start.to_offset(text), self.end.to_offset(text)
