"""Document service interfaces and implementations.

The host editor owns the live buffer and the persisted file. Converters talk
to both through two small protocols:

- Editor: the open buffer (cursor, lines, whole-text get/set, range replace)
- FileStore: the persisted file (read and write the whole text)

TextEditor, PathFile and MemoryFile implement them for tests, the command
line, and embedding in hosts that do not have their own buffer model.

"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from table_checkboxes.errors import SpanError
from table_checkboxes.location import Position, Span


class Editor(Protocol):
    """Protocol for an open editor buffer."""

    def get_cursor(self) -> Position:
        """Current cursor (selection anchor)."""
        ...

    def get_line(self, line: int) -> str:
        """Text of one line, without the line separator."""
        ...

    def line_count(self) -> int:
        ...

    def get_value(self) -> str:
        """Whole buffer text."""
        ...

    def set_value(self, text: str) -> None:
        """Replace the whole buffer text."""
        ...

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        """Replace the text between two positions with ``text``."""
        ...


class FileStore(Protocol):
    """Protocol for the persisted copy of a document."""

    def read(self) -> str:
        ...

    def write(self, text: str) -> None:
        ...


@dataclass(slots=True)
class View:
    """The active document of a window.

    Either half may be missing: a window can show a file without an editor
    (reading view) or have no file open at all.

    """

    editor: Editor | None = None
    file: FileStore | None = None


class TextEditor:
    """In-memory editor buffer with a single cursor.

    Example:
        >>> editor = TextEditor("| a | - [ ] |", cursor=Position(0, 10))
        >>> editor.get_line(0)
        '| a | - [ ] |'

    """

    __slots__ = ("_lines", "_cursor")

    def __init__(self, text: str = "", *, cursor: Position | None = None) -> None:
        self._lines = text.split("\n")
        self._cursor = Position(0, 0)
        if cursor is not None:
            self.set_cursor(cursor)

    def get_cursor(self) -> Position:
        return self._cursor

    def set_cursor(self, position: Position) -> None:
        self._check(position)
        self._cursor = position

    def get_line(self, line: int) -> str:
        if not 0 <= line < len(self._lines):
            raise SpanError(f"Line {line} out of range")
        return self._lines[line]

    def line_count(self) -> int:
        return len(self._lines)

    def get_value(self) -> str:
        return "\n".join(self._lines)

    def set_value(self, text: str) -> None:
        self._lines = text.split("\n")
        last = len(self._lines) - 1
        if self._cursor.line > last or self._cursor.ch > len(self._lines[self._cursor.line]):
            self._cursor = Position(last, len(self._lines[last]))

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        """Replace ``start..end`` with ``text`` and place the cursor after it.

        Raises:
            SpanError: If either position is outside the buffer or the range
                is reversed.
        """
        if end < start:
            raise SpanError("Reversed range", Span(end, start))
        self._check(start)
        self._check(end)
        value = self.get_value()
        begin = start.to_offset(value)
        value = value[:begin] + text + value[end.to_offset(value) :]
        self._lines = value.split("\n")
        inserted = text.split("\n")
        if len(inserted) == 1:
            self._cursor = Position(start.line, start.ch + len(text))
        else:
            self._cursor = Position(start.line + len(inserted) - 1, len(inserted[-1]))

    def _check(self, position: Position) -> None:
        if not 0 <= position.line < len(self._lines):
            raise SpanError(f"Line {position.line} out of range")
        if not 0 <= position.ch <= len(self._lines[position.line]):
            raise SpanError(f"Column {position.ch} out of range on line {position.line}")


class PathFile:
    """A UTF-8 text file on disk."""

    __slots__ = ("path",)

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def read(self) -> str:
        return self.path.read_text(encoding="utf-8")

    def write(self, text: str) -> None:
        self.path.write_text(text, encoding="utf-8")


class MemoryFile:
    """An in-memory file that counts writes."""

    __slots__ = ("text", "writes")

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.writes = 0

    def read(self) -> str:
        return self.text

    def write(self, text: str) -> None:
        self.text = text
        self.writes += 1


__all__ = [
    "Editor",
    "FileStore",
    "MemoryFile",
    "PathFile",
    "TextEditor",
    "View",
]
