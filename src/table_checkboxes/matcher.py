"""Checkbox token matching.

Pure functions that classify a line of text and locate checkbox tokens in it.
No state, no I/O.

Recognized token shapes (dash, optional single space, brackets with an
optional single space inside)::

    - [ ]    -[ ]    - []    -[]

While typing, the closing bracket may not exist yet (``- [``), so the live
path also accepts the in-progress form. The bulk path always requires the
closing bracket.

Only single-space variants are recognized: ``-  [ ]`` does not match.

Example:
    >>> is_checkbox_in_table_context("| task | - [ ] |")
    True
    >>> [t.text for t in find_all_checkbox_spans("| - [ ] | -[] |")]
    ['- [ ]', '-[]']

Thread Safety:
    All functions are pure. Compiled patterns are module-level constants.

"""

from __future__ import annotations

import re
from dataclasses import dataclass

from table_checkboxes.location import Span

# Leading whitespace / blockquote markers, a pipe, then a checkbox marker
# (complete or a bare opening bracket) anywhere after it.
_TABLE_CHECKBOX_PATTERN = re.compile(r"^(?:\s|>)*\|.*-\s?(?:\[\s?\]|\[)")

# Live path: closing bracket optional
_PARTIAL_CHECKBOX_PATTERN = re.compile(r"-\s?\[\s?\]?")

# Bulk path: closing bracket mandatory
_COMPLETE_CHECKBOX_PATTERN = re.compile(r"-\s?\[\s?\]")

# Longest token is "- [ ]"
_MAX_TOKEN_LENGTH = 5


@dataclass(frozen=True, slots=True)
class CheckboxToken:
    """A checkbox token found in a line.

    Attributes:
        text: The matched source text, e.g. ``"- [ ]"``
        span: Exact location of ``text`` in the document
        complete: True when the token ends with the closing bracket

    """

    text: str
    span: Span
    complete: bool


def is_checkbox_in_table_context(line: str) -> bool:
    """Check whether a line is a table row holding a checkbox marker.

    Leading whitespace and blockquote markers (``>``) before the first pipe
    are tolerated. The marker must come after a pipe.

    Examples:
        >>> is_checkbox_in_table_context("> | a | - [ ] |")
        True
        >>> is_checkbox_in_table_context("- [ ] not a table | b")
        False

    """
    return _TABLE_CHECKBOX_PATTERN.search(line) is not None


def _char_at(line: str, index: int) -> str:
    # No wrap-around for negative indices
    if 0 <= index < len(line):
        return line[index]
    return ""


def is_trigger_position_valid(line: str, position: int) -> bool:
    """Check that a just-typed closing bracket belongs to a checkbox.

    True only if the character one or two places before ``position`` is an
    opening bracket. This keeps a ``]`` typed elsewhere on a checkbox line
    from firing a conversion.

    Examples:
        >>> is_trigger_position_valid("| - [ ] |", 6)
        True
        >>> is_trigger_position_valid("some text ] more", 11)
        False

    """
    return _char_at(line, position - 1) == "[" or _char_at(line, position - 2) == "["


def extract_checkbox_span(
    line: str,
    position: int,
    *,
    line_number: int = 0,
) -> CheckboxToken | None:
    """Find the checkbox token ending at the cursor.

    When the character at ``position`` is a closing bracket, the editor has
    auto-inserted it and left the cursor in front of it, so the search window
    extends one character past ``position`` to include it.

    Args:
        line: Current line text
        position: Cursor offset within the line
        line_number: Line index to record in the returned span

    Returns:
        The matched token, or None if no token ends at the cursor.

    Example:
        >>> token = extract_checkbox_span("| a | - [ ] |", 10)
        >>> token.text, token.complete, str(token.span)
        ('- [ ]', True, '0:6-0:11')

    """
    end = position + 1 if _char_at(line, position) == "]" else position
    end = min(end, len(line))
    start = max(0, end - _MAX_TOKEN_LENGTH)
    match = _PARTIAL_CHECKBOX_PATTERN.search(line, start, end)
    if match is None:
        return None
    text = match.group(0)
    return CheckboxToken(
        text=text,
        span=Span.on_line(line_number, match.start(), match.end()),
        complete=text.endswith("]"),
    )


def find_all_checkbox_spans(line: str, *, line_number: int = 0) -> list[CheckboxToken]:
    """Find every complete checkbox token in a line, left to right.

    Tokens never overlap. An opening bracket without its closing bracket is
    not a token here.

    Example:
        >>> [str(t.span) for t in find_all_checkbox_spans("-[] and - [ ]", line_number=3)]
        ['3:0-3:3', '3:8-3:13']

    """
    return [
        CheckboxToken(
            text=match.group(0),
            span=Span.on_line(line_number, match.start(), match.end()),
            complete=True,
        )
        for match in _COMPLETE_CHECKBOX_PATTERN.finditer(line)
    ]


__all__ = [
    "CheckboxToken",
    "extract_checkbox_span",
    "find_all_checkbox_spans",
    "is_checkbox_in_table_context",
    "is_trigger_position_valid",
]
