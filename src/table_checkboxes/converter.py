"""Live conversion of a checkbox typed into a table row.

When the user types ``]`` to finish ``- [ ]`` inside a table cell, the token
is replaced in place by an unchecked rendered checkbox. Anything that does
not look like that (a ``]`` outside a table, a stray bracket elsewhere on the
line, no token at the cursor) leaves the keystroke as ordinary text.

Decision and effect are split: ``plan_checkbox_conversion`` is a pure
function from line text and cursor to an Edit, and ``handle_input`` applies
that Edit to an editor.

Example:
    >>> edit = plan_checkbox_conversion("| a | - [ ] |", 10, "| a | - [ ] |")
    >>> str(edit.span)
    '0:6-0:11'

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from table_checkboxes.ids import IdAllocator, generate_unique_id
from table_checkboxes.location import Span
from table_checkboxes.matcher import (
    extract_checkbox_span,
    is_checkbox_in_table_context,
    is_trigger_position_valid,
)
from table_checkboxes.render import render_checkbox
from table_checkboxes.utils.logger import get_logger

if TYPE_CHECKING:
    from table_checkboxes.document import Editor
    from table_checkboxes.events import InputEvent

logger = get_logger(__name__)

TRIGGER = "]"


@dataclass(frozen=True, slots=True)
class Edit:
    """A replacement to perform: put ``text`` where ``span`` is."""

    span: Span
    text: str


def plan_checkbox_conversion(
    line: str,
    position: int,
    page: str,
    *,
    line_number: int = 0,
    allocator: IdAllocator | None = None,
) -> Edit | None:
    """Decide whether a keystroke completes a table checkbox.

    Args:
        line: Text of the line holding the cursor
        position: Cursor offset within ``line``
        page: Whole document text, for identifier uniqueness
        line_number: Index of ``line`` in the document
        allocator: Optional batch allocator; defaults to a one-off check
            against ``page``

    Returns:
        The Edit replacing the token with an unchecked checkbox, or None.

    """
    if not is_checkbox_in_table_context(line):
        return None
    if not is_trigger_position_valid(line, position):
        logger.debug("Bracket at %d:%d is too far from '['", line_number, position)
        return None
    token = extract_checkbox_span(line, position, line_number=line_number)
    if token is None:
        return None
    if allocator is not None:
        checkbox_id = allocator.allocate(page)
    else:
        checkbox_id = generate_unique_id(page)
    return Edit(span=token.span, text=render_checkbox(checkbox_id))


def handle_input(event: InputEvent, editor: Editor) -> Edit | None:
    """Convert the checkbox completed by a keystroke, if any.

    Only ``]`` keystrokes are considered. The edit is applied to the editor
    buffer as a single replacement; nothing is written to disk here.

    Returns:
        The applied Edit, or None when the keystroke was left alone.

    """
    if event.data != TRIGGER:
        return None
    cursor = editor.get_cursor()
    line = editor.get_line(cursor.line)
    edit = plan_checkbox_conversion(
        line,
        cursor.ch,
        editor.get_value(),
        line_number=cursor.line,
    )
    if edit is None:
        return None
    editor.replace_range(edit.text, edit.span.start, edit.span.end)
    logger.debug("Converted checkbox at %s", edit.span)
    return edit


__all__ = [
    "Edit",
    "TRIGGER",
    "handle_input",
    "plan_checkbox_conversion",
]
