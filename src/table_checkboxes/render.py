"""The rendered checkbox literal.

A converted checkbox is stored in the document as literal HTML::

    <input type="checkbox" unchecked id="a1b2c3">
    <input type="checkbox" checked id="a1b2c3">

Attribute order and spelling are part of the on-disk format: lookups match
this exact shape, so anything that writes a checkbox goes through
``render_checkbox``.

"""

from __future__ import annotations

import re
from dataclasses import dataclass

_ANY_CHECKBOX_PATTERN = re.compile(r'<input type="checkbox" (un)?checked id="([^"]*)">')


@dataclass(frozen=True, slots=True)
class RenderedCheckbox:
    """A rendered checkbox found in a page.

    Attributes:
        id: The checkbox identifier
        checked: Current state
        start: Absolute offset of the literal in the page
        end: Absolute offset just past the literal

    """

    id: str
    checked: bool
    start: int
    end: int


def render_checkbox(checkbox_id: str, *, checked: bool = False) -> str:
    """Render the checkbox literal for ``checkbox_id``.

    Example:
        >>> render_checkbox("abc123")
        '<input type="checkbox" unchecked id="abc123">'

    """
    state = "checked" if checked else "unchecked"
    return f'<input type="checkbox" {state} id="{checkbox_id}">'


def checkbox_pattern(checkbox_id: str) -> re.Pattern[str]:
    """Compile a pattern matching the literal for ``checkbox_id`` in either state."""
    return re.compile(rf'<input type="checkbox" (un)?checked id="{re.escape(checkbox_id)}">')


def find_rendered_checkboxes(page: str) -> list[RenderedCheckbox]:
    """List every rendered checkbox in ``page`` in document order."""
    return [
        RenderedCheckbox(
            id=match.group(2),
            checked=match.group(1) is None,
            start=match.start(),
            end=match.end(),
        )
        for match in _ANY_CHECKBOX_PATTERN.finditer(page)
    ]


__all__ = [
    "RenderedCheckbox",
    "checkbox_pattern",
    "find_rendered_checkboxes",
    "render_checkbox",
]
