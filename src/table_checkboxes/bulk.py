"""Convert every checkbox token in a document at once.

Conversion runs in two phases:

1. Scan: split the page into lines and collect the span of every complete
   checkbox token. By default only table rows are scanned; with
   ``convert_outside_tables`` every line is.
2. Replace: allocate one identifier per span up front, replace all spans with
   PLACEHOLDER in a single pass, then substitute placeholder occurrences in
   order with rendered checkboxes.

Replacing with a placeholder first means no span has to be recomputed after
an earlier replacement shifts the text.

Note:
    A document that already contains PLACEHOLDER literally will have that
    text substituted too, and the last tokens keep the placeholder. This is
    logged as a warning and otherwise left alone.

Example:
    >>> result = convert_all_checkboxes("| a | - [ ] |\\n- [ ] outside")
    >>> result.count
    1
    >>> result.text.splitlines()[1]
    '- [ ] outside'

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from table_checkboxes.config import get_checkbox_config
from table_checkboxes.ids import IdAllocator
from table_checkboxes.location import Span
from table_checkboxes.matcher import find_all_checkbox_spans, is_checkbox_in_table_context
from table_checkboxes.render import render_checkbox
from table_checkboxes.utils.logger import get_logger

if TYPE_CHECKING:
    from table_checkboxes.document import Editor

logger = get_logger(__name__)

PLACEHOLDER = "!!PLACEHOLDER_TO_BE_REPLACED_WITH_CHECKBOX!!"


@dataclass(frozen=True, slots=True)
class BulkResult:
    """Outcome of a bulk conversion.

    Attributes:
        text: The converted page
        ids: Identifier given to each converted token, in document order
        spans: Source span of each converted token, in the original page

    """

    text: str
    ids: tuple[str, ...] = ()
    spans: tuple[Span, ...] = ()

    @property
    def count(self) -> int:
        return len(self.ids)


def find_checkboxes_to_convert(page: str, *, convert_outside_tables: bool) -> list[Span]:
    """Collect the span of every convertible token, top to bottom, left to right."""
    spans: list[Span] = []
    for line_number, line in enumerate(page.split("\n")):
        if not convert_outside_tables and not is_checkbox_in_table_context(line):
            continue
        spans.extend(
            token.span for token in find_all_checkbox_spans(line, line_number=line_number)
        )
    return spans


def _line_starts(page: str) -> list[int]:
    starts = [0]
    for i, char in enumerate(page):
        if char == "\n":
            starts.append(i + 1)
    return starts


def _replace_with_placeholders(page: str, spans: list[Span]) -> str:
    starts = _line_starts(page)
    offsets = sorted(
        (starts[span.start.line] + span.start.ch, starts[span.end.line] + span.end.ch)
        for span in spans
    )
    parts: list[str] = []
    cursor = 0
    for begin, end in offsets:
        parts.append(page[cursor:begin])
        parts.append(PLACEHOLDER)
        cursor = end
    parts.append(page[cursor:])
    return "".join(parts)


def convert_checkboxes(
    page: str,
    spans: list[Span],
    *,
    allocator: IdAllocator | None = None,
) -> BulkResult:
    """Replace each span in ``page`` with an unchecked rendered checkbox.

    Spans must not overlap and must be in document order, as returned by
    ``find_checkboxes_to_convert``.

    Args:
        page: Document text the spans were computed against
        spans: Token spans to replace
        allocator: Batch allocator; a fresh one is used if omitted

    """
    if not spans:
        return BulkResult(text=page)

    allocator = allocator or IdAllocator()
    ids = allocator.allocate_many(page, len(spans))

    existing = page.count(PLACEHOLDER)
    if existing:
        logger.warning(
            "Document already contains %d placeholder marker(s); conversion may misplace checkboxes",
            existing,
        )

    text = _replace_with_placeholders(page, spans)
    for checkbox_id in ids:
        text = text.replace(PLACEHOLDER, render_checkbox(checkbox_id), 1)
    return BulkResult(text=text, ids=tuple(ids), spans=tuple(spans))


def convert_all_checkboxes(
    page: str,
    *,
    convert_outside_tables: bool | None = None,
    allocator: IdAllocator | None = None,
) -> BulkResult:
    """Find and convert every eligible checkbox token in ``page``.

    Args:
        page: Document text
        convert_outside_tables: Convert tokens outside table rows too. When
            None, the active CheckboxConfig decides.
        allocator: Batch allocator; a fresh one is used if omitted

    """
    if convert_outside_tables is None:
        convert_outside_tables = get_checkbox_config().convert_checkboxes_outside_tables
    spans = find_checkboxes_to_convert(page, convert_outside_tables=convert_outside_tables)
    logger.debug(
        "Bulk conversion (outside tables: %s): %d checkbox(es)",
        convert_outside_tables,
        len(spans),
    )
    return convert_checkboxes(page, spans, allocator=allocator)


def convert_document(
    editor: Editor,
    *,
    convert_outside_tables: bool | None = None,
) -> BulkResult:
    """Bulk convert the whole editor buffer, writing it back if anything changed."""
    result = convert_all_checkboxes(
        editor.get_value(),
        convert_outside_tables=convert_outside_tables,
    )
    if result.count:
        editor.set_value(result.text)
    return result


__all__ = [
    "BulkResult",
    "PLACEHOLDER",
    "convert_all_checkboxes",
    "convert_checkboxes",
    "convert_document",
    "find_checkboxes_to_convert",
]
