"""Write a checkbox's toggled state back to the persisted document.

When the user clicks a rendered checkbox, its ``checked``/``unchecked``
attribute in the file is rewritten to match. Only the first literal carrying
the clicked id is touched; every other byte of the page is preserved.

Host task-list checkboxes (those with a ``data-task`` attribute) belong to
the host and are ignored.

Note:
    Writes are not ordered against each other. A host that persists
    asynchronously can lose a toggle when the same checkbox is clicked again
    before the previous write lands.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from table_checkboxes.render import checkbox_pattern, render_checkbox
from table_checkboxes.utils.logger import get_logger

if TYPE_CHECKING:
    from table_checkboxes.document import View
    from table_checkboxes.events import ChangeEvent, Element

logger = get_logger(__name__)


def toggle_checkbox(page: str, checkbox_id: str, checked: bool) -> str | None:
    """Rewrite the state of the checkbox ``checkbox_id`` in ``page``.

    Returns:
        The new page text, or None if no checkbox carries that id.

    Example:
        >>> toggle_checkbox('<input type="checkbox" unchecked id="x1">', "x1", True)
        '<input type="checkbox" checked id="x1">'

    """
    replacement = render_checkbox(checkbox_id, checked=checked)
    new_page, count = checkbox_pattern(checkbox_id).subn(lambda _: replacement, page, count=1)
    if count == 0:
        return None
    return new_page


def is_owned_checkbox(element: Element) -> bool:
    """Check whether a changed element is a checkbox this package rendered."""
    return (
        element.tag == "input"
        and bool(element.id)
        and not element.has_attribute("data-task")
        and element.get_attribute("type") == "checkbox"
    )


def handle_change(event: ChangeEvent, view: View) -> bool:
    """Persist the new state of a clicked checkbox.

    Returns:
        True if the file was rewritten.

    """
    element = event.target
    if not is_owned_checkbox(element) or view.file is None:
        return False
    page = view.file.read()
    new_page = toggle_checkbox(page, element.id, element.checked)
    if new_page is None:
        logger.debug("No checkbox with id %r in document", element.id)
        return False
    view.file.write(new_page)
    return True


__all__ = [
    "handle_change",
    "is_owned_checkbox",
    "toggle_checkbox",
]
