"""Per-window event handlers.

Each host window gets its own WindowHandlers, held in a WindowRegistry keyed
by window identity. Handlers resolve the window's active view at event time
and never hold a reference to a document between events.

Example:
    >>> registry = WindowRegistry(lambda window_id: None)
    >>> handlers = registry.add("main")
    >>> "main" in registry
    True
    >>> registry.remove("main")
    >>> len(registry)
    0

"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from typing import TYPE_CHECKING

from table_checkboxes.converter import handle_input
from table_checkboxes.errors import WindowError
from table_checkboxes.toggle import handle_change
from table_checkboxes.utils.logger import get_logger

if TYPE_CHECKING:
    from table_checkboxes.converter import Edit
    from table_checkboxes.document import View
    from table_checkboxes.events import ChangeEvent, InputEvent

logger = get_logger(__name__)

ViewResolver = Callable[[Hashable], "View | None"]


class WindowHandlers:
    """Input and change handlers bound to one window."""

    __slots__ = ("window_id", "_resolve_view")

    def __init__(self, window_id: Hashable, resolve_view: ViewResolver) -> None:
        self.window_id = window_id
        self._resolve_view = resolve_view

    def __repr__(self) -> str:
        return f"WindowHandlers({self.window_id!r})"

    def on_input(self, event: InputEvent) -> Edit | None:
        view = self._resolve_view(self.window_id)
        if view is None or view.editor is None:
            return None
        return handle_input(event, view.editor)

    def on_change(self, event: ChangeEvent) -> bool:
        view = self._resolve_view(self.window_id)
        if view is None or view.editor is None or view.file is None:
            return False
        return handle_change(event, view)


class WindowRegistry:
    """Registry of handlers keyed by window identity."""

    __slots__ = ("_handlers", "_resolve_view")

    def __init__(self, resolve_view: ViewResolver) -> None:
        self._handlers: dict[Hashable, WindowHandlers] = {}
        self._resolve_view = resolve_view

    def __contains__(self, window_id: object) -> bool:
        return window_id in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._handlers)

    def add(self, window_id: Hashable) -> WindowHandlers:
        """Create handlers for a newly opened window.

        Raises:
            WindowError: If the window already has handlers.
        """
        if window_id in self._handlers:
            raise WindowError(window_id, "handlers already registered")
        handlers = WindowHandlers(window_id, self._resolve_view)
        self._handlers[window_id] = handlers
        logger.debug("Registered handlers for window %r", window_id)
        return handlers

    def remove(self, window_id: Hashable) -> None:
        """Drop a window's handlers. Unknown windows are ignored."""
        if self._handlers.pop(window_id, None) is not None:
            logger.debug("Removed handlers for window %r", window_id)

    def get(self, window_id: Hashable) -> WindowHandlers | None:
        return self._handlers.get(window_id)

    def clear(self) -> None:
        self._handlers.clear()


__all__ = [
    "WindowHandlers",
    "WindowRegistry",
]
