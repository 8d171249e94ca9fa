"""Host plugin facade.

Wires the converters to a host application: loads and saves settings,
registers the bulk conversion command, and keeps one set of event handlers
per open window.

The host supplies a Workspace (which view is active in a window) and a
SettingsStore. Everything else is driven through the plugin's methods.

Usage:
    >>> from table_checkboxes.config import MemorySettingsStore
    >>> from table_checkboxes.document import TextEditor, View
    >>> view = View(editor=TextEditor("| a | - [ ] |"))
    >>> workspace = StaticWorkspace({MAIN_WINDOW: view})
    >>> plugin = TableCheckboxesPlugin(workspace, MemorySettingsStore())
    >>> plugin.load()
    >>> plugin.run_command("convert-checkboxes").count
    1

"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from table_checkboxes.bulk import BulkResult, convert_document
from table_checkboxes.config import CheckboxConfig, SettingsStore
from table_checkboxes.errors import CommandError, SettingsError
from table_checkboxes.utils.logger import get_logger
from table_checkboxes.windows import WindowRegistry

if TYPE_CHECKING:
    from table_checkboxes.converter import Edit
    from table_checkboxes.document import View
    from table_checkboxes.events import ChangeEvent, InputEvent

logger = get_logger(__name__)

MAIN_WINDOW = "main"
CONVERT_COMMAND_ID = "convert-checkboxes"


class Workspace(Protocol):
    """Host lookup for the active view of a window."""

    def active_view(self, window_id: Hashable) -> View | None:
        """Return the view focused in a window, or None."""
        ...


class StaticWorkspace:
    """Workspace backed by a fixed mapping of window id to view."""

    __slots__ = ("views",)

    def __init__(self, views: Mapping[Hashable, View] | None = None) -> None:
        self.views: dict[Hashable, View] = dict(views or {})

    def active_view(self, window_id: Hashable) -> View | None:
        return self.views.get(window_id)


@dataclass(frozen=True, slots=True)
class Command:
    """A named action invocable from the host's command palette."""

    id: str
    name: str
    callback: Callable[[Hashable], Any]


class TableCheckboxesPlugin:
    """Plugin lifecycle, settings, commands and window handlers."""

    def __init__(self, workspace: Workspace, settings_store: SettingsStore) -> None:
        self.workspace = workspace
        self.settings_store = settings_store
        self.settings = CheckboxConfig()
        self.windows = WindowRegistry(workspace.active_view)
        self.commands: dict[str, Command] = {}

    def load(self, initial_window: Hashable = MAIN_WINDOW) -> None:
        """Load settings, register commands, and attach to the first window."""
        self.load_settings()
        self.add_command(
            Command(
                id=CONVERT_COMMAND_ID,
                name="Convert all checkboxes in the current file to HTML checkboxes",
                callback=self.convert_all_checkboxes,
            )
        )
        self.open_window(initial_window)

    def unload(self) -> None:
        self.windows.clear()
        self.commands.clear()

    def load_settings(self) -> None:
        """Merge stored settings over the defaults.

        An unreadable or malformed settings blob is logged and the defaults
        are used.
        """
        try:
            self.settings = CheckboxConfig.from_dict(self.settings_store.load() or {})
        except SettingsError as e:
            logger.warning("Ignoring unreadable settings: %s", e)
            self.settings = CheckboxConfig()

    def save_settings(self) -> None:
        self.settings_store.save(self.settings.to_dict())

    def set_convert_outside_tables(self, value: bool) -> None:
        """Settings toggle: convert checkboxes outside tables."""
        self.settings = CheckboxConfig(convert_checkboxes_outside_tables=value)
        self.save_settings()

    def add_command(self, command: Command) -> None:
        self.commands[command.id] = command

    def run_command(self, command_id: str, window_id: Hashable = MAIN_WINDOW) -> Any:
        """Invoke a registered command against a window.

        Raises:
            CommandError: If no command has that id.
        """
        command = self.commands.get(command_id)
        if command is None:
            raise CommandError(command_id, "not registered")
        return command.callback(window_id)

    def open_window(self, window_id: Hashable) -> None:
        if window_id not in self.windows:
            self.windows.add(window_id)

    def close_window(self, window_id: Hashable) -> None:
        self.windows.remove(window_id)

    def convert_all_checkboxes(self, window_id: Hashable = MAIN_WINDOW) -> BulkResult | None:
        """Bulk convert the active document of a window.

        Returns:
            The conversion result, or None when the window has no editor.
        """
        view = self.workspace.active_view(window_id)
        if view is None or view.editor is None:
            return None
        return convert_document(
            view.editor,
            convert_outside_tables=self.settings.convert_checkboxes_outside_tables,
        )

    def dispatch_input(self, window_id: Hashable, event: InputEvent) -> Edit | None:
        handlers = self.windows.get(window_id)
        if handlers is None:
            return None
        return handlers.on_input(event)

    def dispatch_change(self, window_id: Hashable, event: ChangeEvent) -> bool:
        handlers = self.windows.get(window_id)
        if handlers is None:
            return False
        return handlers.on_change(event)


__all__ = [
    "CONVERT_COMMAND_ID",
    "Command",
    "MAIN_WINDOW",
    "StaticWorkspace",
    "TableCheckboxesPlugin",
    "Workspace",
]
