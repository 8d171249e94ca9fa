"""
table_checkboxes: Interactive checkboxes for markdown tables

Markdown has no checkbox syntax that works inside a table cell. This package
detects ``- [ ]`` typed into a table row and replaces it with an HTML
checkbox carrying a unique id, then keeps the file in sync when the checkbox
is clicked.

Quick Start:
    >>> from table_checkboxes import convert_all_checkboxes, toggle_checkbox
    >>> result = convert_all_checkboxes("| Task | Done |\\n| Ship | - [ ] |")
    >>> result.count
    1
    >>> page = toggle_checkbox(result.text, result.ids[0], True)
    >>> 'checked id="' in page
    True

Components:
    matcher    Detect checkbox tokens and table rows
    ids        Unique identifiers
    converter  Live conversion on ``]`` keystrokes
    bulk       Convert a whole document
    toggle     Write clicked state back to the file
    plugin     Host integration (settings, command, windows)

"""

from table_checkboxes.bulk import (
    PLACEHOLDER,
    BulkResult,
    convert_all_checkboxes,
    convert_checkboxes,
    convert_document,
    find_checkboxes_to_convert,
)
from table_checkboxes.config import (
    CheckboxConfig,
    JsonSettingsStore,
    MemorySettingsStore,
    checkbox_config_context,
    get_checkbox_config,
    reset_checkbox_config,
    set_checkbox_config,
)
from table_checkboxes.converter import Edit, handle_input, plan_checkbox_conversion
from table_checkboxes.document import MemoryFile, PathFile, TextEditor, View
from table_checkboxes.errors import (
    CheckboxError,
    CommandError,
    SettingsError,
    SpanError,
    WindowError,
)
from table_checkboxes.events import ChangeEvent, Element, InputEvent
from table_checkboxes.ids import IdAllocator, generate_unique_id, id_exists_in_page
from table_checkboxes.location import Position, Span
from table_checkboxes.matcher import (
    CheckboxToken,
    extract_checkbox_span,
    find_all_checkbox_spans,
    is_checkbox_in_table_context,
    is_trigger_position_valid,
)
from table_checkboxes.plugin import Command, StaticWorkspace, TableCheckboxesPlugin
from table_checkboxes.render import RenderedCheckbox, find_rendered_checkboxes, render_checkbox
from table_checkboxes.toggle import handle_change, is_owned_checkbox, toggle_checkbox
from table_checkboxes.windows import WindowHandlers, WindowRegistry

__version__ = "0.1.0"

__all__ = [
    # Data model
    "CheckboxToken",
    "Edit",
    "Position",
    "RenderedCheckbox",
    "Span",
    # Matching
    "extract_checkbox_span",
    "find_all_checkbox_spans",
    "is_checkbox_in_table_context",
    "is_trigger_position_valid",
    # Identifiers
    "IdAllocator",
    "generate_unique_id",
    "id_exists_in_page",
    # Conversion
    "PLACEHOLDER",
    "BulkResult",
    "convert_all_checkboxes",
    "convert_checkboxes",
    "convert_document",
    "find_checkboxes_to_convert",
    "handle_input",
    "plan_checkbox_conversion",
    "render_checkbox",
    # Toggling
    "find_rendered_checkboxes",
    "handle_change",
    "is_owned_checkbox",
    "toggle_checkbox",
    # Host integration
    "ChangeEvent",
    "Command",
    "Element",
    "InputEvent",
    "MemoryFile",
    "PathFile",
    "StaticWorkspace",
    "TableCheckboxesPlugin",
    "TextEditor",
    "View",
    "WindowHandlers",
    "WindowRegistry",
    # Config
    "CheckboxConfig",
    "JsonSettingsStore",
    "MemorySettingsStore",
    "checkbox_config_context",
    "get_checkbox_config",
    "reset_checkbox_config",
    "set_checkbox_config",
    # Errors
    "CheckboxError",
    "CommandError",
    "SettingsError",
    "SpanError",
    "WindowError",
]
