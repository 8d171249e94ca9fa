"""Tests for the plugin facade and per-window handlers."""

import json
import logging

import pytest

from table_checkboxes.config import JsonSettingsStore, MemorySettingsStore
from table_checkboxes.document import MemoryFile, TextEditor, View
from table_checkboxes.errors import CommandError, SettingsError, WindowError
from table_checkboxes.events import ChangeEvent, Element, InputEvent
from table_checkboxes.location import Position
from table_checkboxes.plugin import (
    CONVERT_COMMAND_ID,
    MAIN_WINDOW,
    StaticWorkspace,
    TableCheckboxesPlugin,
)
from table_checkboxes.render import render_checkbox
from table_checkboxes.windows import WindowRegistry


class BrokenStore:
    def load(self):
        raise SettingsError("invalid JSON", path="data.json")

    def save(self, data):
        raise AssertionError("should not save")


def _plugin(views: dict, data: dict | None = None) -> TableCheckboxesPlugin:
    plugin = TableCheckboxesPlugin(StaticWorkspace(views), MemorySettingsStore(data))
    plugin.load()
    return plugin


def _click(checkbox_id: str, checked: bool = True) -> ChangeEvent:
    return ChangeEvent(
        Element(tag="input", attributes={"type": "checkbox", "id": checkbox_id}, checked=checked)
    )


class TestStaticWorkspace:
    """StaticWorkspace resolves views from a fixed mapping."""

    def test_known_window(self):
        """A mapped window id returns its view."""
        view = View(editor=TextEditor())
        assert StaticWorkspace({MAIN_WINDOW: view}).active_view(MAIN_WINDOW) is view

    def test_unknown_window(self):
        """An unmapped window id has no active view."""
        assert StaticWorkspace().active_view("other") is None

    def test_mapping_is_copied(self):
        """Later changes to the source mapping are not seen."""
        views = {}
        workspace = StaticWorkspace(views)
        views[MAIN_WINDOW] = View()
        assert workspace.active_view(MAIN_WINDOW) is None


class TestWindowRegistry:
    """WindowRegistry keeps one set of handlers per window."""

    def test_add_and_remove(self):
        """Handlers are added and removed by window id."""
        registry = WindowRegistry(lambda window_id: None)
        registry.add("a")
        registry.add("b")
        assert len(registry) == 2
        assert set(registry) == {"a", "b"}
        registry.remove("a")
        assert "a" not in registry
        assert registry.get("b") is not None

    def test_duplicate_rejected(self):
        """Registering the same window twice raises WindowError."""
        registry = WindowRegistry(lambda window_id: None)
        registry.add("a")
        with pytest.raises(WindowError):
            registry.add("a")

    def test_remove_unknown_is_noop(self):
        registry = WindowRegistry(lambda window_id: None)
        registry.remove("missing")
        assert len(registry) == 0

    def test_handlers_without_view(self):
        """Handlers do nothing when the window has no active view."""
        handlers = WindowRegistry(lambda window_id: None).add("a")
        assert handlers.on_input(InputEvent("]")) is None
        assert handlers.on_change(_click("abc123")) is False


class TestSettings:
    """Loading and saving the plugin settings."""

    def test_defaults(self):
        """With nothing stored, the defaults apply."""
        plugin = _plugin({})
        assert plugin.settings.convert_checkboxes_outside_tables is False

    def test_stored_values_win(self):
        """Stored values override the defaults."""
        plugin = _plugin({}, {"convertCheckboxesOutsideTables": True})
        assert plugin.settings.convert_checkboxes_outside_tables is True

    def test_unreadable_settings_fall_back(self, caplog):
        """A store that raises SettingsError is logged and ignored."""
        plugin = TableCheckboxesPlugin(StaticWorkspace(), BrokenStore())
        with caplog.at_level(logging.WARNING, logger="table_checkboxes.plugin"):
            plugin.load_settings()
        assert plugin.settings.convert_checkboxes_outside_tables is False
        assert "unreadable settings" in caplog.text

    def test_non_utf8_settings_file_falls_back(self, tmp_path, caplog):
        """A settings file with invalid UTF-8 does not stop the plugin loading."""
        path = tmp_path / "data.json"
        path.write_bytes(b'{"convertCheckboxesOutsideTables": true, "x": "\xff"}')
        plugin = TableCheckboxesPlugin(StaticWorkspace(), JsonSettingsStore(path))
        with caplog.at_level(logging.WARNING, logger="table_checkboxes.plugin"):
            plugin.load()
        assert plugin.settings.convert_checkboxes_outside_tables is False
        assert CONVERT_COMMAND_ID in plugin.commands
        assert "unreadable settings" in caplog.text

    def test_settings_path_is_directory_falls_back(self, tmp_path):
        """A settings path that is a directory falls back to the defaults."""
        plugin = TableCheckboxesPlugin(StaticWorkspace(), JsonSettingsStore(tmp_path))
        plugin.load()
        assert plugin.settings.convert_checkboxes_outside_tables is False

    def test_non_bool_setting_falls_back(self, tmp_path, caplog):
        """A string "false" does not switch the policy on."""
        path = tmp_path / "data.json"
        path.write_text(json.dumps({"convertCheckboxesOutsideTables": "false"}), encoding="utf-8")
        plugin = TableCheckboxesPlugin(StaticWorkspace(), JsonSettingsStore(path))
        with caplog.at_level(logging.WARNING, logger="table_checkboxes.plugin"):
            plugin.load()
        assert plugin.settings.convert_checkboxes_outside_tables is False
        assert "convertCheckboxesOutsideTables" in caplog.text

    def test_toggle_saves(self):
        """The settings toggle updates and persists the policy."""
        store = MemorySettingsStore()
        plugin = TableCheckboxesPlugin(StaticWorkspace(), store)
        plugin.load()
        plugin.set_convert_outside_tables(True)
        assert store.data == {"convertCheckboxesOutsideTables": True}
        assert plugin.settings.convert_checkboxes_outside_tables is True


class TestCommands:
    """The bulk conversion command."""

    def test_registered_on_load(self):
        plugin = _plugin({})
        assert CONVERT_COMMAND_ID in plugin.commands
        assert "HTML checkboxes" in plugin.commands[CONVERT_COMMAND_ID].name

    def test_unknown_command(self):
        """Running an unregistered command raises CommandError."""
        with pytest.raises(CommandError):
            _plugin({}).run_command("nope")

    def test_convert_respects_settings(self):
        """Lines outside tables convert only once the setting is on."""
        editor = TextEditor("| a | - [ ] |\n- [ ] outside")
        plugin = _plugin({MAIN_WINDOW: View(editor=editor)})
        assert plugin.run_command(CONVERT_COMMAND_ID).count == 1
        assert editor.get_line(1) == "- [ ] outside"

        plugin.set_convert_outside_tables(True)
        assert plugin.run_command(CONVERT_COMMAND_ID).count == 1
        assert editor.get_line(1).startswith("<input")

    def test_convert_without_editor(self):
        """A window without an editor is a no-op."""
        plugin = _plugin({MAIN_WINDOW: View(file=MemoryFile())})
        assert plugin.run_command(CONVERT_COMMAND_ID) is None

    def test_unload_clears(self):
        """Unloading drops commands and window handlers."""
        plugin = _plugin({})
        plugin.unload()
        assert plugin.commands == {}
        assert len(plugin.windows) == 0


class TestDispatch:
    """Routing host events to the right window."""

    def test_input_converts_in_active_window(self):
        """Typing ] in a table row converts the checkbox."""
        editor = TextEditor("| a | - [ ] |", cursor=Position(0, 10))
        plugin = _plugin({MAIN_WINDOW: View(editor=editor)})
        assert plugin.dispatch_input(MAIN_WINDOW, InputEvent("]")) is not None
        assert editor.get_line(0).startswith("| a | <input")

    def test_change_writes_file(self):
        """Clicking a checkbox writes the new state to the file."""
        file = MemoryFile(f"| {render_checkbox('abc123')} |")
        plugin = _plugin({MAIN_WINDOW: View(editor=TextEditor(), file=file)})
        assert plugin.dispatch_change(MAIN_WINDOW, _click("abc123"))
        assert file.text == f"| {render_checkbox('abc123', checked=True)} |"

    def test_unknown_window_ignored(self):
        plugin = _plugin({})
        assert plugin.dispatch_input("other", InputEvent("]")) is None
        assert plugin.dispatch_change("other", _click("abc123")) is False

    def test_windows_are_independent(self):
        """An event in one window never edits another window's document."""
        main = TextEditor("| - [ ] |", cursor=Position(0, 6))
        popout = TextEditor("| - [ ] |", cursor=Position(0, 6))
        plugin = _plugin({MAIN_WINDOW: View(editor=main), "popout": View(editor=popout)})
        plugin.open_window("popout")

        plugin.dispatch_input("popout", InputEvent("]"))
        assert main.get_value() == "| - [ ] |"
        assert popout.get_value().startswith("| <input")

        plugin.close_window("popout")
        assert plugin.dispatch_input("popout", InputEvent("]")) is None

    def test_open_window_twice_is_harmless(self):
        """Opening an already open window keeps a single set of handlers."""
        plugin = _plugin({})
        plugin.open_window(MAIN_WINDOW)
        assert len(plugin.windows) == 1
