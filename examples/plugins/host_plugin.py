"""Drive the plugin the way a host editor would."""

from table_checkboxes import (
    ChangeEvent,
    Element,
    InputEvent,
    MemoryFile,
    MemorySettingsStore,
    StaticWorkspace,
    TableCheckboxesPlugin,
    TextEditor,
    View,
)
from table_checkboxes.location import Position

editor = TextEditor("| Ship | - [ ] |", cursor=Position(0, 13))
file = MemoryFile()
workspace = StaticWorkspace({"main": View(editor=editor, file=file)})

plugin = TableCheckboxesPlugin(workspace, MemorySettingsStore())
plugin.load()

# User types "]" to finish the checkbox
edit = plugin.dispatch_input("main", InputEvent("]"))
print("After typing:", editor.get_value())

# Host autosaves the buffer, then the user clicks the checkbox
file.write(editor.get_value())
checkbox_id = edit.text.split('id="')[1].rstrip('">')
click = Element(tag="input", attributes={"type": "checkbox", "id": checkbox_id}, checked=True)
plugin.dispatch_change("main", ChangeEvent(click))
print("On disk:", file.read())
