"""Convert checkboxes in a markdown table, then click one."""

from table_checkboxes import convert_all_checkboxes, find_rendered_checkboxes, toggle_checkbox

source = """\
| Task    | Done  |
|---------|-------|
| Write   | - [ ] |
| Review  | -[]   |

- [ ] not in a table, left alone by default
"""

result = convert_all_checkboxes(source)
print(result.text)
print(f"Converted {result.count} checkbox(es): {', '.join(result.ids)}")

page = toggle_checkbox(result.text, result.ids[0], True)
for checkbox in find_rendered_checkboxes(page):
    print(checkbox.id, "checked" if checkbox.checked else "unchecked")
