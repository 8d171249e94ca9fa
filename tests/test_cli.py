"""Tests for the table-checkboxes command line."""

import pytest

from table_checkboxes.cli import build_parser, main
from table_checkboxes.render import find_rendered_checkboxes, render_checkbox

PAGE = "| Task | Done |\n|---|---|\n| Ship | - [ ] |\n- [ ] outside\n"


@pytest.fixture
def notes(tmp_path):
    path = tmp_path / "notes.md"
    path.write_text(PAGE, encoding="utf-8")
    return path


class TestConvert:
    """The convert subcommand."""

    def test_converts_in_place(self, notes, capsys):
        """Only the table row converts by default."""
        assert main(["convert", str(notes)]) == 0
        text = notes.read_text(encoding="utf-8")
        assert len(find_rendered_checkboxes(text)) == 1
        assert "- [ ] outside" in text
        assert "Converted 1 checkbox(es)" in capsys.readouterr().out

    def test_outside_tables(self, notes):
        """--outside-tables converts list items too."""
        assert main(["convert", str(notes), "--outside-tables"]) == 0
        assert len(find_rendered_checkboxes(notes.read_text(encoding="utf-8"))) == 2

    def test_dry_run(self, notes, capsys):
        """--dry-run prints the result and leaves the file alone."""
        assert main(["convert", str(notes), "--dry-run"]) == 0
        assert notes.read_text(encoding="utf-8") == PAGE
        assert "<input" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        """A missing file exits with status 2."""
        assert main(["convert", str(tmp_path / "missing.md")]) == 2
        assert "table-checkboxes:" in capsys.readouterr().err

    def test_non_utf8_file(self, tmp_path, capsys):
        """A file that is not UTF-8 exits with status 2 and is not rewritten."""
        path = tmp_path / "notes.md"
        raw = b"| \xff | - [ ] |\n"
        path.write_bytes(raw)
        assert main(["convert", str(path)]) == 2
        assert "table-checkboxes:" in capsys.readouterr().err
        assert path.read_bytes() == raw


class TestToggle:
    """The toggle subcommand."""

    def test_toggle(self, tmp_path):
        """--checked and --unchecked rewrite the checkbox state."""
        path = tmp_path / "notes.md"
        path.write_text(f"| {render_checkbox('abc123')} |", encoding="utf-8")
        assert main(["toggle", str(path), "abc123", "--checked"]) == 0
        assert path.read_text(encoding="utf-8") == f"| {render_checkbox('abc123', checked=True)} |"
        assert main(["toggle", str(path), "abc123", "--unchecked"]) == 0
        assert path.read_text(encoding="utf-8") == f"| {render_checkbox('abc123')} |"

    def test_unknown_id(self, notes, capsys):
        """An id that is not in the file exits with status 1."""
        assert main(["toggle", str(notes), "zzz999", "--checked"]) == 1
        assert "zzz999" in capsys.readouterr().err

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "notes.md"
        path.write_bytes(b"\xff" + render_checkbox("abc123").encode())
        assert main(["toggle", str(path), "abc123", "--checked"]) == 2

    def test_state_required(self):
        """One of --checked or --unchecked must be given."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["toggle", "notes.md", "abc123"])


class TestList:
    """The list subcommand."""

    def test_list(self, tmp_path, capsys):
        """Each rendered checkbox prints as id and state."""
        path = tmp_path / "notes.md"
        path.write_text(
            f"{render_checkbox('abc123')}\n{render_checkbox('def456', checked=True)}",
            encoding="utf-8",
        )
        assert main(["list", str(path)]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "abc123\tunchecked",
            "def456\tchecked",
        ]
