"""Exception classes for table_checkboxes.

Detection and conversion never raise for inputs they do not apply to; they
return None or an empty result. These exceptions cover host-layer misuse:
bad spans, unreadable settings, window and command registration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from table_checkboxes.location import Span


class CheckboxError(Exception):
    """Base exception for all table_checkboxes errors.

    Subclass this for specific error categories.
    """

    pass


class SpanError(CheckboxError):
    """A span does not address valid text in a buffer.

    Raised by editor implementations when asked to replace a range whose
    positions fall outside the current document.
    """

    def __init__(self, message: str, span: Span | None = None) -> None:
        """Initialize span error.

        Args:
            message: Error description
            span: The offending span (optional)
        """
        self.span = span
        location = f" ({span})" if span is not None else ""
        super().__init__(f"{message}{location}")


class SettingsError(CheckboxError):
    """Persisted settings could not be read."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.path = path
        prefix = f"{path}: " if path else ""
        super().__init__(f"{prefix}{message}")


class WindowError(CheckboxError):
    """Error in window handler registration."""

    def __init__(self, window_id: object, message: str) -> None:
        self.window_id = window_id
        super().__init__(f"Window {window_id!r}: {message}")


class CommandError(CheckboxError):
    """Unknown or failing command.

    Raised when a command id is not registered with the plugin.
    """

    def __init__(self, command_id: str, message: str) -> None:
        self.command_id = command_id
        super().__init__(f"Command '{command_id}': {message}")
