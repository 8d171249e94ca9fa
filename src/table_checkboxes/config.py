"""ContextVar-based configuration and settings persistence.

Provides the checkbox conversion policy as an immutable dataclass, scoped to
the current context using Python's ContextVars (PEP 567), plus the stores
that load and save it as a key-value blob.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # Read the active policy
    from table_checkboxes.config import get_checkbox_config
    get_checkbox_config().convert_checkboxes_outside_tables

    # Temporarily convert everywhere
    with checkbox_config_context(CheckboxConfig(convert_checkboxes_outside_tables=True)):
        convert_all_checkboxes(page)

    # Persist settings as JSON
    store = JsonSettingsStore(Path("data.json"))
    config = CheckboxConfig.from_dict(store.load() or {})
    store.save(config.to_dict())

"""

from __future__ import annotations

import json
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Iterator, Protocol

from table_checkboxes.errors import SettingsError

# Persisted key for each field. The settings blob keeps the camelCase keys
# written by earlier releases.
_PERSISTED_KEYS: dict[str, str] = {
    "convert_checkboxes_outside_tables": "convertCheckboxesOutsideTables",
}


@dataclass(frozen=True, slots=True)
class CheckboxConfig:
    """Immutable checkbox conversion policy.

    Attributes:
        convert_checkboxes_outside_tables: Bulk conversion also converts
            tokens on lines that are not table rows. Live conversion while
            typing is always limited to table rows.

    """

    convert_checkboxes_outside_tables: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> CheckboxConfig:
        """Create CheckboxConfig from a settings blob.

        Accepts both the persisted camelCase keys and the field names.
        Unknown keys are silently ignored.

        Raises:
            SettingsError: If a known key holds a value that is not a bool.

        Example:
            >>> CheckboxConfig.from_dict({"convertCheckboxesOutsideTables": True})
            CheckboxConfig(convert_checkboxes_outside_tables=True)

        """
        values: dict[str, Any] = {}
        for field in fields(cls):
            persisted = _PERSISTED_KEYS.get(field.name, field.name)
            key = persisted if persisted in config_dict else field.name
            if key not in config_dict:
                continue
            value = config_dict[key]
            if not isinstance(value, bool):
                raise SettingsError(f"{key} must be true or false, got {value!r}")
            values[field.name] = value
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a settings blob using the persisted key names."""
        return {
            _PERSISTED_KEYS.get(field.name, field.name): getattr(self, field.name)
            for field in fields(self)
        }


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: CheckboxConfig = CheckboxConfig()

_checkbox_config: ContextVar[CheckboxConfig] = ContextVar(
    "checkbox_config",
    default=_DEFAULT_CONFIG,
)


def get_checkbox_config() -> CheckboxConfig:
    """Get the active checkbox configuration for this context."""
    return _checkbox_config.get()


def set_checkbox_config(config: CheckboxConfig) -> None:
    """Set checkbox configuration for the current context."""
    _checkbox_config.set(config)


def reset_checkbox_config() -> None:
    """Reset to the default configuration."""
    _checkbox_config.set(_DEFAULT_CONFIG)


@contextmanager
def checkbox_config_context(config: CheckboxConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with checkbox_config_context(CheckboxConfig(True)):
        ...     get_checkbox_config().convert_checkboxes_outside_tables
        True

    """
    previous = _checkbox_config.get()
    _checkbox_config.set(config)
    try:
        yield
    finally:
        _checkbox_config.set(previous)


class SettingsStore(Protocol):
    """Protocol for persisted key-value settings."""

    def load(self) -> dict[str, Any] | None:
        """Return the stored blob, or None if nothing was saved yet."""
        ...

    def save(self, data: dict[str, Any]) -> None:
        """Replace the stored blob."""
        ...


class JsonSettingsStore:
    """Settings blob stored as a JSON object on disk."""

    __slots__ = ("path",)

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> dict[str, Any] | None:
        """Read the blob.

        Raises:
            SettingsError: If the file cannot be read as UTF-8 or is not a
                JSON object.
        """
        if not self.path.exists():
            return None
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SettingsError(f"cannot read settings: {e}", path=self.path) from e
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SettingsError(f"invalid JSON: {e}", path=self.path) from e
        if not isinstance(data, dict):
            raise SettingsError("settings must be a JSON object", path=self.path)
        return data

    def save(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")


class MemorySettingsStore:
    """In-memory settings blob. Useful for tests and embedding."""

    __slots__ = ("data",)

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self.data = data

    def load(self) -> dict[str, Any] | None:
        return dict(self.data) if self.data is not None else None

    def save(self, data: dict[str, Any]) -> None:
        self.data = dict(data)


__all__ = [
    "CheckboxConfig",
    "JsonSettingsStore",
    "MemorySettingsStore",
    "SettingsStore",
    "checkbox_config_context",
    "get_checkbox_config",
    "reset_checkbox_config",
    "set_checkbox_config",
]
