"""Typed host events.

The host delivers DOM-style events; these dataclasses carry the parts the
converters read. Keeping them as plain values lets the decision logic run
without any host objects.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class InputEvent:
    """A character-input event.

    Attributes:
        data: The inserted text (a single character for a keystroke)

    """

    data: str | None


@dataclass(frozen=True, slots=True)
class Element:
    """The element whose state changed.

    Attributes:
        tag: Lowercase tag name, e.g. ``"input"``
        attributes: Attribute name to value
        checked: Live checked state of the control

    """

    tag: str
    attributes: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    checked: bool = False

    @property
    def id(self) -> str:
        return self.attributes.get("id", "")

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)


@dataclass(frozen=True, slots=True)
class ChangeEvent:
    """A control state-change event."""

    target: Element


__all__ = [
    "ChangeEvent",
    "Element",
    "InputEvent",
]
