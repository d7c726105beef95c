"""Dock task items: the windows they group and the application they stand for."""

from __future__ import annotations

import abc
import enum
import re
from typing import Any, Optional

from ..applet import Signal

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")
_HEX_PAIR = re.compile(r"[0-9a-fA-F]{2}")


def _latin1_code(char: str) -> int:
    code = ord(char)
    return code if code < 256 else 0


def escape_to_object_path(text: str) -> str:
    """Escape an application id into an object path element.

    Every character outside ``[a-zA-Z0-9]`` is replaced by ``_`` followed by
    its Latin-1 code in lower-case hexadecimal; an empty id becomes ``_``.
    """
    if not text:
        return "_"
    result = text
    for match in _NON_ALNUM.finditer(text):
        char = match.group(0)
        result = result.replace(char, f"_{_latin1_code(char):x}")
    return result


def unescape_from_object_path(text: str) -> str:
    """Turn ``_xx`` hexadecimal escapes of an object path element back into characters."""
    result = text
    i = 0
    while i < len(text):
        if text[i] == "_" and i + 2 < len(text):
            hex_str = text[i + 1:i + 3]
            code = int(hex_str, 16) if _HEX_PAIR.fullmatch(hex_str) else 0
            result = result.replace(f"_{hex_str}", chr(code))
            i += 2
        i += 1
    return result


class AbstractWindow(abc.ABC):
    """A top-level window as seen by the task manager."""

    def __init__(self, parent: Any = None) -> None:
        self.parent = parent
        self.pid_changed = Signal()
        self.icon_changed = Signal()
        self.title_changed = Signal()
        self.is_active_changed = Signal()
        self.should_skip_changed = Signal()

    @property
    @abc.abstractmethod
    def pid(self) -> int:
        """Process id of the window's client."""

    @property
    @abc.abstractmethod
    def icon(self) -> str:
        """Icon of the window, or an empty string."""

    @property
    @abc.abstractmethod
    def title(self) -> str:
        """Title of the window."""

    @property
    @abc.abstractmethod
    def is_active(self) -> bool:
        """Whether the window has focus."""

    @property
    @abc.abstractmethod
    def should_skip(self) -> bool:
        """Whether the window should not appear on the dock."""

    @abc.abstractmethod
    def is_demanding_attention(self) -> bool:
        """Whether the window asks for the user's attention."""

    @abc.abstractmethod
    def close(self) -> None:
        """Ask the window to close."""

    @abc.abstractmethod
    def activate(self) -> None:
        """Raise and focus the window."""

    @abc.abstractmethod
    def minimize(self) -> None:
        """Minimize the window."""

    @abc.abstractmethod
    def is_minimized(self) -> bool:
        """Whether the window is minimized."""

    @abc.abstractmethod
    def created_time(self) -> int:
        """Creation time of the window."""

    @abc.abstractmethod
    def window_type(self) -> str:
        """Kind of the window."""

    @abc.abstractmethod
    def display_name(self) -> str:
        """Name to show for the window."""

    @abc.abstractmethod
    def allow_close(self) -> bool:
        """Whether the window may be closed."""

    @abc.abstractmethod
    def update(self) -> None:
        """Refresh the window's state."""

    @abc.abstractmethod
    def kill_client(self) -> None:
        """Kill the window's client."""


class ItemStyle(enum.IntEnum):
    WINDOW_MERGED = 0
    WINDOW_SPLIT = 1


class AppItem:
    """A dock item for one application and the windows it owns."""

    def __init__(
        self,
        app_id: str,
        parent: Any = None,
        *,
        name: str = "",
        generic_name: str = "",
        desktop_icon: str = "",
    ) -> None:
        self.parent = parent
        self._id = app_id
        self.name = name
        self.generic_name = generic_name
        self._desktop_icon = desktop_icon
        self._active = False
        self._docked = False
        self._item_style = ItemStyle.WINDOW_MERGED
        self._windows: list[AbstractWindow] = []
        self._current_active_window: Optional[AbstractWindow] = None

        self.name_changed = Signal()
        self.icon_changed = Signal()
        self.menus_changed = Signal()
        self.generic_name_changed = Signal()
        self.active_changed = Signal()
        self.docked_changed = Signal()
        self.item_style_changed = Signal()
        self.current_active_window_changed = Signal()

    @property
    def id(self) -> str:
        return self._id

    @property
    def windows(self) -> list[AbstractWindow]:
        return list(self._windows)

    @property
    def current_active_window(self) -> Optional[AbstractWindow]:
        return self._current_active_window

    def desktop_icon(self) -> str:
        """Return the icon defined by the application's desktop entry."""
        return self._desktop_icon

    @property
    def icon(self) -> str:
        """The active window's icon, falling back to the desktop entry's icon."""
        icon = ""
        if self.has_window() and self._current_active_window is not None:
            icon = self._current_active_window.icon
        return icon or self.desktop_icon()

    @property
    def active(self) -> bool:
        return self._active

    @active.setter
    def active(self, active: bool) -> None:
        if active != self._active:
            self._active = active
            self.active_changed.emit()

    @property
    def docked(self) -> bool:
        return self._docked

    @docked.setter
    def docked(self, docked: bool) -> None:
        if docked != self._docked:
            self._docked = docked
            self.docked_changed.emit()

    @property
    def item_style(self) -> ItemStyle:
        return self._item_style

    @item_style.setter
    def item_style(self, style: ItemStyle) -> None:
        if style != self._item_style:
            self._item_style = style
            self.item_style_changed.emit()

    def has_window(self) -> bool:
        """Return whether the application has any window."""
        return len(self._windows) > 0

    def append_window(self, window: AbstractWindow) -> None:
        """Add ``window`` and make it the current active window."""
        self._windows.append(window)
        self.update_current_active_window(window)

    def update_current_active_window(self, window: AbstractWindow) -> None:
        """Make ``window`` the one whose icon the item shows."""
        if self._current_active_window is not None:
            self._current_active_window.icon_changed.disconnect(self._on_window_icon_changed)
        self._current_active_window = window
        window.icon_changed.connect(self._on_window_icon_changed)
        self.current_active_window_changed.emit()

    def _on_window_icon_changed(self, *args: Any) -> None:
        self.icon_changed.emit()