"""Dock constants and the settings store backed by a configuration backend."""

from __future__ import annotations

import enum
import logging
from typing import Any, Optional

from ..applet import Signal

log = logging.getLogger("dde.shell.dock.docksettings")

MIN_DOCK_SIZE = 40
MAX_DOCK_SIZE = 100

KEY_POSITION = "Position"
KEY_HIDE_MODE = "Hide_Mode"
KEY_DISPLAY_MODE = "Display_Mode"
KEY_WINDOW_SIZE_FASHION = "Window_Size_Fashion"
KEY_WINDOW_SIZE_EFFICIENT = "Window_Size_Efficient"


class DisplayMode(enum.IntEnum):
    FASHION = 0
    EFFICIENT = 1


class HideMode(enum.IntEnum):
    KEEP_SHOWING = 0
    KEEP_HIDDEN = 1
    SMART_HIDE = 2


class Position(enum.IntEnum):
    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3


class HideState(enum.IntEnum):
    """Whether the dock should be shown; meaningful only in smart-hide mode."""

    UNKNOWN = 0
    SHOW = 1
    HIDE = 2


class AniAction(enum.IntEnum):
    SHOW = 0
    HIDE = 1


_HIDE_MODE_NAMES = {
    HideMode.KEEP_SHOWING: "keep-showing",
    HideMode.KEEP_HIDDEN: "keep-hidden",
    HideMode.SMART_HIDE: "smart-hide",
}
_DISPLAY_MODE_NAMES = {
    DisplayMode.FASHION: "fashion",
    DisplayMode.EFFICIENT: "efficient",
}
_POSITION_NAMES = {
    Position.TOP: "top",
    Position.RIGHT: "right",
    Position.LEFT: "left",
    Position.BOTTOM: "bottom",
}


def _as_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)


def _as_uint(value: Any) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return 0
    return number if number >= 0 else 0


def _lookup(names: dict, text: str, default):
    for member, name in names.items():
        if name == text:
            return member
    return default


class DockConfig:
    """A configuration backend for the dock; this base is never valid."""

    def __init__(self) -> None:
        self.value_changed = Signal()

    def value(self, key: str) -> Any:
        return None

    def set_value(self, key: str, value: Any) -> None:
        return None

    def is_valid(self) -> bool:
        return False


class MemoryDockConfig(DockConfig):
    """A valid backend that keeps its values in memory."""

    def __init__(self, values: Optional[dict] = None) -> None:
        super().__init__()
        self._values: dict = dict(values or {})

    def value(self, key: str) -> Any:
        return self._values.get(key)

    def set_value(self, key: str, value: Any) -> None:
        """Store ``value``; announce the key when the stored value changes."""
        if key in self._values and self._values[key] == value:
            return
        self._values[key] = value
        self.value_changed.emit(key)

    def is_valid(self) -> bool:
        return True


class DockSettings:
    """Typed access to the dock's settings in a configuration backend."""

    _instance: Optional["DockSettings"] = None

    def __init__(self, backend: Optional[DockConfig] = None) -> None:
        self.hide_mode_changed = Signal()
        self.display_mode_changed = Signal()
        self.position_changed = Signal()
        self.window_size_fashion_changed = Signal()
        self.window_size_efficient_changed = Signal()
        self._backend: DockConfig = backend if backend is not None else MemoryDockConfig()
        self._attach(self._backend)

    @classmethod
    def instance(cls) -> "DockSettings":
        """Return the process-wide settings, creating them on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def backend(self) -> DockConfig:
        return self._backend

    def _valid(self) -> bool:
        return self._backend is not None and self._backend.is_valid()

    def _attach(self, backend: DockConfig) -> None:
        if backend.is_valid():
            backend.value_changed.connect(self._on_value_changed)
        else:
            log.critical("unable to create config for org.deepin.dde.dock")

    def _on_value_changed(self, key: str) -> None:
        if key == KEY_HIDE_MODE:
            self.hide_mode_changed.emit(self.hide_mode)
        elif key == KEY_DISPLAY_MODE:
            self.display_mode_changed.emit(self.display_mode)
        elif key == KEY_POSITION:
            self.position_changed.emit(self.position)
        elif key == KEY_WINDOW_SIZE_FASHION:
            self.window_size_fashion_changed.emit(self.window_size_fashion)
        elif key == KEY_WINDOW_SIZE_EFFICIENT:
            self.window_size_efficient_changed.emit(self.window_size_efficient)

    def _set(self, key: str, value: Any) -> None:
        if self._valid():
            self._backend.set_value(key, value)
        else:
            log.critical("unable to set config for %s", key)

    @property
    def hide_mode(self) -> HideMode:
        if not self._valid():
            log.critical("unable get config for hidemode")
            return HideMode.KEEP_SHOWING
        text = _as_string(self._backend.value(KEY_HIDE_MODE))
        return _lookup(_HIDE_MODE_NAMES, text, HideMode.KEEP_SHOWING)

    @hide_mode.setter
    def hide_mode(self, mode: HideMode) -> None:
        self._set(KEY_HIDE_MODE, _HIDE_MODE_NAMES.get(mode, "keep-showing"))

    @property
    def position(self) -> Position:
        if not self._valid():
            log.critical("unable get config for position")
            return Position.BOTTOM
        text = _as_string(self._backend.value(KEY_POSITION))
        return _lookup(_POSITION_NAMES, text, Position.BOTTOM)

    @position.setter
    def position(self, position: Position) -> None:
        self._set(KEY_POSITION, _POSITION_NAMES.get(position, "bottom"))

    @property
    def display_mode(self) -> DisplayMode:
        if not self._valid():
            log.critical("unable get config for displaymode")
            return DisplayMode.FASHION
        text = _as_string(self._backend.value(KEY_DISPLAY_MODE))
        return _lookup(_DISPLAY_MODE_NAMES, text, DisplayMode.FASHION)

    @display_mode.setter
    def display_mode(self, mode: DisplayMode) -> None:
        self._set(KEY_DISPLAY_MODE, _DISPLAY_MODE_NAMES.get(mode, "fashion"))

    @property
    def window_size_fashion(self) -> int:
        if not self._valid():
            log.critical("unable get dconfig for windowSizeFashion")
            return MIN_DOCK_SIZE
        return _as_uint(self._backend.value(KEY_WINDOW_SIZE_FASHION))

    @window_size_fashion.setter
    def window_size_fashion(self, size: int) -> None:
        self._set(KEY_WINDOW_SIZE_FASHION, size)

    @property
    def window_size_efficient(self) -> int:
        if not self._valid():
            log.critical("unable get dconfig for windowSizeEfficient")
            return MIN_DOCK_SIZE
        return _as_uint(self._backend.value(KEY_WINDOW_SIZE_EFFICIENT))

    @window_size_efficient.setter
    def window_size_efficient(self, size: int) -> None:
        self._set(KEY_WINDOW_SIZE_EFFICIENT, size)

    def update_backend(self, backend: Optional[DockConfig]) -> None:
        """Switch to ``backend`` if it is valid; otherwise keep the current one."""
        if backend is None or not backend.is_valid():
            return
        self._backend.value_changed.disconnect(self._on_value_changed)
        self._backend = backend
        self._attach(backend)