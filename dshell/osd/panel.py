"""The on-screen display panel that shows a message for a short time."""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional

from ..applet import Signal
from ..containment import Panel
from ..item import ComponentLoader
from ..loader import PluginLoader

DEFAULT_INTERVAL_MS = 2000
SHORT_INTERVAL_MS = 1000
LONG_TEXT = "SwitchWM3D"


class _SingleShotTimer:
    """Calls a function once after an interval; restarting cancels the pending call."""

    def __init__(self, interval_ms: int, callback: Callable[[], None]) -> None:
        self.interval_ms = interval_ms
        self._callback = callback
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()

    @property
    def active(self) -> bool:
        with self._lock:
            return self._timer is not None

    def start(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            timer = threading.Timer(self.interval_ms / 1000.0, self._fire)
            timer.daemon = True
            self._timer = timer
            timer.start()

    def stop(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _fire(self) -> None:
        with self._lock:
            if self._timer is not threading.current_thread():
                return
            self._timer = None
        self._callback()


class OsdPanel(Panel):
    """A panel that shows an OSD of a given type and hides it after a timeout."""

    def __init__(
        self,
        parent: Any = None,
        loader: Optional[PluginLoader] = None,
        component_loader: Optional[ComponentLoader] = None,
    ) -> None:
        super().__init__(parent, loader, component_loader)
        self._visible = False
        self._osd_type = ""
        self._timer = _SingleShotTimer(DEFAULT_INTERVAL_MS, self.hide_osd)
        self.visible_changed = Signal()
        self.osd_type_changed = Signal()

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def osd_type(self) -> str:
        return self._osd_type

    @property
    def interval_ms(self) -> int:
        return self._timer.interval_ms

    @property
    def timer_active(self) -> bool:
        return self._timer.active

    def load(self) -> None:
        super().load()

    def init(self) -> None:
        """Reset the hide timer to its default interval and create the panel view."""
        self._timer.stop()
        self._timer.interval_ms = DEFAULT_INTERVAL_MS
        super().init()

    def show_text(self, text: str) -> None:
        """Show the OSD of type ``text``, restarting the hide timer."""
        self._timer.interval_ms = DEFAULT_INTERVAL_MS if text == LONG_TEXT else SHORT_INTERVAL_MS
        self._set_osd_type(text)
        self._show_osd()

    def hide_osd(self) -> None:
        """Stop the hide timer and hide the OSD."""
        self._timer.stop()
        self._set_visible(False)

    def _show_osd(self) -> None:
        self._timer.stop()
        self._timer.start()
        self._set_visible(True)

    def _set_visible(self, visible: bool) -> None:
        if visible == self._visible:
            return
        self._visible = visible
        self.visible_changed.emit()

    def _set_osd_type(self, osd_type: str) -> None:
        self._osd_type = osd_type
        self.osd_type_changed.emit(osd_type)