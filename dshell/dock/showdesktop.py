"""Dock applet that toggles showing the desktop."""

from __future__ import annotations

import logging
import subprocess
from typing import Any

from ..applet import Applet, Signal

log = logging.getLogger("dde.shell.dock")

DESKTOP_TOGGLE = "/usr/lib/deepin-daemon/desktop-toggle"
DEFAULT_ICON_NAME = "typora"


class ShowDesktop(Applet):
    """An applet whose action hides or shows all windows."""

    def __init__(self, parent: Any = None) -> None:
        super().__init__(parent)
        self._icon_name = DEFAULT_ICON_NAME
        self.icon_name_changed = Signal()

    @property
    def icon_name(self) -> str:
        return self._icon_name

    @icon_name.setter
    def icon_name(self, icon_name: str) -> None:
        if icon_name != self._icon_name:
            self._icon_name = icon_name
            self.icon_name_changed.emit()

    def init(self) -> None:
        super().init()

    def toggle_show_desktop(self) -> bool:
        """Start the desktop toggle program detached; return whether it started."""
        try:
            subprocess.Popen(
                [DESKTOP_TOGGLE],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as error:
            log.warning("Failed to start %s: %s", DESKTOP_TOGGLE, error)
            return False
        return True