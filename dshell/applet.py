"""The applet: a single plugin instance."""

from __future__ import annotations

from typing import Any, Callable

from .metadata import PluginMetaData


class Signal:
    """A minimal signal: connected callables are called on emit."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> bool:
        """Remove one connection of ``slot``; return whether it was connected."""
        try:
            self._slots.remove(slot)
        except ValueError:
            return False
        return True

    def emit(self, *args: Any) -> None:
        for slot in list(self._slots):
            slot(*args)


class Applet:
    """A plugin instance with its metadata and the root object of its view."""

    def __init__(self, parent: Any = None) -> None:
        self.parent = parent
        self.plugin_metadata = PluginMetaData()
        self._root_object: Any = None
        self.root_object_changed = Signal()
        self.loaded = False
        self.initialized = False

    @property
    def plugin_id(self) -> str:
        return self.plugin_metadata.plugin_id

    @property
    def root_object(self) -> Any:
        return self._root_object

    def set_root_object(self, root: Any) -> None:
        """Set the view root object, notifying only on change."""
        if self._root_object is root:
            return
        self._root_object = root
        self.root_object_changed.emit()

    def init(self) -> None:
        """Initialise the applet after its view exists and mark it initialised."""
        self.initialized = True

    def load(self) -> None:
        """Load the applet and mark it loaded."""
        self.loaded = True