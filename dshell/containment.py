"""Applets that hold other applets, and panels that show them in a window."""

from __future__ import annotations

import os
from typing import Any, ClassVar, Optional

from .applet import Applet, Signal
from .item import WINDOW_APPLET_ATTR, AppletItem, ComponentLoader, ViewEngine
from .loader import PluginLoader


class Containment(Applet):
    """An applet that creates and hosts its child applets."""

    def __init__(self, parent: Any = None, loader: Optional[PluginLoader] = None) -> None:
        super().__init__(parent)
        self._loader = loader
        self._applets: list[Applet] = []
        self._applet_items: list[AppletItem] = []
        self.applet_items_changed = Signal()

    @property
    def loader(self) -> PluginLoader:
        return self._loader if self._loader is not None else PluginLoader.instance()

    @property
    def applets(self) -> list[Applet]:
        return list(self._applets)

    @property
    def applet_items(self) -> list[AppletItem]:
        return list(self._applet_items)

    def create_applet(self, plugin_id: str) -> Optional[Applet]:
        """Load the applet for ``plugin_id`` and keep it as a child."""
        applet = self.loader.load_applet(plugin_id)
        if applet is not None:
            self._applets.append(applet)
        return applet

    def load(self) -> None:
        """Create and load every child plugin of this containment."""
        for item in self.loader.children_plugin(self.plugin_id):
            applet = self.create_applet(item.plugin_id)
            if applet is not None:
                applet.load()
        super().load()

    def init(self) -> None:
        """Create the view items of the children and initialise them."""
        for applet in self.applets:
            item = AppletItem.item_for_applet(applet)
            if item is None or item in self._applet_items:
                continue
            self._applet_items.append(item)
            applet.init()
        super().init()
        self.applet_items_changed.emit()


class Panel(Containment):
    """A containment whose view is a top-level window."""

    dci_search_paths: ClassVar[list[str]] = []

    def __init__(
        self,
        parent: Any = None,
        loader: Optional[PluginLoader] = None,
        component_loader: Optional[ComponentLoader] = None,
    ) -> None:
        super().__init__(parent, loader)
        self._component_loader = component_loader

    @property
    def window(self) -> Any:
        return self.root_object

    def init_icon_search_paths(self) -> list[str]:
        """Add the ``icons`` directories of the panel and its children to the search paths."""
        paths = Panel.dci_search_paths
        for applet in [*self._applets, self]:
            plugin_dir = applet.plugin_metadata.plugin_dir
            if not plugin_dir:
                continue
            icons = os.path.join(plugin_dir, "icons")
            if os.path.exists(icons):
                paths.append(os.path.abspath(icons))
        return list(paths)

    def load(self) -> None:
        super().load()

    def init(self) -> None:
        """Create the panel window, then initialise the children."""
        self.init_icon_search_paths()

        engine = ViewEngine(self, self, loader=self._component_loader)
        root = engine.begin_create()
        if root is not None and not isinstance(root, AppletItem):
            self.set_root_object(root)
            setattr(root, WINDOW_APPLET_ATTR, self)

        super().init()
        engine.complete_create()