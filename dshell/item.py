"""View creation for applets and the items that host them."""

from __future__ import annotations

import logging
import os
import weakref
from typing import Any, Callable, Optional

from .applet import Applet

log = logging.getLogger("dde.shell")

WINDOW_APPLET_ATTR = "ds_window_applet"

ComponentLoader = Callable[[str, Any], Any]


class ComponentError(Exception):
    """A view component could not be loaded."""


def _load_component(url: str, context: Any) -> Any:
    if not os.path.isfile(url):
        raise ComponentError(f"{url}: No such file or directory")
    return AppletItem()


class ViewEngine:
    """Creates the root view object of an applet from its ``Url`` metadata."""

    def __init__(
        self,
        applet: Optional[Applet] = None,
        parent: Any = None,
        loader: Optional[ComponentLoader] = None,
    ) -> None:
        self.applet = applet
        self.parent = parent
        self._loader = loader or _load_component
        self.context: Any = None
        self._root_object: Any = None
        self._ready = False
        self.completed = False

    @property
    def root_object(self) -> Any:
        return self._root_object

    def applet_url(self) -> str:
        """Return the absolute path of the applet's view, or an empty string."""
        if self.applet is None:
            return ""
        url = self.applet.plugin_metadata.value("Url")
        if not url:
            return ""
        if not isinstance(url, str):
            url = str(url)
        return os.path.abspath(os.path.join(self.applet.plugin_metadata.plugin_dir, url))

    def begin_create(self) -> Any:
        """Load the view component and create its root object, or return None."""
        url = self.applet_url()
        if not url:
            return None
        try:
            obj = self._loader(url, self.applet)
        except ComponentError as error:
            log.warning("Loading url failed %s", error)
            return None
        self.context = self.applet
        self._root_object = obj
        self._ready = True
        return obj

    def complete_create(self) -> None:
        """Finish creation of the root object started by ``begin_create``."""
        if not self._ready or self.completed:
            return
        self.completed = True
        hook = getattr(self._root_object, "component_complete", None)
        if callable(hook):
            hook()


_applet_items: "weakref.WeakKeyDictionary[Applet, AppletItem]" = weakref.WeakKeyDictionary()


class AppletItem:
    """A view item that hosts one applet."""

    def __init__(self, parent: Any = None) -> None:
        self.parent_item = parent
        self.window: Any = None
        self._applet: Optional[Applet] = None
        self._engine: Optional[ViewEngine] = None

    @property
    def applet(self) -> Optional[Applet]:
        return self._applet

    @property
    def engine(self) -> Optional[ViewEngine]:
        return self._engine

    @classmethod
    def item_for_applet(cls, applet: Applet) -> Optional["AppletItem"]:
        """Return the item hosting ``applet``, creating its view on first use."""
        existing = _applet_items.get(applet)
        if existing is not None:
            return existing

        engine = ViewEngine(applet, applet)
        root = engine.begin_create()
        if root is None:
            return None
        if not isinstance(root, AppletItem):
            return None

        root._applet = applet
        root._engine = engine
        _applet_items[applet] = root

        engine.complete_create()
        applet.set_root_object(root)
        return root

    @classmethod
    def attached_applet(cls, obj: Any) -> Optional[Applet]:
        """Find the applet an object belongs to, via its items or its window."""
        is_item = hasattr(obj, "parent_item")
        item = obj if is_item else None
        while item is not None:
            if isinstance(item, AppletItem):
                return item.applet
            item = getattr(item, "parent_item", None)

        window = getattr(obj, "window", None) if is_item else obj
        if window is None:
            return None
        return getattr(window, WINDOW_APPLET_ATTR, None)