"""Registry of applet factories, keyed by factory class name."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

log = logging.getLogger("dde.shell")

CreateAppletFunction = Callable[[Any], Any]

_applet_factories: dict[str, CreateAppletFunction] = {}
_plugin_factories: dict[str, "AppletFactory"] = {}


class AppletFactory:
    """Creates applets through a function registered under the factory's class name."""

    def __init__(self, parent: Any = None) -> None:
        self.parent = parent

    @property
    def key(self) -> str:
        return type(self).__name__

    def register_instance(self, func: CreateAppletFunction) -> None:
        """Register ``func`` for this factory class; the first registration wins."""
        key = self.key
        if key in _applet_factories:
            log.warning("The applet factory has registed %s", key)
            return
        _applet_factories[key] = func
        log.debug("Registed the applet factory %s", key)

    def create(self, parent: Any = None) -> Any:
        """Create an applet, or return None when nothing is registered."""
        func = _applet_factories.get(self.key)
        if func is None:
            return None
        return func(parent)


def applet_class(plugin_id: str):
    """Class decorator that makes an applet class loadable under ``plugin_id``."""

    def decorate(cls):
        factory_type = type(
            f"{cls.__name__}AppletFactory",
            (AppletFactory,),
            {"__module__": cls.__module__},
        )
        factory = factory_type()
        factory.register_instance(lambda parent: cls(parent))
        _plugin_factories[plugin_id] = factory
        return cls

    return decorate


def factory_for(plugin_id: str) -> Optional[AppletFactory]:
    """Return the factory provided for ``plugin_id``, if any."""
    return _plugin_factories.get(plugin_id)