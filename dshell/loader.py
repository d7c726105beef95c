"""Discovery of plugin packages and creation of applets from them."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Iterator, Optional

from .applet import Applet
from .factory import factory_for
from .metadata import PluginMetaData

log = logging.getLogger("dde.shell")

METADATA_FILE_NAME = "metadata.json"
PACKAGE_PATH_ENV = "DDE_SHELL_PACKAGE_PATH"
PLUGIN_PATH_ENV = "DDE_SHELL_PLUGIN_PATH"
PLUGIN_INSTALL_DIR = "/usr/lib/dde-shell"


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return ""


def _application_dir() -> str:
    return os.path.dirname(os.path.abspath(sys.argv[0] if sys.argv and sys.argv[0] else "."))


def _building_dir(subdir: str) -> str:
    parent = os.path.dirname(_application_dir())
    candidate = os.path.join(parent, subdir)
    if os.path.isdir(parent) and os.path.exists(candidate):
        return os.path.abspath(candidate)
    return ""


def _generic_data_locations() -> list[str]:
    home = os.environ.get("XDG_DATA_HOME") or os.path.join(
        os.path.expanduser("~"), ".local", "share"
    )
    dirs = os.environ.get("XDG_DATA_DIRS") or "/usr/local/share:/usr/share"
    result = [home]
    for entry in dirs.split(":"):
        if entry and entry not in result:
            result.append(entry)
    return result


def builtin_package_paths() -> list[str]:
    """Return the default directories searched for plugin packages."""
    result: list[str] = []
    env_path = os.environ.get(PACKAGE_PATH_ENV)
    if env_path:
        result.append(env_path)
    package_dir = _building_dir("packages")
    if package_dir:
        result.append(package_dir)
    result.extend(f"{location}/dde-shell" for location in _generic_data_locations())
    log.debug("Builtin package paths %s", result)
    return result


def _builtin_plugin_paths() -> list[str]:
    result: list[str] = []
    env_path = os.environ.get(PLUGIN_PATH_ENV)
    if env_path:
        result.append(env_path)
    plugins_dir = _building_dir("plugins")
    if plugins_dir:
        result.append(plugins_dir)
    result.append(PLUGIN_INSTALL_DIR)
    log.debug("Builtin plugin paths %s", result)
    return result


def _find_metadata_files(root_dir: str) -> Iterator[str]:
    seen: set[str] = set()
    for dirpath, dirnames, filenames in os.walk(root_dir):
        dirnames.sort()
        if METADATA_FILE_NAME not in filenames:
            continue
        directory = os.path.abspath(dirpath)
        if directory in seen:
            continue
        seen.add(directory)
        yield os.path.join(directory, METADATA_FILE_NAME)


class PluginLoader:
    """Finds plugin metadata in package directories and creates applets."""

    _instance: Optional["PluginLoader"] = None

    def __init__(self, package_dirs: Optional[list[str]] = None) -> None:
        self._package_dirs: list[str] = (
            list(package_dirs) if package_dirs is not None else builtin_package_paths()
        )
        self._plugins: dict[str, PluginMetaData] = {}
        self._disabled: list[str] = []
        self.library_paths: list[str] = []
        self._scan()

    @classmethod
    def instance(cls) -> "PluginLoader":
        """Return the process-wide loader, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def package_dirs(self) -> list[str]:
        return list(self._package_dirs)

    @property
    def disabled_applets(self) -> list[str]:
        return list(self._disabled)

    def _scan(self) -> None:
        self._plugins = {}
        for path in _builtin_plugin_paths():
            self.add_plugin_dir(path)

        for root_dir in self._package_dirs:
            for metadata_path in _find_metadata_files(root_dir):
                info = PluginMetaData.from_json_file(metadata_path)
                if not info.is_valid():
                    continue
                if info.plugin_id in self._disabled:
                    log.debug("Don't load disabled applet. %s", info.plugin_id)
                    continue
                if info.plugin_id in self._plugins:
                    continue
                self._plugins[info.plugin_id] = info

    def _metadata(self, plugin_id: str) -> PluginMetaData:
        return self._plugins.get(plugin_id) or PluginMetaData()

    def plugins(self) -> list[PluginMetaData]:
        """Return all known plugins ordered by plugin id."""
        return [self._plugins[key] for key in sorted(self._plugins)]

    def root_plugins(self) -> list[PluginMetaData]:
        """Return the plugins that have no known parent plugin."""
        roots: list[PluginMetaData] = []
        for item in self.plugins():
            if self.parent_plugin(item.plugin_id).is_valid():
                continue
            if item in roots:
                continue
            roots.append(item)
        return roots

    def add_package_dir(self, path: str) -> None:
        """Search ``path`` before all other package directories and rescan."""
        self._package_dirs.insert(0, path)
        self._scan()

    def add_plugin_dir(self, path: str) -> None:
        """Add a directory where plugin libraries are searched, once."""
        if path in self.library_paths:
            return
        self.library_paths.append(path)

    def set_disabled_applets(self, plugin_ids: list[str]) -> None:
        """Add ``plugin_ids`` to the disabled applets and rescan."""
        if not plugin_ids or self._disabled == list(plugin_ids):
            return
        for item in plugin_ids:
            if not item or item in self._disabled:
                continue
            self._disabled.append(item)
        self._scan()

    def load_applet(self, plugin_id: str) -> Optional[Applet]:
        """Create the applet for ``plugin_id``, or return None if it is unknown."""
        from .containment import Containment

        metadata = self._metadata(plugin_id)
        if not metadata.is_valid():
            return None

        applet: Optional[Applet] = None
        factory = factory_for(plugin_id)
        if factory is not None:
            log.debug("Loading applet by factory %s", plugin_id)
            applet = factory.create()
        if applet is None and metadata.value("ContainmentType") is not None:
            applet = Containment()
        if applet is None:
            applet = Applet()
        applet.plugin_metadata = metadata
        return applet

    def children_plugin(self, plugin_id: str) -> list[PluginMetaData]:
        """Return the plugins whose ``Parent`` is ``plugin_id``."""
        target = self._metadata(plugin_id)
        if not target.is_valid():
            return []
        return [
            md for md in self.plugins()
            if _as_text(md.value("Parent")) == target.plugin_id
        ]

    def parent_plugin(self, plugin_id: str) -> PluginMetaData:
        """Return the parent of ``plugin_id``; invalid metadata when there is none."""
        metadata = self._metadata(plugin_id)
        if not metadata.is_valid():
            return PluginMetaData()
        return self._metadata(_as_text(metadata.value("Parent")))