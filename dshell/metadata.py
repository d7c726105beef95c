"""Plugin metadata read from ``metadata.json`` files."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any

log = logging.getLogger("dde.shell")

_ROOT_KEY = "Plugin"


def _to_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return ""


@dataclass(eq=False)
class PluginMetaData:
    """Description of one plugin: its id, directory and raw JSON data."""

    plugin_id: str = ""
    plugin_dir: str = ""
    metadata: dict = field(default_factory=dict)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PluginMetaData):
            return NotImplemented
        return self.plugin_id == other.plugin_id

    def __hash__(self) -> int:
        return hash(self.plugin_id)

    @property
    def _root(self) -> dict:
        root = self.metadata.get(_ROOT_KEY)
        return root if isinstance(root, dict) else {}

    def is_valid(self) -> bool:
        """Return True when the metadata carries a plugin id."""
        return bool(self.plugin_id)

    def value(self, key: str, default: Any = None) -> Any:
        """Return ``key`` from the ``Plugin`` section, or ``default``."""
        if not self.is_valid():
            return default
        root = self._root
        if key not in root:
            return default
        return root[key]

    @classmethod
    def from_json_file(cls, path: str | os.PathLike) -> "PluginMetaData":
        """Read metadata from a JSON file; an unreadable file gives invalid metadata."""
        path = os.fspath(path)
        try:
            with open(path, "rb") as handle:
                raw = handle.read()
        except OSError:
            log.warning("Couldn't open %s", path)
            return cls()

        try:
            document = json.loads(raw)
        except ValueError as error:
            log.warning("error parsing %s %s", path, error)
            document = {}
        if not isinstance(document, dict):
            document = {}

        result = cls(
            metadata=document,
            plugin_dir=os.path.dirname(os.path.abspath(path)),
        )
        root = result._root
        if "Id" in root:
            result.plugin_id = _to_string(root["Id"])
        return result