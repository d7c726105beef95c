"""Command-line entry point that loads and starts the shell's applets."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .loader import PluginLoader
from .metadata import PluginMetaData

log = logging.getLogger("dde.shell")

APPLICATION_NAME = "org.deepin.dde-shell"
EXAMPLE_PLUGIN_ID = "org.deepin.ds.example"
_VERSION = "0.1.0"
_INDENT = 4


def format_plugin_tree(plugin: PluginMetaData, level: int) -> list[str]:
    """Return ``plugin`` and its descendants as indented lines, one per plugin."""
    loader = PluginLoader.instance()
    lines = [" " * (level * _INDENT) + plugin.plugin_id]
    for child in loader.children_plugin(plugin.plugin_id):
        lines.extend(format_plugin_tree(child, level + 1))
    return lines


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dde-shell", description=APPLICATION_NAME)
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument(
        "-p", dest="panel", action="append", metavar="panel",
        help="collections of panel.",
    )
    parser.add_argument("-t", "--test", action="store_true", help="application test.")
    parser.add_argument(
        "-d", dest="disable_applet", action="append", metavar="disable-applet",
        help="disabled applet.",
    )
    parser.add_argument("positional", nargs="*", metavar="list", help="list all applet.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the shell: list plugins, or load and initialise the chosen applets."""
    args = _build_parser().parse_args(argv)
    loader = PluginLoader.instance()

    if args.positional and args.positional[0] == "list":
        for item in loader.root_plugins():
            print("\n".join(format_plugin_tree(item, 0)))
        return 0

    logging.basicConfig(level=logging.INFO)

    if args.test:
        plugin_ids = [EXAMPLE_PLUGIN_ID]
    elif args.panel:
        plugin_ids = list(args.panel)
    else:
        plugin_ids = [item.plugin_id for item in loader.root_plugins()]

    if args.disable_applet:
        loader.set_disabled_applets(args.disable_applet)

    log.info("Loading plugin id %s", plugin_ids)
    applets = []
    for plugin_id in plugin_ids:
        applet = loader.load_applet(plugin_id)
        if applet is None:
            log.warning("Loading plugin failed: %s", plugin_id)
            continue
        applets.append(applet)

    for applet in applets:
        applet.load()
        applet.init()
    return 0