# dshell

`dshell` is a small framework for building a desktop shell out of plugins.
A shell is made of *applets*; an applet that holds other applets is a
*containment*, and a containment whose view is a top-level window is a
*panel*. The package also has dock settings, dock application items, a
"show desktop" applet and an on-screen display panel.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Plugin packages

Every plugin lives in its own directory holding a `metadata.json` file:

```json
{
    "Plugin": {
        "Id": "org.example.ds.panel",
        "Url": "main.qml",
        "ContainmentType": "Panel"
    }
}
```

- `Id` names the plugin; metadata without it is not valid.
- `Parent` makes the plugin a child of another plugin. Plugins without a
  known parent are *root* plugins and are started by default.
- `ContainmentType` makes a plugin that has no registered factory load as a
  `Containment` instead of a plain `Applet`.
- `Url` is the view file, resolved against the plugin's directory.

Package directories are searched recursively. By default they are the
`DDE_SHELL_PACKAGE_PATH` environment variable, a `packages` directory in the
directory above the running program's, and `dde-shell` under
`$XDG_DATA_HOME` and each entry of `$XDG_DATA_DIRS` (see
`dshell.loader.builtin_package_paths()`). The first plugin found for an id
wins; `PluginLoader.add_package_dir` puts a directory in front of the others
and rescans.

## The command

```
dshell list
```

prints every root plugin with its children indented four spaces per level
beneath it.

```
dshell
```

loads and initialises every root plugin, then exits. Options:

- `-p PANEL` start only the named plugin; may be given more than once.
- `-t`, `--test` start the example plugin `org.deepin.ds.example`.
- `-d APPLET` disable a plugin id; may be given more than once.
- `--version` print the version.

## Using the library

```python
from dshell.loader import PluginLoader

loader = PluginLoader.instance()
loader.add_package_dir("/path/to/my/packages")

for plugin in loader.root_plugins():
    print(plugin.plugin_id, [c.plugin_id for c in loader.children_plugin(plugin.plugin_id)])

applet = loader.load_applet("org.example.ds.panel")
applet.load()
applet.init()
```

`PluginLoader.plugins()` returns all plugins ordered by id,
`parent_plugin(plugin_id)` returns a plugin's parent (invalid metadata when
there is none), and `set_disabled_applets(ids)` hides plugins from the loader.

Reading a single metadata file:

```python
from dshell.metadata import PluginMetaData

meta = PluginMetaData.from_json_file("/path/to/plugin/metadata.json")
if meta.is_valid():
    print(meta.value("Parent", None))
```

### Writing an applet

Register an applet class for a plugin id with `dshell.factory.applet_class`;
`load_applet` then creates it through the `AppletFactory` returned by
`factory_for`:

```python
from dshell.applet import Applet
from dshell.factory import applet_class


@applet_class("org.example.ds.clock")
class ClockApplet(Applet):
    def init(self):
        super().init()
```

Applets announce changes through `dshell.applet.Signal` objects: `connect`
a callable, and every `emit` calls it with the emitted arguments.

### Views

`dshell.item.ViewEngine` resolves an applet's `Url` and creates its root
object through a component loader, a callable taking the view path and the
applet. `AppletItem.item_for_applet` creates and caches the item hosting an
applet, and `AppletItem.attached_applet` finds the applet an item or window
belongs to. A `dshell.containment.Panel` takes a `component_loader`; when it
returns an object that is not an `AppletItem`, that object becomes the
panel's `window`.

### Dock and OSD

- `dshell.dock.settings.DockSettings` gives typed access to the dock's
  `position`, `hide_mode`, `display_mode`, `window_size_fashion` and
  `window_size_efficient` over a `DockConfig` backend, and emits a signal
  when the backend reports a change. The default backend is a
  `MemoryDockConfig`; `update_backend` switches to another valid backend.
- `dshell.dock.appitem.AppItem` tracks an application's windows and takes
  its icon from the current active window before the desktop icon.
  `escape_to_object_path` and `unescape_from_object_path` convert
  application ids to and from object path elements.
- `dshell.dock.showdesktop.ShowDesktop.toggle_show_desktop` starts
  `/usr/lib/deepin-daemon/desktop-toggle` detached and returns whether it
  started.
- `dshell.osd.panel.OsdPanel.show_text` shows an OSD of the given type and
  hides it again after one second (two seconds for `SwitchWM3D`).

## What the package does not do

- It does not render views. The default component loader only checks that
  the view file exists and creates an `AppletItem`; drawing windows needs a
  component loader of your own.
- It does not load native plugin libraries: `add_plugin_dir` only records
  the directory, and applets come from classes registered in Python.
- `dshell` runs no event loop and shows nothing: it initialises the applets
  and returns.
- It exposes no message-bus services for the dock or the OSD, does not
  monitor windows for a task manager, and keeps dock settings only in
  memory unless you supply a persistent `DockConfig`.