import json

import pytest

from dshell.applet import Applet
from dshell.containment import Containment
from dshell.factory import applet_class
from dshell.loader import PluginLoader, builtin_package_paths


@applet_class("test.loader.probe")
class LoaderProbeApplet(Applet):
    pass


def write_plugin(root, name, plugin):
    directory = root / name
    directory.mkdir(parents=True)
    (directory / "metadata.json").write_text(json.dumps({"Plugin": plugin}))
    return directory


@pytest.fixture
def packages(tmp_path):
    root = tmp_path / "packages"
    write_plugin(root, "root", {"Id": "t.root", "ContainmentType": "Panel"})
    write_plugin(root, "child-b", {"Id": "t.child.b", "Parent": "t.root"})
    write_plugin(root, "child-a", {"Id": "t.child.a", "Parent": "t.root"})
    write_plugin(root, "orphan", {"Id": "t.orphan", "Parent": "t.missing"})
    write_plugin(root, "noid", {"Name": "nothing"})
    broken = root / "broken"
    broken.mkdir()
    (broken / "metadata.json").write_text("{not json")
    return root


def ids(items):
    return [item.plugin_id for item in items]


def test_plugins_found_and_sorted(packages):
    loader = PluginLoader([str(packages)])
    found = ids(loader.plugins())
    assert found == sorted(found)
    assert set(found) == {"t.root", "t.child.a", "t.child.b", "t.orphan"}


def test_children_and_parent(packages):
    loader = PluginLoader([str(packages)])
    assert ids(loader.children_plugin("t.root")) == ["t.child.a", "t.child.b"]
    assert loader.parent_plugin("t.child.a").plugin_id == "t.root"
    assert not loader.parent_plugin("t.root").is_valid()


def test_unknown_plugin(packages):
    loader = PluginLoader([str(packages)])
    assert loader.children_plugin("nope") == []
    assert not loader.parent_plugin("nope").is_valid()
    assert loader.load_applet("nope") is None


def test_root_plugins(packages):
    loader = PluginLoader([str(packages)])
    assert set(ids(loader.root_plugins())) == {"t.root", "t.orphan"}


def test_disabled_applets(packages):
    loader = PluginLoader([str(packages)])
    loader.set_disabled_applets(["t.child.a", "t.child.a", ""])
    assert loader.disabled_applets == ["t.child.a"]
    assert "t.child.a" not in ids(loader.plugins())
    assert ids(loader.children_plugin("t.root")) == ["t.child.b"]


def test_set_disabled_empty_keeps_plugins(packages):
    loader = PluginLoader([str(packages)])
    before = ids(loader.plugins())
    loader.set_disabled_applets([])
    assert loader.disabled_applets == []
    assert ids(loader.plugins()) == before


def test_add_package_dir_takes_precedence(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    write_plugin(first, "p", {"Id": "t.same", "Where": "first"})
    write_plugin(second, "p", {"Id": "t.same", "Where": "second"})
    loader = PluginLoader([str(first)])
    assert loader.plugins()[0].value("Where") == "first"
    loader.add_package_dir(str(second))
    assert loader.package_dirs[0] == str(second)
    assert loader.plugins()[0].value("Where") == "second"


def test_load_applet_kinds(packages, tmp_path):
    write_plugin(tmp_path / "extra", "probe", {"Id": "test.loader.probe"})
    loader = PluginLoader([str(packages), str(tmp_path / "extra")])

    container = loader.load_applet("t.root")
    assert isinstance(container, Containment)
    assert container.plugin_id == "t.root"

    plain = loader.load_applet("t.child.a")
    assert type(plain) is Applet
    assert plain.plugin_metadata == loader.children_plugin("t.root")[0]

    probe = loader.load_applet("test.loader.probe")
    assert isinstance(probe, LoaderProbeApplet)
    assert probe.plugin_id == "test.loader.probe"


def test_add_plugin_dir_once(tmp_path):
    loader = PluginLoader([str(tmp_path)])
    loader.add_plugin_dir("/opt/plugins")
    loader.add_plugin_dir("/opt/plugins")
    assert loader.library_paths.count("/opt/plugins") == 1


def test_builtin_package_paths(monkeypatch, tmp_path):
    monkeypatch.setenv("DDE_SHELL_PACKAGE_PATH", str(tmp_path / "env"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "home"))
    monkeypatch.setenv("XDG_DATA_DIRS", str(tmp_path / "sys"))
    paths = builtin_package_paths()
    assert paths[0] == str(tmp_path / "env")
    assert f"{tmp_path / 'home'}/dde-shell" in paths
    assert paths[-1] == f"{tmp_path / 'sys'}/dde-shell"


def test_instance_is_shared(tmp_path):
    marker = str(tmp_path / "shared-plugins")
    PluginLoader.instance().add_plugin_dir(marker)
    assert marker in PluginLoader.instance().library_paths